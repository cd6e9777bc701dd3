# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Request payload models for the simulation API contract."""

from pydantic import BaseModel, ConfigDict, Field


class QueueSimulationRunPayload(BaseModel):
    """Payload for POST /v1/queue-simulation-run.

    Optional fields are always serialized, as null when unset, so the service
    can tell "not provided" apart from an empty string.
    """

    model_config = ConfigDict(frozen=True)

    simulation_id: str = Field(..., min_length=1, description="Simulation to run")
    prompt_id: str | None = Field(None, description="Prompt override")
    knowledge_base_id: str | None = Field(None, description="Knowledge base override")
    digital_human_ids: list[str] | None = Field(
        None, description="Restrict the run to these digital humans (null = no restriction)"
    )
    phone_number: str | None = Field(None, description="Phone number the agent is reached on")
    sip_uri: str | None = Field(None, description="SIP URI the agent is reached on")
