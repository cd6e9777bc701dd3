# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Frozen dataclass schema for the gate configuration.

Uses marshmallow_dataclass for type-safe configuration with validation.
The config is frozen (immutable) after creation.
"""

from dataclasses import field
from typing import ClassVar, List, Optional, Type

from marshmallow import Schema, ValidationError, validate, validates_schema
from marshmallow_dataclass import dataclass

from simgate.contract import QueueSimulationRunPayload

DEFAULT_API_BASE_URL = "https://api.getbluejay.ai"
DEFAULT_MIN_SCORE = 80.0
DEFAULT_POLL_INTERVAL_SECONDS = 10.0
DEFAULT_TIMEOUT_SECONDS = 1500.0
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0


class GateConfigSchema(Schema):
    """Base schema rejecting empty required inputs."""

    @validates_schema
    def _required_inputs(self, data, **kwargs):
        for key in ("api_key", "simulation_id"):
            if not data.get(key):
                raise ValidationError(f"{key} is required", field_name=key)


@dataclass(frozen=True, base_schema=GateConfigSchema)
class GateConfig:
    """Complete simgate configuration (frozen, immutable).

    This is the configuration type returned by load_gate_config().
    """

    api_key: str = field(repr=False)
    simulation_id: str

    # Queue request overrides
    prompt_id: Optional[str] = None
    knowledge_base_id: Optional[str] = None
    digital_human_ids: Optional[List[str]] = None
    phone_number: Optional[str] = None
    sip_uri: Optional[str] = None

    # Polling and evaluation
    wait_for_results: bool = True
    min_score: float = DEFAULT_MIN_SCORE
    poll_interval_seconds: float = field(
        default=DEFAULT_POLL_INTERVAL_SECONDS, metadata={"validate": validate.Range(min=0)}
    )
    timeout_seconds: float = field(default=DEFAULT_TIMEOUT_SECONDS, metadata={"validate": validate.Range(min=0)})

    # Transport
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout_seconds: float = field(
        default=DEFAULT_REQUEST_TIMEOUT_SECONDS,
        metadata={"validate": validate.Range(min=0, min_inclusive=False)},
    )

    Schema: ClassVar[Type[Schema]] = Schema

    def to_payload(self) -> QueueSimulationRunPayload:
        """Build the queue request body from this config."""
        return QueueSimulationRunPayload(
            simulation_id=self.simulation_id,
            prompt_id=self.prompt_id or None,
            knowledge_base_id=self.knowledge_base_id or None,
            digital_human_ids=self.digital_human_ids or None,
            phone_number=self.phone_number or None,
            sip_uri=self.sip_uri or None,
        )
