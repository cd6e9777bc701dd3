# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Response models for the simulation API contract."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class QueueSimulationRunResponse(BaseModel):
    """Response for POST /v1/queue-simulation-run."""

    model_config = ConfigDict(frozen=True)

    simulation_run_id: str
    status: str
    agent_id: str | None = None


class SimulationRunDetails(BaseModel):
    """One status snapshot of a simulation run."""

    model_config = ConfigDict(frozen=True)

    id: str
    status: str
    summary: str | None = None
    simulation_id: str | None = None
    total_tests: int = 0
    tests_passed: int = 0
    tests_failed: int = 0
    tests_completed: int = 0
    tests_incompleted: int = 0
    created_at: str | None = None

    @field_validator(
        "total_tests",
        "tests_passed",
        "tests_failed",
        "tests_completed",
        "tests_incompleted",
        mode="before",
    )
    @classmethod
    def _null_counter_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class RetrieveSimulationResponse(BaseModel):
    """Response for GET /v1/retrieve-simulation-results/{run_id}."""

    model_config = ConfigDict(frozen=True)

    simulation_run: SimulationRunDetails
    simulation_results: list[Any] = []
    status: str | None = None
