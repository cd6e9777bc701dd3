# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Shared API contract for the simulation evaluation service.

This package defines the canonical Pydantic models and enums for the
queue/retrieve endpoints. It has zero internal imports, only depends on pydantic.

Usage (client):
    from simgate.contract import QueueSimulationRunPayload, RetrieveSimulationResponse

Usage (mock server in tests):
    from simgate.contract import QueueSimulationRunPayload, QueueSimulationRunResponse
"""

from simgate.contract.enums import RunStatus
from simgate.contract.requests import QueueSimulationRunPayload
from simgate.contract.responses import (
    QueueSimulationRunResponse,
    RetrieveSimulationResponse,
    SimulationRunDetails,
)

__all__ = [
    "RunStatus",
    "QueueSimulationRunPayload",
    "QueueSimulationRunResponse",
    "RetrieveSimulationResponse",
    "SimulationRunDetails",
]
