# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Core modules for simgate.

This package contains:
- config: Input loading and validation
- schema: Frozen GateConfig dataclass
- errors: Fatal error types
- client: Queue/retrieve HTTP client
- poller: Polling loop, scoring and verdict
- outputs: Step outputs and failure signalling
"""

from .client import SimulationClient
from .config import load_gate_config, parse_bool, parse_id_list, parse_number
from .errors import (
    ConfigurationError,
    PollTimeoutError,
    ResponseParseError,
    SimGateError,
    StatusQueryError,
    SubmissionError,
)
from .outputs import ActionOutputs
from .poller import Verdict, compute_score, evaluate, format_score, poll_until_terminal
from .schema import GateConfig

__all__ = [
    # Config loading
    "load_gate_config",
    "parse_bool",
    "parse_id_list",
    "parse_number",
    "GateConfig",
    # Client
    "SimulationClient",
    # Polling
    "poll_until_terminal",
    "compute_score",
    "evaluate",
    "format_score",
    "Verdict",
    # Outputs
    "ActionOutputs",
    # Errors
    "SimGateError",
    "ConfigurationError",
    "SubmissionError",
    "StatusQueryError",
    "ResponseParseError",
    "PollTimeoutError",
]
