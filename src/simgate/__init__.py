"""
simgate - CI gate for remote simulation runs.

This package queues a simulation run on an external evaluation service,
optionally waits for it to finish, and fails the pipeline step when the run
does not complete successfully or scores below a threshold.

Key modules:
- contract: Pydantic request/response models and the RunStatus enum
- core.config: Input loading and validation (YAML, INPUT_* environment, CLI)
- core.schema: Frozen GateConfig dataclass
- core.client: HTTP client for the queue/retrieve endpoints
- core.poller: Polling loop, score computation and verdict
- core.outputs: Step outputs and failure signalling
- cli.run: Command-line entrypoint
- logging_utils: Logging configuration

Usage:
    simgate run -f gate.yaml
"""

__version__ = "0.1.0"

from .contract import RunStatus
from .core.client import SimulationClient
from .core.config import load_gate_config
from .core.errors import (
    ConfigurationError,
    PollTimeoutError,
    ResponseParseError,
    SimGateError,
    StatusQueryError,
    SubmissionError,
)
from .core.poller import Verdict, compute_score, evaluate, poll_until_terminal
from .core.schema import GateConfig
from .logging_utils import setup_logging

__all__ = [
    # Version
    "__version__",
    # Logging
    "setup_logging",
    # Config
    "load_gate_config",
    "GateConfig",
    # Client
    "SimulationClient",
    "RunStatus",
    # Polling and evaluation
    "poll_until_terminal",
    "compute_score",
    "evaluate",
    "Verdict",
    # Errors
    "SimGateError",
    "ConfigurationError",
    "SubmissionError",
    "StatusQueryError",
    "ResponseParseError",
    "PollTimeoutError",
]
