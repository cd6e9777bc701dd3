# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Step outputs and failure signalling for the CI runner.

Outputs are appended to the file named by $GITHUB_OUTPUT as name=value lines,
or as name<<DELIMITER blocks when the value spans several lines.
Failures are printed as ::error:: workflow commands and turn the exit code to 1.
"""

import logging
import os
import sys
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from simgate.logging_utils import error

logger = logging.getLogger(__name__)


def _escape_command_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _format_output(name: str, value: str) -> str:
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    while delimiter in value:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


@dataclass
class ActionOutputs:
    """Collects step outputs and the failure signal for one invocation.

    Usage:
        outputs = ActionOutputs.from_env()
        outputs.set_output("simulation-run-id", run_id)
        outputs.set_failed("score below threshold")
        sys.exit(outputs.exit_code)
    """

    output_path: Path | None = None
    stream: TextIO = field(default_factory=lambda: sys.stdout)
    values: dict[str, str] = field(default_factory=dict)
    failures: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "ActionOutputs":
        output_file = os.environ.get("GITHUB_OUTPUT")
        return cls(output_path=Path(output_file) if output_file else None)

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    def set_output(self, name: str, value: str) -> None:
        """Record a step output and publish it to the runner.

        Multi-line values use the runner's name<<DELIMITER block syntax.
        """
        self.values[name] = value
        if self.output_path is None:
            logger.info("Output %s=%s", name, value)
            return

        with open(self.output_path, "a", encoding="utf-8") as f:
            f.write(_format_output(name, value))
        logger.debug("Wrote output %s to %s", name, self.output_path)

    def set_failed(self, message: str) -> None:
        """Mark the invocation failed with a human-readable message."""
        self.failures.append(message)
        error(message, logger)
        self.stream.write(f"::error::{_escape_command_data(message)}\n")
        self.stream.flush()
