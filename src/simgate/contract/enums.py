# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Canonical enum definitions for the simulation API contract."""

from enum import Enum


class RunStatus(str, Enum):
    """Simulation run status values reported by the evaluation service.

    Anything the service sends that is not listed here classifies as
    UNRECOGNIZED and is treated as non-terminal.
    """

    QUEUED = "queued"
    RUNNING = "running"
    COMPLETED = "completed"
    SUCCESS = "success"
    FAILED = "failed"
    CANCELLED = "cancelled"
    ERROR = "error"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def classify(cls, raw: str | None) -> "RunStatus":
        """Map a raw status string (any case) to a RunStatus."""
        if not raw:
            return cls.UNRECOGNIZED
        normalized = raw.lower()
        if normalized == cls.UNRECOGNIZED.value:
            return cls.UNRECOGNIZED
        try:
            return cls(normalized)
        except ValueError:
            return cls.UNRECOGNIZED

    @property
    def is_success(self) -> bool:
        return self in _SUCCESS_STATUSES

    @property
    def is_terminal(self) -> bool:
        return self in _SUCCESS_STATUSES or self in _FAILURE_STATUSES


_SUCCESS_STATUSES = frozenset({RunStatus.COMPLETED, RunStatus.SUCCESS})
_FAILURE_STATUSES = frozenset({RunStatus.FAILED, RunStatus.CANCELLED, RunStatus.ERROR})
