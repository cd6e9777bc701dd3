# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Exception types for simgate.

Every error here is fatal for the invocation and is never retried. Status and
threshold failures of a finished run are not exceptions; they are reported
through a Verdict (see simgate.core.poller).
"""


class SimGateError(Exception):
    """Base class for all fatal simgate errors."""


class ConfigurationError(SimGateError):
    """A required input is missing or an input could not be parsed."""


class SubmissionError(SimGateError):
    """The service rejected the queue request or could not be reached."""


class StatusQueryError(SimGateError):
    """The service rejected a status query or could not be reached."""


class ResponseParseError(SimGateError):
    """A response body was not the JSON document the contract describes."""


class PollTimeoutError(SimGateError, TimeoutError):
    """Polling exceeded its wall-clock budget."""
