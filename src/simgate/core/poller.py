# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Polling and evaluation of a queued simulation run.

This module provides:
- compute_score(): Pass percentage from run counters
- poll_until_terminal(): Bounded-time status polling loop
- evaluate(): Map the final snapshot to a pass/fail Verdict
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from simgate.contract import RunStatus, SimulationRunDetails
from simgate.logging_utils import waiting

from .errors import PollTimeoutError
from .schema import DEFAULT_MIN_SCORE, DEFAULT_POLL_INTERVAL_SECONDS, DEFAULT_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from .client import SimulationClient

logger = logging.getLogger(__name__)


def compute_score(passed: int, total: int) -> float:
    """Percentage of tests passed; 0 when no tests ran."""
    if total > 0:
        return (passed / total) * 100
    return 0.0


def snapshot_score(snapshot: SimulationRunDetails) -> float:
    return compute_score(snapshot.tests_passed, snapshot.total_tests)


def poll_until_terminal(
    client: "SimulationClient",
    run_id: str,
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> SimulationRunDetails:
    """Poll a run until it reports a terminal status.

    The first query is issued immediately; the interval sleep only follows a
    non-terminal snapshot. The budget is checked before each query, so an
    in-flight call is never interrupted, only the next one is skipped.

    Args:
        client: Client used for status queries
        run_id: Simulation run identifier
        poll_interval_seconds: Sleep between non-terminal snapshots
        timeout_seconds: Wall-clock budget measured from just before the first query
        clock: Monotonic time source
        sleep: Blocking sleep function

    Returns:
        The terminal SimulationRunDetails snapshot

    Raises:
        PollTimeoutError: If the budget is exceeded before a terminal status
        StatusQueryError: If a status query fails
        ResponseParseError: If a status response cannot be decoded
    """
    waiting("Waiting for simulation results...", logger)
    start_time = clock()

    while True:
        elapsed = clock() - start_time
        if elapsed > timeout_seconds:
            raise PollTimeoutError(f"Timed out after {timeout_seconds:g}s waiting for simulation_run_id={run_id}")

        snapshot = client.retrieve_run(run_id).simulation_run
        logger.info(
            "Current simulation status=%s, passed=%d/%d, calculated_score=%.1f",
            snapshot.status,
            snapshot.tests_passed,
            snapshot.total_tests,
            snapshot_score(snapshot),
        )

        status = RunStatus.classify(snapshot.status)
        if status.is_terminal:
            return snapshot
        if status is RunStatus.UNRECOGNIZED:
            logger.debug("Unrecognized status %r, continuing to poll", snapshot.status)

        sleep(poll_interval_seconds)


@dataclass(frozen=True)
class Verdict:
    """Outcome of evaluating a finished run against the score threshold."""

    passed: bool
    message: str
    status: str
    score: float


def evaluate(run_id: str, snapshot: SimulationRunDetails, min_score: float = DEFAULT_MIN_SCORE) -> Verdict:
    """Decide whether a terminal run passes the gate.

    A run fails when its status is not completed/success, regardless of score;
    otherwise it fails when its score is below min_score.
    """
    score = snapshot_score(snapshot)

    if not RunStatus.classify(snapshot.status).is_success:
        return Verdict(
            passed=False,
            message=f"Simulation simulation_run_id={run_id} ended with status={snapshot.status}",
            status=snapshot.status,
            score=score,
        )

    if score < min_score:
        return Verdict(
            passed=False,
            message=f"Simulation overall_score={format_score(score)} is below minimum threshold={format_score(min_score)}",
            status=snapshot.status,
            score=score,
        )

    return Verdict(
        passed=True,
        message=f"Simulation overall_score={format_score(score)} meets or exceeds threshold {format_score(min_score)}.",
        status=snapshot.status,
        score=score,
    )


def format_score(score: float) -> str:
    """Render a score for outputs: whole numbers without a fraction, others at full precision."""
    if float(score).is_integer():
        return str(int(score))
    return repr(float(score))
