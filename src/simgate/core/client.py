# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
HTTP client for the simulation evaluation service.

Both calls are single-shot: a transport failure, a non-2xx response or an
undecodable body raises immediately and is never retried. Queueing a run is
not idempotent, so resubmitting is left to the calling pipeline.

The API contract is defined in simgate.contract.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import quote

import requests
from pydantic import ValidationError

from simgate.contract import (
    QueueSimulationRunPayload,
    QueueSimulationRunResponse,
    RetrieveSimulationResponse,
)

from .errors import ResponseParseError, StatusQueryError, SubmissionError
from .schema import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from .schema import GateConfig

logger = logging.getLogger(__name__)

QUEUE_PATH = "/v1/queue-simulation-run"
RETRIEVE_PATH = "/v1/retrieve-simulation-results/{run_id}"


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


@dataclass(frozen=True)
class SimulationClient:
    """Client for the queue/retrieve endpoints.

    Usage:
        client = SimulationClient.from_config(config)
        handle = client.queue_run(config.to_payload())
        snapshot = client.retrieve_run(handle.simulation_run_id)
    """

    api_key: str
    base_url: str = DEFAULT_API_BASE_URL
    timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @classmethod
    def from_config(cls, config: "GateConfig") -> "SimulationClient":
        return cls(
            api_key=config.api_key,
            base_url=config.api_base_url.rstrip("/"),
            timeout=config.request_timeout_seconds,
        )

    def __repr__(self) -> str:
        return f"SimulationClient(base_url={self.base_url!r}, timeout={self.timeout!r})"

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json", "X-API-Key": self.api_key}

    def queue_run(self, payload: QueueSimulationRunPayload) -> QueueSimulationRunResponse:
        """Queue a simulation run.

        Args:
            payload: Queue request body; unset optional fields are sent as null

        Returns:
            QueueSimulationRunResponse carrying the run identifier

        Raises:
            SubmissionError: On transport failure or a non-2xx response
            ResponseParseError: If a 2xx body does not match the contract
        """
        url = f"{self.base_url}{QUEUE_PATH}"
        try:
            response = requests.post(url, json=payload.model_dump(), headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise SubmissionError(f"Failed to queue simulation run: {e}") from e

        if not _is_success(response):
            logger.error("Simulation API error (queue): %s", response.text)
            raise SubmissionError(f"Failed to queue simulation run: HTTP {response.status_code}")

        try:
            handle = QueueSimulationRunResponse.model_validate_json(response.text)
        except ValidationError as e:
            logger.error("Failed to parse queue response JSON: %s", response.text)
            raise ResponseParseError(f"Malformed queue response: {e}") from e

        logger.info("Simulation run queued successfully: %s", handle.simulation_run_id)
        return handle

    def retrieve_run(self, run_id: str) -> RetrieveSimulationResponse:
        """Fetch the current state of a simulation run.

        Raises:
            StatusQueryError: On transport failure or a non-2xx response
            ResponseParseError: If a 2xx body does not match the contract
        """
        url = f"{self.base_url}{RETRIEVE_PATH.format(run_id=quote(run_id, safe=''))}"
        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise StatusQueryError(f"Failed to fetch simulation status: {e}") from e

        if not _is_success(response):
            logger.error("Simulation API error (status): %s", response.text)
            raise StatusQueryError(f"Failed to fetch simulation status: HTTP {response.status_code}")

        try:
            return RetrieveSimulationResponse.model_validate_json(response.text)
        except ValidationError as e:
            logger.error("Failed to parse status response JSON: %s", response.text)
            raise ResponseParseError(f"Malformed status response: {e}") from e
