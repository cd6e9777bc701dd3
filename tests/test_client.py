# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the simulation service HTTP client."""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from simgate.contract import QueueSimulationRunPayload
from simgate.core.client import SimulationClient
from simgate.core.errors import ResponseParseError, StatusQueryError, SubmissionError


def _response(status_code: int, body) -> MagicMock:
    text = body if isinstance(body, str) else json.dumps(body)
    return MagicMock(status_code=status_code, text=text)


@pytest.fixture
def client():
    return SimulationClient(api_key="secret", base_url="https://eval.example.com", timeout=5.0)


@pytest.fixture
def payload():
    return QueueSimulationRunPayload(simulation_id="sim-1", digital_human_ids=["a", "b"])


# ============================================================================
# queue_run()
# ============================================================================


class TestQueueRun:
    """Test SimulationClient.queue_run()."""

    @patch("simgate.core.client.requests.post")
    def test_posts_payload_with_api_key_header(self, mock_post, client, payload):
        """Queue sends one POST with the full payload and X-API-Key header."""
        mock_post.return_value = _response(200, {"simulation_run_id": "run-1", "status": "queued"})

        client.queue_run(payload)

        mock_post.assert_called_once()
        call_args = mock_post.call_args
        assert call_args[0][0] == "https://eval.example.com/v1/queue-simulation-run"
        assert call_args[1]["headers"]["X-API-Key"] == "secret"
        assert call_args[1]["headers"]["Content-Type"] == "application/json"
        assert call_args[1]["timeout"] == 5.0
        body = call_args[1]["json"]
        assert body["simulation_id"] == "sim-1"
        assert body["digital_human_ids"] == ["a", "b"]
        assert body["prompt_id"] is None
        assert "sip_uri" in body

    @patch("simgate.core.client.requests.post")
    def test_returns_handle_and_logs_run_id(self, mock_post, client, payload, caplog):
        """A 2xx response yields the run handle and an info log with its id."""
        mock_post.return_value = _response(201, {"simulation_run_id": "run-1", "agent_id": "ag", "status": "queued"})

        with caplog.at_level(logging.INFO, logger="simgate.core.client"):
            handle = client.queue_run(payload)

        assert handle.simulation_run_id == "run-1"
        assert handle.status == "queued"
        assert "run-1" in caplog.text

    @patch("simgate.core.client.requests.post")
    def test_non_2xx_raises_submission_error(self, mock_post, client, payload, caplog):
        """A non-2xx response logs the raw body and raises SubmissionError."""
        mock_post.return_value = _response(403, '{"detail": "invalid api key"}')

        with caplog.at_level(logging.ERROR, logger="simgate.core.client"):
            with pytest.raises(SubmissionError, match="HTTP 403"):
                client.queue_run(payload)

        assert "invalid api key" in caplog.text
        mock_post.assert_called_once()

    @patch("simgate.core.client.requests.post")
    def test_malformed_body_raises_parse_error(self, mock_post, client, payload, caplog):
        """A 2xx with a body that is not the contract raises ResponseParseError."""
        mock_post.return_value = _response(200, "not json at all")

        with caplog.at_level(logging.ERROR, logger="simgate.core.client"):
            with pytest.raises(ResponseParseError):
                client.queue_run(payload)

        assert "not json at all" in caplog.text

    @patch("simgate.core.client.requests.post")
    def test_network_error_raises_submission_error_without_retry(self, mock_post, client, payload):
        """Transport failures are fatal and not retried."""
        mock_post.side_effect = requests.exceptions.ConnectionError("Network error")

        with pytest.raises(SubmissionError, match="Network error"):
            client.queue_run(payload)

        assert mock_post.call_count == 1


# ============================================================================
# retrieve_run()
# ============================================================================


class TestRetrieveRun:
    """Test SimulationClient.retrieve_run()."""

    RUN = {"simulation_run": {"id": "run-1", "status": "running", "total_tests": 4, "tests_passed": 1}}

    @patch("simgate.core.client.requests.get")
    def test_gets_escaped_run_url(self, mock_get, client):
        """The run id is URL-escaped into the retrieve path."""
        mock_get.return_value = _response(200, self.RUN)

        client.retrieve_run("run/1 x")

        call_args = mock_get.call_args
        assert call_args[0][0] == "https://eval.example.com/v1/retrieve-simulation-results/run%2F1%20x"
        assert call_args[1]["headers"]["X-API-Key"] == "secret"

    @patch("simgate.core.client.requests.get")
    def test_decodes_snapshot(self, mock_get, client):
        mock_get.return_value = _response(200, self.RUN)

        response = client.retrieve_run("run-1")

        assert response.simulation_run.status == "running"
        assert response.simulation_run.total_tests == 4

    @patch("simgate.core.client.requests.get")
    def test_non_2xx_raises_status_query_error(self, mock_get, client, caplog):
        mock_get.return_value = _response(500, "internal error")

        with caplog.at_level(logging.ERROR, logger="simgate.core.client"):
            with pytest.raises(StatusQueryError, match="HTTP 500"):
                client.retrieve_run("run-1")

        assert "internal error" in caplog.text

    @patch("simgate.core.client.requests.get")
    def test_malformed_body_raises_parse_error(self, mock_get, client):
        mock_get.return_value = _response(200, {"simulation_run": {"status": "running"}})

        with pytest.raises(ResponseParseError):
            client.retrieve_run("run-1")

    @patch("simgate.core.client.requests.get")
    def test_timeout_raises_status_query_error(self, mock_get, client):
        mock_get.side_effect = requests.exceptions.Timeout("read timed out")

        with pytest.raises(StatusQueryError, match="read timed out"):
            client.retrieve_run("run-1")


class TestClientFromConfig:
    """Test SimulationClient.from_config()."""

    def test_uses_config_transport_settings(self):
        from simgate.core.config import load_gate_config

        config = load_gate_config(
            environ={
                "INPUT_API_KEY": "secret",
                "INPUT_SIMULATION_ID": "sim-1",
                "INPUT_API_BASE_URL": "http://localhost:8080/",
                "INPUT_REQUEST_TIMEOUT_SECONDS": "12",
            }
        )

        client = SimulationClient.from_config(config)

        assert client.base_url == "http://localhost:8080"
        assert client.timeout == 12
        assert "secret" not in repr(client)
