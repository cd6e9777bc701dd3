# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Config loading and resolution for the gate.

This module provides:
- load_gate_config(): Merge YAML file, action inputs and CLI overrides into a typed GateConfig
- read_action_inputs(): Collect INPUT_* environment variables set by the CI runner
- parse_bool(), parse_id_list(), parse_number(): Raw input coercion helpers
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from marshmallow import ValidationError

from .errors import ConfigurationError
from .schema import (
    DEFAULT_MIN_SCORE,
    DEFAULT_POLL_INTERVAL_SECONDS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    GateConfig,
)

logger = logging.getLogger(__name__)

TRUTHY_TOKENS = frozenset({"1", "true", "yes", "y"})
FALSY_TOKENS = frozenset({"0", "false", "no", "n"})

REQUIRED_INPUTS = ("api_key", "simulation_id")
STRING_INPUTS = (
    "api_key",
    "simulation_id",
    "prompt_id",
    "knowledge_base_id",
    "phone_number",
    "sip_uri",
    "api_base_url",
)
NUMERIC_DEFAULTS = {
    "min_score": DEFAULT_MIN_SCORE,
    "poll_interval_seconds": DEFAULT_POLL_INTERVAL_SECONDS,
    "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
    "request_timeout_seconds": DEFAULT_REQUEST_TIMEOUT_SECONDS,
}
NUMERIC_INPUTS = tuple(NUMERIC_DEFAULTS)
INPUT_NAMES = STRING_INPUTS + NUMERIC_INPUTS + ("digital_human_ids", "wait_for_results")


def parse_bool(value: str | None, default: bool) -> bool:
    """Parse a boolean token, falling back to default for anything unrecognized.

    Recognizes 1/true/yes/y and 0/false/no/n, case-insensitively and ignoring
    surrounding whitespace.
    """
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in TRUTHY_TOKENS:
        return True
    if normalized in FALSY_TOKENS:
        return False
    return default


def parse_id_list(value: str | None) -> list[str] | None:
    """Split a comma-separated id list, trimming entries and dropping empties.

    Returns None (no restriction) when nothing is left.
    """
    if not value:
        return None
    ids = [part.strip() for part in value.split(",") if part.strip()]
    return ids or None


def parse_number(name: str, value: str | None, default: float) -> float:
    """Parse a numeric input, using default when the input is blank."""
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from e


def read_action_inputs(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Read CI action inputs from INPUT_<NAME> environment variables.

    Blank values are treated as not provided.
    """
    if environ is None:
        environ = os.environ

    inputs = {}
    for name in INPUT_NAMES:
        value = environ.get(f"INPUT_{name.upper()}")
        if value is not None and value.strip():
            inputs[name] = value.strip()
    return inputs


def load_yaml_inputs(path: Path | str) -> dict[str, Any]:
    """Load gate inputs from a YAML file.

    Raises:
        ConfigurationError: If the file is missing or not a YAML mapping
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping, got {type(raw).__name__}")
    logger.debug("Loaded gate inputs from %s", path)
    return raw


def _coerce(name: str, value: Any) -> Any:
    """Coerce one raw input (string from env/CLI, or typed from YAML) to its config type."""
    if name == "digital_human_ids":
        if isinstance(value, str):
            return parse_id_list(value)
        if isinstance(value, list):
            return [str(v).strip() for v in value if str(v).strip()] or None
        return value

    if name == "wait_for_results":
        if isinstance(value, str):
            return parse_bool(value, True)
        return value

    if name in NUMERIC_INPUTS:
        if isinstance(value, str):
            return parse_number(name, value, NUMERIC_DEFAULTS[name])
        return value

    if name in STRING_INPUTS and isinstance(value, str):
        value = value.strip()
        if name == "api_base_url":
            value = value.rstrip("/")
        return value or None

    return value


def resolve_inputs(*sources: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge raw input sources, later sources overriding earlier ones.

    None and blank-string values never override.
    """
    merged: dict[str, Any] = {}
    for source in sources:
        if not source:
            continue
        for name, value in source.items():
            if value is None or (isinstance(value, str) and not value.strip()):
                continue
            merged[name] = value

    resolved = {name: _coerce(name, value) for name, value in merged.items()}
    resolved = {name: value for name, value in resolved.items() if value is not None}

    for name in REQUIRED_INPUTS:
        resolved.setdefault(name, "")
    return resolved


def _format_validation_error(e: ValidationError) -> str:
    problems = []
    messages = e.messages if isinstance(e.messages, dict) else {"_schema": e.messages}
    for field_name, field_messages in messages.items():
        if isinstance(field_messages, dict):
            field_messages = [str(m) for m in field_messages.values()]
        for message in field_messages:
            message = str(message)
            if field_name == "_schema" or message.startswith(field_name):
                problems.append(message)
            else:
                problems.append(f"{field_name}: {message}")
    return "; ".join(problems)


def load_gate_config(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> GateConfig:
    """Load and validate the gate configuration.

    Sources, lowest to highest precedence: YAML file at path, INPUT_* action
    inputs from environ, explicit overrides (CLI flags).

    Returns:
        GateConfig frozen dataclass

    Raises:
        ConfigurationError: If a required input is missing or an input is invalid
    """
    file_inputs = load_yaml_inputs(path) if path is not None else None
    resolved = resolve_inputs(file_inputs, read_action_inputs(environ), overrides)

    try:
        config = GateConfig.Schema().load(resolved)
    except ValidationError as e:
        raise ConfigurationError(_format_validation_error(e)) from e

    assert isinstance(config, GateConfig)
    logger.debug("Resolved gate config: %s", config)
    return config
