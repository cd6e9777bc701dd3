# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Logging utilities for simgate.

Provides consistent logging configuration, glyph constants, and helper functions
for formatted CI log output.
"""

import logging
import sys

# ============================================================================
# Glyph Constants
# ============================================================================

CHECK = "✓"
CROSS = "✗"
ROCKET = "🚀"
GEAR = "⚙"
HOURGLASS = "⏳"


# ============================================================================
# Logging Configuration
# ============================================================================


def setup_logging(
    level: int = logging.INFO,
    format_string: str | None = None,
    date_format: str | None = None,
) -> None:
    """Configure logging for simgate.

    Sets up the root logger with consistent formatting on stdout, where the
    CI runner collects step logs.

    Args:
        level: Logging level (default: INFO)
        format_string: Custom format string (default: timestamp + level + message)
        date_format: Custom date format (default: ISO-like)
    """
    if format_string is None:
        format_string = "%(asctime)s [%(levelname)s] %(message)s"

    if date_format is None:
        date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Reduce noise from third-party libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)


# ============================================================================
# Output Helpers
# ============================================================================


def section(title: str, emoji: str = GEAR, logger: logging.Logger | None = None) -> None:
    """Print a section header.

    Args:
        title: Section title
        emoji: Glyph to prefix (default: gear)
        logger: Logger to use (default: root logger)
    """
    if logger is None:
        logger = logging.getLogger()

    logger.info("")
    logger.info("%s %s", emoji, title)
    logger.info("-" * 60)


def success(message: str, logger: logging.Logger | None = None) -> None:
    """Log a success message with checkmark.

    Args:
        message: Success message
        logger: Logger to use (default: root logger)
    """
    if logger is None:
        logger = logging.getLogger()
    logger.info("%s %s", CHECK, message)


def error(message: str, logger: logging.Logger | None = None) -> None:
    """Log an error message with cross.

    Args:
        message: Error message
        logger: Logger to use (default: root logger)
    """
    if logger is None:
        logger = logging.getLogger()
    logger.error("%s %s", CROSS, message)


def step(message: str, logger: logging.Logger | None = None) -> None:
    """Log a step/progress message with rocket.

    Args:
        message: Step message
        logger: Logger to use (default: root logger)
    """
    if logger is None:
        logger = logging.getLogger()
    logger.info("%s %s", ROCKET, message)


def waiting(message: str, logger: logging.Logger | None = None) -> None:
    """Log a waiting/pending message with hourglass.

    Args:
        message: Waiting message
        logger: Logger to use (default: root logger)
    """
    if logger is None:
        logger = logging.getLogger()
    logger.info("%s %s", HOURGLASS, message)
