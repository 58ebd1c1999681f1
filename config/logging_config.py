# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Logging Configuration

Configures the root logger once per process using LOGGING_LEVEL.
"""

import logging

from config.config import LOGGING_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Third-party loggers that are too chatty at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "LiteLLM", "litellm")


def setup_logging(level: str | None = None) -> None:
    """
    Configure application logging.

    Args:
        level: Optional level name overriding LOGGING_LEVEL
    """
    resolved = (level or LOGGING_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, resolved, logging.INFO),
        format=LOG_FORMAT,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
