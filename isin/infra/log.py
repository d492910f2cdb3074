"""stdlib logging setup for the isin tool layer."""

from __future__ import annotations

import logging

from isin.infra.config import LoggingConfig


def configure_logging(config: LoggingConfig) -> None:
    """Install a single stderr handler on the root logger at config.level."""
    logging.basicConfig(level=config.level, format=config.format, force=True)
