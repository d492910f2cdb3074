"""Configuration for the bulk screening tool.

Pure configuration data. Defaults may be overridden from the
environment (ISIN_TOOL_*), and then from command-line flags.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import final

ENV_LOOSE: str = "ISIN_TOOL_LOOSE"
ENV_FIX: str = "ISIN_TOOL_FIX"
ENV_LOG_LEVEL: str = "ISIN_TOOL_LOG_LEVEL"

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Screening
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class ScreeningConfig:
    """How each input line is screened."""

    loose: bool = False        # parse_loose instead of strict parse
    fix: bool = False          # repair a wrong check digit or complete a bare payload
    skip_blank: bool = True    # blank lines are not counted
    fail_fast: bool = False    # stop at the first invalid line


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """stdlib logging setup for the tool. The core library never logs."""

    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _flag(env: Mapping[str, str], name: str) -> bool:
    return env.get(name, "").strip().lower() in _TRUTHY


def screening_config_from_env(env: Mapping[str, str] | None = None) -> ScreeningConfig:
    """ScreeningConfig with loose/fix taken from ISIN_TOOL_LOOSE / ISIN_TOOL_FIX."""
    if env is None:
        env = os.environ
    return ScreeningConfig(loose=_flag(env, ENV_LOOSE), fix=_flag(env, ENV_FIX))


def logging_config_from_env(env: Mapping[str, str] | None = None) -> LoggingConfig:
    """LoggingConfig with level from ISIN_TOOL_LOG_LEVEL; unknown levels fall back to the default."""
    if env is None:
        env = os.environ
    level = env.get(ENV_LOG_LEVEL, "").strip().upper()
    if level in LOG_LEVELS:
        return LoggingConfig(level=level)
    return LoggingConfig()
