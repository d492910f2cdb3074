"""isin.infra — configuration and logging setup for the tool layer."""

from isin.infra.config import LoggingConfig as LoggingConfig
from isin.infra.config import ScreeningConfig as ScreeningConfig
from isin.infra.config import logging_config_from_env as logging_config_from_env
from isin.infra.config import screening_config_from_env as screening_config_from_env
from isin.infra.log import configure_logging as configure_logging
