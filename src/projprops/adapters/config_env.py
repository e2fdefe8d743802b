"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

import logging
from typing import Mapping

from ..config import config as env_config
from ..core.config_model import AppConfig
from ..core.gating import parse_bool_text
from ..errors import ConfigurationError

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def load_app_config(source: Mapping[str, str] | None = None) -> AppConfig:
    """Build an AppConfig from the environment, or from `source` if given.

    `source` uses the same PROJPROPS_* keys as the environment.
    """
    if source is None:
        debug = env_config.DEBUG
        log_level = env_config.LOG_LEVEL
        trace_delegation = env_config.TRACE_DELEGATION
    else:
        debug = parse_bool_text(source.get("PROJPROPS_DEBUG"))
        log_level = source.get("PROJPROPS_LOG_LEVEL", "DEBUG" if debug else "WARNING").strip().upper()
        trace_delegation = parse_bool_text(source.get("PROJPROPS_TRACE_DELEGATION"))

    if log_level not in _LOG_LEVELS:
        raise ConfigurationError.invalid_value(
            "PROJPROPS_LOG_LEVEL", log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
        )

    logging.getLogger(__name__).debug(
        "Loaded config: debug=%s log_level=%s trace_delegation=%s",
        debug,
        log_level,
        trace_delegation,
    )
    return AppConfig(debug=debug, log_level=log_level, trace_delegation=trace_delegation)
