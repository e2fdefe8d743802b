"""Logging setup for projprops entry points.

Library code only creates module loggers; handlers are installed here, once,
by whoever runs projprops as an application.
"""

from __future__ import annotations

import logging
import threading

from .core.config_model import AppConfig

_config_lock = threading.Lock()
_handler: logging.Handler | None = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(app_config: AppConfig) -> None:
    """Configure the root logger from `app_config`. Later calls only adjust the level."""
    global _handler

    with _config_lock:
        root = logging.getLogger()
        root.setLevel(app_config.log_level)
        if _handler is not None:
            return

        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)


def reset_logging() -> None:
    """Remove the handler installed by setup_logging (for testing)."""
    global _handler

    with _config_lock:
        if _handler is not None:
            logging.getLogger().removeHandler(_handler)
            _handler = None
