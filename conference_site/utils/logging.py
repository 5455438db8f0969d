"""Application logging helpers.

All module loggers are children of the `conference_site` logger, which
owns the single stream handler and takes its level from
`conference_site.config.log_level_name()`.
"""
from __future__ import annotations

import logging
import threading

from conference_site import config as app_config

ROOT_LOGGER = "conference_site"
LOG_FORMAT = "[conference] %(asctime)s %(levelname)s %(name)s %(message)s"

_LOCK = threading.Lock()
_configured = False


def _configure_root() -> logging.Logger:
    global _configured
    root = logging.getLogger(ROOT_LOGGER)
    if _configured:
        return root
    with _LOCK:
        if not _configured:
            root.setLevel(getattr(logging, app_config.log_level_name(), logging.INFO))
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)
            root.propagate = False
            _configured = True
    return root


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return `name` as a logger under the package root, configuring the root once."""
    root = _configure_root()
    if name == ROOT_LOGGER:
        return root
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


__all__ = ["ROOT_LOGGER", "get_logger"]
