"""
Logging configuration setup.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from queryable_extensions.config import ExtensionsConfig, get_config
from queryable_extensions.log_helper.formatters import JsonFormatter

LOGGER_NAME = "queryable.ext"


def configure_logging(cfg: Optional[ExtensionsConfig] = None) -> logging.Logger:
    """
    Configure the library logger with either text or JSON formatting.

    Applications call this explicitly; importing the library never touches logging setup.

    Args:
        cfg: Configuration to apply (read from the environment when omitted)

    Returns:
        The configured library logger
    """
    cfg = cfg or get_config()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(cfg.log_level)

    # Clean existing handlers (important when reconfiguring to avoid duplicate logs)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    if cfg.log_format == "json":
        fmt = JsonFormatter()
    else:
        fmt = logging.Formatter(
            fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    handler.setFormatter(fmt)
    logger.addHandler(handler)
    return logger
