"""
Configuration module for queryable-extensions.

Centralizes all environment variable reading and configuration management.
"""
from __future__ import annotations

import functools
import os
from dataclasses import dataclass
from typing import Any, Literal


@dataclass
class ExtensionsConfig:
    """Library configuration loaded from environment variables."""

    # Logging configuration
    log_level: str
    log_format: Literal["text", "json"]

    # Pagination defaults for the API adapter
    default_page_size: int
    max_page_size: int

    @classmethod
    def from_env(cls) -> "ExtensionsConfig":
        """Load configuration from environment variables with sensible defaults."""
        return cls(
            # Logging configuration
            log_level=os.environ.get("QX_LOG_LEVEL", "INFO").upper(),
            log_format=os.environ.get("QX_LOG_FORMAT", "text").lower(),  # "text" | "json"

            # Pagination defaults
            default_page_size=int(os.environ.get("QX_DEFAULT_PAGE_SIZE", "20")),
            max_page_size=int(os.environ.get("QX_MAX_PAGE_SIZE", "200")),
        )


@functools.lru_cache(maxsize=None)
def get_config() -> ExtensionsConfig:
    """Global configuration instance, read from the environment on first use."""
    return ExtensionsConfig.from_env()


def __getattr__(name: str) -> Any:
    # `config` is resolved lazily so importing the sorting core never parses QX_* variables
    if name == "config":
        return get_config()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
