"""
Logging helpers for queryable-extensions.
"""
from queryable_extensions.log_helper.config import configure_logging
from queryable_extensions.log_helper.decorators import operation_logger
from queryable_extensions.log_helper.formatters import JsonFormatter

__all__ = [
    "configure_logging",
    "operation_logger",
    "JsonFormatter",
]
