"""
Core Package

Configuration, logging and error handling for the pooling service.

Modules:
- config: Environment-backed settings
- logging: Root logger setup with trace_id support
- errors: Request-level error classes and HTTP conversion

Usage:
    from poolmatch.core import settings, setup_logging, bind_trace_id
    from poolmatch.core import ValidationError
"""

# Configuration
from poolmatch.core.config import settings, get_settings

# Logging
from poolmatch.core.logging import (
    setup_logging,
    bind_trace_id,
    set_trace_id,
    get_trace_id
)

# Errors
from poolmatch.core.errors import (
    AppError,
    ValidationError,
    InternalError,
    error_payload,
    to_http_exception
)

__all__ = [
    # Config
    "settings",
    "get_settings",

    # Logging
    "setup_logging",
    "bind_trace_id",
    "set_trace_id",
    "get_trace_id",

    # Errors
    "AppError",
    "ValidationError",
    "InternalError",
    "error_payload",
    "to_http_exception",
]
