"""
Core Logging Module

Root logger setup for the pooling service, with the request trace id
stamped on every record.

The trace id lives in a ContextVar so each request handler sees its own
value. Routers call bind_trace_id() once per request; everything logged
afterwards through logging.getLogger(__name__) carries it.

Usage:
    from poolmatch.core.logging import bind_trace_id, setup_logging

    setup_logging()
    trace_id = bind_trace_id(request.headers.get("x-request-id"))
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Optional


# ==================== Trace Context ====================

TRACE_ID: ContextVar[str] = ContextVar("trace_id", default="-")

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(trace_id)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def set_trace_id(trace_id: str) -> None:
    TRACE_ID.set(trace_id)


def get_trace_id() -> str:
    """Trace id of the current request, or "-" outside a request."""
    return TRACE_ID.get()


def bind_trace_id(header_value: Optional[str] = None) -> str:
    """
    Bind the trace id for the current request and return it.

    Uses the caller-supplied id (usually the x-request-id header) when
    present, otherwise generates a uuid4.
    """
    trace_id = header_value.strip() if header_value and header_value.strip() else str(uuid.uuid4())
    set_trace_id(trace_id)
    return trace_id


class TraceIdFilter(logging.Filter):
    """Adds the current trace id to each record as ``record.trace_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = get_trace_id()
        return True


# ==================== Logging Setup ====================

_configured = False


def setup_logging(log_level: Optional[str] = None, force: bool = False) -> None:
    """
    Install a stdout handler with trace id formatting on the root logger.

    Safe to call more than once; later calls are no-ops unless force=True,
    which drops existing root handlers and reconfigures.

    Args:
        log_level: Level name override; defaults to settings.LOG_LEVEL
        force: Reconfigure even if already done
    """
    global _configured

    if _configured and not force:
        return

    if log_level is None:
        from poolmatch.core.config import settings
        log_level = settings.LOG_LEVEL

    level = getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    if force:
        root.handlers.clear()

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        handler.addFilter(TraceIdFilter())
        root.addHandler(handler)

    _configured = True

    logging.getLogger(__name__).info(f"Logging configured at {log_level.upper()}")
