"""
Core Errors Module

Request-level errors for the pooling service and their HTTP conversion.

The scoring algorithms never raise these; bad numbers degrade to clamped
scores. Errors here cover what the routers decide about a request:
- ValidationError (400): request too large for the configured limits
- InternalError (500): the engine failed on input that passed validation

Usage:
    from poolmatch.core.errors import ValidationError, to_http_exception

    raise to_http_exception(ValidationError("Too many shipments", details={"shipments": 900}))
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class AppError(Exception):
    """
    Base class for errors the routers turn into HTTP responses.

    Attributes:
        code: Machine-readable code; derived from the class name when omitted
        message: Human-readable message
        details: Extra context echoed back to the caller
        status_code: HTTP status to respond with
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or _snake_case(type(self).__name__)
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self, trace_id: Optional[str] = None) -> Dict[str, Any]:
        return error_payload(self.code, self.message, details=self.details, trace_id=trace_id)


class ValidationError(AppError):
    """Request content or size the service refuses to process."""

    status_code = 400

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", details=details)


class InternalError(AppError):
    """Unexpected failure while pooling or matching a valid request."""

    def __init__(self, message: str = "Internal server error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="internal_error", details=details)


# ==================== Helper Functions ====================

def error_payload(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    trace_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Build the error body used in HTTPException.detail.

    Empty details and a missing trace id are left out.

    Example:
        >>> error_payload("validation_error", "Too many shipments")
        {'code': 'validation_error', 'message': 'Too many shipments'}
    """
    payload: Dict[str, Any] = {"code": code, "message": message}
    if details:
        payload["details"] = details
    if trace_id:
        payload["trace_id"] = trace_id
    return payload


def to_http_exception(error: AppError):
    """
    Convert an AppError into a FastAPI HTTPException tagged with the
    current trace id. 5xx errors are logged here.
    """
    from fastapi import HTTPException
    from poolmatch.core.logging import get_trace_id

    trace_id = get_trace_id()
    if trace_id == "-":
        trace_id = None

    if error.status_code >= 500:
        logger.error(f"{error.code}: {error.message}")

    return HTTPException(status_code=error.status_code, detail=error.to_dict(trace_id=trace_id))


def _snake_case(class_name: str) -> str:
    """PoolCapacityError -> pool_capacity"""
    if class_name.endswith("Error"):
        class_name = class_name[:-5]
    chars = []
    for i, char in enumerate(class_name):
        if char.isupper() and i > 0:
            chars.append("_")
        chars.append(char.lower())
    return "".join(chars)
