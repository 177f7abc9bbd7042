"""
Core Tests

Tests for settings, logging setup and error helpers.

Run: pytest poolmatch/tests/test_core.py -v
"""

import logging

import pytest


# ==================== Config Tests ====================

def test_settings_defaults(monkeypatch):
    from poolmatch.core.config import get_settings

    for name in ("APP_ENV", "MAX_SHIPMENTS_PER_REQUEST", "MAX_CARRIERS_PER_REQUEST", "POOL_PREVIEW_LIMIT", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()
    assert settings is get_settings()
    assert settings.APP_ENV == "dev"
    assert settings.MAX_SHIPMENTS_PER_REQUEST == 500
    assert settings.MAX_CARRIERS_PER_REQUEST == 500
    assert settings.POOL_PREVIEW_LIMIT == 5
    assert settings.CORS_ORIGINS == ["*"]


def test_settings_read_environment(monkeypatch):
    from poolmatch.core.config import settings

    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("MAX_SHIPMENTS_PER_REQUEST", "50")

    assert settings.APP_ENV == "production"
    assert settings.CORS_ORIGINS == ["https://a.example", "https://b.example"]
    assert settings.MAX_SHIPMENTS_PER_REQUEST == 50


# ==================== Logging Tests ====================

def test_trace_id_filter_injects_context():
    from poolmatch.core.logging import TraceIdFilter, get_trace_id, set_trace_id

    set_trace_id("trace-xyz")
    record = logging.LogRecord("poolmatch", logging.INFO, __file__, 1, "hello", None, None)

    assert TraceIdFilter().filter(record) is True
    assert record.trace_id == "trace-xyz"
    assert get_trace_id() == "trace-xyz"

    set_trace_id("-")


def test_bind_trace_id_uses_header_or_generates():
    from poolmatch.core.logging import bind_trace_id, get_trace_id, set_trace_id

    assert bind_trace_id("req-42") == "req-42"
    assert get_trace_id() == "req-42"

    generated = bind_trace_id(None)
    assert len(generated) == 36
    assert get_trace_id() == generated
    assert bind_trace_id("   ") != "   "

    set_trace_id("-")


def test_setup_logging_is_idempotent():
    from poolmatch.core.logging import TraceIdFilter, setup_logging

    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("WARNING", force=True)
        assert len(root.handlers) == 1
        assert any(isinstance(f, TraceIdFilter) for f in root.handlers[0].filters)
        assert root.level == logging.WARNING

        setup_logging("DEBUG")
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


# ==================== Error Tests ====================

def test_validation_error_payload():
    from poolmatch.core.errors import ValidationError

    err = ValidationError("Invalid pickup coordinate", details={"id": "S1"})

    assert err.status_code == 400
    assert err.code == "validation_error"
    assert err.to_dict(trace_id="abc") == {
        "code": "validation_error",
        "message": "Invalid pickup coordinate",
        "details": {"id": "S1"},
        "trace_id": "abc",
    }


def test_app_error_default_code():
    from poolmatch.core.errors import AppError

    class PoolCapacityError(AppError):
        pass

    err = PoolCapacityError("too big")
    assert err.code == "pool_capacity"
    assert err.status_code == 500
    assert err.to_dict() == {"code": "pool_capacity", "message": "too big"}


def test_to_http_exception_carries_trace_id():
    from poolmatch.core.errors import InternalError, ValidationError, to_http_exception
    from poolmatch.core.logging import set_trace_id

    set_trace_id("-")
    exc = to_http_exception(ValidationError("bad"))
    assert exc.status_code == 400
    assert "trace_id" not in exc.detail

    set_trace_id("trace-500")
    exc = to_http_exception(InternalError())
    assert exc.status_code == 500
    assert exc.detail["trace_id"] == "trace-500"

    set_trace_id("-")


# ==================== Run Tests ====================

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
