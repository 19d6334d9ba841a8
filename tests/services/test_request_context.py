"""Tests for RequestContext."""

import pytest

from admin_backend.errors import RequestCancelledError, RequestTimeoutError
from admin_backend.services.request_context import RequestContext


def test_default_never_expires():
    RequestContext().ensure_active()


def test_cancel():
    ctx = RequestContext()
    ctx.cancel()
    with pytest.raises(RequestCancelledError):
        ctx.ensure_active()


def test_cancellation_wins_over_timeout():
    ctx = RequestContext(cancelled=True, deadline=0.0)
    with pytest.raises(RequestCancelledError):
        ctx.ensure_active()


def test_deadline_passed(monkeypatch):
    monkeypatch.setattr(
        "admin_backend.services.request_context.time.monotonic", lambda: 100.0
    )
    ctx = RequestContext.with_timeout(5)
    assert ctx.deadline == 105.0
    ctx.ensure_active()

    monkeypatch.setattr(
        "admin_backend.services.request_context.time.monotonic", lambda: 105.0
    )
    with pytest.raises(RequestTimeoutError):
        ctx.ensure_active()


def test_without_timeout():
    assert RequestContext.with_timeout(None).deadline is None
