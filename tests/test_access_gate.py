"""Tests for the admin access gate."""

import pytest

from artist_gallery.services.auth import AccessGate, NotAuthenticatedError


@pytest.fixture
def gate() -> AccessGate:
    return AccessGate(username="admin", password="admin123")


def test_login_with_valid_credentials(gate: AccessGate) -> None:
    result = gate.login("admin", "admin123")

    assert result.success is True
    assert result.session is not None
    assert result.session.username == "admin"
    assert result.session.role == "admin"
    assert gate.current_session() == result.session


def test_login_failure_keeps_previous_session(gate: AccessGate) -> None:
    first = gate.login("admin", "admin123")

    result = gate.login("admin", "wrong")

    assert result.success is False
    assert result.session is None
    assert result.message == "Invalid credentials. Try: admin / admin123"
    assert gate.current_session() == first.session


def test_login_failure_without_session(gate: AccessGate) -> None:
    result = gate.login("someone", "admin123")

    assert result.success is False
    assert gate.current_session() is None


def test_logout_clears_session(gate: AccessGate) -> None:
    gate.login("admin", "admin123")

    gate.logout()
    gate.logout()

    assert gate.current_session() is None
    with pytest.raises(NotAuthenticatedError):
        gate.require_session()


def test_session_for_token(gate: AccessGate) -> None:
    session = gate.login("admin", "admin123").session
    assert session is not None

    assert gate.session_for_token(session.token) == session
    assert gate.session_for_token("not-the-token") is None
    assert gate.session_for_token(None) is None


def test_new_login_replaces_token(gate: AccessGate) -> None:
    first = gate.login("admin", "admin123").session
    second = gate.login("admin", "admin123").session
    assert first is not None
    assert second is not None

    assert first.token != second.token
    assert gate.session_for_token(first.token) is None
