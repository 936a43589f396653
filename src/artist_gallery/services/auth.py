"""Access gate for the admin dashboard."""

import logging
import secrets
from dataclasses import dataclass, field

from artist_gallery.domain.auth import ADMIN_ROLE, AdminSession, LoginResult

_logger = logging.getLogger(__name__)


class NotAuthenticatedError(Exception):
    """Raised when an admin-only operation runs without a session."""


@dataclass
class AccessGate:
    """Checks the admin credential and owns the current session.

    There is a single fixed credential pair and at most one session at a
    time. A successful login replaces any existing session.
    """

    username: str
    password: str
    _session: AdminSession | None = field(default=None, init=False, repr=False)

    def login(self, username: str, password: str) -> LoginResult:
        """Validate credentials and open a session on success."""
        username_ok = secrets.compare_digest(
            username.encode("utf-8"), self.username.encode("utf-8")
        )
        password_ok = secrets.compare_digest(
            password.encode("utf-8"), self.password.encode("utf-8")
        )
        if not (username_ok and password_ok):
            _logger.warning("Admin login rejected")
            return LoginResult(success=False, message=self.failure_message)

        session = AdminSession(
            username=username, token=secrets.token_urlsafe(32), role=ADMIN_ROLE
        )
        self._session = session
        _logger.info("Admin login: username=%s", username)
        return LoginResult(success=True, session=session)

    def logout(self) -> None:
        """Clear the current session."""
        if self._session is not None:
            _logger.info("Admin logout: username=%s", self._session.username)
        self._session = None

    def current_session(self) -> AdminSession | None:
        """Return the active session, if any."""
        return self._session

    def session_for_token(self, token: str | None) -> AdminSession | None:
        """Return the active session if the token belongs to it."""
        session = self._session
        if session is None or not token:
            return None
        if not secrets.compare_digest(
            token.encode("utf-8"), session.token.encode("utf-8")
        ):
            return None
        return session

    def require_session(self) -> AdminSession:
        """Return the active session or raise NotAuthenticatedError."""
        if self._session is None:
            raise NotAuthenticatedError("Admin session required")
        return self._session

    @property
    def failure_message(self) -> str:
        # Demo mode: the login page advertises the credentials.
        return f"Invalid credentials. Try: {self.username} / {self.password}"
