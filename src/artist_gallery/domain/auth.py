"""Domain models for admin authentication."""

from dataclasses import dataclass

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class AdminSession:
    """The in-memory record of the signed-in admin."""

    username: str
    token: str
    role: str = ADMIN_ROLE


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a credential check."""

    success: bool
    session: AdminSession | None = None
    message: str | None = None
