"""Operator login against a static user list."""

import secrets
from typing import Iterable

from .errors import InvalidCredentials
from .logger import logger
from .schemas import User


class SessionManager:
    """Issues opaque bearer tokens to known operators.

    Tokens live only in memory; a restart logs everyone out.
    """

    def __init__(self, users: Iterable[User]):
        self._users = list(users)
        self._sessions: dict[str, User] = {}

    def login(self, username: str, password: str) -> str:
        """Check credentials and open a session.

        Args:
            username: Operator name.
            password: Operator password.

        Returns:
            str: Token identifying the new session.

        Raises:
            InvalidCredentials: If no user matches both fields.
        """
        user = next(
            (
                u
                for u in self._users
                if u.username == username and secrets.compare_digest(u.password.encode(), password.encode())
            ),
            None,
        )
        if user is None:
            logger.warning(f"Login failed for {username!r}")
            raise InvalidCredentials()
        token = secrets.token_urlsafe(32)
        self._sessions[token] = user
        logger.info(f"Login successful | username={username}")
        return token

    def authenticate(self, token: str) -> User:
        user = self._sessions.get(token)
        if user is None:
            raise InvalidCredentials("Invalid or expired session")
        return user

    def logout(self, token: str) -> None:
        user = self._sessions.pop(token, None)
        if user is not None:
            logger.info(f"Logged out | username={user.username}")
