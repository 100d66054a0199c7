from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError
from .model import AuthUser, SessionUser
from .provider import AuthProvider

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: supervisor login/logout and session checks."""

    def __init__(self, provider: AuthProvider):
        self._provider = provider

    def login(self, email: str, password: str) -> SessionUser:
        email = require_non_empty(email, "Email")
        if not password:
            raise AuthenticationError("Password is required")
        user = self._provider.sign_in(email, password)
        logger.info("Supervisor %s signed in", user.email)
        return user

    def logout(self, user: Optional[SessionUser]) -> None:
        if user is None:
            return
        self._provider.sign_out(user)
        logger.info("Supervisor %s signed out", user.email)

    def current_user(self, user: Optional[SessionUser]) -> AuthUser:
        """Resolve the session against the provider (the token may have expired)."""
        if user is None:
            raise AuthenticationError("User not authenticated")
        return self._provider.get_user(user.access_token)
