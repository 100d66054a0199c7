from __future__ import annotations

from typing import Protocol

from .model import AuthUser, SessionUser


class AuthProvider(Protocol):
    """Auth backend interface (password sign-in, sign-out, who-am-i)."""

    def sign_in(self, email: str, password: str) -> SessionUser:
        """Raise AuthenticationError when credentials are rejected."""
        raise NotImplementedError

    def sign_out(self, user: SessionUser) -> None:
        raise NotImplementedError

    def get_user(self, access_token: str) -> AuthUser:
        """Raise AuthenticationError when the token is missing or expired."""
        raise NotImplementedError
