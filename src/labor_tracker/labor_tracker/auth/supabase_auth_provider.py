from __future__ import annotations

import logging

from supabase import AuthError

from ..core.exceptions import AuthenticationError
from ..database.connection import SupabaseConnection
from .model import AuthUser, SessionUser
from .provider import AuthProvider

logger = logging.getLogger(__name__)


class SupabaseAuthProvider(AuthProvider):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory

    def sign_in(self, email: str, password: str) -> SessionUser:
        client = self._conn_factory.connect()
        try:
            res = client.auth.sign_in_with_password({"email": email, "password": password})
        except AuthError as e:
            raise AuthenticationError(f"Login failed: {e.message}") from e

        if not res.user or not res.session:
            raise AuthenticationError("Login failed: no session returned")

        return SessionUser(
            user_id=str(res.user.id),
            email=res.user.email,
            access_token=res.session.access_token,
            refresh_token=res.session.refresh_token or "",
        )

    def sign_out(self, user: SessionUser) -> None:
        client = self._conn_factory.connect()
        try:
            client.auth.set_session(user.access_token, user.refresh_token)
            client.auth.sign_out()
        except AuthError as e:
            # Token already expired or revoked; the local session is dropped anyway.
            logger.info("Supabase sign-out for %s ignored: %s", user.email, e.message)

    def get_user(self, access_token: str) -> AuthUser:
        if not access_token:
            raise AuthenticationError("User not authenticated")
        client = self._conn_factory.connect()
        try:
            res = client.auth.get_user(access_token)
        except AuthError as e:
            raise AuthenticationError("User not authenticated") from e

        if not res or not res.user:
            raise AuthenticationError("User not authenticated")
        return AuthUser(user_id=str(res.user.id), email=res.user.email)
