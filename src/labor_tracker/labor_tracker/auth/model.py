from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AuthUser:
    """Identity as reported by the auth provider."""

    user_id: str
    email: Optional[str]


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login.

    Acquired at login, passed down to services explicitly, dropped at logout.
    """

    user_id: str
    email: Optional[str]
    access_token: str
    refresh_token: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["SessionUser"]:
        if not data or not data.get("access_token"):
            return None
        return cls(
            user_id=str(data.get("user_id") or ""),
            email=data.get("email"),
            access_token=str(data["access_token"]),
            refresh_token=str(data.get("refresh_token") or ""),
        )
