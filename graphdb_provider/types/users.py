"""User-related data models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class User:
    """User account as returned by the security endpoints."""

    username: str
    password: str = ""  # not reliably returned by the server
    granted_authorities: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(
            username=data.get("username", ""),
            password=data.get("password") or "",
            granted_authorities=_authorities(data.get("grantedAuthorities")),
        )


@dataclass
class UserRequest:
    """Body for user create and update calls."""

    username: str
    password: str
    granted_authorities: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "password": self.password,
            "grantedAuthorities": list(self.granted_authorities),
        }


def _authorities(value: Any) -> list[Any]:
    # A lone value is kept so role decoding can reject it by name
    if not value:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]
