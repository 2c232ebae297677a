"""Repository-related data models."""

from dataclasses import dataclass
from typing import Any


@dataclass
class RepositorySummary:
    """Repository entry as returned by the list endpoint."""

    name: str
    title: str
    uri: str
    external_url: str
    type: str  # "graphdb", "ontop", "fedx", ... (server defined)
    local: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RepositorySummary":
        external_url = data.get("externalUrl") if "externalUrl" in data else data.get("external_url")
        return cls(
            name=data.get("name", ""),
            title=data.get("title", ""),
            uri=data.get("uri", ""),
            external_url=external_url or "",
            type=data.get("type", ""),
            local=bool(data.get("local", False)),
        )


@dataclass
class RepositoryDetail:
    """Single repository as returned by the get endpoint."""

    id: str
    title: str
    type: str
    location: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RepositoryDetail":
        return cls(
            id=data.get("id", ""),
            title=data.get("title", ""),
            type=data.get("type", ""),
            location=data.get("location", ""),
        )
