"""
Capability interfaces and state models shared by resources and data sources.

Resources depend on these protocols rather than on GraphDBClient, so any
object with the right methods (the HTTP clients, or the in-memory fakes in
graphdb_provider.testing) can be injected.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

from graphdb_provider.diagnostics import Diagnostics
from graphdb_provider.exceptions import DecodeError
from graphdb_provider.types.repositories import RepositoryDetail, RepositorySummary
from graphdb_provider.types.users import User, UserRequest

T = TypeVar("T")


class RepositoryAPI(Protocol):
    """Repository operations a resource needs from the server."""

    def list(
        self, on_invalid: Callable[[DecodeError], None] | None = None
    ) -> list[RepositorySummary]: ...

    def create(self, name: str, config: str) -> None: ...

    def get(self, repository_id: str) -> RepositoryDetail: ...

    def delete(self, repository_id: str) -> None: ...


class UserAPI(Protocol):
    """User operations a resource needs from the server."""

    def list(self, on_invalid: Callable[[DecodeError], None] | None = None) -> list[User]: ...

    def get(self, username: str) -> User: ...

    def create(self, request: UserRequest) -> None: ...

    def update(self, username: str, request: UserRequest) -> None: ...

    def delete(self, username: str) -> None: ...


@dataclass
class RepositoryState:
    """State of a ``graphdb_repository`` resource."""

    name: str
    config: str = ""
    id: str | None = None
    description: str | None = None
    location: str | None = None
    type: str | None = None


@dataclass
class UserState:
    """State of a ``graphdb_user`` resource."""

    username: str
    role: str | None = None
    password: str | None = field(default=None, repr=False)
    id: str | None = None


@dataclass
class RepositoryEntry:
    """One element of the ``graphdb_repositories`` data source."""

    id: str
    name: str
    description: str
    uri: str
    external_url: str
    type: str
    local: bool


@dataclass
class UserEntry:
    """One element of the ``graphdb_users`` data source."""

    id: str
    username: str
    role: str


@dataclass
class Listing(Generic[T]):
    """Result of a data source read: entries plus per-item diagnostics."""

    items: list[T] = field(default_factory=list)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
