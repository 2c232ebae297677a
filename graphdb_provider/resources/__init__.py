"""GraphDB resources and data sources."""

from graphdb_provider.resources.base import (
    Listing,
    RepositoryAPI,
    RepositoryEntry,
    RepositoryState,
    UserAPI,
    UserEntry,
    UserState,
)
from graphdb_provider.resources.listing import RepositoriesDataSource, UsersDataSource
from graphdb_provider.resources.repository import RepositoryResource
from graphdb_provider.resources.user import UserResource

__all__ = [
    # Capability interfaces
    "RepositoryAPI",
    "UserAPI",
    # State models
    "RepositoryState",
    "UserState",
    "RepositoryEntry",
    "UserEntry",
    "Listing",
    # Resources
    "RepositoryResource",
    "UserResource",
    # Data sources
    "RepositoriesDataSource",
    "UsersDataSource",
]
