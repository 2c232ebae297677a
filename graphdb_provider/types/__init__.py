"""GraphDB provider type definitions.

This module exports the wire data models used by the API clients.
"""

from graphdb_provider.types.repositories import RepositoryDetail, RepositorySummary
from graphdb_provider.types.users import User, UserRequest

__all__ = [
    # Repository types
    "RepositorySummary",
    "RepositoryDetail",
    # User types
    "User",
    "UserRequest",
]
