"""GraphDB provider resource clients."""

from graphdb_provider.clients.repositories import RepositoriesClient
from graphdb_provider.clients.users import UsersClient

__all__ = [
    "RepositoriesClient",
    "UsersClient",
]
