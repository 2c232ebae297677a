"""graphdb-provider - GraphDB repositories and users as declarative resources."""

from graphdb_provider.client import GraphDBClient
from graphdb_provider.config import ConnectionConfig
from graphdb_provider.diagnostics import Diagnostic, Diagnostics
from graphdb_provider.exceptions import (
    ConfigurationError,
    DecodeError,
    GraphDBError,
    NotFoundError,
    TransportError,
    UnexpectedStatusError,
    UnsupportedOperationError,
    ValidationError,
)
from graphdb_provider.logging import configure_logging, get_logger
from graphdb_provider.provider import GraphDBProvider
from graphdb_provider.resources import (
    RepositoriesDataSource,
    RepositoryResource,
    RepositoryState,
    UserResource,
    UsersDataSource,
    UserState,
)
from graphdb_provider.roles import ROLES, authority_to_role, role_to_authority
from graphdb_provider.transport import HTTPTransport

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Provider
    "GraphDBProvider",
    # Client
    "GraphDBClient",
    "ConnectionConfig",
    "HTTPTransport",
    # Resources
    "RepositoryResource",
    "RepositoryState",
    "UserResource",
    "UserState",
    "RepositoriesDataSource",
    "UsersDataSource",
    # Roles
    "ROLES",
    "role_to_authority",
    "authority_to_role",
    # Diagnostics
    "Diagnostic",
    "Diagnostics",
    # Exceptions
    "GraphDBError",
    "ConfigurationError",
    "DecodeError",
    "NotFoundError",
    "TransportError",
    "UnexpectedStatusError",
    "UnsupportedOperationError",
    "ValidationError",
    # Logging
    "configure_logging",
    "get_logger",
]
