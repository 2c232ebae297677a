"""GraphDB provider testing utilities.

Provides an in-memory mock client and fixtures for testing code that manages
GraphDB repositories and users.
"""

from graphdb_provider.testing.fixtures import (
    create_mock_repository,
    create_mock_user,
    create_repository_config,
)
from graphdb_provider.testing.mock import (
    MockCall,
    MockGraphDBClient,
    MockRepositoriesClient,
    MockUsersClient,
)

__all__ = [
    # Mock client
    "MockGraphDBClient",
    "MockRepositoriesClient",
    "MockUsersClient",
    "MockCall",
    # Helper functions
    "create_mock_repository",
    "create_mock_user",
    "create_repository_config",
]
