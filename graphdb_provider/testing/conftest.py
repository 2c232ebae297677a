"""
Pytest plugin for GraphDB provider testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest when this package is installed.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["graphdb_provider.testing.conftest"]

Or import the fixtures directly:

    from graphdb_provider.testing.fixtures import mock_client, sample_user
"""

# Re-export all fixtures for pytest auto-discovery
from graphdb_provider.testing.fixtures import (
    mock_client,
    mock_client_with_users,
    repositories_data_source,
    repository_resource,
    sample_repository_config,
    sample_user,
    user_resource,
    users_data_source,
)

__all__ = [
    "mock_client",
    "mock_client_with_users",
    "repositories_data_source",
    "repository_resource",
    "sample_repository_config",
    "sample_user",
    "user_resource",
    "users_data_source",
]
