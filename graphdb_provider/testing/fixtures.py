"""
Pytest fixtures for GraphDB provider testing.

Provides common fixtures for testing code that manages GraphDB resources.
"""

from typing import Any, Generator

import pytest

from graphdb_provider.resources import (
    RepositoriesDataSource,
    RepositoryResource,
    UserResource,
    UsersDataSource,
)
from graphdb_provider.testing.mock import MockGraphDBClient
from graphdb_provider.types.repositories import RepositorySummary
from graphdb_provider.types.users import User

SAMPLE_REPOSITORY_CONFIG = """\
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix rep: <http://www.openrdf.org/config/repository#> .
@prefix sr: <http://www.openrdf.org/config/repository/sail#> .
@prefix sail: <http://www.openrdf.org/config/sail#> .
@prefix graphdb: <http://www.ontotext.com/config/graphdb#> .

[] a rep:Repository ;
    rep:repositoryID "{name}" ;
    rdfs:label "{title}" ;
    rep:repositoryImpl [
        rep:repositoryType "graphdb:SailRepository" ;
        sr:sailImpl [
            sail:sailType "graphdb:Sail" ;
            graphdb:ruleset "rdfsplus-optimized"
        ]
    ] .
"""


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGraphDBClient, None, None]:
    """
    Provide a MockGraphDBClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            resource = UserResource(mock_client.users)
            resource.create(UserState(username="alice", role="user"))
            assert mock_client.was_called("users.create")
        ```
    """
    client = MockGraphDBClient()
    yield client
    client.reset()


@pytest.fixture
def user_resource(mock_client: MockGraphDBClient) -> UserResource:
    return UserResource(mock_client.users)


@pytest.fixture
def repository_resource(mock_client: MockGraphDBClient) -> RepositoryResource:
    return RepositoryResource(mock_client.repositories)


@pytest.fixture
def users_data_source(mock_client: MockGraphDBClient) -> UsersDataSource:
    return UsersDataSource(mock_client.users)


@pytest.fixture
def repositories_data_source(mock_client: MockGraphDBClient) -> RepositoriesDataSource:
    return RepositoriesDataSource(mock_client.repositories)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_user() -> User:
    """Provide a sample User with the repo-manager role."""
    return create_mock_user(username="sample-user", granted_authorities=["ROLE_REPO_MANAGER"])


@pytest.fixture
def sample_repository_config() -> str:
    """Provide a Turtle repository config declaring the id ``TestRepo``."""
    return create_repository_config("TestRepo")


@pytest.fixture
def mock_client_with_users(mock_client: MockGraphDBClient) -> MockGraphDBClient:
    """Provide a mock client seeded with one user per role."""
    mock_client.users.add(create_mock_user("admin", granted_authorities=["ROLE_ADMIN"]))
    mock_client.users.add(create_mock_user("manager", granted_authorities=["ROLE_REPO_MANAGER"]))
    mock_client.users.add(create_mock_user("reader", granted_authorities=["ROLE_USER"]))
    return mock_client


# ============================================================================
# Helper Functions
# ============================================================================


def create_repository_config(name: str, title: str = "") -> str:
    """Render a minimal GraphDB repository config in Turtle syntax."""
    return SAMPLE_REPOSITORY_CONFIG.replace("{name}", name).replace("{title}", title)


def create_mock_user(
    username: str = "test-user",
    **kwargs: Any,
) -> User:
    """
    Create a User with customizable fields.

    Args:
        username: Login name
        **kwargs: Additional fields to override

    Returns:
        User object
    """
    defaults: dict[str, Any] = {
        "password": "",
        "granted_authorities": ["ROLE_USER"],
    }
    defaults.update(kwargs)
    return User(username=username, **defaults)


def create_mock_repository(
    name: str = "test-repo",
    **kwargs: Any,
) -> RepositorySummary:
    """
    Create a RepositorySummary with customizable fields.

    Args:
        name: Repository id
        **kwargs: Additional fields to override

    Returns:
        RepositorySummary object
    """
    defaults: dict[str, Any] = {
        "title": "",
        "uri": f"http://localhost:7200/repositories/{name}",
        "external_url": f"http://localhost:7200/repositories/{name}",
        "type": "graphdb",
        "local": True,
    }
    defaults.update(kwargs)
    return RepositorySummary(name=name, **defaults)


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "user_resource",
    "repository_resource",
    "users_data_source",
    "repositories_data_source",
    "sample_user",
    "sample_repository_config",
    "mock_client_with_users",
    # Helper functions
    "create_repository_config",
    "create_mock_user",
    "create_mock_repository",
]
