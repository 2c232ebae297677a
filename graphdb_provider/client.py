"""
GraphDB provider main client.

Provides the primary interface for the GraphDB administrative REST API.
"""

from collections.abc import Mapping
from typing import Any

import httpx

from graphdb_provider.clients import RepositoriesClient, UsersClient
from graphdb_provider.config import ConnectionConfig
from graphdb_provider.transport import HTTPTransport


class GraphDBClient:
    """
    Main client for the GraphDB administrative API.

    Aggregates the resource clients over one shared transport. The client
    holds no per-call state, so a single instance can be handed to every
    resource and data source.

    Example:
        ```python
        from graphdb_provider import ConnectionConfig, GraphDBClient

        client = GraphDBClient(ConnectionConfig("localhost", username="admin", password="root"))

        # Or create from environment variables
        client = GraphDBClient.from_env()

        for repo in client.repositories.list():
            print(repo.name, repo.type)
        ```
    """

    def __init__(
        self,
        config: ConnectionConfig,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the GraphDB client.

        Args:
            config: Connection configuration
            http_transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.config = config

        self._transport = HTTPTransport(config, http_transport=http_transport)

        self.repositories = RepositoriesClient(self._transport)
        self.users = UsersClient(self._transport)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> "GraphDBClient":
        """
        Create a client from environment variables.

        Environment variables:
            GRAPHDB_HOST: Server host, optionally with scheme (required)
            GRAPHDB_PORT: TCP port (optional, default: 7200)
            GRAPHDB_USERNAME: API username (optional)
            GRAPHDB_PASSWORD: API password (optional)

        Raises:
            ConfigurationError: If GRAPHDB_HOST is missing or empty
        """
        config = ConnectionConfig.from_settings(environ=environ)
        return cls(config, http_transport=http_transport)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GraphDBClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
