"""
GraphDB provider entry point.

The host calls ``configure`` once, then asks for resources and data sources.
All of them share the single client built during configuration.
"""

from collections.abc import Mapping
from typing import Any

import httpx

from graphdb_provider.client import GraphDBClient
from graphdb_provider.config import ConnectionConfig
from graphdb_provider.diagnostics import Diagnostics
from graphdb_provider.exceptions import ConfigurationError
from graphdb_provider.logging import get_logger
from graphdb_provider.resources import (
    RepositoriesDataSource,
    RepositoryResource,
    UserResource,
    UsersDataSource,
)

PROVIDER_NAME = "graphdb"

logger = get_logger()


class GraphDBProvider:
    """
    Provider exposing GraphDB repositories and users as resources.

    Example:
        ```python
        provider = GraphDBProvider("0.1.0")
        provider.configure(host="localhost", username="admin", password="root")
        users = provider.resources()["graphdb_user"]
        ```
    """

    def __init__(self, version: str) -> None:
        self.version = version
        self._client: GraphDBClient | None = None

    @property
    def type_name(self) -> str:
        return PROVIDER_NAME

    @property
    def client(self) -> GraphDBClient:
        if self._client is None:
            raise ConfigurationError("Provider has not been configured")
        return self._client

    def configure(
        self,
        host: str | None = None,
        port: int | None = None,
        username: str | None = None,
        password: str | None = None,
        environ: Mapping[str, str] | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> Diagnostics:
        """
        Build the shared client from configuration and environment.

        Returns:
            Warnings produced while merging configuration

        Raises:
            ConfigurationError: If the host is missing or the port is invalid
        """
        logger.info("Initializing GraphDB provider")
        diagnostics = Diagnostics()

        config = ConnectionConfig.from_settings(
            host=host,
            port=port,
            username=username,
            password=password,
            environ=environ,
            diagnostics=diagnostics,
        )
        for warning in diagnostics.warnings():
            logger.warning("%s: %s", warning.summary, warning.detail)

        if self._client is not None:
            self._client.close()
        self._client = GraphDBClient(config, http_transport=http_transport)

        logger.info(
            "Created client",
            extra={"graphdb_host": config.host, "graphdb_username": config.username},
        )
        return diagnostics

    def resources(self) -> dict[str, Any]:
        client = self.client
        return {
            RepositoryResource.type_name: RepositoryResource(client.repositories),
            UserResource.type_name: UserResource(client.users),
        }

    def data_sources(self) -> dict[str, Any]:
        client = self.client
        return {
            RepositoriesDataSource.type_name: RepositoriesDataSource(client.repositories),
            UsersDataSource.type_name: UsersDataSource(client.users),
        }

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
