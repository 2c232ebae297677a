"""Shared fixtures for the GraphDB provider tests."""

import json
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from graphdb_provider.client import GraphDBClient
from graphdb_provider.config import ConnectionConfig

# Fixtures from the packaged testing plugin
from graphdb_provider.testing.fixtures import (  # noqa: F401
    mock_client,
    mock_client_with_users,
    repositories_data_source,
    repository_resource,
    sample_repository_config,
    sample_user,
    user_resource,
    users_data_source,
)


class RecordingServer:
    """Scripted stand-in for the GraphDB REST API behind httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def route(
        self,
        method: str,
        path: str,
        status: int = 200,
        json_body: Any = None,
        text: str | None = None,
        content: bytes | None = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status, content=content)
            if text is not None:
                return httpx.Response(status, text=text)
            if json_body is not None:
                return httpx.Response(status, content=json.dumps(json_body).encode())
            return httpx.Response(status)

        self._routes[(method, path)] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        respond = self._routes.get((request.method, request.url.path))
        if respond is None:
            return httpx.Response(500, text=f"unscripted {request.method} {request.url.path}")
        return respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def server() -> RecordingServer:
    return RecordingServer()


@pytest.fixture
def connection_config() -> ConnectionConfig:
    return ConnectionConfig("localhost", username="admin", password="root")


@pytest.fixture
def client(
    server: RecordingServer, connection_config: ConnectionConfig
) -> Generator[GraphDBClient, None, None]:
    graphdb = GraphDBClient(connection_config, http_transport=httpx.MockTransport(server.handler))
    yield graphdb
    graphdb.close()
