"""
Tests for the GraphDBClient facade.

Feature: graphdb-provider
"""

import httpx

from graphdb_provider.client import GraphDBClient
from graphdb_provider.clients import RepositoriesClient, UsersClient
from graphdb_provider.config import ConnectionConfig


def test_resource_clients_share_one_transport(client: GraphDBClient) -> None:
    assert isinstance(client.repositories, RepositoriesClient)
    assert isinstance(client.users, UsersClient)
    assert client.repositories.transport is client.transport
    assert client.users.transport is client.transport


def test_context_manager_closes_transport(server) -> None:
    with GraphDBClient(
        ConnectionConfig("localhost"), http_transport=httpx.MockTransport(server.handler)
    ) as graphdb:
        transport = graphdb.transport

    assert transport._client.is_closed


def test_users_and_repositories_use_separate_paths(server, client: GraphDBClient) -> None:
    server.route("GET", "/rest/repositories", json_body=[])
    server.route("GET", "/rest/security/users/", json_body=[])

    client.repositories.list()
    client.users.list()

    assert [r.url.path for r in server.requests] == ["/rest/repositories", "/rest/security/users/"]
