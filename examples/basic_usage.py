#!/usr/bin/env python3
"""
Basic GraphDB provider usage example.

Runs a user and repository lifecycle against the server named by the
GRAPHDB_HOST / GRAPHDB_PORT / GRAPHDB_USERNAME / GRAPHDB_PASSWORD
environment variables.
Run with: python examples/basic_usage.py
"""

import logging

from graphdb_provider import (
    GraphDBError,
    GraphDBProvider,
    RepositoryState,
    UserState,
    configure_logging,
)

REPOSITORY_CONFIG = """\
@prefix rep: <http://www.openrdf.org/config/repository#> .
@prefix sr: <http://www.openrdf.org/config/repository/sail#> .
@prefix sail: <http://www.openrdf.org/config/sail#> .

[] a rep:Repository ;
    rep:repositoryID "example-repo" ;
    rep:repositoryImpl [
        rep:repositoryType "graphdb:SailRepository" ;
        sr:sailImpl [ sail:sailType "graphdb:Sail" ]
    ] .
"""

configure_logging(level=logging.INFO, http_level=logging.DEBUG)

print("=== GraphDB Provider Basic Usage Example ===\n")

provider = GraphDBProvider("example")
for warning in provider.configure().warnings():
    print(f"   Warning: {warning.summary}: {warning.detail}")

resources = provider.resources()
data_sources = provider.data_sources()

# 1. Users
print("1. Managing a user...")
users = resources["graphdb_user"]
try:
    user = users.create(UserState(username="example-user", role="user", password="changeme"))
    print(f"   Created {user.username} with role {user.role}")

    user = users.update(UserState(username="example-user", role="repo-manager", password="changeme"))
    print(f"   Updated {user.username} to role {user.role}")
finally:
    users.delete(UserState(username="example-user", id="example-user"))
    print("   Deleted example-user\n")

# 2. Repositories
print("2. Managing a repository...")
repositories = resources["graphdb_repository"]
try:
    repo = repositories.create(
        RepositoryState(name="example-repo", config=REPOSITORY_CONFIG)
    )
    print(f"   Created {repo.id} ({repo.type})")
except GraphDBError as e:
    print(f"   Failed: {e}")
else:
    repositories.delete(repo)
    print(f"   Deleted {repo.id}\n")

# 3. Listings
print("3. Listing server contents...")
for entry in data_sources["graphdb_repositories"].read().items:
    print(f"   repository {entry.name}: {entry.type} local={entry.local}")

listing = data_sources["graphdb_users"].read()
for entry in listing.items:
    print(f"   user {entry.username}: {entry.role}")
for diagnostic in listing.diagnostics:
    print(f"   {diagnostic.severity}: {diagnostic.detail}")

provider.close()
