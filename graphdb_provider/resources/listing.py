"""Read-only data sources listing repositories and users."""

from graphdb_provider.exceptions import DecodeError, ValidationError
from graphdb_provider.logging import get_logger
from graphdb_provider.resources.base import (
    Listing,
    RepositoryAPI,
    RepositoryEntry,
    UserAPI,
    UserEntry,
)
from graphdb_provider.roles import role_from_authorities

logger = get_logger("resources")


class RepositoriesDataSource:
    """
    All repositories on the server, in server order.

    An entry that is not a JSON object is reported as an error diagnostic
    and skipped.
    """

    type_name = "graphdb_repositories"

    def __init__(self, api: RepositoryAPI) -> None:
        self.api = api

    def read(self) -> Listing[RepositoryEntry]:
        listing: Listing[RepositoryEntry] = Listing()

        def skip(error: DecodeError) -> None:
            logger.warning("Skipping repository entry %s: %s", error.identifier, error.message)
            listing.diagnostics.add_error("Failed to retrieve repository", error.message)

        for repo in self.api.list(on_invalid=skip):
            listing.items.append(
                RepositoryEntry(
                    id=repo.name,
                    name=repo.name,
                    description=repo.title,
                    uri=repo.uri,
                    external_url=repo.external_url,
                    type=repo.type,
                    local=repo.local,
                )
            )
        return listing


class UsersDataSource:
    """
    All users on the server, in server order.

    A user whose role cannot be decoded, or an entry that is not a JSON
    object, is reported as an error diagnostic and skipped; the remaining
    users are still listed.
    """

    type_name = "graphdb_users"

    def __init__(self, api: UserAPI) -> None:
        self.api = api

    def read(self) -> Listing[UserEntry]:
        listing: Listing[UserEntry] = Listing()

        def skip(error: DecodeError) -> None:
            logger.warning("Skipping user entry %s: %s", error.identifier, error.message)
            listing.diagnostics.add_error("Failed to retrieve user", error.message)

        for user in self.api.list(on_invalid=skip):
            try:
                role = role_from_authorities(user.granted_authorities)
            except ValidationError as e:
                authority = user.granted_authorities[0] if user.granted_authorities else "<none>"
                logger.warning("Skipping user %s: %s", user.username, e.message)
                listing.diagnostics.add_error(
                    "Failed to retrieve user",
                    f"Unknown role {authority} for user {user.username}: {e.message}",
                )
                continue

            listing.items.append(UserEntry(id=user.username, username=user.username, role=role))
        return listing
