"""``graphdb_repository`` resource."""

import re

from graphdb_provider.exceptions import (
    GraphDBError,
    UnsupportedOperationError,
    ValidationError,
)
from graphdb_provider.logging import get_logger
from graphdb_provider.resources.base import RepositoryAPI, RepositoryState

logger = get_logger("resources")

# rep:repositoryID "name" or <...repository#repositoryID> "name"
_REPOSITORY_ID_PATTERN = re.compile(r'repositoryID>?\s+"([^"]*)"')


def declared_repository_id(config: str) -> str | None:
    """Return the repository id declared in a Turtle config, if any."""
    match = _REPOSITORY_ID_PATTERN.search(config)
    return match.group(1) if match else None


class RepositoryResource:
    """
    Lifecycle of a GraphDB repository.

    Repositories are immutable once created: a changed configuration
    requires replacing the resource.
    """

    type_name = "graphdb_repository"

    def __init__(self, api: RepositoryAPI) -> None:
        self.api = api

    def create(self, plan: RepositoryState) -> RepositoryState:
        """
        Create the repository and read it back by its configured name.

        Raises:
            ValidationError: If the config is empty, or declares a different
                repository id than ``plan.name``, or the server stored it under
                another id
        """
        if not plan.config:
            raise ValidationError("Config cannot be empty on creation.")

        declared = declared_repository_id(plan.config)
        if declared is not None and declared != plan.name:
            raise ValidationError(
                f"Repository config declares id {declared!r} but the resource name is "
                f"{plan.name!r}. They must match."
            )

        logger.debug("Creating repository %s", plan.name)
        self.api.create(plan.name, plan.config)

        try:
            repo = self.api.get(plan.name)
        except GraphDBError:
            logger.error("Failed to retrieve repository %s after creation", plan.name)
            raise

        if repo.id != plan.name:
            raise ValidationError(
                f"Repository was created as {repo.id!r}, expected {plan.name!r}. The "
                f"repository {repo.id!r} was left on the server and is not tracked; "
                "delete it manually."
            )

        return RepositoryState(
            name=plan.name,
            config=plan.config,
            id=repo.id,
            description=repo.title,
            location=repo.location,
            type=repo.type,
        )

    def read(self, state: RepositoryState) -> RepositoryState:
        """Refresh state from the server, keyed by repository name."""
        logger.debug("Fetching repository %s", state.name)
        repo = self.api.get(state.name)

        return RepositoryState(
            name=repo.id,
            config=state.config,
            id=repo.id,
            description=repo.title,
            location=repo.location,
            type=repo.type,
        )

    def update(self, plan: RepositoryState, state: RepositoryState) -> RepositoryState:
        """
        Repositories cannot be changed in place.

        Raises:
            UnsupportedOperationError: Always
        """
        raise UnsupportedOperationError(
            f"Repository {state.name!r} cannot be updated in place. "
            "Replace the resource to apply configuration changes."
        )

    def delete(self, state: RepositoryState) -> None:
        repository_id = state.id or state.name
        logger.debug("Deleting repository %s", repository_id)
        self.api.delete(repository_id)
