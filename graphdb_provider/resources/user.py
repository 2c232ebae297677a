"""``graphdb_user`` resource."""

from graphdb_provider.exceptions import GraphDBError, NotFoundError
from graphdb_provider.logging import get_logger
from graphdb_provider.resources.base import UserAPI, UserState
from graphdb_provider.roles import role_from_authorities, role_to_authority
from graphdb_provider.types.users import UserRequest

logger = get_logger("resources")


class UserResource:
    """
    Lifecycle of a GraphDB user, importable by username.

    The password is write-only: it is kept from the plan and never read
    back from the server.
    """

    type_name = "graphdb_user"

    def __init__(self, api: UserAPI) -> None:
        self.api = api

    def create(self, plan: UserState) -> UserState:
        request = self._build_request(plan)
        logger.debug("Attempting to create user %s", plan.username)
        self.api.create(request)

        # The API doesn't return the payload back to us
        try:
            return self._read(plan.username, plan)
        except GraphDBError:
            logger.error("Failed to retrieve user %s after creation", plan.username)
            raise

    def read(self, state: UserState) -> UserState | None:
        """
        Refresh state from the server.

        Returns:
            The refreshed state, or None if the user no longer exists

        Raises:
            ValidationError: If the user's authorities cannot be decoded
        """
        username = state.id or state.username
        logger.debug("Reading user %s", username)
        try:
            return self._read(username, state)
        except NotFoundError:
            logger.info("User %s not found, removing from state", username)
            return None

    def update(self, plan: UserState) -> UserState:
        """Replace the user's password and role, then read it back."""
        request = self._build_request(plan)
        logger.debug("Updating user %s", plan.username)
        self.api.update(plan.username, request)

        try:
            return self._read(plan.username, plan)
        except GraphDBError:
            logger.error("Failed to retrieve user %s after update", plan.username)
            raise

    def delete(self, state: UserState) -> None:
        username = state.id or state.username
        logger.debug("Deleting user %s", username)
        self.api.delete(username)

    def import_state(self, identifier: str) -> UserState:
        """Start tracking an existing user; the identifier is the username."""
        return UserState(username=identifier, id=identifier)

    def _build_request(self, plan: UserState) -> UserRequest:
        return UserRequest(
            username=plan.username,
            password=plan.password or "",
            granted_authorities=[role_to_authority(plan.role or "")],
        )

    def _read(self, username: str, prior: UserState) -> UserState:
        user = self.api.get(username)
        role = role_from_authorities(user.granted_authorities)
        return UserState(
            username=user.username,
            role=role,
            password=prior.password,
            id=user.username,
        )
