"""Users resource client."""

from collections.abc import Callable
from typing import TYPE_CHECKING

from graphdb_provider.exceptions import DecodeError, NotFoundError
from graphdb_provider.types.users import User, UserRequest

if TYPE_CHECKING:
    from graphdb_provider.transport import HTTPTransport

USERS_PATH = "security/users/"


class UsersClient:
    """Client for user-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the users client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list(self, on_invalid: Callable[[DecodeError], None] | None = None) -> list[User]:
        """
        List all users on the server.

        Args:
            on_invalid: Called with the error for each entry that is not a JSON
                object; the entry is skipped. Without it the error is raised.

        Returns:
            User objects in server order (empty if there are none)

        Raises:
            DecodeError: If the body is not a JSON array, or an entry is not an
                object and no on_invalid callback is given
        """
        operation = "list users"
        response = self.transport.request("GET", USERS_PATH, operation=operation)
        self.transport.expect_status(response, 200, operation)

        data = self.transport.decode(response, operation)
        if not isinstance(data, list):
            raise DecodeError(f"Failed to {operation}. Expected a JSON array", operation)
        users = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                error = DecodeError(
                    f"Failed to {operation}. Entry {index} is not a JSON object: {item!r}",
                    operation,
                    str(index),
                )
                if on_invalid is None:
                    raise error
                on_invalid(error)
                continue
            users.append(User.from_dict(item))
        return users

    def get(self, username: str) -> User:
        """
        Get a single user.

        Args:
            username: The user's login name

        Raises:
            NotFoundError: If the server answers 404
            UnexpectedStatusError: On any other non-200 status
        """
        operation = "get user"
        response = self.transport.request(
            "GET", USERS_PATH + username, operation=operation
        )
        if response.status_code == 404:
            raise NotFoundError(username)
        self.transport.expect_status(response, 200, operation, username)

        data = self.transport.decode(response, operation, username)
        if not isinstance(data, dict):
            raise DecodeError(
                f"Failed to {operation} {username}. Expected a JSON object",
                operation,
                username,
            )
        return User.from_dict(data)

    def create(self, request: UserRequest) -> None:
        """
        Create a user. The server does not echo the user back.

        Raises:
            UnexpectedStatusError: If the server does not answer 201
        """
        operation = "create user"
        response = self.transport.request(
            "POST", USERS_PATH + request.username, json=request.to_dict(), operation=operation
        )
        self.transport.expect_status(response, 201, operation, request.username)

    def update(self, username: str, request: UserRequest) -> None:
        """
        Replace a user's password and authorities.

        Raises:
            UnexpectedStatusError: If the server does not answer 200
        """
        operation = "update user"
        response = self.transport.request(
            "PUT", USERS_PATH + username, json=request.to_dict(), operation=operation
        )
        self.transport.expect_status(response, 200, operation, username)

    def delete(self, username: str) -> None:
        """
        Delete a user.

        Raises:
            UnexpectedStatusError: If the server does not answer 204
        """
        operation = "delete user"
        response = self.transport.request(
            "DELETE", USERS_PATH + username, operation=operation
        )
        self.transport.expect_status(response, 204, operation, username)
