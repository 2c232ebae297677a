"""Repositories resource client."""

from collections.abc import Callable
from typing import TYPE_CHECKING

from graphdb_provider.exceptions import DecodeError, ValidationError
from graphdb_provider.types.repositories import RepositoryDetail, RepositorySummary

if TYPE_CHECKING:
    from graphdb_provider.transport import HTTPTransport


class RepositoriesClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repositories client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list(
        self, on_invalid: Callable[[DecodeError], None] | None = None
    ) -> list[RepositorySummary]:
        """
        List all repositories on the server.

        Args:
            on_invalid: Called with the error for each entry that is not a JSON
                object; the entry is skipped. Without it the error is raised.

        Returns:
            RepositorySummary objects in server order (empty if there are none)

        Raises:
            UnexpectedStatusError: If the server does not answer 200
            DecodeError: If the body is not a JSON array, or an entry is not an
                object and no on_invalid callback is given
        """
        operation = "list repositories"
        response = self.transport.request("GET", "repositories", operation=operation)
        self.transport.expect_status(response, 200, operation)

        data = self.transport.decode(response, operation)
        if not isinstance(data, list):
            raise DecodeError(f"Failed to {operation}. Expected a JSON array", operation)
        repositories = []
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
            repositories.append(RepositorySummary.from_dict(item))
        return repositories

    def create(self, name: str, config: str) -> None:
        """
        Create a repository from a configuration document.

        The document (usually Turtle) is sent verbatim as the ``config``
        part of a multipart form.

        Args:
            name: Repository name, used to label the uploaded part
            config: Repository configuration document

        Raises:
            ValidationError: If config is empty (no request is made)
            UnexpectedStatusError: If the server does not answer 201
        """
        if not config:
            raise ValidationError("Config cannot be empty on creation.")

        operation = "create repository"
        files = {"config": (f"{name}-config.ttl", config.encode("utf-8"), "text/turtle")}
        response = self.transport.request(
            "POST", "repositories", files=files, operation=operation
        )
        self.transport.expect_status(response, 201, operation, name)

    def get(self, repository_id: str) -> RepositoryDetail:
        """
        Get a single repository.

        Args:
            repository_id: The repository identifier (its name)

        Raises:
            UnexpectedStatusError: If the server does not answer 200, including 404
            DecodeError: If the body is not a JSON object
        """
        operation = "get repository"
        response = self.transport.request(
            "GET", f"repositories/{repository_id}", operation=operation
        )
        self.transport.expect_status(response, 200, operation, repository_id)

        data = self.transport.decode(response, operation, repository_id)
        if not isinstance(data, dict):
            raise DecodeError(
                f"Failed to {operation} {repository_id}. Expected a JSON object",
                operation,
                repository_id,
            )
        return RepositoryDetail.from_dict(data)

    def delete(self, repository_id: str) -> None:
        """
        Delete a repository.

        Raises:
            UnexpectedStatusError: If the server does not answer 200
        """
        operation = "delete repository"
        response = self.transport.request(
            "DELETE", f"repositories/{repository_id}", operation=operation
        )
        self.transport.expect_status(response, 200, operation, repository_id)
