"""GraphDB provider exception classes."""



class GraphDBError(Exception):
    """Base exception for all GraphDB provider errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GraphDBError):
    """Raised when connection configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ValidationError(GraphDBError):
    """Raised when a local precondition fails before any request is made."""

    def __init__(self, message: str) -> None:
        super().__init__("VALIDATION_ERROR", message)


class TransportError(GraphDBError):
    """Raised when the server cannot be reached."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__("TRANSPORT_ERROR", message)
        self.operation = operation


class DecodeError(GraphDBError):
    """Raised when a response body is not the JSON we expect."""

    def __init__(
        self, message: str, operation: str | None = None, identifier: str | None = None
    ) -> None:
        super().__init__("DECODE_ERROR", message)
        self.operation = operation
        self.identifier = identifier


class UnexpectedStatusError(GraphDBError):
    """Raised when the server answers with a status other than the expected one."""

    def __init__(
        self,
        status_code: int,
        body: str,
        operation: str,
        identifier: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.operation = operation
        self.identifier = identifier
        target = f" {identifier}" if identifier else ""
        super().__init__(
            "UNEXPECTED_STATUS",
            f"Failed to {operation}{target}. HTTP {status_code}: {body}",
        )


class NotFoundError(GraphDBError):
    """Raised when a user lookup returns 404."""

    def __init__(self, username: str) -> None:
        super().__init__("NOT_FOUND", f"Cannot find user with name: {username}")
        self.username = username


class UnsupportedOperationError(GraphDBError):
    """Raised for lifecycle transitions a resource does not support."""

    def __init__(self, message: str) -> None:
        super().__init__("UNSUPPORTED_OPERATION", message)
