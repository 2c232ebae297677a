"""
Connection configuration for the GraphDB administrative API.

Values given explicitly always win over the GRAPHDB_* environment variables.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from graphdb_provider.diagnostics import Diagnostics
from graphdb_provider.exceptions import ConfigurationError

ENV_HOST = "GRAPHDB_HOST"
ENV_PORT = "GRAPHDB_PORT"
ENV_USERNAME = "GRAPHDB_USERNAME"
ENV_PASSWORD = "GRAPHDB_PASSWORD"

DEFAULT_PORT = 7200
DEFAULT_SCHEME = "http"


@dataclass(frozen=True)
class ConnectionConfig:
    """
    Connection parameters for one GraphDB server.

    Example:
        ```python
        config = ConnectionConfig("localhost").with_username("admin").with_password("root")
        config.base_url  # "http://localhost:7200/rest/"
        ```
    """

    host: str
    port: int = DEFAULT_PORT
    username: str = ""
    password: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        if not self.host:
            raise ConfigurationError(
                "The GraphDB host is missing or empty. Set the host in the "
                f"configuration or use the {ENV_HOST} environment variable."
            )
        if not 1 <= self.port <= 65535:
            raise ConfigurationError(
                f"Invalid GraphDB port {self.port}. Must be between 1 and 65535"
            )

    def with_port(self, port: int) -> "ConnectionConfig":
        return replace(self, port=port)

    def with_username(self, username: str) -> "ConnectionConfig":
        return replace(self, username=username)

    def with_password(self, password: str) -> "ConnectionConfig":
        return replace(self, password=password)

    @property
    def scheme(self) -> str:
        if "://" in self.host:
            return self.host.split("://", 1)[0]
        return DEFAULT_SCHEME

    @property
    def hostname(self) -> str:
        host = self.host.split("://", 1)[1] if "://" in self.host else self.host
        return host.rstrip("/")

    @property
    def base_url(self) -> str:
        """Root of the administrative REST API, ending with a slash."""
        return f"{self.scheme}://{self.hostname}:{self.port}/rest/"

    @classmethod
    def from_settings(
        cls,
        host: str | None = None,
        port: int | None = None,
        username: str | None = None,
        password: str | None = None,
        environ: Mapping[str, str] | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> "ConnectionConfig":
        """
        Merge explicit settings with the environment.

        Args:
            host: GraphDB host, overrides GRAPHDB_HOST
            port: TCP port, overrides GRAPHDB_PORT
            username: API username, overrides GRAPHDB_USERNAME
            password: API password, overrides GRAPHDB_PASSWORD
            environ: Environment mapping (default: os.environ)
            diagnostics: Collects warnings for ignored environment values

        Returns:
            Validated ConnectionConfig

        Raises:
            ConfigurationError: If the host is empty after merging or the port is invalid
        """
        env = os.environ if environ is None else environ

        resolved_host = host if host is not None else env.get(ENV_HOST, "")
        config = cls(resolved_host)

        if port is not None:
            config = config.with_port(port)
        elif env.get(ENV_PORT):
            raw = env[ENV_PORT]
            try:
                config = config.with_port(int(raw))
            except ValueError as e:
                if diagnostics is not None:
                    diagnostics.add_warning(
                        f"Failed to parse {ENV_PORT}",
                        f"Error parsing value in {ENV_PORT} environment variable: {e}\n"
                        "So the variable is not used",
                        attribute="port",
                    )

        if username is not None:
            config = config.with_username(username)
        elif env.get(ENV_USERNAME):
            config = config.with_username(env[ENV_USERNAME])

        if password is not None:
            config = config.with_password(password)
        elif env.get(ENV_PASSWORD):
            config = config.with_password(env[ENV_PASSWORD])

        return config
