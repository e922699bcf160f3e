"""Configuration model for the Jira REST client."""

import base64
import os
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from ..errors import ConfigurationError

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for a Jira server."""

    url: str
    username: str
    password: str = field(repr=False)
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        url = (self.url or "").rstrip("/")
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"Invalid Jira URL {self.url!r}: {e}") from e

        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise ConfigurationError(
                f"Jira URL must be an absolute http(s) URL, got {self.url!r}"
            )
        if parsed.query or parsed.fragment:
            raise ConfigurationError(
                f"Jira URL must not carry a query or fragment, got {self.url!r}"
            )
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")

        object.__setattr__(self, "url", url)

    def is_configured(self) -> bool:
        """Check if all credentials are present."""
        return all([self.url, self.username, self.password])

    def auth_header(self) -> str:
        """Build the Basic authorization header value."""
        login = f"{self.username}:{self.password}"
        try:
            encoded = base64.b64encode(login.encode("utf-8")).decode("ascii")
        except UnicodeEncodeError as e:
            raise ConfigurationError(
                "failed to encode username:password using Base64"
            ) from e
        return f"Basic {encoded}"

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for JSON serialization."""
        return {
            "url": self.url,
            "username": self.username,
            "password": self.password,
            "timeout": self.timeout,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClientConfig":
        """Create a ClientConfig from a dictionary."""
        try:
            return cls(
                url=data["url"],
                username=data["username"],
                password=data["password"],
                timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
            )
        except KeyError as e:
            raise ConfigurationError(f"Missing config key: {e.args[0]}") from e
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid timeout: {data.get('timeout')!r}") from e

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Create a ClientConfig from JIRA_* environment variables."""
        if environ is None:
            environ = os.environ

        missing = [
            name
            for name in ("JIRA_URL", "JIRA_USERNAME", "JIRA_PASSWORD")
            if not environ.get(name)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing environment variables: {', '.join(missing)}"
            )

        raw_timeout = environ.get("JIRA_TIMEOUT", "")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(f"Invalid JIRA_TIMEOUT: {raw_timeout!r}") from e

        return cls(
            url=environ["JIRA_URL"],
            username=environ["JIRA_USERNAME"],
            password=environ["JIRA_PASSWORD"],
            timeout=timeout,
        )
