"""Exceptions raised by the Jira REST adapter."""

from enum import Enum


class ErrorKind(str, Enum):
    """Discriminator shared by every JiraClientError."""

    CONFIGURATION = "configuration"
    TIMEOUT = "timeout"
    INTERRUPTED = "interrupted"
    REMOTE = "remote"
    REQUEST = "request"
    DECODE = "decode"
    CLIENT = "client"


class JiraClientError(Exception):
    """Base exception for Jira client errors."""

    kind = ErrorKind.CLIENT


class ConfigurationError(JiraClientError):
    """Client configuration is unusable (bad URL, unencodable credentials)."""

    kind = ErrorKind.CONFIGURATION


class RequestTimeoutError(JiraClientError):
    """The remote call did not complete within the configured timeout."""

    kind = ErrorKind.TIMEOUT


class RequestInterruptedError(JiraClientError):
    """The pending call was cancelled before it produced a result."""

    kind = ErrorKind.INTERRUPTED


class RemoteExecutionError(JiraClientError):
    """The remote call completed but failed.

    The underlying exception is chained as ``__cause__``.
    """

    kind = ErrorKind.REMOTE

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class JiraAuthenticationError(RemoteExecutionError):
    """Authentication failed."""


class JiraNotFoundError(RemoteExecutionError):
    """Resource not found."""


class RequestConstructionError(JiraClientError):
    """The target URL could not be built from the given identifier."""

    kind = ErrorKind.REQUEST


class DecodeError(JiraClientError):
    """A response body could not be decoded into the expected records."""

    kind = ErrorKind.DECODE
