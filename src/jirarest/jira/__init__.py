"""Jira integration module for jirarest."""

from ..errors import (
    ConfigurationError,
    DecodeError,
    ErrorKind,
    JiraAuthenticationError,
    JiraClientError,
    JiraNotFoundError,
    RemoteExecutionError,
    RequestConstructionError,
    RequestInterruptedError,
    RequestTimeoutError,
)
from .client import (
    JiraRestClient,
    SEARCH_FIELDS,
    SEARCH_PAGE_SIZE,
    SEARCH_START_AT,
)
from .models import Comment, GroupVisibility, RoleVisibility, Version, Visibility
from .sdk import IssueTrackerSDK, JiraSDK

__all__ = [
    "JiraRestClient",
    "SEARCH_FIELDS",
    "SEARCH_PAGE_SIZE",
    "SEARCH_START_AT",
    "IssueTrackerSDK",
    "JiraSDK",
    "Comment",
    "GroupVisibility",
    "RoleVisibility",
    "Version",
    "Visibility",
    "ErrorKind",
    "JiraClientError",
    "ConfigurationError",
    "RequestTimeoutError",
    "RequestInterruptedError",
    "RemoteExecutionError",
    "JiraAuthenticationError",
    "JiraNotFoundError",
    "RequestConstructionError",
    "DecodeError",
]
