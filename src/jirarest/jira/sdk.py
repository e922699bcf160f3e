"""Gateway to the vendor Jira SDK.

JiraRestClient talks to the SDK only through the IssueTrackerSDK protocol so
tests can substitute a fake.
"""

import logging
from typing import Any, Iterable, Protocol

from jira import JIRA

from ..models.config import ClientConfig
from .models import Comment

logger = logging.getLogger("jirarest.jira.sdk")


class IssueTrackerSDK(Protocol):
    """Operations JiraRestClient delegates to the SDK."""

    def add_comment(self, issue_id: str, comment: Comment) -> Any: ...

    def get_issue(self, issue_id: str) -> Any: ...

    def get_issue_types(self) -> Iterable[Any]: ...

    def get_all_projects(self) -> Iterable[Any]: ...

    def search(
        self, jql: str, max_results: int, start_at: int, fields: str | list[str] | None
    ) -> Iterable[Any]: ...


class JiraSDK:
    """IssueTrackerSDK backed by the ``jira`` package."""

    def __init__(self, config: ClientConfig):
        self._jira = JIRA(
            server=config.url,
            basic_auth=(config.username, config.password),
            timeout=config.timeout,
            max_retries=0,
            get_server_info=False,
        )

    def add_comment(self, issue_id: str, comment: Comment) -> Any:
        return self._jira.add_comment(
            issue_id, comment.body, visibility=comment.visibility_payload()
        )

    def get_issue(self, issue_id: str) -> Any:
        return self._jira.issue(issue_id)

    def get_issue_types(self) -> Iterable[Any]:
        return self._jira.issue_types()

    def get_all_projects(self) -> Iterable[Any]:
        return self._jira.projects()

    def search(
        self, jql: str, max_results: int, start_at: int, fields: str | list[str] | None
    ) -> Iterable[Any]:
        logger.debug("SDK search startAt=%d maxResults=%d", start_at, max_results)
        return self._jira.search_issues(
            jql, startAt=start_at, maxResults=max_results, fields=fields
        )

    def close(self) -> None:
        self._jira.close()
