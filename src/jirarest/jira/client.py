"""Jira REST API client wrapper."""

import logging
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Callable
from urllib.parse import unquote

import httpx

from ..errors import (
    DecodeError,
    JiraAuthenticationError,
    JiraClientError,
    JiraNotFoundError,
    RemoteExecutionError,
    RequestConstructionError,
    RequestInterruptedError,
    RequestTimeoutError,
)
from ..models.config import DEFAULT_TIMEOUT, ClientConfig
from .models import Comment, Version, is_blank
from .sdk import IssueTrackerSDK, JiraSDK

logger = logging.getLogger("jirarest.jira.client")

# Only the first page of search results is returned.
SEARCH_PAGE_SIZE = 50
SEARCH_START_AT = 0
# Server default field set; the SDK turns None into "*all".
SEARCH_FIELDS = "*navigable"


class JiraRestClient:
    """Synchronous Jira client.

    Most operations go through the vendor SDK, each bounded by the configured
    timeout. Project versions are fetched with a hand-built GET request.
    """

    def __init__(
        self,
        url: str,
        username: str,
        password: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        sdk: IssueTrackerSDK | None = None,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the client.

        Args:
            url: Jira instance URL (e.g., https://jira.example.com)
            username: User name for basic authentication
            password: Password or API token
            timeout: Seconds to wait for any single remote call
            sdk: SDK gateway; defaults to one backed by the ``jira`` package
            http_client: httpx client used for the versions endpoint

        Raises:
            ConfigurationError: if the URL or credentials are unusable
        """
        self.config = ClientConfig(url, username, password, timeout)
        self.auth_header = self.config.auth_header()
        self._sdk = sdk if sdk is not None else JiraSDK(self.config)
        self._owns_http = http_client is None
        self._http = (
            httpx.Client(timeout=httpx.Timeout(timeout))
            if self._owns_http
            else http_client
        )
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="jirarest-sdk"
        )
        self._closed = False

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "JiraRestClient":
        """Create a client from a ClientConfig."""
        return cls(
            config.url,
            config.username,
            config.password,
            timeout=config.timeout,
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return self.config.url

    @property
    def timeout(self) -> float:
        return self.config.timeout

    def __enter__(self) -> "JiraRestClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        """Release the HTTP client and the SDK worker."""
        if self._closed:
            return
        self._closed = True
        self._executor.shutdown(wait=False, cancel_futures=True)
        if self._owns_http:
            self._http.close()
        close_sdk = getattr(self._sdk, "close", None)
        if close_sdk is not None:
            close_sdk()

    def add_comment(
        self,
        issue_id: str,
        comment_body: str,
        group_visibility: str | None = None,
        role_visibility: str | None = None,
    ) -> None:
        """Add a comment to an issue.

        A non-blank group_visibility restricts the comment to that group and
        wins over role_visibility. With both blank the comment is unrestricted.
        """
        url = self._build_url("/rest/api/2/issue/{}/comment", issue_id)
        comment = Comment.create(comment_body, group_visibility, role_visibility)
        logger.debug("Adding comment via %s", url)
        self._call(self._sdk.add_comment, issue_id, comment)

    def get_issue(self, issue_id: str) -> Any:
        """Fetch an issue by id or key."""
        return self._call(self._sdk.get_issue, issue_id)

    def get_issue_types(self) -> list[Any]:
        """List all issue types in the order the server returns them."""
        return list(self._call(self._sdk.get_issue_types))

    def get_project_keys(self) -> list[str]:
        """List the key of every visible project."""
        projects = self._call(self._sdk.get_all_projects)
        return [project.key for project in projects]

    def search_issues(self, jql: str) -> list[Any]:
        """Run a JQL search and return the first page of issues.

        Results beyond SEARCH_PAGE_SIZE are not fetched.
        """
        issues = self._call(
            self._sdk.search,
            jql,
            SEARCH_PAGE_SIZE,
            SEARCH_START_AT,
            SEARCH_FIELDS,
        )
        return list(issues)

    def get_versions(self, project_key: str) -> list[Version]:
        """Fetch all versions of a project.

        Args:
            project_key: Project key (e.g., PROJ)

        Returns:
            List of Version objects, in response order

        Raises:
            RequestConstructionError: if project_key does not form a valid URL
            RequestTimeoutError: if the server does not answer in time
            RemoteExecutionError: on transport failure or a non-2xx response
            DecodeError: if the body is not a JSON array of valid versions
        """
        url = self._build_url("/rest/api/2/project/{}/versions", project_key)
        response = self._get(url)

        try:
            decoded = response.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON from {url}: {e}") from e

        if not isinstance(decoded, list):
            raise DecodeError(
                f"Expected a JSON array from {url}, got {type(decoded).__name__}"
            )

        return [Version.from_api_response(item) for item in decoded]

    def _build_url(self, template: str, identifier: str) -> httpx.URL:
        """Insert identifier into an API path below the base URL."""
        if is_blank(identifier):
            raise RequestConstructionError(f"Blank identifier for {template}")

        segment = unquote(identifier)
        if "/" in segment or "\\" in segment or segment in (".", ".."):
            raise RequestConstructionError(
                f"Identifier {identifier!r} is not a single path segment"
            )

        raw = self.base_url + template.format(identifier)
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise RequestConstructionError(f"Invalid URL {raw!r}: {e}") from e

        if url.query or url.fragment:
            raise RequestConstructionError(
                f"Identifier {identifier!r} does not form a valid path"
            )
        return url

    def _get(self, url: httpx.URL) -> httpx.Response:
        """Make an authenticated GET request with error handling."""
        self._check_open()
        logger.debug("GET %s", url)

        try:
            response = self._http.get(
                url,
                headers={
                    "Authorization": self.auth_header,
                    "Content-Type": "application/json",
                },
                timeout=httpx.Timeout(self.timeout),
            )
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(
                f"GET {url} timed out after {self.timeout}s"
            ) from e
        except httpx.HTTPError as e:
            raise RemoteExecutionError(f"GET {url} failed: {e}") from e

        if response.status_code == 401:
            raise JiraAuthenticationError("Invalid credentials", status_code=401)
        elif response.status_code == 404:
            raise JiraNotFoundError(f"Not found: {url}", status_code=404)
        elif not response.is_success:
            raise RemoteExecutionError(
                f"API error {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        return response

    def _call(self, func: Callable[..., Any], *args: Any) -> Any:
        """Run an SDK call on the worker thread and wait for it."""
        self._check_open()
        try:
            future = self._executor.submit(func, *args)
        except RuntimeError as e:
            raise JiraClientError("Client is closed") from e
        return self._wait(future, getattr(func, "__name__", "sdk call"))

    def _wait(self, future: Future, operation: str) -> Any:
        try:
            return future.result(timeout=self.timeout)
        except FutureTimeoutError as e:
            raise RequestTimeoutError(
                f"{operation} did not complete within {self.timeout}s"
            ) from e
        except CancelledError as e:
            raise RequestInterruptedError(f"{operation} was cancelled") from e
        except JiraClientError:
            raise
        except Exception as e:
            raise RemoteExecutionError(
                f"{operation} failed: {e}",
                status_code=getattr(e, "status_code", None),
            ) from e

    def _check_open(self) -> None:
        if self._closed:
            raise JiraClientError("Client is closed")
