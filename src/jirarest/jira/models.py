"""Jira-specific data models."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Union

import httpx

from ..errors import DecodeError

RELEASE_DATE_FORMAT = "%Y-%m-%d"

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_ID_PATTERN = re.compile(r"-?[0-9]+")


def is_blank(value: str | None) -> bool:
    """True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


@dataclass(frozen=True)
class GroupVisibility:
    """Comment visible only to members of a group."""

    name: str

    type = "group"


@dataclass(frozen=True)
class RoleVisibility:
    """Comment visible only to members of a project role."""

    name: str

    type = "role"


Visibility = Union[GroupVisibility, RoleVisibility]


@dataclass(frozen=True)
class Comment:
    """An issue comment, optionally restricted to a group or a role."""

    body: str
    visibility: Visibility | None = None

    @classmethod
    def create(
        cls,
        body: str,
        group_visibility: str | None = None,
        role_visibility: str | None = None,
    ) -> "Comment":
        """Build a comment; a non-blank group takes precedence over a role."""
        if not is_blank(group_visibility):
            return cls(body, GroupVisibility(group_visibility))
        if not is_blank(role_visibility):
            return cls(body, RoleVisibility(role_visibility))
        return cls(body)

    def visibility_payload(self) -> dict[str, str] | None:
        """Visibility object as the REST API expects it."""
        if self.visibility is None:
            return None
        return {"type": self.visibility.type, "value": self.visibility.name}


@dataclass(frozen=True)
class Version:
    """A project version as returned by /rest/api/2/project/{key}/versions."""

    self_url: str
    id: int
    name: str
    description: str | None
    archived: bool
    released: bool
    release_date: date | None = None

    @classmethod
    def from_api_response(cls, data: Any) -> "Version":
        """Create a Version from a decoded JSON object.

        Raises:
            DecodeError: if a required field is missing or has the wrong type,
                if self is not an absolute URL, or if releaseDate is not a
                YYYY-MM-DD date.
        """
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")

        release_date = None
        if "releaseDate" in data:
            release_date = _parse_date(_require(data, "releaseDate", str))

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise DecodeError(
                f"Field 'description' must be a string, got {type(description).__name__}"
            )

        return cls(
            self_url=_parse_self(_require(data, "self", str)),
            id=_parse_id(_require(data, "id", str)),
            name=_require(data, "name", str),
            description=description,
            archived=_require(data, "archived", bool),
            released=_require(data, "released", bool),
            release_date=release_date,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the REST representation."""
        data: dict[str, Any] = {
            "self": self.self_url,
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "archived": self.archived,
            "released": self.released,
        }
        if self.release_date is not None:
            data["releaseDate"] = self.release_date.strftime(RELEASE_DATE_FORMAT)
        return data


def _require(data: dict[str, Any], key: str, expected: type) -> Any:
    if key not in data:
        raise DecodeError(f"Missing required field '{key}'")
    value = data[key]
    if not isinstance(value, expected):
        raise DecodeError(
            f"Field '{key}' must be {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _parse_self(raw: str) -> str:
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise DecodeError(f"Field 'self' is not a valid URL: {raw!r}") from e
    if not url.scheme or not url.host:
        raise DecodeError(f"Field 'self' is not an absolute URL: {raw!r}")
    return raw


def _parse_id(raw: str) -> int:
    if not _ID_PATTERN.fullmatch(raw):
        raise DecodeError(f"Field 'id' is not an integer: {raw!r}")
    value = int(raw)
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise DecodeError(f"Field 'id' is out of range: {raw!r}")
    return value


def _parse_date(raw: str) -> date:
    try:
        return datetime.strptime(raw, RELEASE_DATE_FORMAT).date()
    except ValueError as e:
        raise DecodeError(f"Field 'releaseDate' is not a YYYY-MM-DD date: {raw!r}") from e
