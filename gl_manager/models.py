"""Data models and constants for gl-manager."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_GITLAB_URL = "https://gitlab.com"
API_V4 = "/api/v4"
PER_PAGE = 100

ROOT_NAME = "Top-Level Groups"


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Visibility(Enum):
    PUBLIC = "public"
    INTERNAL = "internal"
    PRIVATE = "private"


class CloneProtocol(Enum):
    SSH = "ssh"
    HTTP = "http"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def path_from_name(name: str) -> str:
    """Derive a URL path from a display name: 'My Team' -> 'my-team'."""
    return name.replace(" ", "-").lower()


# ---------------------------------------------------------------------------
# Data Classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Group:
    """A GitLab group or subgroup."""

    id: int
    name: str
    parent_id: int | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Group:
        return cls(
            id=data["id"],
            name=data["name"],
            parent_id=data.get("parent_id"),
        )


@dataclass(frozen=True)
class Project:
    """A GitLab project and its clone endpoints."""

    id: int
    name: str
    path_with_namespace: str = ""
    ssh_url: str = ""
    http_url: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Project:
        return cls(
            id=data["id"],
            name=data["name"],
            path_with_namespace=data.get("path_with_namespace") or "",
            ssh_url=data.get("ssh_url_to_repo") or "",
            http_url=data.get("http_url_to_repo") or "",
        )

    def clone_url(self, protocol: CloneProtocol = CloneProtocol.SSH) -> str:
        if protocol is CloneProtocol.HTTP:
            return self.http_url
        return self.ssh_url


@dataclass(frozen=True)
class NavigationState:
    """Position in the group tree. ``group_id`` of None is the root."""

    group_id: int | None = None
    name: str = ROOT_NAME

    @property
    def at_root(self) -> bool:
        return self.group_id is None


@dataclass(frozen=True)
class History:
    """Immutable stack of the states above the current one.

    Depth always equals the distance of the current state from the root.
    """

    entries: tuple[NavigationState, ...] = field(default_factory=tuple)

    def push(self, state: NavigationState) -> History:
        return History(self.entries + (state,))

    def pop(self) -> tuple[NavigationState, History]:
        if not self.entries:
            raise IndexError("pop from empty history")
        return self.entries[-1], History(self.entries[:-1])

    @property
    def depth(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)
