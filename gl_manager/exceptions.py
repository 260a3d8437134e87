"""Exceptions raised by the gl-manager API client."""

from __future__ import annotations


class GitLabError(Exception):
    """Base class for every failure talking to GitLab."""


class MalformedResponseError(GitLabError):
    """The server answered with something that is not the expected JSON shape."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class GitLabAPIError(GitLabError):
    """The request failed: HTTP error status or a transport failure."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
