"""GitLab API client with typed deserialization."""

from __future__ import annotations

import logging
from typing import Any

import requests

from gl_manager.exceptions import GitLabAPIError, MalformedResponseError
from gl_manager.models import API_V4, PER_PAGE, Group, Project, path_from_name


class GitLabClient:
    """Thin wrapper around GitLab REST API v4 for browsing and creating groups and projects.

    Every call is a single request: no retries, no caching.
    """

    def __init__(self, base_url: str, token: str):
        self.base_url = base_url.rstrip("/")
        self.api_url = f"{self.base_url}{API_V4}"
        self.session = requests.Session()
        self.session.headers.update(
            {
                "PRIVATE-TOKEN": token,
                "Content-Type": "application/json",
            }
        )
        self.logger = logging.getLogger("gl-manager")

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Make one HTTP request, raising GitLabAPIError on transport failure or error status."""
        url = f"{self.api_url}{endpoint}"
        self.logger.debug(f"{method.upper()} {url} {kwargs.get('params', '')} {kwargs.get('json', '')}")
        try:
            resp = self.session.request(method, url, **kwargs)
        except requests.exceptions.ConnectionError as e:
            raise GitLabAPIError(f"Could not reach {self.base_url}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise GitLabAPIError(f"Request to {url} failed: {e}") from e

        self.logger.debug(f"Raw response ({resp.status_code}): {resp.text[:500]}")

        if resp.status_code >= 400:
            raise GitLabAPIError(
                f"API error {resp.status_code}: {self._error_message(resp)}",
                status_code=resp.status_code,
            )
        return resp

    @staticmethod
    def _error_message(resp: requests.Response) -> str:
        """Pull GitLab's 'message' or 'error' field out of an error body."""
        try:
            body = resp.json()
        except ValueError:
            return resp.text[:500]
        if isinstance(body, dict):
            detail = body.get("message") or body.get("error") or body
            return str(detail)
        return str(body)

    @staticmethod
    def _decode(resp: requests.Response, expected: type) -> Any:
        """Parse a response body as JSON of the expected top-level type."""
        try:
            data = resp.json()
        except ValueError:
            raise MalformedResponseError("API response is not valid JSON.", body=resp.text) from None
        if not isinstance(data, expected):
            raise MalformedResponseError(
                f"Expected a JSON {expected.__name__}, got {type(data).__name__}.", body=resp.text
            )
        return data

    def get(self, endpoint: str, params: dict | None = None) -> dict:
        return self._decode(self._request("GET", endpoint, params=params), dict)

    def post(self, endpoint: str, data: dict | None = None) -> dict:
        return self._decode(self._request("POST", endpoint, json=data), dict)

    def paginate(self, endpoint: str, params: dict | None = None) -> list[dict]:
        """Fetch all pages of a paginated endpoint."""
        params = dict(params or {})
        params.setdefault("per_page", PER_PAGE)
        page = 1
        results = []
        while True:
            params["page"] = page
            resp = self._request("GET", endpoint, params=params)
            data = self._decode(resp, list)
            if not data:
                break
            results.extend(data)
            # Check if there are more pages
            header = resp.headers.get("x-total-pages", str(page))
            try:
                total_pages = int(header)
            except ValueError:
                raise MalformedResponseError(f"Invalid x-total-pages header: {header!r}", body=resp.text) from None
            if page >= total_pages:
                break
            page += 1
        return results

    # -- Typed deserialization --

    @staticmethod
    def _groups(items: list) -> list[Group]:
        try:
            return [Group.from_api(item) for item in items]
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedResponseError(f"Unexpected group entry in API response: {e!r}") from None

    @staticmethod
    def _projects(items: list) -> list[Project]:
        try:
            return [Project.from_api(item) for item in items]
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedResponseError(f"Unexpected project entry in API response: {e!r}") from None

    # -- Reads --

    def list_top_level_groups(self) -> list[Group]:
        return self._groups(self.paginate("/groups", params={"top_level_only": True}))

    def list_subgroups(self, group_id: int) -> list[Group]:
        return self._groups(self.paginate(f"/groups/{group_id}/subgroups"))

    def list_projects(self, group_id: int) -> list[Project]:
        return self._projects(self.paginate(f"/groups/{group_id}/projects", params={"include_subgroups": False}))

    def get_project(self, project_id: int) -> Project:
        """Get project details by ID."""
        return self._projects([self.get(f"/projects/{project_id}")])[0]

    # -- Writes --

    def create_subgroup(
        self,
        parent_id: int | None,
        name: str,
        description: str = "",
        visibility: str = "private",
    ) -> Group:
        """Create a group under parent_id, or a top-level group when parent_id is None."""
        payload: dict[str, Any] = {
            "name": name,
            "path": path_from_name(name),
            "description": description,
            "visibility": visibility,
        }
        if parent_id is not None:
            payload["parent_id"] = parent_id
        return self._groups([self.post("/groups", data=payload)])[0]

    def create_project(
        self,
        group_id: int | None,
        name: str,
        description: str = "",
        visibility: str = "private",
        initialize_with_readme: bool = False,
        auto_devops_enabled: bool = False,
        ci_config_path: str = "",
    ) -> Project:
        """Create a project in group_id, or in the user's namespace when group_id is None."""
        payload: dict[str, Any] = {
            "name": name,
            "path": path_from_name(name),
            "description": description,
            "visibility": visibility,
            "initialize_with_readme": initialize_with_readme,
            "auto_devops_enabled": auto_devops_enabled,
        }
        if group_id is not None:
            payload["namespace_id"] = group_id
        if ci_config_path:
            payload["ci_config_path"] = ci_config_path
        return self._projects([self.post("/projects", data=payload)])[0]
