"""Shared test fixtures for gl-manager tests."""

import logging
import sys
from pathlib import Path
from typing import Any

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gl_manager.actions import GroupActions
from gl_manager.client import GitLabClient
from gl_manager.navigator import Navigator

# Constants for use in tests - pytest makes conftest.py fixtures available,
# but these constants need to be imported directly from tests
MOCK_GITLAB_URL = "https://gitlab.example.com"
MOCK_API_URL = f"{MOCK_GITLAB_URL}/api/v4"


class ScriptedInput:
    """Stands in for input(): returns queued answers, then raises EOFError."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("no more scripted input")
        return self.answers.pop(0)


class RecordingCloner:
    """Stands in for git_clone(): records URLs instead of running git."""

    def __init__(self, result: bool = True):
        self.result = result
        self.urls: list[str] = []

    def __call__(self, url: str) -> bool:
        self.urls.append(url)
        return self.result


def group_json(group_id: int, name: str, parent_id: int | None = None) -> dict[str, Any]:
    path = name.lower().replace(" ", "-")
    return {
        "id": group_id,
        "name": name,
        "parent_id": parent_id,
        "full_path": path,
        "web_url": f"{MOCK_GITLAB_URL}/groups/{path}",
    }


def project_json(project_id: int, name: str, namespace_path: str = "org") -> dict[str, Any]:
    return {
        "id": project_id,
        "name": name,
        "path_with_namespace": f"{namespace_path}/{name}",
        "ssh_url_to_repo": f"git@gitlab.example.com:{namespace_path}/{name}.git",
        "http_url_to_repo": f"{MOCK_GITLAB_URL}/{namespace_path}/{name}.git",
        "web_url": f"{MOCK_GITLAB_URL}/{namespace_path}/{name}",
        "namespace": {"id": 1, "full_path": namespace_path},
    }


@pytest.fixture
def mock_client():
    """GitLabClient pointing at mock server."""
    return GitLabClient(MOCK_GITLAB_URL, "test-token")


@pytest.fixture
def cloner():
    return RecordingCloner()


@pytest.fixture
def make_navigator(mock_client, cloner):
    """Build a Navigator whose prompts and clones are scripted."""

    def _make(*answers: str) -> Navigator:
        scripted = ScriptedInput(*answers)
        actions = GroupActions(mock_client, input_func=scripted, cloner=cloner)
        return Navigator(mock_client, actions, input_func=scripted)

    return _make


@pytest.fixture
def nested_group_structure() -> dict[str, Any]:
    """Three levels of groups with projects for listing tests."""
    return {
        "top_level": [group_json(1, "org")],
        "subgroups": {
            1: [group_json(2, "team-a", parent_id=1)],
            2: [group_json(3, "deep", parent_id=2)],
            3: [],
        },
        "projects": {
            1: [project_json(10, "shared")],
            2: [project_json(11, "service", "org/team-a")],
            3: [],
        },
    }


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers setup_logging() attached to stream objects of an earlier test."""
    yield
    logger = logging.getLogger("gl-manager")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
