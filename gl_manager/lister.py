"""Non-interactive report of the whole accessible group tree."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from gl_manager.client import GitLabClient
from gl_manager.exceptions import GitLabError
from gl_manager.models import Group

T = TypeVar("T")

INDENT = "    "


def _fetch(fetch: Callable[[int], list[T]], group: Group, what: str) -> list[T]:
    try:
        return fetch(group.id)
    except GitLabError as e:
        logging.getLogger("gl-manager").error(f"Failed to fetch {what} for '{group.name}'. {e}")
        return []


def list_group(client: GitLabClient, group: Group, indent: str = "  ") -> None:
    """Print a group's projects, then each subgroup and its contents, depth first."""
    projects = _fetch(client.list_projects, group, "projects")
    if projects:
        print(f"{indent}Projects:")
        for project in projects:
            print(f"{indent}  - {project.name}")
    else:
        kind = "subgroup" if group.parent_id is not None else "group"
        print(f"{indent}No projects found in this {kind}.")

    subgroups = _fetch(client.list_subgroups, group, "subgroups")
    if not subgroups:
        print(f"{indent}No subgroups found.")
        return
    print(f"{indent}Subgroups:")
    for subgroup in subgroups:
        print(f"{indent}  - {subgroup.name}")
        list_group(client, subgroup, indent + INDENT)


def list_all(client: GitLabClient) -> None:
    logger = logging.getLogger("gl-manager")
    logger.info("Listing all groups, subgroups, and projects...")

    try:
        groups = client.list_top_level_groups()
    except GitLabError as e:
        logger.error(f"Failed to fetch groups. {e}")
        return
    if not groups:
        logger.warning("No groups found.")
        return

    print("Top-Level Groups:")
    for group in groups:
        print(f"Group: {group.name}")
        list_group(client, group)
        print()
