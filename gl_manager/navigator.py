"""Interactive navigation of the group tree.

Each pass fetches the children of the current position, renders them as a
numbered menu followed by the fixed actions, reads one choice and applies it.
The menu is a list of tagged entries rebuilt on every pass, so a slot number
is simply a list position.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from gl_manager.actions import GroupActions
from gl_manager.client import GitLabClient
from gl_manager.exceptions import GitLabError
from gl_manager.logging_utils import success
from gl_manager.models import Group, History, NavigationState, Project
from gl_manager.prompts import InputFunc, ask, parse_choice


class ActionKind(Enum):
    OPEN_GROUP = "open_group"
    OPEN_PROJECT = "open_project"
    CLONE_OR_CREATE = "clone_or_create"
    CREATE_SUBGROUP = "create_subgroup"
    GO_BACK = "go_back"
    CANCEL = "cancel"


FIXED_ACTIONS = (
    (ActionKind.CLONE_OR_CREATE, "Clone or Create a Project"),
    (ActionKind.CREATE_SUBGROUP, "Create a Subgroup"),
    (ActionKind.GO_BACK, "Go Back"),
    (ActionKind.CANCEL, "Cancel"),
)


@dataclass(frozen=True)
class MenuEntry:
    kind: ActionKind
    label: str
    group: Group | None = None
    project: Project | None = None


def build_menu(subgroups: Sequence[Group], projects: Sequence[Project]) -> list[MenuEntry]:
    """Subgroups first, then projects, then the four fixed actions."""
    entries = [MenuEntry(ActionKind.OPEN_GROUP, g.name, group=g) for g in subgroups]
    entries += [MenuEntry(ActionKind.OPEN_PROJECT, f"[Project] {p.name}", project=p) for p in projects]
    entries += [MenuEntry(kind, label) for kind, label in FIXED_ACTIONS]
    return entries


def render_menu(state: NavigationState, entries: Sequence[MenuEntry]) -> str:
    lines = [f"Available Groups and Projects in {state.name}:"]
    if not any(e.kind is ActionKind.OPEN_GROUP for e in entries):
        lines.append("No existing nested groups under this subgroup.")
    projects_heading_done = False
    for slot, entry in enumerate(entries, start=1):
        if entry.kind is ActionKind.OPEN_PROJECT and not projects_heading_done:
            lines.append("Projects:")
            projects_heading_done = True
        lines.append(f"{slot}. {entry.label}")
    return "\n".join(lines)


class Navigator:
    """Owns the current position and the history of positions above it."""

    def __init__(self, client: GitLabClient, actions: GroupActions, input_func: InputFunc = input):
        self.client = client
        self.actions = actions
        self.input = input_func
        self.state = NavigationState()
        self.history = History()
        self.logger = logging.getLogger("gl-manager")

    # -- State transitions --

    def descend(self, group: Group) -> None:
        self.history = self.history.push(self.state)
        self.state = NavigationState(group_id=group.id, name=group.name)

    def go_back(self) -> bool:
        if not self.history:
            self.logger.warning("You are already at the top level.")
            return False
        self.state, self.history = self.history.pop()
        return True

    # -- Fetching --

    def load_children(self) -> tuple[list[Group], list[Project]]:
        """Fetch the subgroups and projects at the current position.

        A failed or malformed fetch is reported and treated as an empty listing.
        """
        if self.state.at_root:
            try:
                return self.client.list_top_level_groups(), []
            except GitLabError as e:
                self.logger.error(f"Failed to fetch groups. {e}")
                return [], []

        try:
            subgroups = self.client.list_subgroups(self.state.group_id)
        except GitLabError as e:
            self.logger.error(f"Failed to fetch subgroups. {e}")
            subgroups = []
        try:
            projects = self.client.list_projects(self.state.group_id)
        except GitLabError as e:
            self.logger.error(f"Failed to fetch projects. {e}")
            projects = []
        return subgroups, projects

    # -- Loop --

    def run(self) -> None:
        while self.step():
            pass

    def step(self) -> bool:
        """Render the menu once and handle one choice. Returns False on Cancel."""
        subgroups, projects = self.load_children()
        entries = build_menu(subgroups, projects)
        print(render_menu(self.state, entries))

        choice = parse_choice(ask(self.input, "Choose an option: "), 1, len(entries))
        if choice is None:
            self.logger.error("Invalid choice. Please try again.")
            return True
        return self.dispatch(entries[choice - 1], projects)

    def dispatch(self, entry: MenuEntry, projects: Sequence[Project]) -> bool:
        if entry.kind is ActionKind.OPEN_GROUP:
            self.descend(entry.group)
        elif entry.kind is ActionKind.OPEN_PROJECT:
            self._project_menu(entry.project)
        elif entry.kind is ActionKind.CLONE_OR_CREATE:
            self._clone_or_create(projects)
        elif entry.kind is ActionKind.CREATE_SUBGROUP:
            self.actions.create_subgroup(self.state.group_id)
        elif entry.kind is ActionKind.GO_BACK:
            self.go_back()
        elif entry.kind is ActionKind.CANCEL:
            success(self.logger, "Exiting.")
            return False
        return True

    def _project_menu(self, project: Project) -> None:
        print(f"1. Clone Project: {project.name}")
        action = ask(self.input, "Choose an option (1 to clone, 0 to cancel): ")
        if action == "1":
            self.actions.clone(project)
        else:
            self.logger.info("Action canceled.")

    def _clone_or_create(self, projects: Sequence[Project]) -> None:
        if not projects:
            self.logger.info("No projects to clone. Creating a new project instead.")
            self.actions.create_project(self.state.group_id)
            return

        print("1. Clone a Project")
        print("2. Create a Project")
        sub_choice = ask(self.input, "Choose an option: ")
        if sub_choice == "1":
            self.actions.choose_and_clone(projects)
        elif sub_choice == "2":
            self.actions.create_project(self.state.group_id)
        else:
            self.logger.error("Invalid choice. Returning to menu.")
