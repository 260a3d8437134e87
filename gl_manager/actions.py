"""Interactive create and clone flows shared by the navigator."""

from __future__ import annotations

import logging
from typing import Sequence

from gl_manager.client import GitLabClient
from gl_manager.exceptions import GitLabError
from gl_manager.git import Cloner, git_clone
from gl_manager.logging_utils import success
from gl_manager.models import CloneProtocol, Group, Project, Visibility
from gl_manager.prompts import InputFunc, ask, ask_yes_no, parse_choice, print_numbered

VISIBILITY_HINT = ", ".join(v.value for v in Visibility)


class GroupActions:
    """Create subgroups and projects, and clone projects, prompting for the details."""

    def __init__(
        self,
        client: GitLabClient,
        input_func: InputFunc = input,
        cloner: Cloner = git_clone,
        protocol: CloneProtocol = CloneProtocol.SSH,
    ):
        self.client = client
        self.input = input_func
        self.cloner = cloner
        self.protocol = protocol
        self.logger = logging.getLogger("gl-manager")

    # -- Creation --

    def create_subgroup(self, parent_id: int | None) -> Group | None:
        name = ask(self.input, "Enter subgroup name: ")
        description = ask(self.input, "Enter subgroup description (optional): ")
        visibility = ask(self.input, f"Enter subgroup visibility ({VISIBILITY_HINT}): ")

        try:
            group = self.client.create_subgroup(parent_id, name, description=description, visibility=visibility)
        except GitLabError as e:
            self.logger.error(f"Failed to create subgroup. {e}")
            return None
        success(self.logger, f"Subgroup '{group.name}' created successfully.")
        return group

    def create_project(self, group_id: int | None) -> Project | None:
        name = ask(self.input, "Enter project name: ")
        description = ask(self.input, "Enter project description: ")
        visibility = ask(self.input, f"Enter project visibility ({VISIBILITY_HINT}): ")
        include_readme = ask_yes_no(self.input, "Do you want to include a README.md file?")
        auto_devops = ask_yes_no(self.input, "Enable Auto DevOps for this repository?")
        ci_config_path = ask(self.input, "Specify a CI/CD config path (leave empty for default): ")

        try:
            project = self.client.create_project(
                group_id,
                name,
                description=description,
                visibility=visibility,
                initialize_with_readme=include_readme,
                auto_devops_enabled=auto_devops,
                ci_config_path=ci_config_path,
            )
        except GitLabError as e:
            self.logger.error(f"Failed to create repository. {e}")
            return None
        success(self.logger, f"Repository '{project.name}' created successfully.")
        print(f"Clone using HTTPS: git clone {project.http_url}")
        print(f"Clone using SSH: git clone {project.ssh_url}")
        return project

    # -- Cloning --

    def clone(self, project: Project) -> bool:
        url = project.clone_url(self.protocol)
        if not url:
            try:
                url = self.client.get_project(project.id).clone_url(self.protocol)
            except GitLabError as e:
                self.logger.error(f"Failed to look up clone URL for '{project.name}'. {e}")
                return False
        if not url:
            self.logger.error(f"Project '{project.name}' has no {self.protocol.value} clone URL.")
            return False
        success(self.logger, f"Cloning project {project.path_with_namespace or project.name}: {url}")
        return self.cloner(url)

    def choose_and_clone(self, projects: Sequence[Project]) -> bool:
        """List projects numbered from 1 and clone the chosen one. 0 cancels."""
        if not projects:
            self.logger.warning("No projects available in the current group.")
            return False

        self.logger.info("Available Projects:")
        print_numbered([p.name for p in projects])
        raw = ask(self.input, "Choose a project to clone (0 to cancel): ")
        choice = parse_choice(raw, 0, len(projects))
        if choice is None:
            self.logger.error("Invalid choice. Please try again.")
            return False
        if choice == 0:
            self.logger.info("Cloning canceled.")
            return False
        return self.clone(projects[choice - 1])
