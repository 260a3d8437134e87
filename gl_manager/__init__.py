"""
gl-manager: An interactive CLI tool for browsing and managing a GitLab group tree.

Lists every accessible group, subgroup and project, navigates the tree with a
numbered menu, creates subgroups and projects, and clones projects with git.

Environment:
    GITLAB_TOKEN - GitLab Personal Access Token (required)
    GITLAB_URL   - GitLab instance URL (default: https://gitlab.com)
"""

from gl_manager.cli import main

__version__ = "0.1.0"
__all__ = ["main", "__version__"]
