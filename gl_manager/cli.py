"""CLI entry point for gl-manager."""

from __future__ import annotations

import argparse
import os
import sys

from gl_manager.actions import GroupActions
from gl_manager.client import GitLabClient
from gl_manager.git import Cloner, git_clone
from gl_manager.lister import list_all
from gl_manager.logging_utils import setup_logging, success
from gl_manager.models import DEFAULT_GITLAB_URL, CloneProtocol
from gl_manager.navigator import Navigator
from gl_manager.prompts import InputFunc, ask, parse_choice, print_numbered

MAIN_MENU = (
    "List all Groups and Projects",
    "Create a Subgroup",
    "Clone or Create a Project",
    "Cancel",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gl-manager",
        description="Browse a GitLab group tree, create subgroups and projects, and clone projects.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
    GITLAB_TOKEN - GitLab Personal Access Token (required)
    GITLAB_URL   - GitLab instance URL (default: https://gitlab.com)
""",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging, including raw API responses")
    parser.add_argument(
        "--json", action="store_true", dest="json_output", help="Emit log messages as JSON lines (to stderr)"
    )
    parser.add_argument(
        "--gitlab-url", default=None, help="GitLab instance URL (default: from GITLAB_URL env or https://gitlab.com)"
    )
    parser.add_argument(
        "--clone-protocol",
        choices=[p.value for p in CloneProtocol],
        default=CloneProtocol.SSH.value,
        help="Which clone URL to use (default: ssh)",
    )
    return parser


def main_menu(client: GitLabClient, actions: GroupActions, input_func: InputFunc) -> int:
    logger = actions.logger
    while True:
        print("GitLab Management")
        print_numbered(MAIN_MENU)
        choice = parse_choice(ask(input_func, "Choose an option: "), 1, len(MAIN_MENU))
        if choice is None:
            logger.error("Invalid choice.")
            continue
        if choice == 1:
            list_all(client)
            return 0
        if choice in (2, 3):
            Navigator(client, actions, input_func=input_func).run()
            return 0
        success(logger, "Exiting.")
        return 0


def main(argv: list[str] | None = None, input_func: InputFunc = input, cloner: Cloner = git_clone) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Resolve GitLab URL
    gitlab_url = args.gitlab_url or os.environ.get("GITLAB_URL", DEFAULT_GITLAB_URL)

    # Get token
    token = os.environ.get("GITLAB_TOKEN")
    if not token:
        print("ERROR: GITLAB_TOKEN environment variable is not set.", file=sys.stderr)
        return 1

    logger = setup_logging(json_mode=args.json_output, verbose=args.verbose)
    logger.debug(f"Using GitLab instance {gitlab_url}")

    client = GitLabClient(base_url=gitlab_url, token=token)
    actions = GroupActions(
        client,
        input_func=input_func,
        cloner=cloner,
        protocol=CloneProtocol(args.clone_protocol),
    )

    try:
        return main_menu(client, actions, input_func)
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
