"""Clone transport: a thin wrapper around the git executable."""

from __future__ import annotations

import logging
import subprocess
from typing import Callable

from gl_manager.logging_utils import success

Cloner = Callable[[str], bool]


def git_clone(url: str) -> bool:
    """Run ``git clone`` in the current directory. Returns True on success.

    git's own output is passed through to the terminal untouched.
    """
    logger = logging.getLogger("gl-manager")
    cmd = ["git", "clone", url]
    logger.debug(f"Running: {' '.join(cmd)}")
    try:
        proc = subprocess.run(cmd, check=False)
    except OSError as e:
        logger.error(f"Could not run git: {e}")
        return False
    if proc.returncode != 0:
        logger.error(f"git clone exited with status {proc.returncode}")
        return False
    success(logger, "Project cloned successfully.")
    return True
