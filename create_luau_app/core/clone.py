"""Shallow clone of a template repository."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from create_luau_app.core.errors import CloneError

GIT_ENV_VAR = "CREATE_LUAU_APP_GIT"
_DEFAULT_GIT = "git"


def get_git_executable() -> str:
    """Return the git binary to run (overridable through the environment)."""
    return os.environ.get(GIT_ENV_VAR) or _DEFAULT_GIT


def build_clone_command(url: str, destination: Path) -> list[str]:
    """Build the argv for a depth-1 clone of ``url`` into ``destination``."""
    return [get_git_executable(), "clone", "--depth", "1", url, str(destination)]


def clone_template(url: str, destination: Path) -> None:
    """Clone ``url`` into ``destination``, streaming git's output.

    Raises:
        CloneError: If git is missing or exits with a non-zero status
    """
    cmd = build_clone_command(url, destination)
    try:
        # No capture: git writes its progress straight to the user's terminal
        subprocess.run(cmd, check=True)
    except FileNotFoundError as e:
        raise CloneError(f"Git not found ({cmd[0]}). Please install git first.") from e
    except subprocess.CalledProcessError as e:
        raise CloneError(f"git clone failed with exit code {e.returncode}") from e
