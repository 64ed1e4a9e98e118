"""User input accumulated by the prompt flow."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from create_luau_app.core.project_types import PackageManager, ProjectType

DEFAULT_PROJECT_NAME = "my_luau_app"
DEFAULT_DIRECTORY = "."


@dataclass(frozen=True)
class ScaffoldRequest:
    """Answers collected from the user.

    Attributes:
        project_type: Template kind to clone.
        package_manager: Manager used in generated scripts and hints.
        name: Project name written into package.json.
        directory: Destination, relative to the working directory.
    """

    project_type: ProjectType
    package_manager: PackageManager
    name: str
    directory: str = DEFAULT_DIRECTORY

    def resolve_destination(self, cwd: Path | None = None) -> Path:
        """Return the absolute destination path for this request."""
        base = cwd if cwd is not None else Path.cwd()
        return (base / (self.directory or DEFAULT_DIRECTORY)).resolve()
