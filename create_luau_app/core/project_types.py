"""Project types and package managers offered by the prompt menus."""

from __future__ import annotations

from enum import Enum


class ProjectType(Enum):
    """Kind of project to scaffold, in menu order."""

    APP = "app"
    LEGACY_ELECTRON_APP = "legacy-electron-app"
    LEGACY_TAURI_APP = "legacy-tauri-app"
    LIBRARY = "library"
    CANCEL = "cancel"

    @property
    def is_legacy(self) -> bool:
        """Whether this type clones one of the older Lune templates."""
        return self in (ProjectType.LEGACY_ELECTRON_APP, ProjectType.LEGACY_TAURI_APP)


class PackageManager(Enum):
    """JavaScript package manager used in the generated commands."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"
    CANCEL = "cancel"

    @property
    def install_command(self) -> str:
        """Command that installs the project dependencies."""
        return f"{self.value} install"

    @property
    def run_prefix(self) -> str:
        """Prefix used to invoke a package.json script (``<prefix> dev``)."""
        return _RUN_PREFIXES[self]


_RUN_PREFIXES: dict[PackageManager, str] = {
    PackageManager.NPM: "npm run",
    PackageManager.PNPM: "pnpm",
    PackageManager.YARN: "yarn",
    PackageManager.BUN: "bun run",
    PackageManager.CANCEL: "",
}

PROJECT_TYPES: list[ProjectType] = list(ProjectType)
PACKAGE_MANAGERS: list[PackageManager] = list(PackageManager)
