"""Follow-up instructions printed after a successful scaffold."""

from __future__ import annotations

import os
from pathlib import Path

from create_luau_app.core.project_types import ProjectType
from create_luau_app.core.scaffold_request import ScaffoldRequest
from create_luau_app.helpers.helpers_logging import (
    print_command,
    print_info,
    print_success,
)

TOOLCHAIN_INSTALL_COMMAND = "aftman install"
LEGACY_CODEGEN_COMMAND = "lune setup"
TAURI_SUBFOLDER = "tauri"


def build_next_steps(request: ScaffoldRequest, destination: Path, cwd: Path) -> list[str]:
    """Return the shell commands the user should run next, in order."""
    package_manager = request.package_manager
    steps: list[str] = []

    if destination.resolve() != cwd.resolve():
        steps.append(f"cd {os.path.relpath(destination.resolve(), cwd.resolve())}")

    steps.append(package_manager.install_command)

    if request.project_type is ProjectType.LEGACY_TAURI_APP:
        steps.append(f"cd {TAURI_SUBFOLDER} && {package_manager.install_command}")

    steps.append(TOOLCHAIN_INSTALL_COMMAND)

    if request.project_type.is_legacy:
        steps.append(LEGACY_CODEGEN_COMMAND)

    return steps


def print_next_steps(request: ScaffoldRequest, destination: Path, cwd: Path) -> None:
    """Print the success banner followed by the next commands to run."""
    print_success("create-luau-app ran successfully")
    print_info(f"Created {request.project_type.value} '{request.name}' in {destination}")
    print_info("\n📝 Next steps:")
    for step in build_next_steps(request, destination, cwd):
        print_command(step)
