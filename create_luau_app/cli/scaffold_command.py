#!/usr/bin/env python3
"""
Scaffold a new Luau project from one of the bundled template repositories.

Flow:
    1. Ask for project type, package manager, name and directory
    2. Check the destination is empty (or does not exist yet)
    3. Look up the template URL for the project type
    4. Shallow-clone the template into the destination
    5. Patch package.json / tauri.conf.json with the chosen name and manager
    6. Print the commands to run next

Any failure stops the run immediately. Nothing is rolled back: a failed
clone or patch can leave files behind that must be removed by hand.
"""

from __future__ import annotations

from pathlib import Path

from create_luau_app.cli.prompts import collect_request
from create_luau_app.cli.reporter import print_next_steps
from create_luau_app.core.clone import clone_template
from create_luau_app.core.config_patcher import patch_project
from create_luau_app.core.errors import DestinationNotEmptyError, ScaffoldError
from create_luau_app.core.scaffold_request import ScaffoldRequest
from create_luau_app.core.template_registry import get_template_url
from create_luau_app.helpers.directory_check import is_empty
from create_luau_app.helpers.helpers_logging import print_info, print_warning


def scaffold(request: ScaffoldRequest, cwd: Path) -> Path | None:
    """Clone and patch the template described by ``request``.

    Returns:
        The destination path, or None when the project type has no template

    Raises:
        ScaffoldError: On any validation, clone or patch failure
    """
    destination = request.resolve_destination(cwd)

    if not is_empty(destination):
        raise DestinationNotEmptyError("The project directory must be empty")

    url = get_template_url(request.project_type)
    if not url:
        print_warning(f"No template to clone for '{request.project_type.value}'")
        return None

    print_info(f"\n📦 Cloning {url} ...")
    clone_template(url, destination)

    print_info("\n🔧 Updating project configuration...")
    patch_project(request, destination)

    return destination


def main() -> int:
    """Run the interactive scaffold and return an exit code."""
    cwd = Path.cwd()
    try:
        request = collect_request()
        destination = scaffold(request, cwd)
    except ScaffoldError as e:
        e.print_error()
        return 1

    if destination is not None:
        print_next_steps(request, destination, cwd)
    return 0
