"""Interactive prompts that build a ScaffoldRequest.

Steps run in a fixed order: project type, package manager, name, directory.
Picking ``cancel`` in a menu stops the whole run.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

import click

from create_luau_app.core.errors import ScaffoldCanceled, ScaffoldInputError
from create_luau_app.core.project_types import (
    PACKAGE_MANAGERS,
    PROJECT_TYPES,
    PackageManager,
    ProjectType,
)
from create_luau_app.core.scaffold_request import (
    DEFAULT_DIRECTORY,
    DEFAULT_PROJECT_NAME,
    ScaffoldRequest,
)
from create_luau_app.core.template_registry import get_library_docs_url
from create_luau_app.helpers.helpers_logging import Colors, print_header, print_link

OptionT = TypeVar("OptionT", bound=Enum)

_LIBRARY_NOT_IMPLEMENTED = (
    "Generator for library is not implemented yet, read how to create a library here: "
)


def prompt_select(prompt: str, options: list[OptionT]) -> OptionT:
    """Show a numbered menu and return the chosen option."""
    click.clear()
    print_header(prompt)
    for i, option in enumerate(options, 1):
        print(f"  {i}. {option.value}")

    choice: int = click.prompt(
        f"\nSelect (1-{len(options)})",
        type=click.IntRange(1, len(options)),
    )
    print()
    return options[choice - 1]


def prompt_project_type() -> ProjectType:
    """Ask which kind of project to scaffold.

    Raises:
        ScaffoldCanceled: On ``cancel``, or on ``library`` after printing
            where to read about creating a library by hand
    """
    project_type = prompt_select("Project type:", PROJECT_TYPES)
    if project_type is ProjectType.CANCEL:
        raise ScaffoldCanceled()
    if project_type is ProjectType.LIBRARY:
        print_link(_LIBRARY_NOT_IMPLEMENTED, get_library_docs_url())
        raise ScaffoldCanceled()
    return project_type


def prompt_package_manager() -> PackageManager:
    """Ask which package manager the generated commands should use."""
    package_manager = prompt_select("Package manager:", PACKAGE_MANAGERS)
    if package_manager is PackageManager.CANCEL:
        raise ScaffoldCanceled()
    return package_manager


def prompt_name() -> str:
    """Ask for the project name.

    Raises:
        ScaffoldInputError: If the answer is blank
    """
    name: str = click.prompt(
        f"{Colors.YELLOW}Project name{Colors.ENDC}",
        default=DEFAULT_PROJECT_NAME,
    )
    name = name.strip()
    if not name:
        raise ScaffoldInputError()
    return name


def prompt_directory(name: str) -> str:
    """Ask where to create the project; blank answers mean the current directory."""
    suggestions = ", ".join([DEFAULT_DIRECTORY, name])
    print(f"{Colors.DIM}Suggestions: {suggestions}{Colors.ENDC}")
    directory: str = click.prompt(
        f"{Colors.YELLOW}Project directory{Colors.ENDC}",
        default=DEFAULT_DIRECTORY,
    )
    return directory.strip() or DEFAULT_DIRECTORY


def collect_request() -> ScaffoldRequest:
    """Run every prompt and return the completed request."""
    project_type = prompt_project_type()
    package_manager = prompt_package_manager()
    name = prompt_name()
    directory = prompt_directory(name)
    return ScaffoldRequest(
        project_type=project_type,
        package_manager=package_manager,
        name=name,
        directory=directory,
    )
