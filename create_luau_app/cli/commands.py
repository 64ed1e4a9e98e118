#!/usr/bin/env python3
"""create-luau-app - Main Entry Point.

Usage:
    create-luau-app

Every setting is asked interactively: project type, package manager,
project name and project directory. The matching template is cloned into
the directory and its configuration files are updated for the new project.
"""

from __future__ import annotations

import sys

import click

from create_luau_app.cli.scaffold_command import main as scaffold_main

# Exit code used when the terminal aborts a prompt (Ctrl-C / EOF)
_ABORT_EXIT_CODE = 130


@click.command(name="create-luau-app")
@click.pass_context
def _click_cli(ctx: click.Context) -> None:
    """Scaffold a new Luau project from a template repository."""
    exit_code = scaffold_main()
    if exit_code != 0:
        ctx.exit(exit_code)


def main() -> int:
    """Main CLI entry point."""
    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="create-luau-app",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return _ABORT_EXIT_CODE
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
