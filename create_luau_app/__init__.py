"""
create-luau-app

An interactive scaffolding tool that clones a Luau project template and
prepares its configuration for a new project.
"""

__version__ = "0.1.0"

from create_luau_app.cli.commands import main

__all__ = [
    "main",
]
