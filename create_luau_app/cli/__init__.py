"""
CLI module for create-luau-app.

This module provides the command-line interface, including the main entry
point that is installed as the ``create-luau-app`` console script.
"""

from .commands import main

__all__ = ["main"]
