"""Helper utilities for the scaffolding CLI."""

from create_luau_app.helpers.directory_check import is_empty
from create_luau_app.helpers.yaml_loader import load_yaml_file

__all__ = ["is_empty", "load_yaml_file"]
