#!/usr/bin/env python3
"""
YAML loader for the bundled configuration files.
Provides a validated ruamel.yaml instance with proper type hints.
"""

from pathlib import Path
from typing import Protocol, TextIO, Union, cast

from ruamel.yaml import YAML

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]


class YAMLLoader(Protocol):
    """Protocol for the YAML loader used by the registry."""

    def load(self, stream: TextIO) -> ConfigValue:
        """Load YAML from stream."""
        ...


def _validate_yaml_loader(obj: object) -> None:
    """Runtime validation: Ensure YAML object has expected interface.

    Raises:
        AttributeError: If required attributes/methods are missing
        TypeError: If load is not callable
    """
    if not hasattr(obj, 'load'):
        raise AttributeError("YAML object missing required attribute: load")

    if not callable(obj.load):  # type: ignore[attr-defined]
        raise TypeError("YAML.load is not callable")


def _create_yaml_loader() -> YAMLLoader:
    """Create and validate YAML loader instance."""
    yaml_obj = YAML(typ='safe')

    _validate_yaml_loader(yaml_obj)

    return cast(YAMLLoader, yaml_obj)


# Singleton loader instance
yaml: YAMLLoader = _create_yaml_loader()


def load_yaml_file(file_path: Path) -> ConfigDict:
    """Load a YAML mapping from disk.

    The safe loader returns plain dicts and lists.

    Args:
        file_path: Path to YAML file to load

    Returns:
        Configuration dictionary loaded from YAML (empty if the file is empty)

    Raises:
        FileNotFoundError: If file does not exist
        TypeError: If the document root is not a mapping
    """
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with file_path.open(encoding='utf-8') as f:
        raw: ConfigValue = yaml.load(f)

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise TypeError(f"Expected a mapping at the root of {file_path}")
    return cast(ConfigDict, raw)
