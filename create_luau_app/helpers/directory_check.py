"""Destination directory validation."""

from pathlib import Path


def is_empty(directory: Path | str) -> bool:
    """Return True if ``directory`` can receive a fresh scaffold.

    A path is usable when it does not exist yet, or when it is a directory
    with no entries at all (hidden files count as entries).
    """
    path = Path(directory)
    if not path.exists():
        return True
    if not path.is_dir():
        return False
    return next(path.iterdir(), None) is None
