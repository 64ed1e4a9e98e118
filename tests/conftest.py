"""Shared fixtures and helpers for the create-luau-app test suite.

Provides an isolated working directory and a ``make_template`` factory that
lays out the JSON files each template repository ships, so tests can patch
a realistic clone without touching the network.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from create_luau_app.core.project_types import ProjectType

MakeTemplate = Callable[[ProjectType, Path], Path]

# ---------------------------------------------------------------------------
# Template contents
# ---------------------------------------------------------------------------

APP_PACKAGE_JSON: dict[str, Any] = {
    "name": "luau-web-template",
    "private": True,
    "scripts": {
        "dev": "yarn dev:luau && vite",
        "dev:luau": "darklua process src out",
        "build": "yarn build:luau && vite build",
        "build:luau": "darklua process src out",
        "preview": "vite preview",
    },
    "devDependencies": {"vite": "^5.0.0"},
}

LEGACY_PACKAGE_JSON: dict[str, Any] = {
    "name": "lune-electron-template",
    "description": "Electron template powered by Lune",
    "version": "0.3.2",
    "author": "HighFlowey",
    "license": "MIT",
    "main": "out/main.js",
    "scripts": {"start": "electron ."},
}

TAURI_CONFIG: dict[str, Any] = {
    "build": {
        "beforeDevCommand": "yarn dev",
        "beforeBuildCommand": "yarn build",
        "devPath": "http://localhost:1420",
        "distDir": "../dist",
    },
    "package": {"productName": "lune-tauri-template", "version": "0.0.0"},
    "tauri": {"allowlist": {"all": False}},
}


def write_json(file_path: Path, data: dict[str, Any]) -> Path:
    """Write ``data`` as JSON, creating parent directories."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return file_path


def read_json(file_path: Path) -> dict[str, Any]:
    """Read a JSON object from disk."""
    return json.loads(file_path.read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def isolated_project(tmp_path: Path) -> Iterator[Path]:
    """Create an isolated empty directory and cd into it.

    Yields:
        Path to the temporary working directory.

    After the test, the working directory is restored.
    """
    original_cwd = Path.cwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def make_template() -> MakeTemplate:
    """Return a factory that writes a template's JSON files under ``root``.

    Usage in tests::

        def test_patch(make_template: MakeTemplate, tmp_path: Path) -> None:
            root = make_template(ProjectType.APP, tmp_path / "proj")
    """

    def _make(project_type: ProjectType, root: Path) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        if project_type is ProjectType.APP:
            write_json(root / "package.json", APP_PACKAGE_JSON)
        elif project_type is ProjectType.LEGACY_ELECTRON_APP:
            write_json(root / "package.json", LEGACY_PACKAGE_JSON)
        elif project_type is ProjectType.LEGACY_TAURI_APP:
            write_json(root / "package.json", LEGACY_PACKAGE_JSON)
            write_json(root / "tauri" / "package.json", LEGACY_PACKAGE_JSON)
            write_json(root / "tauri" / "src-tauri" / "tauri.conf.json", TAURI_CONFIG)
        (root / "README.md").write_text("# template\n", encoding="utf-8")
        return root

    return _make
