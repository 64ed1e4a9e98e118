"""Rewrite the JSON configuration files of a freshly cloned template.

Each template ships one or more JSON files that still carry the template's
own name and scripts. After cloning, the files owned by the selected project
type are loaded, a fixed set of fields is overwritten, and the document is
written back. Every other field is left untouched.

| Project type        | Files                                                    |
|---------------------|----------------------------------------------------------|
| app                 | package.json (name, yarn scripts)                        |
| legacy-electron-app | package.json (metadata)                                  |
| legacy-tauri-app    | package.json, tauri/package.json, tauri.conf.json        |
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from create_luau_app.core.errors import ConfigPatchError
from create_luau_app.core.project_types import PackageManager, ProjectType
from create_luau_app.core.scaffold_request import ScaffoldRequest

JsonDocument = dict[str, Any]

PACKAGE_JSON = Path("package.json")
TAURI_PACKAGE_JSON = Path("tauri") / "package.json"
TAURI_CONFIG = Path("tauri") / "src-tauri" / "tauri.conf.json"

LEGACY_INDENT = "\t"
APP_INDENT = 2

DEFAULT_VERSION = "1.0.0"
SCRIPT_MARKER = "yarn"
_YARN_COMMAND_RE = re.compile(r"yarn(?P<args>\s+(?P<script>[^\s;&|]+))?")


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json_document(file_path: Path) -> JsonDocument:
    """Read a JSON object from disk.

    Raises:
        ConfigPatchError: If the file is missing, unparsable or not an object
    """
    try:
        raw: object = json.loads(file_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigPatchError(f"Template file not found: {file_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigPatchError(f"Invalid JSON in {file_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigPatchError(f"Expected a JSON object in {file_path}")
    return raw


def write_json_document(
    file_path: Path,
    document: JsonDocument,
    indent: str | int = LEGACY_INDENT,
) -> None:
    """Serialize ``document`` back to ``file_path`` with stable indentation."""
    content = json.dumps(document, indent=indent, ensure_ascii=False)
    file_path.write_text(content + "\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# Field rewrites (pure, operate on loaded documents)
# ---------------------------------------------------------------------------


def apply_package_metadata(document: JsonDocument, name: str) -> JsonDocument:
    """Reset package.json metadata so the template reads as a new project."""
    document["name"] = name
    document["description"] = ""
    document["version"] = DEFAULT_VERSION
    document["author"] = ""
    document.pop("license", None)
    return document


def rewrite_scripts(
    scripts: dict[str, Any],
    package_manager: PackageManager,
) -> dict[str, Any]:
    """Replace every literal 'yarn' in script values with the manager's name.

    ``yarn <script>`` where ``<script>`` is a key of ``scripts`` becomes the
    manager's script invocation (``npm run dev``); any other occurrence
    (``yarn install``, ``yarn add``) becomes the bare manager name.
    Scripts that do not mention yarn, and non-string values, are kept as is.
    """
    script_names = set(scripts)

    def _replace(match: re.Match[str]) -> str:
        args = match.group("args") or ""
        if match.group("script") in script_names:
            return f"{package_manager.run_prefix}{args}"
        return f"{package_manager.value}{args}"

    rewritten: dict[str, Any] = {}
    for key, value in scripts.items():
        if isinstance(value, str) and SCRIPT_MARKER in value:
            rewritten[key] = _YARN_COMMAND_RE.sub(_replace, value)
        else:
            rewritten[key] = value
    return rewritten


def apply_tauri_settings(
    document: JsonDocument,
    name: str,
    package_manager: PackageManager,
) -> JsonDocument:
    """Set productName and the before-dev/build commands of a tauri config."""
    package_section = document.get("package")
    if isinstance(package_section, dict):
        package_section["productName"] = name
    else:
        document["productName"] = name

    build_section = document.get("build")
    if not isinstance(build_section, dict):
        build_section = {}
        document["build"] = build_section
    build_section["beforeDevCommand"] = f"{package_manager.run_prefix} dev"
    build_section["beforeBuildCommand"] = f"{package_manager.run_prefix} build"
    return document


# ---------------------------------------------------------------------------
# File-level patches
# ---------------------------------------------------------------------------


def patch_package_json(file_path: Path, name: str) -> None:
    """Rewrite the metadata of a legacy template's package.json."""
    document = load_json_document(file_path)
    apply_package_metadata(document, name)
    write_json_document(file_path, document, LEGACY_INDENT)


def patch_app_package_json(
    file_path: Path,
    name: str,
    package_manager: PackageManager,
) -> None:
    """Rename the web template and point its yarn scripts at the chosen manager."""
    document = load_json_document(file_path)
    document["name"] = name
    scripts = document.get("scripts")
    if isinstance(scripts, dict):
        document["scripts"] = rewrite_scripts(scripts, package_manager)
    write_json_document(file_path, document, APP_INDENT)


def patch_tauri_config(
    file_path: Path,
    name: str,
    package_manager: PackageManager,
) -> None:
    """Rewrite tauri.conf.json for the new project."""
    document = load_json_document(file_path)
    apply_tauri_settings(document, name, package_manager)
    write_json_document(file_path, document, LEGACY_INDENT)


def patch_project(request: ScaffoldRequest, destination: Path) -> list[Path]:
    """Patch every JSON file owned by the request's project type.

    Returns:
        The files that were rewritten, in patch order

    Raises:
        ConfigPatchError: If any owned file is missing or malformed
    """
    project_type = request.project_type
    patched: list[Path] = []

    if project_type is ProjectType.APP:
        target = destination / PACKAGE_JSON
        patch_app_package_json(target, request.name, request.package_manager)
        patched.append(target)

    elif project_type is ProjectType.LEGACY_ELECTRON_APP:
        target = destination / PACKAGE_JSON
        patch_package_json(target, request.name)
        patched.append(target)

    elif project_type is ProjectType.LEGACY_TAURI_APP:
        for relative in (PACKAGE_JSON, TAURI_PACKAGE_JSON):
            target = destination / relative
            patch_package_json(target, request.name)
            patched.append(target)
        target = destination / TAURI_CONFIG
        patch_tauri_config(target, request.name, request.package_manager)
        patched.append(target)

    return patched
