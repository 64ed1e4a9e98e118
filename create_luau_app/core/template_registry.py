"""Static mapping from project type to template repository.

The table lives in ``data/template-registry.yaml`` next to this package and is
read once per process. An empty URL marks a type that has nothing to clone.

Usage:
    >>> from create_luau_app.core.template_registry import get_template_url
    >>> get_template_url(ProjectType.APP)
    'https://github.com/HighFlowey/luau-web-template'
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from urllib.parse import urlparse

from create_luau_app.core.errors import TemplateRegistryError
from create_luau_app.core.project_types import ProjectType
from create_luau_app.helpers.yaml_loader import load_yaml_file

REGISTRY_PATH = Path(__file__).resolve().parent.parent / "data" / "template-registry.yaml"

_TEMPLATES_KEY = "templates"
_DOCS_KEY = "library_docs"
_URL_SCHEMES = ("https",)


def is_well_formed_url(url: str) -> bool:
    """Return True for an https URL with a host and a repository path."""
    parsed = urlparse(url)
    if parsed.scheme not in _URL_SCHEMES or not parsed.netloc:
        return False
    return parsed.path.strip("/") != ""


def _validate_templates(raw: object, source: Path) -> dict[ProjectType, str]:
    """Check the ``templates`` mapping covers every real project type."""
    if not isinstance(raw, dict):
        raise TemplateRegistryError(f"'{_TEMPLATES_KEY}' must be a mapping in {source}")

    templates: dict[ProjectType, str] = {}
    for project_type in ProjectType:
        if project_type is ProjectType.CANCEL:
            continue
        if project_type.value not in raw:
            raise TemplateRegistryError(
                f"No template defined for project type '{project_type.value}'"
            )
        url = raw[project_type.value]
        url = "" if url is None else str(url).strip()
        if url and not is_well_formed_url(url):
            raise TemplateRegistryError(
                f"Invalid template URL for '{project_type.value}': {url}"
            )
        templates[project_type] = url

    return templates


def load_registry(path: Path = REGISTRY_PATH) -> tuple[dict[ProjectType, str], str]:
    """Load and validate a registry file.

    Returns:
        Tuple of (project type -> URL table, library documentation URL)

    Raises:
        TemplateRegistryError: If the file is missing or incomplete
    """
    try:
        data = load_yaml_file(path)
    except (FileNotFoundError, TypeError) as e:
        raise TemplateRegistryError(str(e)) from e

    templates = _validate_templates(data.get(_TEMPLATES_KEY), path)
    docs_url = str(data.get(_DOCS_KEY) or "")
    return templates, docs_url


@lru_cache(maxsize=1)
def _bundled_registry() -> tuple[dict[ProjectType, str], str]:
    return load_registry(REGISTRY_PATH)


def get_template_url(project_type: ProjectType) -> str:
    """Return the repository URL for ``project_type`` ('' if nothing to clone)."""
    if project_type is ProjectType.CANCEL:
        raise TemplateRegistryError("The cancel entry has no template")
    templates, _docs_url = _bundled_registry()
    return templates[project_type]


def get_library_docs_url() -> str:
    """Return the documentation link shown for the library placeholder."""
    _templates, docs_url = _bundled_registry()
    return docs_url
