"""Core scaffolding logic: templates, cloning and config patching."""

from create_luau_app.core.clone import clone_template
from create_luau_app.core.config_patcher import patch_project
from create_luau_app.core.project_types import PackageManager, ProjectType
from create_luau_app.core.scaffold_request import ScaffoldRequest
from create_luau_app.core.template_registry import get_template_url

__all__ = [
    "PackageManager",
    "ProjectType",
    "ScaffoldRequest",
    "clone_template",
    "get_template_url",
    "patch_project",
]
