"""Shared fixtures for end-to-end CLI tests.

Every CLI e2e test gets an isolated temporary directory to work in, so tests
never pollute each other or the real workspace.

Tests drive the real ``create-luau-app`` click command through
``click.testing.CliRunner``, feeding menu choices and text answers on stdin
exactly as a user would type them. The only thing replaced is the git
subprocess: ``fake_git`` records the clone command and lays out the template
files in the destination instead of reaching the network.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner, Result

from create_luau_app.core.project_types import ProjectType
from create_luau_app.core.template_registry import get_template_url
from tests.conftest import MakeTemplate

RunCreate = Callable[..., Result]

# Menu positions (1-based), in declaration order.
TYPE_CHOICES: dict[ProjectType, int] = {t: i for i, t in enumerate(ProjectType, 1)}


class FakeGit:
    """Records clone invocations and materializes the matching template."""

    def __init__(self, make_template: MakeTemplate) -> None:
        self._make_template = make_template
        self.calls: list[list[str]] = []
        self.returncode = 0

    def __call__(self, cmd: list[str], **_kwargs: object) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(cmd))
        if self.returncode != 0:
            raise subprocess.CalledProcessError(self.returncode, cmd)

        url, destination = cmd[-2], Path(cmd[-1])
        for project_type in ProjectType:
            if project_type is ProjectType.CANCEL:
                continue
            if get_template_url(project_type) == url:
                self._make_template(project_type, destination)
                break
        return subprocess.CompletedProcess(cmd, 0, "", "")


@pytest.fixture()
def fake_git(make_template: MakeTemplate) -> Iterator[FakeGit]:
    """Replace the git subprocess with a ``FakeGit`` for the whole test."""
    git = FakeGit(make_template)
    with patch("create_luau_app.core.clone.subprocess.run", side_effect=git):
        yield git


@pytest.fixture()
def run_create(isolated_project: Path) -> RunCreate:
    """Return a helper that runs ``create-luau-app`` with the given answers.

    Usage in tests::

        def test_app(run_create: RunCreate) -> None:
            result = run_create("1", "1", "my-app", ".")
            assert result.exit_code == 0

    Returns:
        A callable ``(*answers) -> click.testing.Result``.
    """
    from create_luau_app.cli.commands import _click_cli

    def _run(*answers: str) -> Result:
        runner = CliRunner()
        stdin = "".join(f"{answer}\n" for answer in answers)
        return runner.invoke(_click_cli, [], input=stdin)

    return _run
