"""Pytest fixtures for release orchestrator tests.

Provides common fixtures for:
- Temporary project directories shaped like the Material repository
- Default configuration with RELEASE env overrides removed
- Git repository setup
- A recording command runner that stands in for bash
"""

import json
import os
import subprocess
from collections.abc import Generator
from pathlib import Path

import pytest

from material_release.config.models import ReleaseConfig
from material_release.context import ReleaseContext
from material_release.utils.shell import ShellError
from material_release.version import parse_version


class RecordingRunner:
    """Command runner that records commands instead of executing them.

    Commands containing a key of ``fail_on`` fail with the mapped exit code.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, Path]] = []
        self.fail_on: dict[str, int] = {}

    def __call__(self, cmd: str, cwd: Path) -> str | ShellError:
        self.calls.append((cmd, cwd))
        for fragment, returncode in self.fail_on.items():
            if fragment in cmd:
                return ShellError(cmd=cmd, returncode=returncode, stdout="", stderr="boom")
        return ""

    @property
    def commands(self) -> list[str]:
        return [cmd for cmd, _ in self.calls]


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Temporarily remove MATERIAL_RELEASE_* environment variables."""
    old_env = {}
    for key in list(os.environ.keys()):
        if key.startswith("MATERIAL_RELEASE_"):
            old_env[key] = os.environ.pop(key)

    yield

    os.environ.update(old_env)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a temporary project directory.

    Returns:
        Path to project directory
    """
    project = tmp_path / "material"
    project.mkdir()
    return project


@pytest.fixture
def material_project(project_dir: Path) -> Path:
    """Create a project with package.json at 0.9.6 and already-cloned mirrors.

    Returns:
        Path to project directory
    """
    package_json = {
        "name": "angular-material",
        "version": "0.9.6",
        "description": "The Angular Material project",
        "scripts": {"test": "karma start"},
    }
    (project_dir / "package.json").write_text(json.dumps(package_json, indent=2))
    (project_dir / "CHANGELOG.md").write_text("# 0.9.6\n")

    bower = project_dir / "bower-material"
    bower.mkdir()
    (bower / "package.json").write_text(json.dumps({"name": "angular-material", "version": "0.9.6"}))
    (bower / "bower.json").write_text(json.dumps({"name": "angular-material", "version": "0.9.6"}))

    site = project_dir / "code.material.angularjs.org"
    site.mkdir()
    (site / "docs.json").write_text(json.dumps({"versions": ["0.9.6", "0.9.5"], "latest": "0.9.6"}))

    return project_dir


@pytest.fixture
def git_repo(project_dir: Path) -> Path:
    """Create a git repository with one commit in the project directory.

    Returns:
        Path to git repository
    """
    for cmd in (
        ["git", "init", "-q"],
        ["git", "config", "user.email", "test@test.com"],
        ["git", "config", "user.name", "Test User"],
    ):
        subprocess.run(cmd, cwd=project_dir, capture_output=True, check=True)

    (project_dir / "README.md").write_text("material\n")
    subprocess.run(["git", "add", "."], cwd=project_dir, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-q", "-m", "Initial commit"],
        cwd=project_dir,
        capture_output=True,
        check=True,
    )
    return project_dir


@pytest.fixture
def release_config(clean_env: None) -> ReleaseConfig:
    """Return the default configuration."""
    return ReleaseConfig()


@pytest.fixture
def release_context(material_project: Path, release_config: ReleaseConfig) -> ReleaseContext:
    """Return a context for releasing from 0.9.6; new_version is unset."""
    return ReleaseContext(
        project_root=material_project,
        config=release_config,
        old_version=parse_version("0.9.6"),
    )


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()
