"""Pydantic v2 configuration models for release.yml.

These models provide:
- Type-safe configuration loading
- Automatic validation
- Default values matching the Angular Material release
- Environment variable override support
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class ProjectConfig(BaseModel):
    """Files of the repository being released."""

    name: str = Field(default="angular-material", description="Project name")
    manifest: str = Field(
        default="package.json",
        description="JSON manifest holding the version field",
    )
    changelog: str = Field(
        default="CHANGELOG.md",
        description="Changelog rewritten by the changelog command",
    )


class GitConfig(BaseModel):
    """Git workflow configuration."""

    trunk: str = Field(
        default="master",
        description="Branch releases are cut from",
    )
    origin: str = Field(
        default="https://github.com/angular/material.git",
        description="URL the release branch and trunk are pushed to",
    )
    organization_url: str = Field(
        default="https://github.com/angular",
        description="Base URL for mirror repositories without an explicit url",
    )
    release_branch_prefix: str = Field(
        default="release/",
        description="Prefix of the local release branch",
    )
    tag_prefix: str = Field(
        default="v",
        description="Prefix for git tags (e.g., 'v' for v1.0.0)",
    )
    clone_depth: int = Field(
        default=1,
        ge=1,
        description="Depth of mirror clones",
    )

    @field_validator("tag_prefix")
    @classmethod
    def validate_tag_prefix(cls, v: str) -> str:
        if v and not v.isalnum():
            raise ValueError("tag_prefix must be alphanumeric or empty")
        return v

    @field_validator("organization_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class NPMConfig(BaseModel):
    """npm registry configuration."""

    expected_user: str = Field(
        default="angularcore",
        description="Account that must be logged in (npm whoami)",
    )
    publish: bool = Field(
        default=True,
        description="Add 'npm publish' to the companion mirror push commands",
    )


class BuildConfig(BaseModel):
    """Commands invoked on the build and documentation pipeline."""

    changelog_command: str = Field(
        default="gulp changelog --sha=$(git merge-base {{tag_prefix}}{{old_version}} HEAD)",
        description="Regenerates the changelog since the previous release tag",
    )
    bower_build_commands: list[str] = Field(
        default_factory=lambda: [
            "rm -rf dist",
            "gulp build",
            "gulp build-all-modules --mode=default",
            "gulp build-all-modules --mode=closure",
            "rm -rf dist/demos",
            r"sed -i '' 's/\/rawgit\.com\/angular\/bower-material\/master\/angular-material\.js/"
            r"\/cdn.rawgit.com\/angular\/bower-material\/{{tag}}\/angular-material.js/' "
            "dist/docs/docs.js",
        ],
        description="Builds the companion package distributables into dist/",
    )
    docs_commands: list[str] = Field(
        default_factory=lambda: ["rm -rf dist", "gulp docs"],
        description="Builds the documentation site into dist/docs",
    )
    dist_dir: str = Field(default="dist", description="Build output directory")


class MirrorConfig(BaseModel):
    """An auxiliary repository updated alongside the release."""

    name: str = Field(description="Repository name, also the clone directory")
    kind: Literal["bower", "site"] = Field(description="How the mirror is updated")
    url: str | None = Field(
        default=None,
        description="Clone URL (defaults to <organization_url>/<name>.git)",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or "/" in v or v in (".", ".."):
            raise ValueError("mirror name must be a plain directory name")
        return v


class ScriptsConfig(BaseModel):
    """Generated script names."""

    abort: str = Field(default="abort", description="Rollback script name")
    push: str = Field(default="push", description="Finalize script name")
    shebang: str = Field(default="#!/usr/bin/env bash", description="Script interpreter line")


class PromptConfig(BaseModel):
    """Version prompt behaviour."""

    max_attempts: int = Field(
        default=10,
        ge=1,
        description="Invalid entries accepted before giving up",
    )


class SafetyConfig(BaseModel):
    """Command failure policy."""

    halt_on_command_failure: bool = Field(
        default=False,
        description="Stop the release at the first failing command",
    )


class UIConfig(BaseModel):
    """Terminal output settings."""

    line_width: int = Field(default=65, ge=20, description="Width of status lines")


def default_mirrors() -> list[MirrorConfig]:
    return [
        MirrorConfig(name="bower-material", kind="bower"),
        MirrorConfig(name="code.material.angularjs.org", kind="site"),
    ]


class ReleaseConfig(BaseSettings):
    """Root configuration model for release.yml.

    Supports environment variable overrides with MATERIAL_RELEASE_ prefix.
    Example: MATERIAL_RELEASE_GIT__TRUNK=main
    """

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    git: GitConfig = Field(default_factory=GitConfig)
    npm: NPMConfig = Field(default_factory=NPMConfig)
    build: BuildConfig = Field(default_factory=BuildConfig)
    mirrors: list[MirrorConfig] = Field(default_factory=default_mirrors)
    scripts: ScriptsConfig = Field(default_factory=ScriptsConfig)
    prompt: PromptConfig = Field(default_factory=PromptConfig)
    safety: SafetyConfig = Field(default_factory=SafetyConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    model_config = {
        "env_prefix": "MATERIAL_RELEASE_",
        "env_nested_delimiter": "__",
    }

    def mirror_url(self, mirror: MirrorConfig) -> str:
        return mirror.url or f"{self.git.organization_url}/{mirror.name}.git"
