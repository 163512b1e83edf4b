"""Configuration management for the release orchestrator."""

from material_release.config.models import (
    BuildConfig,
    GitConfig,
    MirrorConfig,
    NPMConfig,
    ProjectConfig,
    PromptConfig,
    ReleaseConfig,
    SafetyConfig,
    ScriptsConfig,
    UIConfig,
)

__all__ = [
    "ReleaseConfig",
    "ProjectConfig",
    "GitConfig",
    "NPMConfig",
    "BuildConfig",
    "MirrorConfig",
    "ScriptsConfig",
    "PromptConfig",
    "SafetyConfig",
    "UIConfig",
]
