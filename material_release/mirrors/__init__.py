"""Auxiliary repositories released alongside the main package."""

# Import mirrors to trigger registration
from material_release.mirrors import (
    bower,  # noqa: F401
    site,  # noqa: F401
)
from material_release.mirrors.base import Mirror, MirrorRegistry, comment

__all__ = [
    "Mirror",
    "MirrorRegistry",
    "comment",
]
