"""Utility modules for the release orchestrator."""

from material_release.utils.shell import ShellError, capture, run, strip_ansi
from material_release.utils.template import fill, placeholders

__all__ = [
    # Shell utilities
    "run",
    "capture",
    "strip_ansi",
    "ShellError",
    # Template utilities
    "fill",
    "placeholders",
]
