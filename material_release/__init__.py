"""Interactive release orchestrator for Angular Material."""

__version__ = "0.1.0"

from material_release.exceptions import (
    CommandError,
    ConfigurationError,
    InvalidIncrementError,
    InvalidSelectionError,
    MalformedVersionError,
    PreconditionError,
    ReleaseCancelledError,
    ReleaseError,
    TemplateError,
)

__all__ = [
    "__version__",
    "ReleaseError",
    "ConfigurationError",
    "PreconditionError",
    "InvalidSelectionError",
    "MalformedVersionError",
    "InvalidIncrementError",
    "CommandError",
    "TemplateError",
    "ReleaseCancelledError",
]
