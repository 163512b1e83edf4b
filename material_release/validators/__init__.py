"""Validation modules for pre-release checks."""

# Import validators to trigger registration
from material_release.validators import preconditions  # noqa: F401
from material_release.validators.base import (
    ValidationResult,
    ValidationSeverity,
    Validator,
    ValidatorRegistry,
)

__all__ = [
    "ValidationResult",
    "ValidationSeverity",
    "Validator",
    "ValidatorRegistry",
]
