"""Abstract base class for precondition validators.

Validators check that a release may start and report issues with severity
levels that determine whether the release can proceed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from material_release.context import ReleaseContext


class ValidationSeverity(Enum):
    """Severity level for validation results.

    - ERROR: Blocks release (must be fixed)
    - INFO: Informational only
    """

    ERROR = "error"
    INFO = "info"


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes:
        passed: Whether the validation passed
        message: Brief description of the result
        severity: How serious the issue is
        details: Extended explanation
        fix_command: Suggested command to fix the issue
    """

    passed: bool
    message: str
    severity: ValidationSeverity = ValidationSeverity.ERROR
    details: str | None = None
    fix_command: str | None = None

    @classmethod
    def success(cls, message: str = "Validation passed") -> "ValidationResult":
        return cls(passed=True, message=message, severity=ValidationSeverity.INFO)

    @classmethod
    def error(
        cls,
        message: str,
        details: str | None = None,
        fix_command: str | None = None,
    ) -> "ValidationResult":
        return cls(
            passed=False,
            message=message,
            severity=ValidationSeverity.ERROR,
            details=details,
            fix_command=fix_command,
        )


class Validator(ABC):
    """Abstract base class for all validators."""

    # Class-level attributes to be defined by subclasses
    name: ClassVar[str]
    description: ClassVar[str]

    @abstractmethod
    def validate(self, context: ReleaseContext) -> ValidationResult:
        """Run validation and return result.

        Args:
            context: Release context with config and project root

        Returns:
            ValidationResult indicating pass/fail and details
        """


class ValidatorRegistry:
    """Registry for validator implementations.

    Validators run in registration order.
    """

    _validators: dict[str, type[Validator]] = {}

    @classmethod
    def register(cls, validator_class: type[Validator]) -> type[Validator]:
        """Register a validator class.

        Can be used as a decorator:
            @ValidatorRegistry.register
            class TrunkBranchValidator(Validator):
                ...

        Raises:
            TypeError: If validator_class is missing required attributes
            ValueError: If a validator with the same name is already registered
        """
        required_attrs = ["name", "description"]
        missing = [attr for attr in required_attrs if not hasattr(validator_class, attr)]
        if missing:
            raise TypeError(
                f"Validator class {validator_class.__name__} missing required "
                f"class attributes: {', '.join(missing)}. "
                "All validators must define 'name' and 'description'."
            )

        name = validator_class.name
        if not isinstance(name, str) or not name:
            raise TypeError(
                f"Validator {validator_class.__name__}.name must be a non-empty string, "
                f"got {type(name).__name__}: {name!r}"
            )

        if name in cls._validators:
            existing = cls._validators[name]
            if existing is not validator_class:
                raise ValueError(
                    f"Validator name '{name}' already registered by {existing.__name__}. "
                    f"Cannot register {validator_class.__name__}."
                )
            return validator_class

        cls._validators[name] = validator_class
        return validator_class

    @classmethod
    def run_all(
        cls,
        context: ReleaseContext,
        stop_on_failure: bool = False,
    ) -> list[ValidationResult]:
        """Run all registered validators.

        Args:
            context: Release context
            stop_on_failure: Stop after the first failing validator

        Returns:
            List of validation results, in registration order
        """
        results = []
        for validator_class in cls._validators.values():
            result = validator_class().validate(context)
            results.append(result)
            if stop_on_failure and not result.passed:
                break
        return results

    @classmethod
    def list_registered(cls) -> list[str]:
        return list(cls._validators.keys())
