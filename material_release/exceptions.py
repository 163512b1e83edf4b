"""Custom exception hierarchy for the release orchestrator.

Exit codes follow Unix conventions:
- 1: General error
- 2: Configuration error
- 3: Precondition failure
- 4: Invalid prompt selection
- 5: Malformed version string
- 6: Invalid version increment
- 7: Command failure (only when halting on failures)
- 8: Template error
- 9: Release cancelled by the operator
"""


class ReleaseError(Exception):
    """Base exception for all release errors.

    All release-related exceptions inherit from this class.
    Each subclass defines an exit_code for CLI error reporting.
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        details: str | None = None,
        fix_hint: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Brief error message
            details: Detailed explanation of what went wrong
            fix_hint: Suggested command or action to fix the issue
        """
        super().__init__(message)
        self.message = message
        self.details = details
        self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"\nDetails: {self.details}")
        if self.fix_hint:
            parts.append(f"\nFix: {self.fix_hint}")
        return "".join(parts)


class ConfigurationError(ReleaseError):
    """Configuration file errors.

    Raised when:
    - An explicitly requested config file is missing
    - Config file has invalid syntax (YAML/TOML)
    - Config values fail validation
    """

    exit_code = 2


class PreconditionError(ReleaseError):
    """Pre-release precondition failures.

    Raised when:
    - The registry identity is not the release account
    - HEAD is not on the trunk branch
    - Local trunk cannot be fast-forwarded from the remote trunk
    """

    exit_code = 3


class InvalidSelectionError(ReleaseError):
    """Operator input at the version prompt is neither a menu index nor a version."""

    exit_code = 4


class MalformedVersionError(ReleaseError):
    """A version string does not match MAJOR.MINOR.PATCH[-rcN]."""

    exit_code = 5


class InvalidIncrementError(ReleaseError):
    """A version cannot be bumped the requested way.

    Raised when:
    - Bumping rc on a stable version
    - The increment type is unknown
    """

    exit_code = 6


class CommandError(ReleaseError):
    """A release command failed while halting on command failures is enabled."""

    exit_code = 7


class TemplateError(ReleaseError):
    """A command template references an unknown or unset placeholder."""

    exit_code = 8


class ReleaseCancelledError(ReleaseError):
    """The operator quit at the version prompt."""

    exit_code = 9
