"""Version parsing, formatting, and increment utilities.

Versions follow MAJOR.MINOR.PATCH with an optional release-candidate suffix
(``-rcN``). A version with ``rc == 0`` is stable; ``rc > 0`` is release
candidate N, which orders before its stable release.

Examples:
    >>> [str(v) for v in compute_candidates(parse_version("1.2.3"))]
    ['1.2.4', '1.3.0', '2.0.0']
    >>> [str(v) for v in compute_candidates(parse_version("1.2.3-rc1"))]
    ['1.2.3-rc2', '1.3.0']
"""

import re
from dataclasses import dataclass, replace
from typing import Literal

from material_release.exceptions import InvalidIncrementError, MalformedVersionError

# Type aliases for clarity
IncrementType = Literal["major", "minor", "patch", "rc"]

INCREMENT_TYPES: tuple[str, ...] = ("major", "minor", "patch", "rc")

# MAJOR.MINOR.PATCH with optional -rcN; no leading zeros, no -rc0
VERSION_PATTERN = re.compile(r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)(?:-rc([1-9]\d*))?$")


@dataclass(frozen=True)
class SemanticVersion:
    """A parsed version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        rc: Release candidate number, 0 for a stable release
    """

    major: int
    minor: int
    patch: int
    rc: int = 0

    @property
    def is_rc(self) -> bool:
        return self.rc > 0

    def sort_key(self) -> tuple[int, int, int, int, int]:
        # A stable release sorts after all of its release candidates
        return (self.major, self.minor, self.patch, 0 if self.is_rc else 1, self.rc)

    def __str__(self) -> str:
        return format_version(self)


def parse_version(version_str: str) -> SemanticVersion:
    """Parse a version string.

    Args:
        version_str: Version string (e.g., '1.2.3', '1.2.3-rc1')

    Returns:
        The parsed SemanticVersion

    Raises:
        MalformedVersionError: If the string is not MAJOR.MINOR.PATCH[-rcN]

    Examples:
        >>> parse_version('1.2.3-rc4')
        SemanticVersion(major=1, minor=2, patch=3, rc=4)
    """
    if not version_str or not version_str.strip():
        raise MalformedVersionError(
            "Empty version string",
            details="Version string cannot be empty or whitespace",
            fix_hint="Provide a version such as '1.2.3' or '1.2.3-rc1'",
        )

    match = VERSION_PATTERN.match(version_str.strip())
    if not match:
        raise MalformedVersionError(
            f"Invalid version format: '{version_str}'",
            details="Version must be MAJOR.MINOR.PATCH with an optional -rcN suffix",
            fix_hint="Use format like '1.2.3' or '1.2.3-rc1'",
        )

    major, minor, patch, rc = match.groups()
    return SemanticVersion(int(major), int(minor), int(patch), int(rc or 0))


def format_version(version: SemanticVersion) -> str:
    """Render a version, omitting the rc suffix for stable releases.

    Examples:
        >>> format_version(SemanticVersion(0, 9, 7))
        '0.9.7'
        >>> format_version(SemanticVersion(0, 9, 7, rc=2))
        '0.9.7-rc2'
    """
    text = f"{version.major}.{version.minor}.{version.patch}"
    if version.rc:
        text += f"-rc{version.rc}"
    return text


def is_valid_version(version_str: str) -> bool:
    """Check if a version string is well formed."""
    if not version_str or not version_str.strip():
        return False
    return VERSION_PATTERN.match(version_str.strip()) is not None


def increment_version(current: SemanticVersion, increment: IncrementType | str) -> SemanticVersion:
    """Bump one field of a version and reset every lower-order field.

    - major: resets minor, patch and rc
    - minor: resets patch and rc
    - patch: resets rc
    - rc: only valid for a release candidate

    Args:
        current: Version to bump
        increment: Which field to bump

    Returns:
        The bumped version

    Raises:
        InvalidIncrementError: If bumping rc on a stable version, or the
            increment type is unknown

    Examples:
        >>> str(increment_version(parse_version('1.2.3-rc1'), 'minor'))
        '1.3.0'
    """
    if increment == "major":
        return SemanticVersion(current.major + 1, 0, 0)
    if increment == "minor":
        return SemanticVersion(current.major, current.minor + 1, 0)
    if increment == "patch":
        return SemanticVersion(current.major, current.minor, current.patch + 1)
    if increment == "rc":
        if not current.is_rc:
            raise InvalidIncrementError(
                f"Cannot bump rc on stable version {current}",
                details="Only a release candidate can move to the next candidate",
                fix_hint="Bump patch, minor or major and mark it as a release candidate",
            )
        return replace(current, rc=current.rc + 1)

    raise InvalidIncrementError(
        f"Unknown increment type: '{increment}'",
        details=f"Increment type must be one of: {', '.join(INCREMENT_TYPES)}",
    )


def compute_candidates(current: SemanticVersion) -> list[SemanticVersion]:
    """List the versions offered to the operator, in menu order.

    A release candidate may move to the next candidate or to the next minor
    release; a stable version may take a patch, minor or major bump.
    """
    if current.is_rc:
        increments: tuple[IncrementType, ...] = ("rc", "minor")
    else:
        increments = ("patch", "minor", "major")
    return [increment_version(current, increment) for increment in increments]


def compare_versions(v1: str | SemanticVersion, v2: str | SemanticVersion) -> int:
    """Compare two versions.

    Returns:
        -1 if v1 < v2, 0 if equal, 1 if v1 > v2

    Raises:
        MalformedVersionError: If either version string is invalid

    Examples:
        >>> compare_versions('1.2.3-rc1', '1.2.3')
        -1
    """
    key1 = (v1 if isinstance(v1, SemanticVersion) else parse_version(v1)).sort_key()
    key2 = (v2 if isinstance(v2, SemanticVersion) else parse_version(v2)).sort_key()

    if key1 < key2:
        return -1
    elif key1 > key2:
        return 1
    else:
        return 0


__all__ = [
    "SemanticVersion",
    "IncrementType",
    "INCREMENT_TYPES",
    "VERSION_PATTERN",
    "parse_version",
    "format_version",
    "is_valid_version",
    "increment_version",
    "compute_candidates",
    "compare_versions",
]
