"""Precondition validators run before any release side effect.

Checked in order:
- Registry identity (npm whoami)
- Trunk branch
- Trunk can be fast-forwarded from the remote trunk
"""

from typing import ClassVar

from material_release.context import ReleaseContext
from material_release.git.queries import GitError, fetch, get_current_branch, is_ancestor
from material_release.npm import whoami
from material_release.validators.base import (
    ValidationResult,
    Validator,
    ValidatorRegistry,
)


@ValidatorRegistry.register
class RegistryIdentityValidator(Validator):
    """Validates that npm is authenticated as the release account."""

    name: ClassVar[str] = "registry_identity"
    description: ClassVar[str] = "Check the npm account used to publish"

    def validate(self, context: ReleaseContext) -> ValidationResult:
        expected = context.config.npm.expected_user
        user = whoami(cwd=context.project_root)

        if user == expected:
            return ValidationResult.success(f"Authenticated with npm as {user}")

        return ValidationResult.error(
            message=f'You must be authenticated with npm as "{expected}" to perform a release.',
            details=f"npm whoami returned: {user or 'not logged in'}",
            fix_command=f"npm login  # as {expected}",
        )


@ValidatorRegistry.register
class TrunkBranchValidator(Validator):
    """Validates that HEAD is on the trunk branch."""

    name: ClassVar[str] = "trunk_branch"
    description: ClassVar[str] = "Check that releases are cut from trunk"

    def validate(self, context: ReleaseContext) -> ValidationResult:
        trunk = context.config.git.trunk
        try:
            current_branch = get_current_branch(cwd=context.project_root)
        except GitError as e:
            return ValidationResult.error(
                message="Failed to determine current branch",
                details=str(e),
                fix_command="git branch --show-current",
            )

        if current_branch == trunk:
            return ValidationResult.success(f"On trunk branch: {current_branch}")

        return ValidationResult.error(
            message=f"Releases can only be performed from {trunk} at this time.",
            details=f"Current branch is '{current_branch}'",
            fix_command=f"git checkout {trunk}",
        )


@ValidatorRegistry.register
class TrunkSyncValidator(Validator):
    """Validates that the local trunk is an ancestor of the remote trunk."""

    name: ClassVar[str] = "trunk_sync"
    description: ClassVar[str] = "Check that trunk is synced with the remote"

    def validate(self, context: ReleaseContext) -> ValidationResult:
        origin = context.config.git.origin
        trunk = context.config.git.trunk
        fix = f"git pull --rebase {origin} {trunk}"

        try:
            fetch(origin, trunk, cwd=context.project_root)
            synced = is_ancestor("HEAD", "FETCH_HEAD", cwd=context.project_root)
        except GitError as e:
            return ValidationResult.error(
                message=f"Please make sure your local branch is synced with origin/{trunk}.",
                details=str(e),
                fix_command=fix,
            )

        if synced:
            return ValidationResult.success(f"Local {trunk} is synced with origin/{trunk}")

        return ValidationResult.error(
            message=f"Please make sure your local branch is synced with origin/{trunk}.",
            details=f"Local {trunk} has commits that origin/{trunk} does not",
            fix_command=fix,
        )
