"""Git state query operations.

Read-only git operations used by precondition validation. All functions use
material_release.utils.shell.run() for command execution and raise GitError
(a PreconditionError) on failures.
"""

from pathlib import Path

from material_release.exceptions import PreconditionError
from material_release.utils.shell import ShellError, run


class GitError(PreconditionError):
    """A git query could not be answered."""


def get_current_branch(cwd: Path | None = None) -> str:
    """Get the name of the current git branch.

    Args:
        cwd: Working directory (defaults to current directory)

    Returns:
        Current branch name (e.g., "master"), or "HEAD" when detached

    Raises:
        GitError: If unable to determine current branch
    """
    try:
        result = run(["git", "branch", "--show-current"], cwd=cwd, check=True)
        branch = result.stdout.strip()
        if not branch:
            # Fallback for detached HEAD state
            result = run(
                ["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd, check=True
            )
            branch = result.stdout.strip()
        return branch
    except (ShellError, OSError) as e:
        raise GitError(
            "Failed to get current branch name",
            details=str(e),
            fix_hint="Ensure you are in a git repository with at least one commit",
        ) from e


def is_ancestor(
    ancestor: str, descendant: str = "HEAD", cwd: Path | None = None
) -> bool:
    """Check if one commit is an ancestor of another.

    Args:
        ancestor: Commit/tag/branch that might be an ancestor
        descendant: Commit/tag/branch to check against (default: HEAD)
        cwd: Working directory (defaults to current directory)

    Returns:
        True if ancestor is an ancestor of descendant

    Raises:
        GitError: If git cannot be run
    """
    try:
        result = run(
            ["git", "merge-base", "--is-ancestor", ancestor, descendant],
            cwd=cwd,
            check=False,
        )
        return result.returncode == 0
    except OSError as e:
        raise GitError(
            f"Failed to check if '{ancestor}' is ancestor of '{descendant}'",
            details=str(e),
            fix_hint="Ensure git is installed",
        ) from e


def fetch(remote: str, branch: str, cwd: Path | None = None) -> None:
    """Fetch a remote branch into FETCH_HEAD without touching local branches.

    Args:
        remote: Remote name or URL
        branch: Branch to fetch
        cwd: Working directory (defaults to current directory)

    Raises:
        GitError: If the fetch fails
    """
    try:
        run(["git", "fetch", "-q", remote, branch], cwd=cwd, check=True)
    except (ShellError, OSError) as e:
        raise GitError(
            f"Failed to fetch '{branch}' from {remote}",
            details=str(e),
            fix_hint="Check network connectivity and that the remote branch exists",
        ) from e
