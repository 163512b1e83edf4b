"""npm registry queries."""

from pathlib import Path

from material_release.utils.shell import ShellError, run


def whoami(cwd: Path | None = None, timeout: int = 60) -> str | None:
    """Return the account npm is authenticated as.

    Args:
        cwd: Working directory (picks up a project .npmrc)
        timeout: Maximum time to wait for the registry

    Returns:
        The username, or None when not logged in or npm is unavailable
    """
    try:
        result = run(["npm", "whoami"], cwd=cwd, check=True, timeout=timeout)
    except (ShellError, OSError):
        return None
    return result.stdout.strip() or None
