"""Git queries used before a release starts."""

from material_release.git.queries import GitError, fetch, get_current_branch, is_ancestor

__all__ = [
    "GitError",
    "get_current_branch",
    "is_ancestor",
    "fetch",
]
