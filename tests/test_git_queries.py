"""Tests for git query operations against a real repository."""

import subprocess
from pathlib import Path

import pytest

from material_release.git import GitError, fetch, get_current_branch, is_ancestor


def commit(repo: Path, name: str) -> None:
    (repo / name).write_text(name)
    subprocess.run(["git", "add", name], cwd=repo, capture_output=True, check=True)
    subprocess.run(["git", "commit", "-q", "-m", name], cwd=repo, capture_output=True, check=True)


def test_current_branch(git_repo: Path) -> None:
    subprocess.run(["git", "checkout", "-q", "-b", "feature"], cwd=git_repo, check=True)
    assert get_current_branch(cwd=git_repo) == "feature"


def test_current_branch_outside_repo(tmp_path: Path) -> None:
    with pytest.raises(GitError):
        get_current_branch(cwd=tmp_path)


def test_is_ancestor(git_repo: Path) -> None:
    subprocess.run(["git", "tag", "v0.9.6"], cwd=git_repo, check=True)
    commit(git_repo, "second.txt")

    assert is_ancestor("v0.9.6", cwd=git_repo) is True
    assert is_ancestor("HEAD", "v0.9.6", cwd=git_repo) is False


def test_fetch_sets_fetch_head(git_repo: Path) -> None:
    subprocess.run(["git", "checkout", "-q", "-b", "trunk"], cwd=git_repo, check=True)

    fetch(str(git_repo), "trunk", cwd=git_repo)

    assert is_ancestor("HEAD", "FETCH_HEAD", cwd=git_repo) is True


def test_local_commits_are_not_synced(git_repo: Path) -> None:
    subprocess.run(["git", "checkout", "-q", "-b", "trunk"], cwd=git_repo, check=True)
    subprocess.run(["git", "branch", "remote-trunk"], cwd=git_repo, check=True)
    commit(git_repo, "local.txt")

    fetch(str(git_repo), "remote-trunk", cwd=git_repo)

    assert is_ancestor("HEAD", "FETCH_HEAD", cwd=git_repo) is False


def test_fetch_missing_branch(git_repo: Path) -> None:
    with pytest.raises(GitError, match="Failed to fetch"):
        fetch(str(git_repo), "does-not-exist", cwd=git_repo)
