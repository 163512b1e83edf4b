"""Tests for the generated abort and push scripts."""

import os

import pytest

from material_release.context import ReleaseContext
from material_release.exceptions import TemplateError
from material_release.scripts import render_script, write_abort_script, write_push_script
from material_release.version import parse_version


def test_render_resolves_templates(release_context: ReleaseContext) -> None:
    release_context.set_new_version(parse_version("0.9.7"))

    content = render_script(release_context, ["git tag {{tag}}", "git branch -D {{release_branch}}"])

    assert content == "#!/usr/bin/env bash\n\ngit tag v0.9.7\ngit branch -D release/0.9.7\n"


def test_templates_resolve_at_write_time(release_context: ReleaseContext) -> None:
    # Registered before the version is known
    release_context.push("git push {{origin}} HEAD", "git tag {{tag}}")
    release_context.set_new_version(parse_version("0.10.0"))

    path = write_push_script(release_context)

    lines = path.read_text().splitlines()
    assert lines[2:] == ["git push https://github.com/angular/material.git HEAD", "git tag v0.10.0"]


def test_unresolved_version_is_an_error(release_context: ReleaseContext) -> None:
    release_context.push("git tag {{tag}}")

    with pytest.raises(TemplateError):
        write_push_script(release_context)


def test_scripts_are_executable(release_context: ReleaseContext) -> None:
    release_context.set_new_version(parse_version("0.9.7"))
    release_context.abort("git checkout {{trunk}}")

    path = write_abort_script(release_context)

    assert path == release_context.project_root / "abort"
    assert os.access(path, os.X_OK)
    assert path.stat().st_mode & 0o111 == 0o111


def test_cleanup_appended_to_both_scripts(release_context: ReleaseContext) -> None:
    release_context.set_new_version(parse_version("0.9.7"))
    release_context.abort("git checkout master")
    release_context.push("git push")
    release_context.cleanup("rm -rf bower-material")

    abort = write_abort_script(release_context).read_text().splitlines()
    push = write_push_script(release_context).read_text().splitlines()

    assert abort[-2:] == ["git checkout master", "rm -rf bower-material"]
    assert push[-2:] == ["git push", "rm -rf bower-material"]


def test_configured_names_and_shebang(release_context: ReleaseContext) -> None:
    release_context.config.scripts.push = "push.sh"
    release_context.config.scripts.shebang = "#!/bin/bash"
    release_context.set_new_version(parse_version("0.9.7"))

    path = write_push_script(release_context)

    assert path.name == "push.sh"
    assert path.read_text().startswith("#!/bin/bash\n\n")
