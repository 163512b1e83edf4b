"""Companion package mirror (bower-material).

The mirror republishes the built distributables with its own bower.json and
package.json. Its push commands carry the changelog over, retag, push and
publish to npm.
"""

from typing import ClassVar

from material_release.commands import CommandExecutor
from material_release.context import ReleaseContext
from material_release.manifest import set_version
from material_release.mirrors.base import RELEASE_COMMIT, Mirror, MirrorRegistry, comment
from material_release.utils.console import done, start

MANIFESTS = ("package.json", "bower.json")


@MirrorRegistry.register
class BowerMirror(Mirror):
    """Mirror that ships build artifacts to bower and npm."""

    kind: ClassVar[str] = "bower"
    display_name: ClassVar[str] = "Bower package"

    def update(self, context: ReleaseContext, executor: CommandExecutor) -> None:
        width = context.config.ui.line_width
        clone_dir = context.project_root / self.name
        dist = context.config.build.dist_dir

        start("Updating bower version...", width)
        for manifest in MANIFESTS:
            set_version(clone_dir / manifest, str(context.new_version))
        done()

        start("Building bower files...", width)
        executor.exec(context.config.build.bower_build_commands)
        done()

        start("Copy files into bower repo...", width)
        executor.exec(
            [
                f"cp -Rf ../{dist}/* ./",
                "git add -A",
                RELEASE_COMMIT,
                f"rm -rf ../{dist}",
            ],
            cwd=self.name,
        )
        done()

    def push_commands(self, context: ReleaseContext) -> list[str]:
        changelog = context.config.project.changelog
        commands = [
            comment("push to bower (master and tag) and publish to npm"),
            f"cd {self.name}",
            f"cp ../{changelog} .",
            f"git add {changelog}",
            "git commit --amend --no-edit",
            "git tag -f {{tag}}",
            "git push",
            "git push --tags",
        ]
        if context.config.npm.publish:
            commands.append("npm publish")
        commands.append("cd ..")
        return commands
