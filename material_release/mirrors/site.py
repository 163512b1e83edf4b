"""Documentation site mirror (code.material.angularjs.org)."""

from typing import ClassVar

from material_release.commands import CommandExecutor
from material_release.context import ReleaseContext
from material_release.manifest import add_docs_version
from material_release.mirrors.base import RELEASE_COMMIT, Mirror, MirrorRegistry, comment
from material_release.utils.console import done, start

DOCS_MANIFEST = "docs.json"


@MirrorRegistry.register
class SiteMirror(Mirror):
    """Mirror that hosts one docs build per version plus ``latest``."""

    kind: ClassVar[str] = "site"
    display_name: ClassVar[str] = "Documentation site"

    def update(self, context: ReleaseContext, executor: CommandExecutor) -> None:
        dist = context.config.build.dist_dir

        start("Adding new version of the docs site...", context.config.ui.line_width)
        add_docs_version(context.project_root / self.name / DOCS_MANIFEST, str(context.new_version))
        executor.exec(context.config.build.docs_commands)
        executor.exec(
            [
                "rm -rf latest",
                f"cp -Rf ../{dist}/docs {{{{new_version}}}}",
                f"cp -Rf ../{dist}/docs latest",
                "git add -A",
                RELEASE_COMMIT,
                f"rm -rf ../{dist}",
            ],
            cwd=self.name,
        )
        done()

    def push_commands(self, context: ReleaseContext) -> list[str]:
        return [
            comment("push the site"),
            f"cd {self.name}",
            "git push",
            "cd ..",
        ]
