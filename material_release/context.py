"""State shared by the steps of a single release run."""

from dataclasses import dataclass, field
from pathlib import Path

from material_release.config.models import ReleaseConfig
from material_release.exceptions import ReleaseError
from material_release.utils.shell import ShellError
from material_release.utils.template import fill
from material_release.version import SemanticVersion


@dataclass
class ReleaseContext:
    """Context passed to validators, steps and mirrors during a release.

    The three command lists only grow. Their entries are templates that are
    resolved against this context when they are executed or written, so a
    step may register a command that mentions the new version before the
    version is known.
    """

    project_root: Path
    config: ReleaseConfig
    old_version: SemanticVersion
    new_version: SemanticVersion | None = None
    abort_commands: list[str] = field(default_factory=list)
    push_commands: list[str] = field(default_factory=list)
    cleanup_commands: list[str] = field(default_factory=list)
    failures: list[ShellError] = field(default_factory=list)

    def set_new_version(self, version: SemanticVersion) -> None:
        if self.new_version is not None:
            raise ReleaseError(
                f"New version already set to {self.new_version}",
                details=f"Refusing to change it to {version}",
            )
        self.new_version = version

    def abort(self, *commands: str) -> None:
        self.abort_commands.extend(commands)

    def push(self, *commands: str) -> None:
        self.push_commands.extend(commands)

    def cleanup(self, *commands: str) -> None:
        self.cleanup_commands.extend(commands)

    @property
    def release_branch(self) -> str | None:
        if self.new_version is None:
            return None
        return f"{self.config.git.release_branch_prefix}{self.new_version}"

    @property
    def tag(self) -> str | None:
        if self.new_version is None:
            return None
        return f"{self.config.git.tag_prefix}{self.new_version}"

    def template_values(self) -> dict[str, str | None]:
        """Placeholder values for command templates.

        Values that are not known yet are None; fill() refuses to resolve them.
        """
        return {
            "old_version": str(self.old_version),
            "new_version": str(self.new_version) if self.new_version else None,
            "origin": self.config.git.origin,
            "trunk": self.config.git.trunk,
            "tag_prefix": self.config.git.tag_prefix,
            "release_branch": self.release_branch,
            "tag": self.tag,
        }

    def resolve(self, template: str) -> str:
        return fill(template, self.template_values())

    def abort_script(self) -> list[str]:
        return self.abort_commands + self.cleanup_commands

    def push_script(self) -> list[str]:
        return self.push_commands + self.cleanup_commands
