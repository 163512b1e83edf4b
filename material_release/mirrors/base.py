"""Abstract base class for auxiliary repositories updated by a release.

A mirror is cloned next to the release, updated and committed locally, and
contributes the commands that publish it to the push script:
- bower: the companion package mirror (bower-material)
- site: the documentation site (code.material.angularjs.org)
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from material_release.commands import CommandExecutor
from material_release.config.models import MirrorConfig
from material_release.context import ReleaseContext
from material_release.utils.console import console, done, start
from material_release.utils.shell import ShellError

RELEASE_COMMIT = 'git commit -m "release: version {{new_version}}"'


def comment(message: str) -> str:
    """A blank-line-delimited comment for the generated scripts."""
    return f"\n# {message}\n"


class Mirror(ABC):
    """Abstract base class for all mirrors."""

    # Class-level attributes to be defined by subclasses
    kind: ClassVar[str]
    display_name: ClassVar[str]

    def __init__(self, config: MirrorConfig) -> None:
        self.config = config

    @property
    def name(self) -> str:
        return self.config.name

    def clone(self, context: ReleaseContext, executor: CommandExecutor) -> bool:
        """Shallow-clone the mirror into the project root.

        The clone is removed by both generated scripts.

        Returns:
            False if the clone command failed
        """
        url = context.config.mirror_url(self.config)
        depth = context.config.git.clone_depth
        start(f"Cloning [cyan]{self.name}[/cyan] from GitHub...", context.config.ui.line_width)
        context.cleanup(f"rm -rf {self.name}")
        result = executor.exec(f"git clone {url} --depth={depth} 2> /dev/null")
        if isinstance(result, ShellError):
            console.print("[red]failed[/red]")
            return False
        done()
        return True

    @abstractmethod
    def update(self, context: ReleaseContext, executor: CommandExecutor) -> None:
        """Update, rebuild and locally commit the cloned mirror.

        Args:
            context: Release context; new_version is set
            executor: Executor for build and git commands
        """

    @abstractmethod
    def push_commands(self, context: ReleaseContext) -> list[str]:
        """Commands the push script runs to publish this mirror."""

    def release(self, context: ReleaseContext, executor: CommandExecutor) -> bool:
        """Clone, update and register the push commands, in that order.

        A mirror that could not be cloned is skipped; the failed clone is
        already recorded on the context.

        Returns:
            False if the mirror was skipped
        """
        if not self.clone(context, executor):
            console.print(
                f"[yellow]Warning:[/yellow] skipping [cyan]{self.name}[/cyan]; "
                "it will not be updated or pushed"
            )
            return False
        self.update(context, executor)
        context.push(*self.push_commands(context))
        return True


class MirrorRegistry:
    """Registry mapping mirror kinds to implementations."""

    _mirrors: dict[str, type[Mirror]] = {}

    @classmethod
    def register(cls, mirror_class: type[Mirror]) -> type[Mirror]:
        """Register a mirror class.

        Can be used as a decorator:
            @MirrorRegistry.register
            class BowerMirror(Mirror):
                ...

        Raises:
            TypeError: If mirror_class is missing required attributes
            ValueError: If a mirror with the same kind is already registered
        """
        required_attrs = ["kind", "display_name"]
        missing = [attr for attr in required_attrs if not hasattr(mirror_class, attr)]
        if missing:
            raise TypeError(
                f"Mirror class {mirror_class.__name__} missing required "
                f"class attributes: {', '.join(missing)}."
            )

        kind = mirror_class.kind
        if kind in cls._mirrors:
            existing = cls._mirrors[kind]
            if existing is not mirror_class:
                raise ValueError(
                    f"Mirror kind '{kind}' already registered by {existing.__name__}. "
                    f"Cannot register {mirror_class.__name__}."
                )
            return mirror_class

        cls._mirrors[kind] = mirror_class
        return mirror_class

    @classmethod
    def get(cls, kind: str) -> type[Mirror] | None:
        return cls._mirrors.get(kind)

    @classmethod
    def create(cls, config: MirrorConfig) -> Mirror:
        """Instantiate the mirror implementation for a configured repository.

        Raises:
            KeyError: If no implementation is registered for the kind
        """
        mirror_class = cls.get(config.kind)
        if mirror_class is None:
            raise KeyError(f"No mirror registered for kind '{config.kind}'")
        return mirror_class(config)

    @classmethod
    def list_registered(cls) -> list[str]:
        return list(cls._mirrors.keys())
