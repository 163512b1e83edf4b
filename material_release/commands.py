"""Execution of release commands against the working directory.

Failure policy: a failing command does not stop the release unless
``safety.halt_on_command_failure`` is set. The ShellError is returned in
place of the command output and recorded on the context so it can be
reported once the run is over. With the halt policy enabled, the executor
raises CommandError instead.
"""

from collections.abc import Callable
from pathlib import Path
from typing import overload

from material_release.context import ReleaseContext
from material_release.exceptions import CommandError
from material_release.utils.shell import ShellError, capture

Runner = Callable[[str, Path], str | ShellError]


def default_runner(cmd: str, cwd: Path) -> str | ShellError:
    return capture(cmd, cwd=cwd)


class CommandExecutor:
    """Resolves command templates and runs them one at a time."""

    def __init__(self, context: ReleaseContext, runner: Runner | None = None) -> None:
        self.context = context
        self.runner = runner or default_runner
        self.history: list[str] = []

    @overload
    def exec(self, commands: str, cwd: str | Path | None = None) -> str | ShellError: ...

    @overload
    def exec(
        self, commands: list[str], cwd: str | Path | None = None
    ) -> list[str | ShellError]: ...

    def exec(
        self,
        commands: str | list[str],
        cwd: str | Path | None = None,
    ) -> str | ShellError | list[str | ShellError]:
        """Run one command or a sequence of commands.

        Args:
            commands: Command template or list of templates
            cwd: Directory relative to the project root (defaults to the root)

        Returns:
            Output (or ShellError) for a single command, or one entry per
            command for a list

        Raises:
            CommandError: If a command fails and the halt policy is enabled
            TemplateError: If a template cannot be resolved
        """
        if isinstance(commands, list):
            return [self.exec(command, cwd) for command in commands]

        workdir = self.context.project_root / cwd if cwd else self.context.project_root
        command = self.context.resolve(commands)
        self.history.append(command)

        result = self.runner(command, workdir)
        if isinstance(result, ShellError):
            self.context.failures.append(result)
            if self.context.config.safety.halt_on_command_failure:
                raise CommandError(
                    f"Command failed: {command}",
                    details=result.stderr or result.stdout or f"exit code {result.returncode}",
                    fix_hint="Inspect the repository, then run the generated abort script",
                )
        return result
