"""Release workflow orchestration.

Coordinates one release run:
1. Validate preconditions (npm identity, trunk branch, trunk in sync)
2. Ask for the new version
3. Release branch, manifest bump, changelog and local commit
4. Register tag and push commands
5. Clone, rebuild and commit the mirrors
6. Register the trunk version update
7. Write the abort and push scripts

Nothing is pushed or published here. Remote changes are only written into
the push script; the abort script undoes the local changes.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path

from rich.panel import Panel
from rich.table import Table

from material_release.commands import CommandExecutor, Runner
from material_release.config.models import ReleaseConfig
from material_release.context import ReleaseContext
from material_release.exceptions import CommandError, ReleaseCancelledError, ReleaseError
from material_release.manifest import get_version, set_version, version_update_command
from material_release.mirrors import MirrorRegistry
from material_release.prompts import Ask, Confirm, VersionPrompt, ask_with_typer, confirm_with_typer
from material_release.scripts import write_abort_script, write_push_script
from material_release.utils.console import console, done, error, line, start
from material_release.validators import ValidatorRegistry
from material_release.version import parse_version


class ExitStatus(IntEnum):
    """Process exit status of a release run."""

    SUCCESS = 0
    FAILED = 1
    PRECONDITION_FAILED = 3
    COMMAND_FAILED = 7
    CANCELLED = 9


class WorkflowState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    ABORTED = "aborted"
    PROMPTING = "prompting"
    EXECUTING = "executing"
    EMITTING = "emitting"
    DONE = "done"


@dataclass
class ReleaseWorkflow:
    """Drives a release from validated preconditions to the two scripts."""

    project_root: Path
    config: ReleaseConfig
    runner: Runner | None = None
    ask: Ask = ask_with_typer
    confirm: Confirm = confirm_with_typer
    clear_screen: bool = True

    # State tracking
    state: WorkflowState = field(default=WorkflowState.IDLE, init=False)
    context: ReleaseContext = field(init=False)
    executor: CommandExecutor = field(init=False)

    def run(self) -> ExitStatus:
        """Execute the release workflow.

        Returns:
            ExitStatus of the run

        Raises:
            MalformedVersionError: If the manifest version does not parse
            InvalidSelectionError: If the prompt ran out of attempts
        """
        self.state = WorkflowState.VALIDATING
        manifest = self.project_root / self.config.project.manifest
        self.context = ReleaseContext(
            project_root=self.project_root,
            config=self.config,
            old_version=parse_version(get_version(manifest)),
        )
        self.executor = CommandExecutor(self.context, self.runner)

        if not self.validate():
            self.state = WorkflowState.ABORTED
            return ExitStatus.PRECONDITION_FAILED

        self.state = WorkflowState.PROMPTING
        prompt = VersionPrompt(
            self.context.old_version,
            max_attempts=self.config.prompt.max_attempts,
            ask=self.ask,
            confirm=self.confirm,
            clear_screen=self.clear_screen,
        )
        try:
            self.context.set_new_version(prompt.choose())
        except ReleaseCancelledError:
            console.print("[yellow]Release cancelled[/yellow]")
            self.state = WorkflowState.ABORTED
            return ExitStatus.CANCELLED

        line(self.config.ui.line_width)

        self.state = WorkflowState.EXECUTING
        steps = [
            self.seed_commands,
            self.checkout_version_branch,
            self.update_version,
            self.create_changelog,
            self.commit_changes,
            self.tag_release,
            self.release_mirrors,
            self.update_trunk,
        ]
        try:
            for step in steps:
                step()
        except ReleaseError as e:
            console.print()
            error(e.message)
            if e.details:
                console.print(f"[dim]  {e.details}[/dim]")
            abort_path = write_abort_script(self.context)
            console.print(f'Run "[cyan]./{abort_path.name}[/cyan]" to undo the local changes.')
            self.state = WorkflowState.ABORTED
            if isinstance(e, CommandError):
                return ExitStatus.COMMAND_FAILED
            return ExitStatus.FAILED

        self.state = WorkflowState.EMITTING
        write_abort_script(self.context)
        write_push_script(self.context)

        line(self.config.ui.line_width)
        self.report_failures()
        self.print_instructions()
        self.state = WorkflowState.DONE
        return ExitStatus.SUCCESS

    def validate(self) -> bool:
        """Run the precondition validators, stopping at the first failure."""
        results = ValidatorRegistry.run_all(self.context, stop_on_failure=True)
        failed = [result for result in results if not result.passed]
        for result in failed:
            error(result.message)
            if result.details:
                console.print(f"[dim]  {result.details}[/dim]")
        return not failed

    def seed_commands(self) -> None:
        scripts = self.config.scripts
        remove_scripts = f"rm {scripts.abort} {scripts.push}"
        self.context.abort("git checkout {{trunk}}", remove_scripts)
        self.context.push(remove_scripts)

    def checkout_version_branch(self) -> None:
        self.executor.exec("git checkout -q -b {{release_branch}}")
        self.context.abort("git branch -D {{release_branch}}")

    def update_version(self) -> None:
        manifest = self.config.project.manifest
        start(
            f"Updating [cyan]{manifest}[/cyan] version from "
            f"[cyan]{self.context.old_version}[/cyan] to [cyan]{self.context.new_version}[/cyan]...",
            self.config.ui.line_width,
        )
        set_version(self.project_root / manifest, str(self.context.new_version))
        done()
        self.context.abort(f"git checkout {manifest}")
        self.context.push(f"git add {manifest}")

    def create_changelog(self) -> None:
        changelog = self.config.project.changelog
        start(
            f"Generating changelog from [cyan]{self.context.old_version}[/cyan] "
            f"to [cyan]{self.context.new_version}[/cyan]...",
            self.config.ui.line_width,
        )
        self.executor.exec(["git fetch --tags", self.config.build.changelog_command])
        done()
        self.context.abort(f"git checkout {changelog}")
        self.context.push(f"git add {changelog}")

    def commit_changes(self) -> None:
        start("Committing changes...", self.config.ui.line_width)
        self.executor.exec('git commit -am "release: version {{new_version}}"')
        done()
        self.context.push("git commit --amend --no-edit")

    def tag_release(self) -> None:
        self.context.push(
            "git tag {{tag}}",
            "git push {{origin}} HEAD",
            "git push --tags",
        )

    def release_mirrors(self) -> None:
        for mirror_config in self.config.mirrors:
            mirror = MirrorRegistry.create(mirror_config)
            mirror.release(self.context, self.executor)

    def update_trunk(self) -> None:
        manifest = self.config.project.manifest
        changelog = self.config.project.changelog
        self.context.push(
            f"\n# update {manifest} in {{{{trunk}}}}\n",
            "git checkout {{trunk}}",
            "git pull --rebase {{origin}} {{trunk}}",
            f"git checkout {{{{release_branch}}}} -- {changelog}",
            version_update_command(manifest),
            f"git add {changelog}",
            f"git add {manifest}",
            f'git commit -m "update version number in {manifest} to {{{{new_version}}}}"',
            "git push",
        )

    def report_failures(self) -> None:
        """Show commands that failed while the release kept going."""
        if not self.context.failures:
            return

        table = Table(title="Commands that failed")
        table.add_column("Exit", style="bold", width=6)
        table.add_column("Command", style="cyan")
        table.add_column("Error")
        for failure in self.context.failures:
            table.add_row(
                str(failure.returncode),
                failure.cmd,
                failure.stderr or failure.stdout,
            )
        console.print(table)
        console.print(
            "[yellow]The release continued past these failures; "
            "review the repository before pushing.[/yellow]"
        )

    def print_instructions(self) -> None:
        scripts = self.config.scripts
        console.print(
            Panel(
                "Your repo is ready to be pushed.\n"
                f"Please look over [cyan]{self.config.project.changelog}[/cyan] and make any changes.\n"
                f'When you are ready, please run "[cyan]./{scripts.push}[/cyan]" to finish the process.\n'
                f'If you would like to cancel this release, please run "./{scripts.abort}"',
                title=f"Release {self.context.new_version}",
                border_style="green",
            )
        )
