"""Command-line interface for the release orchestrator.

Provides commands for:
- release: Run the interactive release
- validate: Check release preconditions
- candidates: Show the versions offered for a given version
- init-config: Generate configuration
"""

from pathlib import Path

import typer
from rich.table import Table

from material_release import __version__
from material_release.config.defaults import write_default_config
from material_release.config.loader import load_config
from material_release.context import ReleaseContext
from material_release.exceptions import ReleaseError
from material_release.manifest import get_version
from material_release.utils.console import console
from material_release.validators import ValidationResult, ValidatorRegistry
from material_release.version import compute_candidates, parse_version
from material_release.workflow import ExitStatus, ReleaseWorkflow

app = typer.Typer(
    name="material-release",
    help="Interactive release orchestrator for Angular Material",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"material-release version {__version__}")
        raise typer.Exit()


def display_validation_results(
    results: list[ValidationResult],
    title: str = "Precondition Checks",
) -> bool:
    """Display validation results in a formatted table.

    Returns:
        True if all validations passed (no errors)
    """
    table = Table(title=title)
    table.add_column("Status", style="bold", width=8)
    table.add_column("Message")

    has_errors = False
    for result in results:
        if not result.passed:
            status = "[red]FAIL[/red]"
            has_errors = True
        else:
            status = "[green]PASS[/green]"
        table.add_row(status, result.message)

    console.print(table)

    for result in results:
        if not result.passed and result.details:
            console.print(f"\n[red]Details:[/red] {result.details}")
            if result.fix_command:
                console.print(f"[yellow]Fix:[/yellow] {result.fix_command}")

    return not has_errors


def fail(e: ReleaseError) -> typer.Exit:
    console.print(f"[red]Error:[/red] {e}")
    return typer.Exit(code=e.exit_code)


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: B008
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Interactive release orchestrator for Angular Material.

    Prepares a release locally and writes ./push and ./abort scripts.
    """


@app.command()
def release(
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to configuration file (defaults to release.yml if present)",
    ),
) -> None:
    """Prepare a release and write the push and abort scripts.

    Checks the npm account, the branch and the remote trunk, asks for the
    new version, then commits the release locally. Nothing is pushed until
    ./push is run.
    """
    try:
        cfg = load_config(config)
        workflow = ReleaseWorkflow(project_root=Path.cwd(), config=cfg)
        status = workflow.run()
    except ReleaseError as e:
        raise fail(e) from None

    if status != ExitStatus.SUCCESS:
        raise typer.Exit(code=int(status))


@app.command()
def validate(
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to configuration file",
    ),
) -> None:
    """Check release preconditions without making changes.

    Runs every check, even after a failure:
    - npm account (npm whoami)
    - On the trunk branch
    - Trunk synced with the remote
    """
    try:
        cfg = load_config(config)
        project_root = Path.cwd()
        context = ReleaseContext(
            project_root=project_root,
            config=cfg,
            old_version=parse_version(get_version(project_root / cfg.project.manifest)),
        )
        results = ValidatorRegistry.run_all(context)
    except ReleaseError as e:
        raise fail(e) from None

    if display_validation_results(results):
        console.print("\n[green]All preconditions passed![/green]")
    else:
        console.print("\n[red]Some preconditions failed.[/red]")
        raise typer.Exit(code=int(ExitStatus.PRECONDITION_FAILED))


@app.command()
def candidates(
    version: str = typer.Argument(  # noqa: B008
        ...,
        help="Current version, e.g. 1.2.3 or 1.2.3-rc1",
    ),
) -> None:
    """Show the versions the release menu offers for VERSION.

    Examples:
        material-release candidates 0.9.6      # 0.9.7, 0.10.0, 1.0.0
        material-release candidates 1.0.0-rc4  # 1.0.0-rc5, 1.1.0
    """
    try:
        current = parse_version(version)
    except ReleaseError as e:
        raise fail(e) from None

    for index, option in enumerate(compute_candidates(current), start=1):
        console.print(f"{index}) [cyan]{option}[/cyan]")


@app.command(name="init-config")
def init_config(
    output: Path = typer.Option(  # noqa: B008
        Path("release.yml"),
        "--output",
        "-o",
        help="Output path for configuration file",
    ),
    force: bool = typer.Option(  # noqa: B008
        False,
        "--force",
        "-f",
        help="Overwrite existing configuration",
    ),
) -> None:
    """Write the default configuration to a file."""
    if output.exists() and not force:
        console.print(f"[red]Configuration already exists:[/red] {output}")
        console.print("Use --force to overwrite")
        raise typer.Exit(code=1)

    try:
        write_default_config(output)
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from None

    console.print(f"[green]Configuration written to:[/green] {output}")


if __name__ == "__main__":
    app()
