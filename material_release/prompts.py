"""Interactive selection of the version to release."""

from collections.abc import Callable

import typer

from material_release.exceptions import (
    InvalidSelectionError,
    ReleaseCancelledError,
)
from material_release.utils.console import clear, console
from material_release.version import (
    SemanticVersion,
    compare_versions,
    compute_candidates,
    is_valid_version,
    parse_version,
)

QUIT_WORDS = ("q", "quit")

Ask = Callable[[str], str]
Confirm = Callable[[str], bool]


def ask_with_typer(text: str) -> str:
    return str(typer.prompt(text, default="", show_default=False))


def confirm_with_typer(text: str) -> bool:
    return bool(typer.confirm(text, default=False))


def parse_selection(entry: str, options: list[SemanticVersion]) -> SemanticVersion:
    """Turn prompt input into a version.

    Args:
        entry: A 1-based menu index, a literal version, or a quit word
        options: Menu options in display order

    Returns:
        The selected version

    Raises:
        ReleaseCancelledError: If the operator asked to quit
        InvalidSelectionError: If the entry is neither an index nor a version
    """
    entry = entry.strip()
    if entry.lower() in QUIT_WORDS:
        raise ReleaseCancelledError("Release cancelled")

    if entry.isdigit() and 1 <= int(entry) <= len(options):
        return options[int(entry) - 1]

    if is_valid_version(entry):
        return parse_version(entry)

    raise InvalidSelectionError(
        "Your entry was invalid.",
        details=f"Got {entry!r}",
        fix_hint=f"Enter 1-{len(options)}, a version such as 1.2.3 or 1.2.3-rc1, or q to quit",
    )


class VersionPrompt:
    """Asks the operator which version to release.

    The menu is repeated after an invalid entry (up to ``max_attempts``
    times) and from the start whenever the final confirmation is declined.
    Entering ``q`` cancels the release.
    """

    def __init__(
        self,
        current: SemanticVersion,
        max_attempts: int = 10,
        ask: Ask = ask_with_typer,
        confirm: Confirm = confirm_with_typer,
        clear_screen: bool = True,
    ) -> None:
        self.current = current
        self.max_attempts = max_attempts
        self.ask = ask
        self.confirm = confirm
        self.clear_screen = clear_screen

    def choose(self) -> SemanticVersion:
        """Run the prompt until a version is confirmed.

        Each round of the menu allows up to max_attempts invalid entries.

        Raises:
            ReleaseCancelledError: If the operator quits
            InvalidSelectionError: If max_attempts invalid entries were made in one round
        """
        while True:
            version = self._select_with_retries()

            if not version.is_rc:
                console.print()
                if self.confirm("Is this a release candidate?"):
                    version = SemanticVersion(version.major, version.minor, version.patch, rc=1)

            console.print()
            console.print(f"The new version will be [cyan]{version}[/cyan].")
            if self.confirm("Is this correct?"):
                return version

    def _select_with_retries(self) -> SemanticVersion:
        invalid_entries = 0
        while True:
            try:
                return self._select()
            except InvalidSelectionError as e:
                invalid_entries += 1
                console.print(f"[red]{e.message}[/red] [dim]{e.fix_hint}[/dim]")
                if invalid_entries >= self.max_attempts:
                    raise InvalidSelectionError(
                        f"Gave up after {invalid_entries} invalid entries",
                        fix_hint="Run the release again",
                    ) from e

    def _select(self) -> SemanticVersion:
        options = compute_candidates(self.current)

        if self.clear_screen:
            clear()
        console.print(f"The current version is [cyan]{self.current}[/cyan].")
        console.print()
        console.print("What type of release is this?")
        for index, option in enumerate(options, start=1):
            console.print(f"{index}) [cyan]{option}[/cyan]")
        console.print()

        version = parse_selection(self.ask("Please select a new version"), options)
        if compare_versions(version, self.current) <= 0:
            console.print(
                f"[yellow]Warning:[/yellow] {version} is not newer than {self.current}"
            )
        return version
