"""Operator-facing output helpers built on a shared rich console."""

from rich.console import Console
from rich.text import Text

# Rich console for formatted output
console = Console(highlight=False)

DEFAULT_LINE_WIDTH = 65


def start(message: str, width: int = DEFAULT_LINE_WIDTH) -> None:
    """Print a step message padded so that a following done() lines up.

    Args:
        message: Rich markup message
        width: Total line width, including the trailing status
    """
    visible = Text.from_markup(message).cell_len
    padding = max(width - 4 - visible, 1)
    console.print(message + " " * padding, end="")


def done() -> None:
    """Finish a line started by start()."""
    console.print("[green]done[/green]")


def line(width: int = DEFAULT_LINE_WIDTH) -> None:
    """Print a horizontal separator."""
    console.print("-" * width)


def error(message: str) -> None:
    """Print an error message in the release tool's format."""
    console.print(f"[red]Error: {message}[/red]")


def clear() -> None:
    """Clear the terminal before the version prompt."""
    console.clear()
