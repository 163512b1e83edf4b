"""Subprocess execution utilities.

Provides:
- ANSI escape code stripping (keeps registry and git output comparable)
- run(): argument-list execution that raises ShellError on failure
- capture(): bash-string execution that never raises and hands the
  ShellError back in place of the output
"""

import re
import shlex
import subprocess
from pathlib import Path


class ShellError(Exception):
    """Exception raised when a shell command fails.

    Attributes:
        cmd: The command that failed
        returncode: Exit code of the failed command
        stdout: Standard output (ANSI stripped)
        stderr: Standard error (ANSI stripped)
    """

    def __init__(
        self,
        cmd: str,
        returncode: int,
        stdout: str,
        stderr: str,
    ) -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(f"Command failed with exit code {returncode}: {cmd}")

    def __str__(self) -> str:
        parts = [f"Command failed: {self.cmd}"]
        parts.append(f"Exit code: {self.returncode}")
        if self.stderr:
            parts.append(f"Stderr: {self.stderr}")
        if self.stdout:
            parts.append(f"Stdout: {self.stdout}")
        return "\n".join(parts)


# Matches: ESC[...m, ESC[...;...m, OSC sequences and DCS/PM/APC strings
ANSI_PATTERN = re.compile(
    r"\x1b\[[0-9;]*[a-zA-Z]|\x1b\][^\x07]*\x07|\x1b[PX^_][^\x1b]*\x1b\\"
)

CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences and control characters from text.

    Args:
        text: Input text potentially containing ANSI codes

    Returns:
        Clean text with all ANSI sequences removed
    """
    if not text:
        return ""
    result = ANSI_PATTERN.sub("", text)
    result = CONTROL_CHARS_PATTERN.sub("", result)
    return result


def run(
    cmd: str | list[str],
    cwd: Path | None = None,
    check: bool = True,
    timeout: int = 300,
) -> subprocess.CompletedProcess[str]:
    """Execute a command without a shell, capturing ANSI-stripped output.

    Args:
        cmd: Command to execute (string or list of arguments)
        cwd: Working directory for the command
        check: Whether to raise ShellError on non-zero exit
        timeout: Maximum execution time in seconds

    Returns:
        CompletedProcess with stdout/stderr

    Raises:
        ShellError: If command fails and check=True
        subprocess.TimeoutExpired: If command exceeds timeout
    """
    cmd_list = shlex.split(cmd) if isinstance(cmd, str) else list(cmd)

    result = subprocess.run(
        cmd_list,
        cwd=cwd,
        capture_output=True,
        text=True,
        timeout=timeout,
    )
    result.stdout = strip_ansi(result.stdout) if result.stdout else ""
    result.stderr = strip_ansi(result.stderr) if result.stderr else ""

    if check and result.returncode != 0:
        raise ShellError(
            cmd=" ".join(cmd_list),
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )

    return result


def capture(
    cmd: str,
    cwd: Path | None = None,
    timeout: int = 1800,
) -> str | ShellError:
    """Run a bash command line and return its trimmed stdout.

    Release commands use shell syntax (``$(...)``, globs, redirections), so
    the line is handed to ``bash -c`` as a single argument.

    This never raises for a failing command: the ShellError is returned in
    place of the output so the caller decides what a failure means.

    Args:
        cmd: Bash command line
        cwd: Working directory
        timeout: Maximum execution time in seconds

    Returns:
        Trimmed stdout, or the ShellError describing the failure
    """
    try:
        result = run(["bash", "-c", cmd], cwd=cwd, check=False, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        return ShellError(cmd=cmd, returncode=-1, stdout="", stderr=f"Timed out after {e.timeout}s")
    except OSError as e:
        return ShellError(cmd=cmd, returncode=-1, stdout="", stderr=str(e))

    if result.returncode != 0:
        return ShellError(
            cmd=cmd,
            returncode=result.returncode,
            stdout=result.stdout.strip(),
            stderr=result.stderr.strip(),
        )
    return result.stdout.strip()
