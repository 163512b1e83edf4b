"""Writing the generated abort and push scripts."""

import stat
from pathlib import Path

from material_release.context import ReleaseContext
from material_release.exceptions import ReleaseError

EXECUTABLE = stat.S_IRWXU | stat.S_IRGRP | stat.S_IXGRP | stat.S_IROTH | stat.S_IXOTH


def render_script(context: ReleaseContext, commands: list[str]) -> str:
    """Render a script body, resolving every template against the context."""
    shebang = context.config.scripts.shebang
    body = "\n".join(context.resolve(command) for command in commands)
    return f"{shebang}\n\n{body}\n"


def write_script(context: ReleaseContext, name: str, commands: list[str]) -> Path:
    """Write an executable script into the project root.

    Args:
        context: Release context used to resolve the templates
        name: File name of the script
        commands: Command templates, in execution order

    Returns:
        Path of the written script

    Raises:
        ReleaseError: If the script cannot be written
        TemplateError: If a template cannot be resolved
    """
    path = context.project_root / name
    content = render_script(context, commands)
    try:
        path.write_text(content, encoding="utf-8")
        path.chmod(EXECUTABLE)
    except OSError as e:
        raise ReleaseError(
            f"Failed to write the {name} script",
            details=str(e),
            fix_hint=f"Check write permissions for {context.project_root}",
        ) from e
    return path


def write_abort_script(context: ReleaseContext) -> Path:
    return write_script(context, context.config.scripts.abort, context.abort_script())


def write_push_script(context: ReleaseContext) -> Path:
    return write_script(context, context.config.scripts.push, context.push_script())
