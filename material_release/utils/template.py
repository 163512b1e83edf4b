"""Placeholder substitution for release command templates.

Templates use ``{{name}}`` placeholders. They are stored verbatim when a
step registers a command and resolved only when the command is executed or
written to a script, so a template may reference a value (such as the new
version) that is assigned after the template was registered.
"""

import re
from collections.abc import Mapping

from material_release.exceptions import TemplateError

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def placeholders(template: str) -> list[str]:
    """List the placeholder names used in a template, in order of appearance.

    Examples:
        >>> placeholders("git tag {{tag}} && echo {{ new_version }}")
        ['tag', 'new_version']
    """
    return [match.group(1) for match in PLACEHOLDER_PATTERN.finditer(template)]


def fill(template: str, values: Mapping[str, object | None]) -> str:
    """Resolve every ``{{name}}`` placeholder in a template.

    Args:
        template: Command or message template
        values: Mapping of placeholder names to values

    Returns:
        The template with all placeholders replaced by ``str(value)``

    Raises:
        TemplateError: If a placeholder is unknown or its value is still None

    Examples:
        >>> fill("git checkout -b release/{{new_version}}", {"new_version": "1.0.1"})
        'git checkout -b release/1.0.1'
    """

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in values:
            raise TemplateError(
                f"Unknown placeholder '{{{{{name}}}}}'",
                details=f"Template: {template}",
                fix_hint=f"Use one of: {', '.join(sorted(values))}",
            )
        value = values[name]
        if value is None:
            raise TemplateError(
                f"Placeholder '{{{{{name}}}}}' has no value yet",
                details=f"Template: {template}",
            )
        return str(value)

    return PLACEHOLDER_PATTERN.sub(substitute, template)
