"""Reading and rewriting JSON manifests (package.json, bower.json, docs.json).

Only the targeted fields change; all other keys keep their values and order.
"""

import json
from pathlib import Path
from typing import Any

from material_release.exceptions import ReleaseError


def read_json(path: Path) -> dict[str, Any]:
    """Parse a JSON manifest.

    Raises:
        ReleaseError: If the file is missing or is not a JSON object
    """
    if not path.exists():
        raise ReleaseError(
            f"{path.name} not found",
            details=f"Expected at: {path}",
        )
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ReleaseError(
            f"Invalid JSON in {path.name}",
            details=str(e),
            fix_hint=f"Fix JSON syntax errors in {path}",
        ) from e

    if not isinstance(data, dict):
        raise ReleaseError(f"{path.name} does not contain a JSON object", details=str(path))
    return data


def write_json(path: Path, data: dict[str, Any]) -> None:
    """Write a manifest with 2-space indentation and a trailing newline."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def get_version(path: Path) -> str:
    """Get the version field of a manifest.

    Raises:
        ReleaseError: If the manifest has no string version
    """
    version = read_json(path).get("version")
    if not isinstance(version, str) or not version:
        raise ReleaseError(
            f"No version field in {path.name}",
            fix_hint=f'Add "version": "1.0.0" to {path.name}',
        )
    return version


def set_version(path: Path, version: str) -> None:
    """Set the version field of a manifest."""
    data = read_json(path)
    data["version"] = version
    write_json(path, data)


def add_docs_version(path: Path, version: str) -> None:
    """Record a new documentation version in docs.json.

    The version is prepended to ``versions`` and becomes ``latest``.
    """
    data = read_json(path)
    versions = data.get("versions") or []
    if not isinstance(versions, list):
        raise ReleaseError(f"'versions' in {path.name} is not a list", details=str(path))
    data["versions"] = [version, *versions]
    data["latest"] = version
    write_json(path, data)


def version_update_command(manifest: str, version_placeholder: str = "{{new_version}}") -> str:
    """Build a one-line shell command that rewrites a manifest's version.

    The command runs later from the push script, so the version stays a
    template placeholder here.
    """
    program = (
        "import json; "
        f"p = json.load(open('{manifest}')); "
        f"p['version'] = '{version_placeholder}'; "
        f"open('{manifest}', 'w').write(json.dumps(p, indent=2, ensure_ascii=False) + '\\n')"
    )
    return f'python3 -c "{program}"'
