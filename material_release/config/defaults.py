"""Default configuration generation."""

from pathlib import Path

import yaml

from material_release.config.models import ReleaseConfig

HEADER = """\
# Release configuration for material-release.
# Every key is optional; omitted keys keep the values shown here.
# Command templates may use {{old_version}}, {{new_version}}, {{origin}},
# {{trunk}}, {{tag_prefix}}, {{tag}} and {{release_branch}}.

"""


def generate_default_config() -> str:
    """Render the built-in configuration as YAML."""
    data = ReleaseConfig().model_dump(mode="json")
    return HEADER + yaml.safe_dump(data, sort_keys=False, default_flow_style=False, width=120)


def write_default_config(output: Path) -> None:
    """Write the default configuration to a file.

    Args:
        output: Destination path; parent directories are created
    """
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(generate_default_config(), encoding="utf-8")
