# ghopac Default Configuration
# Sample configuration as Python dict and YAML generator

from typing import Any

import yaml

from ghopac.utils.platform import get_cpu_count

TOKEN_PLACEHOLDER = "Replace with a token from https://github.com/settings/tokens"


def sample_config() -> dict[str, Any]:
    """Build a ready-to-edit sample configuration."""
    return {
        "github_access_token": TOKEN_PLACEHOLDER,
        "orgs": [
            {"org": "myorgname", "path": "/some/source/directory"},
        ],
        "syncpoints": ["/some/other/directory"],
        "concurrency": get_cpu_count(),
        "verbose": True,
    }


def generate_sample_config() -> str:
    """
    Generate the sample configuration as YAML.

    Returns:
        YAML string with a header comment.
    """
    header = (
        "# ghopac configuration\n"
        "# orgs: every repository of each org is cloned or pulled under its path\n"
        "# syncpoints: existing local repositories that are only ever pulled\n"
        "# concurrency: number of parallel git operations (0 = CPU count)\n\n"
    )
    return header + yaml.dump(sample_config(), default_flow_style=False, sort_keys=False, allow_unicode=True)
