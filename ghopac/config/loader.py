# ghopac Configuration Loader
# Locate, load and validate configuration files

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ghopac.config.defaults import generate_sample_config
from ghopac.config.schema import GhopacConfig
from ghopac.utils.paths import xdg_config_dirs, xdg_config_home

PROGRAM_NAME = "ghopac"
CONFIG_FILE_NAMES = ("config.yaml", "config.yml", "config.json")
CONFIG_ENV_VAR = "GHOPAC_CONFIG"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read, parsed or validated."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when no configuration file exists."""


def _find_in(base: Path) -> Optional[Path]:
    for name in CONFIG_FILE_NAMES:
        candidate = base / PROGRAM_NAME / name
        if candidate.is_file():
            return candidate
    return None


def get_config_path() -> Path:
    """
    Get the path to the configuration file.

    Searches $GHOPAC_CONFIG, then $XDG_CONFIG_HOME/ghopac, then every
    absolute entry of $XDG_CONFIG_DIRS. If nothing exists, returns the
    location where the file should be created.

    Raises:
        HomeDirectoryError: If the user's home cannot be determined.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    config_home = xdg_config_home()
    found = _find_in(config_home)
    if found:
        return found

    for config_dir in xdg_config_dirs():
        found = _find_in(config_dir)
        if found:
            return found

    # Doesn't exist anywhere, return where it should be
    return config_home / PROGRAM_NAME / CONFIG_FILE_NAMES[0]


def load_config(config_path: Optional[Path] = None) -> GhopacConfig:
    """
    Load configuration from a YAML (or JSON) file.

    Args:
        config_path: Optional path to config file. Uses discovery if not provided.

    Returns:
        GhopacConfig: Validated configuration object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigError: If the config file can't be read or is invalid.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Configuration file not found: {config_path}", path=config_path)

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Unable to read your config file [{config_path}]: {e}", path=config_path) from e
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Can't parse your config file [{config_path}]. Try removing it and running again.\n{e}",
            path=config_path,
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file [{config_path}] must contain a mapping", path=config_path)

    try:
        return GhopacConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid config file [{config_path}]:\n" + "\n".join(_format_errors(e)),
            path=config_path,
        ) from e


def validate_config_file(config_path: Optional[Path] = None) -> tuple[bool, list[str]]:
    """
    Validate a configuration file.

    Args:
        config_path: Path to config file to validate.

    Returns:
        Tuple of (is_valid, error_messages).
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return False, [f"Configuration file not found: {config_path}"]

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        return False, [f"Unable to read config file: {e}"]
    except yaml.YAMLError as e:
        return False, [f"Invalid YAML syntax: {e}"]

    if data is None:
        return False, ["Configuration file is empty"]

    try:
        config = GhopacConfig.model_validate(data)
    except ValidationError as e:
        return False, _format_errors(e)

    errors: list[str] = []
    if not config.orgs and not config.syncpoints:
        errors.append("Nothing to sync: no orgs and no syncpoints defined")
    if config.orgs and not config.github_access_token:
        errors.append("Orgs defined but no github_access_token set")

    return len(errors) == 0, errors


def write_sample_config(config_path: Optional[Path] = None) -> tuple[Path, bool]:
    """
    Write the sample configuration unless a file already exists.

    Returns:
        Tuple of (config_path, was_created).
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        return config_path, False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_sample_config(), encoding="utf-8")
    return config_path, True


def _format_errors(error: ValidationError) -> list[str]:
    messages = []
    for item in error.errors():
        loc = " -> ".join(str(part) for part in item["loc"])
        messages.append(f"{loc}: {item['msg']}")
    return messages
