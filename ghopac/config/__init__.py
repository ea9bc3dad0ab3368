# ghopac Configuration Module
# Handles configuration discovery, loading, validation, and the sample file

from ghopac.config.defaults import generate_sample_config, sample_config
from ghopac.config.loader import (
    ConfigError,
    ConfigNotFoundError,
    get_config_path,
    load_config,
    validate_config_file,
    write_sample_config,
)
from ghopac.config.schema import CloneProtocol, GhopacConfig, OrgConfig

__all__ = [
    # Schema
    "GhopacConfig",
    "OrgConfig",
    "CloneProtocol",
    # Loader
    "ConfigError",
    "ConfigNotFoundError",
    "load_config",
    "get_config_path",
    "validate_config_file",
    "write_sample_config",
    # Defaults
    "sample_config",
    "generate_sample_config",
]
