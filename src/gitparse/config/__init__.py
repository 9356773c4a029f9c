"""Configuration for gitparse.

Example:
    >>> from gitparse.config import load_config
    >>> config = load_config(env={"GITPARSE_STRICT_STATUS": "true"})
    >>> config.parsing.strict_status_codes
    True
"""

from gitparse.config._load import ENV_OVERRIDES, load_config, read_toml_file
from gitparse.config._models import (
    GitParseConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    ParsingConfig,
)

__all__ = [
    "ENV_OVERRIDES",
    "GitParseConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ParsingConfig",
    "load_config",
    "read_toml_file",
]
