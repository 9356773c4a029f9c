# pyright: reportAny=false, reportExplicitAny=false
"""Configuration loading from TOML and environment variables.

Precedence, highest first: ``GITPARSE_*`` environment variables, the TOML
file, model defaults.
"""

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from gitparse.config._models import GitParseConfig
from gitparse.exceptions import ConfigLoadError, ConfigValidationError

# Environment variable -> (section, key)
ENV_OVERRIDES: Final = {
    "GITPARSE_LOG_LEVEL": ("logging", "level"),
    "GITPARSE_LOG_FORMAT": ("logging", "format"),
    "GITPARSE_LOG_FILE": ("logging", "file"),
    "GITPARSE_STRICT_STATUS": ("parsing", "strict_status_codes"),
}


def read_toml_file(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigLoadError: If the file is missing, unreadable or not valid TOML.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Config file not found: {path}"
        raise ConfigLoadError(msg, path=path) from e
    except OSError as e:
        msg = f"Cannot read config file {path}: {e}"
        raise ConfigLoadError(msg, path=path) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file: {e}"
        raise ConfigLoadError(msg, path=path, line=e.lineno, column=e.colno) from e


def _apply_env(data: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    merged = {k: dict(v) if isinstance(v, dict) else v for k, v in data.items()}
    for var, (section, key) in ENV_OVERRIDES.items():
        value = env.get(var)
        if not value:
            continue
        section_values = merged.get(section)
        if not isinstance(section_values, dict):
            section_values = merged[section] = {}
        section_values[key] = value.lower() if key != "file" else value
    return merged


def load_config(
    path: Path | str | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> GitParseConfig:
    """Load configuration.

    Args:
        path: TOML file to read; defaults only when None.
        env: Environment to read overrides from; ``os.environ`` when None.

    Returns:
        The validated configuration.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed.
        ConfigValidationError: If a value has the wrong type or is not
            one of the allowed choices.
    """
    data = read_toml_file(Path(path)) if path is not None else {}
    data = _apply_env(data, os.environ if env is None else env)

    try:
        return GitParseConfig.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        key = ".".join(str(part) for part in error.get("loc", ()))
        ctx = error.get("ctx") or {}
        expected = str(ctx.get("expected", error.get("type", "valid value")))
        msg = f"Invalid configuration value for {key}: {error.get('msg', 'validation error')}"
        raise ConfigValidationError(
            msg, key=key, value=error.get("input"), expected=expected
        ) from e
