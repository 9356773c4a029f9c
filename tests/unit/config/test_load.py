"""Unit tests for configuration loading."""

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from gitparse.config import (
    GitParseConfig,
    LogFormat,
    LogLevel,
    load_config,
    read_toml_file,
)
from gitparse.exceptions import ConfigLoadError, ConfigValidationError

if TYPE_CHECKING:
    from pyfakefs.fake_filesystem import FakeFilesystem

CONFIG_TOML = """\
[logging]
level = "debug"
format = "json"
file = "/var/log/gitparse.log"

[parsing]
strict_status_codes = true

[unrelated]
key = "ignored"
"""


class TestReadTomlFile:
    def test_reads_table(self, fs: "FakeFilesystem") -> None:
        _ = fs.create_file("/etc/gitparse.toml", contents=CONFIG_TOML)

        data = read_toml_file(Path("/etc/gitparse.toml"))

        assert data["logging"]["level"] == "debug"

    def test_missing_file(self, fs: "FakeFilesystem") -> None:
        with pytest.raises(ConfigLoadError, match="not found") as exc_info:
            _ = read_toml_file(Path("/etc/missing.toml"))

        assert exc_info.value.path == Path("/etc/missing.toml")

    def test_invalid_toml_reports_position(self, fs: "FakeFilesystem") -> None:
        _ = fs.create_file("/etc/bad.toml", contents="[logging\nlevel = 1\n")

        with pytest.raises(ConfigLoadError) as exc_info:
            _ = read_toml_file(Path("/etc/bad.toml"))

        assert exc_info.value.line == 1
        assert exc_info.value.column is not None


class TestLoadConfig:
    def test_defaults(self) -> None:
        config = load_config(env={})

        assert config == GitParseConfig()
        assert config.logging.level is LogLevel.WARNING
        assert config.logging.format is LogFormat.TEXT
        assert config.parsing.strict_status_codes is False

    def test_file_values(self, tmp_path: Path) -> None:
        path = tmp_path / "gitparse.toml"
        _ = path.write_text(CONFIG_TOML)

        config = load_config(path, env={})

        assert config.logging.level is LogLevel.DEBUG
        assert config.logging.format is LogFormat.JSON
        assert config.logging.file == "/var/log/gitparse.log"
        assert config.parsing.strict_status_codes is True

    def test_environment_overrides_file(self, tmp_path: Path) -> None:
        path = tmp_path / "gitparse.toml"
        _ = path.write_text(CONFIG_TOML)

        config = load_config(
            str(path),
            env={
                "GITPARSE_LOG_LEVEL": "ERROR",
                "GITPARSE_LOG_FILE": "/tmp/Mixed.log",
                "GITPARSE_STRICT_STATUS": "false",
            },
        )

        assert config.logging.level is LogLevel.ERROR
        assert config.logging.format is LogFormat.JSON
        assert config.logging.file == "/tmp/Mixed.log"
        assert config.parsing.strict_status_codes is False

    def test_empty_environment_value_is_ignored(self) -> None:
        config = load_config(env={"GITPARSE_LOG_LEVEL": ""})

        assert config.logging.level is LogLevel.WARNING

    def test_reads_process_environment_by_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GITPARSE_LOG_FORMAT", "json")

        assert load_config().logging.format is LogFormat.JSON

    def test_config_is_frozen(self) -> None:
        config = load_config(env={})

        with pytest.raises(ValueError, match="frozen"):
            config.parsing = config.parsing  # pyright: ignore[reportAttributeAccessIssue]


class TestLoadConfigErrors:
    def test_invalid_choice(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = load_config(env={"GITPARSE_LOG_LEVEL": "loud"})

        error = exc_info.value
        assert error.key == "logging.level"
        assert error.value == "loud"

    def test_invalid_boolean(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = load_config(env={"GITPARSE_STRICT_STATUS": "maybe"})

        assert exc_info.value.key == "parsing.strict_status_codes"

    def test_section_of_wrong_type(self, tmp_path: Path) -> None:
        path = tmp_path / "gitparse.toml"
        _ = path.write_text('logging = "loud"\n')

        with pytest.raises(ConfigValidationError) as exc_info:
            _ = load_config(path, env={})

        assert exc_info.value.key == "logging"
