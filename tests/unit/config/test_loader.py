"""Tests for settings loading in inputguard.config.loader."""

import os
from pathlib import Path

import pytest

from inputguard.config.loader import (
    ENV_VAR_MAP,
    SettingsLoader,
    configure,
    get_settings,
)
from inputguard.lib.errors import ConfigError
from inputguard.models.config import ValidationSettings


@pytest.mark.unit
class TestEnvVarMap:
    """Tests for the environment variable naming."""

    def test_every_limit_has_env_var(self) -> None:
        """Each settings field maps to an INPUTGUARD_ variable."""
        assert set(ENV_VAR_MAP) == set(ValidationSettings.model_fields)
        assert ENV_VAR_MAP["password_min_length"] == "INPUTGUARD_PASSWORD_MIN_LENGTH"


@pytest.mark.unit
class TestSettingsLoader:
    """Tests for SettingsLoader.load precedence and errors."""

    def test_defaults_without_sources(self, temp_dir: Path) -> None:
        """No file and no env vars gives the built-in limits."""
        settings = SettingsLoader(temp_dir).load(env_vars={})
        assert settings == ValidationSettings()
        assert settings.password_min_length == 8
        assert settings.message_max_length == 2000

    def test_env_overrides_defaults(self, temp_dir: Path) -> None:
        """INPUTGUARD_* variables replace defaults."""
        settings = SettingsLoader(temp_dir).load(
            env_vars={"INPUTGUARD_USERNAME_MAX_LENGTH": "40"}
        )
        assert settings.username_max_length == 40
        assert settings.username_min_length == 4

    def test_yaml_overrides_env_and_defaults(self, temp_dir: Path) -> None:
        """The settings file wins over env vars."""
        (temp_dir / "inputguard.yaml").write_text("password_min_length: 12\n")
        settings = SettingsLoader(temp_dir).load(
            env_vars={
                "INPUTGUARD_PASSWORD_MIN_LENGTH": "10",
                "INPUTGUARD_MESSAGE_MAX_LENGTH": "500",
            }
        )
        assert settings.password_min_length == 12
        assert settings.message_max_length == 500

    def test_explicit_config_path(self, temp_dir: Path) -> None:
        """An explicit path is used instead of the default file name."""
        config = temp_dir / "custom.yaml"
        config.write_text("message_max_length: 280\n")
        settings = SettingsLoader(temp_dir).load(config_path=config, env_vars={})
        assert settings.message_max_length == 280

    def test_yml_extension_found(self, temp_dir: Path) -> None:
        """inputguard.yml is picked up as well."""
        (temp_dir / "inputguard.yml").write_text("username_min_length: 3\n")
        settings = SettingsLoader(temp_dir).load(env_vars={})
        assert settings.username_min_length == 3

    def test_empty_yaml_uses_defaults(self, temp_dir: Path) -> None:
        """An empty settings file is ignored."""
        (temp_dir / "inputguard.yaml").write_text("")
        assert SettingsLoader(temp_dir).load(env_vars={}) == ValidationSettings()

    def test_dotenv_file_loaded_on_request(
        self, temp_dir: Path, isolated_env: dict[str, str]
    ) -> None:
        """load_env_file feeds a .env file in base_dir into the environment."""
        (temp_dir / ".env").write_text("INPUTGUARD_PASSWORD_MAX_LENGTH=128\n")
        loader = SettingsLoader(temp_dir)
        assert loader.load_env_file() is True
        assert loader.load().password_max_length == 128

    def test_load_does_not_read_dotenv(
        self, temp_dir: Path, isolated_env: dict[str, str]
    ) -> None:
        """load() alone leaves os.environ untouched."""
        (temp_dir / ".env").write_text("INPUTGUARD_PASSWORD_MAX_LENGTH=128\n")
        settings = SettingsLoader(temp_dir).load()
        assert settings.password_max_length == 256
        assert "INPUTGUARD_PASSWORD_MAX_LENGTH" not in os.environ

    def test_missing_dotenv_is_not_an_error(self, temp_dir: Path) -> None:
        """Without a .env file nothing is loaded."""
        assert SettingsLoader(temp_dir).load_env_file() is False

    def test_default_file_search_can_be_skipped(self, temp_dir: Path) -> None:
        """search_default_file=False ignores inputguard.yaml in base_dir."""
        (temp_dir / "inputguard.yaml").write_text("username_max_length: 20\n")
        settings = SettingsLoader(temp_dir).load(
            env_vars={}, search_default_file=False
        )
        assert settings.username_max_length == 32

    def test_non_integer_env_raises(self, temp_dir: Path) -> None:
        """A non-numeric env var is a configuration error."""
        with pytest.raises(ConfigError) as exc_info:
            SettingsLoader(temp_dir).load(
                env_vars={"INPUTGUARD_PASSWORD_MIN_LENGTH": "eight"}
            )
        assert exc_info.value.field == "password_min_length"

    def test_min_above_max_raises(self, temp_dir: Path) -> None:
        """Inconsistent limits are rejected."""
        (temp_dir / "inputguard.yaml").write_text(
            "username_min_length: 40\nusername_max_length: 10\n"
        )
        with pytest.raises(ConfigError) as exc_info:
            SettingsLoader(temp_dir).load(env_vars={})
        assert "username_min_length" in exc_info.value.message

    def test_negative_limit_raises(self, temp_dir: Path) -> None:
        """Negative lengths are rejected with the field name."""
        (temp_dir / "inputguard.yaml").write_text("message_min_length: -1\n")
        with pytest.raises(ConfigError) as exc_info:
            SettingsLoader(temp_dir).load(env_vars={})
        assert exc_info.value.field == "message_min_length"

    def test_unknown_key_raises(self, temp_dir: Path) -> None:
        """Typos in the settings file are reported."""
        (temp_dir / "inputguard.yaml").write_text("pasword_min_length: 9\n")
        with pytest.raises(ConfigError) as exc_info:
            SettingsLoader(temp_dir).load(env_vars={})
        assert exc_info.value.field == "pasword_min_length"

    def test_invalid_yaml_raises(self, temp_dir: Path) -> None:
        """Unparseable YAML is a configuration error."""
        (temp_dir / "inputguard.yaml").write_text("password_min_length: [unclosed\n")
        with pytest.raises(ConfigError) as exc_info:
            SettingsLoader(temp_dir).load(env_vars={})
        assert exc_info.value.field == "yaml_parse"

    def test_non_mapping_yaml_raises(self, temp_dir: Path) -> None:
        """A YAML list is not a valid settings file."""
        (temp_dir / "inputguard.yaml").write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            SettingsLoader(temp_dir).load(env_vars={})

    def test_missing_explicit_file_raises(self, temp_dir: Path) -> None:
        """A missing explicit settings file is a configuration error."""
        with pytest.raises(ConfigError) as exc_info:
            SettingsLoader(temp_dir).load(
                config_path=temp_dir / "absent.yaml", env_vars={}
            )
        assert exc_info.value.field == "config_file"


@pytest.mark.unit
class TestProcessSettings:
    """Tests for get_settings and configure."""

    def test_configure_replaces_settings(self) -> None:
        """configure() sets what get_settings() returns."""
        custom = ValidationSettings(password_min_length=10)
        configure(custom)
        assert get_settings() is custom

    def test_get_settings_loads_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """After a reset, settings are read from the environment once."""
        monkeypatch.setenv("INPUTGUARD_USERNAME_MAX_LENGTH", "20")
        configure(None)
        first = get_settings()
        assert first.username_max_length == 20
        assert get_settings() is first

    def test_get_settings_ignores_working_directory(
        self,
        temp_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
        isolated_env: dict[str, str],
    ) -> None:
        """Neither inputguard.yaml nor .env in the cwd affects library calls."""
        (temp_dir / "inputguard.yaml").write_text("username_max_length: 20\n")
        (temp_dir / ".env").write_text("INPUTGUARD_PASSWORD_MAX_LENGTH=128\n")
        monkeypatch.chdir(temp_dir)
        configure(None)
        assert get_settings() == ValidationSettings()
        assert "INPUTGUARD_PASSWORD_MAX_LENGTH" not in os.environ
