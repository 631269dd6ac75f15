"""Settings loader for InputGuard.

Resolves ``ValidationSettings`` from, in priority order:

1. A YAML settings file (explicit path, or ``inputguard.yaml`` in the
   working directory)
2. Environment variables (``INPUTGUARD_PASSWORD_MIN_LENGTH`` and so on)
3. Built-in defaults

The CLI loads a ``.env`` file into the environment first. The process-wide
settings used by library calls skip the settings file search and never load
``.env``, so validating has no filesystem or environment side effects.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from inputguard.config.defaults import (
    DEFAULT_CONFIG_FILENAMES,
    DEFAULT_LIMITS,
    ENV_PREFIX,
)
from inputguard.config.validator import first_error_field, flatten_pydantic_errors
from inputguard.lib.errors import ConfigError
from inputguard.lib.logging_config import get_logger
from inputguard.models.config import ValidationSettings

logger = get_logger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {field: f"{ENV_PREFIX}{field.upper()}" for field in DEFAULT_LIMITS}

_settings: ValidationSettings | None = None


def _get_env_value(field_name: str, env_vars: Mapping[str, str]) -> int | None:
    """Get environment variable value for a field.

    Args:
        field_name: Name of field to get
        env_vars: Environment variables mapping

    Returns:
        Parsed integer, or None if the variable is not set

    Raises:
        ConfigError: If the variable is set but is not an integer
    """
    env_var_name = ENV_VAR_MAP.get(field_name)
    if not env_var_name or env_var_name not in env_vars:
        return None

    raw = env_vars[env_var_name]
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(
            field_name, f"{env_var_name} must be an integer, got {raw!r}"
        ) from e


def _find_config_file(base_dir: Path) -> Path | None:
    """Return the first default settings file present in ``base_dir``."""
    for name in DEFAULT_CONFIG_FILENAMES:
        candidate = base_dir / name
        if candidate.exists():
            return candidate
    return None


class SettingsLoader:
    """Loads and validates ``ValidationSettings``.

    This class handles:
    - Reading the optional YAML settings file
    - Reading INPUTGUARD_* environment variables
    - Merging sources with proper precedence
    - Converting validation errors into ``ConfigError``
    """

    def __init__(self, base_dir: str | Path | None = None) -> None:
        """Initialize the loader.

        Args:
            base_dir: Directory searched for a default settings file
                (defaults to the current working directory)
        """
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    def load_env_file(self) -> bool:
        """Load ``.env`` from ``base_dir`` into ``os.environ``.

        Variables already set in the environment are not overridden.

        Returns:
            True if a ``.env`` file was found and defined any variables
        """
        env_file = self.base_dir / ".env"
        if not env_file.is_file():
            return False
        logger.debug(f"Loading environment from {env_file}")
        return load_dotenv(env_file)

    def parse_yaml(self, file_path: str | Path) -> dict[str, Any]:
        """Parse a YAML settings file.

        Args:
            file_path: Path to the YAML file

        Returns:
            Dictionary of settings (empty if the file is empty)

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        path = Path(file_path)
        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(
                "config_file", f"Settings file not found at {path}"
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse", f"Failed to parse YAML file {path}: {str(e)}"
            ) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(
                "config_file", f"Settings file {path} must contain a mapping"
            )
        return content

    def load(
        self,
        config_path: str | Path | None = None,
        env_vars: Mapping[str, str] | None = None,
        search_default_file: bool = True,
    ) -> ValidationSettings:
        """Resolve settings from file, environment and defaults.

        Args:
            config_path: Explicit settings file. When omitted, a default
                file in ``base_dir`` is used if one exists.
            env_vars: Environment mapping (defaults to ``os.environ``)
            search_default_file: Look for ``inputguard.yaml`` in ``base_dir``
                when no ``config_path`` is given

        Returns:
            Validated settings

        Raises:
            ConfigError: If any source holds an invalid value
        """
        if env_vars is None:
            env_vars = os.environ

        file_values: dict[str, Any] = {}
        path: Path | None = None
        if config_path:
            path = Path(config_path)
        elif search_default_file:
            path = _find_config_file(self.base_dir)
        if path is not None:
            logger.debug(f"Loading validation settings from {path}")
            file_values = self.parse_yaml(path)

        resolved: dict[str, Any] = {}
        for field in ValidationSettings.model_fields:
            # Priority 1: settings file
            if file_values.get(field) is not None:
                resolved[field] = file_values[field]
            # Priority 2: environment variable
            elif (env_value := _get_env_value(field, env_vars)) is not None:
                resolved[field] = env_value
            # Priority 3: built-in default (left to the model)

        unknown = sorted(set(file_values) - set(ValidationSettings.model_fields))
        if unknown:
            raise ConfigError(
                unknown[0], f"Unknown settings key(s): {', '.join(unknown)}"
            )

        try:
            settings = ValidationSettings(**resolved)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e))
            raise ConfigError(
                first_error_field(e), f"Invalid validation settings:\n{error_text}"
            ) from e

        logger.debug(f"Resolved validation settings: {settings.model_dump()}")
        return settings


def get_settings() -> ValidationSettings:
    """Return the process-wide settings, loading them on first use.

    Only ``INPUTGUARD_*`` environment variables and the defaults are
    consulted. Use ``configure`` to install settings loaded from a file.
    """
    global _settings
    if _settings is None:
        _settings = SettingsLoader().load(search_default_file=False)
    return _settings


def configure(settings: ValidationSettings | None) -> None:
    """Replace the process-wide settings.

    Passing ``None`` clears the cache so the next ``get_settings`` call
    reloads from file and environment.
    """
    global _settings
    _settings = settings
