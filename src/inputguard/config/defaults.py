"""Default validation limits for InputGuard."""

# Inclusive character-length limits per field
DEFAULT_LIMITS: dict[str, int] = {
    "password_min_length": 8,
    "password_max_length": 256,
    "username_min_length": 4,
    "username_max_length": 32,
    "message_min_length": 1,
    "message_max_length": 2000,
}

# Settings file looked up in the working directory when no path is given
DEFAULT_CONFIG_FILENAMES: tuple[str, ...] = ("inputguard.yaml", "inputguard.yml")

ENV_PREFIX = "INPUTGUARD_"
