"""Readable messages for rejected ``ValidationSettings``."""

from pydantic import ValidationError as PydanticValidationError


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Turn a settings ValidationError into one line per problem.

    Lines name the offending limit (``password_min_length`` and so on), or
    ``settings`` for model-level checks such as min/max ordering. The
    rejected value is echoed for scalar fields only, never the whole
    settings mapping.

    Args:
        exc: Error raised while building ``ValidationSettings``

    Returns:
        Lines such as ``Field 'password_min_length': Input should be greater
        than or equal to 0``

    Example:
        >>> from inputguard.models.config import ValidationSettings
        >>> try:
        ...     ValidationSettings(password_min_length=-1)
        ... except PydanticValidationError as e:
        ...     msgs = flatten_pydantic_errors(e)
    """
    errors: list[str] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(item) for item in loc) if loc else "settings"
        msg = error.get("msg", "Unknown error")
        input_val = error.get("input")

        if error.get("type") == "value_error" and not isinstance(input_val, dict):
            errors.append(f"Field '{field_path}': {msg} (received: {input_val!r})")
        else:
            errors.append(f"Field '{field_path}': {msg}")

    return errors or ["Settings rejected without a specific error"]


def first_error_field(exc: PydanticValidationError) -> str:
    """Return the top-level field name of the first error, or ``settings``."""
    for error in exc.errors():
        loc = error.get("loc", ())
        if loc:
            return str(loc[0])
    return "settings"
