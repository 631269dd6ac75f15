"""CLI commands for validating payload files.

Implements 'inputguard check user' and 'inputguard check message'. Each reads
a JSON or YAML payload (or stdin with '-') and reports the first failing
field.

Exit codes: 0 = valid, 1 = validation error, 2 = unreadable payload or bad
settings.
"""

import json
import sys
from collections.abc import Callable
from typing import IO, Any

import click
import yaml

from inputguard.config.loader import SettingsLoader
from inputguard.lib.errors import ConfigError, PayloadError
from inputguard.lib.logging_config import get_logger, setup_logging
from inputguard.lib.validation import validate_message_payload, validate_user_payload
from inputguard.models.config import ValidationSettings
from inputguard.models.validation import ValidationError

logger = get_logger(__name__)

PayloadValidator = Callable[[Any, ValidationSettings], ValidationError | None]


def _read_payload(stream: IO[str]) -> dict[str, Any]:
    """Parse a JSON or YAML mapping from ``stream``.

    Raises:
        PayloadError: If the content is not parseable or not a mapping
    """
    try:
        content = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise PayloadError(f"Failed to parse payload: {e}") from e

    if not isinstance(content, dict):
        raise PayloadError("Payload must be a JSON/YAML object")
    return content


def _run_check(
    kind: str,
    validator: PayloadValidator,
    payload: IO[str],
    config: str | None,
    as_json: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Shared body of the check commands."""
    setup_logging(verbose=verbose, quiet=quiet)
    logger.info(f"Check {kind} invoked: payload={payload.name}, config={config}")

    try:
        loader = SettingsLoader()
        loader.load_env_file()
        settings = loader.load(config_path=config)
        data = _read_payload(payload)
        error = validator(data, settings)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        click.secho("Error: Invalid validation settings", fg="red", err=True)
        click.echo(f"  {str(e)}", err=True)
        sys.exit(2)
    except PayloadError as e:
        logger.error(f"Payload error: {e}", exc_info=True)
        click.secho("Error: Could not read payload", fg="red", err=True)
        click.echo(f"  {str(e)}", err=True)
        sys.exit(2)

    if error is None:
        logger.debug(f"{kind} payload is valid")
        if as_json:
            click.echo(json.dumps({"valid": True}))
        else:
            click.secho("OK", fg="green")
        sys.exit(0)

    if as_json:
        body = error.to_exception().to_dict()
        body["field"] = error.field
        click.echo(json.dumps(body))
    else:
        click.secho(f"{error.code.value}: {error.message}", fg="red")
    sys.exit(1)


def _common_options(func: Callable[..., None]) -> Callable[..., None]:
    """Attach the payload argument and options shared by all check commands."""
    func = click.option("--quiet", "-q", is_flag=True, help="Only log errors")(func)
    func = click.option("--verbose", "-v", is_flag=True, help="Show debug logging")(
        func
    )
    func = click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Print the result as a JSON problem document",
    )(func)
    func = click.option(
        "--config",
        "-c",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="Path to an inputguard.yaml settings file",
    )(func)
    func = click.argument("payload", type=click.File("r", encoding="utf-8"))(func)
    return func


@click.group()
def check() -> None:
    """Validate a payload file against the field rules.

    PAYLOAD is a path to a JSON or YAML file, or '-' to read stdin.
    """


@check.command()
@_common_options
def user(
    payload: IO[str], config: str | None, as_json: bool, verbose: bool, quiet: bool
) -> None:
    """Validate a user create/update payload (email, password, username).

    Example:

        inputguard check user signup.json

        echo '{"email": "me@example.com"}' | inputguard check user -
    """
    _run_check("user", validate_user_payload, payload, config, as_json, verbose, quiet)


@check.command()
@_common_options
def message(
    payload: IO[str], config: str | None, as_json: bool, verbose: bool, quiet: bool
) -> None:
    """Validate a message create/update payload (content).

    Example:

        inputguard check message draft.yaml --json
    """
    _run_check(
        "message", validate_message_payload, payload, config, as_json, verbose, quiet
    )
