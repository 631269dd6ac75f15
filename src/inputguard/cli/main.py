"""InputGuard CLI entry point."""

import click

from inputguard import __version__
from inputguard.cli.commands.check import check


@click.group()
@click.version_option(__version__, prog_name="inputguard")
def main() -> None:
    """InputGuard - validate user and message payloads.

    Run 'inputguard check --help' for the available checks.
    """


main.add_command(check)


if __name__ == "__main__":
    main()
