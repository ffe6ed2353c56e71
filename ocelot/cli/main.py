"""
CLI entry point for Ocelot.

Provides command-line tooling for checking SDK options files before they are
shipped with an application.
"""

import sys

import click

from ocelot._version import __version__
from ocelot.cli.context import CLIContext, pass_context
from ocelot.logging_config import setup_logging


@click.group()
@click.option(
    '--log-level',
    '-l',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    default='WARNING',
    help='Set logging level',
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose output',
)
@click.version_option(version=__version__, prog_name='ocelot')
@pass_context
def cli(ctx: CLIContext, log_level: str, verbose: bool):
    """
    Ocelot - configuration tooling for Ocelot client SDKs.

    Validates SDK options the same way the SDK does at startup.
    """
    ctx.verbose = verbose

    try:
        setup_logging(level=log_level.upper(), json_format=False)
    except Exception as e:
        click.echo(f"Error: Failed to set up logging: {e}", err=True)
        sys.exit(1)


from ocelot.cli.check import check
cli.add_command(check)


if __name__ == '__main__':
    cli()
