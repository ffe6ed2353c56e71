"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Ocelot, a product of Garudex Labs

CLI command for checking SDK options files.

Exit codes:
    0  options are valid (warnings may have been printed)
    1  invalid-argument errors were reported
    2  the file could not be loaded or names an unusable logger
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from ocelot.cli.context import CLIContext, pass_context
from ocelot.config.loader import load_options
from ocelot.config.validation import validate
from ocelot.config.tags import get_tags
from ocelot.exceptions import ConfigurationError, InvalidLoggerError
from ocelot.logging_config import clear_correlation_id, get_logger, set_correlation_id
from ocelot.sdk.emitter import ERROR_EVENT, EventEmitter
from ocelot.sdk.loggers import BasicLogger

logger = get_logger(__name__)


def _printable(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool, list, dict)) or value is None:
        return value
    return repr(value)


@click.command(name='check')
@click.argument('options_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--platform-options',
    '-p',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='YAML file with extra option definitions (default/type/minimum per option)',
)
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
@pass_context
def check(ctx: CLIContext, options_file: Path, platform_options: Optional[Path], as_json: bool):
    """
    Validate an SDK options file.

    Prints the configuration the SDK would use, followed by any errors and
    warnings.

    Example:
        ocelot check ocelot.yaml
    """
    # groups every log line of this run
    set_correlation_id()
    logger.debug("options_check_started", path=str(options_file))
    try:
        try:
            raw_options = load_options(options_file)
            platform_option_defs = load_options(platform_options) if platform_options else None
        except ConfigurationError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(2)

        warnings: List[str] = []
        errors: List[str] = []
        sdk_logger = BasicLogger(level="warn", prefix="", destination={"warn": warnings.append, "error": errors.append})
        emitter = EventEmitter(sdk_logger)
        emitter.on(ERROR_EVENT, lambda error: errors.append(error.message))

        try:
            config = validate(raw_options, emitter, platform_option_defs, sdk_logger)
        except InvalidLoggerError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(2)
        except (TypeError, ValueError) as e:
            click.echo(f"Error: Invalid platform option definitions: {e}", err=True)
            sys.exit(2)

        emitter.flush()

        printable: Dict[str, Any] = {k: _printable(v) for k, v in config.items() if k != "logger"}

        if as_json:
            click.echo(json.dumps(
                {
                    "config": printable,
                    "tags": get_tags(config),
                    "errors": errors,
                    "warnings": warnings,
                },
                indent=2,
                default=repr,
            ))
        else:
            if ctx.verbose:
                click.echo(f"Checked {options_file}")
            for name, value in printable.items():
                click.echo(f"{name} = {json.dumps(value, default=repr)}")
            for message in errors:
                click.echo(f"error: {message}", err=True)
            for message in warnings:
                click.echo(f"warning: {message}", err=True)

        logger.debug("options_file_checked", path=str(options_file), errors=len(errors), warnings=len(warnings))

        if errors:
            sys.exit(1)
    finally:
        clear_correlation_id()
