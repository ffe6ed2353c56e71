"""
SDK options validation.

Turns the loosely-typed options an application passes to the SDK into a
complete configuration:

- every known option gets a value (the caller's, a corrected one, or the default)
- deprecated option names are moved to their replacements
- values of the wrong type are coerced (booleans) or replaced by the default
- numbers below an option's minimum are raised to the minimum
- unknown options are kept but reported

Problems never abort validation. Errors are queued on the emitter's
``"error"`` channel and delivered after the current unit of work; warnings
are written straight to the SDK logger. The only exception raised is
:class:`~ocelot.exceptions.InvalidLoggerError`, when a custom logger lacks one
of the methods needed to report anything at all.
"""

import copy
import time
from typing import Any, Dict, List, Mapping, Optional

from ocelot import messages
from ocelot.config.options import (
    ANY,
    BASE_OPTION_DEFS,
    BOOLEAN,
    DEPRECATED_OPTIONS,
    NUMBER,
    OptionDef,
    kind_of,
    resolve_option_defs,
)
from ocelot.config.tags import get_tags
from ocelot.exceptions import InvalidArgumentError
from ocelot.logging_config import get_logger, log_options_validated
from ocelot.sdk.emitter import EventEmitter
from ocelot.sdk.loggers import create_default_logger, validate_logger

logger = get_logger(__name__)

ValidatedConfiguration = Dict[str, Any]

__all__ = ["ValidatedConfiguration", "get_tags", "validate"]


class _Diagnostics:
    """Collects errors for deferred delivery and writes warnings immediately."""

    def __init__(self, sdk_logger: Any):
        self._sdk_logger = sdk_logger
        self.errors: List[InvalidArgumentError] = []
        self.warning_count = 0

    def error(self, message: str) -> None:
        self.errors.append(InvalidArgumentError(message))

    def warn(self, message: str) -> None:
        self.warning_count += 1
        self._sdk_logger.warn(message)

    def publish(self, emitter: Optional[EventEmitter]) -> None:
        if emitter is None:
            # Nobody owns a flush here, so delivery needs a running loop.
            emitter = EventEmitter(self._sdk_logger)
        for error in self.errors:
            emitter.report_error_later(error)


def _default_value(option_def: OptionDef) -> Any:
    # Fresh containers so callers can't mutate the shared table.
    if isinstance(option_def.default, (list, dict)):
        return copy.copy(option_def.default)
    return option_def.default


def _apply_deprecations(options: Dict[str, Any], diagnostics: _Diagnostics) -> Dict[str, Any]:
    for old_name, new_name in DEPRECATED_OPTIONS.items():
        if options.get(old_name) is None:
            continue
        diagnostics.warn(messages.deprecated(old_name, new_name))
        if new_name:
            if options.get(new_name) is None:
                options[new_name] = options[old_name]
            del options[old_name]
    return options


def _check_option(name: str, value: Any, option_def: OptionDef, diagnostics: _Diagnostics) -> Any:
    expected_type = option_def.expected_type
    if expected_type == ANY:
        return value

    actual_type = kind_of(value)
    if actual_type not in option_def.allowed_types:
        if expected_type == BOOLEAN:
            diagnostics.error(messages.wrong_option_type_boolean(name, actual_type))
            return bool(value)
        diagnostics.error(messages.wrong_option_type(name, expected_type, actual_type))
        return _default_value(option_def)

    if option_def.validator is not None:
        return option_def.validator(name, value, diagnostics)

    if actual_type == NUMBER and option_def.minimum is not None and value < option_def.minimum:
        diagnostics.error(messages.option_below_minimum(name, value, option_def.minimum))
        return option_def.minimum

    return value


def validate(
    raw_options: Optional[Mapping[str, Any]],
    emitter: Optional[EventEmitter] = None,
    platform_option_defs: Optional[Mapping[str, Any]] = None,
    sdk_logger: Any = None,
) -> ValidatedConfiguration:
    """
    Validate SDK options and fill in defaults.

    Args:
        raw_options: Options supplied by the application. Not modified.
        emitter: Receives invalid-argument errors on its ``"error"`` channel,
            queued until its next flush. When None, errors are queued on a
            private emitter that logs them to ``sdk_logger.error`` on the
            next turn of the running asyncio loop, and are dropped when no
            loop is running.
        platform_option_defs: Extra option definitions from the platform SDK,
            as :class:`OptionDef` values or plain mappings.
        sdk_logger: SDK logger for warnings; also the default of the
            ``logger`` option. A :class:`BasicLogger` is created when None.

    Returns:
        A new dict holding every defined option plus any unknown ones.

    Raises:
        InvalidLoggerError: If the ``logger`` option (or ``sdk_logger``)
            is missing a callable ``debug``, ``info``, ``warn`` or ``error``.
    """
    started = time.perf_counter()
    options: Dict[str, Any] = dict(raw_options or {})

    validate_logger(options.get("logger"))
    validate_logger(sdk_logger)
    if sdk_logger is None:
        sdk_logger = create_default_logger()

    option_defs = resolve_option_defs(BASE_OPTION_DEFS, platform_option_defs, logger_default=sdk_logger)
    diagnostics = _Diagnostics(sdk_logger)
    options = _apply_deprecations(options, diagnostics)

    config: ValidatedConfiguration = {}
    for name, option_def in option_defs.items():
        value = options.get(name)
        if value is None:
            config[name] = _default_value(option_def)
        else:
            config[name] = _check_option(name, value, option_def, diagnostics)

    for name, value in options.items():
        if name in option_defs:
            continue
        if value is not None:
            diagnostics.error(messages.unknown_option(name))
        config[name] = value

    diagnostics.publish(emitter)

    log_options_validated(
        logger,
        option_count=len(config),
        error_count=len(diagnostics.errors),
        warning_count=diagnostics.warning_count,
        duration_ms=(time.perf_counter() - started) * 1000,
    )
    return config
