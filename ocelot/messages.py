"""
Diagnostic messages reported while validating SDK options.

Consumers key off the structure of these messages (option name, expected and
actual types, values), so keep the placeholders stable when rewording.
"""

from typing import Any, Optional


def wrong_option_type_boolean(name: str, actual_type: str) -> str:
    return f'Config option "{name}" should be a boolean, got {actual_type}, converting to boolean'


def wrong_option_type(name: str, expected_type: str, actual_type: str) -> str:
    return f'Config option "{name}" should be of type {expected_type}, got {actual_type}, using default value'


def option_below_minimum(name: str, value: Any, minimum: Any) -> str:
    return f'Config option "{name}" was set to {value}, changing to minimum value of {minimum}'


def unknown_option(name: str) -> str:
    return f'Ignoring unknown config option "{name}"'


def deprecated(old_name: str, new_name: Optional[str] = None) -> str:
    if new_name:
        return f'"{old_name}" is deprecated, please use "{new_name}"'
    return f'"{old_name}" is deprecated'


def invalid_tag_value(name: str) -> str:
    return f'Config option "{name}" must only contain letters, numbers, ., _ or -.'


def tag_value_too_long(name: str) -> str:
    return f'Value of "{name}" was longer than 64 characters and was discarded.'


def invalid_logger(method: str) -> str:
    return f"Provided logger instance must support logger.{method}(...) method"
