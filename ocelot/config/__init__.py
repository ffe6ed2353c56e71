"""
SDK configuration for Ocelot.

Option definitions, validation of application-supplied options, and loading
of options files.
"""

from ocelot.config.loader import load_options
from ocelot.config.options import (
    BASE_OPTION_DEFS,
    DEPRECATED_OPTIONS,
    OptionDef,
    kind_of,
    resolve_option_defs,
)
from ocelot.config.tags import get_tags
from ocelot.config.validation import ValidatedConfiguration, validate

__all__ = [
    "BASE_OPTION_DEFS",
    "DEPRECATED_OPTIONS",
    "OptionDef",
    "ValidatedConfiguration",
    "get_tags",
    "kind_of",
    "load_options",
    "resolve_option_defs",
    "validate",
]
