"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Ocelot, a product of Garudex Labs

SDK-facing collaborators of the configuration core: the event emitter that
carries error diagnostics and the logger contract used for warnings.
"""

from ocelot.sdk.emitter import ERROR_EVENT, EventEmitter
from ocelot.sdk.loggers import BasicLogger, create_default_logger, validate_logger

__all__ = [
    "ERROR_EVENT",
    "BasicLogger",
    "EventEmitter",
    "create_default_logger",
    "validate_logger",
]
