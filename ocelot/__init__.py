"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Ocelot, a product of Garudex Labs

Ocelot - Client SDK Configuration Core

Validates and normalizes the options applications pass to Ocelot client
SDKs, and reports problems through the SDK's diagnostics channels.
"""

from ocelot._version import __version__

__all__ = ["__version__"]
