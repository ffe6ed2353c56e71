"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Ocelot, a product of Garudex Labs

CLI context for Ocelot.

Provides shared context object and decorators for CLI commands.
"""

import click


# Global context object to share settings across commands
class CLIContext:
    """Context object for CLI commands."""

    def __init__(self):
        self.verbose = False


pass_context = click.make_pass_decorator(CLIContext, ensure=True)
