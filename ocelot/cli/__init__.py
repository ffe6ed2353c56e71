"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Ocelot, a product of Garudex Labs

Command-line interface for Ocelot.
"""
