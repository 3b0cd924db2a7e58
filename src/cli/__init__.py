# SPDX-License-Identifier: MIT
"""Command-line interface for the crosshair share-code tools."""
