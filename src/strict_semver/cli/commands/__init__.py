# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import bump, compare, show, validate

__all__ = ["bump", "compare", "show", "validate"]
