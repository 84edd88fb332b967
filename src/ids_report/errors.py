"""Exceptions raised at the report's call boundary."""

from __future__ import annotations


class InvalidInput(ValueError):
    """A caller passed an argument of the wrong type or an empty payload."""
