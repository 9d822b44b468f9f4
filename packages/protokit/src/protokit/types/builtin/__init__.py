"""Registrations for built-in types."""

from . import boolean, none, number, sequence, string

__all__ = ["boolean", "none", "number", "sequence", "string"]
