"""Workout input clients."""

from .manual.client import ManualInputClient, parse_set_entry

__all__ = ["ManualInputClient", "parse_set_entry"]
