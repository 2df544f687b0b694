"""Policies applied while evaluating grades."""

from . import lates

__all__ = ["lates"]
