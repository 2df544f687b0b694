"""Converting course data from other representations."""

from . import records

__all__ = ["records"]
