"""Data set operations."""

from .rename import Rename
from .rename import rename_data_set
from .rename import rename_data_set_member

__all__ = [
    "Rename",
    "rename_data_set",
    "rename_data_set_member",
]
