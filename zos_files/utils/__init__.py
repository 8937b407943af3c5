"""Shared helpers for zos_files operations."""

from .paths import join_resource_path
from .paths import member_target
from .validation import require_name

__all__ = [
    "join_resource_path",
    "member_target",
    "require_name",
]
