"""Models for zos_files."""

from .base import CamelCaseModel
from .rename import FromDataSet
from .rename import RenameKind
from .rename import RenamePayload
from .rename import RenameRequest
from .rename import build_rename_payload
from .responses import ZosFilesResponse

__all__ = [
    "CamelCaseModel",
    "FromDataSet",
    "RenameKind",
    "RenamePayload",
    "RenameRequest",
    "ZosFilesResponse",
    "build_rename_payload",
]
