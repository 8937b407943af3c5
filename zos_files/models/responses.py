"""Response models returned by zos_files operations."""

from pydantic import ConfigDict
from pydantic import Field

from zos_files.models.base import CamelCaseModel


class ZosFilesResponse(CamelCaseModel):
    """Normalized result of a z/OSMF files operation.

    Attributes:
        success: Whether the operation completed
        command_response: Message describing the outcome (``commandResponse``)
    """

    model_config = ConfigDict(frozen=True)

    success: bool = Field(description="Whether the operation completed")
    command_response: str = Field(description="Message describing the outcome")
