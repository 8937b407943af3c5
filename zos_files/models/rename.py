"""Rename request and payload models.

Contract:
- Inputs: Validated data set and member names
- Outputs: RenameRequest describing the call, payload dicts for the REST body
- Side Effects: None
"""

from enum import Enum
from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from zos_files.utils.paths import member_target


class RenameKind(str, Enum):
    """What a rename request targets."""

    DATA_SET = "data-set"
    MEMBER = "member"


class FromDataSet(BaseModel):
    """Source of a rename: the data set, and optionally the member, being renamed."""

    dsn: str
    member: str | None = None


class RenamePayload(BaseModel):
    """Body of a z/OSMF rename request.

    Serializes as ``{"request": "rename", "from-dataset": {"dsn": ..., "member": ...}}``
    with ``member`` present only for member renames.
    """

    model_config = ConfigDict(populate_by_name=True)

    request: Literal["rename"] = "rename"
    from_dataset: FromDataSet = Field(alias="from-dataset")

    def to_dict(self) -> dict[str, Any]:
        """Dump using wire field names, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


def build_rename_payload(data_set_name: str, member_name: str | None = None) -> dict[str, Any]:
    """Build the rename request body.

    Args:
        data_set_name: Current data set name (the data set holding the member for member renames)
        member_name: Current member name, for member renames only

    Returns:
        Payload dict in wire format

    Example:
        >>> build_rename_payload("USER.DATA.SET", "mem1")
        {'request': 'rename', 'from-dataset': {'dsn': 'USER.DATA.SET', 'member': 'mem1'}}
    """
    payload = RenamePayload(from_dataset=FromDataSet(dsn=data_set_name, member=member_name))
    return payload.to_dict()


class RenameRequest(BaseModel):
    """A single rename call, built fresh per invocation.

    For DATA_SET renames ``before_name``/``after_name`` are data set names.
    For MEMBER renames they are member names inside ``container_name``.
    """

    model_config = ConfigDict(frozen=True)

    kind: RenameKind
    before_name: str
    after_name: str
    container_name: str | None = None

    @property
    def target_name(self) -> str:
        """Final path segment of the endpoint, keyed by the new name."""
        if self.kind == RenameKind.MEMBER:
            return member_target(self.container_name, self.after_name)
        return self.after_name

    def to_payload(self) -> dict[str, Any]:
        """Rename payload referencing the current (old) name."""
        if self.kind == RenameKind.MEMBER:
            return build_rename_payload(self.container_name, self.before_name)
        return build_rename_payload(self.before_name)
