"""User-facing message definitions.

Messages are kept in one place so callers and tests can match exact text.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MessageDefinition:
    """A fixed, user-facing message.

    Attributes:
        message: Message text shown to the user
    """

    message: str


class ZosFilesMessages:
    """Messages reported by data set operations."""

    missing_dataset_name = MessageDefinition(message="Specify the data set name.")
    data_set_renamed_successfully = MessageDefinition(message="Data set renamed successfully.")
