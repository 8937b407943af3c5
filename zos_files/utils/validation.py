"""Input validation for data set operations."""

from zos_files.errors import MissingIdentifierError


def require_name(value: str | None, message: str) -> str:
    """Ensure a data set or member name was supplied.

    Only ``None`` and the empty string are rejected. Whitespace-only names
    are passed through untouched; the remote system decides whether they
    are valid.

    Args:
        value: Candidate name
        message: Message for the raised error

    Returns:
        The name, unchanged

    Raises:
        MissingIdentifierError: If value is None or empty

    Example:
        >>> require_name("USER.DATA.SET", "Specify the data set name.")
        'USER.DATA.SET'
    """
    if value is None or value == "":
        raise MissingIdentifierError(message)
    return value
