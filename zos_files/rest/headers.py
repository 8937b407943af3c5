"""Request header assembly for z/OSMF REST calls.

The content-length header must match the bytes the transport sends, so
both sides serialize payloads through ``serialize_payload``.
"""

import json
from typing import Any


class Headers:
    """Well-known header entries."""

    APPLICATION_JSON = {"Content-Type": "application/json"}
    CONTENT_LENGTH = "Content-Length"
    CSRF = {"X-CSRF-ZOSMF-HEADER": "true"}


def serialize_payload(payload: Any) -> str:
    """Serialize a JSON payload deterministically.

    Compact separators, key order preserved, non-ASCII characters kept as-is.

    Example:
        >>> serialize_payload({"request": "rename", "from-dataset": {"dsn": "A.B"}})
        '{"request":"rename","from-dataset":{"dsn":"A.B"}}'
    """
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def build_json_headers(serialized_payload: str) -> list[dict[str, str]]:
    """Build the header list for a JSON request body.

    Args:
        serialized_payload: Body as produced by serialize_payload

    Returns:
        Content-type entry followed by a content-length entry (UTF-8 byte count)
    """
    content_length = len(serialized_payload.encode("utf-8"))
    return [
        dict(Headers.APPLICATION_JSON),
        {Headers.CONTENT_LENGTH: str(content_length)},
    ]
