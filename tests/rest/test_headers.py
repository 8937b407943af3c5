"""Tests for JSON serialization and request header assembly."""

import pytest

from zos_files.rest.headers import Headers
from zos_files.rest.headers import build_json_headers
from zos_files.rest.headers import serialize_payload


@pytest.mark.unit
class TestSerializePayload:
    """Test serialize_payload output."""

    def test_compact_and_ordered(self) -> None:
        """Test payloads serialize without whitespace and keep key order."""
        payload = {"request": "rename", "from-dataset": {"dsn": "USER.DATA.SET", "member": "mem1"}}

        assert serialize_payload(payload) == (
            '{"request":"rename","from-dataset":{"dsn":"USER.DATA.SET","member":"mem1"}}'
        )

    def test_is_deterministic(self) -> None:
        """Test the same payload always serializes identically."""
        payload = {"request": "rename", "from-dataset": {"dsn": 'Q"UOTE'}}

        assert serialize_payload(payload) == serialize_payload(dict(payload))

    def test_keeps_non_ascii(self) -> None:
        """Test non-ASCII characters are not escaped."""
        assert serialize_payload({"dsn": "Ä"}) == '{"dsn":"Ä"}'


@pytest.mark.unit
class TestBuildJsonHeaders:
    """Test build_json_headers output."""

    def test_content_type_then_length(self) -> None:
        """Test exactly two entries: content-type first, then content-length."""
        headers = build_json_headers('{"a":1}')

        assert headers == [{"Content-Type": "application/json"}, {"Content-Length": "7"}]

    def test_length_is_utf8_bytes(self) -> None:
        """Test content-length counts encoded bytes."""
        serialized = '{"dsn":"ÄÖÜ"}'

        headers = build_json_headers(serialized)

        assert headers[1][Headers.CONTENT_LENGTH] == str(len(serialized) + 3)

    def test_returns_copies(self) -> None:
        """Test callers can't mutate the shared content-type constant."""
        headers = build_json_headers("{}")
        headers[0]["Content-Type"] = "text/plain"

        assert Headers.APPLICATION_JSON == {"Content-Type": "application/json"}
