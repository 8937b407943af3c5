"""
Shared pytest fixtures for zos_files test suite.

Provides fixtures for:
- Dummy z/OSMF sessions
- Mock REST clients
- Isolated configuration directories
"""

import os
from collections.abc import Generator
from pathlib import Path
from unittest.mock import AsyncMock
from unittest.mock import Mock

import pytest

from zos_files.rest.session import ZosmfSession


@pytest.fixture
def dummy_session() -> ZosmfSession:
    """Session pointing at a host that is never contacted."""
    return ZosmfSession(
        hostname="machine",
        port=443,
        protocol="https",
        user="dummy",
        password="dummy",
    )


@pytest.fixture
def mock_rest_client() -> Mock:
    """REST client whose put_expect_string succeeds with an empty body.

    Example:
        >>> async def test_put(mock_rest_client):
        ...     await mock_rest_client.put_expect_string(session, "/x", [], {})
        ...     mock_rest_client.put_expect_string.assert_awaited_once()
    """
    client = Mock()
    client.put_expect_string = AsyncMock(return_value="")
    return client


@pytest.fixture
def mock_config_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point ZOWE_CLI_HOME at a temporary directory and clear ZOWE_OPT_* variables."""
    for key in list(os.environ):
        if key.upper().startswith("ZOWE_OPT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("ZOWE_CONFIG_DIR", raising=False)
    monkeypatch.setenv("ZOWE_CLI_HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    yield tmp_path
