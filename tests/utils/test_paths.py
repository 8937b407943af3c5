"""Tests for resource path assembly."""

import pytest

from zos_files.constants import ZosFilesConstants
from zos_files.utils.paths import join_resource_path
from zos_files.utils.paths import member_target


@pytest.mark.unit
class TestJoinResourcePath:
    """Test join_resource_path."""

    def test_joins_constants_and_name(self) -> None:
        """Test the standard data set endpoint."""
        path = join_resource_path(ZosFilesConstants.RESOURCE, ZosFilesConstants.RES_DS_FILES, "USER.DATA.SET")

        assert path == "/zosmf/restfiles/ds/USER.DATA.SET"

    @pytest.mark.parametrize(
        "segments",
        [
            ("/zosmf/restfiles", "/ds", "X"),
            ("/zosmf/restfiles/", "/ds/", "X"),
            ("/zosmf/restfiles", "ds", "X"),
        ],
    )
    def test_single_separator_at_boundaries(self, segments) -> None:
        """Test slashes are never doubled between segments."""
        assert join_resource_path(*segments) == "/zosmf/restfiles/ds/X"

    def test_skips_empty_segments(self) -> None:
        """Test empty segments add nothing."""
        assert join_resource_path("/zosmf/restfiles", "", "ds") == "/zosmf/restfiles/ds"

    def test_no_encoding(self) -> None:
        """Test special characters are left alone."""
        assert join_resource_path("/root", "A.B(C#1 $)") == "/root/A.B(C#1 $)"


@pytest.mark.unit
class TestMemberTarget:
    """Test member_target."""

    def test_wraps_member_in_parentheses(self) -> None:
        assert member_target("USER.DATA.SET", "mem2") == "USER.DATA.SET(mem2)"

    def test_does_not_escape_parentheses(self) -> None:
        assert member_target("A(B)", "C)") == "A(B)(C))"
