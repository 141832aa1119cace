"""ABOUTME: Tests for tool input validation and parameter building."""

import pytest

from kinsta_mcp.common.validation import (
    OPERATION_ID_PATTERN,
    build_body,
    build_params,
    validate_id,
    validate_ids,
    validate_non_empty_string,
)


class TestValidateId:
    """Tests for path-segment identifier validation."""

    @pytest.mark.parametrize("value", ["abc", "site-123", "env_ID_9", "a"])
    def test_valid_ids(self, value):
        """Test safe identifiers pass."""
        assert validate_id(value, "site_id") is None

    @pytest.mark.parametrize("value", ["", "../etc", "a/b", "a b", "id?x=1", "%2e%2e", "abc\n", "sites:add-1"])
    def test_invalid_ids(self, value):
        """Test identifiers with unsafe characters are rejected."""
        assert validate_id(value, "site_id") == "Invalid site_id: contains illegal characters"

    @pytest.mark.parametrize("value", ["sites:add-54fb80af-576c-4fdc-ba4f-b596c83f15a1", "backups:restore-1", "op-1"])
    def test_operation_ids(self, value):
        """Test operation IDs may carry a resource prefix separated by a colon."""
        assert validate_id(value, "operation_id", OPERATION_ID_PATTERN) is None

    @pytest.mark.parametrize("value", [":add-1", "sites:", "sites::add", "sites:add/..", "sites:add 1"])
    def test_invalid_operation_ids(self, value):
        """Test colons are only accepted between non-empty segments."""
        assert validate_id(value, "operation_id", OPERATION_ID_PATTERN) is not None

    def test_validate_ids_returns_first_error(self):
        """Test the first failing identifier is reported."""
        error = validate_ids(env_id="ok", backup_id="bad/id", domain_id="also bad")
        assert error == "Invalid backup_id: contains illegal characters"

    def test_validate_ids_all_valid(self):
        """Test no error when every identifier is safe."""
        assert validate_ids(env_id="e1", backup_id="b1") is None


class TestValidateNonEmptyString:
    """Tests for non-empty string validation."""

    def test_valid_string(self):
        """Test normal strings pass."""
        assert validate_non_empty_string("blog", "display_name") == (True, None)

    def test_whitespace_only(self):
        """Test whitespace-only strings are rejected."""
        is_valid, error = validate_non_empty_string("   ", "display_name")
        assert not is_valid
        assert "display_name cannot be empty" in error

    def test_non_string(self):
        """Test non-string values are rejected."""
        is_valid, error = validate_non_empty_string(42, "display_name")
        assert not is_valid
        assert "must be a string" in error


class TestBuildParams:
    """Tests for query parameter building."""

    def test_drops_none_and_stringifies(self):
        """Test None values are dropped and the rest stringified."""
        params = build_params(company="c1", include_environments=True, lines=50, file_name=None)
        assert params == {"company": "c1", "include_environments": "true", "lines": "50"}

    def test_false_is_kept(self):
        """Test False is sent as "false", not dropped."""
        assert build_params(include_environments=False) == {"include_environments": "false"}

    def test_build_body_drops_none(self):
        """Test JSON bodies keep native types and drop None."""
        body = build_body(source_env_id="e1", push_db=False, file_list=None)
        assert body == {"source_env_id": "e1", "push_db": False}
