"""ABOUTME: Tests for Kinsta credential loading from the environment."""

import pytest
from pydantic import ValidationError

from kinsta_mcp.constants import KINSTA_API_BASE_URL
from kinsta_mcp.kinsta.config import (
    KinstaAuthError,
    KinstaConfig,
    is_kinsta_configured,
    load_kinsta_config,
)


class TestLoadKinstaConfig:
    """Tests for load_kinsta_config."""

    def test_loads_all_values(self, kinsta_env):
        """Test a complete environment produces a full config."""
        config = load_kinsta_config()
        assert config.api_key == "test-api-key"
        assert config.company_id == "company-123"
        assert config.base_url == "https://kinsta.test/v2"

    def test_default_base_url(self, kinsta_env):
        """Test the production base URL is used when none is set."""
        kinsta_env.delenv("KINSTA_API_BASE_URL")
        assert load_kinsta_config().base_url == KINSTA_API_BASE_URL

    def test_empty_base_url_uses_default(self, kinsta_env):
        """Test an empty base URL is treated as absent."""
        kinsta_env.setenv("KINSTA_API_BASE_URL", "")
        assert load_kinsta_config().base_url == KINSTA_API_BASE_URL

    def test_trailing_slash_stripped(self, kinsta_env):
        """Test trailing slashes are removed from the base URL."""
        kinsta_env.setenv("KINSTA_API_BASE_URL", "https://kinsta.test/v2/")
        assert load_kinsta_config().base_url == "https://kinsta.test/v2"

    def test_missing_api_key(self, clean_env):
        """Test a missing API key raises NO_API_KEY."""
        clean_env.setenv("KINSTA_COMPANY_ID", "company-123")
        with pytest.raises(KinstaAuthError) as exc_info:
            load_kinsta_config()
        assert exc_info.value.code == "NO_API_KEY"
        assert "KINSTA_API_KEY environment variable is required" in str(exc_info.value)

    def test_empty_api_key(self, kinsta_env):
        """Test an empty API key counts as missing."""
        kinsta_env.setenv("KINSTA_API_KEY", "")
        with pytest.raises(KinstaAuthError) as exc_info:
            load_kinsta_config()
        assert exc_info.value.code == "NO_API_KEY"

    def test_missing_company_id(self, clean_env):
        """Test a missing company ID raises NO_COMPANY_ID."""
        clean_env.setenv("KINSTA_API_KEY", "test-api-key")
        with pytest.raises(KinstaAuthError) as exc_info:
            load_kinsta_config()
        assert exc_info.value.code == "NO_COMPANY_ID"
        assert "KINSTA_COMPANY_ID environment variable is required" in str(exc_info.value)

    def test_lowercase_names_not_read(self, clean_env):
        """Test variable names are matched case-sensitively."""
        clean_env.setenv("kinsta_api_key", "test-api-key")
        clean_env.setenv("kinsta_company_id", "company-123")
        with pytest.raises(KinstaAuthError) as exc_info:
            load_kinsta_config()
        assert exc_info.value.code == "NO_API_KEY"

    def test_config_is_frozen(self):
        """Test configs cannot be mutated after creation."""
        config = KinstaConfig(api_key="k", company_id="c")
        with pytest.raises(ValidationError):
            config.api_key = "other"


class TestIsKinstaConfigured:
    """Tests for is_kinsta_configured."""

    def test_configured(self, kinsta_env):
        """Test both mandatory values present."""
        assert is_kinsta_configured()

    def test_not_configured(self, clean_env):
        """Test nothing set."""
        assert not is_kinsta_configured()

    def test_only_api_key(self, clean_env):
        """Test a key without a company is not enough."""
        clean_env.setenv("KINSTA_API_KEY", "test-api-key")
        assert not is_kinsta_configured()
