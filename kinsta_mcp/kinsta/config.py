"""ABOUTME: Kinsta credential loading from environment variables.

Authentication is API key based:
- KINSTA_API_KEY (required) - Bearer token for the Kinsta API
- KINSTA_COMPANY_ID (required for most endpoints)
- KINSTA_API_BASE_URL (optional, defaults to https://api.kinsta.com/v2)
"""

import logging
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import ENV_API_KEY, ENV_COMPANY_ID, KINSTA_API_BASE_URL

logger = logging.getLogger(__name__)

AuthErrorCode = Literal["NO_API_KEY", "NO_COMPANY_ID"]


class KinstaAuthError(Exception):
    """Raised when mandatory Kinsta credentials are missing.

    Attributes:
        code: "NO_API_KEY" or "NO_COMPANY_ID"
    """

    def __init__(self, message: str, code: AuthErrorCode):
        super().__init__(message)
        self.code = code


class KinstaSettings(BaseSettings):
    """Raw Kinsta settings read from the process environment."""

    api_key: Optional[str] = None
    company_id: Optional[str] = None
    api_base_url: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix="KINSTA_", case_sensitive=True)


class KinstaConfig(BaseModel):
    """Immutable configuration for one Kinsta client."""

    api_key: str
    company_id: str
    base_url: str = KINSTA_API_BASE_URL

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slashes(cls, v: str) -> str:
        """Normalize the base URL so path concatenation never doubles '/'."""
        return v.rstrip("/")


def load_kinsta_config() -> KinstaConfig:
    """Load Kinsta configuration from environment variables.

    Returns:
        KinstaConfig built from the current environment

    Raises:
        KinstaAuthError: If KINSTA_API_KEY or KINSTA_COMPANY_ID is missing or empty
    """
    settings = KinstaSettings()

    if not settings.api_key:
        raise KinstaAuthError(
            f"{ENV_API_KEY} environment variable is required. "
            "Generate one in MyKinsta > Company settings > API Keys.",
            "NO_API_KEY",
        )

    if not settings.company_id:
        raise KinstaAuthError(
            f"{ENV_COMPANY_ID} environment variable is required. "
            "Find it in MyKinsta under Company settings.",
            "NO_COMPANY_ID",
        )

    config = KinstaConfig(
        api_key=settings.api_key,
        company_id=settings.company_id,
        base_url=settings.api_base_url or KINSTA_API_BASE_URL,
    )
    logger.debug(f"Loaded Kinsta config for company {config.company_id} ({config.base_url})")
    return config


def is_kinsta_configured() -> bool:
    """Return True if both KINSTA_API_KEY and KINSTA_COMPANY_ID are set."""
    settings = KinstaSettings()
    return bool(settings.api_key and settings.company_id)
