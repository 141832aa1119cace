"""ABOUTME: Shared constants for the Kinsta MCP server."""

SERVER_NAME = "kinsta-mcp"

# Kinsta API
KINSTA_API_BASE_URL = "https://api.kinsta.com/v2"

# Environment variables read by the credential loader
ENV_API_KEY = "KINSTA_API_KEY"
ENV_COMPANY_ID = "KINSTA_COMPANY_ID"
ENV_API_BASE_URL = "KINSTA_API_BASE_URL"

# Timeout for Kinsta API requests (seconds)
FETCH_TIMEOUT_SECONDS = 30.0

# Prefix used for every rendered API failure
ERROR_TEXT_PREFIX = "Kinsta API Error"
