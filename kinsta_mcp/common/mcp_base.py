"""ABOUTME: Base class for MCP servers with common initialization and logging patterns.

Uses the official MCP SDK (modelcontextprotocol/python-sdk).
"""

import logging
import os
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(logger_name: str, level: Optional[int] = None) -> logging.Logger:
    """Configure logging for an MCP server.

    Logs go to stderr so stdio transport keeps stdout for JSON-RPC only.

    Args:
        logger_name: Name of the logger (typically __name__)
        level: Logging level (default: LOG_LEVEL env var, else logging.INFO)

    Returns:
        Configured logger instance
    """
    if level is None:
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()
        level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    return logging.getLogger(logger_name)


class MCPServerBase:
    """Base class for MCP servers with common patterns.

    Provides:
    - Standard MCP server initialization
    - Consistent logging setup
    - Tool start/complete/error logging helpers
    """

    def __init__(self, server_name: str):
        """Initialize MCP server base.

        Args:
            server_name: Name of the MCP server (e.g., "kinsta-mcp")
        """
        self.server_name = server_name
        self.mcp = FastMCP(server_name)
        self.logger = setup_logging(server_name)

    def get_mcp(self) -> FastMCP:
        """Get the FastMCP server instance.

        Returns:
            FastMCP server for tool, resource and prompt registration
        """
        return self.mcp

    def run(self, transport: str = "stdio") -> None:
        """Run the MCP server.

        Args:
            transport: Transport protocol ("stdio", "streamable-http", "sse")
        """
        self.logger.info(f"Starting {self.server_name} ({transport} transport)")
        self.mcp.run(transport=transport)

    def log_tool_start(self, tool_name: str, **params) -> None:
        """Log tool invocation with parameters.

        Examples:
            >>> server.log_tool_start("kinsta_sites_get", site_id="abc")
        """
        if params:
            param_str = ", ".join(f"{k}={v}" for k, v in params.items())
            self.logger.info(f"{tool_name} started: {param_str}")
        else:
            self.logger.info(f"{tool_name} started")

    def log_tool_complete(self, tool_name: str, **metrics) -> None:
        """Log tool completion with execution metrics.

        Examples:
            >>> server.log_tool_complete("kinsta_sites_list", duration_ms=150)
        """
        if metrics:
            metric_str = ", ".join(f"{k}={v}" for k, v in metrics.items())
            self.logger.info(f"{tool_name} completed: {metric_str}")
        else:
            self.logger.info(f"{tool_name} completed")

    def log_tool_error(
        self,
        tool_name: str,
        error_code: str,
        error_message: str,
        **context
    ) -> None:
        """Log tool error with context.

        Args:
            tool_name: Name of the tool that failed
            error_code: Machine-readable error code
            error_message: Human-readable error message
            **context: Additional error context

        Examples:
            >>> server.log_tool_error("kinsta_sites_get", "NOT_FOUND", "Resource not found", status=404)
        """
        context_str = ", ".join(f"{k}={v}" for k, v in context.items()) if context else ""
        if context_str:
            self.logger.error(f"{tool_name} error [{error_code}]: {error_message} ({context_str})")
        else:
            self.logger.error(f"{tool_name} error [{error_code}]: {error_message}")
