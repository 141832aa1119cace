"""ABOUTME: Kinsta MCP server - Kinsta hosting API exposed over the Model Context Protocol."""

__version__ = "0.1.0"
