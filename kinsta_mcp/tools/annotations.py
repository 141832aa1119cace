"""ABOUTME: Shared MCP tool annotations for Kinsta tools."""

from mcp.types import ToolAnnotations

# Reads that never change remote state
READ_ONLY = ToolAnnotations(readOnlyHint=True, idempotentHint=True, openWorldHint=True)

# Local checks that never reach the Kinsta API
LOCAL_READ_ONLY = ToolAnnotations(readOnlyHint=True, idempotentHint=True, openWorldHint=False)

# Writes that change remote state
MUTATING = ToolAnnotations(readOnlyHint=False, openWorldHint=True)

# Writes that remove or overwrite data
DESTRUCTIVE = ToolAnnotations(readOnlyHint=False, destructiveHint=True, openWorldHint=True)
