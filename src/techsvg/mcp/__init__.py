"""MCP tool surface for techsvg."""
