#!/usr/bin/env python3
"""Run the techsvg MCP server."""

from techsvg.mcp.server import main

if __name__ == "__main__":
    main()
