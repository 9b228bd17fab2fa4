"""Music Assistant MCP server - exposes Music Assistant as MCP tools."""
