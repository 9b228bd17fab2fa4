"""Typed data shapes shared across the MCP server, handlers and client."""
