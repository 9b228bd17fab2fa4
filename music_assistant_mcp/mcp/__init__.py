"""MCP (Model Context Protocol) server for Music Assistant."""
