"""Per-tool-set handlers: validate arguments, call Music Assistant, format.

Each handler has the signature::

    async def handle_<set>_tool(client, name, arguments) -> ToolCallResult

Validation problems are returned as ``isError`` results without touching
the backend.  Backend and transport errors propagate to the MCP server,
which converts them at its single failure boundary.
"""
