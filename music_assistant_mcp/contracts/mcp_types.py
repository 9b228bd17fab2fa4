"""Typed structures for the MCP protocol layer.

Defines every entity used across tool definitions, the MCP server,
and the stdio JSON-RPC loop.

## TypedDicts (internal use - JSON-RPC, stdio server, tool catalog)

  Tool definitions    → ``MCPPropertyDef``, ``MCPInputSchema``, ``MCPToolDef``
  Content             → ``MCPContentBlock``, ``MCPCallResult``
  Server capabilities → ``MCPToolsCapability``, ``MCPCapabilities``, ``MCPServerInfo``
  JSON-RPC params     → ``MCPToolCallParams``
  JSON-RPC messages   → ``MCPRequest``, ``MCPSuccessResponse``,
                        ``MCPErrorDetail``, ``MCPErrorResponse``, ``MCPResponse``

## Pydantic wire models

``MCPPropertyDefWire``, ``MCPInputSchemaWire`` and ``MCPToolDefWire`` mirror
the tool-definition TypedDicts.  The catalog is checked against them once at
import time (``music_assistant_mcp.mcp.tools.registry.assert_unique_tool_names``) so a
malformed definition fails at startup rather than inside a host.
"""
from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Required, TypedDict

from music_assistant_mcp.contracts.json_types import JSONObject, JSONValue


# ── Tool schema shapes ────────────────────────────────────────────────────────


class MCPPropertyDef(TypedDict, total=False):
    """JSON Schema definition for a single MCP tool property.

    Covers the subset of JSON Schema used in the tool catalog.
    All constraint fields (``enum``, ``minimum``, etc.) are optional.
    """

    type: Required[str]          # "string", "number", "integer", "boolean", "array"
    description: str
    enum: list[str | int | float]
    minimum: float
    maximum: float
    default: JSONValue
    items: dict[str, JSONValue]  # array item schema (simplified)


class MCPInputSchema(TypedDict, total=False):
    """JSON Schema describing an MCP tool's accepted arguments."""

    type: Required[str]
    properties: Required[dict[str, MCPPropertyDef]]
    required: list[str]


class MCPToolDef(TypedDict):
    """Definition of a single MCP tool exposed to agent hosts."""

    name: str
    description: str
    inputSchema: MCPInputSchema  # noqa: N815


class MCPContentBlock(TypedDict):
    """A content block in an MCP tool result (always text here)."""

    type: str
    text: str


class MCPCallResult(TypedDict, total=False):
    """Result body for ``tools/call`` - the invocation envelope."""

    content: Required[list[MCPContentBlock]]
    isError: bool  # noqa: N815


# ── Server capability shapes ──────────────────────────────────────────────────


class MCPToolsCapability(TypedDict, total=False):
    """The ``tools`` entry in ``MCPCapabilities``.

    Currently always ``{}`` - the tool list is static.
    """


class MCPCapabilities(TypedDict, total=False):
    """MCP server capabilities advertised during the ``initialize`` handshake."""

    tools: MCPToolsCapability


class MCPServerInfo(TypedDict):
    """MCP server info returned in ``initialize`` responses and ``get_server_info()``."""

    name: str
    version: str
    protocolVersion: str  # noqa: N815
    capabilities: MCPCapabilities


# ── JSON-RPC 2.0 shapes ───────────────────────────────────────────────────────


class MCPToolCallParams(TypedDict, total=False):
    """Params for the ``tools/call`` JSON-RPC method.

    ``arguments`` may be absent when the tool takes none.
    """

    name: Required[str]
    arguments: JSONObject


class MCPRequest(TypedDict, total=False):
    """An incoming JSON-RPC 2.0 message from an MCP client.

    ``id`` is absent for notifications; ``params`` is absent when the method
    takes no parameters.
    """

    jsonrpc: Required[str]
    method: Required[str]
    id: str | int | None
    params: JSONObject


class MCPSuccessResponse(TypedDict):
    """A JSON-RPC 2.0 success response."""

    jsonrpc: str
    id: str | int | None
    result: JSONObject


class MCPErrorDetail(TypedDict, total=False):
    """The ``error`` object inside a JSON-RPC 2.0 error response."""

    code: Required[int]
    message: Required[str]
    data: JSONValue


class MCPErrorResponse(TypedDict):
    """A JSON-RPC 2.0 error response."""

    jsonrpc: str
    id: str | int | None
    error: MCPErrorDetail


MCPResponse = Union[MCPSuccessResponse, MCPErrorResponse]
"""Union of all JSON-RPC 2.0 response shapes."""


# ── Pydantic wire models ──────────────────────────────────────────────────────


class MCPPropertyDefWire(BaseModel):
    """Pydantic mirror of ``MCPPropertyDef`` used to check catalog entries."""

    model_config = ConfigDict(extra="forbid")

    type: str
    description: str | None = None
    enum: list[str | int | float] | None = None
    minimum: float | None = None
    maximum: float | None = None
    default: str | int | float | bool | None = None
    items: dict[str, str] | None = None


class MCPInputSchemaWire(BaseModel):
    """Pydantic mirror of ``MCPInputSchema``."""

    model_config = ConfigDict(extra="forbid")

    type: str = "object"
    properties: dict[str, MCPPropertyDefWire] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class MCPToolDefWire(BaseModel):
    """Pydantic mirror of ``MCPToolDef``.

    ``inputSchema`` is spelled in camelCase (matching the MCP wire protocol)
    so ``model_validate`` works on the catalog dicts directly.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    inputSchema: MCPInputSchemaWire  # noqa: N815
