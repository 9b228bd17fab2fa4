"""Dataclass models for tool validation results."""

from __future__ import annotations

from dataclasses import dataclass

from music_assistant_mcp.contracts.json_types import JSONValue


@dataclass
class ValidationError:
    """A single validation error."""

    field: str
    message: str
    code: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Result of tool call validation.

    ``original_params`` is the raw argument bag from the host.
    ``resolved_params`` has values coerced to their declared types and schema
    defaults filled in; handlers read from it exclusively.
    """

    valid: bool
    tool_name: str
    original_params: dict[str, JSONValue]
    resolved_params: dict[str, JSONValue]
    errors: list[ValidationError]

    @property
    def error_message(self) -> str:
        if not self.errors:
            return ""
        return "; ".join(e.message for e in self.errors)
