"""
Domain Models - tool catalog entries, invocations and results.

This module contains the internal domain models used by the tool registry
and dispatcher:

- ToolDefinition: what tools/list advertises for a tool
- RegisteredTool: a definition plus its input model and handler
- InvocationRequest: one tools/call, before validation
- ToolEnvelope / TextContent: the uniform success shape
- RawValue: a bare handler result the dispatcher still has to wrap

Pattern: Domain models as value objects (frozen pydantic models)
"""

import json
from typing import Any, Awaitable, Callable, Literal, Optional, Union

from pydantic import BaseModel, Field


# =============================================================================
# ToolDefinition
# =============================================================================


class ToolDefinition(BaseModel):
    """
    Tool metadata as published in the catalog.

    Attributes:
        name: Unique tool identifier.
        description: Human-readable description of what the tool does.
        input_schema: JSON Schema derived from the tool's filter model.
        output_schema: JSON Schema of the upstream success payload.
    """

    name: str = Field(..., description="Unique tool identifier")
    description: str = Field(..., description="Human-readable description")
    input_schema: dict[str, Any] = Field(
        ..., description="JSON Schema for input arguments"
    )
    output_schema: Optional[dict[str, Any]] = Field(
        default=None, description="JSON Schema for the upstream payload"
    )

    model_config = {"frozen": True}

    def to_catalog_entry(self) -> dict[str, Any]:
        """Render as a tools/list entry (name, description, inputSchema)."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


# =============================================================================
# Results
# =============================================================================


class TextContent(BaseModel):
    """A single text content block."""

    type: Literal["text"] = "text"
    text: str

    model_config = {"frozen": True}


class ToolEnvelope(BaseModel):
    """
    The uniform success result of a tool call: an ordered list of content blocks.

    Example:
        >>> ToolEnvelope.from_text("# MRR Report").model_dump()
        {'content': [{'type': 'text', 'text': '# MRR Report'}]}
    """

    content: list[TextContent] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def from_text(cls, *texts: str) -> "ToolEnvelope":
        """Build an envelope with one text block per argument."""
        return cls(content=[TextContent(text=text) for text in texts])


class RawValue(BaseModel):
    """
    A bare handler result that has not been shaped into an envelope.

    The dispatcher wraps it: lists become one text block per element,
    anything else becomes a single block.
    """

    value: Any = None

    model_config = {"frozen": True}

    def to_envelope(self) -> ToolEnvelope:
        """Wrap the value into a ToolEnvelope."""
        if isinstance(self.value, list):
            return ToolEnvelope.from_text(*(_as_text(item) for item in self.value))
        return ToolEnvelope.from_text(_as_text(self.value))


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, default=str)


ToolOutcome = Union[ToolEnvelope, RawValue]

ToolHandler = Callable[[Any], Awaitable[ToolOutcome]]


# =============================================================================
# RegisteredTool
# =============================================================================


class RegisteredTool(BaseModel):
    """
    A catalog entry together with what is needed to run it.

    Attributes:
        definition: The tool's published metadata.
        input_model: Filter model used to validate raw arguments.
        handler: Async callable receiving the validated filters.
    """

    definition: ToolDefinition
    input_model: type[BaseModel]
    handler: ToolHandler = Field(..., description="Tool execution callable")

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @property
    def name(self) -> str:
        """Get tool name from definition."""
        return self.definition.name


# =============================================================================
# InvocationRequest
# =============================================================================


class InvocationRequest(BaseModel):
    """
    A single tools/call before validation.

    Attributes:
        tool_name: Name of the tool to run.
        arguments: Untyped arguments exactly as received.
    """

    tool_name: str
    arguments: Any = Field(default_factory=dict)
