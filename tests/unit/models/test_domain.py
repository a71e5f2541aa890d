"""
Tests for domain models: catalog entries and tool results.
"""

import json

from growpanel_mcp.models.domain import (
    InvocationRequest,
    RawValue,
    TextContent,
    ToolDefinition,
    ToolEnvelope,
)


class TestToolDefinition:
    def test_catalog_entry_uses_input_schema_key(self) -> None:
        definition = ToolDefinition(
            name="getMRR",
            description="MRR",
            input_schema={"type": "object", "properties": {}, "required": []},
            output_schema={"type": "object"},
        )
        assert definition.to_catalog_entry() == {
            "name": "getMRR",
            "description": "MRR",
            "inputSchema": {"type": "object", "properties": {}, "required": []},
        }


class TestToolEnvelope:
    def test_from_text_builds_one_block_per_text(self) -> None:
        envelope = ToolEnvelope.from_text("a", "b")
        assert envelope.model_dump() == {
            "content": [{"type": "text", "text": "a"}, {"type": "text", "text": "b"}]
        }

    def test_text_content_type_is_text(self) -> None:
        assert TextContent(text="x").type == "text"


class TestRawValue:
    """Wrapping of bare handler results."""

    def test_string_is_single_block_verbatim(self) -> None:
        envelope = RawValue(value="hello").to_envelope()
        assert [block.text for block in envelope.content] == ["hello"]

    def test_object_is_pretty_json(self) -> None:
        payload = {"result": [{"date": "2025-01-01", "leads": 3}]}
        envelope = RawValue(value=payload).to_envelope()
        assert len(envelope.content) == 1
        assert envelope.content[0].text == json.dumps(payload, indent=2)

    def test_list_is_one_block_per_element(self) -> None:
        envelope = RawValue(value=["a", {"b": 1}, 2]).to_envelope()
        assert [block.text for block in envelope.content] == [
            "a",
            json.dumps({"b": 1}, indent=2),
            "2",
        ]

    def test_empty_list_has_no_blocks(self) -> None:
        assert RawValue(value=[]).to_envelope().content == []

    def test_none_is_json_null(self) -> None:
        assert RawValue(value=None).to_envelope().content[0].text == "null"


class TestInvocationRequest:
    def test_arguments_default_to_empty_object(self) -> None:
        assert InvocationRequest(tool_name="getMRR").arguments == {}

    def test_arguments_kept_untyped(self) -> None:
        assert InvocationRequest(tool_name="getMRR", arguments=[1, 2]).arguments == [1, 2]
