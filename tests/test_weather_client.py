"""ABOUTME: Tests for text extraction in the example client."""

from mcp.types import CallToolResult, ImageContent, TextContent

from weather_client import ToolText, extract_text


class TestExtractText:
    """Tests for extract_text."""

    def test_text_result(self):
        result = CallToolResult(content=[TextContent(type="text", text="No active weather alerts found for CA.")])

        tool_text = extract_text(result)

        assert tool_text.ok
        assert tool_text.text == "No active weather alerts found for CA."
        assert not tool_text.is_tool_error

    def test_error_result_keeps_text(self):
        result = CallToolResult(
            content=[TextContent(type="text", text="Failed to retrieve weather alerts data for CA.")],
            isError=True,
        )

        tool_text = extract_text(result)

        assert tool_text.ok
        assert tool_text.is_tool_error

    def test_empty_content_is_parse_error(self):
        tool_text = extract_text(CallToolResult(content=[]))

        assert not tool_text.ok
        assert tool_text.text is None
        assert "no content" in tool_text.error
        assert tool_text.render().startswith("Error: ")

    def test_non_text_content_is_parse_error(self):
        result = CallToolResult(content=[ImageContent(type="image", data="aGVsbG8=", mimeType="image/png")])

        tool_text = extract_text(result)

        assert not tool_text.ok
        assert "image" in tool_text.error

    def test_render_text(self):
        assert ToolText(text="Weather forecast for Denver, CO:").render() == "Weather forecast for Denver, CO:"
