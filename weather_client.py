#!/usr/bin/env python3
"""
Example client for the weather MCP server.

Starts the server as a stdio subprocess, calls both tools with a few sample
arguments (including an invalid state code and a point outside NWS coverage)
and prints the text each call returns.
"""

import asyncio
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
from mcp.types import CallToolResult, TextContent

LAUNCHER_PATH = Path(__file__).with_name("launcher.py")


@dataclass(frozen=True)
class ToolText:
    """Text payload of a tool call, or why none could be extracted.

    Attributes:
        text: The single text part returned by the tool
        error: Set instead of text when the result had an unexpected shape
        is_tool_error: The server flagged the result as an error (isError)
    """
    text: Optional[str] = None
    error: Optional[str] = None
    is_tool_error: bool = False

    @property
    def ok(self) -> bool:
        return self.text is not None

    def render(self) -> str:
        if self.ok:
            return self.text
        return f"Error: {self.error}"


def extract_text(result: CallToolResult) -> ToolText:
    """Pull the text part out of a tool result.

    Args:
        result: Result returned by ClientSession.call_tool

    Returns:
        ToolText with text set, or with error set when the first content part
        is missing or is not text
    """
    if not result.content:
        return ToolText(error="Received a result with no content parts.", is_tool_error=bool(result.isError))

    first = result.content[0]
    if not isinstance(first, TextContent):
        return ToolText(
            error=f"Received unexpected content type: {getattr(first, 'type', type(first).__name__)}",
            is_tool_error=bool(result.isError),
        )

    return ToolText(text=first.text, is_tool_error=bool(result.isError))


async def call_and_print(session: ClientSession, title: str, tool_name: str, arguments: Dict[str, Any]) -> ToolText:
    """Call one tool and print its text under a heading."""
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)

    result = await session.call_tool(tool_name, arguments=arguments)
    tool_text = extract_text(result)
    print(tool_text.render())
    return tool_text


async def main() -> None:
    params = StdioServerParameters(
        command=sys.executable,
        args=[str(LAUNCHER_PATH)],
        env={**os.environ, "MCP_TRANSPORT": "stdio"},
        cwd=str(LAUNCHER_PATH.parent),
    )

    print("Connecting to weather MCP server via stdio...")
    async with stdio_client(params) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()
            print("Successfully connected to server.")

            await call_and_print(session, "Weather Alerts for California (CA)", "get-alerts", {"state": "CA"})
            await call_and_print(
                session, "Weather Alerts with Invalid State Code (XYZ)", "get-alerts", {"state": "XYZ"}
            )
            await call_and_print(
                session,
                "Weather Forecast for New York City",
                "get-forecast",
                {"latitude": 40.71, "longitude": -74.00},
            )
            await call_and_print(
                session,
                "Weather Forecast for London (outside NWS coverage)",
                "get-forecast",
                {"latitude": 51.51, "longitude": -0.13},
            )

    print("\nClient disconnected.")


if __name__ == "__main__":
    asyncio.run(main())
