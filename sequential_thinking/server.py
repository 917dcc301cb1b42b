"""Sequential Thinking MCP Server - Step-by-step reasoning"""

import asyncio
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from . import __version__
from .config import Settings, load_settings
from .formatting import ThoughtFormatter
from .thought import ThoughtValidationError, decode_thought

logger = logging.getLogger(__name__)

SEQUENTIAL_THINKING_TOOL = Tool(
    name="sequential_thinking",
    description=(
        "A detailed tool for dynamic and reflective problem-solving through thoughts. "
        "This tool helps analyze problems through a flexible thinking process that can "
        "adapt and evolve. Each thought can build on, question, or revise previous "
        "insights as understanding deepens."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "thought": {
                "type": "string",
                "description": (
                    "Your current thinking step, which can include regular analytical steps, "
                    "revisions of previous thoughts, questions about previous decisions, "
                    "realizations about needing more analysis, changes in approach, "
                    "hypothesis generation, or hypothesis verification."
                ),
            },
            "nextThoughtNeeded": {
                "type": "boolean",
                "description": (
                    "True if you need more thinking, even if at what seemed like the end. "
                    "Defaults to thoughtNumber < totalThoughts"
                ),
            },
            "thoughtNumber": {
                "type": "integer",
                "minimum": 1,
                "description": "Current number in sequence (can go beyond initial total if needed)",
            },
            "totalThoughts": {
                "type": "integer",
                "minimum": 1,
                "description": "Current estimate of thoughts needed (can be adjusted up/down)",
            },
            "isRevision": {
                "type": "boolean",
                "description": "A boolean indicating if this thought revises previous thinking",
            },
            "revisesThought": {
                "type": "integer",
                "minimum": 1,
                "description": "If isRevision is true, which thought number is being reconsidered",
            },
            "branchFromThought": {
                "type": "integer",
                "minimum": 1,
                "description": "If branching, which thought number is the branching point",
            },
            "branchId": {
                "type": "string",
                "description": "Identifier for the current branch (if any)",
            },
            "needsMoreThoughts": {
                "type": "boolean",
                "description": "If reaching end but realizing more thoughts needed",
            },
        },
        "required": ["thought", "thoughtNumber", "totalThoughts"],
    },
)


def build_tool_result(arguments: Any, formatter: ThoughtFormatter) -> CallToolResult:
    """
    Validate one thought and render it as a tool result.
    Validation failures come back as an error result, not an exception.
    """
    try:
        record = decode_thought(arguments)
    except ThoughtValidationError as e:
        logger.warning(f"Rejected thought ({e.field}): {e}")
        return CallToolResult(
            content=[TextContent(type="text", text=f"Validation error: {e}")],
            isError=True,
        )

    logger.debug(f"Thought {record.thought_number}/{record.total_thoughts} accepted")

    return CallToolResult(
        content=[TextContent(type="text", text=formatter.format(record))],
        isError=False,
        **{
            "_meta": {
                "thoughtNumber": record.thought_number,
                "totalThoughts": record.total_thoughts,
                "nextThoughtNeeded": record.next_thought_needed,
                "branches": [],
                "thoughtHistoryLength": 1,
            }
        },
    )


def create_server(settings: Settings) -> Server:
    server = Server("sequential-thinking", version=__version__)
    formatter = ThoughtFormatter(disable_logging=settings.disable_thought_logging)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [SEQUENTIAL_THINKING_TOOL]

    # The validator reports input errors itself, so the SDK's schema check is off
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Any) -> CallToolResult:
        if name != SEQUENTIAL_THINKING_TOOL.name:
            raise ValueError(f"Unknown tool: {name}")
        return build_tool_result(arguments, formatter)

    return server


async def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.disable_thought_logging:
        logger.info("Thought rendering disabled via DISABLE_THOUGHT_LOGGING")

    server = create_server(settings)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run():
    asyncio.run(main())
