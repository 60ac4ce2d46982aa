#!/usr/bin/env python3
"""
Swimlanes MCP Server - Server Implementation
============================================

Generates swimlane (sequence) diagrams through the Swimlanes.io API.

Tools:
- create_swimlane_documentation: Markdown document with diagram source, image and links
- generate_swimlane_image: Render and save a PNG
- get_swimlane_image_link: Shareable link without downloading anything

Tools are published with hand-written JSON schemas using the camelCase
argument names (includeImage, outputPath, ...). Arguments reach the tool
handlers untouched, so the handlers' own validation decides what is accepted.
Every tool answers with a single text item holding a JSON object with
``success`` set, plus either the result fields or an ``error`` message.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent, Tool

from . import config, tools

logger = logging.getLogger(__name__)

SERVER_NAME = "swimlanes-mcp-server"

_TEXT = {"type": "string", "description": "Swimlanes syntax content"}
_OPTIONAL_TITLE = {"type": "string", "description": "Optional title"}
_HIGH_RESOLUTION = {
    "type": "boolean",
    "description": "For printing quality (default: false)",
    "default": False,
}

TOOL_DEFINITIONS = [
    Tool(
        name="create_swimlane_documentation",
        description=(
            "Generate a complete markdown documentation file with swimlane diagram syntax "
            "and embedded images, ready for version control"
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "text": _TEXT,
                "title": {"type": "string", "description": "Diagram title"},
                "description": {
                    "type": "string",
                    "description": "Description of what the diagram represents",
                },
                "outputPath": {
                    "type": "string",
                    "description": "Where to save markdown file (optional, auto-generated if not provided)",
                },
                "includeImage": {
                    "type": "boolean",
                    "description": "Whether to embed rendered image (default: true)",
                    "default": True,
                },
                "folderStructure": {
                    "type": "string",
                    "description": 'Optional folder organization (e.g., "auth", "api")',
                },
            },
            "required": ["text", "title"],
        },
    ),
    Tool(
        name="generate_swimlane_image",
        description="Generate and save a PNG image of a swimlane diagram",
        inputSchema={
            "type": "object",
            "properties": {
                "text": _TEXT,
                "title": _OPTIONAL_TITLE,
                "highResolution": _HIGH_RESOLUTION,
                "outputPath": {
                    "type": "string",
                    "description": "Where to save (optional, auto-generated if not provided)",
                },
            },
            "required": ["text"],
        },
    ),
    Tool(
        name="get_swimlane_image_link",
        description="Generate a direct link to a PNG image without downloading",
        inputSchema={
            "type": "object",
            "properties": {
                "text": _TEXT,
                "title": _OPTIONAL_TITLE,
                "highResolution": _HIGH_RESOLUTION,
            },
            "required": ["text"],
        },
    ),
]


class SwimlanesMCP(FastMCP):
    """FastMCP server that routes tool calls through ``tools.call_tool``."""

    async def list_tools(self) -> list[Tool]:
        return list(TOOL_DEFINITIONS)

    async def call_tool(self, name: str, arguments: Any) -> list[TextContent]:
        logger.debug("Tool call: %s", name)
        envelope = await tools.call_tool(name, arguments)
        return [TextContent(type="text", text=item["text"]) for item in envelope["content"]]


@asynccontextmanager
async def server_lifespan(server: FastMCP):
    """Initialize on startup, cleanup on shutdown."""
    # Default output paths are relative to the project directory
    project_dir = config.project_dir()
    project_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Swimlanes MCP Server ready (project dir: %s, API: %s)", project_dir, config.api_base())
    yield


# Initialize the MCP server
mcp = SwimlanesMCP(SERVER_NAME, lifespan=server_lifespan)


def create_server() -> FastMCP:
    """Create and return the MCP server instance."""
    return mcp
