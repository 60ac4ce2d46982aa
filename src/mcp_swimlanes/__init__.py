"""
Swimlanes MCP Server
====================

MCP server for swimlane diagrams rendered by Swimlanes.io.

Supports:
- Markdown documentation with diagram source, embedded PNG and links
- PNG rendering (standard or high resolution)
- Shareable diagram links

Transport modes:
- STDIO (default): For Claude Desktop and other MCP clients
- SSE: Server-Sent Events over HTTP
- HTTP: Streamable HTTP transport
"""

__version__ = "0.1.0"

from .server import create_server, mcp

__all__ = ["create_server", "mcp", "__version__"]
