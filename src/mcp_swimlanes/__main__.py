#!/usr/bin/env python3
"""
Swimlanes MCP Server - Entry Point

Supports multiple transport modes:
- stdio: Standard I/O (default, for Claude Desktop)
- sse: Server-Sent Events over HTTP
- http: Streamable HTTP transport
"""

import argparse
import logging
import os
import sys

from . import config


def main():
    parser = argparse.ArgumentParser(
        description="MCP server for Swimlanes.io diagrams",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run with STDIO transport (default, for Claude Desktop)
  mcp-swimlanes

  # Run with SSE transport on port 8080
  mcp-swimlanes --transport sse --port 8080

  # Run with HTTP transport on custom port
  mcp-swimlanes --transport http --port 3000

  # Write generated docs and images under another directory
  mcp-swimlanes --project-dir /path/to/repo
"""
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "http"],
        default="stdio",
        help="Transport mode (default: stdio)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8080,
        help="Port for SSE/HTTP transport (default: 8080)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Host to bind for SSE/HTTP transport (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--project-dir",
        type=str,
        default=os.getcwd(),
        help="Directory that output paths are relative to (default: current directory)"
    )
    parser.add_argument(
        "--api-base",
        type=str,
        default=config.api_base(),
        help=f"Swimlanes.io API base URL (default: {config.DEFAULT_API_BASE})"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        default=config.log_level(),
        help="Log level (default: INFO)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__import__('mcp_swimlanes').__version__}"
    )

    args = parser.parse_args()

    # Set configuration environment variables
    os.environ["MCP_PROJECT_DIR"] = os.path.abspath(args.project_dir)
    os.environ["SWIMLANES_API_BASE"] = args.api_base
    os.environ["SWIMLANES_LOG_LEVEL"] = args.log_level

    # stdout carries the protocol in stdio mode, so logs go to stderr
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Import server after setting environment
    from .server import mcp

    if args.transport == "stdio":
        # Standard STDIO transport (default)
        mcp.run()
        return

    try:
        import uvicorn
    except ImportError as e:
        print(f"Error: {args.transport.upper()} transport requires additional dependencies: {e}")
        print(f"Install with: pip install 'mcp-swimlanes[{args.transport}]'")
        sys.exit(1)

    if args.transport == "sse":
        app = mcp.sse_app()
        endpoint = "/sse"
    else:
        app = mcp.streamable_http_app()
        endpoint = "/mcp"

    print(f"Starting {args.transport.upper()} server on {args.host}:{args.port}")
    print(f"Endpoint: http://{args.host}:{args.port}{endpoint}")
    print(f"Project directory: {args.project_dir}")
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
