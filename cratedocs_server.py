#!/usr/bin/env python3
"""
FastMCP server for Rust crate documentation.

This server provides tools to:
1. Look up a crate's documentation on docs.rs
2. Look up a single item (struct, enum, trait, fn, macro) in a crate
3. Search crates.io

Usage:
    python cratedocs_server.py [stdio|sse|http]
"""

import sys

from fastmcp import FastMCP

from cratedocs.logger import setup_logging
from cratedocs_tools.docs_tools import register_docs_tools

SERVER_HOST = "127.0.0.1"
SERVER_PORT = 8604

mcp = FastMCP(
    "CrateDocs 🦀",
    instructions="Rust Documentation MCP Server for accessing Rust crate documentation.",
)

logger = setup_logging()

register_docs_tools(mcp)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    transport = argv[0].lower() if argv else "stdio"

    logger.info("CrateDocs server starting up", extra={'extra_data': {'transport': transport}})

    if transport == "sse":
        logger.info(f"Running with SSE transport on http://{SERVER_HOST}:{SERVER_PORT}")
        mcp.run(transport="sse", host=SERVER_HOST, port=SERVER_PORT)
    elif transport == "http":
        logger.info(f"Running with HTTP transport on http://{SERVER_HOST}:{SERVER_PORT}/mcp")
        mcp.run(transport="http", host=SERVER_HOST, port=SERVER_PORT, path="/mcp")
    elif transport == "stdio":
        mcp.run(transport="stdio")
    else:
        print("Usage: python cratedocs_server.py [stdio|sse|http]", file=sys.stderr)
        print("Default: stdio", file=sys.stderr)
        logger.info("Unknown transport, running with default STDIO transport")
        mcp.run()


if __name__ == "__main__":
    main()
