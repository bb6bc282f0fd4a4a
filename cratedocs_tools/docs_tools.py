#!/usr/bin/env python3
"""
MCP tools for Rust crate documentation lookups.

This module provides MCP tool wrappers around the core lookup functionality.
"""

from pathlib import Path
from typing import Optional

from fastmcp import FastMCP, Context

from cratedocs.cache import DocCache
from cratedocs.core import lookup_crate_impl, lookup_item_impl, search_crates_impl
from cratedocs.logger import setup_logging

# Configuration
LOGS_DIR = Path("./logs")

logger = setup_logging(LOGS_DIR)

# Shared by every tool call for the lifetime of the server
doc_cache = DocCache()


def register_docs_tools(mcp: FastMCP):
    """Register documentation lookup MCP tools."""

    @mcp.tool
    async def lookup_crate(crate_name: str, ctx: Context, version: Optional[str] = None) -> str:
        """
        Look up documentation for a Rust crate (returns markdown).

        Args:
            crate_name: The name of the crate to look up
            version: The version of the crate (optional, defaults to latest)
        """
        return await lookup_crate_impl(crate_name, version, doc_cache, logger, ctx)

    @mcp.tool
    async def lookup_item(crate_name: str, item_path: str, ctx: Context, version: Optional[str] = None) -> str:
        """
        Look up documentation for a specific item in a Rust crate (returns markdown).

        Args:
            crate_name: The name of the crate
            item_path: Path to the item (e.g., 'vec::Vec' or 'crate_name::vec::Vec' - crate prefix will be automatically stripped)
            version: The version of the crate (optional, defaults to latest)
        """
        return await lookup_item_impl(crate_name, item_path, version, doc_cache, logger, ctx)

    @mcp.tool
    async def search_crates(query: str, ctx: Context, limit: Optional[int] = None) -> str:
        """
        Search for Rust crates on crates.io (returns JSON or markdown).

        Args:
            query: The search query
            limit: Maximum number of results to return (optional, defaults to 10, max 100)
        """
        return await search_crates_impl(query, limit, doc_cache, logger, ctx)
