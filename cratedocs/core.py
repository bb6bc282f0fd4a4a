#!/usr/bin/env python3
"""
Core business logic for the crate documentation MCP server.

These functions wrap CrateDocsClient with logging and optional client
feedback. They have no dependency on tool registration, so they can be called
and tested without a running server.
"""

from typing import Optional

from fastmcp import Context

from .cache import DocCache
from .docs_client import CrateDocsClient, clamp_search_limit

FAILURE_PREFIXES = ("Failed to", "Invalid item path")


def _is_failure(result: str) -> bool:
    return result.startswith(FAILURE_PREFIXES)


async def lookup_crate_impl(crate_name: str, version: Optional[str], cache: DocCache, logger, ctx: Optional[Context] = None) -> str:
    """
    Core implementation for looking up a crate's documentation.

    Args:
        crate_name: Name of the crate
        version: Crate version, or None for the latest release
        cache: Shared documentation cache
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback

    Returns:
        Markdown documentation, or an error message
    """
    if ctx:
        await ctx.info(f"Looking up {crate_name} {version or 'latest'}")
    logger.info("Looking up crate", extra={'extra_data': {'crate': crate_name, 'version': version}})

    async with CrateDocsClient(cache) as client:
        result = await client.lookup_crate(crate_name, version)

    if _is_failure(result):
        if ctx:
            await ctx.error(result)
        logger.error("Crate lookup failed", extra={'extra_data': {'crate': crate_name, 'version': version, 'error': result}})
    else:
        logger.info(
            "Crate lookup succeeded",
            extra={'extra_data': {'crate': crate_name, 'version': version, 'length': len(result)}}
        )
    return result


async def lookup_item_impl(crate_name: str, item_path: str, version: Optional[str], cache: DocCache, logger, ctx: Optional[Context] = None) -> str:
    """
    Core implementation for looking up a single item in a crate.

    Args:
        crate_name: Name of the crate
        item_path: Path such as 'vec::Vec'; a leading 'crate_name::' is stripped
        version: Crate version, or None for the latest release
        cache: Shared documentation cache
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback

    Returns:
        Markdown documentation, or an error message
    """
    if ctx:
        await ctx.info(f"Looking up {item_path} in {crate_name}")
    logger.info(
        "Looking up item",
        extra={'extra_data': {'crate': crate_name, 'item_path': item_path, 'version': version}}
    )

    async with CrateDocsClient(cache) as client:
        result = await client.lookup_item(crate_name, item_path, version)

    if _is_failure(result):
        if ctx:
            await ctx.error(result)
        logger.error(
            "Item lookup failed",
            extra={'extra_data': {'crate': crate_name, 'item_path': item_path, 'version': version, 'error': result}}
        )
    return result


async def search_crates_impl(query: str, limit: Optional[int], cache: DocCache, logger, ctx: Optional[Context] = None) -> str:
    """
    Core implementation for searching crates.io.

    Args:
        query: Search terms
        limit: Maximum number of results (default 10, capped at 100)
        cache: Shared documentation cache
        logger: Logger instance
        ctx: Optional FastMCP context for user feedback

    Returns:
        crates.io JSON response, markdown for HTML responses, or an error message
    """
    limit = clamp_search_limit(limit)
    if ctx:
        await ctx.info(f"Searching crates.io for '{query}'")
    logger.info("Searching crates", extra={'extra_data': {'query': query, 'limit': limit}})

    async with CrateDocsClient(cache) as client:
        result = await client.search_crates(query, limit)

    if _is_failure(result):
        if ctx:
            await ctx.error(result)
        logger.error("Crate search failed", extra={'extra_data': {'query': query, 'error': result}})
    return result
