#!/usr/bin/env python3
"""
Client for docs.rs and crates.io.

Implements the three documentation lookups behind the MCP tools. Failures are
reported as human-readable strings instead of exceptions so the calling
model always gets an answer it can read.
"""

import asyncio
from typing import List, Optional

import aiohttp

from .cache import DocCache, crate_cache_key, item_cache_key
from .html_to_markdown import html_to_markdown

USER_AGENT = "CrateDocs/0.1.0 (https://github.com/d6e/cratedocs-mcp)"
DOCS_RS_URL = "https://docs.rs"
CRATES_IO_SEARCH_URL = "https://crates.io/api/v1/crates"

# Order matters: the first kind docs.rs answers for wins
ITEM_KINDS = ("struct", "enum", "trait", "fn", "macro")

DEFAULT_SEARCH_LIMIT = 10
MAX_SEARCH_LIMIT = 100


def crate_docs_url(crate_name: str, version: Optional[str] = None) -> str:
    if version:
        return f"{DOCS_RS_URL}/crate/{crate_name}/{version}/"
    return f"{DOCS_RS_URL}/crate/{crate_name}/"


def strip_crate_prefix(crate_name: str, item_path: str) -> str:
    """Drop a leading `crate_name::` from an item path, e.g. `serde::de::Error` -> `de::Error`."""
    prefix = f"{crate_name}::"
    if item_path.startswith(prefix):
        return item_path[len(prefix):]
    return item_path


def item_docs_urls(crate_name: str, item_path: str, version: Optional[str] = None) -> List[str]:
    """
    Candidate docs.rs URLs for an item, one per item kind.

    Args:
        crate_name: Name of the crate
        item_path: `module::path::ItemName` with the crate prefix already stripped
        version: Crate version, or None for the latest release

    Returns:
        URLs in the order they should be tried
    """
    parts = item_path.split("::")
    item_name = parts[-1]
    module_path = "/".join(parts[:-1])

    base = f"{DOCS_RS_URL}/{crate_name}/{version or 'latest'}/{crate_name}"
    if module_path:
        base = f"{base}/{module_path}"

    return [f"{base}/{kind}.{item_name}.html" for kind in ITEM_KINDS]


def clamp_search_limit(limit: Optional[int]) -> int:
    if limit is None:
        return DEFAULT_SEARCH_LIMIT
    return min(limit, MAX_SEARCH_LIMIT)


class CrateDocsClient:
    """Async client for crate documentation lookups, backed by a shared DocCache."""

    def __init__(self, cache: Optional[DocCache] = None, session: Optional[aiohttp.ClientSession] = None):
        self.cache = cache if cache is not None else DocCache()
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self):
        if self.session is None:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=30),
                headers={'User-Agent': USER_AGENT}
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session and self._owns_session:
            await self.session.close()
            self.session = None

    async def lookup_crate(self, crate_name: str, version: Optional[str] = None) -> str:
        """Crate overview page from docs.rs, as markdown."""
        cache_key = crate_cache_key(crate_name, version)
        cached = await self.cache.get(cache_key)
        if cached is not None:
            return cached

        url = crate_docs_url(crate_name, version)
        try:
            async with self.session.get(url) as response:
                if not 200 <= response.status < 300:
                    return f"Failed to fetch documentation. Status: {response.status}"
                try:
                    html_body = await response.text(errors="replace")
                except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                    return f"Failed to read response body: {e}"
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            return f"Failed to fetch documentation: {e}"

        markdown_body = html_to_markdown(html_body)
        await self.cache.set(cache_key, markdown_body)
        return markdown_body

    async def lookup_item(self, crate_name: str, item_path: str, version: Optional[str] = None) -> str:
        """
        Documentation for one item (struct, enum, trait, fn or macro) of a crate.

        The item kind is unknown up front, so each kind is tried in turn until
        docs.rs returns a page.
        """
        item_path = strip_crate_prefix(crate_name, item_path.strip())
        if not item_path or not item_path.split("::")[-1]:
            return "Invalid item path. Expected format: module::path::ItemName"

        cache_key = item_cache_key(crate_name, item_path, version)
        cached = await self.cache.get(cache_key)
        if cached is not None:
            return cached

        last_error = None
        for url in item_docs_urls(crate_name, item_path, version):
            try:
                async with self.session.get(url) as response:
                    if not 200 <= response.status < 300:
                        last_error = f"Status code: {response.status}"
                        continue
                    try:
                        html_body = await response.text(errors="replace")
                    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                        return f"Failed to read response body: {e}"
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_error = str(e)
                continue

            markdown_body = html_to_markdown(html_body)
            await self.cache.set(cache_key, markdown_body)
            return markdown_body

        return (
            "Failed to fetch item documentation. No matching item found. "
            f"Last error: {last_error or 'Unknown error'}"
        )

    async def search_crates(self, query: str, limit: Optional[int] = None) -> str:
        """Search crates.io. JSON API responses are passed through untouched."""
        params = {'q': query, 'per_page': str(clamp_search_limit(limit))}
        try:
            async with self.session.get(CRATES_IO_SEARCH_URL, params=params) as response:
                if not 200 <= response.status < 300:
                    return f"Failed to search crates.io. Status: {response.status}"
                try:
                    body = await response.text(errors="replace")
                except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                    return f"Failed to read response body: {e}"
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            return f"Failed to search crates.io: {e}"

        if body.strip().startswith('{'):
            return body
        return html_to_markdown(body)
