#!/usr/bin/env python3
"""
In-process cache for documentation lookups.

Shared by every tool call of a running server so repeated lookups of the same
crate or item do not hit docs.rs again.
"""

import asyncio
from typing import Dict, Optional


class DocCache:
    """Async-safe string cache keyed by lookup (crate, version, item path)."""

    def __init__(self):
        self._entries: Dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Optional[str]:
        async with self._lock:
            return self._entries.get(key)

    async def set(self, key: str, value: str) -> None:
        async with self._lock:
            self._entries[key] = value

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def crate_cache_key(crate_name: str, version: Optional[str] = None) -> str:
    """Key for a whole-crate lookup."""
    if version:
        return f"{crate_name}:{version}"
    return crate_name


def item_cache_key(crate_name: str, item_path: str, version: Optional[str] = None) -> str:
    """Key for an item lookup. `item_path` must already have the crate prefix stripped."""
    if version:
        return f"{crate_name}:{version}:{item_path}"
    return f"{crate_name}:{item_path}"
