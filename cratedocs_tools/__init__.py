"""
MCP tools for the crate documentation server.

- docs_tools: Crate, item and search lookups
"""
