"""
Core modules for the crate documentation MCP server and its dev tooling.

- logger: JSON logging infrastructure
- cache: In-process documentation cache
- html_to_markdown: HTML page to markdown conversion
- docs_client: docs.rs and crates.io lookups
- core: Lookup implementations with logging and client feedback
- envrc_refresh: Forced nix-direnv reload of the project checkout
"""
