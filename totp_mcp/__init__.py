"""TOTP MCP package.

Provides a minimal MCP server that reads TOTP secrets from a local secrets
file and returns the current code for a fixed set of named accounts.
"""

__all__ = [
    "accounts",
    "config",
    "mcp_server",
    "models",
    "secret_store",
    "service",
    "totp",
]
