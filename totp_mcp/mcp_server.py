"""
TOTP MCP server.

Exposes ``get_totp_code`` and ``list_totp_accounts`` over the MCP stdio
transport. Every response is a single text block; failures are reported as
``Error: ...`` text rather than protocol errors.
"""

import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
import mcp.server.stdio
import mcp.types as types

from totp_mcp.config import TotpSettings, get_settings
from totp_mcp.models import GetTotpCodeRequest, TotpError
from totp_mcp.service import TotpService


logger = logging.getLogger(__name__)


TOOLS: List[types.Tool] = [
    types.Tool(
        name="get_totp_code",
        description="Generate a TOTP 2FA code for an account. Returns a 6-digit code valid for ~30 seconds.",
        inputSchema={
            "type": "object",
            "properties": {
                "account": {
                    "type": "string",
                    "description": "Account name (e.g., 'google', 'codiedev42')",
                }
            },
            "required": ["account"],
        },
    ),
    types.Tool(
        name="list_totp_accounts",
        description="List all configured TOTP accounts",
        inputSchema={"type": "object", "properties": {}},
    ),
]


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "Invalid arguments: " + "; ".join(parts)


class TotpServer:
    """MCP server answering TOTP tool calls."""

    def __init__(
        self,
        service: Optional[TotpService] = None,
        settings: Optional[TotpSettings] = None,
    ):
        self.settings = settings or (service.settings if service else get_settings())
        self.service = service or TotpService(settings=self.settings)
        self.server = Server(self.settings.server_name)

        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Register list/call handlers on the MCP server."""

        @self.server.list_tools()
        async def handle_list_tools() -> List[types.Tool]:
            return list(TOOLS)

        # GetTotpCodeRequest validates arguments; failures are returned as text
        @self.server.call_tool(validate_input=False)
        async def handle_call_tool(
            name: str, arguments: Optional[Dict[str, Any]]
        ) -> List[types.TextContent]:
            return [types.TextContent(type="text", text=self.dispatch(name, arguments))]

    def dispatch(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> str:
        """
        Run a tool by name and return its text response.

        Args:
            name: Tool name
            arguments: Tool arguments as received from the client

        Returns:
            Response text; unknown tools yield "Unknown tool: {name}"
        """
        if name == "get_totp_code":
            return self._handle_get_totp_code(arguments or {})
        if name == "list_totp_accounts":
            return self._handle_list_totp_accounts()

        logger.warning(f"Unknown tool requested: {name}")
        return f"Unknown tool: {name}"

    def _handle_get_totp_code(self, arguments: Dict[str, Any]) -> str:
        try:
            request = GetTotpCodeRequest(**arguments)
        except ValidationError as e:
            return f"Error: {_format_validation_error(e)}"

        result = self.service.generate_code(request.account)
        if isinstance(result, TotpError):
            return f"Error: {result.message}"
        return (
            f"TOTP code for {result.account}: {result.code}\n"
            f"Valid for {result.seconds_remaining} more seconds"
        )

    def _handle_list_totp_accounts(self) -> str:
        lines = []
        for status in self.service.list_accounts():
            if status.configured:
                lines.append(f"- {status.account}: configured")
            else:
                lines.append(
                    f"- {status.account}: NOT configured (missing {status.missing})"
                )
        return "Available TOTP accounts:\n" + "\n".join(lines)

    async def serve(self) -> None:
        """Start the MCP server on stdio."""
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            logger.info("TOTP MCP server running")
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=self.settings.server_name,
                    server_version=self.settings.server_version,
                    capabilities=self.server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                ),
            )


async def main() -> None:
    """Main entry point for the TOTP MCP server."""
    settings = get_settings()

    # stdout carries the protocol; diagnostics go to stderr
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    server = TotpServer(settings=settings)
    await server.serve()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
