"""MCP server exposing the engine's tools over stdio."""

import asyncio
import logging

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from danger_zone_mcp import __version__
from danger_zone_mcp.engine import DangerZoneEngine
from danger_zone_mcp.errors import InvalidToolArguments, ToolNotFoundError

logger = logging.getLogger(__name__)

SERVER_NAME = "danger-zone-mcp"


def create_server(engine: DangerZoneEngine | None = None) -> Server:
    """Create an MCP server backed by ``engine``.

    Args:
        engine: Tool engine. A default engine is created if not provided.

    Returns:
        A low-level MCP Server with list_tools and call_tool handlers.
    """
    if engine is None:
        engine = DangerZoneEngine()

    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        logger.debug("list_tools called")
        return await asyncio.to_thread(engine.list_tools)

    # Registered directly: the call_tool() decorator reports every exception
    # as an isError result, and unknown tools must be JSON-RPC errors.
    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        name = req.params.name
        logger.info("call_tool: %s", name)
        try:
            text = await asyncio.to_thread(
                engine.call_tool, name, req.params.arguments or {}
            )
        except ToolNotFoundError as e:
            raise McpError(
                types.ErrorData(code=types.METHOD_NOT_FOUND, message=str(e))
            ) from e
        except InvalidToolArguments as e:
            raise McpError(
                types.ErrorData(code=types.INVALID_PARAMS, message=str(e))
            ) from e

        return types.ServerResult(
            types.CallToolResult(content=[types.TextContent(type="text", text=text)])
        )

    server.request_handlers[types.CallToolRequest] = handle_call_tool
    return server


async def run_stdio(server: Server) -> None:
    """Serve ``server`` over stdio until the client disconnects."""
    logger.info("Danger Zone MCP server running")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
