"""MCP server exposing the AlsoAsked People Also Ask API as tools."""

import logging
import sys
from typing import Any

import httpx
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, CallToolRequestParams, ToolAnnotations
from pydantic import Field

from .client import AlsoAskedClient
from .config import APP_NAME, AppSettings, load_settings
from .dispatcher import ToolDispatcher
from .observability import configure_stdio_logging, setup_structured_logging
from .utils import mask_api_key

logger = logging.getLogger("mcp_server_alsoasked")

INSTRUCTIONS = (
    "Query Google 'People Also Ask' data through the AlsoAsked API. "
    "Use search_people_also_ask for several terms, search_single_term for one, "
    "and get_account_info to check remaining credits."
)


# Tool failures reach the host as text-only isError results, so the error
# class travels as a prefix of the message.
ERROR_CATEGORIES = {
    METHOD_NOT_FOUND: "method_not_found",
    INVALID_PARAMS: "invalid_params",
    INTERNAL_ERROR: "internal_error",
}


def _to_tool_error(error: McpError) -> ToolError:
    category = ERROR_CATEGORIES.get(error.error.code, "internal_error")
    return ToolError(f"[{category}] {error.error.message}")


class DispatchedTool(Tool):
    """FastMCP tool that forwards raw arguments to the ToolDispatcher.

    The advertised schema is the dispatcher's; arguments are not coerced by
    FastMCP so the validator sees exactly what the caller sent.
    """

    dispatcher: Any = Field(exclude=True, repr=False)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        try:
            content = await self.dispatcher.call_tool(self.name, arguments)
        except McpError as e:
            raise _to_tool_error(e) from e
        return ToolResult(content=content)


class UnknownToolMiddleware(Middleware):
    """Route calls to unregistered tool names through the dispatcher so they
    fail as ``method_not_found`` instead of FastMCP's generic lookup error."""

    def __init__(self, dispatcher: ToolDispatcher) -> None:
        self._dispatcher = dispatcher
        self._known = {tool.name for tool in dispatcher.list_tools()}

    async def on_call_tool(
        self,
        context: MiddlewareContext[CallToolRequestParams],
        call_next: CallNext[CallToolRequestParams, ToolResult],
    ) -> ToolResult:
        if context.message.name not in self._known:
            try:
                await self._dispatcher.call_tool(context.message.name, context.message.arguments)
            except McpError as e:
                raise _to_tool_error(e) from e
        return await call_next(context)


def serve(settings: AppSettings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> FastMCP:
    """Create and configure the MCP server.

    Args:
        settings: Application settings; loaded from the environment when omitted.
        transport: Optional httpx transport for the API client (tests inject a mock).
    """
    settings = settings or load_settings()
    setup_structured_logging(settings.server.logging_level)

    client = AlsoAskedClient(settings.api, transport=transport)
    dispatcher = ToolDispatcher(client)

    server = FastMCP(APP_NAME, instructions=INSTRUCTIONS)
    server.add_middleware(UnknownToolMiddleware(dispatcher))
    for definition in dispatcher.list_tools():
        server.add_tool(
            DispatchedTool(
                name=definition.name,
                description=definition.description,
                parameters=definition.inputSchema,
                annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=True),
                dispatcher=dispatcher,
            )
        )

    return server


def main() -> None:
    """Entry point for MCP server."""
    settings = load_settings()
    configure_stdio_logging(settings.server.logging_level)

    if not settings.api.has_api_key():
        logger.error("ALSOASKED_API_KEY environment variable is required")
        sys.exit(1)

    logger.info(f"Using AlsoAsked API key: {mask_api_key(settings.api.get_api_key())}")
    server_instance = serve(settings)
    transport = settings.server.transport

    if transport == "stdio":
        logger.info("AlsoAsked MCP server running on stdio")
        server_instance.run(transport="stdio")
    elif transport in ("streamable-http", "sse"):
        logger.info(f"AlsoAsked MCP server at http://{settings.server.host}:{settings.server.port}/mcp ({transport})")
        server_instance.run(transport=transport, host=settings.server.host, port=settings.server.port)
    else:
        raise ValueError(f"Unknown transport: {transport}")


if __name__ == "__main__":
    main()
