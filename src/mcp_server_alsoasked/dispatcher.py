"""Tool dispatcher: advertises the AlsoAsked tools and routes calls through
validation, the API client and the result formatter."""

import uuid
from collections.abc import Awaitable, Callable
from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData, TextContent, Tool

from .client import AlsoAskedClient
from .exceptions import ArgumentValidationError
from .formatter import format_account, format_search_response, render_json
from .models import DEFAULT_DEPTH, DEFAULT_LANGUAGE, DEFAULT_REGION, MAX_DEPTH, MIN_DEPTH, SearchRequest
from .observability import bind_call_context, clear_call_context, get_call_logger
from .validation import validate_search_args, validate_single_term_args

SEARCH_PEOPLE_ALSO_ASK = "search_people_also_ask"
SEARCH_SINGLE_TERM = "search_single_term"
GET_ACCOUNT_INFO = "get_account_info"


def _search_option_properties() -> dict[str, Any]:
    return {
        "language": {
            "type": "string",
            "description": 'Language code (e.g., "en", "es", "fr")',
            "default": DEFAULT_LANGUAGE,
        },
        "region": {
            "type": "string",
            "description": 'Region code (e.g., "us", "uk", "ca")',
            "default": DEFAULT_REGION,
        },
        "latitude": {
            "type": "number",
            "description": "Latitude for geographic targeting (e.g., 40.7128 for NYC, 31.9686 for Texas)",
        },
        "longitude": {
            "type": "number",
            "description": "Longitude for geographic targeting (e.g., -74.0060 for NYC, -99.9018 for Texas)",
        },
        "depth": {
            "type": "integer",
            "description": f"Depth of question hierarchy ({MIN_DEPTH}-{MAX_DEPTH})",
            "default": DEFAULT_DEPTH,
            "minimum": MIN_DEPTH,
            "maximum": MAX_DEPTH,
        },
        "fresh": {
            "type": "boolean",
            "description": "Whether to fetch fresh results or use cached data",
            "default": False,
        },
        "async": {
            "type": "boolean",
            "description": "Whether to process request asynchronously",
            "default": False,
        },
        "notifyWebhooks": {
            "type": "boolean",
            "description": "Whether to notify the account's configured webhooks when results are ready",
            "default": False,
        },
    }


TOOL_DEFINITIONS: list[Tool] = [
    Tool(
        name=SEARCH_PEOPLE_ALSO_ASK,
        description=(
            'Search for "People Also Ask" questions related to search terms. '
            "Returns hierarchical question data from Google PAA."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "terms": {
                    "type": "array",
                    "items": {"type": "string"},
                    "minItems": 1,
                    "description": "Array of search terms to query",
                },
                **_search_option_properties(),
            },
            "required": ["terms"],
        },
    ),
    Tool(
        name=GET_ACCOUNT_INFO,
        description="Get account information including credits, plan details, and usage statistics",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name=SEARCH_SINGLE_TERM,
        description="Search for PAA questions for a single term (convenience method)",
        inputSchema={
            "type": "object",
            "properties": {
                "term": {"type": "string", "description": "Single search term"},
                **_search_option_properties(),
            },
            "required": ["term"],
        },
    ),
]


class ToolDispatcher:
    """Maps a tool name to its validate -> request -> format pipeline.

    Holds no per-call state, so overlapping calls are independent.
    """

    def __init__(self, client: AlsoAskedClient) -> None:
        self._client = client
        self._handlers: dict[str, Callable[[Any], Awaitable[str]]] = {
            SEARCH_PEOPLE_ALSO_ASK: self._search_people_also_ask,
            SEARCH_SINGLE_TERM: self._search_single_term,
            GET_ACCOUNT_INFO: self._get_account_info,
        }

    def list_tools(self) -> list[Tool]:
        return list(TOOL_DEFINITIONS)

    async def call_tool(self, name: str, arguments: Any = None) -> list[TextContent]:
        """Run a tool and return its result as a single JSON text block.

        Raises:
            McpError: ``METHOD_NOT_FOUND`` for unknown tools, ``INVALID_PARAMS`` for
                malformed arguments, ``INTERNAL_ERROR`` for API or network failures.
                The original exception is chained as ``__cause__``.
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

        bind_call_context(uuid.uuid4().hex, name)
        call_logger = get_call_logger()
        call_logger.info("tool_called")
        try:
            text = await handler(arguments)
        except Exception as e:
            code = INVALID_PARAMS if isinstance(e, ArgumentValidationError) else INTERNAL_ERROR
            call_logger.error("tool_failed", error=str(e), error_type=type(e).__name__)
            raise McpError(ErrorData(code=code, message=f"Tool execution failed: {e}")) from e
        else:
            call_logger.info("tool_completed", result_length=len(text))
        finally:
            clear_call_context()

        return [TextContent(type="text", text=text)]

    async def _search_people_also_ask(self, arguments: Any) -> str:
        return await self._handle_search(validate_search_args(arguments))

    async def _search_single_term(self, arguments: Any) -> str:
        args = validate_single_term_args(arguments)
        return await self._handle_search(SearchRequest.from_overrides([args.term], args.overrides()))

    async def _handle_search(self, request: SearchRequest) -> str:
        response = await self._client.search(request)
        return render_json(format_search_response(response))

    async def _get_account_info(self, arguments: Any) -> str:
        account = await self._client.get_account()
        return render_json(format_account(account))
