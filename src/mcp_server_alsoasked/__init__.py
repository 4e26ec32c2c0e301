"""MCP server for the AlsoAsked People Also Ask API."""

from .client import AlsoAskedClient
from .config import APP_VERSION, AppSettings, load_settings
from .dispatcher import ToolDispatcher
from .exceptions import (
    AlsoAskedError,
    APIConnectionError,
    APIHTTPError,
    APIResponseError,
    ArgumentValidationError,
)
from .server import main, serve

__version__ = APP_VERSION

__all__ = [
    "main",
    "serve",
    "load_settings",
    "AppSettings",
    "AlsoAskedClient",
    "ToolDispatcher",
    "AlsoAskedError",
    "ArgumentValidationError",
    "APIHTTPError",
    "APIConnectionError",
    "APIResponseError",
]
