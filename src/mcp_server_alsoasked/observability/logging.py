"""Structured logging with per-call context using structlog and contextvars."""

import logging
import sys

import structlog

_configured = False

NOISY_LOGGERS = ("httpx", "httpcore", "asyncio", "mcp", "fastmcp", "uvicorn")


def configure_stdio_logging(level: str = "INFO") -> None:
    """Send every log record to stderr.

    In stdio mode, stdout is reserved exclusively for JSON-RPC messages.
    """
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    root = logging.getLogger()
    root.handlers = [stderr_handler]
    root.setLevel(logging.WARNING)

    for logger_name in NOISY_LOGGERS:
        dep_logger = logging.getLogger(logger_name)
        dep_logger.setLevel(logging.WARNING)
        dep_logger.handlers = [stderr_handler]
        dep_logger.propagate = False

    logging.getLogger("mcp_server_alsoasked").setLevel(getattr(logging, level.upper(), logging.INFO))


def setup_structured_logging(level: str = "INFO") -> None:
    """Configure structlog so dispatcher events carry the bound ``call_id`` and ``tool_name``.

    Idempotent: ``serve()`` may run more than once in one process.
    """
    global _configured
    if _configured:
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,  # call_id / tool_name from bind_call_context
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),  # one JSON object per line on stderr
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # basicConfig writes to stderr and is a no-op once handlers exist
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )

    _configured = True


def bind_call_context(call_id: str, tool_name: str) -> None:
    """Bind tool-call context for all subsequent logs in this async context."""
    structlog.contextvars.bind_contextvars(call_id=call_id, tool_name=tool_name)


def clear_call_context() -> None:
    """Clear tool-call context after the call completes."""
    structlog.contextvars.clear_contextvars()


def get_call_logger(name: str = "mcp_server_alsoasked") -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
