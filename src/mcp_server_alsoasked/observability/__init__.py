"""Observability helpers: stderr logging and per-call structured log context."""

from .logging import (
    bind_call_context,
    clear_call_context,
    configure_stdio_logging,
    get_call_logger,
    setup_structured_logging,
)

__all__ = [
    "bind_call_context",
    "clear_call_context",
    "configure_stdio_logging",
    "get_call_logger",
    "setup_structured_logging",
]
