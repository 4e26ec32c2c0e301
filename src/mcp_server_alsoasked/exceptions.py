"""Custom exceptions for the AlsoAsked MCP server."""


class AlsoAskedError(Exception):
    """Base exception for AlsoAsked MCP server errors."""

    pass


class ArgumentValidationError(AlsoAskedError):
    """Raised when tool-call arguments are missing or malformed."""

    pass


class APIHTTPError(AlsoAskedError):
    """Raised when the AlsoAsked API answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"AlsoAsked API error: {status_code} {reason} - {body}")


class APIConnectionError(AlsoAskedError):
    """Raised when the AlsoAsked API cannot be reached or times out."""

    pass


class APIResponseError(AlsoAskedError):
    """Raised when a successful HTTP response carries a failed or unreadable payload."""

    pass
