"""Small helpers shared by the server and CLI."""


def mask_api_key(api_key: str | None, visible: int = 4) -> str:
    """Render an API key for logs without revealing it.

    Short keys are fully hidden so the prefix never amounts to the whole key.
    """
    if not api_key:
        return "(not set)"
    if len(api_key) <= visible * 2:
        return "***"
    return f"{api_key[:visible]}***"
