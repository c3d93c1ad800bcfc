"""
Authentication helpers for the Sketchfab API.

Builds the token header for catalog calls and redacts keys for logging.
"""

from typing import Dict

MISSING_API_KEY_MESSAGE = (
    "No Sketchfab API key provided. Please provide an API key using the --api-key "
    "parameter or set the SKETCHFAB_API_KEY environment variable."
)


def auth_headers(api_key: str) -> Dict[str, str]:
    """
    Build the Authorization header for Sketchfab catalog endpoints.

    Signed download URLs must not carry this header.
    """
    return {"Authorization": f"Token {api_key}"}


def redact_token(token: str, show_chars: int = 4) -> str:
    """
    Redact API token for safe logging.

    Args:
        token: API token to redact
        show_chars: Number of characters to show at start/end

    Returns:
        Redacted token string
    """
    if len(token) <= show_chars * 2:
        return "*" * len(token)

    return f"{token[:show_chars]}...{token[-show_chars:]}"
