"""Header construction for token exchange and Copilot API requests"""

import re
from typing import Dict

from utils.errors import HeaderConstructionError
from .constants import (
    ACCEPT,
    ACCEPT_JSON,
    AUTHORIZATION,
    COPILOT_INTEGRATION_ID,
    COPILOT_INTEGRATION_ID_HEADER,
    EDITOR_PLUGIN_VERSION,
    EDITOR_PLUGIN_VERSION_HEADER,
    EDITOR_VERSION,
    USER_AGENT,
    USER_AGENT_HEADER,
)

# Visible ASCII, space and horizontal tab
_VALID_HEADER_VALUE = re.compile(r"[\x20-\x7e\t]*")


def validate_header_value(name: str, value: str) -> str:
    """Return value unchanged, or raise if it cannot be sent as a header

    Raises:
        HeaderConstructionError: If value holds control characters,
            line breaks or non-ASCII characters
    """
    if not isinstance(value, str) or not _VALID_HEADER_VALUE.fullmatch(value):
        raise HeaderConstructionError(name)
    return value


def _validated(headers: Dict[str, str]) -> Dict[str, str]:
    for name, value in headers.items():
        validate_header_value(name, value)
    return headers


def build_token_exchange_headers(identity_token: str) -> Dict[str, str]:
    """Build headers for the identity token -> session token exchange

    Args:
        identity_token: Long-lived GitHub OAuth token

    Returns:
        Dictionary of HTTP headers
    """
    return _validated({
        AUTHORIZATION: f"Token {identity_token}",
        USER_AGENT_HEADER: USER_AGENT,
        ACCEPT: ACCEPT_JSON,
    })


def build_api_headers(session_token: str, editor_version: str) -> Dict[str, str]:
    """Build the header set every Copilot API call requires

    Args:
        session_token: Short-lived Copilot session token
        editor_version: Client identification string, e.g. "Neovim/0.9.0"

    Returns:
        Dictionary of HTTP headers
    """
    return _validated({
        AUTHORIZATION: f"Bearer {session_token}",
        EDITOR_VERSION: editor_version,
        EDITOR_PLUGIN_VERSION_HEADER: EDITOR_PLUGIN_VERSION,
        COPILOT_INTEGRATION_ID_HEADER: COPILOT_INTEGRATION_ID,
        USER_AGENT_HEADER: USER_AGENT,
        ACCEPT: ACCEPT_JSON,
    })
