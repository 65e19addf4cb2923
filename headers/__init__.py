"""HTTP headers and constants package for the Copilot client"""

from .constants import (
    USER_AGENT,
    EDITOR_PLUGIN_VERSION,
    COPILOT_INTEGRATION_ID,
    ACCEPT_JSON,
)
from .builder import (
    build_api_headers,
    build_token_exchange_headers,
    validate_header_value,
)

__all__ = [
    "USER_AGENT",
    "EDITOR_PLUGIN_VERSION",
    "COPILOT_INTEGRATION_ID",
    "ACCEPT_JSON",
    "build_api_headers",
    "build_token_exchange_headers",
    "validate_header_value",
]
