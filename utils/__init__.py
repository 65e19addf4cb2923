"""Shared utilities package for the Copilot client"""

from .errors import (
    CopilotError,
    ConfigDirectoryNotFound,
    CredentialNotFound,
    UpstreamError,
    UpstreamAuthError,
    UpstreamRequestError,
    DecodeError,
    ModelNotFound,
    HeaderConstructionError,
)
from .logging_utils import mask_token, redact_headers, setup_logging
from .debug_console import (
    DebugCapturingConsole,
    create_debug_console,
    setup_debug_logger,
)

__all__ = [
    "CopilotError",
    "ConfigDirectoryNotFound",
    "CredentialNotFound",
    "UpstreamError",
    "UpstreamAuthError",
    "UpstreamRequestError",
    "DecodeError",
    "ModelNotFound",
    "HeaderConstructionError",
    "mask_token",
    "redact_headers",
    "setup_logging",
    "DebugCapturingConsole",
    "create_debug_console",
    "setup_debug_logger",
]
