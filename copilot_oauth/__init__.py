"""GitHub Copilot authentication package

Resolves the long-lived GitHub identity token and exchanges it for the
short-lived session token the Copilot API accepts.
"""

from .models import CopilotTokenResponse, SessionToken
from .credentials import (
    CredentialProvider,
    CredentialResolver,
    EnvironmentCredentialProvider,
    ConfigFileCredentialProvider,
    default_providers,
    get_config_path,
    get_github_token,
    read_oauth_token,
)
from .token_exchange import exchange_identity_token
from .token_manager import SessionTokenManager

__all__ = [
    "CopilotTokenResponse",
    "SessionToken",
    "CredentialProvider",
    "CredentialResolver",
    "EnvironmentCredentialProvider",
    "ConfigFileCredentialProvider",
    "default_providers",
    "get_config_path",
    "get_github_token",
    "read_oauth_token",
    "exchange_identity_token",
    "SessionTokenManager",
]
