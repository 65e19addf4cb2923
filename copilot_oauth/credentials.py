"""GitHub identity token discovery

The identity token is the long-lived OAuth token that editor plugins store
after the user signs in to GitHub Copilot. It is looked up through an ordered
list of providers; the first one that yields a token wins.
"""

import json
import logging
import os
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Optional, Sequence

from settings import GITHUB_TOKEN_ENV, MANAGED_ENV_MARKER
from utils.errors import ConfigDirectoryNotFound, CredentialNotFound, DecodeError

logger = logging.getLogger(__name__)

COPILOT_CONFIG_DIR = "github-copilot"
TOKEN_FILES = ("hosts.json", "apps.json")
GITHUB_HOST_MARKER = "github.com"


def get_config_path(
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None
) -> Path:
    """Return the user's configuration root directory

    Order: $XDG_CONFIG_HOME, then %LOCALAPPDATA% on Windows, then
    $HOME/.config elsewhere. A set but empty $HOME yields "/.config".

    Raises:
        ConfigDirectoryNotFound: If none of the variables resolve
    """
    env = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform

    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)

    if platform.startswith("win"):
        local_app_data = env.get("LOCALAPPDATA")
        if local_app_data:
            return Path(local_app_data)
    else:
        home = env.get("HOME")
        if home is not None:
            return Path(f"{home}/.config")

    raise ConfigDirectoryNotFound()


def read_oauth_token(path: Path) -> Optional[str]:
    """Read the oauth_token of the first github.com entry in a Copilot config file

    Args:
        path: hosts.json or apps.json

    Returns:
        The token, or None if no github.com entry carries one

    Raises:
        DecodeError: If the file is not a UTF-8 JSON object
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(e, source=str(path)) from e

    if not isinstance(data, dict):
        raise DecodeError(ValueError(f"expected a JSON object, got {type(data).__name__}"), source=str(path))

    for key, value in data.items():
        if GITHUB_HOST_MARKER not in key or not isinstance(value, dict):
            continue
        oauth_token = value.get("oauth_token")
        if isinstance(oauth_token, str):
            return oauth_token

    return None


class CredentialProvider(ABC):
    """A single source of GitHub identity tokens"""

    name = "credential provider"

    @abstractmethod
    def get_token(self) -> Optional[str]:
        """Return a token, or None to let the next provider try

        Raises:
            CopilotError: When the source exists but is unusable
        """
        pass


class EnvironmentCredentialProvider(CredentialProvider):
    """GITHUB_TOKEN, honoured only inside a GitHub Codespace"""

    name = "environment"

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        token_var: str = GITHUB_TOKEN_ENV,
        marker_var: str = MANAGED_ENV_MARKER
    ):
        self._environ = environ
        self.token_var = token_var
        self.marker_var = marker_var

    def get_token(self) -> Optional[str]:
        env = os.environ if self._environ is None else self._environ
        token = env.get(self.token_var)
        if token is not None and self.marker_var in env:
            return token
        return None


class ConfigFileCredentialProvider(CredentialProvider):
    """Token files written by the Copilot editor plugins

    Only the first candidate file that exists is read, even if it holds no
    usable token.
    """

    name = "config file"

    def __init__(
        self,
        config_root: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
        platform: Optional[str] = None,
        filenames: Sequence[str] = TOKEN_FILES
    ):
        self.config_root = Path(config_root) if config_root else None
        self._environ = environ
        self._platform = platform
        self.filenames = tuple(filenames)

    def candidate_paths(self) -> list[Path]:
        root = self.config_root or get_config_path(self._environ, self._platform)
        directory = root / COPILOT_CONFIG_DIR
        return [directory / filename for filename in self.filenames]

    def get_token(self) -> Optional[str]:
        for path in self.candidate_paths():
            if path.exists():
                logger.debug(f"Reading GitHub token from {path}")
                return read_oauth_token(path)
        logger.debug("No Copilot token file found")
        return None


def default_providers(
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None
) -> list[CredentialProvider]:
    """Providers in lookup order: environment first, then config files"""
    return [
        EnvironmentCredentialProvider(environ),
        ConfigFileCredentialProvider(environ=environ, platform=platform),
    ]


class CredentialResolver:
    """Walks credential providers in order and returns the first token found"""

    def __init__(self, providers: Optional[Sequence[CredentialProvider]] = None):
        self.providers = list(providers) if providers is not None else default_providers()

    def resolve(self) -> str:
        """
        Returns:
            The GitHub identity token

        Raises:
            CredentialNotFound: If no provider yields a token
            ConfigDirectoryNotFound: If the config root cannot be determined
            DecodeError: If a token file is malformed
        """
        for provider in self.providers:
            token = provider.get_token()
            if token is not None:
                logger.debug(f"GitHub token resolved from {provider.name}")
                return token

        raise CredentialNotFound()


def get_github_token(
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None
) -> str:
    """Resolve the GitHub identity token with the default providers"""
    return CredentialResolver(default_providers(environ, platform)).resolve()
