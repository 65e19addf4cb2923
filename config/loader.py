"""Configuration loader for the Copilot client

Loads configuration from multiple sources with the following priority:
1. Environment variables (highest priority)
2. .env file
3. Hardcoded defaults (lowest priority)
"""

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional
from dotenv import load_dotenv

# Set up logger for config loader
logger = logging.getLogger(__name__)

_TRUE_VALUES = ('true', '1', 'yes', 'on')


class ConfigLoader:
    """Resolves typed configuration values from the environment"""

    def __init__(self, env_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None):
        """Initialize the config loader

        Args:
            env_path: Optional path to .env file.
                     Defaults to '.env' in the current directory.
            environ: Mapping to read values from. Defaults to os.environ,
                     which is also where the .env file is loaded into.
        """
        self.env_path = Path(env_path) if env_path else Path(".env")
        self._environ = environ
        if environ is None:
            self._load_env_file()

    def _load_env_file(self):
        """Load environment variables from .env file if it exists"""
        if self.env_path.exists():
            # Real environment variables keep precedence over the file
            load_dotenv(dotenv_path=self.env_path, override=False)
            logger.debug(f"Loaded environment variables from {self.env_path}")
        else:
            logger.debug(f".env file not found at {self.env_path}, using environment variables and defaults only")

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def get(self, env_var: str, default: Any) -> Any:
        """Get a configuration value with priority: env > default

        The raw string is coerced to the type of ``default`` (bool, int or
        float). Unparseable numbers fall back to the default with a warning.

        Args:
            env_var: Environment variable name to check
            default: Default value if not found in environment

        Returns:
            The configuration value from environment or default
        """
        env_value = self.environ.get(env_var)
        if env_value is None:
            return default

        # bool is a subclass of int, so it has to be checked first
        if isinstance(default, bool):
            return env_value.strip().lower() in _TRUE_VALUES
        if isinstance(default, int):
            try:
                return int(env_value)
            except ValueError:
                logger.warning(f"Failed to parse {env_var}={env_value} as int, using default: {default}")
                return default
        if isinstance(default, float):
            try:
                return float(env_value)
            except ValueError:
                logger.warning(f"Failed to parse {env_var}={env_value} as float, using default: {default}")
                return default
        return env_value


# Create a global instance
_config_loader = None

def get_config_loader() -> ConfigLoader:
    """Get or create the global ConfigLoader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader
