from config.loader import get_config_loader

# Get the config loader instance
config = get_config_loader()

# Logging configuration
LOG_LEVEL = config.get("COPILOT_LOG_LEVEL", "info")

# Client identification sent as Editor-Version on every API call
EDITOR_VERSION = config.get("COPILOT_EDITOR_VERSION", "Neovim/0.9.0")
DEFAULT_CHAT_MODEL = config.get("COPILOT_DEFAULT_MODEL", "gpt-4o")

# Timeout configuration
# Connection timeout: Time to establish TCP connection
CONNECT_TIMEOUT = config.get("COPILOT_CONNECT_TIMEOUT", 10.0)
# Request timeout: Total timeout for a single API call
REQUEST_TIMEOUT = config.get("COPILOT_REQUEST_TIMEOUT", 60.0)

# Session token caching (off by default: every header build re-exchanges)
CACHE_SESSION_TOKEN = config.get("COPILOT_CACHE_SESSION_TOKEN", False)
# Seconds before expires_at at which a cached session token is treated as stale
TOKEN_EXPIRY_SKEW = config.get("COPILOT_TOKEN_EXPIRY_SKEW", 60)

# GitHub token exchange (hardcoded - not user configurable)
GITHUB_API_BASE = "https://api.github.com"
TOKEN_EXCHANGE_URL = f"{GITHUB_API_BASE}/copilot_internal/v2/token"

# Copilot API endpoints (hardcoded - not user configurable)
COPILOT_API_BASE = "https://api.githubcopilot.com"
AGENTS_URL = f"{COPILOT_API_BASE}/agents"
MODELS_URL = f"{COPILOT_API_BASE}/models"
CHAT_COMPLETIONS_URL = f"{COPILOT_API_BASE}/chat/completions"
EMBEDDINGS_URL = f"{COPILOT_API_BASE}/embeddings"

# Embedding parameters (hardcoded)
EMBEDDING_MODEL = "text-embedding-3-small"
EMBEDDING_DIMENSIONS = 512

# Chat sampling parameters (hardcoded)
CHAT_N = 1
CHAT_TOP_P = 1.0
CHAT_TEMPERATURE = 0.5

# Credential discovery environment variables
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"
MANAGED_ENV_MARKER = "CODESPACES"
