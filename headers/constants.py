"""HTTP Request Headers and Client Identification Constants

The Copilot API only serves clients that identify as a known editor plugin,
so these values mirror the ones CopilotChat.nvim sends.
"""

# User-Agent string for both the token exchange and API requests
USER_AGENT = "CopilotChat.nvim"

# Editor-Plugin-Version header value
EDITOR_PLUGIN_VERSION = "CopilotChat.nvim/*"

# Copilot-Integration-Id header value
COPILOT_INTEGRATION_ID = "vscode-chat"

# Accept header value (no streaming, JSON only)
ACCEPT_JSON = "application/json"

# Header names
AUTHORIZATION = "Authorization"
EDITOR_VERSION = "Editor-Version"
EDITOR_PLUGIN_VERSION_HEADER = "Editor-Plugin-Version"
COPILOT_INTEGRATION_ID_HEADER = "Copilot-Integration-Id"
USER_AGENT_HEADER = "User-Agent"
ACCEPT = "Accept"
