"""GitHub Copilot API client package"""

from .client import CopilotClient
from .models import (
    Agent,
    ChatChoice,
    ChatRequest,
    ChatResponse,
    Embedding,
    EmbeddingRequest,
    EmbeddingResponse,
    Message,
    Model,
    TokenUsage,
)

__all__ = [
    "CopilotClient",
    "Agent",
    "ChatChoice",
    "ChatRequest",
    "ChatResponse",
    "Embedding",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "Message",
    "Model",
    "TokenUsage",
]
