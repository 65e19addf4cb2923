"""
Pydantic models for the Copilot API wire format.
"""
from typing import List, Optional
from pydantic import BaseModel


class Agent(BaseModel):
    """Entry of GET /agents"""
    id: str
    name: str
    description: Optional[str] = None


class AgentsResponse(BaseModel):
    agents: List[Agent]


class Model(BaseModel):
    """Entry of GET /models"""
    id: str
    name: str
    version: Optional[str] = None
    tokenizer: Optional[str] = None
    max_input_tokens: Optional[int] = None
    max_output_tokens: Optional[int] = None


class ModelsResponse(BaseModel):
    data: List[Model]


class Message(BaseModel):
    """Chat message (role is "system", "user", "assistant", ...)"""
    role: str
    content: str


class ChatRequest(BaseModel):
    """POST /chat/completions body"""
    model: str
    messages: List[Message]
    n: int
    top_p: float
    stream: bool
    temperature: float
    max_tokens: Optional[int] = None  # Omitted from the body when not set


class TokenUsage(BaseModel):
    total_tokens: int


class ChatChoice(BaseModel):
    message: Message
    finish_reason: Optional[str] = None
    usage: Optional[TokenUsage] = None


class ChatResponse(BaseModel):
    choices: List[ChatChoice]


class EmbeddingRequest(BaseModel):
    """POST /embeddings body"""
    dimensions: int
    input: List[str]
    model: str


class Embedding(BaseModel):
    index: int
    embedding: List[float]


class EmbeddingResponse(BaseModel):
    data: List[Embedding]
