"""
Copilot API client.

Every operation goes through :meth:`CopilotClient.execute`: mint a session
token, build the headers, send the request, require a 2xx status and decode
the body into a typed response.

Example:
    >>> client = await CopilotClient.from_env_with_models("Neovim/0.9.0")
    >>> response = await client.chat_completion(
    ...     [Message(role="user", content="Hello")], "gpt-4o"
    ... )
    >>> print(response.choices[0].message.content)
"""
import logging
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from copilot_oauth import CredentialResolver, SessionTokenManager
from copilot_oauth.token_exchange import default_timeout
from headers import build_api_headers
from settings import (
    AGENTS_URL,
    CHAT_COMPLETIONS_URL,
    CHAT_N,
    CHAT_TEMPERATURE,
    CHAT_TOP_P,
    EDITOR_VERSION,
    EMBEDDING_DIMENSIONS,
    EMBEDDING_MODEL,
    EMBEDDINGS_URL,
    MODELS_URL,
)
from utils.errors import DecodeError, ModelNotFound, UpstreamRequestError
from utils.logging_utils import redact_headers
from .models import (
    Agent,
    AgentsResponse,
    ChatRequest,
    ChatResponse,
    Embedding,
    EmbeddingRequest,
    EmbeddingResponse,
    Message,
    Model,
    ModelsResponse,
)

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)
MessageLike = Union[Message, Dict[str, str]]


class CopilotClient:
    """Client for the GitHub Copilot chat, model and embedding endpoints

    Attributes:
        editor_version: Value of the Editor-Version header
        models: Model catalog used to validate model ids, or None when the
            client was built without pre-fetching it
    """

    def __init__(
        self,
        github_token: str,
        editor_version: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        token_manager: Optional[SessionTokenManager] = None,
        timeout: Optional[httpx.Timeout] = None,
        models: Optional[List[Model]] = None
    ):
        """
        Args:
            github_token: Long-lived GitHub identity token
            editor_version: Editor identification (default from settings)
            transport: Optional httpx transport shared by all requests
            token_manager: Session token source (default: fresh exchange per call)
            timeout: Optional request timeout
            models: Pre-fetched model catalog enabling local model id checks
        """
        self._github_token = github_token
        self.editor_version = editor_version or EDITOR_VERSION
        self.transport = transport
        self.timeout = timeout or default_timeout()
        self.token_manager = token_manager or SessionTokenManager(
            transport=transport,
            timeout=self.timeout
        )
        self.models = models

    @classmethod
    def from_env(
        cls,
        editor_version: Optional[str] = None,
        resolver: Optional[CredentialResolver] = None,
        **kwargs: Any
    ) -> "CopilotClient":
        """Build a client with the identity token from the environment or config files

        Raises:
            CredentialNotFound: If no token can be found
            ConfigDirectoryNotFound: If the config root cannot be determined
        """
        github_token = (resolver or CredentialResolver()).resolve()
        return cls(github_token, editor_version, **kwargs)

    @classmethod
    async def from_env_with_models(
        cls,
        editor_version: Optional[str] = None,
        resolver: Optional[CredentialResolver] = None,
        **kwargs: Any
    ) -> "CopilotClient":
        """Like from_env, then pre-fetch the model catalog for id validation"""
        client = cls.from_env(editor_version, resolver, **kwargs)
        await client.fetch_models()
        return client

    def __repr__(self) -> str:
        return f"CopilotClient(editor_version={self.editor_version!r}, models_loaded={self.models is not None})"

    async def get_headers(self) -> Dict[str, str]:
        """Exchange for a session token and build the API header set"""
        session_token = await self.token_manager.get_session_token(self._github_token)
        return build_api_headers(session_token.token, self.editor_version)

    async def execute(
        self,
        method: str,
        url: str,
        response_model: Type[ResponseT],
        body: Optional[BaseModel] = None
    ) -> ResponseT:
        """Send one API request and decode the response

        Args:
            method: HTTP method
            url: Absolute endpoint URL
            response_model: Pydantic model the body must match
            body: Optional request model, sent as JSON without null fields

        Returns:
            The decoded response

        Raises:
            UpstreamAuthError: If the session token exchange fails
            UpstreamRequestError: If the endpoint answers with a non-2xx status
            DecodeError: If the body does not match response_model
        """
        headers = await self.get_headers()
        payload = body.model_dump(exclude_none=True) if body is not None else None

        logger.debug(f"{method} {url} headers={redact_headers(headers)}")
        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            response = await client.request(method, url, headers=headers, json=payload)

        if not response.is_success:
            logger.error(f"{method} {url} failed with status {response.status_code}: {response.text}")
            raise UpstreamRequestError(response.status_code, response.text)

        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Unexpected response body from {url}: {e}")
            raise DecodeError(e, source=url) from e

    async def get_agents(self) -> List[Agent]:
        """GET /agents"""
        response = await self.execute("GET", AGENTS_URL, AgentsResponse)
        return response.agents

    async def get_models(self) -> List[Model]:
        """GET /models"""
        response = await self.execute("GET", MODELS_URL, ModelsResponse)
        return response.data

    async def fetch_models(self) -> List[Model]:
        """Fetch the model catalog and keep it for model id validation"""
        self.models = await self.get_models()
        logger.info(f"Loaded {len(self.models)} model(s): {[m.id for m in self.models]}")
        return self.models

    def check_model(self, model_id: str) -> None:
        """Raise ModelNotFound if a catalog is loaded and lacks model_id"""
        if self.models is None:
            return
        if not any(model.id == model_id for model in self.models):
            raise ModelNotFound(model_id)

    async def chat_completion(
        self,
        messages: Sequence[MessageLike],
        model_id: str,
        max_tokens: Optional[int] = None
    ) -> ChatResponse:
        """POST /chat/completions

        Args:
            messages: System, user and assistant messages in order
            model_id: Target model id
            max_tokens: Optional cap on generated tokens

        Raises:
            ModelNotFound: If the pre-fetched catalog lacks model_id
                (raised before any network call)
        """
        self.check_model(model_id)

        request_body = ChatRequest(
            model=model_id,
            messages=list(messages),
            n=CHAT_N,
            top_p=CHAT_TOP_P,
            stream=False,
            temperature=CHAT_TEMPERATURE,
            max_tokens=max_tokens,
        )
        return await self.execute("POST", CHAT_COMPLETIONS_URL, ChatResponse, request_body)

    async def ask(self, prompt: str, model_id: str) -> ChatResponse:
        """Send a single user prompt as a chat completion"""
        return await self.chat_completion([Message(role="user", content=prompt)], model_id)

    async def get_embeddings(self, inputs: Sequence[str]) -> List[Embedding]:
        """POST /embeddings

        Returns:
            One embedding per input, in input order
        """
        request_body = EmbeddingRequest(
            dimensions=EMBEDDING_DIMENSIONS,
            input=list(inputs),
            model=EMBEDDING_MODEL,
        )
        response = await self.execute("POST", EMBEDDINGS_URL, EmbeddingResponse, request_body)
        return sorted(response.data, key=lambda item: item.index)
