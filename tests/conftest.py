"""Shared test fixtures for the Copilot client."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from copilot_api import CopilotClient
from settings import TOKEN_EXCHANGE_URL

IDENTITY_TOKEN = "gho_identity_secret"
SESSION_TOKEN = "abc"
SESSION_EXPIRES_AT = 4_102_444_800  # 2100-01-01


class StubCopilotAPI:
    """In-memory Copilot/GitHub endpoints served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.add("GET", TOKEN_EXCHANGE_URL, 200, {"token": SESSION_TOKEN, "expires_at": SESSION_EXPIRES_AT})

    def add(self, method: str, url: str, status: int, body: Any) -> None:
        """Register a response; str bodies are sent raw, anything else as JSON."""
        self.routes[(method, url)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, str(request.url))
        if key not in self.routes:
            return httpx.Response(404, text=f"no route for {key}")
        status, body = self.routes[key]
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls_to(self, url: str) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url) == url]

    def json_body(self, url: str, index: int = -1) -> dict[str, Any]:
        return json.loads(self.calls_to(url)[index].content)


@pytest.fixture
def stub_api() -> StubCopilotAPI:
    return StubCopilotAPI()


@pytest.fixture
def client(stub_api: StubCopilotAPI) -> CopilotClient:
    return CopilotClient(IDENTITY_TOKEN, "Neovim/0.9.0", transport=stub_api.transport)
