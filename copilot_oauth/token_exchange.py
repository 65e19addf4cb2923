"""Identity token -> Copilot session token exchange"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from headers import build_token_exchange_headers
from settings import CONNECT_TIMEOUT, REQUEST_TIMEOUT, TOKEN_EXCHANGE_URL
from utils.errors import DecodeError, UpstreamAuthError
from utils.logging_utils import mask_token
from .models import CopilotTokenResponse, SessionToken

logger = logging.getLogger(__name__)


def default_timeout() -> httpx.Timeout:
    return httpx.Timeout(REQUEST_TIMEOUT, connect=CONNECT_TIMEOUT)


async def exchange_identity_token(
    identity_token: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: Optional[httpx.Timeout] = None
) -> SessionToken:
    """Exchange a GitHub identity token for a Copilot session token

    Args:
        identity_token: Long-lived GitHub OAuth token
        transport: Optional httpx transport (tests inject a MockTransport)
        timeout: Optional request timeout

    Returns:
        The freshly minted SessionToken

    Raises:
        HeaderConstructionError: If the identity token is not header-safe
        UpstreamAuthError: If the endpoint answers with a non-2xx status
        DecodeError: If the response body is not {token, expires_at}
    """
    headers = build_token_exchange_headers(identity_token)

    logger.debug(f"Requesting Copilot session token from {TOKEN_EXCHANGE_URL}")
    async with httpx.AsyncClient(transport=transport, timeout=timeout or default_timeout()) as client:
        response = await client.get(TOKEN_EXCHANGE_URL, headers=headers)

    logger.debug(f"Token exchange response status: {response.status_code}")

    if not response.is_success:
        logger.error(f"Token exchange failed with status {response.status_code}")
        raise UpstreamAuthError(response.status_code, response.text)

    try:
        payload = CopilotTokenResponse.model_validate_json(response.content)
    except ValidationError as e:
        logger.error(f"Failed to parse token exchange response: {e}")
        raise DecodeError(e, source=TOKEN_EXCHANGE_URL) from e

    logger.info(f"Obtained Copilot session token {mask_token(payload.token)} (expires_at={payload.expires_at})")
    return SessionToken(token=payload.token, expires_at=payload.expires_at)
