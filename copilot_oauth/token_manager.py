"""Session token manager for retrieving Copilot session tokens"""

import hashlib
import logging
import time
from typing import Callable, Dict, Optional

import httpx

from settings import CACHE_SESSION_TOKEN, TOKEN_EXPIRY_SKEW
from .models import SessionToken
from .token_exchange import exchange_identity_token

logger = logging.getLogger(__name__)


def _cache_key(identity_token: str) -> str:
    return hashlib.sha256(identity_token.encode("utf-8")).hexdigest()


class SessionTokenManager:
    """Hands out session tokens for an identity token

    By default every call performs a fresh exchange and the returned
    expires_at is not consulted. With cache_enabled the token is kept per
    identity token (keyed by its SHA-256 digest) until it is within
    expiry_skew seconds of expires_at.
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        cache_enabled: Optional[bool] = None,
        expiry_skew: Optional[int] = None,
        timeout: Optional[httpx.Timeout] = None,
        clock: Callable[[], float] = time.time
    ):
        """Initialize the manager

        Args:
            transport: Optional httpx transport for the exchange request
            cache_enabled: Reuse unexpired tokens (default from settings)
            expiry_skew: Seconds before expiry a cached token is dropped
            timeout: Optional request timeout for the exchange
            clock: Time source returning epoch seconds
        """
        self.transport = transport
        self.cache_enabled = CACHE_SESSION_TOKEN if cache_enabled is None else cache_enabled
        self.expiry_skew = TOKEN_EXPIRY_SKEW if expiry_skew is None else expiry_skew
        self.timeout = timeout
        self._clock = clock
        self._cache: Dict[str, SessionToken] = {}

    async def get_session_token(self, identity_token: str) -> SessionToken:
        """Get a session token for API requests

        Args:
            identity_token: Long-lived GitHub OAuth token

        Returns:
            A SessionToken, cached or freshly exchanged
        """
        if not self.cache_enabled:
            return await self._exchange(identity_token)

        key = _cache_key(identity_token)
        cached = self._cache.get(key)
        if cached and not cached.is_expired(self.expiry_skew, now=self._clock()):
            logger.debug("Using cached Copilot session token")
            return cached

        if cached:
            logger.info("Cached Copilot session token expired, exchanging again...")
            del self._cache[key]

        session_token = await self._exchange(identity_token)
        self._cache[key] = session_token
        return session_token

    async def _exchange(self, identity_token: str) -> SessionToken:
        return await exchange_identity_token(
            identity_token,
            transport=self.transport,
            timeout=self.timeout
        )

    def clear(self) -> None:
        """Drop all cached session tokens"""
        self._cache.clear()

    @property
    def cached_count(self) -> int:
        return len(self._cache)
