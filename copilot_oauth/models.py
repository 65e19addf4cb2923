"""Data models for Copilot session tokens"""

import time
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel


class CopilotTokenResponse(BaseModel):
    """Body of GET /copilot_internal/v2/token"""
    token: str
    expires_at: int  # Unix timestamp


@dataclass(frozen=True)
class SessionToken:
    """Short-lived token authorizing Copilot API calls

    Attributes:
        token: Bearer token sent to api.githubcopilot.com
        expires_at: Expiry instant in epoch seconds
    """
    token: str
    expires_at: int

    def is_expired(self, skew: int = 0, now: Optional[float] = None) -> bool:
        """Check whether the token is expired, or will be within skew seconds"""
        current_time = time.time() if now is None else now
        return current_time >= (self.expires_at - skew)

    def __repr__(self) -> str:
        # Keep the secret out of logs and tracebacks
        return f"SessionToken(token=<redacted>, expires_at={self.expires_at})"
