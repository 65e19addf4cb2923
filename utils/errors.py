"""Exception hierarchy for the Copilot client

Every failure surfaced by the library is one of these types, so callers can
branch on the kind of error (and its attributes) instead of message text.
None of them ever carries the GitHub identity token.
"""

from typing import Optional


class CopilotError(Exception):
    """Base class for all Copilot client errors"""


class ConfigDirectoryNotFound(CopilotError):
    """No configuration root could be determined from the environment"""

    def __init__(self, message: str = "Failed to find config directory"):
        super().__init__(message)


class CredentialNotFound(CopilotError):
    """No GitHub identity token was found in the environment or config files"""

    def __init__(self, message: str = "Failed to find GitHub token"):
        super().__init__(message)


class UpstreamError(CopilotError):
    """A remote endpoint answered with a non-success status

    Attributes:
        status_code: HTTP status returned by the endpoint
        body: Raw response body
    """

    label = "Upstream request failed"

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"{self.label}: {status_code} - {body}")


class UpstreamAuthError(UpstreamError):
    """The session token exchange was rejected"""

    label = "Token exchange failed"


class UpstreamRequestError(UpstreamError):
    """A Copilot API call was rejected"""

    label = "Copilot API request failed"


class DecodeError(CopilotError):
    """A response or config file was not valid JSON or did not match the schema

    Attributes:
        cause: The underlying parsing/validation exception
    """

    def __init__(self, cause: Exception, source: Optional[str] = None):
        self.cause = cause
        self.source = source
        where = f" from {source}" if source else ""
        super().__init__(f"Failed to decode response{where}: {cause}")


class ModelNotFound(CopilotError):
    """The requested model id is not in the pre-fetched model catalog"""

    def __init__(self, requested_id: str):
        self.requested_id = requested_id
        super().__init__(f"Model '{requested_id}' not found in the available model list")


class HeaderConstructionError(CopilotError):
    """A header value contains characters that are not valid in HTTP headers

    Only the header name is reported; the value may be a secret.
    """

    def __init__(self, header: str):
        self.header = header
        super().__init__(f"Invalid characters in value for header '{header}'")
