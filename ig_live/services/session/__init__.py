from .http_session import HttpSessionClient
from .session_client import (
    AuthError,
    PlatformError,
    SessionClient,
    SessionClientError,
    TransportError,
)

__all__ = [
    "AuthError",
    "HttpSessionClient",
    "PlatformError",
    "SessionClient",
    "SessionClientError",
    "TransportError",
]
