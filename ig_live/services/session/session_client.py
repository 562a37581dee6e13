from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ig_live.services.broadcast.broadcast_schemas import PlatformRequest, ResponseT


class SessionClientError(Exception):
    """Base error raised by a session client."""


class AuthError(SessionClientError):
    """The session is not authenticated or the CSRF token is unavailable."""


class TransportError(SessionClientError):
    """The request never produced an HTTP response (DNS, connect, timeout...)."""


class PlatformError(SessionClientError):
    """The platform answered, but not with a usable result."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


@runtime_checkable
class SessionClient(Protocol):
    """Authenticated platform session used by the broadcast lifecycle.

    The session owns the device id, the user id and the CSRF token cache.
    Lifecycle operations only read from it and ask it to run requests.
    """

    @property
    def device_id(self) -> str: ...

    @property
    def user_id(self) -> int: ...

    def fetch_or_get_csrf_token(self) -> str:
        """Return the cached CSRF token, fetching it first if needed.

        Raises AuthError when no token can be obtained.
        """
        ...

    def execute(self, request: PlatformRequest[ResponseT]) -> ResponseT | None:
        """Send one request and return its validated response.

        Raises TransportError or PlatformError.
        """
        ...
