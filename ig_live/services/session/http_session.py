"""httpx-backed session client.

Wraps an already authenticated cookie jar. Logging in and request signing are
the host application's job; this client only keeps the cookies, fetches the
CSRF token when the jar does not hold one yet, and turns platform answers into
validated response models or typed errors.
"""

from __future__ import annotations

import uuid

import httpx
import orjson
from loguru import logger
from pydantic import ValidationError

from ig_live.config import config
from ig_live.services.broadcast.broadcast_schemas import PlatformRequest, ResponseT

from .session_client import AuthError, PlatformError, TransportError

DEFAULT_USER_AGENT = (
    "Instagram 10.26.0 Android (18/4.3; 320dpi; 720x1280; Xiaomi; HM 1SW; armani; qcom; en_US)"
)
CSRF_COOKIE = "csrftoken"
SESSION_COOKIE = "sessionid"
FETCH_HEADERS_PATH = "si/fetch_headers/"


class HttpSessionClient:
    def __init__(
        self,
        *,
        device_id: str,
        user_id: int | str,
        session_id: str | None = None,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._device_id = device_id
        self._user_id = int(user_id)
        self._client = httpx.Client(
            base_url=base_url or config.get_api_base_url(),
            headers={"User-Agent": user_agent or config.get("IG_USER_AGENT") or DEFAULT_USER_AGENT},
            timeout=timeout if timeout is not None else config.get_http_timeout(),
            transport=transport,
        )
        if session_id:
            self._client.cookies.set(SESSION_COOKIE, session_id)

    @classmethod
    def from_config(cls, **kwargs) -> HttpSessionClient:
        """Build a client from IG_SESSION_ID / IG_DEVICE_ID / IG_USER_ID."""
        user_id = config.get("IG_USER_ID")
        if not user_id:
            raise KeyError("Configuration key 'IG_USER_ID' not found")

        device_id = config.get("IG_DEVICE_ID")
        if not device_id:
            device_id = str(uuid.uuid4())
            logger.info(f"IG_DEVICE_ID not configured, generated device id {device_id}")

        return cls(
            device_id=device_id,
            user_id=user_id,
            session_id=config.get("IG_SESSION_ID"),
            **kwargs,
        )

    @property
    def device_id(self) -> str:
        return self._device_id

    @property
    def user_id(self) -> int:
        return self._user_id

    def _csrf_cookie(self) -> str | None:
        try:
            return self._client.cookies.get(CSRF_COOKIE)
        except httpx.CookieConflict as exc:
            raise AuthError(f"Ambiguous {CSRF_COOKIE} cookie in session: {exc}") from exc

    def fetch_or_get_csrf_token(self) -> str:
        token = self._csrf_cookie()
        if token:
            return token

        logger.debug("No CSRF cookie in session, fetching headers")
        try:
            response = self._client.get(
                FETCH_HEADERS_PATH,
                params={"challenge_type": "signup", "guid": self._device_id.replace("-", "")},
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise AuthError(f"Failed to fetch CSRF token: {exc}") from exc

        token = response.cookies.get(CSRF_COOKIE) or self._csrf_cookie()
        if not token:
            raise AuthError(f"Platform did not set a {CSRF_COOKIE} cookie")
        return token

    def execute(self, request: PlatformRequest[ResponseT]) -> ResponseT | None:
        logger.debug(f"{request.method} {request.path}")
        try:
            response = self._client.request(request.method, request.path, data=request.form())
        except httpx.RequestError as exc:
            raise TransportError(f"{request.method} {request.path} failed: {exc}") from exc

        if response.status_code in (401, 403):
            raise AuthError(f"{request.path} rejected the session (HTTP {response.status_code})")

        try:
            data = orjson.loads(response.content) if response.content else None
        except orjson.JSONDecodeError as exc:
            raise PlatformError(
                f"{request.path} returned a non-JSON body (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from exc

        if not response.is_success or not isinstance(data, dict) or data.get("status") != "ok":
            message = data.get("message") if isinstance(data, dict) else None
            raise PlatformError(
                f"{request.path} failed (HTTP {response.status_code}): {message or 'no message'}",
                status_code=response.status_code,
            )

        try:
            return request.parse_response(data)
        except ValidationError as exc:
            raise PlatformError(
                f"{request.path} returned an unexpected body: {exc.error_count()} validation error(s)",
                status_code=response.status_code,
            ) from exc

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpSessionClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
