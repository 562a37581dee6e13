"""Shared helpers for broadcast lifecycle operations."""

from loguru import logger

from ig_live.services.broadcast.broadcast_schemas import PlatformRequest, ResponseT
from ig_live.services.session.session_client import SessionClient
from ig_live.utils.errors import BroadcastErrorCode, RemoteExchangeError, TokenAcquisitionError
from ig_live.utils.logs import format_error


class BaseBroadcastOperations:
    """Token acquisition and the remote exchange boundary.

    Every platform call made by the lifecycle goes through ``_send``; nothing the
    session raises gets past it untyped.
    """

    def _acquire_token(self, session: SessionClient) -> str:
        """Ask the session for its CSRF token. Never cached here.

        Raises:
            TokenAcquisitionError: If the session fails or returns an empty token
        """
        try:
            token = session.fetch_or_get_csrf_token()
        except Exception as exc:
            logger.debug(format_error(exc))
            raise TokenAcquisitionError("Error occurred during request for CSRF token", cause=exc) from exc

        if not token:
            raise TokenAcquisitionError("Session returned an empty CSRF token")
        return token

    def _send(
        self,
        session: SessionClient,
        request: PlatformRequest[ResponseT],
        *,
        operation: str,
        errcode: BroadcastErrorCode = BroadcastErrorCode.E_REMOTE_EXCHANGE,
    ) -> ResponseT:
        """Execute one request through the session.

        Raises:
            RemoteExchangeError: If the session raised or produced no result
        """
        logger.debug(f"{operation}: sending {request!r}")
        try:
            result = session.execute(request)
        except Exception as exc:
            err = RemoteExchangeError(
                f"Error occurred during {operation} request",
                errcode=errcode,
                cause=exc,
            )
            logger.warning(f"{err.errcode} {err.erresid} {operation} failed: {exc!s}")
            logger.debug(format_error(exc))
            raise err from exc

        if result is None:
            err = RemoteExchangeError(f"{operation} request returned no result", errcode=errcode)
            logger.warning(f"{err.errcode} {err.erresid} {operation} returned no result")
            raise err

        return result
