"""Broadcast lifecycle service."""

from loguru import logger

from ig_live.services.session.session_client import SessionClient
from ig_live.utils.errors import BroadcastError, BroadcastErrorCode
from ig_live.utils.logs import format_error

from ._end import EndBroadcastOperations
from ._start import StartBroadcastOperations
from .broadcast_models import BroadcastFailure, EndBroadcastResult, StartBroadcastResult


class BroadcastService:
    """Start and end live broadcasts on an authenticated session.

    Stateless: the session is passed to every call and nothing is remembered
    between calls. Not safe to start twice concurrently on one session.
    Neither method raises; failures come back as BroadcastFailure.
    """

    def __init__(self):
        self._start = StartBroadcastOperations()
        self._end = EndBroadcastOperations()

    def start_broadcast(self, session: SessionClient) -> StartBroadcastResult:
        """Create and start a broadcast, returning its RTMP ingest URI."""
        try:
            return self._start.start_broadcast(session)
        except Exception as exc:
            return self._internal_failure("start_broadcast", exc)

    def end_broadcast(self, session: SessionClient, broadcast_id: str) -> EndBroadcastResult:
        """End a broadcast, possibly one started by another process."""
        try:
            return self._end.end_broadcast(session, broadcast_id)
        except Exception as exc:
            return self._internal_failure("end_broadcast", exc, broadcast_id=broadcast_id)

    @staticmethod
    def _internal_failure(
        operation: str, exc: Exception, *, broadcast_id: str | None = None
    ) -> BroadcastFailure:
        err = BroadcastError(
            f"Unexpected error in {operation}",
            errcode=BroadcastErrorCode.E_INTERNAL_ERROR,
            cause=exc,
        )
        logger.error(f"{err.errcode} {err.erresid} caller={err.caller_info}\n{format_error(exc)}")
        return BroadcastFailure.from_error(
            err, broadcast_id=str(broadcast_id) if broadcast_id is not None else None
        )
