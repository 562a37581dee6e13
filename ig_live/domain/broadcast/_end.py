"""Broadcast ending operations."""

from loguru import logger

from ig_live.services.broadcast.broadcast_schemas import EndBroadcastPayload, EndBroadcastRequest
from ig_live.services.session.session_client import SessionClient
from ig_live.utils.errors import (
    BroadcastError,
    BroadcastErrorCode,
    RemoteExchangeError,
    TokenAcquisitionError,
)

from ._base import BaseBroadcastOperations
from .broadcast_models import BroadcastEnded, BroadcastFailure, EndBroadcastResult


def build_end_request(
    user_id: int, device_id: str, csrf_token: str, broadcast_id: str
) -> EndBroadcastRequest:
    return EndBroadcastRequest(
        EndBroadcastPayload(user_id=str(user_id), device_id=device_id, csrf_token=csrf_token),
        broadcast_id=broadcast_id,
    )


class EndBroadcastOperations(BaseBroadcastOperations):
    """Operations for ending broadcasts."""

    def end_broadcast(self, session: SessionClient, broadcast_id: str) -> EndBroadcastResult:
        """Ask the platform to end a broadcast. Fire and forget, never raises.

        The broadcast does not have to come from this process. There is no retry;
        the returned value only reports what happened.

        Args:
            session: Authenticated session
            broadcast_id: Platform id of the broadcast to end

        Returns:
            BroadcastEnded or BroadcastFailure
        """
        broadcast_id = str(broadcast_id).strip() if broadcast_id is not None else ""
        if not broadcast_id:
            err = BroadcastError("Broadcast id is required", errcode=BroadcastErrorCode.E_END_BROADCAST)
            logger.warning(f"{err.errcode} {err.erresid} end skipped: {err!s}")
            return BroadcastFailure.from_error(err)

        try:
            csrf_token = self._acquire_token(session)
        except TokenAcquisitionError as err:
            logger.warning(f"{err.errcode} {err.erresid} end of broadcast {broadcast_id} skipped: {err!s}")
            return BroadcastFailure.from_error(err, broadcast_id=broadcast_id)

        request = build_end_request(session.user_id, session.device_id, csrf_token, broadcast_id)
        try:
            self._send(
                session,
                request,
                operation="end_broadcast",
                errcode=BroadcastErrorCode.E_END_BROADCAST,
            )
        except RemoteExchangeError as err:
            return BroadcastFailure.from_error(err, broadcast_id=broadcast_id)

        logger.info(f"Ended broadcast {broadcast_id}")
        return BroadcastEnded(broadcast_id=broadcast_id)
