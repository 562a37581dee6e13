"""Broadcast start operations."""

from loguru import logger

from ig_live.services.broadcast.broadcast_schemas import (
    CreateBroadcastPayload,
    CreateBroadcastRequest,
    StartBroadcastPayload,
    StartBroadcastRequest,
)
from ig_live.services.session.session_client import SessionClient
from ig_live.utils.errors import (
    BroadcastErrorCode,
    RemoteExchangeError,
    TokenAcquisitionError,
    URLTransformError,
)

from ._base import BaseBroadcastOperations
from ._ingest import to_ingest_uri
from .broadcast_models import BroadcastFailure, IngestReady, StartBroadcastResult


def build_create_request(device_id: str, csrf_token: str) -> CreateBroadcastRequest:
    return CreateBroadcastRequest(
        CreateBroadcastPayload(device_id=device_id, csrf_token=csrf_token)
    )


def build_start_request(device_id: str, csrf_token: str, broadcast_id: str) -> StartBroadcastRequest:
    return StartBroadcastRequest(
        StartBroadcastPayload(device_id=device_id, csrf_token=csrf_token),
        broadcast_id=broadcast_id,
    )


class StartBroadcastOperations(BaseBroadcastOperations):
    """Operations for going live."""

    def start_broadcast(self, session: SessionClient) -> StartBroadcastResult:
        """Create a broadcast, ask the platform to start it, return the ingest URI.

        Token and create failures abort before anything else is sent. A failed
        live/start/ call is logged and tolerated: the result still carries the
        ingest URI with ``start_confirmed=False``.

        A failure returned after the create step carries ``broadcast_id``; the
        broadcast exists on the platform and ending it is up to the caller.

        Args:
            session: Authenticated session used for every call

        Returns:
            IngestReady on success, BroadcastFailure otherwise
        """
        try:
            csrf_token = self._acquire_token(session)
        except TokenAcquisitionError as err:
            logger.error(f"{err.errcode} {err.erresid} start aborted: {err!s}")
            return BroadcastFailure.from_error(err)

        device_id = session.device_id

        try:
            created = self._send(
                session,
                build_create_request(device_id, csrf_token),
                operation="create_broadcast",
                errcode=BroadcastErrorCode.E_CREATE_BROADCAST,
            )
        except RemoteExchangeError as err:
            logger.error(f"{err.errcode} {err.erresid} start aborted, broadcast not created")
            return BroadcastFailure.from_error(err)

        broadcast_id = created.broadcast_id
        logger.info(f"Created broadcast {broadcast_id}")
        logger.debug(f"Broadcast {broadcast_id} upload_url={created.upload_url}")

        start_confirmed = True
        try:
            self._send(
                session,
                build_start_request(device_id, csrf_token, broadcast_id),
                operation="start_broadcast",
                errcode=BroadcastErrorCode.E_START_BROADCAST,
            )
        except RemoteExchangeError as err:
            # The platform may already be ingesting, keep going
            start_confirmed = False
            logger.warning(
                f"{err.errcode} {err.erresid} start of broadcast {broadcast_id} not confirmed, "
                "returning ingest URI anyway"
            )

        try:
            ingest_uri = to_ingest_uri(created.upload_url)
        except URLTransformError as err:
            logger.error(
                f"{err.errcode} {err.erresid} Error occurred while updating RTMP URL "
                f"for broadcast {broadcast_id}: {err!s}"
            )
            return BroadcastFailure.from_error(err, broadcast_id=broadcast_id)

        logger.info(f"Broadcast {broadcast_id} ready for ingest (start_confirmed={start_confirmed})")
        return IngestReady(
            broadcast_id=broadcast_id,
            upload_url=created.upload_url,
            ingest_uri=ingest_uri,
            start_confirmed=start_confirmed,
        )
