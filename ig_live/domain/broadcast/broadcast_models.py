"""Result values returned by broadcast lifecycle operations."""

from typing import Literal

from pydantic import BaseModel, Field

from ig_live.utils.errors import BroadcastError


class IngestReady(BaseModel):
    """Start succeeded: the broadcaster can publish to ``ingest_uri``."""

    success: Literal[True] = True
    broadcast_id: str = Field(..., description="Platform id of the created broadcast")
    upload_url: str = Field(..., description="Upload URL as returned by live/create/")
    ingest_uri: str = Field(..., description="RTMP ingest URI derived from upload_url")
    start_confirmed: bool = Field(
        ...,
        description="False when live/start/ failed; the platform may still be publishing",
    )


class BroadcastEnded(BaseModel):
    """End request was accepted by the platform."""

    success: Literal[True] = True
    broadcast_id: str


class BroadcastFailure(BaseModel):
    success: Literal[False] = False
    errcode: str
    errmesg: str
    erresid: str
    broadcast_id: str | None = Field(
        default=None,
        description="Set when a broadcast was already created before the failure",
    )

    @classmethod
    def from_error(cls, error: BroadcastError, *, broadcast_id: str | None = None) -> "BroadcastFailure":
        return cls(
            errcode=error.errcode,
            errmesg=str(error),
            erresid=error.erresid,
            broadcast_id=broadcast_id,
        )


StartBroadcastResult = IngestReady | BroadcastFailure
EndBroadcastResult = BroadcastEnded | BroadcastFailure
