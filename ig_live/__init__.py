"""Live broadcast lifecycle for the Instagram private API."""

from ig_live.domain.broadcast import (
    BroadcastEnded,
    BroadcastFailure,
    BroadcastService,
    IngestReady,
)
from ig_live.services.session import HttpSessionClient, SessionClient

__all__ = [
    "BroadcastEnded",
    "BroadcastFailure",
    "BroadcastService",
    "HttpSessionClient",
    "IngestReady",
    "SessionClient",
]
