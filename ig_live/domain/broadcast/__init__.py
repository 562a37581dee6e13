from ._ingest import RTMP_PORT, RTMP_SCHEME, to_ingest_uri
from .broadcast_domain import BroadcastService
from .broadcast_models import (
    BroadcastEnded,
    BroadcastFailure,
    EndBroadcastResult,
    IngestReady,
    StartBroadcastResult,
)

__all__ = [
    "RTMP_PORT",
    "RTMP_SCHEME",
    "BroadcastEnded",
    "BroadcastFailure",
    "BroadcastService",
    "EndBroadcastResult",
    "IngestReady",
    "StartBroadcastResult",
    "to_ingest_uri",
]
