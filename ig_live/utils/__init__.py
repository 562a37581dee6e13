from .errors import (
    BroadcastError,
    BroadcastErrorCode,
    RemoteExchangeError,
    TokenAcquisitionError,
    URLTransformError,
)
from .logs import format_error, init_logger

__all__ = [
    "BroadcastError",
    "BroadcastErrorCode",
    "RemoteExchangeError",
    "TokenAcquisitionError",
    "URLTransformError",
    "format_error",
    "init_logger",
]
