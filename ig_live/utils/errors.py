"""Error taxonomy for broadcast lifecycle operations.

Errors follow the errcode / errmesg / erresid convention used by the failure
envelopes: ``errcode`` is a stable machine-readable code, ``errmesg`` a human
readable message and ``erresid`` a short random id that ties a failure value
back to the log line that reported it.
"""

import inspect
from enum import Enum
from uuid import uuid4


class BroadcastErrorCode(str, Enum):
    E_TOKEN_ACQUISITION = "E_TOKEN_ACQUISITION"
    E_CREATE_BROADCAST = "E_CREATE_BROADCAST"
    E_START_BROADCAST = "E_START_BROADCAST"
    E_END_BROADCAST = "E_END_BROADCAST"
    E_REMOTE_EXCHANGE = "E_REMOTE_EXCHANGE"
    E_URL_TRANSFORM = "E_URL_TRANSFORM"
    E_INTERNAL_ERROR = "E_INTERNAL_ERROR"


def new_erresid() -> str:
    return uuid4().hex[:10]


class BroadcastError(Exception):
    """Base error for the broadcast lifecycle.

    Captures the raise site as ``module:function:line`` so log lines written
    far from the origin still point at it.
    """

    default_errcode = BroadcastErrorCode.E_REMOTE_EXCHANGE

    def __init__(
        self,
        errmesg: str,
        *,
        errcode: BroadcastErrorCode | str | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(errmesg)
        code = errcode or self.default_errcode
        self.errcode = code.value if isinstance(code, BroadcastErrorCode) else str(code)
        self.errmesg = errmesg
        self.erresid = new_erresid()
        self.cause = cause
        self.caller_info = self._caller_info()

    @staticmethod
    def _caller_info() -> str:
        # Skip this helper and every __init__ in the subclass chain
        for frame_info in inspect.stack()[2:]:
            if frame_info.function == "__init__":
                continue
            module = inspect.getmodule(frame_info.frame)
            module_name = (
                module.__name__
                if module and getattr(module, "__name__", None)
                else frame_info.filename
            )
            return f"{module_name}:{frame_info.function}:{frame_info.lineno}"
        return "unknown"

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.errmesg}: {type(self.cause).__name__}: {self.cause}"
        return self.errmesg


class TokenAcquisitionError(BroadcastError):
    """The session could not produce a CSRF token."""

    default_errcode = BroadcastErrorCode.E_TOKEN_ACQUISITION


class RemoteExchangeError(BroadcastError):
    """A request/response exchange with the platform failed or returned nothing."""

    default_errcode = BroadcastErrorCode.E_REMOTE_EXCHANGE


class URLTransformError(BroadcastError):
    """The upload URL could not be rewritten into an ingest URI."""

    default_errcode = BroadcastErrorCode.E_URL_TRANSFORM
