from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

PREVIEW_WIDTH = "720"
PREVIEW_HEIGHT = "1184"
BROADCAST_TYPE_RTMP = "RTMP"
INTERNAL_ONLY_NO = "0"
SEND_NOTIFICATIONS_YES = "1"


class _WirePayload(BaseModel):
    """Form payload whose wire names are underscore-prefixed aliases."""

    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)

    def to_form(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class CreateBroadcastPayload(_WirePayload):
    """Body of ``live/create/``."""

    device_id: str = Field(..., alias="_uuid", description="Device UUID")
    csrf_token: str = Field(..., alias="_csrftoken", description="CSRF token")
    preview_height: str = Field(default=PREVIEW_HEIGHT)
    preview_width: str = Field(default=PREVIEW_WIDTH)
    broadcast_message: str = Field(default="")
    broadcast_type: str = Field(default=BROADCAST_TYPE_RTMP)
    internal_only: str = Field(default=INTERNAL_ONLY_NO)


class StartBroadcastPayload(_WirePayload):
    """Body of ``live/{broadcast_id}/start/``."""

    device_id: str = Field(..., alias="_uuid", description="Device UUID")
    csrf_token: str = Field(..., alias="_csrftoken", description="CSRF token")
    should_send_notifications: str = Field(default=SEND_NOTIFICATIONS_YES)


class EndBroadcastPayload(_WirePayload):
    """Body of ``live/{broadcast_id}/end_broadcast/``."""

    user_id: str = Field(..., alias="_uid", description="Numeric user id as string")
    device_id: str = Field(..., alias="_uuid", description="Device UUID")
    csrf_token: str = Field(..., alias="_csrftoken", description="CSRF token")


class PlatformStatusResult(BaseModel):
    """Minimal platform response: ``{"status": "ok", ...}``."""

    status: str = Field(default="ok")
    message: str | None = Field(default=None)

    model_config = ConfigDict(extra="ignore")


class CreateBroadcastResult(PlatformStatusResult):
    """Response of ``live/create/``."""

    broadcast_id: str = Field(
        ...,
        validation_alias=AliasChoices("broadcast_id", "id"),
        description="Platform id of the created broadcast",
    )
    upload_url: str = Field(..., description="Raw upload endpoint returned by the platform")

    @field_validator("broadcast_id", mode="before")
    @classmethod
    def _broadcast_id_to_str(cls, value: Any) -> Any:
        # The platform sends a JSON number for most accounts
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


ResponseT = TypeVar("ResponseT", bound=BaseModel)


class PlatformRequest(ABC, Generic[ResponseT]):
    """A typed platform call: where to send it, what to send, how to read the answer."""

    method: ClassVar[str] = "POST"
    response_model: ClassVar[type[BaseModel]] = PlatformStatusResult

    def __init__(self, payload: _WirePayload):
        self.payload = payload

    @property
    @abstractmethod
    def path(self) -> str: ...

    def form(self) -> dict[str, str]:
        return self.payload.to_form()

    def parse_response(self, data: Any) -> ResponseT:
        return self.response_model.model_validate(data)  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r})"


class CreateBroadcastRequest(PlatformRequest[CreateBroadcastResult]):
    response_model = CreateBroadcastResult

    def __init__(self, payload: CreateBroadcastPayload):
        super().__init__(payload)

    @property
    def path(self) -> str:
        return "live/create/"


class StartBroadcastRequest(PlatformRequest[PlatformStatusResult]):
    def __init__(self, payload: StartBroadcastPayload, broadcast_id: str):
        super().__init__(payload)
        self.broadcast_id = broadcast_id

    @property
    def path(self) -> str:
        return f"live/{self.broadcast_id}/start/"


class EndBroadcastRequest(PlatformRequest[PlatformStatusResult]):
    def __init__(self, payload: EndBroadcastPayload, broadcast_id: str):
        super().__init__(payload)
        self.broadcast_id = broadcast_id

    @property
    def path(self) -> str:
        return f"live/{self.broadcast_id}/end_broadcast/"
