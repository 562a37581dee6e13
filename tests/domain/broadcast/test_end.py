"""Tests for EndBroadcastOperations domain logic."""

import pytest

from ig_live.domain.broadcast._end import EndBroadcastOperations
from ig_live.domain.broadcast.broadcast_models import BroadcastEnded, BroadcastFailure
from ig_live.services.broadcast.broadcast_schemas import EndBroadcastRequest
from ig_live.services.session import AuthError, PlatformError, TransportError
from ig_live.utils.errors import BroadcastErrorCode
from tests.fixtures.session_fixtures import CSRF_TOKEN, DEVICE_ID, USER_ID, FakeSession


class TestEndBroadcast:
    """Tests for EndBroadcastOperations.end_broadcast method."""

    def test_end_sends_end_request(self, fake_session):
        result = EndBroadcastOperations().end_broadcast(fake_session, "17911111111111111")

        assert isinstance(result, BroadcastEnded)
        assert result.broadcast_id == "17911111111111111"
        assert fake_session.request_types == [EndBroadcastRequest]

        request = fake_session.requests[0]
        assert request.path == "live/17911111111111111/end_broadcast/"
        assert request.form() == {
            "_uid": str(USER_ID),
            "_uuid": DEVICE_ID,
            "_csrftoken": CSRF_TOKEN,
        }

    def test_end_accepts_broadcast_from_another_process(self):
        """No local registry: any broadcast id is sent as-is."""
        session = FakeSession()

        result = EndBroadcastOperations().end_broadcast(session, "never-created-here")

        assert isinstance(result, BroadcastEnded)
        assert session.requests[0].broadcast_id == "never-created-here"

    def test_end_accepts_numeric_broadcast_id(self, fake_session):
        result = EndBroadcastOperations().end_broadcast(fake_session, 17922222222222222)  # type: ignore[arg-type]

        assert isinstance(result, BroadcastEnded)
        assert fake_session.requests[0].path == "live/17922222222222222/end_broadcast/"

    @pytest.mark.parametrize("error", [AuthError("expired"), RuntimeError("boom")])
    def test_token_failure_sends_nothing(self, error):
        session = FakeSession(token_error=error)

        result = EndBroadcastOperations().end_broadcast(session, "179")

        assert isinstance(result, BroadcastFailure)
        assert result.errcode == BroadcastErrorCode.E_TOKEN_ACQUISITION.value
        assert result.broadcast_id == "179"
        assert session.requests == []

    @pytest.mark.parametrize(
        "end_outcome",
        [TransportError("reset"), PlatformError("not found"), ValueError("bad json"), None],
    )
    def test_end_failure_is_swallowed_without_retry(self, end_outcome, log_records):
        session = FakeSession(responses={EndBroadcastRequest: end_outcome})

        result = EndBroadcastOperations().end_broadcast(session, "179")

        assert isinstance(result, BroadcastFailure)
        assert result.errcode == BroadcastErrorCode.E_END_BROADCAST.value
        assert len(session.requests) == 1
        assert any(r["level"].name == "WARNING" for r in log_records)

    @pytest.mark.parametrize("broadcast_id", ["", "   ", None])
    def test_missing_broadcast_id_is_rejected_before_any_call(self, broadcast_id):
        session = FakeSession()

        result = EndBroadcastOperations().end_broadcast(session, broadcast_id)  # type: ignore[arg-type]

        assert isinstance(result, BroadcastFailure)
        assert result.errcode == BroadcastErrorCode.E_END_BROADCAST.value
        assert session.token_calls == 0
        assert session.requests == []
