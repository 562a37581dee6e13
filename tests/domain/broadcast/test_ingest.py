"""Tests for the upload URL to ingest URI rewrite."""

import pytest

from ig_live.domain.broadcast._ingest import RTMP_PORT, RTMP_SCHEME, to_ingest_uri
from ig_live.utils.errors import BroadcastErrorCode, URLTransformError


def test_rewrites_scheme_and_port():
    assert (
        to_ingest_uri("https://upload.example.com/rupload/broadcast/42?sig=x")
        == "rtmp://upload.example.com:80/rupload/broadcast/42?sig=x"
    )


@pytest.mark.parametrize(
    ("upload_url", "expected"),
    [
        (
            "http://upload.example.com:8080/live/abc",
            "rtmp://upload.example.com:80/live/abc",
        ),
        (
            "rtmp://live-upload.example.com:443/rtmp/17854?a=1&b=2",
            "rtmp://live-upload.example.com:80/rtmp/17854?a=1&b=2",
        ),
        (
            "https://user:pw@upload.example.com/p?q=1#frag",
            "rtmp://user:pw@upload.example.com:80/p?q=1#frag",
        ),
        (
            "https://10.0.0.5/rtmp/key",
            "rtmp://10.0.0.5:80/rtmp/key",
        ),
        (
            "https://upload.example.com/a/../b/./c?x=1",
            "rtmp://upload.example.com:80/a/../b/./c?x=1",
        ),
        (
            "https://UPLOAD.Example.COM/Path",
            "rtmp://UPLOAD.Example.COM:80/Path",
        ),
        (
            "https://[2001:db8::1]:8443/live/key",
            "rtmp://[2001:db8::1]:80/live/key",
        ),
    ],
)
def test_preserves_everything_but_scheme_and_port(upload_url, expected):
    assert to_ingest_uri(upload_url) == expected


def test_constants():
    assert RTMP_SCHEME == "rtmp"
    assert RTMP_PORT == 80


@pytest.mark.parametrize(
    "upload_url",
    [
        "",
        "not a url",
        "notaurl",
        "/rupload/broadcast/42",
        "mailto:live@example.com",
        "https://upload.example.com:notaport/x",
        "https://upload.example.com/a\tb",
        "https://upload.example.com/\x00",
        None,
        42,
    ],
)
def test_invalid_upload_url_raises(upload_url):
    with pytest.raises(URLTransformError) as exc_info:
        to_ingest_uri(upload_url)  # type: ignore[arg-type]

    assert exc_info.value.errcode == BroadcastErrorCode.E_URL_TRANSFORM.value
