"""Upload URL to RTMP ingest URI rewrite."""

from urllib.parse import urlsplit, urlunsplit

import httpx

from ig_live.utils.errors import URLTransformError

RTMP_SCHEME = "rtmp"
RTMP_PORT = 80


def _raw_host(netloc: str) -> tuple[str, str]:
    """Split a netloc into (userinfo prefix, host) keeping the original spelling."""
    userinfo, at, hostport = netloc.rpartition("@")
    if hostport.startswith("["):
        host = hostport[: hostport.index("]") + 1]
    else:
        host = hostport.partition(":")[0]
    return userinfo + at, host


def to_ingest_uri(upload_url: str) -> str:
    """Rewrite the upload URL returned by live/create/ into an RTMP ingest URI.

    The platform hands out an HTTP(S) address; publishers expect
    ``rtmp://host:80/...``. Only scheme and port change. Userinfo, host, path,
    query and fragment are copied from the input as written, dot segments and
    letter case included.

    Raises:
        URLTransformError: If upload_url is not an absolute URI
    """
    if not isinstance(upload_url, str) or not upload_url:
        raise URLTransformError(f"Upload URL must be a non-empty string, got {upload_url!r}")

    if any(ch.isspace() or not ch.isprintable() for ch in upload_url):
        raise URLTransformError(f"Upload URL contains whitespace or control characters: {upload_url!r}")

    # httpx only validates here; its normalised form is not used for the output
    try:
        url = httpx.URL(upload_url)
        parts = urlsplit(upload_url)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise URLTransformError(f"Upload URL is not a valid URI: {upload_url!r}", cause=exc) from exc

    if not url.scheme or not url.host or not parts.netloc:
        raise URLTransformError(f"Upload URL is not an absolute URI: {upload_url!r}")

    userinfo, host = _raw_host(parts.netloc)
    if not host:
        raise URLTransformError(f"Upload URL has no host: {upload_url!r}")

    return urlunsplit(
        (RTMP_SCHEME, f"{userinfo}{host}:{RTMP_PORT}", parts.path, parts.query, parts.fragment)
    )
