from __future__ import annotations

import logging
from collections.abc import Iterable

import h2.connection

from .headers import canonicalize_headers, pseudo_headers
from .models import OrderedHeaders

logger = logging.getLogger(__name__)


def build_headers(
    method: str,
    authority: str,
    path: str,
    headers: OrderedHeaders | Iterable[tuple[str, str]],
    user_headers: dict[str, str] | None = None,
    cookie: str | None = None,
    content_length: int | None = None,
    scheme: str = "https",
) -> list[tuple[str, str]]:
    """
    Return the full HTTP/2 header list for one request: pseudo headers in
    the template's pseudo order, then regular headers in its header order.
    Plain header pairs get the default pseudo order and are sent as given;
    the user header, cookie and content-length options apply to templates.
    """
    if isinstance(headers, OrderedHeaders):
        pseudo = pseudo_headers(headers, method, authority, path, scheme)
        regular = canonicalize_headers(headers, user_headers, cookie, content_length)
    else:
        pseudo = pseudo_headers(OrderedHeaders(), method, authority, path, scheme)
        regular = list(headers)
    # HTTP/2 field names are lower-case on the wire.
    return pseudo + [(name.lower(), value) for name, value in regular]


def encode_headers_frame(
    method: str,
    authority: str,
    path: str,
    headers: OrderedHeaders | Iterable[tuple[str, str]],
    end_stream: bool = True,
    **options,
) -> bytes:
    """
    Encode the request headers as the HEADERS frame a fresh client
    connection would send on its first stream (HPACK-compressed, no
    connection preface). ``options`` are passed to build_headers.
    """
    request_headers = build_headers(method, authority, path, headers, **options)
    conn = h2.connection.H2Connection()
    conn.initiate_connection()
    # Drop the preface and SETTINGS; only the HEADERS frame is returned.
    conn.data_to_send()
    stream_id = conn.get_next_available_stream_id()
    conn.send_headers(stream_id, request_headers, end_stream=end_stream)
    frame = conn.data_to_send()
    logger.debug(
        f"Encoded {len(request_headers)} headers on stream {stream_id} "
        f"into {len(frame)} bytes"
    )
    return frame

