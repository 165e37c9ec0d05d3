from __future__ import annotations

from typing import Any

from .models import OrderedHeaders
from .parser import parse_header_template

# Browser header blocks as they appear on the wire over HTTP/2, including
# pseudo-header order. Placeholders: $method, $authority and $path. The
# cookie lines only mark the cookie position; values come from the caller.
TEMPLATES: dict[str, str] = {
    "chrome_120": (
        "$method $path HTTP/2\n"
        ":method: $method\n"
        ":authority: $authority\n"
        ":scheme: https\n"
        ":path: $path\n"
        'sec-ch-ua: "Not_A Brand";v="8", "Chromium";v="120", "Google Chrome";v="120"\n'
        "sec-ch-ua-mobile: ?0\n"
        'sec-ch-ua-platform: "macOS"\n'
        "upgrade-insecure-requests: 1\n"
        "user-agent: Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36\n"
        "accept: text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,image/apng,*/*;q=0.8,"
        "application/signed-exchange;v=b3;q=0.7\n"
        "sec-fetch-site: none\n"
        "sec-fetch-mode: navigate\n"
        "sec-fetch-user: ?1\n"
        "sec-fetch-dest: document\n"
        "accept-encoding: gzip, deflate, br\n"
        "accept-language: en-US,en;q=0.9\n"
        "cookie: \n"
        "priority: u=0, i\n"
    ),
    "firefox_120": (
        "$method $path HTTP/2\n"
        ":method: $method\n"
        ":path: $path\n"
        ":authority: $authority\n"
        ":scheme: https\n"
        "user-agent: Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:120.0) "
        "Gecko/20100101 Firefox/120.0\n"
        "accept: text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,*/*;q=0.8\n"
        "accept-language: en-US,en;q=0.5\n"
        "accept-encoding: gzip, deflate, br\n"
        "cookie: \n"
        "upgrade-insecure-requests: 1\n"
        "sec-fetch-dest: document\n"
        "sec-fetch-mode: navigate\n"
        "sec-fetch-site: none\n"
        "sec-fetch-user: ?1\n"
        "te: trailers\n"
    ),
    "safari_170": (
        "$method $path HTTP/2\n"
        ":method: $method\n"
        ":scheme: https\n"
        ":path: $path\n"
        ":authority: $authority\n"
        "accept: text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8\n"
        "sec-fetch-site: none\n"
        "cookie: \n"
        "sec-fetch-dest: document\n"
        "accept-language: en-US,en;q=0.9\n"
        "sec-fetch-mode: navigate\n"
        "user-agent: Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.0 Safari/605.1.15\n"
        "accept-encoding: gzip, deflate, br\n"
    ),
}

# Aliases mapping version labels to the base templates above.
ALIAS_MAP = {
    "chrome": "chrome_120",
    "chrome119": "chrome_120",
    "chrome120": "chrome_120",
    "chrome124": "chrome_120",
    "firefox": "firefox_120",
    "firefox120": "firefox_120",
    "firefox133": "firefox_120",
    "safari": "safari_170",
    "safari170": "safari_170",
    "safari180": "safari_170",
}

# Materialize aliases into TEMPLATES for lookup.
for alias, target in list(ALIAS_MAP.items()):
    if alias not in TEMPLATES and target in TEMPLATES:
        TEMPLATES[alias] = TEMPLATES[target]


def get_template(name: str) -> str:
    try:
        return TEMPLATES[name]
    except KeyError as exc:
        raise KeyError(f"Unknown header template '{name}'") from exc


def parse_preset(
    name: str,
    data: Any = None,
    *,
    suppress_content_length: bool = True,
) -> OrderedHeaders:
    """
    Render and parse a built-in template. ``data`` must provide
    ``method``, ``authority`` and ``path``.
    """
    return parse_header_template(
        get_template(name), data, suppress_content_length=suppress_content_length
    )
