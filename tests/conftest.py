"""Pytest configuration and fixtures."""

import pytest
from headerplate.models import OrderedHeaders


@pytest.fixture
def browser_template():
    """A header template in the shape a browser sends over HTTP/2."""
    return (
        "GET $path HTTP/2\n"
        ":method: GET\n"
        ":authority: ${host}\n"
        ":scheme: https\n"
        ":path: $path\n"
        "User-Agent: ${client.ua}\n"
        "Accept: */*\n"
        "Cookie: session=1\n"
        "Accept-Language: en-US\n"
        "cookie: theme=dark\n"
        "Content-Length: 0\n"
    )


@pytest.fixture
def sample_headers():
    """A parsed structure with repeated and suppressed names."""
    return OrderedHeaders(
        values={"Host": ["example.com"], "X-A": ["1", "2"], "Accept": ["*/*"]},
        pseudo_order=[":method", ":path", ":authority", ":scheme"],
        header_order=["Host", "X-A", "Cookie", "Accept", "X-A", "Content-Length"],
    )

