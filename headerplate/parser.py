from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator
from typing import Any

from .errors import ScanError
from .models import OrderedHeaders
from .template import Renderer, render_template, run_renderer

logger = logging.getLogger(__name__)

# Size of the line buffer used while scanning rendered text, in UTF-8 bytes.
# As with the classic 64 KiB line scanner, a line must be strictly shorter
# than the buffer (terminator excluded, a trailing CR included).
MAX_LINE_LENGTH = 64 * 1024

COOKIE = "cookie"
CONTENT_LENGTH = "content-length"

# Line sources may fail mid-iteration (I/O, decoding); over-long lines are
# reported as ValueError by _checked_lines.
_SCAN_FAULTS = (OSError, ValueError)


def classify_line(line: str) -> tuple[str, str] | None:
    """
    Split one header line into ``(name, value)``.

    Returns None for lines that carry no header: blank lines, lines without
    a colon and lines whose name comes out empty. Pseudo-header lines such
    as ``:method: GET`` keep their leading colon in the name; any other
    line is split on its first colon only, so ``X-Test: a:b:c`` yields the
    value ``a:b:c``.
    """
    trimmed = line.strip()
    if not trimmed:
        return None

    colon = trimmed.find(":")
    if colon == -1:
        return None

    key_part = trimmed[:colon]
    value_part = trimmed[colon + 1 :]

    if not key_part.strip() and trimmed.startswith(":"):
        # ":name: value" or ":name"; the second colon ends the name.
        second = value_part.find(":")
        if second == -1:
            suffix, value = value_part.strip(), ""
        else:
            suffix, value = value_part[:second].strip(), value_part[second + 1 :].strip()
        key = ":" + suffix
    else:
        key, value = key_part.strip(), value_part.strip()

    if not key:
        return None
    return key, value


def _checked_lines(lines: Iterable[str], max_line_length: int) -> Iterator[str]:
    for line in lines:
        size = len(line.rstrip("\n").encode("utf-8"))
        if size >= max_line_length:
            raise ValueError(f"line too long ({size} bytes, limit {max_line_length})")
        yield line


def parse_header_lines(
    lines: Iterable[str],
    *,
    suppress_content_length: bool = True,
    max_line_length: int = MAX_LINE_LENGTH,
) -> OrderedHeaders:
    """
    Collect header values and name order from rendered template lines.

    The first line is the request line and is always discarded. Cookie
    headers are recorded in the order list once and never stored as
    values; content-length headers are recorded on every occurrence and,
    unless ``suppress_content_length`` is False, never stored as values.
    Any failure while reading lines raises ScanError and no partial
    result is returned.
    """
    reader = _checked_lines(lines, max_line_length)
    try:
        request_line = next(reader, None)
    except _SCAN_FAULTS as exc:
        raise ScanError(f"error reading the first line: {exc}") from exc
    if request_line is None:
        return OrderedHeaders()

    values: dict[str, list[str]] = {}
    pseudo_order: list[str] = []
    header_order: list[str] = []
    cookie_seen = False

    try:
        for lineno, line in enumerate(reader, start=2):
            parsed = classify_line(line)
            if parsed is None:
                if line.strip():
                    logger.debug(f"Skipping malformed header line {lineno}: {line.strip()!r}")
                continue
            key, value = parsed

            if key.startswith(":"):
                # Pseudo-header values are not kept.
                pseudo_order.append(key)
                continue

            lower = key.lower()
            if lower == COOKIE:
                if not cookie_seen:
                    header_order.append(key)
                    cookie_seen = True
            elif lower == CONTENT_LENGTH and suppress_content_length:
                header_order.append(key)
            else:
                header_order.append(key)
                values.setdefault(key, []).append(value)
    except _SCAN_FAULTS as exc:
        raise ScanError(f"error scanning lines from processed template: {exc}") from exc

    logger.debug(
        f"Parsed {len(values)} header names, {len(pseudo_order)} pseudo headers, "
        f"{len(header_order)} ordered headers"
    )
    return OrderedHeaders(values, pseudo_order, header_order)


def parse_header_text(text: str, **options: Any) -> OrderedHeaders:
    """Parse already-rendered template text; see parse_header_lines."""
    return parse_header_lines(io.StringIO(text), **options)


def parse_header_template(
    template_source: str,
    template_data: Any = None,
    *,
    renderer: Renderer | None = None,
    suppress_content_length: bool = True,
) -> OrderedHeaders:
    """
    Render ``template_source`` with ``template_data`` and parse the result
    into an OrderedHeaders.

    The template's first line is a request line such as ``GET / HTTP/2``
    and is ignored; each following ``name: value`` line becomes a header.
    Use ``OrderedHeaders.to_header_map()`` for the reserved-key mapping
    expected by ordered-header HTTP clients.

    Raises TemplateSyntaxError or TemplateExecutionError when rendering
    fails and ScanError when the rendered text cannot be read.
    """
    if renderer is None:
        text = render_template(template_source, template_data)
    else:
        text = run_renderer(renderer, template_source, template_data)
    return parse_header_text(text, suppress_content_length=suppress_content_length)
