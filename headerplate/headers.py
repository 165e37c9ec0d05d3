from __future__ import annotations

from .models import OrderedHeaders
from .parser import CONTENT_LENGTH, COOKIE

DEFAULT_PSEUDO_ORDER = (":method", ":authority", ":scheme", ":path")


def _sanitize_header(name: str, value: str) -> tuple[str, str]:
    """
    Sanitize header name and value to prevent HTTP header injection (CRLF injection).
    Strips CR, LF, and null bytes from both name and value.
    """
    clean_name = name.replace("\r", "").replace("\n", "").replace("\x00", "")
    clean_value = value.replace("\r", "").replace("\n", "").replace("\x00", "")
    return clean_name, clean_value


def canonicalize_headers(
    parsed: OrderedHeaders,
    user_headers: dict[str, str] | None = None,
    cookie: str | None = None,
    content_length: int | str | None = None,
) -> list[tuple[str, str]]:
    """
    Flatten parsed template headers into wire order.

    The n-th appearance of a name in ``header_order`` emits the n-th value
    stored for it. The cookie and content-length slots are filled from
    ``cookie`` and ``content_length``, falling back to a same-named user
    header, and dropped when neither is given. The explicit argument wins
    over the user header.
    User headers replace same-named template values (case-insensitive);
    unknown user headers are appended in insertion order.
    """
    overrides: dict[str, tuple[str, str]] = {}
    for name, value in (user_headers or {}).items():
        overrides[name.lower()] = (name, value)

    ordered: list[tuple[str, str]] = []
    emitted: set[str] = set()
    used: dict[str, int] = {}
    for name in parsed.header_order:
        key = name.lower()
        if key == COOKIE or (key == CONTENT_LENGTH and name not in parsed.values):
            # Suppressed slots take the explicit argument, else a user header.
            value = cookie if key == COOKIE else content_length
            if value is None and key in overrides:
                value = overrides[key][1]
            if value is not None and key not in emitted:
                ordered.append(_sanitize_header(name, str(value)))
                emitted.add(key)
            continue
        if key in overrides:
            # An override replaces every template value of that name once.
            if key not in emitted:
                ordered.append(_sanitize_header(name, overrides[key][1]))
                emitted.add(key)
            continue
        vals = parsed.values.get(name, [])
        index = used.get(name, 0)
        if index < len(vals):
            ordered.append(_sanitize_header(name, vals[index]))
            used[name] = index + 1

    # Values the order list did not account for (hand-built structures).
    for name, vals in parsed.values.items():
        if name.lower() in overrides:
            continue
        for value in vals[used.get(name, 0) :]:
            ordered.append(_sanitize_header(name, value))
    # Append anything unspecified to preserve user intent.
    for key, (name, value) in overrides.items():
        if key not in emitted:
            ordered.append(_sanitize_header(name, value))
    return ordered


def pseudo_headers(
    parsed: OrderedHeaders,
    method: str,
    authority: str,
    path: str,
    scheme: str = "https",
) -> list[tuple[str, str]]:
    """
    Build HTTP/2 pseudo headers following the template's pseudo order.

    Names the template lists but HTTP/2 does not define are skipped;
    required ones the template omits follow in DEFAULT_PSEUDO_ORDER.
    """
    known = {
        ":method": method,
        ":authority": authority,
        ":scheme": scheme,
        ":path": path,
    }
    out: list[tuple[str, str]] = []
    for name in [*parsed.pseudo_order, *DEFAULT_PSEUDO_ORDER]:
        key = name.lower()
        if key in known:
            out.append((key, known.pop(key)))
    return out
