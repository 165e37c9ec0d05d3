from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Mapping
from string import Template as _BaseTemplate
from typing import Any

from .errors import TemplateError, TemplateExecutionError, TemplateSyntaxError

Renderer = Callable[[str, Any], str]


class HeaderTemplate(_BaseTemplate):
    """
    Standard ``$name`` / ``${name}`` substitution, extended so a placeholder
    may walk into nested data with dots, e.g. ``${request.path}``.
    """

    idpattern = r"[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*"


class _DataView(Mapping):
    """Read-only mapping that resolves dotted placeholder names against data."""

    def __init__(self, data: Any) -> None:
        self._data = data

    def __getitem__(self, name: str) -> str:
        current = self._data
        for part in name.split("."):
            if isinstance(current, Mapping):
                if part not in current:
                    raise KeyError(name)
                current = current[part]
            elif current is not None and hasattr(current, part):
                current = getattr(current, part)
            else:
                raise KeyError(name)
        return "" if current is None else str(current)

    def __iter__(self):
        return iter(())

    def __len__(self) -> int:
        return 0


def compile_template(source: str) -> HeaderTemplate:
    template = HeaderTemplate(source)
    if not template.is_valid():
        # substitute() reports the line and column of the bad placeholder.
        try:
            template.substitute(defaultdict(str))
        except ValueError as exc:
            raise TemplateSyntaxError(f"failed to parse template string: {exc}") from exc
        raise TemplateSyntaxError("failed to parse template string: invalid placeholder")
    return template


def render_template(source: str, data: Any = None) -> str:
    """
    Substitute ``data`` into ``source``.

    ``data`` may be a mapping, any object exposing attributes, or None.
    Raises TemplateSyntaxError for malformed placeholders and
    TemplateExecutionError for placeholders the data cannot satisfy.
    """
    template = compile_template(source)
    try:
        return template.substitute(_DataView(data))
    except KeyError as exc:
        raise TemplateExecutionError(
            f"failed to execute template: no value for placeholder {exc.args[0]!r}"
        ) from exc


def run_renderer(renderer: Renderer, source: str, data: Any) -> str:
    """Invoke a caller-supplied renderer, normalizing its failures."""
    try:
        text = renderer(source, data)
    except TemplateError:
        raise
    except Exception as exc:
        raise TemplateExecutionError(f"failed to execute template: {exc}") from exc
    if not isinstance(text, str):
        raise TemplateExecutionError(
            f"failed to execute template: renderer returned {type(text).__name__}, expected str"
        )
    return text
