from headerplate.errors import (
    HeaderplateError,
    TemplateError,
    TemplateSyntaxError,
    TemplateExecutionError,
    ScanError,
)
from headerplate.models import HEADER_ORDER_KEY, PHEADER_ORDER_KEY, OrderedHeaders
from headerplate.parser import (
    classify_line,
    parse_header_lines,
    parse_header_text,
    parse_header_template,
)
from headerplate.template import HeaderTemplate, render_template
from headerplate.headers import canonicalize_headers, pseudo_headers
from headerplate.presets import get_template, parse_preset

__all__ = [
    "HeaderplateError",
    "TemplateError",
    "TemplateSyntaxError",
    "TemplateExecutionError",
    "ScanError",
    "HEADER_ORDER_KEY",
    "PHEADER_ORDER_KEY",
    "OrderedHeaders",
    "classify_line",
    "parse_header_lines",
    "parse_header_text",
    "parse_header_template",
    "HeaderTemplate",
    "render_template",
    "canonicalize_headers",
    "pseudo_headers",
    "get_template",
    "parse_preset",
]
