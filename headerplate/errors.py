class HeaderplateError(Exception):
    """Base error for headerplate."""


class TemplateError(HeaderplateError):
    """Raised when a header template cannot be rendered."""


class TemplateSyntaxError(TemplateError):
    """Raised when the template source cannot be compiled."""


class TemplateExecutionError(TemplateError):
    """Raised when rendering fails against the supplied data."""


class ScanError(HeaderplateError):
    """Raised when the rendered lines cannot be read."""
