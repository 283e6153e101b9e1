"""
Errors raised while compiling, rendering, or decoding templates.

All are ``ValueError`` subclasses so callers that already handle invalid
input keep working; the concrete class tells which stage failed.
"""


class TemplateError(ValueError):
    """Base class for template failures surfaced to callers."""

    pass


class TemplateSyntaxError(TemplateError):
    """Raised when template source cannot be parsed."""

    def __init__(
        self, message: str, *, lineno: int | None = None, name: str | None = None
    ) -> None:
        super().__init__(message)
        self.lineno = lineno
        self.name = name


class TemplateExecutionError(TemplateError):
    """Raised when rendering fails (undefined variable, failing function, ...)."""

    pass


class TemplateDecodeError(TemplateError):
    """Raised when rendered output is not the expected JSON records."""

    pass
