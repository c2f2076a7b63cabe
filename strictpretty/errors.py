"""Pretty printer errors."""


class PrettyPrintError(Exception):
    """Base class for errors raised by the pretty printer."""


class InvalidWidthError(PrettyPrintError, ValueError):
    """A fragment width is not a non-negative integer (strict widths only)."""

    def __init__(self, width: object, what: str) -> None:
        super().__init__(f"Invalid {what} width {width!r}: expected a non-negative int")
        self.width = width
        self.what = what


class RenderReentryError(PrettyPrintError, RuntimeError):
    """A render pass was started while another one on the same printer is running."""
