"""Builder, renderer, and single-line printer."""

from strictpretty.printer.builder import PrettyPrinter
from strictpretty.printer.options import PrintOptions
from strictpretty.printer.render import Command, PrintMode, fits, render
from strictpretty.printer.singleline import SingleLine

__all__ = [
    "Command",
    "PrettyPrinter",
    "PrintMode",
    "PrintOptions",
    "SingleLine",
    "fits",
    "render",
]
