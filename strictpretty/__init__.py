"""Wadler/Lindig pretty printer."""

from strictpretty.api import format, pformat, singleline_format
from strictpretty.doc import Align, Breakable, Doc, DocSequence, Group, Text, dump_doc
from strictpretty.errors import InvalidWidthError, PrettyPrintError, RenderReentryError
from strictpretty.indent import GenSpace, IndentLevel, default_genspace
from strictpretty.printer import Command, PrettyPrinter, PrintMode, PrintOptions, SingleLine, fits, render
from strictpretty.sink import OutputSink, StreamSink, StringSink

__all__ = [
    "Align",
    "Breakable",
    "Command",
    "Doc",
    "DocSequence",
    "GenSpace",
    "Group",
    "IndentLevel",
    "InvalidWidthError",
    "OutputSink",
    "PrettyPrintError",
    "PrettyPrinter",
    "PrintMode",
    "PrintOptions",
    "RenderReentryError",
    "SingleLine",
    "StreamSink",
    "StringSink",
    "Text",
    "default_genspace",
    "dump_doc",
    "fits",
    "format",
    "pformat",
    "render",
    "singleline_format",
]
