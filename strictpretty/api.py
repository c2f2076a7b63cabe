"""One-call entry points over the printers."""

from collections.abc import Callable

from strictpretty.indent import GenSpace
from strictpretty.printer import PrettyPrinter, SingleLine
from strictpretty.sink import OutputSink, StringSink


def format(
    build: Callable[[PrettyPrinter], object],
    output: OutputSink | None = None,
    maxwidth: int = 80,
    newline: str = "\n",
    genspace: GenSpace | None = None,
) -> OutputSink:
    """Build a document with `build(printer)`, render it, and return the output."""
    printer = PrettyPrinter(output, maxwidth=maxwidth, newline=newline, genspace=genspace)
    build(printer)
    printer.flush()
    return printer.output


def singleline_format(
    build: Callable[[SingleLine], object],
    output: OutputSink | None = None,
    maxwidth: int | None = None,
    newline: str | None = None,
    genspace: GenSpace | None = None,
) -> OutputSink:
    """Like `format`, but nothing ever breaks; the layout arguments are ignored."""
    printer = SingleLine(output)
    build(printer)
    return printer.output


def pformat(build: Callable[[PrettyPrinter], object], maxwidth: int = 80, newline: str = "\n") -> str:
    sink = StringSink()
    format(build, sink, maxwidth=maxwidth, newline=newline)
    return sink.getvalue()
