"""Builder-compatible printer that never breaks lines."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from strictpretty.sink import OutputSink, StringSink


class SingleLine:
    """Accepts the `PrettyPrinter` build calls but writes straight to the output.

    No tree is built: breakables print their separator, groups print their
    delimiters inline, and width, indent, and newline arguments are ignored.
    """

    def __init__(self, output: OutputSink | None = None, maxwidth: int | None = None, newline: str | None = None) -> None:
        self._output: OutputSink = StringSink() if output is None else output

    @property
    def output(self) -> OutputSink:
        return self._output

    def text(self, obj: Any, width: int | None = None) -> None:
        self._output.append(obj)

    def breakable(self, sep: str = " ", width: int | None = None, *, indent: bool | None = None) -> None:
        self._output.append(sep)

    def fill_breakable(self, sep: str = " ", width: int | None = None) -> None:
        self._output.append(sep)

    @contextmanager
    def nest(self, indent: int) -> Iterator[None]:
        yield

    @contextmanager
    def group(
        self,
        indent: int | None = None,
        open_obj: Any = "",
        close_obj: Any = "",
        open_width: int | None = None,
        close_width: int | None = None,
    ) -> Iterator[None]:
        self._output.append(open_obj)
        yield
        self._output.append(close_obj)

    def flush(self) -> None:
        pass
