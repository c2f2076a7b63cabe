"""Document builder: the construction side of the pretty printer."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from strictpretty.doc.nodes import Align, Breakable, DocSequence, Group, Text
from strictpretty.errors import InvalidWidthError, RenderReentryError
from strictpretty.indent import GenSpace
from strictpretty.printer.options import PrintOptions
from strictpretty.printer.render import render
from strictpretty.sink import OutputSink, StringSink

logger = logging.getLogger(__name__)


class PrettyPrinter:
    """Builds a document tree through nested scopes, then renders it on `flush`.

    `group` and `nest` are context managers; the body of the `with` block is
    the content that lands inside the new scope::

        q = PrettyPrinter(maxwidth=20)
        with q.group(1, "[", "]"):
            q.text("1")
            q.text(",")
            q.breakable()
            q.text("2")
        q.flush()
    """

    def __init__(
        self,
        output: OutputSink | None = None,
        options: PrintOptions | None = None,
        *,
        maxwidth: int | None = None,
        newline: str | None = None,
        genspace: GenSpace | None = None,
    ) -> None:
        resolved = options or PrintOptions()
        if maxwidth is not None or newline is not None or genspace is not None:
            resolved = PrintOptions(
                maxwidth=resolved.maxwidth if maxwidth is None else maxwidth,
                newline=resolved.newline if newline is None else newline,
                genspace=resolved.genspace if genspace is None else genspace,
                root_margin=resolved.root_margin,
                strict_widths=resolved.strict_widths,
            )

        self._output: OutputSink = StringSink() if output is None else output
        self._options = resolved
        self._groups: list[Group] = [Group(0)]
        self._target: DocSequence = self._groups[-1].contents
        self._rendering = False

    @property
    def output(self) -> OutputSink:
        return self._output

    @property
    def options(self) -> PrintOptions:
        return self._options

    @property
    def maxwidth(self) -> int:
        return self._options.maxwidth

    @property
    def newline(self) -> str:
        return self._options.newline

    @property
    def genspace(self) -> GenSpace:
        return self._options.genspace

    @property
    def groups(self) -> list[Group]:
        """Open groups, outermost (the root, depth 0) first."""
        return self._groups

    @property
    def target(self) -> DocSequence:
        """The sequence new nodes are appended to."""
        return self._target

    @property
    def current_group(self) -> Group:
        return self._groups[-1]

    def text(self, obj: Any, width: int | None = None) -> Text:
        """Append `obj` as `width` columns of unbreakable text (`len(obj)` by default).

        Adjacent text merges into the previous `Text` node of the same scope.
        """
        if width is None:
            width = len(obj)
        self._check_width(width, "text")

        doc = self._target[-1] if self._target else None
        if not isinstance(doc, Text):
            doc = Text()
            self._target.append(doc)

        doc.add(obj, width)
        return doc

    def breakable(self, sep: str = " ", width: int | None = None, *, indent: bool = True) -> Breakable:
        """Mark a place where the line may break; `sep` is printed when it doesn't.

        With `indent=False` a taken break returns to the root margin instead
        of the margin of the enclosing `nest` scopes.
        """
        if width is None:
            width = len(sep)
        self._check_width(width, "breakable")

        doc = Breakable(sep, width, indent=indent)
        self._target.append(doc)
        return doc

    def fill_breakable(self, sep: str = " ", width: int | None = None) -> Group:
        """A breakable whose break decision is made on its own.

        Two fill breakables in one group can break independently, whereas
        plain breakables of a group break all together or not at all.
        """
        with self.group() as doc:
            self.breakable(sep, width)
        return doc

    @contextmanager
    def group(
        self,
        indent: int = 0,
        open_obj: Any = "",
        close_obj: Any = "",
        open_width: int | None = None,
        close_width: int | None = None,
    ) -> Iterator[Group]:
        """Group the breakables added in the block: they all break or none do.

        A non-zero `indent` nests the group's content by that many columns.
        `open_obj` is emitted before the group and `close_obj` after it.
        """
        self.text(open_obj, open_width)

        doc = Group(self._groups[-1].depth + 1)
        self._groups.append(doc)
        self._target.append(doc)

        try:
            with self.with_target(doc.contents):
                if indent != 0:
                    with self.nest(indent):
                        yield doc
                else:
                    yield doc
        finally:
            self._groups.pop()

        self.text(close_obj, close_width)

    @contextmanager
    def nest(self, indent: int) -> Iterator[Align]:
        """Shift the margin after line breaks by `indent` for content added in the block."""
        doc = Align(indent)
        self._target.append(doc)

        with self.with_target(doc.contents):
            yield doc

    @contextmanager
    def with_target(self, target: DocSequence) -> Iterator[DocSequence]:
        """Temporarily redirect appends to `target`."""
        previous_target, self._target = self._target, target
        try:
            yield target
        finally:
            self._target = previous_target

    def flush(self) -> None:
        """Render the document into the output, then start over with an empty one."""
        if self._rendering:
            raise RenderReentryError("flush called while a render pass is already running")
        if len(self._groups) > 1:
            raise RuntimeError("Cannot flush: unclosed groups remain on stack")

        root = self._groups[0]
        logger.debug("rendering document (maxwidth=%d)", self.maxwidth)

        self._rendering = True
        try:
            render(root, self._output, self._options)
        finally:
            self._rendering = False
            self._groups = [Group(0)]
            self._target = self._groups[-1].contents

        logger.debug("render finished")

    def _check_width(self, width: Any, what: str) -> None:
        if not self._options.strict_widths:
            return
        if isinstance(width, bool) or not isinstance(width, int) or width < 0:
            raise InvalidWidthError(width, what)
