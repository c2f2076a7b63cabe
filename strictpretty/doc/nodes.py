"""Document tree nodes.

A document describes every layout the printer may choose from. It is built
top-down by `PrettyPrinter` and resolved once by the renderer.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Text:
    """Unbreakable content: fragments plus their caller-supplied total width."""

    fragments: list[Any] = field(default_factory=list)
    width: int = 0

    def add(self, fragment: Any, width: int) -> None:
        self.fragments.append(fragment)
        self.width += width


@dataclass(slots=True)
class Breakable:
    """A point where the line may break.

    Renders as `separator` when its group is flat, otherwise as a newline
    followed by the current margin (or the root margin when `indent` is False).
    """

    separator: str = " "
    width: int | None = None
    indent: bool = True

    def __post_init__(self) -> None:
        if self.width is None:
            self.width = len(self.separator)


@dataclass(slots=True)
class Align:
    """Shifts the margin by `indent` for everything in `contents`."""

    indent: int
    contents: list["Doc"] = field(default_factory=list)


@dataclass(slots=True)
class Group:
    """Content the renderer tries to keep on one line.

    `depth` is informational only; the break flag is monotonic.
    """

    depth: int
    contents: list["Doc"] = field(default_factory=list)
    _break: bool = False

    @property
    def is_broken(self) -> bool:
        return self._break

    def force_break(self) -> None:
        self._break = True


type Doc = Text | Breakable | Align | Group | list[Doc]
type DocSequence = list[Doc]
