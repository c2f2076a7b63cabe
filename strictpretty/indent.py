"""Immutable indentation levels used while rendering."""

from collections.abc import Callable
from dataclasses import dataclass

type GenSpace = Callable[[int], str]


def default_genspace(width: int) -> str:
    return " " * width


@dataclass(frozen=True, slots=True)
class IndentLevel:
    """Margin in effect for line breaks at some point of the document.

    `queue` holds every indent delta applied so far; the materialized `value`
    is `genspace(sum(queue))`. `root` is the margin that breakables which do
    not participate in indentation fall back to (zero margin when None).
    """

    genspace: GenSpace
    value: str
    length: int = 0
    queue: tuple[int, ...] = ()
    root: "IndentLevel | None" = None

    @staticmethod
    def initial(genspace: GenSpace, margin: int = 0) -> "IndentLevel":
        """Create the starting level, optionally anchored at a base margin."""
        level = IndentLevel(genspace=genspace, value=genspace(0))
        if margin <= 0:
            return level
        aligned = level.align(margin)
        return IndentLevel(
            genspace=genspace,
            value=aligned.value,
            length=aligned.length,
            queue=aligned.queue,
            root=aligned,
        )

    def align(self, n: int) -> "IndentLevel":
        next_queue = (*self.queue, n)
        spaces = sum(next_queue)

        next_value = self.genspace(0)
        next_length = 0
        if spaces > 0:
            next_value += self.genspace(spaces)
            next_length = spaces

        return IndentLevel(
            genspace=self.genspace,
            value=next_value,
            length=next_length,
            queue=next_queue,
            root=self.root,
        )
