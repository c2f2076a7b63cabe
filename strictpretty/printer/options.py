"""Printer configuration."""

from dataclasses import dataclass

from strictpretty.indent import GenSpace, default_genspace


@dataclass(frozen=True, slots=True)
class PrintOptions:
    """Line width, newline, and indentation settings for a render pass.

    `maxwidth` is a soft target: a single wide text or separator may still
    overflow it. `root_margin` is the base margin that non-indenting
    breakables return to. With `strict_widths`, `text` and `breakable` reject
    widths that are not non-negative ints instead of letting line fitting
    drift.
    """

    maxwidth: int = 80
    newline: str = "\n"
    genspace: GenSpace = default_genspace
    root_margin: int = 0
    strict_widths: bool = False

    def __post_init__(self):
        if self.maxwidth < 1:
            raise ValueError("maxwidth must be a positive integer")
        if self.root_margin < 0:
            raise ValueError("root_margin cannot be negative")
