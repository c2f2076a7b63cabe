"""Documents with known layouts, shared across render tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from strictpretty import PrettyPrinter


@dataclass(frozen=True, slots=True)
class RenderCase:
    name: str
    build: Callable[[PrettyPrinter], None]
    maxwidth: int
    expected: str


def _a_or_b(q: PrettyPrinter) -> None:
    with q.group():
        q.text("a")
        q.breakable()
        q.text("b")


def _bracketed_x(q: PrettyPrinter) -> None:
    with q.group():
        q.text("[")
        with q.nest(2):
            q.breakable("", indent=True)
            q.text("x")
        q.breakable("")
        q.text("]")


def _outer_breaks_inner_flat(q: PrettyPrinter) -> None:
    with q.group():
        q.text("outer")
        with q.nest(2):
            q.breakable()
            with q.group():
                q.text("ab")
                q.breakable()
                q.text("c")
            q.breakable()
            q.text("tail-part")


def _trailing_text(q: PrettyPrinter) -> None:
    with q.group():
        q.text("aaa")
        q.breakable()
        q.text("bbb")
    q.text("ccc")


def _forced_break(q: PrettyPrinter) -> None:
    with q.group() as group:
        q.text("a")
        q.breakable()
        q.text("b")
    group.force_break()


def _fill(q: PrettyPrinter) -> None:
    with q.group():
        q.text("aaaa")
        q.fill_breakable()
        q.text("bbbb")
        q.fill_breakable()
        q.text("cc")


def _list(q: PrettyPrinter) -> None:
    with q.group():
        q.text("[")
        with q.nest(2):
            q.breakable("")
            for idx, item in enumerate(("1", "2", "3")):
                if idx:
                    q.text(",")
                    q.breakable()
                q.text(item)
        q.breakable("")
        q.text("]")


def _call_with_indented_group(q: PrettyPrinter) -> None:
    with q.group(4, "call(", ")"):
        q.breakable("")
        q.text("first")
        q.text(",")
        q.breakable()
        q.text("second")


RENDER_CASES: tuple[RenderCase, ...] = (
    RenderCase(name="flat_when_it_fits", build=_a_or_b, maxwidth=10, expected="a b"),
    RenderCase(name="breaks_when_too_wide", build=_a_or_b, maxwidth=2, expected="a\nb"),
    RenderCase(name="exact_fit_stays_flat", build=_a_or_b, maxwidth=3, expected="a b"),
    RenderCase(name="nested_margin", build=_bracketed_x, maxwidth=1, expected="[\n  x\n]"),
    RenderCase(name="nested_margin_flat", build=_bracketed_x, maxwidth=3, expected="[x]"),
    RenderCase(
        name="outer_breaks_inner_stays_flat",
        build=_outer_breaks_inner_flat,
        maxwidth=10,
        expected="outer\n  ab c\n  tail-part",
    ),
    RenderCase(
        name="outer_and_inner_flat",
        build=_outer_breaks_inner_flat,
        maxwidth=20,
        expected="outer ab c tail-part",
    ),
    RenderCase(name="trailing_text_counts", build=_trailing_text, maxwidth=8, expected="aaa\nbbbccc"),
    RenderCase(name="trailing_text_fits", build=_trailing_text, maxwidth=10, expected="aaa bbbccc"),
    RenderCase(name="forced_break_ignores_width", build=_forced_break, maxwidth=80, expected="a\nb"),
    RenderCase(name="fill_breaks_individually", build=_fill, maxwidth=9, expected="aaaa bbbb\ncc"),
    RenderCase(name="list_flat", build=_list, maxwidth=9, expected="[1, 2, 3]"),
    RenderCase(name="list_broken", build=_list, maxwidth=8, expected="[\n  1,\n  2,\n  3\n]"),
    RenderCase(
        name="group_indent_wraps_content",
        build=_call_with_indented_group,
        maxwidth=12,
        expected="call(\n    first,\n    second)",
    ),
    RenderCase(
        name="group_indent_flat",
        build=_call_with_indented_group,
        maxwidth=80,
        expected="call(first, second)",
    ),
)


def case_id(case: RenderCase) -> str:
    return case.name
