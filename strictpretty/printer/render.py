"""Render pass: resolves a document tree against a width budget.

Lindig's "Strictly Pretty" formulation of Wadler's printer. A single explicit
command stack walks the tree; each group decides between flat and break mode
with a bounded lookahead (`fits`) that also accounts for whatever follows the
group on the same line.
"""

import logging
from enum import IntEnum
from typing import Any

from strictpretty.doc.nodes import Align, Breakable, Group, Text
from strictpretty.indent import IndentLevel
from strictpretty.printer.options import PrintOptions
from strictpretty.sink import OutputSink

logger = logging.getLogger(__name__)


class PrintMode(IntEnum):
    """How breakables are resolved for the content being rendered."""

    BREAK = 1
    FLAT = 2


type Command = tuple[IndentLevel, PrintMode, Any]


def render(root: Group, output: OutputSink, options: PrintOptions) -> None:
    """Write `root` into `output`, breaking lines to respect `options.maxwidth`."""
    maxwidth = options.maxwidth
    newline = options.newline
    debug = logger.isEnabledFor(logging.DEBUG)

    # Column on the current line; reset to the margin length on every newline.
    position = 0
    commands: list[Command] = [(IndentLevel.initial(options.genspace, options.root_margin), PrintMode.BREAK, root)]

    # Groups nested in content already committed to flat mode are not measured again.
    should_remeasure = True

    while commands:
        indent, mode, doc = commands.pop()

        match doc:
            case Text():
                for fragment in doc.fragments:
                    output.append(fragment)
                position += doc.width
            case list():
                commands.extend((indent, mode, part) for part in reversed(doc))
            case Align():
                commands.append((indent.align(doc.indent), mode, doc.contents))
            case Group():
                if mode == PrintMode.FLAT and not should_remeasure:
                    commands.append((indent, PrintMode.BREAK if doc.is_broken else PrintMode.FLAT, doc.contents))
                    continue

                should_remeasure = False
                next_cmd: Command = (indent, PrintMode.FLAT, doc.contents)
                remaining = maxwidth - position
                if not doc.is_broken and fits(next_cmd, commands, remaining):
                    commands.append(next_cmd)
                else:
                    commands.append((indent, PrintMode.BREAK, doc.contents))

                if debug:
                    logger.debug(
                        "group depth=%d resolved %s (remaining=%d)",
                        doc.depth,
                        commands[-1][1].name,
                        remaining,
                    )
            case Breakable():
                if mode == PrintMode.FLAT:
                    output.append(doc.separator)
                    position += doc.width
                    continue

                output.append(newline)
                if doc.indent:
                    output.append(indent.value)
                    position = indent.length
                elif indent.root is not None:
                    output.append(indent.root.value)
                    position = indent.root.length
                else:
                    position = 0
            case _:
                # Opaque marker nodes pass through untouched and take no columns.
                output.append(doc)


def fits(next_command: Command, rest_commands: list[Command], remaining: int) -> bool:
    """Whether `next_command` and what follows it fit in `remaining` columns.

    Succeeds at the first breakable rendered in break mode or when every
    command has been measured; fails as soon as the budget goes negative.
    `rest_commands` is only read, from the top of the stack down.
    """
    rest_index = len(rest_commands)
    commands: list[Command] = [next_command]

    while remaining >= 0:
        if not commands:
            if rest_index == 0:
                return True
            rest_index -= 1
            commands.append(rest_commands[rest_index])
            continue

        indent, mode, doc = commands.pop()

        match doc:
            case Text():
                remaining -= doc.width
            case list():
                commands.extend((indent, mode, part) for part in reversed(doc))
            case Align():
                commands.append((indent.align(doc.indent), mode, doc.contents))
            case Group():
                commands.append((indent, PrintMode.BREAK if doc.is_broken else mode, doc.contents))
            case Breakable():
                if mode == PrintMode.BREAK:
                    return True
                remaining -= doc.width

    return False
