"""Readable dumps of document trees for debugging."""

from typing import Any

from strictpretty.doc.nodes import Align, Breakable, Group, Text


def dump_doc(node: Any, indent: str = "  ") -> list[str]:
    """Describe `node` and its descendants, one line per node."""
    lines: list[str] = []
    stack: list[tuple[int, Any]] = [(0, node)]

    while stack:
        level, doc = stack.pop()
        prefix = indent * level

        match doc:
            case Text():
                joined = "".join(str(fragment) for fragment in doc.fragments)
                lines.append(f"{prefix}Text width={doc.width} {joined!r}")
            case Breakable():
                lines.append(f"{prefix}Breakable width={doc.width} indent={doc.indent} {doc.separator!r}")
            case Align():
                lines.append(f"{prefix}Align indent={doc.indent}")
                stack.append((level + 1, doc.contents))
            case Group():
                lines.append(f"{prefix}Group depth={doc.depth} break={doc.is_broken}")
                stack.append((level + 1, doc.contents))
            case list():
                stack.extend((level, part) for part in reversed(doc))
            case _:
                lines.append(f"{prefix}{type(doc).__name__} {doc!r}")

    return lines
