"""Document tree."""

from strictpretty.doc.dump import dump_doc
from strictpretty.doc.nodes import Align, Breakable, Doc, DocSequence, Group, Text

__all__ = [
    "Align",
    "Breakable",
    "Doc",
    "DocSequence",
    "Group",
    "Text",
    "dump_doc",
]
