"""Output sinks the renderer writes resolved fragments into."""

from dataclasses import dataclass, field
from typing import Any, Protocol, TextIO


class OutputSink(Protocol):
    def append(self, fragment: Any) -> None: ...


@dataclass(slots=True)
class StringSink:
    """In-memory sink; keeps appended objects in insertion order."""

    fragments: list[Any] = field(default_factory=list)

    def append(self, fragment: Any) -> None:
        self.fragments.append(fragment)

    def getvalue(self) -> str:
        return "".join(str(fragment) for fragment in self.fragments)

    def __str__(self) -> str:
        return self.getvalue()


class StreamSink:
    """Writes each fragment straight through to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream

    def append(self, fragment: Any) -> None:
        self._stream.write(str(fragment))
