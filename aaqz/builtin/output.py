"""Output collaborator for the println primitive."""

from __future__ import annotations

from typing import Protocol


class OutputSink(Protocol):
    def println(self, text: str) -> None: ...


class StdoutSink:
    """Writes each line to standard output."""

    def println(self, text: str) -> None:
        print(text)


class BufferSink:
    """Collects lines in memory, in the order they were written."""

    def __init__(self):
        self.lines: list[str] = []

    def println(self, text: str) -> None:
        self.lines.append(text)

    def getvalue(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)
