"""Console output abstraction.

Reports are written through a small protocol so the rendering code never
touches a stream directly. The production sink uses Rich bound to standard
error; tests capture output with MockConsole instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

__all__ = [
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "default_console",
]


class ConsoleProtocol(Protocol):
    """Protocol for the sink a report is rendered to."""

    def write(self, text: str) -> None:
        """Write a block of text followed by a newline.

        The block is emitted in a single call; it may span several lines.

        Args:
            text: The already formatted text
        """
        ...


class RichConsole:
    """Console implementation using Rich, writing to standard error.

    Report text is part of a fixed output format, so it bypasses Rich's
    renderer (which expands tabs and strips control characters) and goes
    straight to the console's stream.
    """

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._console = Console(stderr=True)

    def write(self, text: str) -> None:
        stream = self._console.file
        stream.write(f"{text}\n")
        stream.flush()


_default: RichConsole | None = None


def default_console() -> RichConsole:
    """Return the process-wide stderr console, creating it on first use."""
    global _default
    if _default is None:
        _default = RichConsole()
    return _default


def _empty_outputs() -> list[str]:
    """Factory for empty outputs list (helps type inference)."""
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing.

    Each write() call is kept as one entry in ``outputs``.
    """

    outputs: list[str] = field(default_factory=_empty_outputs)

    def write(self, text: str) -> None:
        self.outputs.append(text)

    # Test helper methods

    def clear(self) -> None:
        """Clear all captured output."""
        self.outputs.clear()

    @property
    def lines(self) -> list[str]:
        """Get every written line, across all writes."""
        return [line for block in self.outputs for line in block.split("\n")]

    @property
    def text(self) -> str:
        """Get all output as it would appear on the stream."""
        return "".join(f"{block}\n" for block in self.outputs)

    def find(self, substring: str) -> list[str]:
        """Find all lines containing a substring."""
        return [line for line in self.lines if substring in line]
