"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    default_console,
)

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "default_console",
]
