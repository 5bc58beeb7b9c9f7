"""Human-readable error reports for command-line programs."""

from .core import (
    ErrorReport,
    into_report,
    unwrap_io,
)
from .output import ConsoleProtocol, MockConsole, RichConsole

__version__ = "0.1.0"

__all__ = [
    "ConsoleProtocol",
    "ErrorReport",
    "MockConsole",
    "RichConsole",
    "into_report",
    "unwrap_io",
]
