"""Human-readable error reports.

An ErrorReport is a primary message plus ordered "reasons" (causes) and
"help" entries (remediation tips). It renders as aligned, prefixed text:

    uerr/error: could not open file
     - caused by: The system cannot find the file specified.
          |        Filler reason.
     + help: Does this file exist?
          |   Filler help.

Usage:
    ErrorReport("could not open file")
        .and_reason("The system cannot find the file specified.")
        .and_help("Does this file exist?")
        .render_all("uerr/error: ")
        .exit(1)
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING, NoReturn

from uerr.output.console import default_console

if TYPE_CHECKING:
    from uerr.output.console import ConsoleProtocol

__all__ = [
    "CONTINUATION_MARGIN",
    "ErrorReport",
    "HELP_LEAD_IN",
    "REASON_LEAD_IN",
    "continuation_for",
]

REASON_LEAD_IN = " - caused by: "
HELP_LEAD_IN = " + help: "

# Continuation lines start with this margin; the rest of the lead-in width
# is padded with spaces so entries line up under the first one.
CONTINUATION_MARGIN = "     |"


def continuation_for(lead_in: str) -> str:
    """Return the continuation prefix aligned with ``lead_in``."""
    return CONTINUATION_MARGIN + " " * (len(lead_in) - len(CONTINUATION_MARGIN))


def _block(entries: Iterable[str], lead_in: str) -> list[str]:
    lines: list[str] = []
    rest = continuation_for(lead_in)
    for entry in entries:
        lines.append(f"{rest if lines else lead_in}{entry}")
    return lines


class ErrorReport:
    """A message with ordered reasons and help, rendered for humans.

    The builder methods return the same instance so construction reads as
    a chain. Reasons and help are append-only.
    """

    __slots__ = ("_message", "_reasons", "_help", "_console")

    def __init__(self, message: object, *, console: ConsoleProtocol | None = None) -> None:
        self._message = str(message)
        self._reasons: list[str] = []
        self._help: list[str] = []
        self._console = console

    @classmethod
    def create(cls, message: object, *, console: ConsoleProtocol | None = None) -> ErrorReport:
        """Create a report with no reasons or help."""
        return cls(message, console=console)

    @classmethod
    def from_error(cls, error: object, *, console: ConsoleProtocol | None = None) -> ErrorReport:
        """Create a report whose message is ``str(error)``."""
        return cls(str(error), console=console)

    @property
    def message(self) -> str:
        return self._message

    @property
    def reasons(self) -> tuple[str, ...]:
        return tuple(self._reasons)

    @property
    def help(self) -> tuple[str, ...]:
        return tuple(self._help)

    def add_reason(self, reason: object) -> None:
        """Add a reason to this report."""
        self._reasons.append(str(reason))

    def add_help(self, help: object) -> None:
        """Add a help tip to this report."""
        self._help.append(str(help))

    def and_reason(self, reason: object) -> ErrorReport:
        """Add a reason to this report.

        Returns:
            The current instance.
        """
        self.add_reason(reason)
        return self

    def and_help(self, help: object) -> ErrorReport:
        """Add a help tip to this report.

        Returns:
            The current instance.
        """
        self.add_help(help)
        return self

    def render(self, prefix: object = "") -> str:
        """Format the report without writing it anywhere.

        No padding is inserted between the prefix and the message. Lines are
        joined with newlines; there is no trailing newline.
        """
        lines = [f"{prefix}{self._message}"]
        lines.extend(_block(self._reasons, REASON_LEAD_IN))
        lines.extend(_block(self._help, HELP_LEAD_IN))
        return "\n".join(lines)

    def render_all(self, prefix: object = "", console: ConsoleProtocol | None = None) -> ErrorReport:
        """Write the formatted report to the console in a single write.

        Args:
            prefix: Text placed directly before the message
            console: Sink to write to. Defaults to the report's own console,
                then to standard error.

        Returns:
            The current instance, so exit() can be chained.
        """
        sink = console if console is not None else self._console
        if sink is None:
            sink = default_console()
        sink.write(self.render(prefix))
        return self

    def exit(self, code: int) -> NoReturn:
        """Exit the process with ``code``.

        Nothing is rendered; chain after render_all(). On POSIX the platform
        keeps only the low 8 bits of the status, so -1 is seen as 255.
        """
        sys.exit(code)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"ErrorReport(message={self._message!r}, "
            f"reasons={self._reasons!r}, help={self._help!r})"
        )
