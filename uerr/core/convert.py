"""Conversions from ordinary errors into reports."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from uerr.core.report import ErrorReport
from uerr.output.console import default_console

if TYPE_CHECKING:
    from uerr.output.console import ConsoleProtocol

__all__ = ["MISSING_CODE_NOTE", "into_report", "unwrap_io"]

T = TypeVar("T")

MISSING_CODE_NOTE = "note: the error code could not be found for this variant; reverting to -1..."


def into_report(value: object, *, console: ConsoleProtocol | None = None) -> ErrorReport:
    """Convert any value into an ErrorReport, using ``str(value)`` as the message.

    Example:
        try:
            contents = Path("names.txt").read_text()
        except OSError as e:
            into_report(e).render_all("myprogram: ").exit(e.errno or -1)
    """
    return ErrorReport.from_error(value, console=console)


def unwrap_io(
    prefix: object,
    operation: Callable[[], T],
    *,
    console: ConsoleProtocol | None = None,
) -> T:
    """Run an I/O operation, or report its OSError and exit.

    ``operation`` takes no arguments; bind them with functools.partial or a
    lambda. On success its return value is passed through. On OSError the
    error is rendered with ``prefix`` and the process exits with its errno.
    Errors without an errno exit with -1 after a note. Any other exception
    propagates unchanged.

    Example:
        names = unwrap_io("myprogram: ", partial(Path("names.txt").read_text, encoding="utf-8"))
    """
    try:
        return operation()
    except OSError as e:
        sink = console if console is not None else default_console()
        code = e.errno
        if code is None:
            sink.write(MISSING_CODE_NOTE)
            code = -1
        into_report(e, console=sink).render_all(prefix).exit(code)
