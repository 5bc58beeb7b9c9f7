"""Core report type and conversions."""

from .convert import MISSING_CODE_NOTE, into_report, unwrap_io
from .report import (
    CONTINUATION_MARGIN,
    HELP_LEAD_IN,
    REASON_LEAD_IN,
    ErrorReport,
    continuation_for,
)

__all__ = [
    # report
    "CONTINUATION_MARGIN",
    "ErrorReport",
    "HELP_LEAD_IN",
    "REASON_LEAD_IN",
    "continuation_for",
    # convert
    "MISSING_CODE_NOTE",
    "into_report",
    "unwrap_io",
]
