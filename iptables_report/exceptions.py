"""
Custom exceptions for iptables denial reporting.

Only failures that abort a run are modelled here. Malformed log lines are
never errors: the parser drops or repairs them silently.
"""

from typing import Optional


class IptablesReportError(Exception):
    """Base exception for all iptables report errors.

    Attributes:
        file_path: Path of the file involved, if any.
    """

    def __init__(self, message: str, file_path: Optional[str] = None) -> None:
        self.file_path = file_path
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.file_path:
            return f"{base} (file: {self.file_path})"
        return base


class LogReadError(IptablesReportError):
    """Raised when the log source cannot be opened or read."""

    pass


class ReportRenderError(IptablesReportError):
    """Raised when a report cannot be encoded as JSON."""

    pass


class ReportWriteError(IptablesReportError):
    """Raised when a rendered report cannot be saved."""

    pass
