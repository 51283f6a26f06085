"""Exceptions raised by rnareport.

Parse, validation and unsupported-file errors are recovered at the upload
boundary (rnareport.upload) and turned into user-facing messages; the active
report is never touched when one is raised. NotFoundError signals a
programming error and is not meant to be caught.
"""

from rnareport.config.constants import MAX_DISPLAYED_ERRORS
from rnareport.models.issues import ValidationIssue


class RNAReportError(Exception):
    """Base class for rnareport errors."""
    pass


class ReportParseError(RNAReportError):
    """Uploaded text is not valid JSON (or not valid UTF-8)."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"Invalid JSON{location}: {message}")


class ReportValidationError(RNAReportError):
    """Parsed document violates the report schema.

    Carries every issue found; the message lists at most
    MAX_DISPLAYED_ERRORS of them but always states the total.
    """

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = list(issues)
        super().__init__(self.summary())

    @property
    def count(self) -> int:
        return len(self.issues)

    def summary(self, limit: int = MAX_DISPLAYED_ERRORS) -> str:
        noun = "error" if self.count == 1 else "errors"
        lines = [f"Report failed validation with {self.count} {noun}:"]
        lines.extend(f"  - {issue}" for issue in self.issues[:limit])
        if self.count > limit:
            lines.append(f"  ... and {self.count - limit} more")
        return "\n".join(lines)


class UnsupportedFileError(RNAReportError):
    """Uploaded file does not have a .json extension."""
    pass


class NotFoundError(RNAReportError):
    """An accessor was used outside the scope it requires (programming error)."""
    pass
