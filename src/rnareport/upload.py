"""Upload boundary: turn a user-supplied file into the active report.

ARCHITECTURE:
    file bytes → parse_report_text() → validate() → merge_with_defaults()
               → Report → ReportStore.load_data()

Parse and validation failures stop here. They are converted into an
UploadResult carrying a user-facing message, and the store keeps its
previous report. Nothing is retried.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from rnareport.config.constants import UPLOAD_EXTENSION
from rnareport.config.debug import get_logger
from rnareport.data.default_report import default_report_data
from rnareport.errors import ReportParseError, ReportValidationError, UnsupportedFileError
from rnareport.models.issues import ValidationIssue
from rnareport.models.report import Report
from rnareport.validation import validate

logger = get_logger(__name__)

# Top-level keys of the upload format, in Report field order
REPORT_KEYS: tuple[str, ...] = (
    "sampleInfo",
    "summaryStats",
    "geneExpressions",
    "geneFusions",
    "mutatedGenes",
    "cnvGenes",
    "drugMatches",
    "immuneMarkers",
)


@dataclass
class UploadResult:
    """Outcome of one upload attempt, ready to show to the user."""

    ok: bool
    message: str
    filename: str = ""
    errors: list[ValidationIssue] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)


def parse_report_text(content: str | bytes) -> Any:
    """Decode and parse an uploaded file.

    Raises:
        ReportParseError: If the bytes are not UTF-8 or the text is not JSON.
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ReportParseError(f"file is not UTF-8 text ({e.reason})") from e
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ReportParseError(e.msg, line=e.lineno, column=e.colno) from e


def merge_with_defaults(candidate: dict[str, Any]) -> dict[str, Any]:
    """Replace every omitted (or null) top-level section with the default one.

    Sections are swapped whole; records are never merged.
    """
    defaults = default_report_data()
    return {
        key: candidate[key] if candidate.get(key) is not None else defaults[key]
        for key in REPORT_KEYS
    }


def _format_loc(loc: tuple) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "root"


def _issues_from_pydantic(exc: PydanticValidationError) -> list[ValidationIssue]:
    return [
        ValidationIssue(field=_format_loc(err["loc"]), message=err["msg"])
        for err in exc.errors()
    ]


def build_report(candidate: Any) -> Report:
    """Validate a parsed document and build the Report it describes.

    The rules table runs first. Sections it leaves unchecked (fusions,
    immune markers, typed scalars) are then enforced by the Report model,
    whose errors are reported the same way.

    Raises:
        ReportValidationError: With every issue found.
    """
    issues = validate(candidate)
    if issues:
        raise ReportValidationError(issues)

    try:
        return Report.model_validate(merge_with_defaults(candidate))
    except PydanticValidationError as e:
        raise ReportValidationError(_issues_from_pydantic(e)) from e


def check_filename(filename: str) -> None:
    """Raises UnsupportedFileError unless the name ends with .json."""
    if not filename.lower().endswith(UPLOAD_EXTENSION):
        raise UnsupportedFileError(f"Please upload a JSON file (got {filename!r})")


def load_upload(store, filename: str, content: str | bytes) -> UploadResult:
    """Try to replace the store's report with an uploaded file.

    Args:
        store: The ReportStore to update.
        filename: Original file name (must end with .json).
        content: Raw file content.

    Returns:
        UploadResult. On failure the store is left unchanged.
    """
    try:
        check_filename(filename)
        report = build_report(parse_report_text(content))
    except UnsupportedFileError as e:
        logger.warning("Rejected upload %s: %s", filename, e)
        return UploadResult(ok=False, message=str(e), filename=filename)
    except ReportParseError as e:
        logger.warning("Rejected upload %s: %s", filename, e)
        return UploadResult(
            ok=False,
            message=f"Failed to parse JSON file. Please check the file format. {e}",
            filename=filename,
        )
    except ReportValidationError as e:
        logger.warning("Rejected upload %s: %d validation error(s)", filename, e.count)
        return UploadResult(ok=False, message=e.summary(), filename=filename, errors=e.issues)

    store.load_data(report)
    logger.info("Loaded patient data from %s (sample %s)", filename, report.sample_info.sample_id)
    return UploadResult(ok=True, message=f"Loaded patient data from {filename}", filename=filename)
