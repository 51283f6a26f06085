"""rnareport - RNA expression report dashboard core.

Validates uploaded report documents, consolidates genes found across report
sections, and maps genomic coordinates onto a circular genome plot.

Public API:
    >>> from rnareport import ReportStore, aggregate, validate
    >>> store = ReportStore()
    >>> genes = aggregate(store.report)
    >>> validate({"sampleInfo": None})
"""

__version__ = "0.1.0"

from rnareport.models import Report, AlteredGene, SectionBucket, ValidationIssue
from rnareport.validation import validate
from rnareport.findings import aggregate, multi_section_genes, section_buckets
from rnareport.genome import compute_layout, GenomeLayout, PlotGeometry
from rnareport.state import ReportStore
from rnareport.upload import load_upload, build_report, UploadResult
from rnareport.errors import (
    RNAReportError,
    ReportParseError,
    ReportValidationError,
    UnsupportedFileError,
    NotFoundError,
)

__all__ = [
    "__version__",
    # Models
    "Report",
    "AlteredGene",
    "SectionBucket",
    "ValidationIssue",
    # Core
    "validate",
    "aggregate",
    "multi_section_genes",
    "section_buckets",
    "compute_layout",
    "GenomeLayout",
    "PlotGeometry",
    # State and upload
    "ReportStore",
    "load_upload",
    "build_report",
    "UploadResult",
    # Errors
    "RNAReportError",
    "ReportParseError",
    "ReportValidationError",
    "UnsupportedFileError",
    "NotFoundError",
]
