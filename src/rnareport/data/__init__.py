"""Built-in reference data: the demo report and the GRCh38 chromosome table."""

from rnareport.data.default_report import DEFAULT_REPORT_DATA, default_report, default_report_data
from rnareport.data.chromosomes import GRCH38_CHROMOSOMES

__all__ = [
    "DEFAULT_REPORT_DATA",
    "default_report",
    "default_report_data",
    "GRCH38_CHROMOSOMES",
]
