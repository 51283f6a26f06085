"""Table views of the active report and their CSV / clipboard export.

Each section of the dashboard shows one TableView: an ordered list of
declared columns, a row builder over the Report and the keys its search box
matches against. Rows are display-ready strings, so the exported file shows
exactly what the table shows.

Export goes through pandas, which quotes any cell containing the
delimiter, a quote character or a newline.
"""

import io
from dataclasses import dataclass
from typing import Any, Callable

import pandas as pd

from rnareport.config.constants import CATEGORY_LABELS
from rnareport.errors import NotFoundError
from rnareport.findings import aggregate
from rnareport.models.report import Report


Row = dict[str, str]


@dataclass(frozen=True)
class Column:
    key: str
    label: str


@dataclass(frozen=True)
class TableView:
    """A named table: columns in display order, row builder, searchable keys."""

    name: str
    title: str
    columns: tuple[Column, ...]
    build: Callable[[Report], list[dict[str, Any]]]
    search_keys: tuple[str, ...] = ("gene",)

    def rows(self, report: Report, search: str | None = None) -> list[Row]:
        rows = [{c.key: format_cell(r.get(c.key)) for c in self.columns} for r in self.build(report)]
        return filter_rows(rows, search, self.search_keys)

    def to_frame(self, report: Report, search: str | None = None) -> pd.DataFrame:
        return rows_to_frame(self.columns, self.rows(report, search))


def format_cell(value: Any) -> str:
    """Render one value as table text. Missing values become ""."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (list, tuple)):
        return "; ".join(format_cell(v) for v in value)
    return str(value)


def filter_rows(rows: list[Row], search: str | None, keys: tuple[str, ...]) -> list[Row]:
    """Keep rows where any of `keys` contains `search` (case-insensitive)."""
    if not search:
        return rows
    needle = search.lower()
    return [r for r in rows if any(needle in r.get(k, "").lower() for k in keys)]


def rows_to_frame(columns: tuple[Column, ...], rows: list[Row]) -> pd.DataFrame:
    frame = pd.DataFrame(rows, columns=[c.key for c in columns], dtype=object)
    return frame.rename(columns={c.key: c.label for c in columns})


def export_delimited(columns: tuple[Column, ...], rows: list[Row], delimiter: str = ",") -> str:
    """Header line of column labels, then one line per row, in column order."""
    buffer = io.StringIO()
    rows_to_frame(columns, rows).to_csv(buffer, index=False, sep=delimiter, na_rep="", lineterminator="\n")
    return buffer.getvalue()


def export_csv(columns: tuple[Column, ...], rows: list[Row]) -> str:
    return export_delimited(columns, rows, ",")


def export_tsv(columns: tuple[Column, ...], rows: list[Row]) -> str:
    """Tab-separated text for the copy-to-clipboard action."""
    return export_delimited(columns, rows, "\t")


# =============================================================================
# ROW BUILDERS
# =============================================================================

def _findings_rows(report: Report) -> list[dict[str, Any]]:
    return [
        {
            "gene": g.gene,
            "mutated": "Yes" if g.mutated else "-",
            "fusion": "Yes" if g.fusion else "-",
            "sv": "Yes" if g.sv else "-",
            "cn": "Yes" if g.cn else "-",
            "immune": "Yes" if g.immune else "-",
            "hrd": "Yes" if g.hrd else "-",
            "resources": g.resources,
            "count": g.count,
        }
        for g in aggregate(report)
    ]


def _expression_rows(report: Report) -> list[dict[str, Any]]:
    ordered = sorted(
        report.gene_expressions,
        key=lambda e: abs(e.z_score) if e.z_score is not None else -1,
        reverse=True,
    )
    return [
        {
            "gene": e.gene,
            "ensemblId": e.ensembl_id,
            "zScore": e.z_score,
            "percentile": e.percentile,
            "tpm": e.tpm,
            "cohortMedian": e.cohort_median,
            "category": CATEGORY_LABELS.get(e.category, e.category),
        }
        for e in ordered
    ]


def _records(attr: str) -> Callable[[Report], list[dict[str, Any]]]:
    def build(report: Report) -> list[dict[str, Any]]:
        return [record.model_dump(by_alias=True) for record in getattr(report, attr)]
    return build


TABLES: dict[str, TableView] = {
    view.name: view
    for view in (
        TableView(
            name="findings",
            title="Findings summary",
            columns=(
                Column("gene", "Gene"),
                Column("mutated", "Mutated"),
                Column("fusion", "Fusion"),
                Column("sv", "SV"),
                Column("cn", "CN"),
                Column("immune", "Immune"),
                Column("hrd", "HRD"),
                Column("resources", "Resources"),
                Column("count", "Count"),
            ),
            build=_findings_rows,
        ),
        TableView(
            name="expression",
            title="Gene expression",
            columns=(
                Column("gene", "Gene"),
                Column("ensemblId", "ENSEMBL"),
                Column("zScore", "Z-score"),
                Column("percentile", "Percentile"),
                Column("tpm", "TPM"),
                Column("cohortMedian", "Cohort median"),
                Column("category", "Category"),
            ),
            build=_expression_rows,
            search_keys=("gene", "ensemblId"),
        ),
        TableView(
            name="mutations",
            title="Mutated genes",
            columns=(
                Column("gene", "Gene"),
                Column("variant", "Variant"),
                Column("consequence", "Consequence"),
                Column("vaf", "VAF"),
                Column("tier", "Tier"),
                Column("zScore", "Z-score"),
                Column("expression", "Expression"),
            ),
            build=_records("mutated_genes"),
            search_keys=("gene", "variant"),
        ),
        TableView(
            name="fusions",
            title="Fusion genes",
            columns=(
                Column("gene5", "5' gene"),
                Column("gene3", "3' gene"),
                Column("breakpoint5", "5' breakpoint"),
                Column("breakpoint3", "3' breakpoint"),
                Column("junctionReads", "Junction reads"),
                Column("spanningFrags", "Spanning fragments"),
                Column("ffpm", "FFPM"),
                Column("inFrame", "In frame"),
                Column("cancerRelevant", "Cancer relevant"),
                Column("database", "Databases"),
            ),
            build=_records("gene_fusions"),
            search_keys=("gene5", "gene3"),
        ),
        TableView(
            name="cnv",
            title="CN altered genes",
            columns=(
                Column("gene", "Gene"),
                Column("chromosome", "Cytoband"),
                Column("copyNumber", "Copy number"),
                Column("type", "Type"),
                Column("zScore", "Z-score"),
            ),
            build=_records("cnv_genes"),
        ),
        TableView(
            name="drugs",
            title="Drug matches",
            columns=(
                Column("drug", "Drug"),
                Column("gene", "Gene"),
                Column("evidenceLevel", "Evidence"),
                Column("association", "Association"),
                Column("source", "Source"),
                Column("cancerType", "Cancer type"),
                Column("expressionSupport", "Expression support"),
            ),
            build=_records("drug_matches"),
            search_keys=("drug", "gene"),
        ),
        TableView(
            name="immune",
            title="Immune markers",
            columns=(
                Column("marker", "Marker"),
                Column("value", "Value"),
                Column("percentile", "Percentile"),
                Column("interpretation", "Interpretation"),
            ),
            build=_records("immune_markers"),
            search_keys=("marker",),
        ),
    )
}


def get_table(name: str) -> TableView:
    """Look up a table view by name.

    Raises:
        NotFoundError: For unknown table names.
    """
    try:
        return TABLES[name]
    except KeyError:
        raise NotFoundError(f"Unknown table {name!r}; expected one of: {', '.join(TABLES)}") from None
