"""Findings aggregation: consolidate genes that appear across report sections.

ARCHITECTURE:
    Report → aggregate() → list[AlteredGene] → multi_section_genes() → section_buckets()

Every gene symbol gets one accumulator. Each section (mutated, fusion, CN,
immune, HRD) flags a gene at most once, so `count` is the number of distinct
sections the gene was seen in, however often it repeats within a section.
Fusions count for both partners and contribute their database names as
resources. The result is sorted by count (descending) then gene symbol.

The engine never rejects input: it runs on reports that already passed
validation.
"""

from rnareport.config.constants import MULTI_SECTION_MIN_COUNT, SECTION_FLAGS, VICC_RESOURCE
from rnareport.config.debug import get_logger
from rnareport.models.findings import AlteredGene, SectionBucket
from rnareport.models.report import Report

logger = get_logger(__name__)


class _GeneAccumulator:
    """Get-or-create map of AlteredGene keyed by exact gene symbol."""

    def __init__(self):
        self._genes: dict[str, AlteredGene] = {}

    def get(self, gene: str, ensembl_id: str | None = None) -> AlteredGene:
        entry = self._genes.get(gene)
        if entry is None:
            entry = AlteredGene(gene=gene, ensembl_id=ensembl_id or "")
            self._genes[gene] = entry
        elif ensembl_id and not entry.ensembl_id:
            entry.ensembl_id = ensembl_id
        return entry

    def flag(self, gene: str, section: str, ensembl_id: str | None = None) -> AlteredGene:
        """Mark `gene` as seen in `section`, counting each section once."""
        entry = self.get(gene, ensembl_id)
        if not getattr(entry, section):
            setattr(entry, section, True)
            entry.count += 1
        return entry

    def values(self) -> list[AlteredGene]:
        return list(self._genes.values())


def _sort_key(gene: AlteredGene) -> tuple:
    return (-gene.count, gene.gene.casefold(), gene.gene)


def aggregate(report: Report) -> list[AlteredGene]:
    """Build the per-gene findings table for a report.

    Args:
        report: The active report.

    Returns:
        One AlteredGene per distinct gene symbol, sorted by count descending,
        ties broken alphabetically.

    Example:
        >>> genes = aggregate(report)
        >>> [(g.gene, g.count) for g in genes[:2]]
        [('BRCA2', 2), ('CDKN2A', 2)]
    """
    acc = _GeneAccumulator()

    for mutation in report.mutated_genes:
        acc.flag(mutation.gene, "mutated")

    for fusion in report.gene_fusions:
        for partner in (fusion.gene5, fusion.gene3):
            entry = acc.flag(partner, "fusion")
            for database in fusion.database:
                entry.add_resource(database)

    for cnv in report.cnv_genes:
        acc.flag(cnv.gene, "cn")

    for expression in report.expressions_by_category("immune"):
        acc.flag(expression.gene, "immune", expression.ensembl_id)

    for expression in report.expressions_by_category("hrd"):
        acc.flag(expression.gene, "hrd", expression.ensembl_id)

    genes = acc.values()
    for entry in genes:
        entry.add_resource(VICC_RESOURCE)

    genes.sort(key=_sort_key)
    logger.debug("Aggregated %d genes (%d in 2+ sections)",
                 len(genes), sum(1 for g in genes if g.count >= 2))
    return genes


def multi_section_genes(
    genes: list[AlteredGene],
    min_count: int = MULTI_SECTION_MIN_COUNT,
) -> list[AlteredGene]:
    """Genes seen in at least `min_count` sections, order preserved."""
    return [g for g in genes if g.count >= min_count]


def section_buckets(genes: list[AlteredGene]) -> list[SectionBucket]:
    """Group genes by section flag for the summary plot.

    Pass the output of multi_section_genes(). Empty buckets are omitted.
    """
    buckets = []
    for name, flag in SECTION_FLAGS:
        members = [g.gene for g in genes if getattr(g, flag)]
        if members:
            buckets.append(SectionBucket(name=name, value=len(members), genes=members))
    return buckets


def filter_genes(genes: list[AlteredGene], search: str | None) -> list[AlteredGene]:
    """Case-insensitive substring search on the gene symbol."""
    if not search:
        return list(genes)
    needle = search.lower()
    return [g for g in genes if needle in g.gene.lower()]
