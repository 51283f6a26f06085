"""Section summaries shown above the dashboard tables."""

from dataclasses import dataclass, field

from rnareport.config.constants import CLINICAL_TIERS
from rnareport.models.report import GeneExpression, Report


@dataclass
class MutationSummary:
    """Counts behind the "Mutated genes" findings sentence.

    Attributes:
        total: Mutated genes reported by the upstream pipeline (summaryStats)
        tiered: Variants with a tier between 1 and 4
        splice_region: Variants whose consequence mentions "splice"
        expression_measured: Variants with a z-score in the patient's sample
        by_tier: Variant count per tier
    """

    total: int
    tiered: int
    splice_region: int
    expression_measured: int
    by_tier: dict[int, int] = field(default_factory=dict)


def summarize_mutations(report: Report) -> MutationSummary:
    mutations = report.mutated_genes
    return MutationSummary(
        total=report.summary_stats.mutated_genes,
        tiered=sum(1 for m in mutations if m.tier in CLINICAL_TIERS),
        splice_region=sum(1 for m in mutations if "splice" in m.consequence),
        expression_measured=sum(1 for m in mutations if m.z_score is not None),
        by_tier={tier: sum(1 for m in mutations if m.tier == tier) for tier in CLINICAL_TIERS},
    )


def regulated_genes(report: Report) -> tuple[list[GeneExpression], list[GeneExpression]]:
    """Split expressions into (upregulated, downregulated), strongest first."""
    up = sorted((e for e in report.gene_expressions if e.is_upregulated), key=lambda e: -e.z_score)
    down = sorted((e for e in report.gene_expressions if e.is_downregulated), key=lambda e: e.z_score)
    return up, down


def mutated_gene_expressions(report: Report) -> list[GeneExpression]:
    """Expression records of mutated genes, ordered by |z| descending."""
    mutated = {m.gene for m in report.mutated_genes}
    return sorted(
        (e for e in report.gene_expressions if e.gene in mutated and e.z_score is not None),
        key=lambda e: abs(e.z_score),
        reverse=True,
    )
