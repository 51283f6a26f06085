"""Report - the root aggregate rendered by the dashboard.

A Report is replaced wholesale (upload or reset) and never partially mutated.
Records in different sections reference each other only by gene symbol
(case-sensitive exact match).
"""

from typing import Literal

from pydantic import Field, field_validator

from rnareport.config.constants import EXPRESSION_Z_THRESHOLD
from rnareport.models.base import ReportModel


GeneCategory = Literal["oncogene", "tumor_suppressor", "drug_target", "immune", "hrd", "other"]
CNVType = Literal["gain", "loss"]
EvidenceLevel = Literal["A", "B", "C", "D"]
Association = Literal["sensitivity", "resistance"]
Interpretation = Literal["high", "normal", "low"]

# ints stay ints so that tables render "92" rather than "92.0"
Number = int | float


class SampleInfo(ReportModel):
    """Sample and patient identifiers for the analysed specimen."""

    sample_id: str
    patient_id: str
    cancer_type: str
    reference_cohort: str
    analysis_date: str
    library_id: str = ""
    purity: float | None = Field(default=None, ge=0, le=1)
    ploidy: float | None = None


class SummaryStats(ReportModel):
    """Precomputed counts. Informational only, never recomputed."""

    total_genes_analyzed: int = 0
    upregulated_genes: int = 0
    downregulated_genes: int = 0
    mutated_genes: int = 0
    fusions_detected: int = 0
    cnv_altered: int = 0
    drug_matches: int = 0
    tier_one_variants: int = 0


class GeneExpression(ReportModel):
    """Expression of one gene relative to the reference cohort."""

    gene: str
    ensembl_id: str = ""
    z_score: float | None = None
    percentile: Number | None = None
    tpm: Number | None = None
    cohort_median: Number | None = None
    has_mutation: bool = False
    has_cnv: CNVType | None = Field(default=None, alias="hasCNV")
    category: GeneCategory = "other"

    @field_validator("has_cnv", mode="before")
    @classmethod
    def _no_cnv(cls, value):
        # "none" is how reports spell an unaltered copy number
        return None if value == "none" else value

    @property
    def is_upregulated(self) -> bool:
        return self.z_score is not None and self.z_score >= EXPRESSION_Z_THRESHOLD

    @property
    def is_downregulated(self) -> bool:
        return self.z_score is not None and self.z_score <= -EXPRESSION_Z_THRESHOLD


class GeneFusion(ReportModel):
    """Fusion call between a 5' and a 3' partner gene.

    Breakpoints are "chr<id>:<position>" strings, e.g. "chr21:41498117".
    """

    gene5: str
    gene3: str
    breakpoint5: str = ""
    breakpoint3: str = ""
    junction_reads: int = 0
    spanning_frags: int = 0
    ffpm: float = 0.0
    in_frame: bool = False
    cancer_relevant: bool = False
    database: list[str] = Field(default_factory=list)

    @property
    def name(self) -> str:
        return f"{self.gene5}::{self.gene3}"


class MutatedGene(ReportModel):
    """Somatic SNV/indel with its clinical tier (1 = most significant)."""

    gene: str
    variant: str = ""
    consequence: str = ""
    vaf: float | None = Field(default=None, ge=0, le=1)
    tier: int | None = None
    z_score: float | None = None
    expression: Interpretation | None = None


class CNVGene(ReportModel):
    """Copy-number altered gene. `chromosome` holds the cytogenetic band."""

    gene: str
    chromosome: str = ""
    copy_number: int | None = None
    type: CNVType | None = None
    z_score: float | None = None


class DrugMatch(ReportModel):
    """Drug association for a gene (evidence level A is strongest)."""

    drug: str
    gene: str = ""
    evidence_level: EvidenceLevel | None = None
    association: Association | None = None
    source: str = ""
    cancer_type: str = ""
    expression_support: bool = False


class ImmuneMarker(ReportModel):
    marker: str = ""
    value: Number | None = None
    percentile: Number | None = None
    interpretation: Interpretation | None = None


class Report(ReportModel):
    """The complete report for one sample.

    Example:
        >>> report = Report.model_validate(json.loads(text))
        >>> report.sample_info.cancer_type
        'Pancreatic Adenocarcinoma'
    """

    sample_info: SampleInfo
    summary_stats: SummaryStats = Field(default_factory=SummaryStats)
    gene_expressions: list[GeneExpression] = Field(default_factory=list)
    gene_fusions: list[GeneFusion] = Field(default_factory=list)
    mutated_genes: list[MutatedGene] = Field(default_factory=list)
    cnv_genes: list[CNVGene] = Field(default_factory=list)
    drug_matches: list[DrugMatch] = Field(default_factory=list)
    immune_markers: list[ImmuneMarker] = Field(default_factory=list)

    def expressions_by_category(self, category: str) -> list[GeneExpression]:
        return [e for e in self.gene_expressions if e.category == category]
