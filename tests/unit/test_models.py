"""Tests for data models."""

import pytest
from pydantic import ValidationError

from rnareport.data import DEFAULT_REPORT_DATA, default_report
from rnareport.models import (
    AlteredGene,
    GeneExpression,
    GeneFusion,
    MutatedGene,
    Report,
    SampleInfo,
    ValidationIssue,
)


class TestReport:
    """Tests for the Report aggregate."""

    def test_default_report_loads(self):
        report = default_report()
        assert report.sample_info.cancer_type == "Pancreatic Adenocarcinoma"
        assert len(report.gene_expressions) == 15
        assert len(report.gene_fusions) == 3
        assert report.summary_stats.total_genes_analyzed == 19847

    def test_default_report_is_a_fresh_copy(self):
        first = default_report()
        first.gene_fusions.clear()
        assert len(default_report().gene_fusions) == 3

    def test_camel_case_round_trip(self):
        dumped = default_report().to_json_dict()
        assert set(dumped) == set(DEFAULT_REPORT_DATA)
        assert dumped["geneExpressions"][0]["hasMutation"] is True
        assert dumped["geneExpressions"][2]["hasCNV"] == "loss"
        assert Report.model_validate(dumped) == default_report()

    def test_integer_values_stay_integers(self):
        expression = default_report().gene_expressions[0]
        assert expression.percentile == 92
        assert isinstance(expression.percentile, int)

    def test_sample_info_required(self):
        with pytest.raises(ValidationError):
            Report.model_validate({})

    def test_snake_case_names_accepted(self):
        info = SampleInfo(
            sample_id="S1", patient_id="P1", cancer_type="Glioma",
            reference_cohort="TCGA", analysis_date="2024-06-01",
        )
        assert info.to_json_dict()["sampleId"] == "S1"

    def test_expressions_by_category(self):
        hrd = [e.gene for e in default_report().expressions_by_category("hrd")]
        assert hrd == ["BRCA2", "BRCA1", "ATM", "PALB2"]


class TestRecords:
    """Tests for individual section records."""

    @pytest.mark.parametrize("z,up,down", [
        (2.0, True, False),
        (1.99, False, False),
        (-2.0, False, True),
        (None, False, False),
    ])
    def test_regulation(self, z, up, down):
        expression = GeneExpression(gene="MYC", z_score=z)
        assert expression.is_upregulated is up
        assert expression.is_downregulated is down

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            GeneExpression(gene="MYC", category="kinase")

    def test_fusion_name(self):
        assert GeneFusion(gene5="EML4", gene3="ALK").name == "EML4::ALK"

    def test_vaf_range(self):
        with pytest.raises(ValidationError):
            MutatedGene(gene="KRAS", vaf=1.5)


class TestDerived:
    """Tests for AlteredGene and ValidationIssue."""

    def test_add_resource_deduplicates(self):
        gene = AlteredGene(gene="ALK")
        gene.add_resource("COSMIC")
        gene.add_resource("VICC")
        gene.add_resource("COSMIC")
        assert gene.resources == ["COSMIC", "VICC"]

    def test_altered_gene_serialises_camel_case(self):
        dumped = AlteredGene(gene="ALK", ensembl_id="ENSG00000171094").model_dump(by_alias=True)
        assert dumped["ensemblId"] == "ENSG00000171094"

    def test_issue_str(self):
        issue = ValidationIssue(field="mutatedGenes[0].tier", message="must be one of: 1, 2, 3, 4")
        assert str(issue) == "mutatedGenes[0].tier: must be one of: 1, 2, 3, 4"
