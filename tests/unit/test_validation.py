"""Tests for the report validation rules."""

import math

import pytest

from rnareport.models import ValidationIssue
from rnareport.validation import validate
from rnareport.validation.rules import SECTION_KEYS, is_number, one_of


def fields(issues):
    return [issue.field for issue in issues]


class TestRoot:
    """The root must be a JSON object."""

    @pytest.mark.parametrize("candidate", [None, [], "report", 42, True])
    def test_non_object_root(self, candidate):
        assert validate(candidate) == [ValidationIssue(field="root", message="must be a JSON object")]

    def test_default_report_is_valid(self, default_data):
        assert validate(default_data) == []

    def test_minimal_document_is_valid(self, minimal_document):
        assert validate(minimal_document) == []


class TestSampleInfo:
    """Tests for sampleInfo rules."""

    def test_missing_sample_info(self):
        assert validate({}) == [ValidationIssue(field="sampleInfo", message="is required")]

    def test_sample_info_not_object(self):
        issues = validate({"sampleInfo": ["S1"]})
        assert issues == [ValidationIssue(field="sampleInfo", message="must be an object")]

    def test_each_missing_field_reported(self):
        issues = validate({"sampleInfo": {}})
        assert fields(issues) == [
            "sampleInfo.sampleId",
            "sampleInfo.patientId",
            "sampleInfo.cancerType",
            "sampleInfo.referenceCohort",
            "sampleInfo.analysisDate",
        ]
        assert all(issue.message == "is required" for issue in issues)

    def test_empty_string_is_missing(self, minimal_document):
        minimal_document["sampleInfo"]["cancerType"] = ""
        assert fields(validate(minimal_document)) == ["sampleInfo.cancerType"]

    @pytest.mark.parametrize("purity", [-0.1, 1.5, "0.5", True])
    def test_invalid_purity(self, minimal_document, purity):
        minimal_document["sampleInfo"]["purity"] = purity
        assert fields(validate(minimal_document)) == ["sampleInfo.purity"]

    @pytest.mark.parametrize("purity", [0, 1, 0.72, None])
    def test_valid_purity(self, minimal_document, purity):
        minimal_document["sampleInfo"]["purity"] = purity
        assert validate(minimal_document) == []

    def test_ploidy_has_no_range_check(self, minimal_document):
        minimal_document["sampleInfo"]["ploidy"] = 9.5
        assert validate(minimal_document) == []
        minimal_document["sampleInfo"]["ploidy"] = "diploid"
        assert fields(validate(minimal_document)) == ["sampleInfo.ploidy"]


class TestSections:
    """List sections and their per-item rules."""

    @pytest.mark.parametrize("key", SECTION_KEYS)
    def test_section_must_be_array(self, minimal_document, key):
        minimal_document[key] = {"gene": "KRAS"}
        assert validate(minimal_document) == [ValidationIssue(field=key, message="must be an array")]

    @pytest.mark.parametrize("key", SECTION_KEYS)
    def test_items_must_be_objects(self, minimal_document, key):
        minimal_document[key] = ["KRAS"]
        assert validate(minimal_document) == [ValidationIssue(field=f"{key}[0]", message="must be an object")]

    def test_expression_rules(self, minimal_document):
        minimal_document["geneExpressions"] = [
            {"gene": "KRAS", "zScore": 2.4, "category": "oncogene"},
            {"zScore": "high", "category": "kinase"},
        ]
        assert fields(validate(minimal_document)) == [
            "geneExpressions[1].gene",
            "geneExpressions[1].zScore",
            "geneExpressions[1].category",
        ]

    @pytest.mark.parametrize("tier", [0, 5, "1", 1.5, True])
    def test_invalid_tier(self, minimal_document, tier):
        minimal_document["mutatedGenes"] = [{"gene": "KRAS", "tier": tier}]
        issues = validate(minimal_document)
        assert issues == [ValidationIssue(field="mutatedGenes[0].tier", message="must be one of: 1, 2, 3, 4")]

    def test_tier_accepts_integral_float(self, minimal_document):
        minimal_document["mutatedGenes"] = [{"gene": "KRAS", "tier": 2.0}]
        assert validate(minimal_document) == []

    def test_vaf_range(self, minimal_document):
        minimal_document["mutatedGenes"] = [{"gene": "KRAS", "vaf": 1.2}]
        assert fields(validate(minimal_document)) == ["mutatedGenes[0].vaf"]

    def test_cnv_type(self, minimal_document):
        minimal_document["cnvGenes"] = [{"gene": "MYC", "type": "gain"}, {"gene": "CDKN2A", "type": "deletion"}]
        assert fields(validate(minimal_document)) == ["cnvGenes[1].type"]

    def test_drug_rules(self, minimal_document):
        minimal_document["drugMatches"] = [{"evidenceLevel": "E", "association": "response"}]
        assert fields(validate(minimal_document)) == [
            "drugMatches[0].drug",
            "drugMatches[0].evidenceLevel",
            "drugMatches[0].association",
        ]

    def test_null_section_treated_as_absent(self, minimal_document):
        minimal_document["geneFusions"] = None
        assert validate(minimal_document) == []

    def test_fusion_and_immune_items_not_field_checked(self, minimal_document):
        """Fusion and immune marker records only need to be objects."""
        minimal_document["geneFusions"] = [{"gene5": 1}, {}]
        minimal_document["immuneMarkers"] = [{"value": "high", "interpretation": "very high"}]
        assert validate(minimal_document) == []


class TestOrdering:
    """Issues are complete and come out in a fixed order."""

    def test_patient_id_then_tier(self, minimal_document):
        del minimal_document["sampleInfo"]["patientId"]
        minimal_document["mutatedGenes"] = [{"gene": "TP53", "tier": 5}]

        issues = validate(minimal_document)

        assert issues == [
            ValidationIssue(field="sampleInfo.patientId", message="is required"),
            ValidationIssue(field="mutatedGenes[0].tier", message="must be one of: 1, 2, 3, 4"),
        ]

    def test_tier_only_mutation_also_missing_gene(self, minimal_document):
        """A mutation record without a gene reports the gene before the tier."""
        del minimal_document["sampleInfo"]["patientId"]
        minimal_document["mutatedGenes"] = [{"tier": 5}]

        issues = validate(minimal_document)

        assert issues == [
            ValidationIssue(field="sampleInfo.patientId", message="is required"),
            ValidationIssue(field="mutatedGenes[0].gene", message="is required"),
            ValidationIssue(field="mutatedGenes[0].tier", message="must be one of: 1, 2, 3, 4"),
        ]

    def test_sections_in_declaration_order(self, minimal_document):
        minimal_document["drugMatches"] = "none"
        minimal_document["cnvGenes"] = [{"type": "gain"}]
        minimal_document["geneExpressions"] = [{}, {"gene": "X", "category": "other"}, {"category": "x"}]

        assert fields(validate(minimal_document)) == [
            "geneExpressions[0].gene",
            "geneExpressions[2].gene",
            "geneExpressions[2].category",
            "cnvGenes[0].gene",
            "drugMatches",
        ]

    def test_deterministic(self, minimal_document):
        minimal_document["sampleInfo"] = {"purity": 3}
        minimal_document["mutatedGenes"] = [{"tier": 9, "vaf": -1}, 7]
        first = validate(minimal_document)
        assert first == validate(minimal_document)
        assert len(first) == 10


class TestPredicates:
    """Tests for the rule predicates."""

    @pytest.mark.parametrize("value,expected", [
        (1, True), (0.5, True), (-3, True),
        (True, False), (None, False), ("1", False), (math.nan, False),
    ])
    def test_is_number(self, value, expected):
        assert is_number(value) is expected

    def test_one_of_rejects_bool(self):
        check = one_of((1, 2))
        assert check(1) is True
        assert check(True) is False
