"""Declarative rules table for uploaded report documents.

Each section of the report is described by the rules its fields must satisfy.
Adding a field check means adding a row here, not new branching code in the
validator. Rule order is the order in which issues are reported.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable

from rnareport.config.constants import (
    CLINICAL_TIERS,
    CNV_TYPES,
    DRUG_ASSOCIATIONS,
    EVIDENCE_LEVELS,
    GENE_CATEGORIES,
)

Check = Callable[[Any], bool]


# =============================================================================
# PREDICATES
# =============================================================================

def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_number(value: Any) -> bool:
    # bool is an int subclass but true/false are not numbers in JSON
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def is_fraction(value: Any) -> bool:
    return is_number(value) and 0 <= value <= 1


def one_of(allowed: tuple) -> Check:
    def check(value: Any) -> bool:
        if isinstance(value, bool):
            return False
        return value in allowed
    return check


def _choices(allowed: tuple) -> str:
    return "must be one of: " + ", ".join(str(a) for a in allowed)


# =============================================================================
# RULE TYPES
# =============================================================================

REQUIRED = "is required"


@dataclass(frozen=True)
class FieldRule:
    """Constraint on one key of an object.

    Required fields must satisfy `check`. Optional fields are only checked
    when present and not null.
    """

    key: str
    check: Check
    message: str
    required: bool = False


@dataclass(frozen=True)
class SectionRule:
    """A top-level list section and the rules applied to each of its items."""

    key: str
    item_rules: tuple[FieldRule, ...] = ()


# =============================================================================
# REPORT SCHEMA
# =============================================================================

SAMPLE_INFO_KEY = "sampleInfo"

SAMPLE_INFO_RULES: tuple[FieldRule, ...] = (
    FieldRule("sampleId", is_non_empty_string, REQUIRED, required=True),
    FieldRule("patientId", is_non_empty_string, REQUIRED, required=True),
    FieldRule("cancerType", is_non_empty_string, REQUIRED, required=True),
    FieldRule("referenceCohort", is_non_empty_string, REQUIRED, required=True),
    FieldRule("analysisDate", is_non_empty_string, REQUIRED, required=True),
    FieldRule("purity", is_fraction, "must be a number between 0 and 1"),
    FieldRule("ploidy", is_number, "must be a number"),
)

GENE_REQUIRED = FieldRule("gene", is_non_empty_string, REQUIRED, required=True)

# Fusions and immune markers only get the "list of objects" check
SECTION_RULES: tuple[SectionRule, ...] = (
    SectionRule("geneExpressions", (
        GENE_REQUIRED,
        FieldRule("zScore", is_number, "must be a number"),
        FieldRule("category", one_of(GENE_CATEGORIES), _choices(GENE_CATEGORIES)),
    )),
    SectionRule("geneFusions"),
    SectionRule("mutatedGenes", (
        GENE_REQUIRED,
        FieldRule("tier", one_of(CLINICAL_TIERS), _choices(CLINICAL_TIERS)),
        FieldRule("vaf", is_fraction, "must be a number between 0 and 1"),
    )),
    SectionRule("cnvGenes", (
        GENE_REQUIRED,
        FieldRule("type", one_of(CNV_TYPES), _choices(CNV_TYPES)),
    )),
    SectionRule("drugMatches", (
        FieldRule("drug", is_non_empty_string, REQUIRED, required=True),
        FieldRule("evidenceLevel", one_of(EVIDENCE_LEVELS), _choices(EVIDENCE_LEVELS)),
        FieldRule("association", one_of(DRUG_ASSOCIATIONS), _choices(DRUG_ASSOCIATIONS)),
    )),
    SectionRule("immuneMarkers"),
)

SECTION_KEYS: tuple[str, ...] = tuple(rule.key for rule in SECTION_RULES)
