"""Data models for rnareport."""

from rnareport.models.report import (
    Report,
    SampleInfo,
    SummaryStats,
    GeneExpression,
    GeneFusion,
    MutatedGene,
    CNVGene,
    DrugMatch,
    ImmuneMarker,
)
from rnareport.models.findings import AlteredGene, SectionBucket
from rnareport.models.issues import ValidationIssue

__all__ = [
    "Report",
    "SampleInfo",
    "SummaryStats",
    "GeneExpression",
    "GeneFusion",
    "MutatedGene",
    "CNVGene",
    "DrugMatch",
    "ImmuneMarker",
    "AlteredGene",
    "SectionBucket",
    "ValidationIssue",
]
