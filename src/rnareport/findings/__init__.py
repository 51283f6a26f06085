"""Findings summary: genes consolidated across report sections."""

from rnareport.findings.aggregator import (
    aggregate,
    multi_section_genes,
    section_buckets,
    filter_genes,
)

__all__ = [
    "aggregate",
    "multi_section_genes",
    "section_buckets",
    "filter_genes",
]
