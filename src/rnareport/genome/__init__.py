"""Circular genome coordinate mapping.

Example:
    >>> from rnareport.data import GRCH38_CHROMOSOMES
    >>> from rnareport.genome import compute_layout
    >>> layout = compute_layout(GRCH38_CHROMOSOMES)
    >>> layout.position_angle("21", 41498117)
"""

from rnareport.genome.layout import Chromosome, ChromosomeArc, GenomeLayout, compute_layout
from rnareport.genome.geometry import (
    PlotGeometry,
    polar_to_cartesian,
    arc_path,
    link_path,
    bezier_points,
    label_placement,
)
from rnareport.genome.fusions import Breakpoint, FusionLink, parse_breakpoint, build_fusion_links

__all__ = [
    "Chromosome",
    "ChromosomeArc",
    "GenomeLayout",
    "compute_layout",
    "PlotGeometry",
    "polar_to_cartesian",
    "arc_path",
    "link_path",
    "bezier_points",
    "label_placement",
    "Breakpoint",
    "FusionLink",
    "parse_breakpoint",
    "build_fusion_links",
]
