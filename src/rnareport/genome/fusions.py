"""Fusion breakpoint parsing and link placement on the genome layout."""

import re
from dataclasses import dataclass
from typing import Iterable

from rnareport.config.debug import get_logger
from rnareport.genome.geometry import PlotGeometry, link_path
from rnareport.genome.layout import GenomeLayout
from rnareport.models.report import GeneFusion

logger = get_logger(__name__)

# "chr21:41498117", "21:41,498,117", "chrX:100"
BREAKPOINT_PATTERN = re.compile(r'^\s*(?:chr)?([A-Za-z0-9_]+)\s*:\s*([\d,]+)\s*$', re.IGNORECASE)


@dataclass(frozen=True)
class Breakpoint:
    """A genomic coordinate. `chromosome` carries no "chr" prefix."""

    chromosome: str
    position: int

    def __str__(self) -> str:
        return f"chr{self.chromosome}:{self.position}"


@dataclass(frozen=True)
class FusionLink:
    """A fusion placed on the circle: both partner breakpoints and their angles."""

    gene5: str
    gene3: str
    breakpoint5: Breakpoint
    breakpoint3: Breakpoint
    angle5: float
    angle3: float

    @property
    def name(self) -> str:
        return f"{self.gene5}::{self.gene3}"

    @property
    def intrachromosomal(self) -> bool:
        return self.breakpoint5.chromosome == self.breakpoint3.chromosome

    def path(self, geometry: PlotGeometry) -> str:
        return link_path(self.angle5, self.angle3, geometry.link_radius, geometry.cx, geometry.cy)

    def describe(self) -> str:
        return f"{self.name} ({self.breakpoint5.chromosome}:{self.breakpoint5.position:,} -> " \
               f"{self.breakpoint3.chromosome}:{self.breakpoint3.position:,})"


def parse_breakpoint(text: str) -> Breakpoint | None:
    """Parse "chr<id>:<position>".

    Returns:
        Breakpoint, or None when the text is not a breakpoint.
    """
    if not text:
        return None
    match = BREAKPOINT_PATTERN.match(text)
    if not match:
        return None
    chromosome = match.group(1)
    # Keep "X"/"Y"/"MT" upper-case regardless of input case
    if not chromosome.isdigit():
        chromosome = chromosome.upper()
    return Breakpoint(chromosome=chromosome, position=int(match.group(2).replace(",", "")))


def build_fusion_links(fusions: Iterable[GeneFusion], layout: GenomeLayout) -> list[FusionLink]:
    """Place every fusion with two parsable breakpoints on the layout.

    Breakpoints on chromosomes missing from the layout fall back to angle 0.
    """
    links = []
    for fusion in fusions:
        bp5 = parse_breakpoint(fusion.breakpoint5)
        bp3 = parse_breakpoint(fusion.breakpoint3)
        if bp5 is None or bp3 is None:
            logger.debug("Skipping fusion %s: unparsable breakpoints %r / %r",
                         fusion.name, fusion.breakpoint5, fusion.breakpoint3)
            continue
        links.append(FusionLink(
            gene5=fusion.gene5,
            gene3=fusion.gene3,
            breakpoint5=bp5,
            breakpoint3=bp3,
            angle5=layout.position_angle(bp5.chromosome, bp5.position),
            angle3=layout.position_angle(bp3.chromosome, bp3.position),
        ))
    return links
