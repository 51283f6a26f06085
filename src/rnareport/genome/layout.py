"""Chromosome arc layout for the circular genome plot.

Each chromosome gets a contiguous angular interval proportional to its
length. Intervals are laid out clockwise from ORIGIN_ANGLE (top of the
circle) with a constant gap after every chromosome, so that

    sum(span_i) + N * gap == 2 * pi

Angles are in radians, standard math convention, with y growing downwards
as in SVG; increasing angle therefore runs clockwise on screen.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable

from rnareport.config.constants import CHROMOSOME_GAP, ORIGIN_ANGLE
from rnareport.config.debug import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Chromosome:
    """Reference chromosome: identifier, length in base pairs, arc color."""

    id: str
    length: int
    color: str = "#888888"
    label: str | None = None

    def __post_init__(self):
        if self.length <= 0:
            raise ValueError(f"Chromosome {self.id} must have a positive length, got {self.length}")

    @property
    def display_label(self) -> str:
        return self.label or self.id


@dataclass(frozen=True)
class ChromosomeArc:
    """A chromosome placed on the circle as [start_angle, end_angle)."""

    chromosome: Chromosome
    start_angle: float
    end_angle: float

    @property
    def id(self) -> str:
        return self.chromosome.id

    @property
    def length(self) -> int:
        return self.chromosome.length

    @property
    def color(self) -> str:
        return self.chromosome.color

    @property
    def label(self) -> str:
        return self.chromosome.display_label

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2

    def position_angle(self, position: float) -> float:
        """Linear interpolation of a base-pair position within this arc."""
        return self.start_angle + (position / self.length) * self.span


@dataclass(frozen=True)
class GenomeLayout:
    """Ordered chromosome arcs plus lookup by chromosome id."""

    arcs: tuple[ChromosomeArc, ...]
    gap: float = CHROMOSOME_GAP
    _by_id: dict[str, ChromosomeArc] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_by_id", {arc.id: arc for arc in self.arcs})

    def __len__(self) -> int:
        return len(self.arcs)

    def __iter__(self):
        return iter(self.arcs)

    @property
    def total_length(self) -> int:
        return sum(arc.length for arc in self.arcs)

    @property
    def available_angle(self) -> float:
        return 2 * math.pi - self.gap * len(self.arcs)

    def arc(self, chromosome_id: str) -> ChromosomeArc | None:
        return self._by_id.get(chromosome_id)

    def position_angle(self, chromosome_id: str, position: float) -> float:
        """Angle of a genomic coordinate.

        Returns 0.0 when the chromosome is not part of the layout.
        """
        arc = self._by_id.get(chromosome_id)
        if arc is None:
            logger.debug("Chromosome %r not in layout, using angle 0", chromosome_id)
            return 0.0
        return arc.position_angle(position)


def compute_layout(
    chromosomes: Iterable[Chromosome],
    gap: float = CHROMOSOME_GAP,
    origin: float = ORIGIN_ANGLE,
) -> GenomeLayout:
    """Lay chromosomes out around the circle in table order.

    Args:
        chromosomes: Reference table, in display order.
        gap: Angular gap (radians) inserted after each chromosome.
        origin: Start angle of the first chromosome.

    Returns:
        GenomeLayout whose spans sum to 2*pi - gap*N.

    Raises:
        ValueError: If the gaps alone would use up the full circle.
    """
    chromosomes = list(chromosomes)
    if not chromosomes:
        return GenomeLayout(arcs=(), gap=gap)

    total_length = sum(c.length for c in chromosomes)
    available_angle = 2 * math.pi - gap * len(chromosomes)
    if available_angle <= 0:
        raise ValueError(f"Gap {gap} is too large for {len(chromosomes)} chromosomes")

    arcs = []
    cursor = origin
    for chromosome in chromosomes:
        span = (chromosome.length / total_length) * available_angle
        arcs.append(ChromosomeArc(chromosome, cursor, cursor + span))
        cursor = cursor + span + gap

    logger.debug("Laid out %d chromosomes (%d bp total)", len(arcs), total_length)
    return GenomeLayout(arcs=tuple(arcs), gap=gap)
