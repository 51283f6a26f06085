"""Cartesian projection and SVG path builders for the circular genome plot."""

import math
from dataclasses import dataclass

from rnareport.config.constants import (
    DEFAULT_PLOT_HEIGHT,
    DEFAULT_PLOT_WIDTH,
    LABEL_OFFSET,
    LINK_INSET,
    PLOT_MARGIN,
    RING_WIDTH,
)


@dataclass(frozen=True)
class PlotGeometry:
    """Center and radii derived from the plot dimensions."""

    width: float = DEFAULT_PLOT_WIDTH
    height: float = DEFAULT_PLOT_HEIGHT

    @property
    def cx(self) -> float:
        return self.width / 2

    @property
    def cy(self) -> float:
        return self.height / 2

    @property
    def outer_radius(self) -> float:
        return min(self.width, self.height) / 2 - PLOT_MARGIN

    @property
    def inner_radius(self) -> float:
        return self.outer_radius - RING_WIDTH

    @property
    def link_radius(self) -> float:
        return self.inner_radius - LINK_INSET

    @property
    def label_radius(self) -> float:
        return self.outer_radius + LABEL_OFFSET

    def point(self, angle: float, radius: float) -> tuple[float, float]:
        return polar_to_cartesian(angle, radius, self.cx, self.cy)


def polar_to_cartesian(angle: float, radius: float, cx: float = 0.0, cy: float = 0.0) -> tuple[float, float]:
    """Project (angle, radius) around the center (cx, cy)."""
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def arc_path(
    start_angle: float,
    end_angle: float,
    inner_radius: float,
    outer_radius: float,
    cx: float = 0.0,
    cy: float = 0.0,
) -> str:
    """Closed ring segment: outer arc forward, radial in, inner arc back, close.

    The SVG large-arc flag is set when the span exceeds pi.
    """
    x1, y1 = polar_to_cartesian(start_angle, outer_radius, cx, cy)
    x2, y2 = polar_to_cartesian(end_angle, outer_radius, cx, cy)
    x3, y3 = polar_to_cartesian(end_angle, inner_radius, cx, cy)
    x4, y4 = polar_to_cartesian(start_angle, inner_radius, cx, cy)
    large_arc = 1 if end_angle - start_angle > math.pi else 0

    return " ".join([
        f"M {_fmt(x1)} {_fmt(y1)}",
        f"A {_fmt(outer_radius)} {_fmt(outer_radius)} 0 {large_arc} 1 {_fmt(x2)} {_fmt(y2)}",
        f"L {_fmt(x3)} {_fmt(y3)}",
        f"A {_fmt(inner_radius)} {_fmt(inner_radius)} 0 {large_arc} 0 {_fmt(x4)} {_fmt(y4)}",
        "Z",
    ])


def link_path(angle1: float, angle2: float, radius: float, cx: float = 0.0, cy: float = 0.0) -> str:
    """Quadratic Bezier between two points on the link radius, bowing through the center."""
    x1, y1 = polar_to_cartesian(angle1, radius, cx, cy)
    x2, y2 = polar_to_cartesian(angle2, radius, cx, cy)
    return f"M {_fmt(x1)} {_fmt(y1)} Q {_fmt(cx)} {_fmt(cy)} {_fmt(x2)} {_fmt(y2)}"


def bezier_points(
    angle1: float,
    angle2: float,
    radius: float,
    cx: float = 0.0,
    cy: float = 0.0,
    samples: int = 32,
) -> list[tuple[float, float]]:
    """Sample the same quadratic Bezier as link_path (for plotting libraries without path support)."""
    p0 = polar_to_cartesian(angle1, radius, cx, cy)
    p2 = polar_to_cartesian(angle2, radius, cx, cy)
    points = []
    for i in range(samples + 1):
        t = i / samples
        u = 1 - t
        x = u * u * p0[0] + 2 * u * t * cx + t * t * p2[0]
        y = u * u * p0[1] + 2 * u * t * cy + t * t * p2[1]
        points.append((x, y))
    return points


def label_placement(mid_angle: float, radius: float, cx: float = 0.0, cy: float = 0.0) -> tuple[float, float, float]:
    """Label anchor and rotation (degrees), flipped so text is never upside down."""
    x, y = polar_to_cartesian(mid_angle, radius, cx, cy)
    rotation = math.degrees(mid_angle)
    if rotation > 90 or rotation < -90:
        rotation += 180
    return x, y, rotation
