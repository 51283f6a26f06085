"""
Backend logic for the RNA report Streamlit app.

Builds the figures and table frames the dashboard shows from the active
Report. Nothing here touches Streamlit, so every function is testable on
its own.

ARCHITECTURE:
    ReportStore.report → findings / genome / tables → plotly figures, DataFrames

Figures:
    - Circos plot: chromosome ring, labels, fusion links through the center
    - Findings pie: genes present in 2+ sections, by section
    - Expression heatmap: z-scores by gene category
"""

import math
from typing import Dict, List, MutableMapping, Optional, Tuple

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from rnareport.config.constants import (
    CATEGORY_LABELS,
    GENE_CATEGORIES,
    INTERCHROMOSOMAL_COLOR,
    INTRACHROMOSOMAL_COLOR,
    SECTION_COLORS,
)
from rnareport.data import GRCH38_CHROMOSOMES
from rnareport.findings import multi_section_genes, section_buckets
from rnareport.genome import (
    ChromosomeArc,
    PlotGeometry,
    build_fusion_links,
    compute_layout,
    label_placement,
)
from rnareport.links import resource_url
from rnareport.models import AlteredGene, Report
from rnareport.state import ReportStore
from rnareport.tables import export_csv, export_tsv, get_table


ARC_STEPS_PER_TURN = 360


def _arc_polygon(arc: ChromosomeArc, geometry: PlotGeometry) -> Tuple[List[float], List[float]]:
    """Closed outline of one ring segment, outer edge then inner edge reversed."""
    steps = max(2, math.ceil(ARC_STEPS_PER_TURN * arc.span / (2 * math.pi)))
    angles = [arc.start_angle + arc.span * i / steps for i in range(steps + 1)]
    outer = [geometry.point(a, geometry.outer_radius) for a in angles]
    inner = [geometry.point(a, geometry.inner_radius) for a in reversed(angles)]
    points = outer + inner + outer[:1]
    return [p[0] for p in points], [p[1] for p in points]


def circos_figure(report: Report, width: float = 500, height: float = 500) -> go.Figure:
    """Circular genome plot of the report's fusions.

    Coordinates follow SVG conventions (y grows downward), so the y axis
    is reversed and the first chromosome starts at twelve o'clock.
    """
    geometry = PlotGeometry(width=width, height=height)
    layout = compute_layout(GRCH38_CHROMOSOMES)
    fig = go.Figure()

    for arc in layout:
        xs, ys = _arc_polygon(arc, geometry)
        fig.add_trace(go.Scatter(
            x=xs, y=ys, mode="lines", fill="toself",
            fillcolor=arc.color, line=dict(color="white", width=0.5),
            name=arc.label, hoverinfo="text",
            hovertext=f"chr{arc.label}: {arc.length:,} bp", showlegend=False,
        ))
        x, y, rotation = label_placement(arc.mid_angle, geometry.label_radius, geometry.cx, geometry.cy)
        fig.add_annotation(x=x, y=y, text=arc.label, showarrow=False,
                           textangle=rotation, font=dict(size=9))

    links = build_fusion_links(report.gene_fusions, layout)
    for link in links:
        color = INTRACHROMOSOMAL_COLOR if link.intrachromosomal else INTERCHROMOSOMAL_COLOR
        fig.add_shape(type="path", path=link.path(geometry),
                      line=dict(color=color, width=2), opacity=0.7, layer="below")
        ends = [geometry.point(link.angle5, geometry.link_radius),
                geometry.point(link.angle3, geometry.link_radius)]
        fig.add_trace(go.Scatter(
            x=[p[0] for p in ends], y=[p[1] for p in ends], mode="markers",
            marker=dict(color=color, size=6), name=link.name,
            hoverinfo="text", hovertext=[link.describe()] * 2, showlegend=False,
        ))

    fig.update_xaxes(visible=False, range=[0, width])
    fig.update_yaxes(visible=False, range=[height, 0], scaleanchor="x")
    fig.update_layout(width=width, height=height, margin=dict(l=0, r=0, t=0, b=0),
                      plot_bgcolor="white")
    return fig


def findings_pie(genes: List[AlteredGene]) -> Optional[go.Figure]:
    """Share of multi-section genes per section, or None when there are none."""
    buckets = section_buckets(multi_section_genes(genes))
    if not buckets:
        return None
    frame = pd.DataFrame({
        "section": [b.name for b in buckets],
        "genes": [b.value for b in buckets],
        "members": [", ".join(b.genes) for b in buckets],
    })
    fig = px.pie(frame, names="section", values="genes", color="section",
                 color_discrete_map=SECTION_COLORS, hover_data=["members"])
    fig.update_layout(height=300, margin=dict(l=0, r=0, t=20, b=0))
    return fig


def expression_heatmap(report: Report) -> Optional[go.Figure]:
    """Z-score heatmap, one row per gene category."""
    rows = []
    for category in GENE_CATEGORIES:
        measured = [e for e in report.expressions_by_category(category) if e.z_score is not None]
        for e in sorted(measured, key=lambda e: e.z_score, reverse=True):
            rows.append({
                "category": CATEGORY_LABELS.get(category, category),
                "gene": e.gene,
                "zScore": e.z_score,
            })
    if not rows:
        return None
    frame = pd.DataFrame(rows)
    pivot = frame.pivot_table(index="category", columns="gene", values="zScore", aggfunc="first")
    fig = go.Figure(go.Heatmap(
        z=pivot.values, x=list(pivot.columns), y=list(pivot.index),
        colorscale="RdBu_r", zmid=0, colorbar=dict(title="Z-score"),
        hoverongaps=False,
    ))
    fig.update_layout(height=120 + 40 * len(pivot.index), margin=dict(l=0, r=0, t=20, b=0))
    return fig


def table_frame(name: str, report: Report, search: Optional[str] = None) -> pd.DataFrame:
    """Display frame for one section table (columns renamed to their labels)."""
    return get_table(name).to_frame(report, search)


def table_exports(name: str, report: Report, search: Optional[str] = None) -> Dict[str, str]:
    """CSV download text and tab-separated clipboard text for what the table shows."""
    view = get_table(name)
    rows = view.rows(report, search)
    return {
        "csv": export_csv(view.columns, rows),
        "tsv": export_tsv(view.columns, rows),
    }


def resource_links(gene: AlteredGene) -> str:
    """Markdown links for the gene's resources; resources without a URL stay plain text."""
    parts = []
    for resource in gene.resources:
        url = resource_url(resource, gene.gene)
        parts.append(f"[{resource}]({url})" if url else resource)
    return " · ".join(parts)


# ==============================================
# Upload widget session handling
# ==============================================
UPLOAD_ROUND_KEY = "upload_round"
LAST_UPLOAD_KEY = "last_upload"


def uploader_key(session: MutableMapping) -> str:
    """Widget key for the file uploader. A new key renders an empty widget."""
    return f"uploader_{session.get(UPLOAD_ROUND_KEY, 0)}"


def take_upload(session: MutableMapping, file_id: str) -> bool:
    """True the first time a given uploaded file is seen in this session."""
    if session.get(LAST_UPLOAD_KEY) == file_id:
        return False
    session[LAST_UPLOAD_KEY] = file_id
    return True


def reset_session(store: ReportStore, session: MutableMapping) -> None:
    """Back to the demo report, with the uploader cleared so the old file is not reloaded."""
    store.reset_to_default()
    session[UPLOAD_ROUND_KEY] = session.get(UPLOAD_ROUND_KEY, 0) + 1
    session.pop(LAST_UPLOAD_KEY, None)
