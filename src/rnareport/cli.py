"""Command-line interface for rnareport.

ARCHITECTURE:
    CLI Commands → ReportStore / upload boundary → findings, genome, tables

Commands:
    rnareport validate FILE             Check a report document, list every issue
    rnareport load FILE                 Validate and make FILE the active report
    rnareport reset                     Restore the built-in demo report
    rnareport status                    Show the active report
    rnareport findings [--min-count]    Genes found in several report sections
    rnareport layout                    Chromosome arcs and fusion links
    rnareport export TABLE [--output]   Export a section table as CSV

Logging:
    --log-level  Set log level (DEBUG, INFO, WARN, ERROR). Default: INFO
    Environment: RNAREPORT_LOG_LEVEL=DEBUG|INFO|WARN|ERROR
"""

import math
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from rnareport.config.debug import get_log_level, get_logger, set_log_level
from rnareport.data import GRCH38_CHROMOSOMES
from rnareport.errors import NotFoundError, ReportParseError, ReportValidationError
from rnareport.findings import aggregate, filter_genes, multi_section_genes, section_buckets
from rnareport.genome import PlotGeometry, build_fusion_links, compute_layout
from rnareport.models.report import Report
from rnareport.state import ReportStore
from rnareport.tables import TABLES, export_csv, export_tsv, get_table
from rnareport.upload import build_report, load_upload, parse_report_text

load_dotenv()

app = typer.Typer(
    name="rnareport",
    help="RNA expression report validation, findings summary and genome layout",
    add_completion=False,
)

console = Console(width=100)
logger = get_logger(__name__)


@app.callback()
def main(
    log_level: str = typer.Option("INFO", "--log-level", "-l", help="Log level: DEBUG, INFO, WARN, ERROR"),
) -> None:
    """RNA expression report tools."""
    try:
        set_log_level(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")
    logger.debug("Log level %s", get_log_level())


def _print_issues(error: ReportValidationError) -> None:
    table = Table(title=f"{error.count} validation error(s)", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Field", style="cyan")
    table.add_column("Problem")
    for i, issue in enumerate(error.issues, 1):
        table.add_row(str(i), issue.field, issue.message)
    console.print(table)


def _report_from(file: Optional[Path]) -> Report:
    """The report in FILE, or the active report when no file is given."""
    if file is None:
        return ReportStore().report
    try:
        return build_report(parse_report_text(file.read_bytes()))
    except ReportParseError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except ReportValidationError as e:
        _print_issues(e)
        raise typer.Exit(1)


@app.command()
def validate(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Report JSON file"),
) -> None:
    """Validate a report document without loading it."""
    report = _report_from(file)
    console.print(f"[green]✓[/green] {file.name} is a valid report "
                  f"(sample {report.sample_info.sample_id})")


@app.command()
def load(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Report JSON file"),
) -> None:
    """Validate FILE and make it the active report."""
    store = ReportStore()
    result = load_upload(store, file.name, file.read_bytes())
    if not result.ok:
        console.print(Panel(
            f"[yellow]{result.message}[/yellow]",
            title="[bold yellow]⚠ Upload rejected[/bold yellow]",
            border_style="yellow",
            padding=(0, 2),
        ))
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] {result.message}")


@app.command()
def reset() -> None:
    """Restore the built-in demo report."""
    ReportStore().reset_to_default()
    console.print("Reset to demo data")


@app.command()
def status() -> None:
    """Show the active report."""
    store = ReportStore()
    report = store.report
    info = report.sample_info

    table = Table(show_header=False, box=None)
    table.add_column(style="dim")
    table.add_column()
    table.add_row("Source", "custom upload" if store.is_custom else "built-in demo data")
    table.add_row("Sample", info.sample_id)
    table.add_row("Patient", info.patient_id)
    table.add_row("Cancer type", info.cancer_type)
    table.add_row("Reference cohort", info.reference_cohort)
    table.add_row("Analysis date", info.analysis_date)
    if info.purity is not None:
        table.add_row("Purity", f"{info.purity:.0%}")
    if info.ploidy is not None:
        table.add_row("Ploidy", f"{info.ploidy:g}")
    table.add_row("Expressions", str(len(report.gene_expressions)))
    table.add_row("Fusions", str(len(report.gene_fusions)))
    table.add_row("Mutated genes", str(len(report.mutated_genes)))
    table.add_row("CN altered genes", str(len(report.cnv_genes)))
    table.add_row("Drug matches", str(len(report.drug_matches)))
    table.add_row("Immune markers", str(len(report.immune_markers)))
    console.print(Panel(
        table,
        title=f"[bold]{info.cancer_type}[/bold]",
        border_style="cyan",
        padding=(0, 2),
    ))


@app.command()
def findings(
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Use this report instead of the active one"),
    min_count: int = typer.Option(1, "--min-count", "-n", min=1, help="Only genes seen in at least N sections"),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Gene symbol substring"),
    csv: Optional[Path] = typer.Option(None, "--csv", help="Also write the table as CSV to this path"),
) -> None:
    """Genes found across report sections, most sections first."""
    report = _report_from(file)
    logger.debug("findings: min_count=%d search=%r file=%s", min_count, search, file)
    genes = filter_genes(multi_section_genes(aggregate(report), min_count), search)

    def mark(flag: bool) -> str:
        return "[bold]Yes[/bold]" if flag else "[dim]-[/dim]"

    table = Table(title=f"Findings summary ({len(genes)} genes)")
    for label in ("Gene", "Mutated", "Fusion", "SV", "CN", "Immune", "HRD", "Resources", "Count"):
        table.add_column(label)
    for g in genes:
        table.add_row(g.gene, mark(g.mutated), mark(g.fusion), mark(g.sv), mark(g.cn),
                      mark(g.immune), mark(g.hrd), ", ".join(g.resources), str(g.count))
    console.print(table)

    buckets = section_buckets(multi_section_genes(genes))
    if buckets:
        console.print("[dim]Genes in 2+ sections:[/dim] " + ", ".join(
            f"{b.name} {b.value}" for b in buckets
        ))

    if csv:
        view = TABLES["findings"]
        rows = [r for r in view.rows(report, search) if int(r["count"]) >= min_count]
        csv.write_text(export_csv(view.columns, rows), encoding="utf-8")
        console.print(f"Exported {len(rows)} rows to {csv}")


@app.command()
def layout(
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Use this report instead of the active one"),
    width: float = typer.Option(500, "--width", help="Plot width"),
    height: float = typer.Option(500, "--height", help="Plot height"),
) -> None:
    """Chromosome arcs (degrees) and fusion breakpoint links."""
    report = _report_from(file)
    logger.debug("layout: %gx%g file=%s", width, height, file)
    genome = compute_layout(GRCH38_CHROMOSOMES)
    geometry = PlotGeometry(width=width, height=height)

    table = Table(title="Chromosome arcs")
    table.add_column("Chr")
    table.add_column("Length", justify="right")
    table.add_column("Start°", justify="right")
    table.add_column("End°", justify="right")
    table.add_column("Span°", justify="right")
    for arc in genome:
        table.add_row(arc.label, f"{arc.length:,}", f"{math.degrees(arc.start_angle):.2f}",
                      f"{math.degrees(arc.end_angle):.2f}", f"{math.degrees(arc.span):.2f}")
    console.print(table)

    links = build_fusion_links(report.gene_fusions, genome)
    if not links:
        console.print("[dim]No fusion breakpoints to place.[/dim]")
        return
    links_table = Table(title=f"Fusion links (link radius {geometry.link_radius:g})")
    links_table.add_column("Fusion", no_wrap=True)
    links_table.add_column("Type", no_wrap=True)
    links_table.add_column("Path")
    for link in links:
        kind = "intrachromosomal" if link.intrachromosomal else "interchromosomal"
        links_table.add_row(link.describe(), kind, link.path(geometry))
    console.print(links_table)


@app.command()
def export(
    table_name: str = typer.Argument(..., metavar="TABLE", help=f"One of: {', '.join(TABLES)}"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Use this report instead of the active one"),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Only rows matching this text"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file instead of stdout"),
    tsv: bool = typer.Option(False, "--tsv", help="Tab-separated instead of CSV"),
) -> None:
    """Export one section table."""
    try:
        view = get_table(table_name)
    except NotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)

    report = _report_from(file)
    rows = view.rows(report, search)
    text = export_tsv(view.columns, rows) if tsv else export_csv(view.columns, rows)

    if output:
        output.write_text(text, encoding="utf-8")
        console.print(f"Exported {len(rows)} rows to {output}")
    else:
        typer.echo(text, nl=False)


if __name__ == "__main__":
    app()
