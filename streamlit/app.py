"""RNA report Streamlit application - patient RNA expression report dashboard."""
import streamlit as st
from dotenv import load_dotenv

from backend import (
    circos_figure,
    expression_heatmap,
    findings_pie,
    reset_session,
    resource_links,
    table_exports,
    table_frame,
    take_upload,
    uploader_key,
)
from rnareport.findings import aggregate, filter_genes, multi_section_genes, section_buckets
from rnareport.links import gene_card_url
from rnareport.state import bind_store, current_store
from rnareport.summary import mutated_gene_expressions, regulated_genes, summarize_mutations
from rnareport.upload import load_upload

load_dotenv()

# Initialize logging from environment variable (RNAREPORT_LOG_LEVEL=DEBUG|INFO|WARN|ERROR)
from rnareport.config.debug import get_logger
logger = get_logger(__name__)

st.set_page_config(page_title="RNA Report", page_icon="🧬", layout="wide")

st.markdown("""
<style>
    .block-container {
        padding-top: 1rem;
    }
    .stDataFrame td {
        font-size: 0.8rem !important;
        padding: 4px 8px !important;
    }
</style>
""", unsafe_allow_html=True)

bind_store(st.session_state)
store = current_store(st.session_state)
report = store.report
info = report.sample_info
stats = report.summary_stats


def section_table(name: str, search_label: str = "Search genes"):
    """Search box, table and export buttons for one section."""
    search = st.text_input(search_label, key=f"search_{name}", placeholder="Filter...",
                           label_visibility="collapsed")
    frame = table_frame(name, report, search)
    st.dataframe(frame, hide_index=True, width="stretch", height=min(400, 35 * (len(frame) + 1)))
    exports = table_exports(name, report, search)
    cols = st.columns([1, 1, 4])
    with cols[0]:
        st.download_button(
            "⬇️ CSV",
            data=exports["csv"],
            file_name=f"{info.sample_id}_{name}.csv",
            mime="text/csv",
            key=f"csv_{name}",
        )
    with cols[1]:
        with st.popover("📋 Copy"):
            st.caption("Tab-separated, paste into a spreadsheet.")
            st.code(exports["tsv"], language=None)


# ==============================================
# SIDEBAR: upload / reset
# ==============================================
with st.sidebar:
    st.header("Patient data")
    if store.is_custom:
        st.success("Showing uploaded data")
    else:
        st.info("Showing demo data")

    uploaded = st.file_uploader("Upload report JSON", type=["json"], key=uploader_key(st.session_state))
    if uploaded is not None and take_upload(st.session_state, uploaded.file_id):
        result = load_upload(store, uploaded.name, uploaded.getvalue())
        if result.ok:
            st.toast(result.message, icon="✅")
            st.rerun()
        else:
            st.error(result.message)

    if st.button("↩️ Reset to demo data", disabled=not store.is_custom, width="stretch"):
        reset_session(store, st.session_state)
        st.rerun()

# ==============================================
# HEADER: sample info
# ==============================================
st.markdown(f"<h1 style='margin-bottom: 0;'>🧬 {info.sample_id}</h1>", unsafe_allow_html=True)
st.caption(f"Patient {info.patient_id} · {info.cancer_type} · Reference cohort {info.reference_cohort} · "
           f"Analysed {info.analysis_date}")

metric_cols = st.columns(6)
metric_cols[0].metric("Genes analysed", f"{stats.total_genes_analyzed:,}")
metric_cols[1].metric("Mutated genes", stats.mutated_genes)
metric_cols[2].metric("Fusions", stats.fusions_detected)
metric_cols[3].metric("CN altered", stats.cnv_altered)
metric_cols[4].metric("Drug matches", stats.drug_matches)
metric_cols[5].metric("Purity", f"{info.purity:.0%}" if info.purity is not None else "N/A")

tabs = st.tabs([
    "🎯 Findings", "🧪 Mutations", "🔗 Fusions", "📈 Expression",
    "🧩 Copy number", "💊 Drugs", "🛡️ Immune",
])

# TAB: Findings summary
with tabs[0]:
    genes = aggregate(report)
    multi = multi_section_genes(genes)
    chart_col, list_col = st.columns([1, 1])
    with chart_col:
        fig = findings_pie(genes)
        if fig is None:
            st.caption("No gene is altered in more than one section.")
        else:
            st.plotly_chart(fig, width="stretch")
    with list_col:
        st.markdown("**Genes in 2+ sections**")
        for bucket in section_buckets(multi):
            st.markdown(f"- **{bucket.name}** ({bucket.value}): {', '.join(bucket.genes)}")

    section_table("findings")

    with st.expander("🔗 Resource links"):
        search = st.session_state.get("search_findings")
        for gene in filter_genes(genes, search):
            st.markdown(f"[{gene.gene}]({gene_card_url(gene.gene)}): {resource_links(gene)}")

# TAB: Mutated genes
with tabs[1]:
    summary = summarize_mutations(report)
    st.markdown(
        f"**{summary.total}** mutated genes reported; **{summary.tiered}** tier 1-4 variants shown, "
        f"**{summary.splice_region}** in splice regions, **{summary.expression_measured}** with measured expression."
    )
    section_table("mutations", "Search genes or variants")
    measured = mutated_gene_expressions(report)
    if measured:
        st.caption("Expression of mutated genes: " + ", ".join(f"{e.gene} (z={e.z_score:+.1f})" for e in measured))

# TAB: Fusions
with tabs[2]:
    plot_col, table_col = st.columns([1, 1])
    with plot_col:
        st.plotly_chart(circos_figure(report))
        st.caption("Red links join breakpoints on the same chromosome, blue links join different chromosomes.")
    with table_col:
        section_table("fusions")

# TAB: Expression
with tabs[3]:
    up, down = regulated_genes(report)
    up_col, down_col = st.columns(2)
    up_col.metric("Upregulated", len(up))
    up_col.caption(", ".join(e.gene for e in up) or "None")
    down_col.metric("Downregulated", len(down))
    down_col.caption(", ".join(e.gene for e in down) or "None")
    fig = expression_heatmap(report)
    if fig is not None:
        st.plotly_chart(fig, width="stretch")
    section_table("expression")

# TAB: CNV
with tabs[4]:
    section_table("cnv")

# TAB: Drugs
with tabs[5]:
    section_table("drugs", "Search drugs or genes")

# TAB: Immune
with tabs[6]:
    section_table("immune", "Search markers")

st.caption("**Note:** This dashboard is for research purposes only. Clinical decisions should always be made by qualified healthcare professionals.")
