"""Deep links to public gene and variant databases.

Links are built from gene symbols for convenience only; they are never
fetched or checked.
"""

from urllib.parse import quote

GENECARDS_URL = "https://www.genecards.org/cgi-bin/carddisp.pl?gene={gene}"
FUSIONGDB_SEARCH_URL = (
    "https://ccsm.uth.edu/FusionGDB/gene_search_result.cgi"
    "?page=page&type=quick_search&quick_search={gene}"
)

# Resource name -> URL template ("{gene}" is substituted when present)
RESOURCE_URLS: dict[str, str] = {
    "VICC": "https://search.cancervariants.org/",
    "OncoKB": "https://www.oncokb.org/gene/{gene}",
    "CIViC": "https://civicdb.org/genes/{gene}/summary",
    "COSMIC": "https://cancer.sanger.ac.uk/cosmic/gene/analysis?ln={gene}",
    "FusionGDB": "https://ccsm.uth.edu/FusionGDB/",
}


def gene_card_url(gene: str) -> str:
    return GENECARDS_URL.format(gene=quote(gene, safe=""))


def fusiongdb_url(gene: str) -> str:
    return FUSIONGDB_SEARCH_URL.format(gene=quote(gene, safe=""))


def resource_url(resource: str, gene: str) -> str | None:
    """URL for a findings-table resource, or None for unknown resources."""
    template = RESOURCE_URLS.get(resource)
    if template is None:
        return None
    return template.format(gene=quote(gene, safe=""))
