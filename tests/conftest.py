"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def default_data():
    """A fresh copy of the built-in demo report document (camelCase)."""
    from rnareport.data import default_report_data

    return default_report_data()


@pytest.fixture
def minimal_document():
    """Smallest upload that passes validation: sampleInfo only."""
    return {
        "sampleInfo": {
            "sampleId": "S1",
            "patientId": "P1",
            "cancerType": "Glioma",
            "referenceCohort": "TCGA-GBM",
            "analysisDate": "2024-06-01",
        },
    }


@pytest.fixture
def custom_document(minimal_document):
    """Upload with one gene present in the mutated, CN and HRD sections."""
    return {
        **minimal_document,
        "geneExpressions": [
            {"gene": "BRCA1", "ensemblId": "ENSG00000012048", "zScore": -2.5, "category": "hrd"},
            {"gene": "CD274", "ensemblId": "ENSG00000120217", "zScore": 2.2, "category": "immune"},
        ],
        "geneFusions": [
            {"gene5": "BCR", "gene3": "ABL1", "breakpoint5": "chr22:23290413",
             "breakpoint3": "chr9:130714455", "database": ["COSMIC"]},
        ],
        "mutatedGenes": [
            {"gene": "BRCA1", "variant": "p.E1836fs", "consequence": "frameshift_variant", "vaf": 0.4, "tier": 1},
        ],
        "cnvGenes": [
            {"gene": "BRCA1", "chromosome": "17q21.31", "copyNumber": 1, "type": "loss"},
        ],
        "drugMatches": [],
        "immuneMarkers": [],
    }


@pytest.fixture
def store_config(tmp_path):
    """Store configuration rooted in a temporary directory."""
    from rnareport.config.settings import StoreConfig

    return StoreConfig(storage_dir=tmp_path)


@pytest.fixture
def store(store_config):
    """An empty store (showing the default report) persisted under tmp_path."""
    from rnareport.state import ReportStore

    return ReportStore(store_config)
