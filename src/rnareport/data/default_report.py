"""Built-in demonstration report.

A pancreatic adenocarcinoma sample in the camelCase upload format. It is the
active report at startup, the fallback for any section an upload omits, and
the state restored by a reset.
"""

import copy
from typing import Any

from rnareport.models.report import Report


DEFAULT_REPORT_DATA: dict[str, Any] = {
    "sampleInfo": {
        "sampleId": "PRJ230001_L2300001",
        "patientId": "SBJ00456",
        "cancerType": "Pancreatic Adenocarcinoma",
        "referenceCohort": "TCGA-PAAD (n=178)",
        "analysisDate": "2024-01-15",
        "libraryId": "L2300001",
        "purity": 0.72,
        "ploidy": 2.3,
    },
    "summaryStats": {
        "totalGenesAnalyzed": 19847,
        "upregulatedGenes": 1247,
        "downregulatedGenes": 982,
        "mutatedGenes": 156,
        "fusionsDetected": 3,
        "cnvAltered": 89,
        "drugMatches": 12,
        "tierOneVariants": 4,
    },
    "geneExpressions": [
        {"gene": "KRAS", "ensemblId": "ENSG00000133703", "zScore": 2.4, "percentile": 92, "tpm": 145.2, "cohortMedian": 67.3, "hasMutation": True, "hasCNV": None, "category": "oncogene"},
        {"gene": "TP53", "ensemblId": "ENSG00000141510", "zScore": -1.8, "percentile": 8, "tpm": 23.1, "cohortMedian": 89.4, "hasMutation": True, "hasCNV": None, "category": "tumor_suppressor"},
        {"gene": "BRCA2", "ensemblId": "ENSG00000139618", "zScore": -2.1, "percentile": 4, "tpm": 12.3, "cohortMedian": 45.2, "hasMutation": False, "hasCNV": "loss", "category": "hrd"},
        {"gene": "EGFR", "ensemblId": "ENSG00000146648", "zScore": 3.2, "percentile": 98, "tpm": 234.5, "cohortMedian": 56.7, "hasMutation": False, "hasCNV": "gain", "category": "drug_target"},
        {"gene": "MYC", "ensemblId": "ENSG00000136997", "zScore": 2.8, "percentile": 96, "tpm": 189.2, "cohortMedian": 78.9, "hasMutation": False, "hasCNV": "gain", "category": "oncogene"},
        {"gene": "CDKN2A", "ensemblId": "ENSG00000147889", "zScore": -3.4, "percentile": 1, "tpm": 2.1, "cohortMedian": 34.5, "hasMutation": False, "hasCNV": "loss", "category": "tumor_suppressor"},
        {"gene": "SMAD4", "ensemblId": "ENSG00000141646", "zScore": -2.3, "percentile": 3, "tpm": 18.9, "cohortMedian": 67.8, "hasMutation": True, "hasCNV": None, "category": "tumor_suppressor"},
        {"gene": "ERBB2", "ensemblId": "ENSG00000141736", "zScore": 1.9, "percentile": 88, "tpm": 112.3, "cohortMedian": 54.2, "hasMutation": False, "hasCNV": None, "category": "drug_target"},
        {"gene": "PD1", "ensemblId": "ENSG00000188389", "zScore": 0.8, "percentile": 65, "tpm": 45.6, "cohortMedian": 34.2, "hasMutation": False, "hasCNV": None, "category": "immune"},
        {"gene": "PDL1", "ensemblId": "ENSG00000120217", "zScore": 1.5, "percentile": 82, "tpm": 78.9, "cohortMedian": 43.1, "hasMutation": False, "hasCNV": None, "category": "immune"},
        {"gene": "BRCA1", "ensemblId": "ENSG00000012048", "zScore": -0.3, "percentile": 42, "tpm": 38.2, "cohortMedian": 41.5, "hasMutation": False, "hasCNV": None, "category": "hrd"},
        {"gene": "ATM", "ensemblId": "ENSG00000149311", "zScore": -1.2, "percentile": 18, "tpm": 28.4, "cohortMedian": 52.3, "hasMutation": False, "hasCNV": None, "category": "hrd"},
        {"gene": "PALB2", "ensemblId": "ENSG00000083093", "zScore": -0.7, "percentile": 32, "tpm": 21.3, "cohortMedian": 28.9, "hasMutation": True, "hasCNV": None, "category": "hrd"},
        {"gene": "MET", "ensemblId": "ENSG00000105976", "zScore": 2.1, "percentile": 91, "tpm": 167.8, "cohortMedian": 72.4, "hasMutation": False, "hasCNV": None, "category": "drug_target"},
        {"gene": "FGFR2", "ensemblId": "ENSG00000066468", "zScore": 1.7, "percentile": 85, "tpm": 89.4, "cohortMedian": 45.6, "hasMutation": False, "hasCNV": None, "category": "drug_target"},
    ],
    "geneFusions": [
        {"gene5": "TMPRSS2", "gene3": "ERG", "breakpoint5": "chr21:41498117", "breakpoint3": "chr21:38584929", "junctionReads": 156, "spanningFrags": 89, "ffpm": 4.2, "inFrame": True, "cancerRelevant": True, "database": ["COSMIC", "FusionGDB"]},
        {"gene5": "EML4", "gene3": "ALK", "breakpoint5": "chr2:42472827", "breakpoint3": "chr2:29447431", "junctionReads": 234, "spanningFrags": 145, "ffpm": 6.8, "inFrame": True, "cancerRelevant": True, "database": ["COSMIC", "OncoKB", "FusionGDB"]},
        {"gene5": "FGFR3", "gene3": "TACC3", "breakpoint5": "chr4:1808661", "breakpoint3": "chr4:1737484", "junctionReads": 67, "spanningFrags": 34, "ffpm": 1.9, "inFrame": True, "cancerRelevant": True, "database": ["COSMIC"]},
    ],
    "mutatedGenes": [
        {"gene": "KRAS", "variant": "p.G12D", "consequence": "missense_variant", "vaf": 0.42, "tier": 1, "zScore": 2.4, "expression": "high"},
        {"gene": "TP53", "variant": "p.R175H", "consequence": "missense_variant", "vaf": 0.38, "tier": 1, "zScore": -1.8, "expression": "low"},
        {"gene": "SMAD4", "variant": "p.R361C", "consequence": "missense_variant", "vaf": 0.29, "tier": 2, "zScore": -2.3, "expression": "low"},
        {"gene": "PALB2", "variant": "c.3113G>A", "consequence": "splice_region_variant", "vaf": 0.51, "tier": 2, "zScore": -0.7, "expression": "normal"},
        {"gene": "CDKN2A", "variant": "p.H83Y", "consequence": "missense_variant", "vaf": 0.67, "tier": 1, "zScore": -3.4, "expression": "low"},
        {"gene": "ARID1A", "variant": "p.Q1334*", "consequence": "stop_gained", "vaf": 0.23, "tier": 2, "zScore": None, "expression": None},
    ],
    "cnvGenes": [
        {"gene": "EGFR", "chromosome": "7p11.2", "copyNumber": 6, "type": "gain", "zScore": 3.2},
        {"gene": "MYC", "chromosome": "8q24.21", "copyNumber": 8, "type": "gain", "zScore": 2.8},
        {"gene": "CDKN2A", "chromosome": "9p21.3", "copyNumber": 0, "type": "loss", "zScore": -3.4},
        {"gene": "BRCA2", "chromosome": "13q13.1", "copyNumber": 1, "type": "loss", "zScore": -2.1},
        {"gene": "ERBB2", "chromosome": "17q12", "copyNumber": 5, "type": "gain", "zScore": 1.9},
    ],
    "drugMatches": [
        {"drug": "Olaparib", "gene": "BRCA2", "evidenceLevel": "A", "association": "sensitivity", "source": "OncoKB", "cancerType": "Pancreatic Cancer", "expressionSupport": True},
        {"drug": "Erlotinib", "gene": "EGFR", "evidenceLevel": "B", "association": "sensitivity", "source": "CIViC", "cancerType": "Pan-cancer", "expressionSupport": True},
        {"drug": "Cetuximab", "gene": "KRAS", "evidenceLevel": "A", "association": "resistance", "source": "OncoKB", "cancerType": "Colorectal Cancer", "expressionSupport": False},
        {"drug": "Pembrolizumab", "gene": "PDL1", "evidenceLevel": "B", "association": "sensitivity", "source": "OncoKB", "cancerType": "Pan-cancer", "expressionSupport": True},
        {"drug": "Trastuzumab", "gene": "ERBB2", "evidenceLevel": "B", "association": "sensitivity", "source": "CIViC", "cancerType": "Breast Cancer", "expressionSupport": True},
        {"drug": "Crizotinib", "gene": "ALK", "evidenceLevel": "A", "association": "sensitivity", "source": "OncoKB", "cancerType": "NSCLC", "expressionSupport": True},
    ],
    "immuneMarkers": [
        {"marker": "PD-L1 Expression", "value": 78.9, "percentile": 82, "interpretation": "high"},
        {"marker": "CD8+ T-cells", "value": 45.2, "percentile": 56, "interpretation": "normal"},
        {"marker": "Tumor Mutational Burden", "value": 8.2, "percentile": 71, "interpretation": "normal"},
        {"marker": "Cytolytic Activity", "value": 12.4, "percentile": 34, "interpretation": "low"},
        {"marker": "IFN-γ Signature", "value": 5.8, "percentile": 62, "interpretation": "normal"},
    ],
}


def default_report_data() -> dict[str, Any]:
    """Return a fresh deep copy of the default report in upload format."""
    return copy.deepcopy(DEFAULT_REPORT_DATA)


def default_report() -> Report:
    """Build the default Report."""
    return Report.model_validate(default_report_data())
