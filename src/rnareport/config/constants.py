"""Centralized constants and mappings for rnareport.

This module consolidates the fixed vocabularies and layout values used
across the codebase:
- Allowed tags for the report's enumerated fields
- Findings summary sections and resource annotations
- Circular genome plot geometry
- Persistence keys
"""

import math

# =============================================================================
# REPORT VOCABULARIES
# =============================================================================
# Allowed values for enumerated report fields. Uploaded reports are checked
# against these in rnareport.validation.

GENE_CATEGORIES: tuple[str, ...] = (
    "oncogene",
    "tumor_suppressor",
    "drug_target",
    "immune",
    "hrd",
    "other",
)

CATEGORY_LABELS: dict[str, str] = {
    "oncogene": "Oncogene",
    "tumor_suppressor": "TSG",
    "drug_target": "Drug Target",
    "immune": "Immune",
    "hrd": "HRD",
    "other": "Other",
}

CLINICAL_TIERS: tuple[int, ...] = (1, 2, 3, 4)
EVIDENCE_LEVELS: tuple[str, ...] = ("A", "B", "C", "D")
DRUG_ASSOCIATIONS: tuple[str, ...] = ("sensitivity", "resistance")
CNV_TYPES: tuple[str, ...] = ("gain", "loss")
INTERPRETATIONS: tuple[str, ...] = ("high", "normal", "low")

# z-score at or beyond which a gene counts as up/down regulated
EXPRESSION_Z_THRESHOLD = 2.0

# =============================================================================
# FINDINGS SUMMARY
# =============================================================================

# Fixed annotation appended to every gene in the findings table
VICC_RESOURCE = "VICC"

# Genes seen in at least this many report sections feed the summary plot
MULTI_SECTION_MIN_COUNT = 2

# Bucket name -> AlteredGene flag, in display order
SECTION_FLAGS: tuple[tuple[str, str], ...] = (
    ("Mutated", "mutated"),
    ("Fusion", "fusion"),
    ("CN", "cn"),
    ("Immune", "immune"),
    ("HRD", "hrd"),
)

SECTION_COLORS: dict[str, str] = {
    "Mutated": "hsl(35, 85%, 55%)",
    "Fusion": "hsl(35, 70%, 65%)",
    "SV": "hsl(35, 55%, 70%)",
    "CN": "hsl(200, 60%, 55%)",
    "Immune": "hsl(25, 70%, 60%)",
    "HRD": "hsl(140, 50%, 45%)",
}

# =============================================================================
# CIRCULAR GENOME PLOT
# =============================================================================

# Angular gap between consecutive chromosome arcs, in radians
CHROMOSOME_GAP = 0.01

# First chromosome starts at the top of the circle and proceeds clockwise
ORIGIN_ANGLE = -math.pi / 2

DEFAULT_PLOT_WIDTH = 500
DEFAULT_PLOT_HEIGHT = 500
PLOT_MARGIN = 40
RING_WIDTH = 20
LINK_INSET = 10
LABEL_OFFSET = 15

INTRACHROMOSOMAL_COLOR = "#d62828"
INTERCHROMOSOMAL_COLOR = "#1d3557"

# =============================================================================
# PERSISTENCE / UPLOAD
# =============================================================================

STORAGE_KEY = "rnasum-patient-data"
STORAGE_DIR_ENV = "RNAREPORT_STORAGE_DIR"
DEFAULT_STORAGE_DIR = "~/.rnareport"

UPLOAD_EXTENSION = ".json"

# Validation issues listed in user-facing messages; the total is always shown
MAX_DISPLAYED_ERRORS = 5
