"""Validation of uploaded report documents.

Example:
    >>> from rnareport.validation import validate
    >>> [str(i) for i in validate({"sampleInfo": {}})][:1]
    ['sampleInfo.sampleId: is required']
"""

from rnareport.validation.validator import validate
from rnareport.validation.rules import FieldRule, SectionRule, SAMPLE_INFO_RULES, SECTION_RULES, SECTION_KEYS

__all__ = [
    "validate",
    "FieldRule",
    "SectionRule",
    "SAMPLE_INFO_RULES",
    "SECTION_RULES",
    "SECTION_KEYS",
]
