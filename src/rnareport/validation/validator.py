"""Validate an untyped, freshly parsed report document.

validate() evaluates the rules table in rnareport.validation.rules and
collects every issue instead of stopping at the first one. Issues come out
in rule order: the root, sampleInfo fields, then each list section in turn
(array check, then items by ascending index, fields in rule order).
"""

from typing import Any

from rnareport.config.debug import get_logger
from rnareport.models.issues import ValidationIssue
from rnareport.validation.rules import (
    REQUIRED,
    SAMPLE_INFO_KEY,
    SAMPLE_INFO_RULES,
    SECTION_RULES,
    FieldRule,
)

logger = get_logger(__name__)


def _check_fields(obj: dict, rules: tuple[FieldRule, ...], prefix: str, issues: list[ValidationIssue]) -> None:
    for rule in rules:
        value = obj.get(rule.key)
        if value is None and not rule.required:
            continue
        if not rule.check(value):
            issues.append(ValidationIssue(field=f"{prefix}.{rule.key}", message=rule.message))


def validate(candidate: Any) -> list[ValidationIssue]:
    """Check a parsed JSON value against the report schema.

    Args:
        candidate: Any value produced by json.loads().

    Returns:
        Every issue found, in a deterministic order. An empty list means the
        document can be loaded; omitted sections fall back to the defaults.
    """
    if not isinstance(candidate, dict):
        return [ValidationIssue(field="root", message="must be a JSON object")]

    issues: list[ValidationIssue] = []

    sample_info = candidate.get(SAMPLE_INFO_KEY)
    if sample_info is None:
        issues.append(ValidationIssue(field=SAMPLE_INFO_KEY, message=REQUIRED))
    elif not isinstance(sample_info, dict):
        issues.append(ValidationIssue(field=SAMPLE_INFO_KEY, message="must be an object"))
    else:
        _check_fields(sample_info, SAMPLE_INFO_RULES, SAMPLE_INFO_KEY, issues)

    for section in SECTION_RULES:
        items = candidate.get(section.key)
        if items is None:
            continue
        if not isinstance(items, list):
            issues.append(ValidationIssue(field=section.key, message="must be an array"))
            continue
        for index, item in enumerate(items):
            path = f"{section.key}[{index}]"
            if not isinstance(item, dict):
                issues.append(ValidationIssue(field=path, message="must be an object"))
                continue
            _check_fields(item, section.item_rules, path, issues)

    if issues:
        logger.debug("Validation found %d issue(s); first: %s", len(issues), issues[0])
    return issues
