"""
Bug classifier for DuckQuest.
Maps a free-text bug report to a severity creature and a quest category.

Both classifiers are ordered decision lists over case-insensitive substring
matches. Order encodes priority: a "crash" outranks a merely "slow" report.
Neither function can fail; unmatched text falls through to the defaults.
"""

from typing import Optional

from config import (
    CATEGORY_RULES,
    DEFAULT_CATEGORY,
    DEFAULT_SEVERITY,
    HYDRA_AND_THRESHOLD,
    SEVERITY_RULES,
)


def _contains_any(text: str, keywords: list[str]) -> bool:
    return any(kw in text for kw in keywords)


def classify_severity(description: str, urgency: Optional[str] = None) -> str:
    """Classify a bug report as goblin, orc, troll, dragon, or hydra.

    Args:
        description: Bug description as written by the hero.
        urgency: Optional urgency (low, moderate, high, critical).

    Returns:
        Severity label.
    """
    desc = (description or "").lower()
    urgency_lower = (urgency or "").lower()

    for severity, keywords, urgency_trigger in SEVERITY_RULES:
        if _contains_any(desc, keywords):
            return severity
        if urgency_trigger and urgency_trigger in urgency_lower:
            return severity
        # Many "and"s means many heads, even without the keywords
        if severity == "hydra" and desc.count("and") > HYDRA_AND_THRESHOLD:
            return severity

    return DEFAULT_SEVERITY


def classify_category(description: str, tech_stack: Optional[list[str]] = None) -> str:
    """Classify a bug report into a quest category.

    The tech stack is searched together with the description, with no extra
    weight.

    Args:
        description: Bug description as written by the hero.
        tech_stack: Technologies involved, e.g. ["React", "PostgreSQL"].

    Returns:
        Category label.
    """
    text = " ".join([description or ""] + list(tech_stack or [])).lower()

    for category, keywords in CATEGORY_RULES:
        if _contains_any(text, keywords):
            return category

    return DEFAULT_CATEGORY
