"""
Lookup table validation for DuckQuest.
Checks the mentor pools and display tables cover every label.

Validates:
  - Every (category, phase) pair has a non-empty question pool
  - Every severity has a non-empty encouragement pool
  - Greeting, acknowledgment, and victory pools are non-empty
  - Every label has a title and description
  - No unresolved template variables ({variable}) in any line
  - Pools no longer than QUESTIONS_PER_RESPONSE are flagged as warnings
"""

import re

from config import (
    CATEGORIES,
    CATEGORY_DESCRIPTIONS,
    CATEGORY_TITLES,
    PHASE_DESCRIPTIONS,
    PHASE_SUGGESTIONS,
    PHASES,
    QUESTIONS_PER_RESPONSE,
    SEVERITIES,
    SEVERITY_BASE_XP,
    SEVERITY_DESCRIPTIONS,
    SEVERITY_TITLES,
)
from duckquest.generation import mentor

_TEMPLATE_VAR = re.compile(r"\{[a-z_]+\}")


def validate_tables() -> dict:
    """Run all validation checks on the shipped tables.

    Returns:
        Dict with 'errors' (list of strings) and 'warnings' (list of strings).
        Tables are valid when errors is empty.
    """
    errors: list[str] = []
    warnings: list[str] = []

    _validate_questions(errors, warnings)
    _validate_encouragements(errors, warnings)
    _validate_flat_pools(errors, warnings)
    _validate_display_tables(errors, warnings)

    return {"errors": errors, "warnings": warnings}


# ── Individual validators ─────────────────────────────────────────────────


def _validate_questions(errors: list[str], warnings: list[str]) -> None:
    for category in CATEGORIES:
        by_phase = mentor.QUESTIONS.get(category)
        if not by_phase:
            errors.append(f"No question table for category '{category}'")
            continue
        for phase in PHASES:
            pool = by_phase.get(phase)
            if not pool:
                errors.append(f"Empty question pool for ({category}, {phase})")
                continue
            if len(pool) < QUESTIONS_PER_RESPONSE:
                warnings.append(
                    f"Question pool ({category}, {phase}) has {len(pool)} entries, "
                    f"fewer than {QUESTIONS_PER_RESPONSE}"
                )
            _check_lines(pool, f"questions ({category}, {phase})", errors)


def _validate_encouragements(errors: list[str], warnings: list[str]) -> None:
    for severity in SEVERITIES:
        pool = mentor.ENCOURAGEMENTS.get(severity)
        if not pool:
            errors.append(f"Empty encouragement pool for '{severity}'")
            continue
        if len(pool) == 1:
            warnings.append(f"Encouragement pool for '{severity}' never varies")
        _check_lines(pool, f"encouragements ({severity})", errors)


def _validate_flat_pools(errors: list[str], warnings: list[str]) -> None:
    pools = {
        "greetings": mentor.GREETINGS,
        "milestone acknowledgments": mentor.MILESTONE_ACKNOWLEDGMENTS,
        "victory messages": mentor.VICTORY_MESSAGES,
    }
    for name, pool in pools.items():
        if not pool:
            errors.append(f"Empty pool: {name}")
            continue
        _check_lines(pool, name, errors)


def _validate_display_tables(errors: list[str], warnings: list[str]) -> None:
    for severity in SEVERITIES:
        for table_name, table in (
            ("SEVERITY_TITLES", SEVERITY_TITLES),
            ("SEVERITY_DESCRIPTIONS", SEVERITY_DESCRIPTIONS),
            ("SEVERITY_BASE_XP", SEVERITY_BASE_XP),
        ):
            if severity not in table:
                errors.append(f"{table_name} missing '{severity}'")

    for category in CATEGORIES:
        for table_name, table in (
            ("CATEGORY_TITLES", CATEGORY_TITLES),
            ("CATEGORY_DESCRIPTIONS", CATEGORY_DESCRIPTIONS),
        ):
            if category not in table:
                errors.append(f"{table_name} missing '{category}'")

    for phase in PHASES:
        if phase not in PHASE_DESCRIPTIONS:
            errors.append(f"PHASE_DESCRIPTIONS missing '{phase}'")
        if not PHASE_SUGGESTIONS.get(phase):
            errors.append(f"PHASE_SUGGESTIONS missing '{phase}'")


def _check_lines(pool: list[str], where: str, errors: list[str]) -> None:
    for line in pool:
        if not line.strip():
            errors.append(f"Blank line in {where}")
        elif _TEMPLATE_VAR.search(line):
            errors.append(f"Unresolved template variable in {where}: {line}")
