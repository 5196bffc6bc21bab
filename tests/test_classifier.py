"""Tests for the bug classifier — severity and category decision lists."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from config import CATEGORIES, SEVERITIES
from duckquest.core.classifier import classify_category, classify_severity


# ── Severity ──────────────────────────────────────────────────────────────


def test_empty_description_is_goblin():
    assert classify_severity("") == "goblin"
    assert classify_severity(None) == "goblin"


def test_plain_typo_is_goblin():
    assert classify_severity("Typo in the header") == "goblin"
    assert classify_severity("Typo in the header", urgency="low") == "goblin"


def test_dragon_keywords():
    assert classify_severity("The server crashed after deploy") == "dragon"
    assert classify_severity("Checkout OUTAGE since noon") == "dragon"


def test_critical_urgency_makes_dragon():
    assert classify_severity("Typo in the header", urgency="critical") == "dragon"
    assert classify_severity("Typo in the header", urgency="CRITICAL") == "dragon"


def test_hydra_keywords():
    assert classify_severity("Several tests fail at random") == "hydra"


def test_hydra_by_and_count():
    # Three occurrences of "and" is more than the threshold
    assert classify_severity("read and parse and save and send") == "hydra"


def test_and_count_at_threshold_is_not_hydra():
    assert classify_severity("read and parse and save") == "goblin"


def test_troll_keywords():
    assert classify_severity("Page is slow to render") == "troll"
    assert classify_severity("Database rejects inserts") == "troll"


def test_orc_keywords():
    assert classify_severity("Unexpected result from sort") == "orc"


def test_moderate_urgency_makes_orc():
    assert classify_severity("Typo in the header", urgency="moderate") == "orc"


def test_dragon_outranks_troll():
    assert classify_severity("Database crash on startup") == "dragon"


def test_hydra_outranks_troll():
    assert classify_severity("Multiple api errors") == "hydra"


def test_troll_outranks_orc():
    assert classify_severity("Unexpected api response") == "troll"


def test_critical_urgency_outranks_hydra_keywords():
    assert classify_severity("Several tests fail", urgency="critical") == "dragon"


@pytest.mark.parametrize("description, urgency, expected", [
    # dragon over every lower tier
    ("Several nodes crash at night", None, "dragon"),
    ("Database crash on startup", None, "dragon"),
    ("Unexpected crash in the report", None, "dragon"),
    ("Page is slow", "critical", "dragon"),
    # hydra over troll and orc
    ("Multiple api errors", None, "hydra"),
    ("Several unexpected results", None, "hydra"),
    ("read and parse and save and query the database", None, "hydra"),
    ("fetch and sort and merge and show the unexpected total", None, "hydra"),
    # troll over orc
    ("Unexpected api response", None, "troll"),
    ("Page is slow", "moderate", "troll"),
    # orc over goblin
    ("Typo in the header", "moderate", "orc"),
    ("Typo in the header", "high", "goblin"),
])
def test_severity_priority(description, urgency, expected):
    assert classify_severity(description, urgency) == expected


def test_severity_is_always_a_label():
    for text in ("", "anything at all", "🦆", "x" * 500):
        assert classify_severity(text) in SEVERITIES


# ── Category ──────────────────────────────────────────────────────────────


def test_empty_description_is_logic():
    assert classify_category("") == "logic"
    assert classify_category(None, None) == "logic"


def test_category_keywords():
    assert classify_category("CSS layout broken on mobile") == "ui"
    assert classify_category("Slow memory growth") == "performance"
    assert classify_category("Webhook never fires") == "integration"
    assert classify_category("Migration drops rows") == "data"
    assert classify_category("Refactor the module structure") == "architecture"
    assert classify_category("Off by one in the loop") == "logic"


def test_ui_outranks_integration():
    assert classify_category("API response shows the wrong layout") == "ui"


@pytest.mark.parametrize("description, expected", [
    ("Slow layout on the dashboard", "ui"),
    ("API response shows the wrong layout", "ui"),
    ("Layout shows stale data", "ui"),
    ("Layout needs a refactor", "ui"),
    ("Slow webhook delivery", "performance"),
    ("Slow query on reports", "performance"),
    ("Memory leak after refactor", "performance"),
    ("Webhook writes to the database", "integration"),
    ("External service needs a refactor", "integration"),
    ("Migration script structure", "data"),
    ("Refactor the module structure", "architecture"),
])
def test_category_priority(description, expected):
    assert classify_category(description) == expected


def test_tech_stack_is_searched():
    assert classify_category("Page renders blank") == "logic"
    assert classify_category("Page renders blank", ["PostgreSQL"]) == "data"


def test_category_is_always_a_label():
    for text in ("", "anything at all", "🦆"):
        assert classify_category(text) in CATEGORIES


# ── Combined ──────────────────────────────────────────────────────────────


def test_api_timeout_example():
    """'times out' is not 'timeout', so performance never matches."""
    description = "My API call times out under load"
    assert classify_severity(description) == "troll"
    assert classify_category(description) == "integration"


def test_classification_is_deterministic():
    description = "Several services are slow and the dashboard layout breaks"
    assert classify_severity(description) == classify_severity(description)
    assert classify_category(description) == classify_category(description)
