"""Tests for mentor selectors and table validation."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from config import CATEGORIES, PHASES, SEVERITIES
from duckquest.generation import mentor
from duckquest.generation.mentor import (
    FirstSelector,
    RandomSelector,
    SelectorInterface,
    get_selector,
)
from duckquest.generation.validation import validate_tables


# ── Selectors ─────────────────────────────────────────────────────────────


def test_first_selector_picks_first_entry():
    selector = FirstSelector()
    assert selector.get_greeting() == mentor.GREETINGS[0]
    assert selector.get_encouragement("troll") == mentor.ENCOURAGEMENTS["troll"][0]
    assert selector.get_milestone_acknowledgment() == mentor.MILESTONE_ACKNOWLEDGMENTS[0]
    assert selector.get_victory_message() == mentor.VICTORY_MESSAGES[0]


def test_random_selector_stays_in_pool():
    selector = RandomSelector(seed=7)
    for _ in range(20):
        assert selector.get_greeting() in mentor.GREETINGS
        assert selector.get_encouragement("hydra") in mentor.ENCOURAGEMENTS["hydra"]


def test_seeded_selectors_repeat():
    a = RandomSelector(seed=42)
    b = RandomSelector(seed=42)
    assert [a.get_greeting() for _ in range(10)] == [b.get_greeting() for _ in range(10)]


def test_questions_are_the_full_pool_and_a_copy():
    selector = RandomSelector()
    questions = selector.get_questions("data", "battle")
    assert questions == mentor.QUESTIONS["data"]["battle"]
    questions.append("mutated")
    assert "mutated" not in mentor.QUESTIONS["data"]["battle"]


def test_custom_selector_only_needs_pick():
    class LastSelector(SelectorInterface):
        def pick(self, pool):
            return pool[-1]

    assert LastSelector().get_victory_message() == mentor.VICTORY_MESSAGES[-1]


# ── Factory ───────────────────────────────────────────────────────────────


def test_get_selector_by_name():
    assert isinstance(get_selector("first"), FirstSelector)
    assert isinstance(get_selector("random"), RandomSelector)


def test_get_selector_from_env(monkeypatch):
    monkeypatch.setenv("DUCKQUEST_SELECTOR", "first")
    assert isinstance(get_selector(), FirstSelector)


def test_get_selector_seed_from_env(monkeypatch):
    monkeypatch.setenv("DUCKQUEST_SELECTOR", "random")
    monkeypatch.setenv("DUCKQUEST_SEED", "3")
    a, b = get_selector(), get_selector()
    assert [a.get_greeting() for _ in range(5)] == [b.get_greeting() for _ in range(5)]


def test_unknown_selector_falls_back_to_random(monkeypatch):
    monkeypatch.delenv("DUCKQUEST_SELECTOR", raising=False)
    assert isinstance(get_selector("loudest"), RandomSelector)


def test_bad_seed_is_ignored(monkeypatch):
    monkeypatch.setenv("DUCKQUEST_SEED", "not-a-number")
    assert isinstance(get_selector("random"), RandomSelector)


# ── Validation ────────────────────────────────────────────────────────────


def test_shipped_tables_validate():
    report = validate_tables()
    assert report["errors"] == []


def test_every_pair_has_questions():
    for category in CATEGORIES:
        for phase in PHASES:
            assert mentor.QUESTIONS[category][phase]
    for severity in SEVERITIES:
        assert mentor.ENCOURAGEMENTS[severity]


def test_validation_catches_missing_pool(monkeypatch):
    broken = {k: dict(v) for k, v in mentor.QUESTIONS.items()}
    broken["ui"]["battle"] = []
    monkeypatch.setattr(mentor, "QUESTIONS", broken)
    errors = validate_tables()["errors"]
    assert any("(ui, battle)" in e for e in errors)


def test_validation_catches_template_variables(monkeypatch):
    monkeypatch.setattr(mentor, "GREETINGS", ["Hello {hero_name}!"])
    errors = validate_tables()["errors"]
    assert any("template variable" in e for e in errors)
