"""Tests for the quest tracker — lifecycle, phase rules, experience."""

import sys
from datetime import timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import logging

import pytest

from config import (
    OPENING_SUGGESTIONS,
    PHASE_DESCRIPTIONS,
    PHASES,
    PHASE_SUGGESTIONS,
    REFLECTION_QUESTIONS,
    VICTORY_SUGGESTIONS,
    WISDOM_BUCKETS,
)
from duckquest.generation import mentor
from duckquest.generation.mentor import FirstSelector
from duckquest.models.quest import AdventureContext
from duckquest.systems import quest_tracker
from duckquest.systems.quest_tracker import NoActiveQuestError
from tests.helpers import GOBLIN_BUG, T0, add_findings, open_quest


@pytest.fixture
def ctx():
    return AdventureContext()


# ── start_quest ───────────────────────────────────────────────────────────


def test_start_quest_opens_at_preparation(ctx):
    quest, payload = open_quest(ctx)
    assert ctx.current_quest is quest
    assert quest.phase == "preparation"
    assert quest.severity == "goblin"
    assert quest.category == "logic"
    assert quest.findings == []
    assert quest.milestones == []
    assert quest.started_at == T0
    assert quest.id.startswith("quest_")


def test_start_quest_title(ctx):
    quest, _ = open_quest(ctx, "My API call times out under load")
    assert quest.title == "The Troll's Challenge in the Integration Invasion"


def test_start_quest_payload(ctx):
    quest, payload = open_quest(ctx)
    assert payload.message.startswith(mentor.GREETINGS[0])
    assert quest.title in payload.message
    assert GOBLIN_BUG in payload.message
    assert payload.message.endswith("A mischievous goblin 🧌 awaits your investigation!")
    assert payload.questions == mentor.QUESTIONS["logic"]["preparation"][:3]
    assert payload.encouragement == mentor.ENCOURAGEMENTS["goblin"][0]
    assert payload.next_suggestions == OPENING_SUGGESTIONS


def test_start_quest_keeps_tech_stack(ctx):
    quest, _ = open_quest(ctx, "Page renders blank", tech_stack=["PostgreSQL"])
    assert quest.tech_stack == ["PostgreSQL"]
    assert quest.category == "data"


def test_start_quest_replaces_unfinished_quest(ctx, caplog):
    first, _ = open_quest(ctx)
    add_findings(ctx, 2)

    with caplog.at_level(logging.WARNING):
        second, _ = open_quest(ctx, "Several tests fail")

    assert ctx.current_quest is second
    assert second.findings == []
    assert ctx.hero.completed_quests == []
    assert ctx.hero.experience == 0
    assert any(first.id in r.getMessage() for r in caplog.records)


# ── continue_quest ────────────────────────────────────────────────────────


def test_continue_without_quest_raises(ctx):
    with pytest.raises(NoActiveQuestError) as exc:
        quest_tracker.continue_quest(ctx, "anything", selector=FirstSelector())
    assert exc.value.operation == "continue"


def test_two_findings_stay_in_preparation(ctx):
    open_quest(ctx)
    add_findings(ctx, 2)
    assert ctx.current_quest.phase == "preparation"
    assert ctx.current_quest.milestones == []


def test_third_finding_enters_investigation(ctx):
    open_quest(ctx)
    add_findings(ctx, 3)
    quest = ctx.current_quest
    assert quest.phase == "investigation"
    assert len(quest.milestones) == 1
    assert quest.milestones[0].title == "Investigation Phase"
    assert quest.milestones[0].phase == "investigation"


def test_breakthrough_in_investigation_enters_battle(ctx):
    open_quest(ctx)
    add_findings(ctx, 3)
    add_findings(ctx, 1, significance="breakthrough")
    quest = ctx.current_quest
    assert quest.phase == "battle"
    assert [m.title for m in quest.milestones] == ["Investigation Phase", "Battle Phase"]


def test_early_breakthrough_moves_one_phase_at_a_time(ctx):
    open_quest(ctx)
    add_findings(ctx, 1, significance="breakthrough")
    assert ctx.current_quest.phase == "preparation"

    add_findings(ctx, 2)
    assert ctx.current_quest.phase == "investigation"

    # The earlier breakthrough still counts on the next finding
    add_findings(ctx, 1, significance="minor")
    assert ctx.current_quest.phase == "battle"


def test_six_findings_enter_battle(ctx):
    open_quest(ctx)
    add_findings(ctx, 5)
    assert ctx.current_quest.phase == "investigation"
    add_findings(ctx, 1)
    assert ctx.current_quest.phase == "battle"


def test_battle_never_advances_on_findings(ctx):
    open_quest(ctx)
    add_findings(ctx, 6)
    add_findings(ctx, 10, significance="breakthrough")
    quest = ctx.current_quest
    assert quest.phase == "battle"
    assert len(quest.milestones) == 2


def test_phase_never_moves_backward(ctx):
    open_quest(ctx)
    seen = [ctx.current_quest.phase_index]
    for significance in ["minor", "major", "moderate", "breakthrough", "minor", "minor", "minor"]:
        add_findings(ctx, 1, significance=significance)
        seen.append(ctx.current_quest.phase_index)
    assert seen == sorted(seen)
    assert max(seen) < PHASES.index("victory")


def test_unknown_significance_becomes_moderate(ctx):
    open_quest(ctx)
    quest_tracker.continue_quest(ctx, "odd one", "earth-shattering", selector=FirstSelector(), now=T0)
    assert ctx.current_quest.findings[-1].significance == "moderate"


def test_continue_payload(ctx):
    open_quest(ctx)
    payload = quest_tracker.continue_quest(ctx, "the loop starts at 1", selector=FirstSelector(), now=T0)
    assert payload.message.startswith("Interesting discovery!")
    assert "**Your Finding:** the loop starts at 1" in payload.message
    assert PHASE_DESCRIPTIONS["preparation"] in payload.message
    assert payload.questions == mentor.QUESTIONS["logic"]["preparation"][:3]
    assert payload.next_suggestions == PHASE_SUGGESTIONS["preparation"]


def test_breakthrough_payload_uses_milestone_acknowledgment(ctx):
    open_quest(ctx)
    payload = quest_tracker.continue_quest(
        ctx, "found it", "breakthrough", selector=FirstSelector(), now=T0,
    )
    assert payload.message.startswith(mentor.MILESTONE_ACKNOWLEDGMENTS[0])


def test_continue_payload_follows_new_phase(ctx):
    open_quest(ctx)
    add_findings(ctx, 2)
    payload = quest_tracker.continue_quest(ctx, "third", selector=FirstSelector(), now=T0)
    assert payload.questions == mentor.QUESTIONS["logic"]["investigation"][:3]
    assert payload.next_suggestions == PHASE_SUGGESTIONS["investigation"]


# ── get_status ────────────────────────────────────────────────────────────


def test_status_without_quest(ctx):
    snapshot = quest_tracker.get_status(ctx)
    assert snapshot.active is False
    assert snapshot.hero_level == 1
    assert snapshot.to_dict() == {
        "active": False,
        "hero": {"level": 1, "experience": 0, "completedQuests": 0},
    }


def test_status_with_quest(ctx):
    open_quest(ctx)
    add_findings(ctx, 4)
    snapshot = quest_tracker.get_status(ctx, now=T0 + timedelta(minutes=7, seconds=59))
    assert snapshot.active is True
    assert snapshot.phase == "investigation"
    assert snapshot.elapsed_minutes == 7
    assert snapshot.finding_count == 4
    assert snapshot.milestone_count == 1
    assert [f.content for f in snapshot.recent_findings] == ["finding 2", "finding 3", "finding 4"]


# ── seek_wisdom ───────────────────────────────────────────────────────────


def test_wisdom_without_quest_raises(ctx):
    with pytest.raises(NoActiveQuestError) as exc:
        quest_tracker.seek_wisdom(ctx, "testing")
    assert exc.value.operation == "wisdom"


@pytest.mark.parametrize("help_type, bucket", [
    ("approach", 0),
    ("What STRATEGY should I use?", 0),
    ("testing", 1),
    ("verify the fix", 1),
    ("investigate", 2),
    ("explore options", 2),
])
def test_wisdom_buckets(ctx, help_type, bucket):
    open_quest(ctx)
    payload = quest_tracker.seek_wisdom(ctx, help_type, selector=FirstSelector())
    _, title, questions = WISDOM_BUCKETS[bucket]
    assert payload.message == title
    assert payload.questions == questions


def test_wisdom_first_bucket_wins(ctx):
    open_quest(ctx)
    payload = quest_tracker.seek_wisdom(ctx, "test my strategy", selector=FirstSelector())
    assert payload.message == WISDOM_BUCKETS[0][1]


def test_general_wisdom(ctx):
    open_quest(ctx)
    payload = quest_tracker.seek_wisdom(ctx, "code review", selector=FirstSelector())
    assert "General Wisdom" in payload.message
    assert payload.questions == mentor.QUESTIONS["logic"]["preparation"][:3]


def test_wisdom_does_not_mutate(ctx):
    quest, _ = open_quest(ctx)
    add_findings(ctx, 2)
    before = quest.to_dict()
    quest_tracker.seek_wisdom(ctx, "testing", selector=FirstSelector())
    assert quest.to_dict() == before
    assert ctx.current_quest is quest


# ── complete_quest ────────────────────────────────────────────────────────


def test_complete_without_quest_raises(ctx):
    with pytest.raises(NoActiveQuestError) as exc:
        quest_tracker.complete_quest(ctx, "done")
    assert exc.value.operation == "complete"


def test_goblin_with_two_findings_earns_19_xp(ctx):
    open_quest(ctx)
    add_findings(ctx, 2)
    result = quest_tracker.complete_quest(ctx, selector=FirstSelector(), now=T0)
    # 10 base + 2×2 findings + 5×1 completion milestone
    assert result.experience_gained == 19
    assert ctx.hero.experience == 19
    assert result.leveled_up is False
    assert ctx.hero.level == 1


def test_complete_archives_and_clears(ctx):
    quest, _ = open_quest(ctx)
    quest_tracker.complete_quest(ctx, "Fixed the off-by-one", selector=FirstSelector(), now=T0)
    assert ctx.current_quest is None
    assert ctx.hero.completed_quests == [quest]
    assert quest.phase == "victory"
    assert quest.milestones[-1].title == "Quest Completed!"
    assert quest.milestones[-1].description == "Fixed the off-by-one"
    assert quest.milestones[-1].phase == "victory"


def test_complete_default_milestone_description(ctx):
    quest, _ = open_quest(ctx)
    quest_tracker.complete_quest(ctx, selector=FirstSelector(), now=T0)
    assert quest.milestones[-1].description == "Hero successfully vanquished the bug!"


def test_complete_payload(ctx):
    open_quest(ctx)
    result = quest_tracker.complete_quest(
        ctx, selector=FirstSelector(), now=T0 + timedelta(minutes=5, seconds=30),
    )
    message = result.guidance.message
    assert message.startswith(mentor.VICTORY_MESSAGES[0])
    assert "LEVEL UP" not in message
    assert "**Solution:** Bug successfully eliminated!" in message
    assert "**Experience Gained:** 15 XP" in message
    assert "**Time Taken:** 5 minutes" in message
    assert result.guidance.questions == REFLECTION_QUESTIONS
    assert result.guidance.next_suggestions == VICTORY_SUGGESTIONS


def test_complete_levels_up(ctx):
    open_quest(ctx, "Several tests fail")
    add_findings(ctx, 3)
    result = quest_tracker.complete_quest(ctx, selector=FirstSelector(), now=T0)
    # 150 + 2×3 + 5×2 (investigation + completion)
    assert result.experience_gained == 166
    assert result.leveled_up is True
    assert result.level == 2
    assert "LEVEL UP!" in result.guidance.message
    assert "Level 2 Debug Hero" in result.guidance.message


def test_second_close_raises(ctx):
    open_quest(ctx)
    quest_tracker.complete_quest(ctx, selector=FirstSelector(), now=T0)
    with pytest.raises(NoActiveQuestError):
        quest_tracker.complete_quest(ctx, selector=FirstSelector(), now=T0)


def test_experience_only_grows(ctx):
    totals = [ctx.hero.experience]
    for description in (GOBLIN_BUG, "Page is slow", "Server crash"):
        open_quest(ctx, description)
        add_findings(ctx, 1)
        quest_tracker.complete_quest(ctx, selector=FirstSelector(), now=T0)
        totals.append(ctx.hero.experience)
    assert totals == sorted(totals)
    assert len(ctx.hero.completed_quests) == 3
