"""
Quest tracker for DuckQuest — the debugging quest state machine.

Phases: preparation → investigation → battle → victory.
Findings drive the first two transitions; only complete_quest() reaches
victory. Every operation takes the AdventureContext it acts on; the host
owns that context and serializes calls into it.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from config import (
    BATTLE_FINDING_THRESHOLD,
    DEFAULT_SIGNIFICANCE,
    DEFAULT_SOLUTION_TEXT,
    FINDING_ACKNOWLEDGMENT,
    GENERAL_WISDOM_TITLE,
    INVESTIGATION_FINDING_THRESHOLD,
    OPENING_SUGGESTIONS,
    PHASE_DESCRIPTIONS,
    PHASE_MILESTONES,
    PHASE_SUGGESTIONS,
    QUESTIONS_PER_RESPONSE,
    RECENT_FINDINGS_SHOWN,
    REFLECTION_QUESTIONS,
    SEVERITY_BASE_XP,
    SEVERITY_DESCRIPTIONS,
    SIGNIFICANCES,
    VICTORY_ENCOURAGEMENT,
    VICTORY_MILESTONE_DEFAULT,
    VICTORY_MILESTONE_TITLE,
    VICTORY_SUGGESTIONS,
    WISDOM_BUCKETS,
    XP_PER_FINDING,
    XP_PER_MILESTONE,
)
from duckquest.core.classifier import classify_category, classify_severity
from duckquest.generation.mentor import SelectorInterface, get_selector
from duckquest.models import hero as hero_model
from duckquest.models import quest as quest_model
from duckquest.models.quest import AdventureContext, GuidancePayload, Quest, StatusSnapshot
from duckquest.transport.formatter import fmt_level_up

logger = logging.getLogger(__name__)


class NoActiveQuestError(Exception):
    """The operation needs an active quest and the context has none."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"No active quest for '{operation}'")


@dataclass
class VictoryResult:
    """Outcome of completing a quest."""
    quest: Quest
    guidance: GuidancePayload
    experience_gained: int
    leveled_up: bool
    level: int


# ── Lifecycle ──────────────────────────────────────────────────────────────


def start_quest(
    ctx: AdventureContext,
    description: str,
    tech_stack: Optional[list[str]] = None,
    urgency: Optional[str] = None,
    selector: Optional[SelectorInterface] = None,
    now: Optional[datetime] = None,
) -> tuple[Quest, GuidancePayload]:
    """Open a new quest, replacing whatever quest was active.

    Classification happens once, here, and is never recomputed.

    Args:
        ctx: Adventure context to store the quest in.
        description: The bug as the hero describes it.
        tech_stack: Technologies involved, if any.
        urgency: Optional urgency (low, moderate, high, critical).
        selector: Mentor voice. Defaults to the configured selector.
        now: Opening timestamp. Defaults to the current UTC time.

    Returns:
        (quest, opening guidance)
    """
    selector = selector or get_selector()
    now = now or quest_model.utcnow()

    severity = classify_severity(description, urgency)
    category = classify_category(description, tech_stack)
    quest = quest_model.create_quest(description, severity, category, tech_stack, now=now)

    previous = ctx.current_quest
    if previous is not None:
        logger.warning(
            f"Discarding unfinished quest {previous.id} ({previous.phase}, "
            f"{len(previous.findings)} findings) for new quest {quest.id}"
        )
    ctx.current_quest = quest
    logger.info(f"Quest {quest.id} opened: {severity}/{category}, '{quest.title}'")

    questions = selector.get_questions(category, "preparation")
    guidance = GuidancePayload(
        message=(
            f"{selector.get_greeting()}\n\n📜 **{quest.title}**\n\n{description}\n\n"
            f"{SEVERITY_DESCRIPTIONS[severity]} awaits your investigation!"
        ),
        questions=questions[:QUESTIONS_PER_RESPONSE],
        encouragement=selector.get_encouragement(severity),
        next_suggestions=list(OPENING_SUGGESTIONS),
    )
    return quest, guidance


def continue_quest(
    ctx: AdventureContext,
    finding: str,
    significance: str = DEFAULT_SIGNIFICANCE,
    selector: Optional[SelectorInterface] = None,
    now: Optional[datetime] = None,
) -> GuidancePayload:
    """Record a finding on the active quest and maybe advance its phase.

    Raises:
        NoActiveQuestError: If the context has no active quest.
    """
    quest = _require_quest(ctx, "continue")
    selector = selector or get_selector()
    now = now or quest_model.utcnow()

    significance = (significance or DEFAULT_SIGNIFICANCE).lower()
    if significance not in SIGNIFICANCES:
        logger.debug(f"Unknown significance {significance!r}, using {DEFAULT_SIGNIFICANCE}")
        significance = DEFAULT_SIGNIFICANCE

    quest_model.add_finding(quest, finding, significance, now)
    advance_phase(quest, now)

    if significance == "breakthrough":
        acknowledgment = selector.get_milestone_acknowledgment()
    else:
        acknowledgment = FINDING_ACKNOWLEDGMENT

    questions = selector.get_questions(quest.category, quest.phase)
    return GuidancePayload(
        message=(
            f"{acknowledgment}\n\n**Your Finding:** {finding}\n\n"
            f"**Current Phase:** {PHASE_DESCRIPTIONS[quest.phase]}"
        ),
        questions=questions[:QUESTIONS_PER_RESPONSE],
        encouragement=selector.get_encouragement(quest.severity),
        next_suggestions=list(PHASE_SUGGESTIONS[quest.phase]),
    )


def get_status(ctx: AdventureContext, now: Optional[datetime] = None) -> StatusSnapshot:
    """Snapshot of the active quest and hero. Never fails."""
    hero = ctx.hero
    quest = ctx.current_quest
    if quest is None:
        return StatusSnapshot(
            active=False,
            hero_level=hero.level,
            hero_experience=hero.experience,
            completed_quests=len(hero.completed_quests),
        )

    now = now or quest_model.utcnow()
    return StatusSnapshot(
        active=True,
        hero_level=hero.level,
        hero_experience=hero.experience,
        completed_quests=len(hero.completed_quests),
        title=quest.title,
        severity=quest.severity,
        category=quest.category,
        phase=quest.phase,
        elapsed_minutes=quest.elapsed_minutes(now),
        finding_count=len(quest.findings),
        milestone_count=len(quest.milestones),
        recent_findings=quest.findings[-RECENT_FINDINGS_SHOWN:],
    )


def seek_wisdom(
    ctx: AdventureContext,
    help_type: str,
    selector: Optional[SelectorInterface] = None,
) -> GuidancePayload:
    """Targeted advice for the kind of help requested. Read-only.

    Raises:
        NoActiveQuestError: If the context has no active quest.
    """
    quest = _require_quest(ctx, "wisdom")
    selector = selector or get_selector()
    help_lower = (help_type or "").lower()

    for keywords, title, questions in WISDOM_BUCKETS:
        if any(kw in help_lower for kw in keywords):
            message = title
            chosen = list(questions)
            break
    else:
        message = GENERAL_WISDOM_TITLE
        chosen = selector.get_questions(quest.category, quest.phase)[:QUESTIONS_PER_RESPONSE]

    return GuidancePayload(
        message=message,
        questions=chosen,
        encouragement=selector.get_encouragement(quest.severity),
        next_suggestions=list(PHASE_SUGGESTIONS[quest.phase]),
    )


def complete_quest(
    ctx: AdventureContext,
    solution_summary: Optional[str] = None,
    selector: Optional[SelectorInterface] = None,
    now: Optional[datetime] = None,
) -> VictoryResult:
    """Close the active quest: victory, XP, archive, clear the slot.

    Raises:
        NoActiveQuestError: If the context has no active quest.
    """
    quest = _require_quest(ctx, "complete")
    selector = selector or get_selector()
    now = now or quest_model.utcnow()

    quest.phase = "victory"
    quest_model.add_milestone(
        quest, VICTORY_MILESTONE_TITLE, solution_summary or VICTORY_MILESTONE_DEFAULT, now,
    )

    xp = calculate_experience(quest)
    new_level = hero_model.award_xp(ctx.hero, xp)

    ctx.hero.completed_quests.append(quest)
    ctx.current_quest = None

    logger.info(
        f"Quest {quest.id} completed: +{xp} XP, hero level {ctx.hero.level} "
        f"({ctx.hero.experience} XP total)"
    )

    message = selector.get_victory_message()
    if new_level:
        message += f"\n\n{fmt_level_up(new_level)}"
    message += (
        f"\n\n**Quest Summary:** {quest.title}"
        f"\n**Solution:** {solution_summary or DEFAULT_SOLUTION_TEXT}"
        f"\n**Experience Gained:** {xp} XP"
        f"\n**Time Taken:** {quest.elapsed_minutes(now)} minutes"
    )

    guidance = GuidancePayload(
        message=message,
        questions=list(REFLECTION_QUESTIONS),
        encouragement=VICTORY_ENCOURAGEMENT,
        next_suggestions=list(VICTORY_SUGGESTIONS),
    )
    return VictoryResult(
        quest=quest,
        guidance=guidance,
        experience_gained=xp,
        leveled_up=new_level is not None,
        level=ctx.hero.level,
    )


# ── Rules ──────────────────────────────────────────────────────────────────


def advance_phase(quest: Quest, now: datetime) -> Optional[str]:
    """Apply the phase-advance rule once.

    Re-evaluates the whole finding history, not just the newest entry.
    Moves at most one phase per call and writes one milestone when it does.

    Returns:
        The new phase if the quest advanced, None otherwise.
    """
    count = len(quest.findings)

    if quest.phase == "preparation" and count >= INVESTIGATION_FINDING_THRESHOLD:
        new_phase = "investigation"
    elif quest.phase == "investigation" and (
        quest.has_breakthrough() or count >= BATTLE_FINDING_THRESHOLD
    ):
        new_phase = "battle"
    else:
        return None

    quest.phase = new_phase
    title, description = PHASE_MILESTONES[new_phase]
    quest_model.add_milestone(quest, title, description, now)
    logger.info(f"Quest {quest.id} advanced to {new_phase} after {count} findings")
    return new_phase


def calculate_experience(quest: Quest) -> int:
    """XP for a quest: severity base + 2 per finding + 5 per milestone."""
    return (
        SEVERITY_BASE_XP[quest.severity]
        + XP_PER_FINDING * len(quest.findings)
        + XP_PER_MILESTONE * len(quest.milestones)
    )


def _require_quest(ctx: AdventureContext, operation: str) -> Quest:
    if ctx.current_quest is None:
        raise NoActiveQuestError(operation)
    return ctx.current_quest
