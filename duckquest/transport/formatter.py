"""
Response formatter for DuckQuest.
Turns guidance payloads and status snapshots into the markdown text every
host (MCP, console, web handbook views) shows to the hero.
"""

from config import (
    CATEGORY_DESCRIPTIONS,
    NO_QUEST_RESPONSES,
    NO_QUEST_STATUS,
    PHASE_DESCRIPTIONS,
    SEVERITY_DESCRIPTIONS,
)

# Section headings per operation: (questions, encouragement, suggestions)
START_HEADINGS = ("🤔 Guiding Questions", "💪 Encouragement", "🎯 Next Steps")
CONTINUE_HEADINGS = ("🤔 Next Questions to Consider", "💪 Keep Going", "🎯 Suggested Actions")
WISDOM_HEADINGS = ("🧙 Wisdom Questions", "💪 Remember", "🎯 Action Items")
COMPLETE_HEADINGS = ("🤔 Reflection Questions", "🌟 Hero's Journey", "🚀 Moving Forward")


def fmt_bullets(items: list[str]) -> str:
    """One "• item" line per entry."""
    return "\n".join(f"• {item}" for item in items)


def fmt_payload(payload, headings: tuple[str, str, str] = START_HEADINGS) -> str:
    """Format a GuidancePayload as a markdown reply.

    Template:
        {message}

        **{questions heading}:**
        • question ...

        **{encouragement heading}:** {encouragement}

        **{suggestions heading}:**
        • suggestion ...

    Args:
        payload: GuidancePayload to render.
        headings: (questions, encouragement, suggestions) headings.

    Returns:
        Formatted text.
    """
    questions_heading, encouragement_heading, suggestions_heading = headings
    parts = [payload.message]
    if payload.questions:
        parts.append(f"**{questions_heading}:**\n{fmt_bullets(payload.questions)}")
    if payload.encouragement:
        parts.append(f"**{encouragement_heading}:** {payload.encouragement}")
    if payload.next_suggestions:
        parts.append(f"**{suggestions_heading}:**\n{fmt_bullets(payload.next_suggestions)}")
    return "\n\n".join(parts)


def fmt_status(snapshot) -> str:
    """Format a StatusSnapshot. Hero stats are only shown with an active quest."""
    if not snapshot.active:
        return NO_QUEST_STATUS

    lines = [
        "🗡️ **Current Quest Status**",
        "",
        f"**{snapshot.title}**",
        f"**Beast Type:** {SEVERITY_DESCRIPTIONS[snapshot.severity]}",
        f"**Quest Type:** {CATEGORY_DESCRIPTIONS[snapshot.category]}",
        f"**Phase:** {PHASE_DESCRIPTIONS[snapshot.phase]}",
        f"**Time Elapsed:** {snapshot.elapsed_minutes} minutes",
        f"**Findings Collected:** {snapshot.finding_count}",
        f"**Milestones Achieved:** {snapshot.milestone_count}",
    ]
    if snapshot.recent_findings:
        lines += ["", "**Recent Findings:**"]
        lines += [f"• {f.content}" for f in snapshot.recent_findings]
    lines += [
        "",
        f"**Hero Level:** {snapshot.hero_level}",
        f"**Total Experience:** {snapshot.hero_experience} XP",
        f"**Completed Quests:** {snapshot.completed_quests}",
    ]
    return "\n".join(lines)


def fmt_level_up(level: int) -> str:
    """Format level up line."""
    return f"🌟 **LEVEL UP!** You are now a Level {level} Debug Hero!"


def fmt_no_quest(operation: str) -> str:
    """In-character invitation to start a quest, worded per operation."""
    message, encouragement, suggestion = NO_QUEST_RESPONSES.get(
        operation, NO_QUEST_RESPONSES["continue"]
    )
    return f"{message}\n\n**💪 Encouragement:** {encouragement}\n\n**🎯 Next Step:** {suggestion}"
