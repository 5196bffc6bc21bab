"""
Action handlers for DuckQuest.
Console handlers take (ctx, selector, args, now) and return a response string.
The reply_* functions behind them take structured arguments and are shared
with the MCP tools, so every host words its replies the same way.
"""

from datetime import datetime
from typing import Optional

from config import DEFAULT_SIGNIFICANCE, SEVERITIES, URGENCIES
from duckquest.generation import lore
from duckquest.generation.mentor import SelectorInterface
from duckquest.models.quest import AdventureContext
from duckquest.systems import quest_tracker
from duckquest.systems.quest_tracker import NoActiveQuestError
from duckquest.transport.formatter import (
    COMPLETE_HEADINGS,
    CONTINUE_HEADINGS,
    START_HEADINGS,
    WISDOM_HEADINGS,
    fmt_no_quest,
    fmt_payload,
    fmt_status,
)
from duckquest.transport.parser import split_significance

# Console markers inside 'start' arguments
TECH_MARKER = "#"
URGENCY_MARKER = "!"

HELP_TEXT = (
    "🦆 **Commands**\n"
    "• START <bug description> [#tech ...] [!urgency]: begin a quest\n"
    "• FIND [!significance] <finding>: record a finding (F)\n"
    "• STATUS: current quest and hero (ST)\n"
    "• WISDOM <help type>: ask for guidance (W)\n"
    "• COMPLETE [solution]: finish the quest (DONE)\n"
    "• BESTIARY <creature>: lore on a bug type (B)\n"
    "• HANDBOOK: the debugging guide\n"
    "• HISTORY: your completed quests (LOG)\n"
    "• HELP: this list (H)"
)


def handle_action(
    ctx: AdventureContext,
    selector: SelectorInterface,
    command: str,
    args: list[str],
    now: Optional[datetime] = None,
) -> Optional[str]:
    """Route a command to the correct handler."""
    handlers = {
        "start": action_start,
        "find": action_find,
        "status": action_status,
        "wisdom": action_wisdom,
        "complete": action_complete,
        "bestiary": action_bestiary,
        "handbook": action_handbook,
        "history": action_history,
        "help": action_help,
    }

    handler = handlers.get(command)
    if not handler:
        return "Unknown command. Try: START FIND STATUS WISDOM COMPLETE HELP"

    return handler(ctx, selector, args, now)


# ── Replies ────────────────────────────────────────────────────────────────


def reply_start(
    ctx: AdventureContext,
    selector: SelectorInterface,
    description: str,
    tech_stack: Optional[list[str]] = None,
    urgency: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    """Open a quest and format the opening guidance."""
    _, payload = quest_tracker.start_quest(
        ctx, description, tech_stack=tech_stack, urgency=urgency, selector=selector, now=now,
    )
    return fmt_payload(payload, START_HEADINGS)


def reply_continue(
    ctx: AdventureContext,
    selector: SelectorInterface,
    finding: str,
    significance: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    """Record a finding, or invite the hero to start a quest."""
    try:
        payload = quest_tracker.continue_quest(
            ctx, finding, significance=significance or DEFAULT_SIGNIFICANCE, selector=selector, now=now,
        )
    except NoActiveQuestError as e:
        return fmt_no_quest(e.operation)
    return fmt_payload(payload, CONTINUE_HEADINGS)


def reply_status(ctx: AdventureContext, now: Optional[datetime] = None) -> str:
    return fmt_status(quest_tracker.get_status(ctx, now=now))


def reply_wisdom(
    ctx: AdventureContext,
    selector: SelectorInterface,
    help_type: str,
) -> str:
    try:
        payload = quest_tracker.seek_wisdom(ctx, help_type, selector=selector)
    except NoActiveQuestError as e:
        return fmt_no_quest(e.operation)
    return fmt_payload(payload, WISDOM_HEADINGS)


def reply_complete(
    ctx: AdventureContext,
    selector: SelectorInterface,
    solution_summary: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    try:
        result = quest_tracker.complete_quest(
            ctx, solution_summary, selector=selector, now=now,
        )
    except NoActiveQuestError as e:
        return fmt_no_quest(e.operation)
    return fmt_payload(result.guidance, COMPLETE_HEADINGS)


# ── Console handlers ───────────────────────────────────────────────────────


def action_start(ctx, selector, args: list[str], now=None) -> str:
    """Open a quest. '#tech' words form the tech stack, '!urgency' sets urgency."""
    words, tech_stack, urgency = [], [], None
    for word in args:
        if word.startswith(TECH_MARKER) and len(word) > 1:
            tech_stack.append(word[1:])
        elif word.startswith(URGENCY_MARKER) and word[1:].lower() in URGENCIES:
            urgency = word[1:].lower()
        else:
            words.append(word)

    return reply_start(ctx, selector, " ".join(words), tech_stack, urgency, now)


def action_find(ctx, selector, args: list[str], now=None) -> str:
    """Record a finding. A leading "!breakthrough" marks its significance."""
    significance, rest = split_significance(args)
    if not rest:
        return "FIND [!minor|!moderate|!major|!breakthrough] <what you discovered>"
    return reply_continue(ctx, selector, " ".join(rest), significance, now)


def action_status(ctx, selector, args: list[str], now=None) -> str:
    return reply_status(ctx, now)


def action_wisdom(ctx, selector, args: list[str], now=None) -> str:
    """Ask for guidance. Defaults to general wisdom."""
    help_type = " ".join(args) or "general"
    return reply_wisdom(ctx, selector, help_type)


def action_complete(ctx, selector, args: list[str], now=None) -> str:
    summary = " ".join(args) or None
    return reply_complete(ctx, selector, summary, now)


def action_bestiary(ctx, selector, args: list[str], now=None) -> str:
    """Lore on one creature. A prefix is enough when it is unambiguous."""
    if not args:
        return f"BESTIARY <{'|'.join(SEVERITIES)}>"

    bug_type = args[0].lower()
    matches = lore.complete_bug_type(bug_type)
    if len(matches) == 1:
        bug_type = matches[0]
    return lore.get_bug_info(bug_type)


def action_handbook(ctx, selector, args: list[str], now=None) -> str:
    return lore.generate_debugging_handbook()


def action_history(ctx, selector, args: list[str], now=None) -> str:
    return lore.generate_quest_log(ctx.hero)


def action_help(ctx, selector, args: list[str], now=None) -> str:
    """Show available commands."""
    return HELP_TEXT
