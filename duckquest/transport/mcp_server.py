"""
MCP server for DuckQuest.
Exposes the quest operations as tools, the lore as resources, and the
conversation starters as prompts, all over one QuestEngine.

Run with transport="stdio"; stdout belongs to the protocol, so logging
must go to stderr.
"""

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.prompts import base

from config import SERVER_NAME
from duckquest.core import actions
from duckquest.core.engine import QuestEngine
from duckquest.generation import lore

logger = logging.getLogger(__name__)

# Suppress verbose MCP logging
logging.getLogger("mcp").setLevel(logging.ERROR)


def create_server(engine: QuestEngine) -> FastMCP:
    """Build a FastMCP server bound to one engine."""
    mcp = FastMCP(SERVER_NAME)
    setup_tools(mcp, engine)
    setup_resources(mcp, engine)
    setup_prompts(mcp)
    return mcp


# ── Tools ──────────────────────────────────────────────────────────────────


def setup_tools(mcp: FastMCP, engine: QuestEngine) -> None:
    """Register the five quest tools."""

    @mcp.tool(name="start_quest")
    def start_quest(
        description: str,
        techStack: Optional[list[str]] = None,
        urgency: Optional[str] = None,
    ) -> str:
        """Begin a new debugging adventure. Describe the bug you're facing,
        the technologies involved, and how urgent it is (low, moderate, high, critical)."""
        logger.debug(f"tool start_quest: {description[:60]}")
        return actions.reply_start(
            engine.context, engine.selector, description, techStack, urgency, engine.now(),
        )

    @mcp.tool(name="continue_quest")
    def continue_quest(finding: str, significance: Optional[str] = None) -> str:
        """Share a discovery from your investigation. Significance is one of
        minor, moderate, major, or breakthrough."""
        logger.debug(f"tool continue_quest: {finding[:60]}")
        return actions.reply_continue(
            engine.context, engine.selector, finding, significance, engine.now(),
        )

    @mcp.tool(name="get_quest_status")
    def get_quest_status() -> str:
        """Check the progress of the current quest and your hero stats."""
        return actions.reply_status(engine.context, engine.now())

    @mcp.tool(name="seek_wisdom")
    def seek_wisdom(helpType: str) -> str:
        """Ask the rubber duck for guidance (e.g. 'approach', 'testing', 'investigation')."""
        return actions.reply_wisdom(engine.context, engine.selector, helpType)

    @mcp.tool(name="complete_quest")
    def complete_quest(solutionSummary: Optional[str] = None) -> str:
        """Mark the bug as vanquished and collect your experience."""
        return actions.reply_complete(
            engine.context, engine.selector, solutionSummary, engine.now(),
        )


# ── Resources ──────────────────────────────────────────────────────────────


def setup_resources(mcp: FastMCP, engine: QuestEngine) -> None:
    """Register the lore resources."""

    @mcp.resource(
        "handbook://debugging-guide",
        name="Debugging Handbook",
        description="Essential debugging techniques and wisdom for code warriors",
        mime_type="text/markdown",
    )
    def debugging_guide() -> str:
        return lore.generate_debugging_handbook()

    @mcp.resource(
        "quest://log",
        name="Quest Log",
        description="Your completed debugging quests, most recent first",
        mime_type="text/markdown",
    )
    def quest_log() -> str:
        return lore.generate_quest_log(engine.context.hero)

    @mcp.resource(
        "bestiary://bugs/{bug_type}",
        name="Debugging Bestiary",
        description="Lore on each creature of the bug realm",
        mime_type="text/markdown",
    )
    def bestiary(bug_type: str) -> str:
        return lore.get_bug_info(bug_type)

    @mcp.resource(
        "achievements://hall-of-fame",
        name="Hall of Fame",
        description="Achievement badges and your current standing",
        mime_type="text/markdown",
    )
    def hall_of_fame() -> str:
        return lore.generate_achievement_hall(actions.reply_status(engine.context, engine.now()))


# ── Prompts ────────────────────────────────────────────────────────────────


def _user_message(text: str) -> list[base.Message]:
    return [base.Message(role="user", content=base.TextContent(type="text", text=text))]


def setup_prompts(mcp: FastMCP) -> None:
    """Register the adventure prompts."""

    @mcp.prompt(name="adventure-tone-guide")
    def adventure_tone_guide() -> list[base.Message]:
        """Essential guidance for keeping the adventure tone with this server"""
        return _user_message(lore.generate_tone_guide())

    @mcp.prompt(name="start-debugging-quest")
    def start_debugging_quest(bugDescription: str, techStack: Optional[str] = None) -> list[base.Message]:
        """Begin an epic debugging adventure with your rubber duck companion"""
        return _user_message(lore.start_quest_prompt(bugDescription, techStack))

    @mcp.prompt(name="debugging-strategy-consultation")
    def debugging_strategy_consultation(currentSituation: str, helpNeeded: str) -> list[base.Message]:
        """Get strategic guidance for your debugging approach
        (investigation, testing, reproduction, code-review, general)"""
        return _user_message(lore.strategy_prompt(currentSituation, helpNeeded))

    @mcp.prompt(name="victory-celebration")
    def victory_celebration(solutionFound: str, lessonsLearned: Optional[str] = None) -> list[base.Message]:
        """Celebrate your debugging triumph and reflect on lessons learned"""
        return _user_message(lore.victory_prompt(solutionFound, lessonsLearned))
