"""
DuckQuest engine — one adventure session.

Pipeline (console):
  process_message() → parse() → handle_action() → formatted reply

The engine owns the AdventureContext, the mentor selector, and the clock.
Hosts (MCP server, Flask app, console loop) hold one engine each and call
into it one request at a time.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from config import DEFAULT_SIGNIFICANCE
from duckquest.core.actions import handle_action
from duckquest.generation.mentor import SelectorInterface, get_selector
from duckquest.generation.validation import validate_tables
from duckquest.models.quest import (
    AdventureContext,
    GuidancePayload,
    Quest,
    StatusSnapshot,
    utcnow,
)
from duckquest.systems import quest_tracker
from duckquest.systems.quest_tracker import VictoryResult
from duckquest.transport.parser import parse

logger = logging.getLogger(__name__)


class QuestEngine:
    """Binds one adventure context to a selector and a clock."""

    def __init__(
        self,
        selector: Optional[SelectorInterface] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.context = AdventureContext()
        self.selector = selector or get_selector()
        self.clock = clock or utcnow

        report = validate_tables()
        for error in report["errors"]:
            logger.error(f"Table validation: {error}")
        for warning in report["warnings"]:
            logger.debug(f"Table validation: {warning}")

        logger.info(f"Quest engine ready (selector={self.selector.name})")

    def now(self) -> datetime:
        return self.clock()

    # ── Console ────────────────────────────────────────────────────────────

    def process_message(self, text: str) -> Optional[str]:
        """Process one console line.

        Args:
            text: Raw line as typed.

        Returns:
            Response string, or None for an empty line.
        """
        parsed = parse(text)
        if not parsed:
            return None

        try:
            response = handle_action(
                self.context, self.selector, parsed.command, parsed.args, now=self.now(),
            )
        except Exception as e:
            logger.error(f"Error handling '{parsed.command}': {e}", exc_info=True)
            return "The duck got confused. Something went wrong with that command."

        if response:
            logger.debug(f"{parsed.command} → {response[:60]}...")
        return response

    # ── Quest operations ───────────────────────────────────────────────────

    def start_quest(
        self,
        description: str,
        tech_stack: Optional[list[str]] = None,
        urgency: Optional[str] = None,
    ) -> tuple[Quest, GuidancePayload]:
        return quest_tracker.start_quest(
            self.context, description, tech_stack=tech_stack, urgency=urgency,
            selector=self.selector, now=self.now(),
        )

    def continue_quest(self, finding: str, significance: str = DEFAULT_SIGNIFICANCE) -> GuidancePayload:
        return quest_tracker.continue_quest(
            self.context, finding, significance=significance,
            selector=self.selector, now=self.now(),
        )

    def get_status(self) -> StatusSnapshot:
        return quest_tracker.get_status(self.context, now=self.now())

    def seek_wisdom(self, help_type: str) -> GuidancePayload:
        return quest_tracker.seek_wisdom(self.context, help_type, selector=self.selector)

    def complete_quest(self, solution_summary: Optional[str] = None) -> VictoryResult:
        return quest_tracker.complete_quest(
            self.context, solution_summary, selector=self.selector, now=self.now(),
        )
