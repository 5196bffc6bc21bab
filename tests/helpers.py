"""Shared test helpers for DuckQuest."""

from datetime import datetime, timedelta, timezone

from duckquest.generation.mentor import FirstSelector
from duckquest.models.quest import AdventureContext
from duckquest.systems import quest_tracker

T0 = datetime(2026, 3, 1, 9, 0, 0, tzinfo=timezone.utc)

# Classifies as goblin / logic
GOBLIN_BUG = "Typo in the header"


class FakeClock:
    """Manually advanced clock for engines and trackers."""

    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def open_quest(ctx: AdventureContext, description: str = GOBLIN_BUG, **kwargs):
    """Open a quest with the deterministic selector at T0."""
    kwargs.setdefault("selector", FirstSelector())
    kwargs.setdefault("now", T0)
    return quest_tracker.start_quest(ctx, description, **kwargs)


def add_findings(ctx: AdventureContext, count: int, significance: str = "moderate") -> None:
    """Record count findings numbered from the current total."""
    start = len(ctx.current_quest.findings)
    for i in range(count):
        quest_tracker.continue_quest(
            ctx, f"finding {start + i + 1}", significance,
            selector=FirstSelector(), now=T0,
        )
