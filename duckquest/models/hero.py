"""
Hero progress for DuckQuest.
Experience only grows; level is derived from it. Completed quests are
archived here and never removed.
"""

from dataclasses import dataclass, field
from typing import Optional

from config import XP_PER_LEVEL


def level_for_xp(xp: int) -> int:
    """Hero level for a cumulative XP total. Level 1 at 0 XP."""
    return xp // XP_PER_LEVEL + 1


@dataclass
class HeroProgress:
    """Cumulative record that outlives individual quests."""
    experience: int = 0
    level: int = 1
    completed_quests: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "experience": self.experience,
            "completedQuests": [
                {
                    "id": q.id,
                    "title": q.title,
                    "severity": q.severity,
                    "category": q.category,
                    "findings": len(q.findings),
                    "milestones": len(q.milestones),
                }
                for q in self.completed_quests
            ],
        }


def award_xp(hero: HeroProgress, xp: int) -> Optional[int]:
    """Award XP and check for level up.

    Args:
        hero: Hero to credit.
        xp: XP to award. Negative values are ignored.

    Returns:
        New level if leveled up, None otherwise.
    """
    if xp <= 0:
        return None
    hero.experience += xp
    new_level = level_for_xp(hero.experience)
    if new_level > hero.level:
        hero.level = new_level
        return new_level
    return None
