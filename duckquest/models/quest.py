"""
Quest state for DuckQuest.
One active quest per adventure context. Findings and milestones are
append-only and belong to exactly one quest.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from config import CATEGORY_TITLES, PHASES, SEVERITY_TITLES
from duckquest.models.hero import HeroProgress


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Finding:
    """Something the hero discovered, tried, or learned."""
    timestamp: datetime
    content: str
    significance: str     # minor | moderate | major | breakthrough

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "finding": self.content,
            "significance": self.significance,
        }


@dataclass(frozen=True)
class Milestone:
    """Tracker-written marker for a phase transition or quest completion."""
    timestamp: datetime
    title: str
    description: str
    phase: str            # Phase reached when the milestone was written

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "title": self.title,
            "description": self.description,
            "phase": self.phase,
        }


@dataclass
class Quest:
    """A debugging quest from first report to victory."""
    id: str
    title: str
    description: str
    severity: str
    category: str
    started_at: datetime
    tech_stack: list[str] = field(default_factory=list)
    phase: str = "preparation"
    findings: list[Finding] = field(default_factory=list)
    milestones: list[Milestone] = field(default_factory=list)

    @property
    def phase_index(self) -> int:
        return PHASES.index(self.phase)

    def has_breakthrough(self) -> bool:
        return any(f.significance == "breakthrough" for f in self.findings)

    def elapsed_minutes(self, now: datetime) -> int:
        """Whole minutes since the quest opened, floored."""
        return max(0, int((now - self.started_at).total_seconds() // 60))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "severity": self.severity,
            "category": self.category,
            "phase": self.phase,
            "startedAt": self.started_at.isoformat(),
            "techStack": list(self.tech_stack),
            "findings": [f.to_dict() for f in self.findings],
            "milestones": [m.to_dict() for m in self.milestones],
        }


@dataclass
class GuidancePayload:
    """Mentor reply: one message, guiding questions, encouragement, next steps."""
    message: str
    questions: list[str]
    encouragement: str
    next_suggestions: list[str]

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "questions": list(self.questions),
            "encouragement": self.encouragement,
            "nextSuggestions": list(self.next_suggestions),
        }


@dataclass
class StatusSnapshot:
    """Read-only view of the current quest and hero progress."""
    active: bool
    hero_level: int
    hero_experience: int
    completed_quests: int
    title: Optional[str] = None
    severity: Optional[str] = None
    category: Optional[str] = None
    phase: Optional[str] = None
    elapsed_minutes: int = 0
    finding_count: int = 0
    milestone_count: int = 0
    recent_findings: list[Finding] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = {
            "active": self.active,
            "hero": {
                "level": self.hero_level,
                "experience": self.hero_experience,
                "completedQuests": self.completed_quests,
            },
        }
        if self.active:
            data["quest"] = {
                "title": self.title,
                "severity": self.severity,
                "category": self.category,
                "phase": self.phase,
                "elapsedMinutes": self.elapsed_minutes,
                "findingCount": self.finding_count,
                "milestoneCount": self.milestone_count,
                "recentFindings": [f.to_dict() for f in self.recent_findings],
            }
        return data


def generate_quest_id() -> str:
    return f"quest_{uuid.uuid4().hex[:12]}"


def quest_title(severity: str, category: str) -> str:
    """Adventure title, e.g. "The Troll's Challenge in the Integration Invasion"."""
    return f"{SEVERITY_TITLES[severity]} in the {CATEGORY_TITLES[category]}"


def create_quest(
    description: str,
    severity: str,
    category: str,
    tech_stack: Optional[list[str]] = None,
    now: Optional[datetime] = None,
) -> Quest:
    """Build a fresh quest at the preparation phase.

    Args:
        description: The hero's own words for the bug.
        severity: Classified severity label.
        category: Classified category label.
        tech_stack: Technologies involved, if any.
        now: Creation timestamp. Defaults to the current UTC time.

    Returns:
        New Quest with no findings or milestones.
    """
    return Quest(
        id=generate_quest_id(),
        title=quest_title(severity, category),
        description=description,
        severity=severity,
        category=category,
        started_at=now or utcnow(),
        tech_stack=list(tech_stack or []),
    )


def add_finding(quest: Quest, content: str, significance: str, now: datetime) -> Finding:
    finding = Finding(timestamp=now, content=content, significance=significance)
    quest.findings.append(finding)
    return finding


def add_milestone(quest: Quest, title: str, description: str, now: datetime) -> Milestone:
    """Append a milestone stamped with the quest's current phase."""
    milestone = Milestone(timestamp=now, title=title, description=description,
                          phase=quest.phase)
    quest.milestones.append(milestone)
    return milestone


@dataclass
class AdventureContext:
    """Everything one session knows: the active quest slot and the hero.

    The host owns exactly one of these and passes it into every tracker
    call. Access is assumed to be serialized by the host.
    """
    current_quest: Optional[Quest] = None
    hero: HeroProgress = field(default_factory=HeroProgress)
