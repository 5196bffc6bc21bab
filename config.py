"""
DuckQuest Constants
All tunable values in one place. Classification tables are ordered decision
lists: the first matching rule wins, so entry order is part of the behavior.
"""

# =============================================================================
# LABELS
# =============================================================================

SEVERITIES = ["goblin", "orc", "troll", "dragon", "hydra"]
CATEGORIES = ["logic", "performance", "integration", "ui", "data", "architecture"]

# Ordered: a quest only ever moves rightward through this list
PHASES = ["preparation", "investigation", "battle", "victory"]

SIGNIFICANCES = ["minor", "moderate", "major", "breakthrough"]
DEFAULT_SIGNIFICANCE = "moderate"

URGENCIES = ["low", "moderate", "high", "critical"]

# =============================================================================
# SEVERITY CLASSIFICATION
# =============================================================================

# (severity, description keywords, urgency keyword or None)
# Checked top to bottom. Goblin is the fallback when nothing matches.
SEVERITY_RULES = [
    ("dragon", ["crash", "down", "critical", "production", "outage"], "critical"),
    ("hydra", ["multiple", "several", "various", "complex"], None),
    ("troll", ["slow", "performance", "timeout", "integration", "api", "database"], None),
    ("orc", ["feature", "logic", "unexpected"], "moderate"),
]
DEFAULT_SEVERITY = "goblin"

# A description mentioning "and" more than this many times is multi-headed
HYDRA_AND_THRESHOLD = 2

# =============================================================================
# CATEGORY CLASSIFICATION
# =============================================================================

# Checked top to bottom. Logic is the fallback.
CATEGORY_RULES = [
    ("ui", ["ui", "css", "layout", "styling", "responsive", "display"]),
    ("performance", ["performance", "slow", "optimization", "memory", "speed", "timeout"]),
    ("integration", ["api", "integration", "service", "external", "webhook", "third-party"]),
    ("data", ["database", "data", "query", "storage", "migration", "sql"]),
    ("architecture", ["architecture", "design", "structure", "refactor",
                      "scalability", "maintainability"]),
]
DEFAULT_CATEGORY = "logic"

# =============================================================================
# PHASE PROGRESSION
# =============================================================================

INVESTIGATION_FINDING_THRESHOLD = 3   # preparation → investigation
BATTLE_FINDING_THRESHOLD = 6          # investigation → battle (or any breakthrough)

# Guidance payloads carry at most this many questions from a phase pool
QUESTIONS_PER_RESPONSE = 3

# Status shows this many of the latest findings
RECENT_FINDINGS_SHOWN = 3

# =============================================================================
# EXPERIENCE
# =============================================================================

SEVERITY_BASE_XP = {
    "goblin": 10,
    "orc": 25,
    "troll": 50,
    "dragon": 100,
    "hydra": 150,
}
XP_PER_FINDING = 2
XP_PER_MILESTONE = 5

# Flat curve: level = floor(xp / XP_PER_LEVEL) + 1
XP_PER_LEVEL = 100

# =============================================================================
# DISPLAY
# =============================================================================

SEVERITY_TITLES = {
    "goblin": "The Goblin Incident",
    "orc": "The Orc Uprising",
    "troll": "The Troll's Challenge",
    "dragon": "The Dragon's Curse",
    "hydra": "The Hydra's Many Heads",
}

CATEGORY_TITLES = {
    "logic": "Logic Labyrinth",
    "performance": "Performance Peril",
    "integration": "Integration Invasion",
    "ui": "Interface Intrigue",
    "data": "Data Dungeon",
    "architecture": "Architecture Awakening",
}

SEVERITY_DESCRIPTIONS = {
    "goblin": "A mischievous goblin 🧌",
    "orc": "A cunning orc warrior ⚔️",
    "troll": "A formidable troll 👹",
    "dragon": "A mighty dragon 🐉",
    "hydra": "The dreaded multi-headed hydra 🐍",
}

CATEGORY_DESCRIPTIONS = {
    "logic": "Logic & Algorithms",
    "performance": "Performance & Optimization",
    "integration": "API & Integration",
    "ui": "User Interface",
    "data": "Data & Storage",
    "architecture": "System Architecture",
}

PHASE_DESCRIPTIONS = {
    "preparation": "🛡️ Preparation - Gathering intelligence and understanding the challenge",
    "investigation": "🔍 Investigation - Exploring theories and testing hypotheses",
    "battle": "⚔️ Battle - Implementing and refining solutions",
    "victory": "🏆 Victory - Challenge conquered!",
}

# Milestones the tracker writes when a quest enters a phase
PHASE_MILESTONES = {
    "investigation": ("Investigation Phase",
                      "Gathered enough information to begin deeper investigation"),
    "battle": ("Battle Phase", "Ready to implement and test solutions"),
}
VICTORY_MILESTONE_TITLE = "Quest Completed!"
VICTORY_MILESTONE_DEFAULT = "Hero successfully vanquished the bug!"
DEFAULT_SOLUTION_TEXT = "Bug successfully eliminated!"

# =============================================================================
# FIXED GUIDANCE
# =============================================================================

OPENING_SUGGESTIONS = [
    "Gather more information about when and how the issue occurs",
    "Identify what changed recently that might have caused this",
    "Create a minimal reproduction case if possible",
]

PHASE_SUGGESTIONS = {
    "preparation": [
        "Gather more details about the problem",
        "Create a minimal reproduction case",
        "Check what changed recently",
    ],
    "investigation": [
        "Test your hypotheses systematically",
        "Add debugging information to see what's happening",
        "Try isolating the problem area",
    ],
    "battle": [
        "Implement a focused solution",
        "Test your fix thoroughly",
        "Consider edge cases and potential side effects",
    ],
    "victory": [
        "Document your solution",
        "Add tests to prevent regression",
        "Share your learnings with the team",
    ],
}

FINDING_ACKNOWLEDGMENT = "Interesting discovery! This information helps build our understanding."

# (keywords, title line, questions). Checked top to bottom; no match → general wisdom.
WISDOM_BUCKETS = [
    (
        ["approach", "strategy"],
        "🧙‍♂️ **Strategic Wisdom**\n\nWhen facing complex bugs, remember the hero's methodology:",
        [
            "Have you clearly defined what 'success' looks like for solving this issue?",
            "What's the simplest way you could reproduce this problem?",
            "If you had to explain this bug to someone else, what would you say?",
            "What assumptions are you making that might not be true?",
        ],
    ),
    (
        ["test", "verify"],
        "🔍 **Testing Wisdom**\n\nEvery good hero tests their theories before charging into battle:",
        [
            "What's the smallest change you could make to test your hypothesis?",
            "How can you isolate this issue from other potential problems?",
            "What would happen if you removed or simplified the problematic code?",
            "How can you verify that your solution actually fixes the root cause?",
        ],
    ),
    (
        ["investigate", "explore"],
        "🔎 **Investigation Wisdom**\n\nTrue heroes gather intelligence before striking:",
        [
            "What clues does your development environment provide (logs, debugger, etc.)?",
            "When did this problem first appear? What changed around that time?",
            "Are there similar patterns elsewhere in your codebase?",
            "What would someone unfamiliar with this code need to understand the issue?",
        ],
    ),
]
GENERAL_WISDOM_TITLE = "🎯 **General Wisdom**\n\nRemember the fundamental principles of debugging:"

REFLECTION_QUESTIONS = [
    "What did you learn from this quest that you'll apply to future challenges?",
    "How might you prevent similar bugs from appearing in the future?",
    "What debugging techniques proved most effective for this type of issue?",
]
VICTORY_ENCOURAGEMENT = "Your growing expertise makes the digital realm safer for all!"
VICTORY_SUGGESTIONS = [
    "Document your solution for future reference",
    "Share your knowledge with fellow developers",
    "Stay vigilant for new debugging challenges",
]

# =============================================================================
# NO-QUEST RESPONSES
# =============================================================================

# Per operation: (message, encouragement, suggestion)
NO_QUEST_RESPONSES = {
    "continue": (
        "No active quest found! Use 'start_quest' to begin your debugging adventure.",
        "Ready to embark on a new debugging quest?",
        "Start a new quest to begin your debugging journey",
    ),
    "wisdom": (
        "Start a quest first, brave hero! I can only provide guidance when you "
        "have an active debugging challenge.",
        "Every great adventure begins with a single step!",
        "Begin a new debugging quest",
    ),
    "complete": (
        "No active quest to complete! Start a new adventure when you're ready.",
        "Every master was once a beginner!",
        "Begin a new debugging quest",
    ),
}
NO_QUEST_STATUS = "🏰 No active quest. Ready to face a new debugging challenge?"

# =============================================================================
# CONTENT
# =============================================================================

QUEST_LOG_LIMIT = 10          # Most recent victories shown in the quest log

SERVER_NAME = "rubber-ducking-adventure"
