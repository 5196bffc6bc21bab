"""
Static lore for DuckQuest: the bestiary, the debugging handbook, the hall of
fame, the quest log, and the prompt templates served to MCP clients.

Everything here is fixed text except the quest log, which renders the hero's
actual completed quests.
"""

from typing import Optional

from config import QUEST_LOG_LIMIT, SEVERITIES, SEVERITY_TITLES


# ── Bestiary ───────────────────────────────────────────────────────────────

BESTIARY = {
    "goblin": """# 🧌 Goblin (Minor Bug)

## 🎯 **Characteristics**
- Small, annoying issues
- Usually syntax errors or typos
- Quick to fix once spotted

## ⚔️ **How to Defeat**
- Use your editor's error highlighting
- Run linters and formatters
- Take your time when typing

## 📚 **Common Examples**
- Missing colons and brackets
- Typos in variable names
- Incorrect file paths
- Missing imports

*"Even the smallest goblin can trip up a mighty warrior!"* 🧙‍♂️""",

    "orc": """# 👹 Orc (Moderate Bug)

## 🎯 **Characteristics**
- Logic errors that break functionality
- Require some investigation to find
- Can affect user experience

## ⚔️ **How to Defeat**
- Use debugger and breakpoints
- Check your assumptions
- Test edge cases
- Review recent changes

## 📚 **Common Examples**
- Off-by-one errors
- Incorrect conditional logic
- State management issues
- API integration problems

*"Orcs are cunning foes that require strategy to defeat!"* 🧙‍♂️""",

    "troll": """# 🧱 Troll (Performance Bug)

## 🎯 **Characteristics**
- Blocks your application's performance
- Causes slowdowns or freezes
- Often related to inefficient code

## ⚔️ **How to Defeat**
- Profile your application
- Look for memory leaks
- Optimize algorithms
- Use performance monitoring tools

## 📚 **Common Examples**
- Infinite loops
- Memory leaks
- Inefficient database queries
- Unoptimized re-renders

*"Trolls may be slow, but they can bring your entire kingdom to a crawl!"* 🧙‍♂️""",

    "dragon": """# 🐉 Dragon (Critical Bug)

## 🎯 **Characteristics**
- Production-breaking issues
- Affects many users
- Requires immediate attention
- Often complex and multi-faceted

## ⚔️ **How to Defeat**
- Assemble your best debugging team
- Create comprehensive reproduction steps
- Use all available monitoring tools
- Implement hotfixes carefully

## 📚 **Common Examples**
- Server crashes
- Data corruption
- Security vulnerabilities
- Complete feature failures

*"Dragons are the most fearsome foes - approach with caution and preparation!"* 🧙‍♂️""",

    "hydra": """# 🐍 Hydra (Multi-headed Bug)

## 🎯 **Characteristics**
- Multiple interconnected issues
- Fixing one part reveals new problems
- Complex system-wide effects
- Requires holistic approach

## ⚔️ **How to Defeat**
- Map out all affected systems
- Fix root causes, not symptoms
- Test thoroughly after each change
- Consider architectural changes

## 📚 **Common Examples**
- Race conditions in distributed systems
- Complex dependency conflicts
- Multi-service integration failures
- Legacy code interactions

*"The Hydra's many heads represent the interconnected nature of complex bugs!"* 🧙‍♂️""",
}

UNKNOWN_CREATURE = """# ❓ Unknown Creature

This mystical bug type is not yet documented in our bestiary. Perhaps you've discovered a new species of digital creature!

*Report your findings to the Guild of Debugging Masters for proper classification.* 🧙‍♂️"""


def get_bug_info(bug_type: str) -> str:
    """Bestiary entry for a severity, or the unknown-creature entry."""
    return BESTIARY.get((bug_type or "").lower(), UNKNOWN_CREATURE)


def complete_bug_type(prefix: str) -> list[str]:
    """Severity names starting with prefix, in severity order."""
    prefix = (prefix or "").lower()
    return [s for s in SEVERITIES if s.startswith(prefix)]


# ── Handbook & Hall of Fame ────────────────────────────────────────────────


def generate_debugging_handbook() -> str:
    return """# 🧙‍♂️ The Mystical Debugging Handbook

## 🗡️ Essential Debugging Techniques

### 🔍 The Art of Investigation
- **Examine the Ancient Logs**: Always check error logs and console outputs first
- **Reproduce the Beast**: Try to recreate the bug consistently
- **Isolate the Lair**: Narrow down where the bug lives in your code
- **Question the Witnesses**: Talk to users who encountered the issue

### 🧪 Testing Your Theories
- **Form Hypotheses**: What do you think is causing the issue?
- **Test One Theory at a Time**: Don't change multiple things simultaneously
- **Use Debugging Spells**: log statements, breakpoints, the interactive debugger
- **Binary Search**: Comment out half your code to isolate the problem

### 🛡️ Defensive Coding Practices
- **Guard Against Null Dragons**: Always check for missing values
- **Validate Input from Strangers**: Never trust external data
- **Use Type Safety**: Let type checking be your magical armor
- **Write Tests**: Unit tests are your early warning system

### 🏰 Common Bug Lairs
- **Timing Issues**: Race conditions, async/await problems
- **Scope Confusion**: Shadowed names, closure issues
- **State Management**: Shared mutable state, stale caches
- **Network Troubles**: API calls, CORS, timeouts

### 🎯 Victory Strategies
- **Take Breaks**: Sometimes stepping away reveals the solution
- **Rubber Duck Debugging**: Explain the problem out loud
- **Pair Programming**: Two minds are better than one
- **Read the Error Messages**: They often tell you exactly what's wrong

*May your bugs be few and your solutions elegant, brave developer!* ⚔️"""


def generate_achievement_hall(status_text: str) -> str:
    """Hall of fame page with the current status block embedded."""
    return f"""# 🏆 Hall of Debugging Fame

{status_text}

## 🎖️ Available Achievement Badges

### 🥉 Apprentice Achievements
- **First Steps**: Start your first debugging quest
- **Goblin Slayer**: Defeat 5 minor bugs (goblins)
- **Question Master**: Ask 10 thoughtful debugging questions

### 🥈 Journeyman Achievements
- **Orc Hunter**: Defeat 3 moderate bugs (orcs)
- **Tool Master**: Use 5 different debugging tools
- **Pattern Seeker**: Identify recurring bug patterns

### 🥇 Master Achievements
- **Dragon Slayer**: Defeat a critical production bug
- **Hydra Tamer**: Solve a complex multi-layered issue
- **Mentor**: Help another developer debug their code

### 🏅 Legendary Achievements
- **Code Sage**: Prevent bugs through excellent design
- **Debugging Oracle**: Predict bugs before they happen
- **Community Hero**: Contribute debugging knowledge to others

*Your heroic deeds in the realm of debugging shall be remembered forever!* ⚔️"""


# ── Quest Log ──────────────────────────────────────────────────────────────


def generate_quest_log(hero) -> str:
    """Render the hero's completed quests, most recent first.

    Args:
        hero: HeroProgress whose archive is rendered.

    Returns:
        Markdown quest log, capped at QUEST_LOG_LIMIT entries.
    """
    lines = [
        f"# 📜 Quest Log Archive - Hero Level {hero.level}",
        "",
        f"**Total Experience:** {hero.experience} XP",
        f"**Quests Completed:** {len(hero.completed_quests)}",
        "",
        "## 🎯 Recent Adventures",
        "",
    ]

    if not hero.completed_quests:
        lines.append("*No quests completed yet. Your legend is waiting to be written!*")
        return "\n".join(lines)

    recent = list(reversed(hero.completed_quests))[:QUEST_LOG_LIMIT]
    total = len(hero.completed_quests)
    for offset, quest in enumerate(recent):
        solution = quest.milestones[-1].description if quest.milestones else ""
        lines += [
            f"### Quest {total - offset}: {quest.title}",
            f"**Beast**: {SEVERITY_TITLES[quest.severity]}",
            f"**Findings**: {len(quest.findings)}  **Milestones**: {len(quest.milestones)}",
            f"**Outcome**: ✅ {solution}",
            "",
        ]
    return "\n".join(lines).rstrip()


# ── Prompt Templates ───────────────────────────────────────────────────────

HELP_TYPE_DESCRIPTIONS = {
    "investigation": "🔍 Investigation techniques and approaches",
    "testing": "🧪 Testing strategies and methodologies",
    "reproduction": "🔄 Bug reproduction and isolation",
    "code-review": "👁️ Code review and analysis approaches",
    "general": "💡 General debugging wisdom and direction",
}


def get_help_type_description(help_type: str) -> str:
    return HELP_TYPE_DESCRIPTIONS.get(help_type, HELP_TYPE_DESCRIPTIONS["general"])


def generate_tone_guide() -> str:
    return """🎭 CRITICAL TONE CONSISTENCY GUIDANCE 🎭

When working with the Rubber Ducking Adventure server, you MUST maintain the adventure/fantasy tone throughout ALL interactions:

🗡️ **REQUIRED LANGUAGE PATTERNS:**
- Refer to bugs as "goblins," "orcs," "trolls," "dragons," or "hydras" based on severity
- Address users as "noble developer," "brave coder," "valiant adventurer," "champion," "hero"
- Use fantasy terminology: "quest," "adventure," "battle," "victory," "mystical," "enchantment"
- Frame debugging as epic adventures to be conquered

⚔️ **COMMUNICATION STYLE:**
- Celebrate discoveries with heroic fanfare using emojis: ⚔️, 🏆, ✨, 🎯, 🧙‍♂️, 🐉, 🛡️
- Speak like a wise mystical debugging mentor providing guidance
- Match the enthusiastic, supportive, gamified energy of the server
- Guide users to discover solutions through leading questions
- NEVER break character or revert to formal technical language

🏰 **EXAMPLE PHRASES TO USE:**
- "Greetings, brave code warrior!"
- "What villainous bug dares challenge you today?"
- "Your debugging prowess grows stronger!"
- "Victory! Another digital dragon vanquished!"
- "The ancient scrolls of code reveal..."
- "Let's investigate this mystical challenge!"

The adventure tone should feel natural and engaging, making debugging fun while remaining genuinely helpful. This creates an immersive rubber ducking experience that reduces frustration and increases engagement.

🎯 Remember: Every interaction should feel like part of an epic debugging adventure!"""


def start_quest_prompt(bug_description: str, tech_stack: Optional[str] = None) -> str:
    arsenal = f"⚔️ **Technologies in My Arsenal:**\n{tech_stack}\n\n" if tech_stack else ""
    return (
        "🏰 Greetings, noble developer! I seek wisdom from my rubber duck companion "
        "to begin a debugging quest.\n\n"
        f"🐛 **The Mysterious Bug:**\n{bug_description}\n\n"
        f"{arsenal}"
        "🧙‍♂️ Please help me start my debugging adventure and guide me through this "
        "mystical challenge!\n\n"
        "*Use the start_quest tool to begin this epic journey.*"
    )


def strategy_prompt(current_situation: str, help_needed: str) -> str:
    return (
        "🧙‍♂️ Wise rubber duck oracle, I seek your strategic counsel in my debugging quest!\n\n"
        f"🎯 **Current Situation:**\n{current_situation}\n\n"
        f"🤔 **Type of Guidance Sought:**\n{get_help_type_description(help_needed)}\n\n"
        "*Use the seek_wisdom tool to receive mystical guidance on this matter.*"
    )


def victory_prompt(solution_found: str, lessons_learned: Optional[str] = None) -> str:
    wisdom = f"📚 **Wisdom Gained from This Quest:**\n{lessons_learned}\n\n" if lessons_learned else ""
    return (
        "🎉 VICTORY! The digital dragon has been vanquished!\n\n"
        f"⚔️ **How the Beast Was Slain:**\n{solution_found}\n\n"
        f"{wisdom}"
        "🏆 Let us celebrate this triumph and reflect on the heroic journey!\n\n"
        "*Use the complete_quest tool to mark this adventure as conquered.*"
    )
