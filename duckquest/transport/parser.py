"""
Command parser for DuckQuest.
Parses console lines into commands and arguments.
"""

from dataclasses import dataclass
from typing import Optional

from config import SIGNIFICANCES


@dataclass
class ParsedCommand:
    """Result of parsing an inbound line."""
    command: str          # Normalized command name (lowercase)
    args: list[str]       # Remaining arguments
    raw: str              # Original line text


# Short aliases → canonical command names
ALIASES = {
    # Quest lifecycle
    "new": "start", "quest": "start", "begin": "start",
    "f": "find", "finding": "find", "clue": "find",
    "st": "status", "stat": "status",
    "w": "wisdom", "ask": "wisdom", "advice": "wisdom",
    "done": "complete", "victory": "complete", "win": "complete",
    # Lore
    "b": "bestiary", "beast": "bestiary",
    "guide": "handbook",
    "log": "history", "hall": "history",
    # Help
    "h": "help", "?": "help",
}

# Marker that introduces a significance word on 'find'
SIGNIFICANCE_MARKER = "!"


def parse(text: str) -> Optional[ParsedCommand]:
    """Parse a raw line into a command.

    Args:
        text: Raw console line.

    Returns:
        ParsedCommand or None if the line is empty.
    """
    text = text.strip()
    if not text:
        return None

    parts = text.split()
    first = parts[0].lower()
    rest = parts[1:]

    command = ALIASES.get(first, first)
    return ParsedCommand(command=command, args=rest, raw=text)


def split_significance(args: list[str]) -> tuple[Optional[str], list[str]]:
    """Pull a leading '!<significance>' off a finding's arguments.

    'find !breakthrough the cache key is wrong' → ("breakthrough", [...]).
    The marker may also stand alone: 'find ! breakthrough ...'.
    Words that are not a known significance are left in the finding text.

    Returns:
        (significance or None, remaining args)
    """
    if not args or not args[0].startswith(SIGNIFICANCE_MARKER):
        return None, args

    if args[0] == SIGNIFICANCE_MARKER:
        if len(args) >= 2 and args[1].lower() in SIGNIFICANCES:
            return args[1].lower(), args[2:]
        return None, args

    word = args[0][len(SIGNIFICANCE_MARKER):].lower()
    if word in SIGNIFICANCES:
        return word, args[1:]
    return None, args
