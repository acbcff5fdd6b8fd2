"""
Command grammar for the flashcard viewer.

A line is matched against an ordered list of rules, first match wins:

1. empty line                       -> IGNORE
2. f/flip, n/next, p/prev, r/random -> literal commands
3. "j..." longer than two chars     -> JUMP (j 3, jump 12)
4. q/quit                           -> QUIT
5. leading integer                  -> JUMP (bare "3")
6. anything else                    -> IGNORE

Only leading spaces and tabs are stripped. Literals are case-sensitive.
A jump whose target has no digits is IGNORE; range checking is left to the
navigator, which treats out-of-range targets as no-ops.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class CommandType(str, Enum):
    """Actions the viewer understands."""
    FLIP = "flip"
    NEXT = "next"
    PREV = "prev"
    RANDOM = "random"
    JUMP = "jump"
    QUIT = "quit"
    IGNORE = "ignore"


@dataclass(frozen=True)
class Command:
    """A parsed viewer command. `target` is the 1-based card number for JUMP."""
    type: CommandType
    target: int | None = None


IGNORE = Command(CommandType.IGNORE)

LITERALS: dict[str, CommandType] = {
    "f": CommandType.FLIP,
    "flip": CommandType.FLIP,
    "n": CommandType.NEXT,
    "next": CommandType.NEXT,
    "p": CommandType.PREV,
    "prev": CommandType.PREV,
    "r": CommandType.RANDOM,
    "random": CommandType.RANDOM,
}

QUIT_WORDS = frozenset({"q", "quit"})

# Leading integer; whatever follows the digits is ignored
_LEADING_INT = re.compile(r"[+-]?[0-9]+")
_JUMP_TARGET = re.compile(r"-?[0-9]+")
_JUMP_CHARS = frozenset("0123456789-")


def _match_literal(line: str) -> Command | None:
    command_type = LITERALS.get(line)
    return Command(command_type) if command_type else None


def _match_jump(line: str) -> Command | None:
    if len(line) <= 2 or not line.startswith("j"):
        return None
    # Digits and minus signs anywhere in the line form the target
    numstr = "".join(c for c in line if c in _JUMP_CHARS)
    match = _JUMP_TARGET.match(numstr)
    if not match:
        return IGNORE
    return Command(CommandType.JUMP, int(match.group()))


def _match_quit(line: str) -> Command | None:
    return Command(CommandType.QUIT) if line in QUIT_WORDS else None


def _match_number(line: str) -> Command | None:
    match = _LEADING_INT.match(line)
    if not match:
        return None
    return Command(CommandType.JUMP, int(match.group()))


MATCHERS: list[Callable[[str], Command | None]] = [
    _match_literal,
    _match_jump,
    _match_quit,
    _match_number,
]


def parse_command(line: str) -> Command:
    """Parse one line of viewer input."""
    line = line.lstrip(" \t")
    if not line:
        return IGNORE

    for matcher in MATCHERS:
        command = matcher(line)
        if command is not None:
            return command
    return IGNORE
