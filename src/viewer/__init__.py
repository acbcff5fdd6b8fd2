"""
Terminal flashcard viewer.

- commands: input line -> Command
- navigator: NavigatorState transitions and the interactive loop
- screen: rich rendering of cards and summaries
"""

from .commands import Command, CommandType, parse_command
from .navigator import FlashcardNavigator, NavigatorState, apply_command
from .screen import render_card, render_summary

__all__ = [
    "Command",
    "CommandType",
    "FlashcardNavigator",
    "NavigatorState",
    "apply_command",
    "parse_command",
    "render_card",
    "render_summary",
]
