"""
Interactive study session: choice -> pasted text -> summary and/or flashcards.

This is the single place where pipeline errors are caught and reported.
"""

from __future__ import annotations

import random
import re
from collections.abc import Callable
from enum import IntEnum

from loguru import logger
from rich.console import Console
from rich.text import Text

from src.generation.study_service import StudyAssistant
from src.llm.errors import StudyDeckError
from src.viewer.navigator import FlashcardNavigator
from src.viewer.screen import render_summary

LINE_CONTINUATION = "\\"


class Choice(IntEnum):
    """What the user wants generated."""
    SUMMARY = 1
    FLASHCARDS = 2
    BOTH = 3

    @property
    def wants_summary(self) -> bool:
        return self in (Choice.SUMMARY, Choice.BOTH)

    @property
    def wants_flashcards(self) -> bool:
        return self in (Choice.FLASHCARDS, Choice.BOTH)


DEFAULT_CHOICE = Choice.BOTH

# Leading integer, as a stream read would take it; the rest is ignored
_LEADING_INT = re.compile(r"\s*[+-]?[0-9]+")


class NoStudyTextError(Exception):
    """Raised when the user provides no study text."""


def coerce_choice(raw: str | int | None) -> Choice:
    """Map user input to a Choice; anything unusable means BOTH."""
    if isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        if not match:
            return DEFAULT_CHOICE
        raw = match.group()
    try:
        return Choice(int(raw))
    except (TypeError, ValueError):
        return DEFAULT_CHOICE


def read_choice(console: Console, read_line: Callable[[], str]) -> Choice:
    """Show the menu and read a choice."""
    console.print("What do you want?")
    console.print("1 = Summary only")
    console.print("2 = Flashcards only")
    console.print("3 = Both summary + flashcards")
    console.print("Enter choice (1/2/3): ", end="")
    try:
        line = read_line()
    except EOFError:
        return DEFAULT_CHOICE
    return coerce_choice(line.strip())


def read_study_text(console: Console, read_line: Callable[[], str]) -> str:
    """
    Read pasted study text.

    Input ends at the first empty line. A line ending in a backslash is
    continued: the backslash becomes a newline and the next line is appended.

    Raises:
        NoStudyTextError: End of input or an empty first line
    """
    console.print()
    console.print("Paste your study text below.")
    console.print("When you're done, press Enter on an empty line to finish input.")
    console.print("End a line with \\ to continue on the next line.", markup=False)
    console.print()

    try:
        text = read_line()
    except EOFError:
        raise NoStudyTextError("No input detected.") from None

    if not text:
        raise NoStudyTextError("No text entered.")

    while text.endswith(LINE_CONTINUATION):
        text = text[:-1] + "\n"
        try:
            line = read_line()
        except EOFError:
            break
        if not line:
            break
        text += line

    return text


def run_session(
    assistant: StudyAssistant,
    console: Console,
    read_line: Callable[[], str],
    choice: Choice | None = None,
    rng: random.Random | None = None,
    err_console: Console | None = None,
) -> int:
    """
    Run one study session. Returns the process exit code.

    Args:
        assistant: Generation pipeline
        console: Output console
        read_line: Input source, raises EOFError at end of input
        choice: Pre-selected choice; prompts when None
        rng: Random source for the flashcard viewer
        err_console: Destination for notices and errors (stderr by default)
    """
    err_console = err_console or Console(stderr=True)

    if choice is None:
        choice = read_choice(console, read_line)
    logger.debug(f"Session choice: {choice.name}")

    try:
        text = read_study_text(console, read_line)
    except NoStudyTextError as e:
        err_console.print(f"[yellow]{e} Exiting.[/yellow]")
        return 0

    try:
        if choice.wants_summary:
            with console.status("Summarizing..."):
                summary = assistant.summarize_content(text)
            render_summary(console, summary)

        if choice.wants_flashcards:
            with console.status("Generating flashcards..."):
                deck = assistant.generate_flashcards(text)
            FlashcardNavigator(deck, console=console, read_line=read_line, rng=rng).run()

    except StudyDeckError as e:
        logger.debug(f"Session failed: {type(e).__name__}")
        err_console.print(Text(f"Error: {e}", style="bold red"))
        return 1

    return 0
