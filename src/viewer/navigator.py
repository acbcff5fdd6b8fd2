"""
Interactive flashcard navigator.

State is just (current_index, answer_visible). Every navigation command
hides the answer again so each card has to be flipped on its own; flip
toggles. next/prev wrap around at both ends. Malformed input never raises,
it simply re-renders the same card.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, replace

from loguru import logger
from rich.console import Console

from src.generation.models import FlashcardDeck
from src.viewer.commands import Command, CommandType, parse_command
from src.viewer.screen import clear_screen, render_card


@dataclass(frozen=True)
class NavigatorState:
    """Position in the deck and whether the answer is showing."""
    current_index: int = 0
    answer_visible: bool = False


def apply_command(
    state: NavigatorState,
    command: Command,
    deck_size: int,
    rng: random.Random | None = None,
) -> NavigatorState:
    """
    Return the state after `command` on a deck of `deck_size` cards.

    QUIT and IGNORE leave the state unchanged; ending the loop is the
    caller's job.
    """
    if deck_size <= 0:
        return state

    kind = command.type

    if kind is CommandType.FLIP:
        return replace(state, answer_visible=not state.answer_visible)

    if kind is CommandType.NEXT:
        return NavigatorState((state.current_index + 1) % deck_size)

    if kind is CommandType.PREV:
        return NavigatorState((state.current_index - 1 + deck_size) % deck_size)

    if kind is CommandType.RANDOM:
        return NavigatorState((rng or random).randrange(deck_size))

    if kind is CommandType.JUMP:
        target = command.target
        if target is not None and 1 <= target <= deck_size:
            return NavigatorState(target - 1)
        return state

    return state


class FlashcardNavigator:
    """Terminal loop over a fixed deck."""

    def __init__(
        self,
        deck: FlashcardDeck,
        console: Console | None = None,
        read_line: Callable[[], str] | None = None,
        rng: random.Random | None = None,
    ):
        """
        Args:
            deck: Cards to browse, never modified
            console: Output console
            read_line: Returns one line of input, raises EOFError at end of input
            rng: Source for the random command
        """
        self.deck = deck
        self.console = console or Console()
        self.read_line = read_line or (lambda: self.console.input())
        self.rng = rng or random.Random()
        self.state = NavigatorState()

    def render(self) -> None:
        """Draw the current card."""
        index = self.state.current_index
        render_card(
            self.console,
            self.deck[index],
            index,
            len(self.deck),
            self.state.answer_visible,
        )

    def handle(self, line: str) -> bool:
        """Apply one input line. Returns False when the viewer should stop."""
        command = parse_command(line)
        if command.type is CommandType.QUIT:
            return False
        self.state = apply_command(self.state, command, len(self.deck), self.rng)
        return True

    def run(self) -> None:
        """Browse until quit or end of input."""
        if not self.deck:
            self.console.print("No flashcards to view.")
            return

        self.state = NavigatorState()
        logger.debug(f"Viewing deck of {len(self.deck)} cards")

        while True:
            self.render()
            try:
                line = self.read_line()
            except EOFError:
                break
            if not self.handle(line):
                break

        clear_screen(self.console)
