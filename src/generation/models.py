"""
Typed results of the generation pipeline.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Definition:
    """A term and its definition, as the model phrased it."""
    term: str
    definition: str


@dataclass
class SummaryResult:
    """Result of a summary request. Every field defaults to empty."""
    summary: str = ""
    key_points: list[str] = field(default_factory=list)
    definitions: list[Definition] = field(default_factory=list)


@dataclass(frozen=True)
class Flashcard:
    """A single question/answer card."""
    question: str
    answer: str


@dataclass
class FlashcardDeck:
    """
    Ordered flashcards in model output order.

    Indices are 0..N-1 internally and 1..N on screen.
    """
    flashcards: list[Flashcard] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.flashcards)

    def __iter__(self) -> Iterator[Flashcard]:
        return iter(self.flashcards)

    def __getitem__(self, index: int) -> Flashcard:
        return self.flashcards[index]

    def __bool__(self) -> bool:
        return bool(self.flashcards)
