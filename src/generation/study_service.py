"""
Study Service: prompt -> completion -> extraction -> typed result.

Every failure is a StudyDeckError and is propagated unchanged; the caller
decides how to report it.
"""

from __future__ import annotations

from typing import Protocol

from loguru import logger

from src.generation.models import FlashcardDeck, SummaryResult
from src.generation.parsers import parse_flashcards, parse_summary
from src.generation.prompts import get_prompt
from src.llm.extraction import extract_candidate_json


class CompletionClient(Protocol):
    """Anything that turns a prompt into a raw provider response."""

    def send_prompt(self, prompt: str) -> str:
        ...


class StudyAssistant:
    """Generates summaries and flashcard decks from study text."""

    def __init__(self, client: CompletionClient):
        self.client = client

    def _complete(self, prompt: str) -> str:
        raw = self.client.send_prompt(prompt)
        return extract_candidate_json(raw)

    def summarize_content(self, text: str) -> SummaryResult:
        """Summary, key points and definitions for the text."""
        logger.info(f"Requesting summary for {len(text)} chars of text")
        return parse_summary(self._complete(get_prompt("summary", text)))

    def generate_flashcards(self, text: str) -> FlashcardDeck:
        """A flashcard deck for the text."""
        logger.info(f"Requesting flashcards for {len(text)} chars of text")
        deck = parse_flashcards(self._complete(get_prompt("flashcards", text)))
        if not deck:
            logger.warning("Model returned no flashcards")
        return deck
