"""LLM-based generation of study material.

Pipeline:
1. Prompt builders embed the study text in a fixed template
2. The chat completions client returns the raw provider response
3. The extractor isolates the JSON block in the assistant reply
4. Permissive parsers turn it into typed results

Usage:
    from src.generation import StudyAssistant

    assistant = StudyAssistant(client)
    deck = assistant.generate_flashcards(text)
    for card in deck:
        print(f"Q: {card.question}")
        print(f"A: {card.answer}")
"""
from src.generation.models import (
    Definition,
    Flashcard,
    FlashcardDeck,
    SummaryResult,
)
from src.generation.parsers import parse_flashcards, parse_summary
from src.generation.prompts import build_flashcard_prompt, build_summary_prompt
from src.generation.study_service import StudyAssistant

__all__ = [
    "Definition",
    "Flashcard",
    "FlashcardDeck",
    "StudyAssistant",
    "SummaryResult",
    "build_flashcard_prompt",
    "build_summary_prompt",
    "parse_flashcards",
    "parse_summary",
]
