"""
Permissive parsers for model-produced JSON.

The hard failure boundary is "the text is not JSON". Past that point nothing
is fatal: missing or mistyped fields default to empty so that drift in the
model's output degrades the result instead of aborting it.

Field coercion:
- strings are kept as is
- numbers are rendered with str(), booleans as JSON spells them
- null, objects and arrays become "" (or are skipped in key_points)
"""

from __future__ import annotations

import json
from typing import Any

from loguru import logger

from src.generation.models import Definition, Flashcard, FlashcardDeck, SummaryResult
from src.llm.errors import InvalidJsonSyntaxError

_SCALARS = (int, float, bool)


def _load_object(json_text: str) -> dict[str, Any]:
    try:
        data = json.loads(json_text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise InvalidJsonSyntaxError(f"Model reply is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        logger.warning(f"Expected a JSON object, got {type(data).__name__}; treating as empty")
        return {}
    return data


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, _SCALARS):
        return str(value)
    return ""


def _field(obj: Any, name: str) -> str:
    if not isinstance(obj, dict):
        return ""
    return _text(obj.get(name))


def _array(data: dict[str, Any], name: str) -> list[Any]:
    value = data.get(name)
    if isinstance(value, list):
        return value
    if value is not None:
        logger.debug(f"'{name}' is {type(value).__name__}, not an array; using []")
    return []


def parse_summary(json_text: str) -> SummaryResult:
    """Decode a summary reply into a SummaryResult."""
    data = _load_object(json_text)

    key_points = [
        _text(point)
        for point in _array(data, "key_points")
        if isinstance(point, (str, *_SCALARS))
    ]
    definitions = [
        Definition(term=_field(item, "term"), definition=_field(item, "definition"))
        for item in _array(data, "definitions")
    ]

    result = SummaryResult(
        summary=_text(data.get("summary")),
        key_points=key_points,
        definitions=definitions,
    )
    logger.debug(
        f"Parsed summary: {len(result.summary)} chars, "
        f"{len(result.key_points)} key points, {len(result.definitions)} definitions"
    )
    return result


def parse_flashcards(json_text: str) -> FlashcardDeck:
    """Decode a flashcard reply into a FlashcardDeck."""
    data = _load_object(json_text)

    deck = FlashcardDeck(
        flashcards=[
            Flashcard(question=_field(item, "question"), answer=_field(item, "answer"))
            for item in _array(data, "flashcards")
        ]
    )
    logger.debug(f"Parsed {len(deck)} flashcards")
    return deck
