"""
LLM prompts for study material generation.

Contains prompts for both outputs:
- Summary - prose summary, key points, definitions
- Flashcards - question/answer pairs

Each prompt includes:
1. The task
2. Cardinality guidance (advisory only, never enforced on the parsed result)
3. The exact JSON shape the reply must use

The user's study text is appended verbatim after the template. It goes out
as a plain string inside the request body, so no escaping is applied.
"""
from __future__ import annotations

# =============================================================================
# Summary Prompt
# =============================================================================

SUMMARY_PROMPT = """
You are an AI study assistant.

TASK:
1. Read the following text.
2. Write a concise summary (150–250 words) in simple language.
3. List 3–5 key points.
4. If there are definitions, include them in your own words.

Return ONLY valid JSON with this structure:
{
  "summary": "string",
  "key_points": ["string", "string"],
  "definitions": [
    {"term": "string", "definition": "string"}
  ]
}

TEXT:
"""


# =============================================================================
# Flashcard Prompt
# =============================================================================

FLASHCARD_PROMPT = """
You are an AI that creates study flashcards.

Given the TEXT below, create 10–20 flashcards that help a student study.

Rules:
- Questions should be clear and specific.
- Answers should be brief (1–3 sentences).
- Mix definitions, concepts, and reasoning questions.

Return ONLY valid JSON with this structure:
{
  "flashcards": [
    {"question": "string", "answer": "string"}
  ]
}

TEXT:
"""


# =============================================================================
# Prompt Factory
# =============================================================================

def build_summary_prompt(text: str) -> str:
    """Summary template followed by the study text."""
    return SUMMARY_PROMPT + text


def build_flashcard_prompt(text: str) -> str:
    """Flashcard template followed by the study text."""
    return FLASHCARD_PROMPT + text


def get_prompt(kind: str, text: str) -> str:
    """
    Get the prompt for an output kind.

    Args:
        kind: "summary" or "flashcards"
        text: Study text to embed

    Returns:
        Prompt string

    Raises:
        ValueError: Unknown kind
    """
    builders = {
        "summary": build_summary_prompt,
        "flashcards": build_flashcard_prompt,
    }
    try:
        builder = builders[kind.lower()]
    except KeyError:
        raise ValueError(f"Unknown prompt kind: {kind}") from None
    return builder(text)
