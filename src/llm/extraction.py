"""
Pull the model's JSON answer out of a raw chat completions response.

Two steps:
1. Locate the assistant message content (a plain string, or a list of
   typed parts whose "text" values are concatenated in order).
2. Take the substring from the first "{" to the last "}" inclusive.
   Models like to wrap JSON in prose or ```json fences; only the outermost
   brace pair is trusted. The block is not otherwise cleaned and may still
   fail to decode later.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import MalformedProviderResponseError, NoJsonObjectFoundError


def _message_content(payload: Any) -> Any:
    try:
        return payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedProviderResponseError(
            "No assistant message content in OpenAI response."
        ) from e


def extract_assistant_content(provider_response: str) -> str:
    """Return the assistant's reply text from a raw response body."""
    try:
        payload = json.loads(provider_response)
    except (json.JSONDecodeError, RecursionError) as e:
        raise MalformedProviderResponseError(f"OpenAI response is not valid JSON: {e}") from e

    content = _message_content(payload)

    if isinstance(content, str):
        return content

    if isinstance(content, list):
        # Multi-part content: keep only text-bearing parts
        return "".join(
            part["text"]
            for part in content
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        )

    raise MalformedProviderResponseError("Unexpected content format in OpenAI response.")


def extract_json_block(content: str) -> str:
    """Return content[first '{' : last '}'] inclusive."""
    first = content.find("{")
    last = content.rfind("}")

    if first == -1 or last == -1 or last <= first:
        raise NoJsonObjectFoundError(content)

    return content[first : last + 1]


def extract_candidate_json(provider_response: str) -> str:
    """Raw provider response -> candidate JSON block."""
    return extract_json_block(extract_assistant_content(provider_response))
