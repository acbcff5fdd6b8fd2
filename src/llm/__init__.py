"""
LLM access for studydeck.

- transport: OpenAI chat completions over httpx
- extraction: assistant content -> candidate JSON block
- errors: failure taxonomy shared by the whole pipeline
"""

from .errors import (
    InvalidJsonSyntaxError,
    MalformedProviderResponseError,
    MissingCredentialError,
    NoJsonObjectFoundError,
    StudyDeckError,
    TransportFailureError,
    UnsuccessfulStatusError,
)
from .extraction import extract_assistant_content, extract_candidate_json, extract_json_block
from .transport import OpenAIChatClient

__all__ = [
    "InvalidJsonSyntaxError",
    "MalformedProviderResponseError",
    "MissingCredentialError",
    "NoJsonObjectFoundError",
    "OpenAIChatClient",
    "StudyDeckError",
    "TransportFailureError",
    "UnsuccessfulStatusError",
    "extract_assistant_content",
    "extract_candidate_json",
    "extract_json_block",
]
