"""
Error taxonomy for the generation pipeline.

Every failure between "send the prompt" and "typed result" is one of these.
None of them are retried; they propagate unchanged to the session
orchestrator, which reports them once.
"""

from __future__ import annotations


class StudyDeckError(Exception):
    """Base class for all request-terminal failures."""


class MissingCredentialError(StudyDeckError):
    """Raised when no API key is configured."""


class TransportFailureError(StudyDeckError):
    """Raised when the request never produced an HTTP response."""


class UnsuccessfulStatusError(StudyDeckError):
    """Raised when the provider answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"OpenAI API returned HTTP code {status_code}\nResponse: {body}")


class MalformedProviderResponseError(StudyDeckError):
    """Raised when the response has no usable assistant message content."""


class NoJsonObjectFoundError(StudyDeckError):
    """Raised when the assistant content holds no {...} span."""

    def __init__(self, content: str):
        self.content = content
        super().__init__(f"Assistant response did not contain a valid JSON object:\n{content}")


class InvalidJsonSyntaxError(StudyDeckError):
    """Raised when the candidate JSON block does not decode."""
