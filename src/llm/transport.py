"""
OpenAI Chat Completions client.

One synchronous POST per generation request. The client owns a single
httpx.Client for its whole lifetime; use it as a context manager so the
connection pool is released when the session ends.

Usage:
    with OpenAIChatClient.from_settings(get_settings()) as client:
        raw = client.send_prompt("Summarize ...")
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from config import Settings

from .errors import MissingCredentialError, TransportFailureError, UnsuccessfulStatusError

DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4.1-mini"
DEFAULT_TIMEOUT_SECONDS = 120.0


class OpenAIChatClient:
    """HTTP client for the chat completions endpoint."""

    def __init__(
        self,
        api_key: str | None,
        api_url: str = DEFAULT_API_URL,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Bearer credential; may be empty, checked per request
            api_url: Full chat completions URL
            model: Model identifier sent with every request
            timeout_seconds: Request timeout
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.api_key = api_key or ""
        self.api_url = api_url
        self.model = model
        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout_seconds),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> OpenAIChatClient:
        """Build a client from application settings."""
        params = {
            "api_key": settings.openai_api_key,
            "api_url": settings.openai_api_url,
            "model": settings.openai_model,
            "timeout_seconds": settings.openai_timeout_seconds,
        }
        params.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**params)

    def __enter__(self) -> OpenAIChatClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """Request body: the model plus a single user message."""
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }

    def send_prompt(self, prompt: str) -> str:
        """
        Send a prompt and return the raw response body.

        Raises:
            MissingCredentialError: No API key configured
            TransportFailureError: Network-level failure or timeout
            UnsuccessfulStatusError: Non-2xx response
        """
        if not self.api_key:
            raise MissingCredentialError("OPENAI_API_KEY environment variable not set.")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        logger.debug(f"POST {self.api_url} (model={self.model}, prompt={len(prompt)} chars)")
        try:
            response = self._client.post(
                self.api_url,
                json=self.build_payload(prompt),
                headers=headers,
            )
        except httpx.HTTPError as e:
            raise TransportFailureError(f"Request to {self.api_url} failed: {e}") from e

        logger.debug(f"Response status {response.status_code} ({len(response.text)} bytes)")
        if not response.is_success:
            raise UnsuccessfulStatusError(response.status_code, response.text)

        return response.text
