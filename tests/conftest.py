"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import io
import json
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (mocked HTTP, full pipeline)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


def make_provider_response(content) -> str:
    """Raw chat completions body whose assistant message has `content`."""
    return json.dumps({
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "model": "gpt-4.1-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    })


@pytest.fixture
def provider_response():
    """Factory for raw provider responses."""
    return make_provider_response


@pytest.fixture
def console_output():
    """A recording console and its buffer."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=100, force_terminal=False, color_system=None)
    return console, buffer


@pytest.fixture
def error_output():
    """A second recording console standing in for stderr."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=100, force_terminal=False, color_system=None)
    return console, buffer


@pytest.fixture
def scripted_input():
    """Factory for read_line callables that replay lines, then raise EOFError."""
    def factory(*lines: str):
        remaining = list(lines)

        def read_line() -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return read_line

    return factory


@pytest.fixture
def sample_summary_json():
    """Summary reply as the model is asked to produce it."""
    return json.dumps({
        "summary": "Photosynthesis turns light into chemical energy.",
        "key_points": ["Happens in chloroplasts", "Needs light", "Produces oxygen"],
        "definitions": [
            {"term": "Chlorophyll", "definition": "Green pigment that absorbs light."}
        ],
    })


@pytest.fixture
def sample_flashcards_json():
    """Flashcard reply with three cards."""
    return json.dumps({
        "flashcards": [
            {"question": "What does photosynthesis convert?", "answer": "Light to energy."},
            {"question": "Where does it happen?", "answer": "In chloroplasts."},
            {"question": "What gas is released?", "answer": "Oxygen."},
        ]
    })
