"""
Unit tests for response extraction.

Covers assistant content lookup (string and multi-part shapes) and the
first-brace/last-brace JSON block rule.
"""

import json

import pytest

from src.llm.errors import MalformedProviderResponseError, NoJsonObjectFoundError
from src.llm.extraction import (
    extract_assistant_content,
    extract_candidate_json,
    extract_json_block,
)


class TestExtractAssistantContent:
    """Test locating the assistant reply."""

    def test_plain_string_content(self, provider_response):
        """String content is returned unchanged."""
        raw = provider_response("Here you go: {\"a\": 1}")
        assert extract_assistant_content(raw) == "Here you go: {\"a\": 1}"

    def test_multi_part_content_is_concatenated_in_order(self, provider_response):
        """Text parts are joined in order."""
        raw = provider_response([
            {"type": "text", "text": "{\"summary\": "},
            {"type": "text", "text": "\"ok\"}"},
        ])
        assert extract_assistant_content(raw) == "{\"summary\": \"ok\"}"

    def test_parts_without_text_are_skipped(self, provider_response):
        """Parts lacking a string text field contribute nothing."""
        raw = provider_response([
            {"type": "image_url", "image_url": {"url": "http://x"}},
            {"type": "text", "text": "{}"},
            {"type": "text", "text": 42},
            "stray",
        ])
        assert extract_assistant_content(raw) == "{}"

    def test_empty_string_content(self, provider_response):
        """Empty content is still content."""
        assert extract_assistant_content(provider_response("")) == ""

    @pytest.mark.parametrize("content", [None, 42, {"text": "{}"}, True])
    def test_unexpected_content_shape(self, provider_response, content):
        """Content that is neither a string nor a list is malformed."""
        with pytest.raises(MalformedProviderResponseError):
            extract_assistant_content(provider_response(content))

    @pytest.mark.parametrize("payload", [
        {},
        {"choices": []},
        {"choices": [{}]},
        {"choices": [{"message": {"role": "assistant"}}]},
        {"choices": "nope"},
        [],
    ])
    def test_missing_message_content(self, payload):
        """Responses without choices[0].message.content are malformed."""
        with pytest.raises(MalformedProviderResponseError):
            extract_assistant_content(json.dumps(payload))

    def test_non_json_body(self):
        """A body that is not JSON is malformed."""
        with pytest.raises(MalformedProviderResponseError):
            extract_assistant_content("<html>Bad Gateway</html>")


class TestExtractJsonBlock:
    """Test the outermost brace rule."""

    def test_returns_first_to_last_brace_inclusive(self):
        """Surrounding prose is dropped."""
        content = 'Sure! {"a": {"b": 1}} Hope this helps.'
        assert extract_json_block(content) == '{"a": {"b": 1}}'

    def test_strips_code_fences(self):
        """Markdown fences around the object are ignored."""
        content = '```json\n{"flashcards": []}\n```'
        assert extract_json_block(content) == '{"flashcards": []}'

    def test_spans_multiple_objects(self):
        """Two objects yield one span from the first { to the last }."""
        content = 'first {"a": 1} then {"b": 2} end'
        assert extract_json_block(content) == '{"a": 1} then {"b": 2}'

    @pytest.mark.parametrize("content", [
        "no braces at all",
        "only an opening { here",
        "only a closing } here",
        "} backwards {",
        "",
    ])
    def test_no_json_object(self, content):
        """Missing or misordered braces raise NoJsonObjectFoundError."""
        with pytest.raises(NoJsonObjectFoundError) as exc_info:
            extract_json_block(content)
        assert exc_info.value.content == content

    def test_block_is_not_sanitized(self):
        """An invalid block is still returned; decoding fails later."""
        assert extract_json_block("x {not json} y") == "{not json}"


class TestExtractCandidateJson:
    """Test the composed extractor."""

    def test_fenced_reply(self, provider_response):
        """Fenced model output is reduced to the JSON object."""
        raw = provider_response('```json\n{"summary": "s"}\n```')
        assert extract_candidate_json(raw) == '{"summary": "s"}'

    def test_reply_without_json(self, provider_response):
        """Prose-only replies raise NoJsonObjectFoundError."""
        with pytest.raises(NoJsonObjectFoundError):
            extract_candidate_json(provider_response("I cannot help with that."))


class TestDeeplyNestedResponse:
    """A provider body too deep to decode is malformed, not a crash."""

    def test_nested_body(self):
        raw = '{"choices": ' + "[" * 100000 + "]" * 100000 + "}"
        with pytest.raises(MalformedProviderResponseError):
            extract_assistant_content(raw)
