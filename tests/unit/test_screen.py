"""
Unit tests for terminal rendering.
"""

from src.generation.models import Definition, Flashcard, SummaryResult
from src.viewer.screen import COMMAND_LEGEND, HIDDEN_ANSWER, render_card, render_summary


class TestRenderCard:
    """Test flashcard rendering."""

    def test_hidden_answer(self, console_output):
        console, buffer = console_output
        render_card(console, Flashcard("What is ATP?", "Energy currency."), 0, 3, show_answer=False)

        output = buffer.getvalue()
        assert "Flashcard 1/3" in output
        assert "Q: What is ATP?" in output
        assert f"A: {HIDDEN_ANSWER}" in output
        assert "Energy currency." not in output
        assert COMMAND_LEGEND in output

    def test_visible_answer(self, console_output):
        console, buffer = console_output
        render_card(console, Flashcard("What is ATP?", "Energy currency."), 2, 3, show_answer=True)

        output = buffer.getvalue()
        assert "Flashcard 3/3" in output
        assert "A: Energy currency." in output
        assert HIDDEN_ANSWER not in output

    def test_brackets_are_not_markup(self, console_output):
        """Model text containing [tags] is printed literally."""
        console, buffer = console_output
        render_card(console, Flashcard("[bold]x[/bold]?", "[red]y"), 0, 1, show_answer=True)

        output = buffer.getvalue()
        assert "[bold]x[/bold]?" in output
        assert "[red]y" in output


class TestRenderSummary:
    """Test summary rendering."""

    def test_all_sections(self, console_output):
        console, buffer = console_output
        result = SummaryResult(
            summary="Cells make energy.",
            key_points=["Mitochondria", "ATP"],
            definitions=[Definition("ATP", "Adenosine triphosphate.")],
        )

        render_summary(console, result)

        output = buffer.getvalue()
        assert "=== SUMMARY ===" in output
        assert "Cells make energy." in output
        assert "Key points:" in output
        assert "- Mitochondria" in output
        assert "- ATP" in output
        assert "Definitions:" in output
        assert "ATP: Adenosine triphosphate." in output

    def test_empty_summary_still_prints_headings(self, console_output):
        console, buffer = console_output
        render_summary(console, SummaryResult())

        output = buffer.getvalue()
        assert "Key points:" in output
        assert "Definitions:" in output
