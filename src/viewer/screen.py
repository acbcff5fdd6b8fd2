"""
Terminal rendering for flashcards and summaries.

Model and user text is always wrapped in rich Text objects so brackets in
questions or answers are never read as console markup.
"""

from __future__ import annotations

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from src.generation.models import Flashcard, SummaryResult

HIDDEN_ANSWER = "[hidden] (press 'f' to flip)"
COMMAND_LEGEND = "Commands: [f]lip  [n]ext  [p]rev  [r]andom  [j]ump <num>  [q]uit"


def clear_screen(console: Console) -> None:
    """Clear the terminal (no-op when output is not a terminal)."""
    console.clear()


def render_card(
    console: Console,
    card: Flashcard,
    index: int,
    total: int,
    show_answer: bool,
) -> None:
    """Clear the screen and draw one card. `index` is 0-based."""
    clear_screen(console)

    question = Text.assemble(("Q: ", "bold cyan"), card.question)
    if show_answer:
        answer = Text.assemble(("A: ", "bold green"), card.answer)
    else:
        answer = Text.assemble(("A: ", "bold green"), (HIDDEN_ANSWER, "dim"))

    console.print(
        Panel(
            Group(question, Text(), answer),
            title=Text(f"Flashcard {index + 1}/{total}", style="bold"),
            title_align="left",
            border_style="cyan",
            box=box.HEAVY,
            padding=(1, 2),
        )
    )
    console.print(Text(COMMAND_LEGEND, style="dim"))


def render_summary(console: Console, result: SummaryResult) -> None:
    """Print summary, key points and definitions."""
    console.print()
    console.print(Text("=== SUMMARY ===", style="bold cyan"))
    console.print(Text(result.summary))
    console.print()

    console.print(Text("Key points:", style="bold"))
    for point in result.key_points:
        console.print(Text(f"- {point}"))

    console.print()
    console.print(Text("Definitions:", style="bold"))
    for item in result.definitions:
        console.print(Text.assemble((item.term, "bold"), f": {item.definition}"))
