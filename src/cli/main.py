"""
Typer CLI for studydeck.

Paste study text, get a summary and/or a flashcard deck generated by an
OpenAI chat model, then flip through the cards in the terminal.

Usage:
    studydeck                  # Ask what to generate
    studydeck --choice 2       # Flashcards only
    studydeck -c 1 -m gpt-4o   # Summary only, different model
    studydeck --verbose        # Debug logging on stderr

Requires OPENAI_API_KEY in the environment (or in .env).
"""

from __future__ import annotations

import os
import sys

# Fix Windows encoding issues for Unicode characters (box drawing)
if sys.platform == "win32":
    os.environ.setdefault("PYTHONIOENCODING", "utf-8")
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.text import Text

sys.path.insert(0, str(Path(__file__).parent.parent.parent))
from config import get_settings
from src.cli.session import Choice, run_session
from src.generation.study_service import StudyAssistant
from src.llm.errors import MissingCredentialError
from src.llm.transport import OpenAIChatClient

app = typer.Typer(
    name="studydeck",
    help="Summaries and flashcards from pasted study text",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at the given level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )


@app.command()
def study(
    choice: Annotated[
        int | None,
        typer.Option(
            "--choice", "-c", min=1, max=3,
            help="1 = summary, 2 = flashcards, 3 = both (asks when omitted)",
        ),
    ] = None,
    model: Annotated[
        str | None, typer.Option("--model", "-m", help="Override the chat model")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Debug logging on stderr")
    ] = False,
) -> None:
    """
    Start an interactive study session.

    Examples:
        studydeck              # Choose interactively
        studydeck -c 3         # Summary and flashcards
    """
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    if not settings.has_openai:
        error = MissingCredentialError("OPENAI_API_KEY environment variable not set.")
        err_console.print(Text(f"Error: {error}", style="bold red"))
        raise typer.Exit(code=1)

    with OpenAIChatClient.from_settings(settings, model=model) as client:
        exit_code = run_session(
            StudyAssistant(client),
            console,
            console.input,
            choice=Choice(choice) if choice is not None else None,
            err_console=err_console,
        )

    raise typer.Exit(code=exit_code)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
