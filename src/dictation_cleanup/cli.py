"""Command-line interface for dictation-cleanup.

Uses Typer for a type-hinted CLI around the correction and filtering passes.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dictation_cleanup import __version__
from dictation_cleanup.config import CleanupSettings, get_default_settings_path, load_settings
from dictation_cleanup.errors import (
    DictationCleanupError,
    ValidationError,
    format_error_for_display,
)
from dictation_cleanup.filtering.disfluency import filter_transcription_output
from dictation_cleanup.logging import LogConfig, LogLevel, configure_logging
from dictation_cleanup.pipeline import post_process_transcription
from dictation_cleanup.vocabulary.correction import CorrectionLog, VocabularyCorrector

# Settings path may come from a local .env (DICTATION_CLEANUP_CONFIG)
load_dotenv()

app = typer.Typer(
    name="dictation-cleanup",
    help="Clean up speech-to-text output: custom vocabulary correction and filler removal.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

TextArgument = Annotated[
    str, typer.Argument(help="Text to process, or '-' to read from stdin")
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Settings JSON file (default: DICTATION_CLEANUP_CONFIG)"),
]
WordOption = Annotated[
    Optional[list[str]],
    typer.Option("--word", "-w", help="Custom word (repeatable); replaces the settings file's word list"),
]
ThresholdOption = Annotated[
    Optional[float],
    typer.Option("--threshold", "-t", help="Match threshold (0.0 = exact only, 1.0 = broad)"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"dictation-cleanup version {__version__}")
        raise typer.Exit()


def fail(error: Exception) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(format_error_for_display(error))}")
    raise typer.Exit(1)


def read_text(text: str) -> str:
    """Resolve the TEXT argument, reading stdin for '-'."""
    if text != "-":
        return text

    data = sys.stdin.read()
    if not data.strip():
        raise ValidationError("No text received on stdin")
    return data


def resolve_settings(
    config: Path | None,
    words: list[str] | None,
    threshold: float | None,
) -> CleanupSettings:
    """Build settings from the settings file and command-line overrides.

    An explicit --config must exist. Without one, the default settings
    file is used when present. --word and --threshold replace only their
    own fields; everything else keeps the file's value.
    """
    if config is None and not get_default_settings_path().exists():
        settings = CleanupSettings()
    else:
        settings = load_settings(config)

    updates = {}
    if words:
        updates["custom_words"] = list(words)
    if threshold is not None:
        updates["word_correction_threshold"] = threshold

    return settings.model_copy(update=updates)


def print_corrections(log: CorrectionLog) -> None:
    """Print a table of the corrections that were applied."""
    if not log.corrections:
        console.print("[dim]No corrections applied.[/dim]")
        return

    table = Table(title=f"Corrections ({len(log)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Original")
    table.add_column("Corrected", style="green")
    table.add_column("Score", justify="right")
    table.add_column("Phonetic", justify="center")

    for c in log.corrections:
        table.add_row(
            str(c.position),
            escape(c.original),
            escape(c.corrected),
            f"{c.score:.3f}",
            "yes" if c.phonetic else "no",
        )

    console.print(table)


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Increase log verbosity (-vv for debug)."),
    ] = 0,
    json_logs: Annotated[
        bool, typer.Option("--json-logs", help="Emit logs as JSON lines.")
    ] = False,
    log_file: Annotated[
        Optional[Path], typer.Option("--log-file", help="Also write logs to this file.")
    ] = None,
) -> None:
    """Dictation Cleanup - post-processing for speech-to-text output.

    [bold]correct[/bold]: Replace mis-transcribed words with your custom vocabulary.

    [bold]filter[/bold]: Remove filler words (um, uh, hmm) and collapse stutters.

    [bold]clean[/bold]: Run both passes using your settings file.
    """
    level = LogLevel(min(LogLevel.NORMAL + verbose, LogLevel.DEBUG))
    configure_logging(LogConfig(level=level, json_format=json_logs, log_file=log_file))


@app.command()
def correct(
    text: TextArgument,
    words: WordOption = None,
    threshold: ThresholdOption = None,
    config: ConfigOption = None,
    show_corrections: Annotated[
        bool, typer.Option("--show-corrections", "-s", help="List each correction made")
    ] = False,
) -> None:
    """Correct words against a custom vocabulary."""
    try:
        settings = resolve_settings(config, words, threshold)
        source = read_text(text)
    except DictationCleanupError as e:
        fail(e)

    corrector = VocabularyCorrector(settings.custom_words, settings.word_correction_threshold)
    corrected, log = corrector.correct(source)

    typer.echo(corrected)

    if show_corrections:
        print_corrections(log)


@app.command("filter")
def filter_cmd(text: TextArgument) -> None:
    """Remove filler words and collapse stutters."""
    try:
        source = read_text(text)
    except DictationCleanupError as e:
        fail(e)

    typer.echo(filter_transcription_output(source))


@app.command()
def clean(
    text: TextArgument,
    config: ConfigOption = None,
    words: WordOption = None,
    threshold: ThresholdOption = None,
    no_filter: Annotated[
        bool, typer.Option("--no-filter", help="Skip filler removal")
    ] = False,
) -> None:
    """Run vocabulary correction, then filtering, as configured."""
    try:
        settings = resolve_settings(config, words, threshold)
        source = read_text(text)
    except DictationCleanupError as e:
        fail(e)

    if no_filter:
        settings = settings.model_copy(update={"filter_filler_words": False})

    typer.echo(post_process_transcription(source, settings))


if __name__ == "__main__":
    app()
