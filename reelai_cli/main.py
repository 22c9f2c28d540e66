"""ReelAI CLI - Main entry point."""

import json
import logging

import typer
from rich.logging import RichHandler

from reelai_cli import __version__
from reelai_cli.output import console, print_record
from reelai_core.errors import PipelineError
from reelai_core.models.video import ContentPattern, StorageEvent
from reelai_core.processors.patterns import PATTERN_PROMPTS, SYSTEM_PROMPT

app = typer.Typer(
    name="reelai",
    help="ReelAI CLI - Run and inspect video transcription jobs",
    add_completion=True,
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


@app.callback(invoke_without_command=True)
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
):
    """ReelAI CLI."""
    if version:
        typer.echo(f"reelai v{__version__}")
        raise typer.Exit()
    _configure_logging(verbose)


@app.command()
def run(
    path: str = typer.Argument(..., help="Object path, e.g. videos/<user>/<id>.mp4"),
    bucket: str = typer.Option(None, "-b", "--bucket", help="Bucket (default: configured bucket)"),
    json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
):
    """Run the transcription pipeline for one uploaded object."""
    from reelai_api.config import Settings
    from reelai_api.factory import build_pipeline

    settings = Settings()
    pipeline = build_pipeline(settings)
    event = StorageEvent(bucket=bucket or settings.bucket, name=path)

    try:
        with console.status(f"Transcribing gs://{event.bucket}/{event.name}..."):
            result = pipeline.execute(event)
    except PipelineError as e:
        console.print(f"[red]✗[/red] {type(e).__name__}: {e.message}")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]✗[/red] {type(e).__name__}: {e}")
        raise typer.Exit(1) from e

    if json_output:
        invocation = result.invocation
        typer.echo(json.dumps({
            "video_id": result.video_id,
            "skipped": result.skipped,
            "skip_reason": result.skip_reason,
            "text": invocation.transcription.text if invocation.transcription else None,
            "parse_status": invocation.extraction.status.value if invocation.extraction else None,
        }, indent=2))
        return

    if result.skipped:
        console.print(f"[yellow]-[/yellow] Skipped: {result.skip_reason}")
        return

    console.print(f"[green]✓[/green] Transcribed video {result.video_id}")
    extraction = result.invocation.extraction
    if extraction is None:
        console.print("  No pattern extraction requested")
    elif extraction.succeeded:
        console.print(f"[green]✓[/green] Extracted {extraction.pattern.value} data")
    else:
        console.print(f"[yellow]![/yellow] {extraction.pattern.value} extraction failed: {extraction.error}")


@app.command()
def status(
    video_id: str = typer.Argument(..., help="Video document id"),
    json_output: bool = typer.Option(False, "--json", help="Output record as JSON"),
):
    """Show a video's transcription and extraction status."""
    from reelai_api.config import Settings
    from reelai_api.factory import build_video_store

    record = build_video_store(Settings()).get(video_id)
    if record is None:
        console.print(f"[red]✗[/red] Video document not found: {video_id}")
        raise typer.Exit(1)

    if json_output:
        typer.echo(record.model_dump_json(by_alias=True, indent=2))
    else:
        print_record(record)


@app.command()
def prompt(
    pattern: str = typer.Argument(..., help="Pattern: workout, recipe, tutorial"),
    system: bool = typer.Option(False, "--system", help="Also show the system instruction"),
):
    """Print the extraction prompt used for a pattern."""
    content_pattern = ContentPattern.parse(pattern)
    if content_pattern is None:
        choices = ", ".join(p.value for p in ContentPattern)
        typer.echo(f"Error: Invalid pattern '{pattern}'. Choose from: {choices}", err=True)
        raise typer.Exit(1)

    if system:
        console.print("[bold]System:[/bold]")
        typer.echo(SYSTEM_PROMPT)
        typer.echo()
    typer.echo(PATTERN_PROMPTS[content_pattern])


def main_entry():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main_entry()
