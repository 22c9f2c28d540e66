"""Table output formatting."""

from typing import List, Optional

from rich.console import Console
from rich.table import Table as RichTable

from reelai_core.models.video import ParseStatus, TranscriptionStatus, VideoRecord

console = Console()

STATUS_EMOJI = {
    "processing": "⚙️",
    "completed": "✅",
    "error": "❌",
    "failed": "❌",
}


def print_table(headers: List[str], rows: List[List[str]], title: str = None) -> None:
    """
    Print data as a formatted table.

    Args:
        headers: Column headers
        rows: Table rows
        title: Optional table title
    """
    table = RichTable(title=title)
    for header in headers:
        table.add_column(header)

    for row in rows:
        table.add_row(*row)

    console.print(table)


def _status(value: Optional[TranscriptionStatus | ParseStatus]) -> str:
    if value is None:
        return "-"
    return f"{STATUS_EMOJI.get(value.value, '❓')} {value.value}"


def _preview(text: Optional[str], limit: int = 60) -> str:
    if not text:
        return "-"
    return text[:limit] + "..." if len(text) > limit else text


def print_record(record: VideoRecord) -> None:
    """Print a video's transcription fields as a table."""
    rows = [
        ["Transcribe", "yes" if record.do_transcribe else "no"],
        ["Status", _status(record.transcription_status)],
        ["Attempts", str(record.transcription_attempts)],
        ["Last attempt", record.transcription_last_attempt.isoformat() if record.transcription_last_attempt else "-"],
        ["Error", record.transcription_error or "-"],
        ["Text", _preview(record.transcription_text)],
        ["Words", str(len(record.transcription_words or []))],
        ["Pattern", record.pattern or "-"],
        ["Parse status", _status(record.parse_status)],
        ["Parse error", record.parse_error or "-"],
        ["Pattern fields", ", ".join(sorted(record.pattern_json)) if record.pattern_json else "-"],
    ]
    print_table(["Field", "Value"], rows, title=f"Video {record.id}")
