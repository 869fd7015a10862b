"""Rich console output helpers for the CLI.

Status and error messages go to stderr; stdout is reserved for the CSS,
JSON and query results the commands produce.
"""

from rich.console import Console
from rich.markup import escape

from gfont.utils import RunStats

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"{SYM_STEP} {message}", highlight=False)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_summary(stats: RunStats, target: str) -> None:
    """Print run summary.

    Args:
        stats: Run statistics
        target: Where the output went ("stdout" or a file path)
    """
    console.print(
        f"[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )
    console.print(f"  {escape(target)}", style="bold", highlight=False)

    line = f"  {stats.documents_read} documents {SYM_DOT} {stats.faces_parsed} faces parsed"
    line += f" {SYM_DOT} {stats.faces_written} faces written"
    if stats.skipped_properties:
        line += f" {SYM_DOT} {stats.skipped_properties} properties skipped"
    console.print(line, highlight=False)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}", highlight=False)
    if details:
        console.print(f"  {escape(details)}", highlight=False)
