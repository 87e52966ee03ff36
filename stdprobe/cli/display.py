"""Display components for CLI using Rich."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from stdprobe.models.standard import DetectionResult, EvidenceSource

console = Console()

SOURCE_LABELS = {
    EvidenceSource.COMPILE_COMMANDS: "compilation database",
    EvidenceSource.CMAKE: "CMake project file",
    EvidenceSource.DEFAULT: "default (no build evidence)",
}


def show_success(title: str, message: str) -> None:
    """Display a success message."""
    console.print()
    console.print(
        Panel(
            f"[bold green]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="green",
        )
    )


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_detection_result(result: DetectionResult) -> None:
    """Display a detection result in a formatted table.

    Args:
        result: Detection result to display.
    """
    table = Table(title="[bold]C++ Standard[/]", show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Standard", f"[bold green]{result.standard.dialect}[/]")
    table.add_row("Flag", result.flag)
    table.add_row("Source", SOURCE_LABELS[result.source])
    table.add_row("Directory", escape(result.working_directory))

    if result.evidence_file:
        table.add_section()
        table.add_row("Evidence File", escape(result.evidence_file))
    if result.matched_text:
        table.add_row("Matched", escape(result.matched_text))

    border = "yellow" if result.is_default else "green"
    console.print(Panel(table, border_style=border))


def show_written_config(path: Path, content: str) -> None:
    """Display a generated configuration file."""
    console.print()
    console.print(
        Panel(
            escape(content.rstrip()),
            title=f"[bold]{escape(str(path))}[/]",
            border_style="green",
        )
    )
