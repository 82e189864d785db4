"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) in one module that
knows nothing about HTTP or parsing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from notems.application.use_cases.run_demo import DemoStep
    from notems.domain.models.save_result import SaveResult

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "note.ms") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(Text(f"❌ {message}", style="bold red"))


# ---------------------------------------------------------------------------
# Note content
# ---------------------------------------------------------------------------


def content_panel(content: str, url: str) -> None:
    """Show note text verbatim; markup in the note is not interpreted."""
    body = Text(content) if content else Text("(empty)", style="dim italic")
    console.print(Panel(body, title=escape(url), border_style="blue"))


def save_result_panel(result: SaveResult) -> None:
    """Print the outcome of a save."""
    if result:
        success_panel(
            f"✅ Saved ({result.mode.value}) to [bold green]{escape(result.url)}[/] "
            f"[dim](HTTP {result.status_code})[/]"
        )
        return

    detail = result.error or "unknown error"
    hint = " (retrying may help)" if result.retryable else ""
    error_message(f"Save failed ({result.mode.value}): {detail}{hint}")


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active note.ms configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Demo report
# ---------------------------------------------------------------------------


def demo_table(steps: list[DemoStep]) -> None:
    """Summarize each demo step and the content read back after it."""
    table = Table(title="📋 note.ms demo", show_header=True, border_style="blue")
    table.add_column("Step", style="cyan")
    table.add_column("Result")
    table.add_column("Content after write")

    for step in steps:
        if step.succeeded:
            status = Text(f"OK (HTTP {step.result.status_code})", style="green")
        else:
            status = Text(step.result.error or "failed", style="red")
        after = Text(step.content_after) if step.content_after is not None else Text("—", style="dim")
        table.add_row(step.name, status, after)

    console.print(table)
