from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .pipeline import PipelineResult


def render_renamed(
    console: Console,
    *,
    source: Path,
    target: Path,
    reference: str,
    dry_run: bool,
) -> None:
    unchanged = source == target
    if unchanged:
        title = "Already Named"
    elif dry_run:
        title = "Dry Run"
    else:
        title = "Renamed"
    console.print(
        Panel.fit(
            f"[bold]{escape(reference)}[/bold]\n"
            f"From: {escape(source.name)}\n"
            f"To:   {escape(target.name)}",
            title=title,
            border_style="yellow" if dry_run else "green",
        )
    )


def render_pipeline_error(console: Console, result: PipelineResult) -> None:
    if result.ok:
        return
    if result.cancelled:
        console.print(f"[yellow]Cancelled:[/yellow] {escape(result.message)}")
        return
    kind = result.error_kind.value if result.error_kind else "Error"
    console.print(f"[bold red]{kind}:[/bold red] {escape(result.message)}")
