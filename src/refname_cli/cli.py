from __future__ import annotations

import logging
from pathlib import Path
import sys

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .app import run_rename
from .config import DEFAULT_SYSTEM_CONFIG_PATH, load_config
from .errors import MetadataError
from .parser import InputFormat
from .pipeline import derive_slug
from .template import render_template

app = typer.Typer(
    help="refname: rename documents after their bibliographic reference.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """refname root command group."""
    _setup_logging(verbose)


@app.command()
def rename(
    document: Path = typer.Argument(..., exists=True, dir_okay=False, resolve_path=True),
    config: Path | None = typer.Option(None, "--config", help="Optional custom config path; default is ~/.refname_cli/config.yaml."),
    marker_style: str | None = typer.Option(None, "--marker-style", help='Editor marker: "(Hg.)" or "(hg)".'),
    input_format: str | None = typer.Option(None, "--format", help="Template format: key_value, tagged or auto."),
    editor: str | None = typer.Option(None, "--editor", help="Editor command; defaults to $VISUAL / $EDITOR."),
    prefill: bool | None = typer.Option(None, "--prefill/--no-prefill", help="Prefill the template from PDF metadata."),
    view: bool | None = typer.Option(None, "--view/--no-view", help="Open the document in the default viewer first."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the new name without renaming."),
) -> None:
    """Edit the metadata of DOCUMENT and rename it after its reference."""
    try:
        app_config = load_config(
            config_path=config or DEFAULT_SYSTEM_CONFIG_PATH,
            cli_marker_style=marker_style,
            cli_input_format=input_format,
            cli_editor=editor,
            cli_prefill=prefill,
            cli_open_viewer=view,
        )
        report = run_rename(document, app_config, console, dry_run=dry_run)
    except Exception as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if report.cancelled:
        raise typer.Exit(code=0)
    if not report.result.ok:
        raise typer.Exit(code=1)


@app.command()
def slug(
    metadata_file: Path | None = typer.Argument(None, exists=True, dir_okay=False, help="Filled template; reads stdin if omitted."),
    marker_style: str | None = typer.Option(None, "--marker-style", help='Editor marker: "(Hg.)" or "(hg)".'),
    input_format: str | None = typer.Option(None, "--format", help="Template format: key_value, tagged or auto."),
    config: Path | None = typer.Option(None, "--config", help="Optional custom config path; default is ~/.refname_cli/config.yaml."),
    show_reference: bool = typer.Option(False, "--reference", help="Print the reference string as well."),
) -> None:
    """Print the filename slug for a filled metadata template."""
    try:
        app_config = load_config(
            config_path=config or DEFAULT_SYSTEM_CONFIG_PATH,
            cli_marker_style=marker_style,
            cli_input_format=input_format,
        )
        text = metadata_file.read_text(encoding="utf-8") if metadata_file else sys.stdin.read()
        result_slug, reference = derive_slug(
            text,
            input_format=app_config.input_format,
            marker_style=app_config.marker_style,
        )
    except MetadataError as exc:
        console.print(f"[bold red]{exc.kind.value}:[/bold red] {escape(exc.message)}")
        raise typer.Exit(code=0 if exc.is_cancellation else 1) from exc
    except Exception as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if show_reference:
        console.print(reference, markup=False, highlight=False, soft_wrap=True)
    console.print(result_slug, markup=False, highlight=False, soft_wrap=True)


@app.command()
def template(
    input_format: str = typer.Option(InputFormat.KEY_VALUE.value, "--format", help="Template format: key_value or tagged."),
) -> None:
    """Print an empty metadata template."""
    try:
        selected = InputFormat.parse(input_format)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if selected is InputFormat.AUTO:
        selected = InputFormat.KEY_VALUE
    console.print(render_template(input_format=selected), markup=False, highlight=False, soft_wrap=True, end="")


if __name__ == "__main__":
    app()
