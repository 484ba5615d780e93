from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import click
from rich.console import Console

from .config import AppConfig
from .parser import InputFormat
from .pdf_metadata import PDFMetadataReader
from .pipeline import PipelineResult, run_pipeline
from .renamer import rename_document
from .renderer import render_pipeline_error, render_renamed
from .template import TemplateValues, render_template

EditFunc = Callable[[str, str | None], str | None]


@dataclass(slots=True)
class RenameReport:
    source: Path
    result: PipelineResult
    target: Path | None = None
    renamed: bool = False

    @property
    def cancelled(self) -> bool:
        return self.result.cancelled


def edit_with_editor(text: str, editor: str | None) -> str | None:
    return click.edit(text, editor=editor, extension=".txt", require_save=True)


def build_template(document: Path, config: AppConfig) -> str:
    values = PDFMetadataReader().read(document) if config.prefill else TemplateValues()
    template_format = InputFormat.KEY_VALUE if config.input_format is InputFormat.AUTO else config.input_format
    return render_template(values, template_format)


def run_rename(
    document: Path,
    config: AppConfig,
    console: Console,
    *,
    dry_run: bool = False,
    edit: EditFunc | None = None,
) -> RenameReport:
    if not document.is_file():
        raise FileNotFoundError(f"Document not found: {document}")

    edit = edit or edit_with_editor
    if config.open_viewer:
        click.launch(str(document))

    edited = edit(build_template(document, config), config.editor)
    result = run_pipeline(edited, input_format=config.input_format, marker_style=config.marker_style)
    if not result.ok:
        render_pipeline_error(console, result)
        return RenameReport(source=document, result=result)

    target = rename_document(document, result.slug, dry_run=dry_run)
    render_renamed(console, source=document, target=target, reference=result.reference, dry_run=dry_run)
    return RenameReport(
        source=document,
        result=result,
        target=target,
        renamed=not dry_run and target != document,
    )
