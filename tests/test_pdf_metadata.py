"""Tests for PDF metadata prefill."""

from pathlib import Path

import fitz

from refname_cli.pdf_metadata import PDFMetadataReader, split_authors, year_from_pdf_date
from refname_cli.template import TemplateValues


def test_split_authors() -> None:
    assert split_authors("Richard Wagner; Cosima Wagner and Franz Liszt") == [
        "Richard Wagner",
        "Cosima Wagner",
        "Franz Liszt",
    ]
    assert split_authors("") == []


def test_year_from_pdf_date() -> None:
    assert year_from_pdf_date("D:20190412101500+02'00'") == "2019"
    assert year_from_pdf_date("2001") == "2001"
    assert year_from_pdf_date("") == ""


def test_reads_pdf_info(tmp_path: Path) -> None:
    path = tmp_path / "paper.pdf"
    doc = fitz.open()
    doc.new_page()
    doc.set_metadata({"title": "Der Ring  des Nibelungen", "author": "Richard Wagner"})
    doc.save(str(path))
    doc.close()

    values = PDFMetadataReader().read(path)
    assert values.title == "Der Ring des Nibelungen"
    assert values.authors == ["Richard Wagner"]


def test_unreadable_documents_give_empty_values(tmp_path: Path) -> None:
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"not a pdf at all")
    text = tmp_path / "notes.txt"
    text.write_text("TITLE=x", encoding="utf-8")

    assert PDFMetadataReader().read(broken) == TemplateValues()
    assert PDFMetadataReader().read(text) == TemplateValues()
