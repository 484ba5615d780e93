from __future__ import annotations

import logging
from pathlib import Path
import re

import fitz

from .template import TemplateValues

LOGGER = logging.getLogger(__name__)

_AUTHOR_SEPARATORS = re.compile(r"\s*;\s*|\s+and\s+|\s*&\s*")
_PDF_DATE_YEAR = re.compile(r"^(?:D:)?(\d{4})")


def split_authors(value: str) -> list[str]:
    return [name for name in (part.strip() for part in _AUTHOR_SEPARATORS.split(value)) if name]


def year_from_pdf_date(value: str) -> str:
    match = _PDF_DATE_YEAR.match(value.strip())
    return match.group(1) if match else ""


class PDFMetadataReader:
    """Reads the document info dictionary to prefill the metadata template."""

    def read(self, document: Path) -> TemplateValues:
        if document.suffix.lower() != ".pdf":
            return TemplateValues()
        try:
            doc = fitz.open(document)
        except Exception as exc:
            LOGGER.debug("Could not open %s for metadata: %s", document, exc)
            return TemplateValues()

        try:
            info = doc.metadata or {}
        finally:
            doc.close()

        title = " ".join(str(info.get("title") or "").split())
        author = str(info.get("author") or "")
        year = year_from_pdf_date(str(info.get("creationDate") or ""))
        LOGGER.debug("PDF metadata for %s: title=%r author=%r year=%r", document.name, title, author, year)
        return TemplateValues(title=title, year=year, authors=split_authors(author))
