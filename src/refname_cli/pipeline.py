from __future__ import annotations

from dataclasses import dataclass
import logging

from .aggregate import MarkerStyle, Role, aggregate_names
from .errors import ErrorKind, MetadataError
from .names import PersonName
from .parser import InputFormat, MetadataRecord, parse_metadata
from .reference import build_reference
from .slug import slugify
from .transliterate import transliterate

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class PipelineResult:
    slug: str = ""
    reference: str = ""
    error_kind: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @property
    def cancelled(self) -> bool:
        return self.error_kind is ErrorKind.EMPTY_METADATA_BUFFER

    @classmethod
    def success(cls, slug: str, reference: str) -> PipelineResult:
        return cls(slug=slug, reference=reference)

    @classmethod
    def error(cls, kind: ErrorKind, message: str) -> PipelineResult:
        return cls(error_kind=kind, message=message)


def validate_record(record: MetadataRecord) -> None:
    if record.is_blank:
        raise MetadataError(ErrorKind.EMPTY_METADATA_BUFFER)
    if not record.title:
        raise MetadataError(ErrorKind.MISSING_TITLE)
    if not record.year:
        raise MetadataError(ErrorKind.MISSING_YEAR)


def reference_for_record(record: MetadataRecord, marker_style: MarkerStyle = MarkerStyle.FORMAL) -> str:
    validate_record(record)
    authors = aggregate_names(
        (PersonName.from_raw(raw) for raw in record.authors),
        Role.AUTHOR,
        marker_style,
    )
    editors = aggregate_names(
        (PersonName.from_raw(raw) for raw in record.editors),
        Role.EDITOR,
        marker_style,
    )
    return build_reference(title=record.title, year=record.year, authors=authors, editors=editors)


def derive_slug(
    text: str | None,
    input_format: InputFormat = InputFormat.KEY_VALUE,
    marker_style: MarkerStyle = MarkerStyle.FORMAL,
) -> tuple[str, str]:
    """Run the whole pipeline on edited template text.

    Returns ``(slug, reference)``. ``None`` text means the editor was closed
    without saving and is reported like an empty buffer.
    """
    if text is None or not text.strip():
        raise MetadataError(ErrorKind.EMPTY_METADATA_BUFFER)

    record = parse_metadata(text, input_format)
    LOGGER.debug(
        "Parsed metadata: title=%r year=%r authors=%r editors=%r",
        record.title,
        record.year,
        record.authors,
        record.editors,
    )
    reference = reference_for_record(record, marker_style)
    ascii_reference = transliterate(reference)
    slug = slugify(ascii_reference)
    LOGGER.debug("Reference %r -> %r -> slug %r", reference, ascii_reference, slug)
    if not slug:
        raise MetadataError(
            ErrorKind.UNUSABLE_REFERENCE,
            f"Reference {reference!r} does not contain any characters usable in a filename",
        )
    return slug, reference


def run_pipeline(
    text: str | None,
    input_format: InputFormat = InputFormat.KEY_VALUE,
    marker_style: MarkerStyle = MarkerStyle.FORMAL,
) -> PipelineResult:
    try:
        slug, reference = derive_slug(text, input_format=input_format, marker_style=marker_style)
    except MetadataError as exc:
        LOGGER.info("Metadata rejected: %s", exc.kind.value)
        return PipelineResult.error(exc.kind, exc.message)
    return PipelineResult.success(slug=slug, reference=reference)
