from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_TITLE = "MissingTitle"
    MISSING_YEAR = "MissingYear"
    MISSING_CONTRIBUTOR = "MissingContributor"
    EMPTY_METADATA_BUFFER = "EmptyMetadataBuffer"
    UNUSABLE_REFERENCE = "UnusableReference"


DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.MISSING_TITLE: "Title is missing.",
    ErrorKind.MISSING_YEAR: "Year is missing.",
    ErrorKind.MISSING_CONTRIBUTOR: "At least one author or editor is required.",
    ErrorKind.EMPTY_METADATA_BUFFER: "No metadata entered; nothing to do.",
    ErrorKind.UNUSABLE_REFERENCE: "The reference contains no characters usable in a filename.",
}


class MetadataError(ValueError):
    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    @property
    def is_cancellation(self) -> bool:
        return self.kind is ErrorKind.EMPTY_METADATA_BUFFER
