"""Extraction of tagged metadata fields from user-edited text.

Two grammars carry the same fields::

    TITLE=Der Ring des Nibelungen          <title>
    YEAR=1876                              Der Ring des Nibelungen
    AUTHOR=Richard Wagner                  </title>
    #EDITOR=                               <authors>
                                           Richard Wagner / Cosima Wagner
                                           </authors>

Neither parser raises on malformed input; absent or broken tags simply leave
the corresponding field empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import re

from .names import ET_AL, is_et_al


class InputFormat(str, Enum):
    KEY_VALUE = "key_value"
    TAGGED = "tagged"
    AUTO = "auto"

    @classmethod
    def parse(cls, value: str | InputFormat) -> InputFormat:
        if isinstance(value, InputFormat):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        aliases = {"a": cls.KEY_VALUE, "kv": cls.KEY_VALUE, "b": cls.TAGGED, "block": cls.TAGGED}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError as exc:
            choices = ", ".join(item.value for item in cls)
            raise ValueError(f"Unknown input format {value!r}; expected one of {choices}") from exc


@dataclass(slots=True)
class MetadataRecord:
    title: str = ""
    year: str = ""
    authors: list[str] = field(default_factory=list)
    editors: list[str] = field(default_factory=list)
    tags_seen: set[str] = field(default_factory=set)

    @property
    def is_blank(self) -> bool:
        return not self.tags_seen


_KEY_VALUE_LINE = re.compile(r"^(TITLE|AUTHOR|EDITOR|YEAR)=(.*)$")
_BLOCK_OPEN = re.compile(r"^\s*<(title|authors|editors|year)>\s*$")
_BLOCK_CLOSE = re.compile(r"^\s*</(title|authors|editors|year)>\s*$")
_NAME_DELIMITERS = re.compile(r"[/\u00b7\u2022|\x1f]")
_WHITESPACE = re.compile(r"[\s\u00a0\u202f]+")

GLYPH_CLEANUP = str.maketrans(
    {
        "–": "-",
        "¹": "1",
        "²": "2",
        "³": "3",
        "⁴": "4",
        "⁵": "5",
        "⁶": "6",
        "⁷": "7",
        "⁸": "8",
        "⁹": "9",
    }
)


def clean_fragment(text: str) -> str:
    collapsed = _WHITESPACE.sub(" ", text).strip()
    return collapsed.translate(GLYPH_CLEANUP)


def _append_name(names: list[str], value: str) -> None:
    # a trailing "et al." closes the role
    if not value or (names and is_et_al(names[-1])):
        return
    names.append(ET_AL if is_et_al(value) else value)


def parse_key_value(text: str) -> MetadataRecord:
    record = MetadataRecord()
    for line in text.splitlines():
        if line.startswith("#"):
            continue
        match = _KEY_VALUE_LINE.match(line)
        if match is None:
            continue

        key, value = match.group(1), match.group(2).strip()
        record.tags_seen.add(key.lower())
        if key == "TITLE":
            if not record.title:
                record.title = value
        elif key == "YEAR":
            if not record.year:
                record.year = value
        elif key == "AUTHOR":
            _append_name(record.authors, value)
        else:
            _append_name(record.editors, value)
    return record


def _iter_blocks(text: str) -> list[tuple[str, list[str]]]:
    blocks: list[tuple[str, list[str]]] = []
    current: str | None = None
    lines: list[str] = []
    for line in text.splitlines():
        if current is None:
            opened = _BLOCK_OPEN.match(line)
            if opened:
                current = opened.group(1)
                lines = []
            continue

        closed = _BLOCK_CLOSE.match(line)
        if closed and closed.group(1) == current:
            blocks.append((current, lines))
            current = None
            continue
        lines.append(line)
    return blocks


def parse_tagged_block(text: str) -> MetadataRecord:
    record = MetadataRecord()
    for tag, lines in _iter_blocks(text):
        record.tags_seen.add(tag)
        if tag in ("title", "year"):
            value = " ".join(part for part in (clean_fragment(line) for line in lines) if part)
            if tag == "title" and not record.title:
                record.title = value
            elif tag == "year" and not record.year:
                record.year = value
            continue

        names = record.authors if tag == "authors" else record.editors
        for line in lines:
            for segment in _NAME_DELIMITERS.split(line):
                _append_name(names, clean_fragment(segment))
    return record


def detect_format(text: str) -> InputFormat:
    for line in text.splitlines():
        if _BLOCK_OPEN.match(line):
            return InputFormat.TAGGED
    return InputFormat.KEY_VALUE


def parse_metadata(text: str, input_format: InputFormat = InputFormat.KEY_VALUE) -> MetadataRecord:
    if input_format is InputFormat.AUTO:
        input_format = detect_format(text)
    if input_format is InputFormat.TAGGED:
        return parse_tagged_block(text)
    return parse_key_value(text)


__all__ = [
    "GLYPH_CLEANUP",
    "InputFormat",
    "MetadataRecord",
    "clean_fragment",
    "detect_format",
    "parse_key_value",
    "parse_metadata",
    "parse_tagged_block",
]
