from __future__ import annotations

from enum import Enum
from typing import Iterable

from .names import ET_AL, PersonName


class Role(str, Enum):
    AUTHOR = "author"
    EDITOR = "editor"


class MarkerStyle(str, Enum):
    FORMAL = "(Hg.)"
    SHORT = "(hg)"

    @classmethod
    def parse(cls, value: str | MarkerStyle) -> MarkerStyle:
        if isinstance(value, MarkerStyle):
            return value
        cleaned = str(value).strip()
        for style in cls:
            if cleaned == style.value or cleaned.lower() == style.name.lower():
                return style
        choices = ", ".join(f'"{style.value}"' for style in cls)
        raise ValueError(f"Unknown marker style {value!r}; expected one of {choices}")


def _truncate(names: Iterable[PersonName]) -> tuple[list[str], bool]:
    kept: list[str] = []
    for name in names:
        if name.is_et_al:
            return kept, True
        kept.append(name.normalized)
    return kept, False


def aggregate_names(
    names: Iterable[PersonName],
    role: Role = Role.AUTHOR,
    marker_style: MarkerStyle = MarkerStyle.FORMAL,
) -> str:
    """Join the names of one role, collapsing long lists to "et al."."""
    kept, truncated = _truncate(names)
    marker = f" {marker_style.value}" if role is Role.EDITOR else ""

    if not kept:
        return ""
    if truncated or len(kept) >= 3:
        return f"{kept[0]} {ET_AL}{marker}"
    return "; ".join(f"{name}{marker}" for name in kept)
