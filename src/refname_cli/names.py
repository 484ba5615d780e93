from __future__ import annotations

from dataclasses import dataclass

ET_AL = "et al."


def is_et_al(value: str) -> bool:
    return value.strip() == ET_AL


def normalize_name(raw: str) -> str:
    """Return *raw* in "Last, First" order.

    Names that already contain a comma are taken as ordered and only trimmed.
    Single-token names such as "Plato" come back unchanged.
    """
    if "," in raw:
        return raw.strip()

    tokens = raw.split()
    if len(tokens) < 2:
        return " ".join(tokens)
    return f"{tokens[-1]}, {' '.join(tokens[:-1])}"


@dataclass(slots=True, frozen=True)
class PersonName:
    raw: str
    normalized: str

    @classmethod
    def from_raw(cls, raw: str) -> PersonName:
        if is_et_al(raw):
            return cls(raw=raw, normalized=ET_AL)
        return cls(raw=raw, normalized=normalize_name(raw))

    @property
    def is_et_al(self) -> bool:
        return self.normalized == ET_AL
