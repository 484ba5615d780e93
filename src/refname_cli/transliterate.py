"""ASCII transliteration of reference strings.

Colons and question marks carry meaning in a reference (the title separator
and a question in the title), so they are swapped for sentinels before any
folding happens and restored afterwards. Every remaining literal ``?`` after
folding is treated as an artifact and removed.
"""

from __future__ import annotations

import unicodedata

_SENTINEL_LEAD = "\x1a"
COLON_SENTINEL = _SENTINEL_LEAD + "C"
QUESTION_SENTINEL = _SENTINEL_LEAD + "Q"

SUBSTITUTIONS: dict[str, str] = {
    # quotation marks
    "„": '"',
    "“": '"',
    "”": '"',
    "«": '"',
    "»": '"',
    "‚": "'",
    "‘": "'",
    "’": "'",
    "‹": "'",
    "›": "'",
    # punctuation and signs
    "¦": "|",
    "¡": "!",
    "¿": QUESTION_SENTINEL,
    "÷": "/",
    "±": "+-",
    "¹": "^1",
    "²": "^2",
    "³": "^3",
    # germanic, nordic and icelandic letters
    "Ä": "Ae",
    "ä": "ae",
    "Ö": "Oe",
    "ö": "oe",
    "Ü": "Ue",
    "ü": "ue",
    "Ø": "Oe",
    "ø": "oe",
    "Ð": "Dh",
    "ð": "dh",
    "Þ": "Th",
    "þ": "th",
    # letters without a canonical decomposition
    "ß": "ss",
    "ẞ": "SS",
    "Æ": "AE",
    "æ": "ae",
    "Œ": "OE",
    "œ": "oe",
    "Ł": "L",
    "ł": "l",
    "Đ": "D",
    "đ": "d",
    "ı": "i",
}

_TABLE = str.maketrans(SUBSTITUTIONS)


def fold_to_ascii(text: str) -> str:
    """Decompose *text* and drop everything that is not ASCII."""
    decomposed = unicodedata.normalize("NFKD", text)
    return decomposed.encode("ascii", "ignore").decode("ascii")


def transliterate(text: str) -> str:
    protected = (
        unicodedata.normalize("NFC", text)
        .replace(_SENTINEL_LEAD, "")
        .replace(":", COLON_SENTINEL)
        .replace("?", QUESTION_SENTINEL)
    )
    ascii_text = fold_to_ascii(protected.translate(_TABLE))
    ascii_text = ascii_text.replace("?", "")
    return ascii_text.replace(QUESTION_SENTINEL, "?").replace(COLON_SENTINEL, ":")
