from __future__ import annotations

from .errors import ErrorKind, MetadataError


def build_reference(*, title: str, year: str, authors: str, editors: str) -> str:
    """Compose "Contributors (Year): Title" from aggregated parts.

    Parts that are empty are left out along with their separators. A
    reference needs at least one named contributor.
    """
    contributors = "; ".join(part for part in (authors, editors) if part)
    if not contributors:
        raise MetadataError(ErrorKind.MISSING_CONTRIBUTOR)

    reference = contributors
    if year:
        reference += f" ({year})"
    if title:
        reference += f": {title}"
    return reference
