from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def slugify(text: str) -> str:
    slug = _NON_ALNUM.sub("_", text.lower())
    if slug.startswith("_"):
        slug = slug[1:]
    if slug.endswith("_"):
        slug = slug[:-1]
    return slug
