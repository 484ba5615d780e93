from __future__ import annotations

import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class TargetExistsError(FileExistsError):
    pass


def target_path_for(source: Path, slug: str) -> Path:
    return source.with_name(f"{slug}{source.suffix}")


def rename_document(source: Path, slug: str, dry_run: bool = False) -> Path:
    if not source.is_file():
        raise FileNotFoundError(f"Document not found: {source}")

    target = target_path_for(source, slug)
    if target == source:
        LOGGER.debug("%s already has the canonical name", source)
        return target
    if target.exists():
        raise TargetExistsError(f"Target already exists, leaving {source.name} untouched: {target}")

    if dry_run:
        LOGGER.debug("Dry run, not renaming %s -> %s", source, target)
        return target

    source.rename(target)
    LOGGER.info("Renamed %s -> %s", source, target)
    return target
