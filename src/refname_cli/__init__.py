"""Derive canonical document filenames from bibliographic metadata."""

from .errors import ErrorKind, MetadataError
from .pipeline import PipelineResult, derive_slug, run_pipeline

__all__ = ["ErrorKind", "MetadataError", "PipelineResult", "derive_slug", "run_pipeline"]
