"""Batch validation of font files."""

from .processor import (
    BatchProgressCallback,
    BatchValidator,
    LoggingProgressCallback,
    collect_font_files,
)

__all__ = [
    "BatchProgressCallback",
    "BatchValidator",
    "LoggingProgressCallback",
    "collect_font_files",
]
