"""
Batch Validator
===============

Validates many font files in parallel. Validation is a pure function of each
file's bytes, so workers share one ``FontValidator`` without coordination.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from fontgate.core.config import BatchConfig
from fontgate.core.exceptions import FontFileNotFoundError, FontGateError, NoFontFilesError
from fontgate.core.models import BatchItemResult, BatchValidationResult
from fontgate.fonts.parser import read_font_file
from fontgate.validator import FontValidator

logger = logging.getLogger(__name__)


class BatchProgressCallback:
    """Base class for batch progress callbacks."""

    def on_start(self, total_items: int) -> None:
        """Called before the first file is validated."""

    def on_item_complete(self, result: BatchItemResult) -> None:
        """Called after each file, from the worker thread that validated it."""

    def on_complete(self, result: BatchValidationResult) -> None:
        """Called once with the final result."""


class LoggingProgressCallback(BatchProgressCallback):
    """Reports batch progress through the module logger."""

    def on_start(self, total_items: int) -> None:
        logger.info(f"Validating {total_items} font files")

    def on_item_complete(self, result: BatchItemResult) -> None:
        if not result.success:
            logger.warning(f"{result.path.name}: {result.error}")
        elif result.is_blocked:
            logger.warning(f"{result.path.name}: blocked ({'; '.join(result.verdict.errors)})")
        else:
            logger.info(f"{result.path.name}: ok ({result.processing_time_ms:.1f}ms)")

    def on_complete(self, result: BatchValidationResult) -> None:
        logger.info(
            f"Batch complete: {result.valid_items} ok, {result.blocked_items} blocked, "
            f"{result.failed_items} failed in {result.total_processing_time_ms / 1000:.2f}s"
        )
        blocked = result.get_blocked_items()
        if blocked:
            logger.warning(f"Blocked: {', '.join(item.path.name for item in blocked)}")
        failed = result.get_failed_items()
        if failed:
            logger.warning(f"Failed: {', '.join(item.path.name for item in failed)}")


class BatchValidator:
    """Validates a list of font files with a thread pool."""

    def __init__(
        self,
        validator: FontValidator | None = None,
        config: BatchConfig | None = None,
    ):
        self.validator = validator or FontValidator()
        self.config = config or BatchConfig()

    def validate_paths(
        self,
        paths: list[Path],
        progress_callback: BatchProgressCallback | None = None,
    ) -> BatchValidationResult:
        """
        Validate font files.

        Files that cannot be read or parsed are reported as failed items and do
        not stop the batch.

        Args:
            paths: Font files to validate
            progress_callback: Optional progress callback

        Returns:
            Batch result with one item per path, in input order
        """
        start_time = time.time()
        progress_callback = progress_callback or LoggingProgressCallback()
        progress_callback.on_start(len(paths))

        def run(path: Path) -> BatchItemResult:
            result = self._validate_single(path)
            progress_callback.on_item_complete(result)
            return result

        if self.config.max_parallel == 1 or len(paths) <= 1:
            results = [run(path) for path in paths]
        else:
            with ThreadPoolExecutor(max_workers=self.config.max_parallel) as executor:
                results = list(executor.map(run, paths))

        failed_items = sum(1 for r in results if not r.success)
        blocked_items = sum(1 for r in results if r.is_blocked)

        batch_result = BatchValidationResult(
            results=results,
            total_items=len(results),
            valid_items=len(results) - failed_items - blocked_items,
            blocked_items=blocked_items,
            failed_items=failed_items,
            total_processing_time_ms=(time.time() - start_time) * 1000,
        )
        progress_callback.on_complete(batch_result)
        return batch_result

    def _validate_single(self, path: Path) -> BatchItemResult:
        start_time = time.time()
        try:
            data = self._read_font_file(path)
            verdict = self.validator.validate(data)
        except (FontGateError, OSError) as e:
            return BatchItemResult(
                path=path,
                success=False,
                error=str(e),
                processing_time_ms=(time.time() - start_time) * 1000,
            )

        return BatchItemResult(
            path=path,
            success=True,
            verdict=verdict,
            processing_time_ms=(time.time() - start_time) * 1000,
        )

    def _read_font_file(self, path: Path) -> bytes:
        validator_config = self.validator.config
        return read_font_file(
            path, validator_config.allowed_extensions, validator_config.max_file_size_bytes
        )


def collect_font_files(
    directory: Path,
    extensions: list[str] | tuple[str, ...] = (".ttf", ".otf", ".woff", ".woff2"),
    recursive: bool = True,
) -> list[Path]:
    """
    Find font files in a directory.

    Returns:
        Sorted list of font file paths

    Raises:
        NoFontFilesError: If the directory contains no font files
    """
    if not directory.is_dir():
        raise FontFileNotFoundError(str(directory))

    candidates = directory.rglob("*") if recursive else directory.glob("*")
    font_files = sorted(
        path for path in candidates if path.is_file() and path.suffix.lower() in extensions
    )

    if not font_files:
        raise NoFontFilesError(str(directory))

    return font_files
