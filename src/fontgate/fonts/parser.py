"""
Font Parser
===========

Boundary between raw font bytes and the structured font object the validator
inspects. Everything past this module works on a parsed ``TTFont``.
"""

import logging
from io import BytesIO
from pathlib import Path

from fontTools.ttLib import TTFont

from fontgate.core.exceptions import (
    EmptyFontDataError,
    FontFileNotFoundError,
    FontFileTooLargeError,
    FontParseError,
    UnsupportedFontExtensionError,
)

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".ttf", ".otf", ".woff", ".woff2")


def load_font(data: bytes) -> TTFont:
    """
    Parse a font binary.

    All tables are decompiled eagerly so that a corrupt file fails here rather
    than half-way through validation.

    Args:
        data: TrueType, OpenType, WOFF or WOFF2 bytes

    Returns:
        Parsed font

    Raises:
        FontParseError: If the bytes are not a parseable font
    """
    if not data:
        raise EmptyFontDataError()

    try:
        font = TTFont(BytesIO(data), lazy=False)
    except Exception as e:
        logger.debug(f"fontTools failed to parse {len(data)} bytes: {e}")
        raise FontParseError(str(e)) from e

    logger.debug(f"Parsed font with tables: {sorted(font.keys())}")
    return font


def check_font_extension(
    filename: str | Path, allowed_extensions: list[str] | tuple[str, ...] = SUPPORTED_EXTENSIONS
) -> str:
    """
    Check that a file name carries a font extension.

    Returns:
        The lowercased extension

    Raises:
        UnsupportedFontExtensionError: If the extension is not allowed
    """
    ext = Path(filename).suffix.lower()
    if ext not in allowed_extensions:
        raise UnsupportedFontExtensionError(Path(filename).name, list(allowed_extensions))
    return ext


def read_font_file(
    path: Path,
    allowed_extensions: list[str] | tuple[str, ...] = SUPPORTED_EXTENSIONS,
    max_file_size_bytes: int | None = None,
) -> bytes:
    """
    Read a font file after checking its extension and size.

    Raises:
        UnsupportedFontExtensionError: If the extension is not allowed
        FontFileNotFoundError: If ``path`` is not a file
        FontFileTooLargeError: If the file exceeds ``max_file_size_bytes``
    """
    check_font_extension(path, allowed_extensions)

    if not path.is_file():
        raise FontFileNotFoundError(str(path))

    size = path.stat().st_size
    if max_file_size_bytes is not None and size > max_file_size_bytes:
        raise FontFileTooLargeError(str(path), size, max_file_size_bytes)

    return path.read_bytes()
