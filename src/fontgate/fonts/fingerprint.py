"""
Glyph Fingerprint Generator
===========================

Derives a short signature from the outlines of a fixed sample of glyphs. The
fingerprint ignores every name table field, so renaming a font or editing its
copyright does not change it; redrawing a sampled glyph does.

The digest is a 32-bit rolling hash (``h = h * 31 + ord(c)``). It is not
cryptographic and offers no collision resistance against crafted input. It is
a cheap, deterministic similarity signal only.
"""

import json
import logging
import math

from fontTools.pens.basePen import BasePen
from fontTools.ttLib import TTFont

logger = logging.getLogger(__name__)

# Distinctive capitals, lowercase letters and figures
SAMPLE_CHARACTERS = "AEMRSaegmrs0123"

QUANTIZATION_STEP = 10
GLYPH_SEPARATOR = "|"
HASH_MULTIPLIER = 31
HASH_MASK = 0xFFFFFFFF
OUTLINE_TABLES = ("glyf", "CFF ", "CFF2")


def quantize(value: float) -> int:
    """Round ``value / QUANTIZATION_STEP`` half up to an integer."""
    return math.floor(value / QUANTIZATION_STEP + 0.5)


class OutlineCommandPen(BasePen):
    """
    Records an outline as a list of path commands.

    Each command is a dict with a ``type`` key (``M``, ``L``, ``C``, ``Q`` or
    ``Z``) followed by its coordinates in a fixed key order. Components are
    decomposed and multi-point curve segments are split by ``BasePen``.
    """

    def __init__(self, glyphSet=None):
        super().__init__(glyphSet)
        self.commands: list[dict[str, float]] = []

    def _moveTo(self, pt):
        self.commands.append({"type": "M", "x": pt[0], "y": pt[1]})

    def _lineTo(self, pt):
        self.commands.append({"type": "L", "x": pt[0], "y": pt[1]})

    def _curveToOne(self, pt1, pt2, pt3):
        self.commands.append(
            {
                "type": "C",
                "x1": pt1[0],
                "y1": pt1[1],
                "x2": pt2[0],
                "y2": pt2[1],
                "x": pt3[0],
                "y": pt3[1],
            }
        )

    def _qCurveToOne(self, pt1, pt2):
        self.commands.append({"type": "Q", "x1": pt1[0], "y1": pt1[1], "x": pt2[0], "y": pt2[1]})

    def _closePath(self):
        self.commands.append({"type": "Z"})

    def _endPath(self):
        # Open contours have no closing command
        pass


def serialize_command(command: dict) -> str:
    """Quantize a command's coordinates and serialize it as compact JSON."""
    quantized = {
        key: quantize(value) if isinstance(value, (int, float)) else value
        for key, value in command.items()
    }
    return json.dumps(quantized, separators=(",", ":"))


def glyph_outline_commands(font: TTFont, char: str, glyph_set=None) -> list[dict] | None:
    """Return the outline commands for ``char``, or None if the font does not map it."""
    glyph_name = (font.getBestCmap() or {}).get(ord(char))
    if glyph_name is None:
        return None

    if glyph_set is None:
        glyph_set = font.getGlyphSet()
    if glyph_name not in glyph_set:
        return None

    pen = OutlineCommandPen(glyph_set)
    glyph_set[glyph_name].draw(pen)
    return pen.commands


def rolling_hash(text: str) -> int:
    """Unsigned 32-bit ``h * 31 + ord(c)`` accumulator over ``text``."""
    value = 0
    for char in text:
        value = (value * HASH_MULTIPLIER + ord(char)) & HASH_MASK
    return value


def generate_glyph_fingerprint(font: TTFont, sample_characters: str = SAMPLE_CHARACTERS) -> str:
    """
    Generate an 8-character lowercase hex fingerprint from sampled glyph outlines.

    Characters the font does not map are skipped, as are all characters of a
    font without outline tables.
    """
    path_data = []
    if any(tag in font for tag in OUTLINE_TABLES):
        glyph_set = font.getGlyphSet()
        for char in sample_characters:
            commands = glyph_outline_commands(font, char, glyph_set)
            if commands is None:
                continue
            path_data.append("".join(serialize_command(command) for command in commands))

    if len(path_data) < len(sample_characters):
        logger.debug(f"Fingerprint sampled {len(path_data)}/{len(sample_characters)} glyphs")

    return f"{rolling_hash(GLYPH_SEPARATOR.join(path_data)):08x}"
