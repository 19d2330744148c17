"""Licensing Module
================

Commercial name registry, license and copyright pattern tables, and the
Google Fonts cross-check.
"""

from .google_fonts import GoogleFontsCatalog, apply_google_fonts_check
from .patterns import (
    COMMERCIAL_INDICATORS,
    LICENSE_PATTERNS,
    PatternRule,
    classify_license,
    find_commercial_indicator,
)
from .registry import COMMERCIAL_FONT_NAMES, is_known_commercial_font, matches_commercial_name

__all__ = [
    "COMMERCIAL_FONT_NAMES",
    "COMMERCIAL_INDICATORS",
    "LICENSE_PATTERNS",
    "GoogleFontsCatalog",
    "PatternRule",
    "apply_google_fonts_check",
    "classify_license",
    "find_commercial_indicator",
    "is_known_commercial_font",
    "matches_commercial_name",
]
