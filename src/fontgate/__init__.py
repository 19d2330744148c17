"""Font License Validator
======================

Decides whether an uploaded or generated font may be permanently inscribed to
a public, immutable store:
- Extracts name table metadata and OS/2 embedding permissions
- Blocks known commercial and OS-bundled families by name
- Classifies license and copyright text
- Produces a glyph outline fingerprint that survives renaming
"""

__version__ = "1.0.0"
__author__ = "fontgate Team"

from .core.config import AppConfig, GoogleFontsConfig, ValidatorConfig
from .core.exceptions import FontGateError, FontParseError, ValidationError
from .core.models import (
    EmbeddingPermissions,
    ExtractedMetadata,
    ValidationChecks,
    ValidationVerdict,
)
from .licensing.registry import COMMERCIAL_FONT_NAMES
from .validator import FontValidator, validate_font, validate_font_from_source

__all__ = [
    "COMMERCIAL_FONT_NAMES",
    "AppConfig",
    "EmbeddingPermissions",
    "ExtractedMetadata",
    "FontGateError",
    "FontParseError",
    "FontValidator",
    "GoogleFontsConfig",
    "ValidationChecks",
    "ValidationError",
    "ValidationVerdict",
    "ValidatorConfig",
    "validate_font",
    "validate_font_from_source",
]
