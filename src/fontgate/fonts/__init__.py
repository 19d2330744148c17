"""Font Inspection Module
======================

Parsing, metadata extraction, embedding permission decoding and glyph
fingerprinting for a single font binary.
"""

from .embedding import decode_fs_type, get_embedding_permissions
from .fingerprint import SAMPLE_CHARACTERS, generate_glyph_fingerprint
from .metadata import extract_metadata
from .parser import check_font_extension, load_font, read_font_file

__all__ = [
    "SAMPLE_CHARACTERS",
    "check_font_extension",
    "decode_fs_type",
    "extract_metadata",
    "generate_glyph_fingerprint",
    "get_embedding_permissions",
    "load_font",
    "read_font_file",
]
