"""
Metadata Extractor
==================

Reads the name table into an ``ExtractedMetadata`` record.
"""

import logging

from fontTools.ttLib import TTFont

from fontgate.core.models import ExtractedMetadata

logger = logging.getLogger(__name__)

# OpenType name IDs for each extracted field
NAME_IDS: dict[str, int] = {
    "copyright": 0,
    "family_name": 1,
    "full_name": 4,
    "version": 5,
    "post_script_name": 6,
    "trademark": 7,
    "manufacturer": 8,
    "designer": 9,
    "description": 10,
    "vendor_url": 11,
    "designer_url": 12,
    "license": 13,
    "license_url": 14,
    "sample_text": 19,
}

WINDOWS_PLATFORM_ID = 3
ENGLISH_US_LANG_ID = 0x0409


def _is_english(record) -> bool:
    if record.platformID == WINDOWS_PLATFORM_ID:
        return record.langID == ENGLISH_US_LANG_ID
    # Unicode and Macintosh platforms use 0 for English
    return record.langID == 0


def get_name_entry(font: TTFont, name_id: int) -> str | None:
    """
    Get a name table string, preferring English.

    Falls back to the first record for ``name_id`` in any language. Empty
    strings count as absent.
    """
    if "name" not in font:
        return None

    records = [record for record in font["name"].names if record.nameID == name_id]

    for record in records:
        if _is_english(record):
            text = record.toUnicode(errors="replace")
            if text:
                return text

    for record in records:
        text = record.toUnicode(errors="replace")
        if text:
            return text

    return None


def extract_metadata(font: TTFont) -> ExtractedMetadata:
    """Extract the human-readable metadata fields from a parsed font."""
    fields = {field: get_name_entry(font, name_id) for field, name_id in NAME_IDS.items()}
    logger.debug(
        f"Extracted metadata for {fields['family_name']!r}: "
        f"{sum(value is not None for value in fields.values())}/{len(fields)} fields present"
    )
    return ExtractedMetadata(**fields)
