"""
Embedding Permission Decoder
============================

Decodes the OS/2 ``fsType`` word. See
https://learn.microsoft.com/en-us/typography/opentype/spec/os2#fstype
"""

import logging

from fontTools.ttLib import TTFont

from fontgate.core.models import EmbeddingPermissions

logger = logging.getLogger(__name__)

FSTYPE_INSTALLABLE = 0x0000
FSTYPE_RESTRICTED = 0x0002
FSTYPE_PREVIEW_PRINT = 0x0004
FSTYPE_EDITABLE = 0x0008
FSTYPE_NO_SUBSETTING = 0x0100
FSTYPE_BITMAP_ONLY = 0x0200


def decode_fs_type(fs_type: int) -> EmbeddingPermissions:
    """Decode an fsType value. The bits are independent of each other."""
    fs_type &= 0xFFFF
    return EmbeddingPermissions(
        raw_flags=fs_type,
        is_installable=fs_type == FSTYPE_INSTALLABLE,
        is_restricted=bool(fs_type & FSTYPE_RESTRICTED),
        is_preview_print_only=bool(fs_type & FSTYPE_PREVIEW_PRINT),
        is_editable=bool(fs_type & FSTYPE_EDITABLE),
        allows_subsetting=not fs_type & FSTYPE_NO_SUBSETTING,
        is_bitmap_only=bool(fs_type & FSTYPE_BITMAP_ONLY),
    )


def get_embedding_permissions(font: TTFont) -> EmbeddingPermissions:
    """Read embedding permissions; a font without an OS/2 table counts as installable."""
    if "OS/2" not in font:
        logger.debug("No OS/2 table; treating embedding as installable")
        return decode_fs_type(FSTYPE_INSTALLABLE)

    fs_type = font["OS/2"].fsType
    logger.debug(f"OS/2 fsType 0x{fs_type:04x}")
    return decode_fs_type(fs_type)
