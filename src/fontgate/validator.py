"""
Font Validator
==============

Decides whether a font may be permanently inscribed. The pipeline is pure: it
parses one in-memory buffer, runs every check unconditionally and composes a
``ValidationVerdict``. Licensing problems are reported in the verdict; only an
unparseable buffer raises (``FontParseError``).
"""

import logging
from collections.abc import Collection
from functools import lru_cache
from typing import BinaryIO

from fontTools.ttLib import TTFont

from fontgate.core.config import ValidatorConfig
from fontgate.core.exceptions import FontParseError
from fontgate.core.models import (
    EmbeddingPermissions,
    ExtractedMetadata,
    ValidationChecks,
    ValidationVerdict,
)
from fontgate.fonts.embedding import get_embedding_permissions
from fontgate.fonts.fingerprint import SAMPLE_CHARACTERS, generate_glyph_fingerprint
from fontgate.fonts.metadata import extract_metadata
from fontgate.fonts.parser import load_font
from fontgate.licensing.patterns import (
    COMMERCIAL_INDICATORS,
    LICENSE_PATTERNS,
    PatternRule,
    first_match,
)
from fontgate.licensing.registry import COMMERCIAL_FONT_NAMES, is_known_commercial_font

logger = logging.getLogger(__name__)

UNKNOWN_FAMILY = "Unknown"

COMMERCIAL_NAME_ERROR = (
    '"{family}" appears to be a commercial font that requires a license for redistribution. '
    "Inscription is not permitted."
)
RESTRICTED_EMBEDDING_ERROR = (
    "This font has embedding restrictions set by the font creator. It cannot be redistributed."
)
NO_LICENSE_WARNING = (
    "No license information found in font metadata. "
    "Please ensure you have the right to redistribute this font."
)
UNRECOGNIZED_LICENSE_WARNING = 'License found but may not permit redistribution: "{excerpt}..."'
COMMERCIAL_COPYRIGHT_WARNING = 'Copyright notice suggests commercial ownership: "{excerpt}..."'


def compose_verdict(
    metadata: ExtractedMetadata,
    embedding: EmbeddingPermissions,
    fingerprint: str,
    *,
    commercial_names: Collection[str] = COMMERCIAL_FONT_NAMES,
    license_rules: tuple[PatternRule, ...] = LICENSE_PATTERNS,
    indicator_rules: tuple[PatternRule, ...] = COMMERCIAL_INDICATORS,
    license_excerpt_length: int = 100,
    copyright_excerpt_length: int = 80,
) -> ValidationVerdict:
    """
    Aggregate the individual checks into a verdict.

    Errors block inscription; warnings are advisory. Every check runs
    regardless of the outcome of the others.
    """
    errors: list[str] = []
    warnings: list[str] = []

    # Check 1: commercial family name
    is_known_commercial = is_known_commercial_font(metadata, commercial_names)
    if is_known_commercial:
        errors.append(COMMERCIAL_NAME_ERROR.format(family=metadata.family_name or UNKNOWN_FAMILY))

    # Check 2: embedding restrictions
    has_restrictive_embedding = embedding.is_restricted
    if has_restrictive_embedding:
        errors.append(RESTRICTED_EMBEDDING_ERROR)

    # Check 3: license metadata
    has_license_metadata = metadata.has_license_metadata
    license_rule = first_match(metadata.license, license_rules)
    has_open_source_license = license_rule is not None

    if not has_license_metadata:
        warnings.append(NO_LICENSE_WARNING)
    elif not has_open_source_license:
        license_text = metadata.license or metadata.license_url
        warnings.append(
            UNRECOGNIZED_LICENSE_WARNING.format(excerpt=license_text[:license_excerpt_length])
        )

    # Check 4: copyright notice naming a commercial owner
    if first_match(metadata.copyright, indicator_rules) is not None:
        warnings.append(
            COMMERCIAL_COPYRIGHT_WARNING.format(
                excerpt=metadata.copyright[:copyright_excerpt_length]
            )
        )

    is_valid = len(errors) == 0
    logger.debug(
        f"Checks: commercial={is_known_commercial}, restricted={has_restrictive_embedding}, "
        f"license={license_rule.label if license_rule else None}"
    )

    return ValidationVerdict(
        is_valid=is_valid,
        # No rule distinguishes an overridable block yet
        can_proceed=is_valid,
        errors=errors,
        warnings=warnings,
        metadata=metadata,
        embedding=embedding,
        checks=ValidationChecks(
            is_known_commercial=is_known_commercial,
            has_license_metadata=has_license_metadata,
            has_restrictive_embedding=has_restrictive_embedding,
            is_google_font=False,
            has_open_source_license=has_open_source_license,
        ),
        fingerprint=fingerprint,
        detected_license=license_rule.label if license_rule else None,
    )


class FontValidator:
    """
    Font license and provenance validator.

    Holds only read-only tables, so one instance may be shared between threads.
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        commercial_names: Collection[str] = COMMERCIAL_FONT_NAMES,
        license_rules: tuple[PatternRule, ...] = LICENSE_PATTERNS,
        indicator_rules: tuple[PatternRule, ...] = COMMERCIAL_INDICATORS,
        sample_characters: str = SAMPLE_CHARACTERS,
    ):
        self.config = config or ValidatorConfig()
        self.commercial_names = commercial_names
        self.license_rules = license_rules
        self.indicator_rules = indicator_rules
        self.sample_characters = sample_characters

    def validate(self, data: bytes) -> ValidationVerdict:
        """
        Validate a font binary.

        Raises:
            FontParseError: If ``data`` is not a parseable font
        """
        font = load_font(data)
        try:
            return self.validate_font(font)
        finally:
            font.close()

    def validate_source(self, source: BinaryIO) -> ValidationVerdict:
        """Read a binary file-like object to the end and validate its contents."""
        return self.validate(source.read())

    def validate_font(self, font: TTFont) -> ValidationVerdict:
        """
        Validate an already parsed font.

        Raises:
            FontParseError: If a table or glyph outline fails to decode
        """
        try:
            metadata = extract_metadata(font)
            embedding = get_embedding_permissions(font)
            fingerprint = generate_glyph_fingerprint(font, self.sample_characters)
        except Exception as e:
            # CFF charstrings are only decoded when a glyph is drawn
            logger.debug(f"Font failed to decode after parsing: {e!r}")
            raise FontParseError(str(e)) from e

        verdict = compose_verdict(
            metadata,
            embedding,
            fingerprint,
            commercial_names=self.commercial_names,
            license_rules=self.license_rules,
            indicator_rules=self.indicator_rules,
            license_excerpt_length=self.config.license_excerpt_length,
            copyright_excerpt_length=self.config.copyright_excerpt_length,
        )

        logger.info(
            f"Validated {metadata.family_name or UNKNOWN_FAMILY!r} "
            f"(fingerprint {fingerprint}): {'ok' if verdict.is_valid else 'blocked'}, "
            f"{len(verdict.errors)} errors, {len(verdict.warnings)} warnings"
        )
        return verdict


@lru_cache(maxsize=1)
def get_default_validator() -> FontValidator:
    """Shared validator built from the environment configuration."""
    return FontValidator()


async def validate_font(data: bytes) -> ValidationVerdict:
    """
    Validate a font binary.

    A coroutine for consistency with I/O-bound callers; the work itself is
    synchronous and does not yield.
    """
    return get_default_validator().validate(data)


async def validate_font_from_source(source: BinaryIO) -> ValidationVerdict:
    """Read font bytes from a binary file-like object and validate them."""
    return await validate_font(source.read())
