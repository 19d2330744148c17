"""Pydantic models for type-safe data structures.

Every model is frozen and serializes with camelCase aliases, which is the shape
the upstream API layer consumes (``model_dump(by_alias=True)``).
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_FROZEN_CAMEL = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ExtractedMetadata(BaseModel):
    """Human-readable name table fields. ``None`` means the field is absent."""

    model_config = _FROZEN_CAMEL

    family_name: str | None = None
    full_name: str | None = None
    post_script_name: str | None = None
    version: str | None = None
    copyright: str | None = None
    trademark: str | None = None
    manufacturer: str | None = None
    designer: str | None = None
    description: str | None = None
    vendor_url: str | None = None
    designer_url: str | None = None
    license: str | None = None
    license_url: str | None = None
    sample_text: str | None = None

    @property
    def identity_names(self) -> tuple[str | None, str | None, str | None]:
        """Names compared against the commercial registry."""
        return (self.family_name, self.full_name, self.post_script_name)

    @property
    def has_license_metadata(self) -> bool:
        return bool(self.license or self.license_url)


class EmbeddingPermissions(BaseModel):
    """Decoded OS/2 ``fsType`` embedding permissions."""

    model_config = _FROZEN_CAMEL

    raw_flags: int = Field(0, ge=0, le=0xFFFF, description="OS/2 fsType word")
    is_installable: bool = True
    is_restricted: bool = False
    is_preview_print_only: bool = False
    is_editable: bool = False
    allows_subsetting: bool = True
    is_bitmap_only: bool = False


class ValidationChecks(BaseModel):
    """Named boolean outcomes of the individual checks."""

    model_config = _FROZEN_CAMEL

    is_known_commercial: bool = False
    has_license_metadata: bool = False
    has_restrictive_embedding: bool = False
    is_google_font: bool = False
    has_open_source_license: bool = False


class ValidationVerdict(BaseModel):
    """Complete, immutable result of one validation call."""

    model_config = _FROZEN_CAMEL

    is_valid: bool
    can_proceed: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    metadata: ExtractedMetadata
    embedding: EmbeddingPermissions
    checks: ValidationChecks
    fingerprint: str = Field(..., pattern=r"^[0-9a-f]{8}$")
    detected_license: str | None = Field(None, description="Label of the matched license rule")

    def to_api_dict(self) -> dict:
        """Serialize with the camelCase field names of the API contract."""
        return self.model_dump(by_alias=True)


class BatchItemResult(BaseModel):
    """Result for a single font in a batch."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Font file path")
    success: bool = Field(..., description="Whether the font could be read and parsed")
    verdict: ValidationVerdict | None = Field(None, description="Verdict when parsed")
    error: str | None = Field(None, description="Error message when not parsed")
    processing_time_ms: float = Field(..., ge=0.0, description="Processing time in milliseconds")

    @property
    def is_blocked(self) -> bool:
        return self.verdict is not None and not self.verdict.can_proceed


class BatchValidationResult(BaseModel):
    """Result of validating many font files."""

    model_config = ConfigDict(frozen=True)

    results: list[BatchItemResult] = Field(..., description="Results in input order")
    total_items: int = Field(..., ge=0)
    valid_items: int = Field(..., ge=0, description="Fonts that may proceed")
    blocked_items: int = Field(..., ge=0, description="Fonts with blocking errors")
    failed_items: int = Field(..., ge=0, description="Files that could not be read or parsed")
    total_processing_time_ms: float = Field(..., ge=0.0)

    @property
    def has_problems(self) -> bool:
        return self.blocked_items > 0 or self.failed_items > 0

    def get_failed_items(self) -> list[BatchItemResult]:
        """Get list of files that could not be parsed."""
        return [result for result in self.results if not result.success]

    def get_blocked_items(self) -> list[BatchItemResult]:
        """Get list of fonts blocked from inscription."""
        return [result for result in self.results if result.is_blocked]
