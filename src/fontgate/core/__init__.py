"""Core components for font license validation."""

from .config import AppConfig, BatchConfig, GoogleFontsConfig, LoggingConfig, ValidatorConfig
from .exceptions import (
    CatalogError,
    ConfigurationError,
    FontGateError,
    FontParseError,
    ValidationError,
)
from .models import (
    BatchItemResult,
    BatchValidationResult,
    EmbeddingPermissions,
    ExtractedMetadata,
    ValidationChecks,
    ValidationVerdict,
)

__all__ = [
    "AppConfig",
    "BatchConfig",
    "BatchItemResult",
    "BatchValidationResult",
    "CatalogError",
    "ConfigurationError",
    "EmbeddingPermissions",
    "ExtractedMetadata",
    "FontGateError",
    "FontParseError",
    "GoogleFontsConfig",
    "LoggingConfig",
    "ValidationChecks",
    "ValidationError",
    "ValidationVerdict",
    "ValidatorConfig",
]
