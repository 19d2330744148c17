"""Custom exceptions for the font license validator."""

from typing import Any


class FontGateError(Exception):
    """Base exception for all fontgate errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ValidationError(FontGateError):
    """Exception raised for input validation errors."""


class ConfigurationError(FontGateError):
    """Exception raised for configuration errors."""


class CatalogError(FontGateError):
    """Exception raised when the Google Fonts catalog cannot be loaded."""


class FontParseError(ValidationError):
    """Exception raised when the input bytes are not a parseable font."""

    def __init__(self, error: str):
        super().__init__(f"Invalid or corrupted font file: {error}")


class EmptyFontDataError(FontParseError):
    """Exception raised when the font buffer is empty."""

    def __init__(self):
        super().__init__("no data")


class UnsupportedFontExtensionError(ValidationError):
    """Exception raised for font file names with an unsupported extension."""

    def __init__(self, filename: str, allowed: list[str]):
        super().__init__(
            f"Invalid file type. Expected font file ({', '.join(allowed)}), got {filename}"
        )


class FontFileTooLargeError(ValidationError):
    """Exception raised when a font file exceeds the configured size limit."""

    def __init__(self, path: str, size: int, limit: int):
        super().__init__(f"Font file too large: {path} ({size} bytes, limit {limit})")


class FontFileNotFoundError(ValidationError):
    """Exception raised when a font file does not exist."""

    def __init__(self, file_path: str):
        super().__init__(f"Font file not found: {file_path}")


class NoFontFilesError(ValidationError):
    """Exception raised when no font files are found in a directory."""

    def __init__(self, directory: str):
        super().__init__(f"No font files found in {directory}")


class CatalogFetchError(CatalogError):
    """Exception raised when the catalog request fails."""

    def __init__(self, url: str, error: str):
        super().__init__(f"Failed to fetch Google Fonts catalog from {url}: {error}")


class InvalidCatalogResponseError(CatalogError):
    """Exception raised when the catalog response is not the expected JSON."""

    def __init__(self, error: str):
        super().__init__(f"Invalid Google Fonts catalog response: {error}")


class EmptyCredentialError(ValueError):
    """Exception raised for empty credentials."""

    def __init__(self):
        super().__init__("Credential cannot be empty")


class InvalidEndpointUrlError(ValueError):
    """Exception raised for invalid endpoint URLs."""

    def __init__(self):
        super().__init__("Endpoint URL must start with https:// or http://")


class InvalidExtensionError(ValueError):
    """Exception raised for malformed file extensions in configuration."""

    def __init__(self, extension: str):
        super().__init__(f"File extension must start with '.': {extension}")


class InvalidLogLevelError(ValueError):
    """Exception raised for unknown log level names."""

    def __init__(self, level: str):
        super().__init__(f"Unknown log level: {level}")


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")
