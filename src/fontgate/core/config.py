"""Configuration management for the font license validator."""

import logging
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    EmptyCredentialError,
    InvalidEndpointUrlError,
    InvalidExtensionError,
    InvalidLogLevelError,
    InvalidYamlError,
)

GOOGLE_FONTS_API_URL = "https://www.googleapis.com/webfonts/v1/webfonts"


class ValidatorConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VALIDATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Font validation configuration."""

    allowed_extensions: list[str] = Field(
        default_factory=lambda: [".ttf", ".otf", ".woff", ".woff2"],
        description="File extensions accepted for upload",
    )
    max_file_size_bytes: int = Field(20 * 1024 * 1024, gt=0, description="Max font file size")
    license_excerpt_length: int = Field(
        100, ge=1, description="Characters of license text echoed in warnings"
    )
    copyright_excerpt_length: int = Field(
        80, ge=1, description="Characters of copyright text echoed in warnings"
    )

    @field_validator("allowed_extensions")
    @classmethod
    def normalize_extensions(cls, v):
        """Lowercase extensions and require a leading dot."""
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext.startswith("."):
                raise InvalidExtensionError(ext)
            normalized.append(ext)
        return normalized


class GoogleFontsConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_FONTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Google Fonts catalog configuration."""

    enabled: bool = Field(False, description="Cross-check family names against Google Fonts")
    api_url: str = Field(GOOGLE_FONTS_API_URL, description="Web Fonts Developer API endpoint")
    api_key: str | None = Field(None, description="API key", repr=False)
    cache_ttl_seconds: int = Field(3600, ge=0, description="Family list cache lifetime")
    timeout_seconds: float = Field(10.0, gt=0.0, description="HTTP timeout")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v):
        """Reject blank API keys."""
        if v is None:
            return v
        if len(v.strip()) == 0:
            raise EmptyCredentialError()
        return v.strip()

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v):
        """Validate endpoint URL format."""
        if not v.startswith(("https://", "http://")):
            raise InvalidEndpointUrlError()
        return v

    def __repr__(self) -> str:
        """Custom repr that masks the API key."""
        return (
            f"GoogleFontsConfig(enabled={self.enabled}, api_url='{self.api_url}', "
            f"cache_ttl_seconds={self.cache_ttl_seconds}, api_key='***')"
        )

    def to_safe_dict(self) -> dict:
        """Export configuration with the API key masked."""
        config_dict = self.model_dump()
        if config_dict.get("api_key"):
            config_dict["api_key"] = "***MASKED***"
        return config_dict


class BatchConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Batch validation configuration."""

    max_parallel: int = Field(4, ge=1, le=32, description="Maximum parallel validations")
    recursive: bool = Field(True, description="Search sub-directories for fonts")


class LoggingConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Logging configuration."""

    log_level: str = Field("INFO", description="Log level")
    log_format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InvalidLogLevelError(v)
        return level


class AppConfig(BaseSettings):
    """Main application configuration that loads from multiple sources."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development", description="Environment (development, staging, production)"
    )
    debug: bool = Field(False, description="Debug mode")

    validator: ValidatorConfig = Field(default_factory=ValidatorConfig)
    google_fonts: GoogleFontsConfig = Field(default_factory=GoogleFontsConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load_from_env(cls, env_file: str | Path | None = ".env") -> "AppConfig":
        """Load configuration from environment variables and .env file."""
        if env_file:
            env_file = Path(env_file)
            if env_file.exists():
                return cls(_env_file=env_file)
        return cls()


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            raise EmptyConfigFileError(str(config_path))

        # YAML-based configs do not read the .env file
        if issubclass(config_class, BaseSettings):

            class TempConfig(config_class):
                model_config = SettingsConfigDict(
                    env_file=None,
                    case_sensitive=False,
                    extra="ignore",
                )

            return TempConfig(**config_data)
        return config_class(**config_data)

    except ConfigurationError:
        raise
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e
    except Exception as e:
        raise ConfigLoadError(str(e)) from e


def _add_yaml_methods():
    """Add YAML loading methods to configuration classes."""

    @classmethod
    def from_yaml(cls, config_path: str | Path):
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(cls, yaml_path: str | Path | None = None, env_file: str = ".env"):
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)

    for config_class in [
        ValidatorConfig,
        GoogleFontsConfig,
        BatchConfig,
        LoggingConfig,
        AppConfig,
    ]:
        config_class.from_yaml = from_yaml
        config_class.from_env_and_yaml = from_env_and_yaml


_add_yaml_methods()
