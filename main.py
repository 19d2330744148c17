#!/usr/bin/env python3
"""
Main CLI for the Font License Validator
=======================================

This CLI checks whether font files may be permanently inscribed.
"""

import json
import logging
import sys
from pathlib import Path

import click

# Setup logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

try:
    from fontgate.batch.processor import BatchValidator, collect_font_files
    from fontgate.core.config import AppConfig
    from fontgate.core.exceptions import FontGateError, FontParseError
    from fontgate.core.models import ValidationVerdict
    from fontgate.fonts.parser import read_font_file
    from fontgate.licensing.google_fonts import GoogleFontsCatalog, apply_google_fonts_check
    from fontgate.licensing.registry import COMMERCIAL_FONT_NAMES
    from fontgate.validator import FontValidator
except ImportError as e:
    logger.exception(f"Import failed: {e}")
    logger.exception(
        "Make sure you have all dependencies installed and the project is properly set up"
    )
    sys.exit(1)

EXIT_OK = 0
EXIT_BLOCKED = 1
EXIT_UNPARSEABLE = 2


def _load_config(config: Path | None) -> AppConfig:
    app_config = AppConfig.from_env_and_yaml(yaml_path=config)
    root_logger = logging.getLogger()
    # --verbose wins over the configured level
    if root_logger.level != logging.DEBUG:
        root_logger.setLevel(app_config.logging.log_level)
    return app_config


def _print_verdict(name: str, verdict: ValidationVerdict) -> None:
    status = "OK" if verdict.can_proceed else "BLOCKED"
    click.echo(f"{name}: {status}")
    click.echo(f"  Family:      {verdict.metadata.family_name or '-'}")
    click.echo(f"  Fingerprint: {verdict.fingerprint}")
    click.echo(f"  License:     {verdict.detected_license or 'unrecognized'}")
    click.echo(f"  fsType:      0x{verdict.embedding.raw_flags:04x}")
    for error in verdict.errors:
        click.echo(f"  ERROR:   {error}")
    for warning in verdict.warnings:
        click.echo(f"  WARNING: {warning}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose):
    """Font License Validator CLI."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command(name="validate")
@click.argument("font", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration YAML file (optional)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the verdict as JSON")
@click.option("--google-fonts", is_flag=True, help="Cross-check the family against Google Fonts")
def validate(font, config, as_json, google_fonts):
    """Validate a single font file."""
    try:
        app_config = _load_config(config)
        validator_config = app_config.validator
        data = read_font_file(
            font, validator_config.allowed_extensions, validator_config.max_file_size_bytes
        )
        verdict = FontValidator(validator_config).validate(data)

        if google_fonts or app_config.google_fonts.enabled:
            catalog = GoogleFontsCatalog(app_config.google_fonts)
            verdict = apply_google_fonts_check(verdict, catalog.families())

    except FontParseError as e:
        logger.error(f"Could not parse {font}: {e}")
        sys.exit(EXIT_UNPARSEABLE)
    except FontGateError as e:
        logger.error(f"Validation failed: {e}")
        sys.exit(EXIT_UNPARSEABLE)

    if as_json:
        click.echo(json.dumps(verdict.to_api_dict(), indent=2))
    else:
        _print_verdict(font.name, verdict)

    sys.exit(EXIT_OK if verdict.can_proceed else EXIT_BLOCKED)


@cli.command(name="batch-validate")
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration YAML file (optional)",
)
@click.option(
    "--max-parallel",
    "-p",
    type=click.IntRange(1, 32),
    default=None,
    help="Maximum number of parallel validations (default: from config)",
)
@click.option("--json", "as_json", is_flag=True, help="Print all verdicts as JSON")
def batch_validate(directory, config, max_parallel, as_json):
    """Validate every font file in a directory."""
    try:
        app_config = _load_config(config)
        batch_config = app_config.batch
        if max_parallel is not None:
            batch_config = batch_config.model_copy(update={"max_parallel": max_parallel})

        logger.info(f"Scanning {directory} for fonts...")
        font_files = collect_font_files(
            directory, app_config.validator.allowed_extensions, batch_config.recursive
        )

        processor = BatchValidator(FontValidator(app_config.validator), batch_config)
        result = processor.validate_paths(font_files)

    except FontGateError as e:
        logger.error(f"Batch validation failed: {e}")
        sys.exit(EXIT_UNPARSEABLE)

    if as_json:
        payload = {
            str(item.path): item.verdict.to_api_dict() if item.verdict else {"error": item.error}
            for item in result.results
        }
        click.echo(json.dumps(payload, indent=2))
    else:
        for item in result.results:
            if item.verdict is None:
                click.echo(f"{item.path.name}: FAILED ({item.error})")
            else:
                _print_verdict(item.path.name, item.verdict)
        click.echo(
            f"\n{result.total_items} fonts: {result.valid_items} ok, "
            f"{result.blocked_items} blocked, {result.failed_items} failed"
        )

    sys.exit(EXIT_BLOCKED if result.has_problems else EXIT_OK)


@cli.command(name="list-commercial")
def list_commercial():
    """List the commercial font families that are always blocked."""
    for name in sorted(COMMERCIAL_FONT_NAMES):
        click.echo(name)


if __name__ == "__main__":
    cli()
