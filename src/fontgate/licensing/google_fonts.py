"""
Google Fonts Cross-Check
========================

Fetches the Google Fonts family list and merges a family-name match into a
finished verdict. This is the only part of the package that performs network
I/O; the validator itself never calls it.
"""

import logging
import threading
import time

import requests

from fontgate.core.config import GoogleFontsConfig
from fontgate.core.exceptions import CatalogError, CatalogFetchError, InvalidCatalogResponseError
from fontgate.core.models import ValidationVerdict

logger = logging.getLogger(__name__)


class GoogleFontsCatalog:
    """
    In-memory cache of Google Fonts family names.

    Features:
    - Lowercased family names for case-insensitive lookups
    - Time-based refresh controlled by ``cache_ttl_seconds``
    - Falls back to the last good list (or an empty one) when a refresh fails
    """

    def __init__(
        self, config: GoogleFontsConfig | None = None, session: requests.Session | None = None
    ):
        self.config = config or GoogleFontsConfig()
        self.session = session or self._create_session()
        self._families: frozenset[str] | None = None
        self._fetched_at = 0.0
        self._lock = threading.Lock()

    def _create_session(self) -> requests.Session:
        """Create HTTP session with appropriate configuration."""
        session = requests.Session()
        session.headers.update({"User-Agent": "fontgate/1.0.0"})
        return session

    def _is_fresh(self, now: float) -> bool:
        return self._families is not None and now - self._fetched_at < self.config.cache_ttl_seconds

    def families(self) -> frozenset[str]:
        """Return the lowercased Google Fonts family names."""
        with self._lock:
            now = time.monotonic()
            if self._is_fresh(now):
                return self._families

            try:
                self._families = self.fetch_families()
                self._fetched_at = now
                logger.info(f"Loaded {len(self._families)} Google Fonts families")
            except CatalogError as e:
                logger.warning(f"{e}; using {'cached' if self._families else 'empty'} family list")

            return self._families or frozenset()

    def fetch_families(self) -> frozenset[str]:
        """
        Fetch the family list from the Web Fonts Developer API.

        Raises:
            CatalogFetchError: If the request fails
            InvalidCatalogResponseError: If the response is not the expected JSON
        """
        params = {"sort": "alpha"}
        if self.config.api_key:
            params["key"] = self.config.api_key

        try:
            response = self.session.get(
                self.config.api_url, params=params, timeout=self.config.timeout_seconds
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise CatalogFetchError(self.config.api_url, str(e)) from e

        try:
            data = response.json()
            items = data.get("items") or []
            return frozenset(item["family"].lower() for item in items)
        except (ValueError, AttributeError, KeyError, TypeError) as e:
            raise InvalidCatalogResponseError(str(e)) from e

    def is_google_font(self, family_name: str | None) -> bool:
        return bool(family_name) and family_name.lower() in self.families()

    def clear_cache(self) -> None:
        with self._lock:
            self._families = None
            self._fetched_at = 0.0


def apply_google_fonts_check(
    verdict: ValidationVerdict, google_families: frozenset[str] | set[str]
) -> ValidationVerdict:
    """
    Merge a Google Fonts family match into a verdict.

    For a listed family, license warnings are dropped and, when nothing blocks
    the font, a confirmation is prepended to the warnings. ``is_valid`` and
    ``can_proceed`` are left untouched. Returns a new verdict.
    """
    family = verdict.metadata.family_name
    if not family or family.lower() not in google_families:
        return verdict

    warnings = [w for w in verdict.warnings if "license" not in w and "License" not in w]
    if not verdict.errors:
        warnings.insert(0, f'Verified: "{family}" is a Google Font (open source).')

    logger.debug(f"{family!r} found in the Google Fonts catalog")
    return verdict.model_copy(
        update={
            "warnings": warnings,
            "checks": verdict.checks.model_copy(update={"is_google_font": True}),
        }
    )
