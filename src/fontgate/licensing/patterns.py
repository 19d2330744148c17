"""
License & Copyright Classifier
==============================

Ordered pattern tables for license text and copyright notices. Matching is
first-match-wins, so every table lists specific rules before general ones
(``CC0`` before ``Creative Commons``, ``LGPL`` and ``AGPL`` before ``GPL``).
"""

import re
from typing import NamedTuple


class PatternRule(NamedTuple):
    """A case-insensitive pattern and the label reported when it matches."""

    pattern: re.Pattern
    label: str


def _rule(pattern: str, label: str) -> PatternRule:
    return PatternRule(re.compile(pattern, re.IGNORECASE), label)


LICENSE_PATTERNS: tuple[PatternRule, ...] = (
    _rule(r"SIL Open Font Licen[sc]e", "OFL"),
    _rule(r"\bOFL\b", "OFL"),
    _rule(r"Apache License", "Apache-2.0"),
    _rule(r"\bApache[- ]2(\.0)?\b", "Apache-2.0"),
    _rule(r"\bMIT License\b", "MIT"),
    _rule(r"\bBSD License\b", "BSD"),
    _rule(r"\bBSD[- ][0-9]-Clause\b", "BSD"),
    _rule(r"\bCC0\b", "CC0"),
    _rule(r"Creative Commons Zero", "CC0"),
    _rule(r"Creative Commons", "CC"),
    _rule(r"Public Domain", "Public Domain"),
    _rule(r"GNU Lesser General Public", "LGPL"),
    _rule(r"\bLGPL", "LGPL"),
    _rule(r"GNU Affero General Public", "AGPL"),
    _rule(r"\bAGPL", "AGPL"),
    _rule(r"GNU General Public", "GPL"),
    _rule(r"\bGPL", "GPL"),
    _rule(r"Ubuntu Font Licen[sc]e", "UFL"),
    _rule(r"Bitstream Vera", "Bitstream Vera"),
)

COMMERCIAL_INDICATORS: tuple[PatternRule, ...] = (
    _rule(r"Adobe Systems", "Adobe"),
    _rule(r"Monotype", "Monotype"),
    _rule(r"Linotype", "Linotype"),
    _rule(r"Hoefler", "Hoefler & Co"),
    _rule(r"Tobias Frere-Jones", "Frere-Jones Type"),
    _rule(r"Font Bureau", "Font Bureau"),
    _rule(r"House Industries", "House Industries"),
    _rule(r"Commercial Type", "Commercial Type"),
    _rule(r"Klim Type", "Klim Type Foundry"),
    _rule(r"Dalton Maag", "Dalton Maag"),
    _rule(r"All rights reserved", "All rights reserved"),
)


def first_match(text: str | None, rules: tuple[PatternRule, ...]) -> PatternRule | None:
    """Return the first rule whose pattern occurs in ``text``; absent text never matches."""
    if not text:
        return None
    for rule in rules:
        if rule.pattern.search(text):
            return rule
    return None


def classify_license(license_text: str | None) -> str | None:
    """Label of the open-source license named in ``license_text``, if any."""
    rule = first_match(license_text, LICENSE_PATTERNS)
    return rule.label if rule else None


def is_open_source_license(license_text: str | None) -> bool:
    return classify_license(license_text) is not None


def find_commercial_indicator(copyright_text: str | None) -> str | None:
    """Label of the first commercial ownership indicator in a copyright notice."""
    rule = first_match(copyright_text, COMMERCIAL_INDICATORS)
    return rule.label if rule else None
