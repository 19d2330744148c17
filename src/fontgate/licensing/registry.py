"""
Commercial Font Registry
========================

Family names of commercial and OS-bundled fonts that may never be inscribed,
and the name matcher that compares a font's identity against them.
"""

import logging
from collections.abc import Collection

from fontgate.core.models import ExtractedMetadata

logger = logging.getLogger(__name__)

# Registry entries shorter than this only match exactly
MIN_PARTIAL_MATCH_LENGTH = 4

COMMERCIAL_FONT_NAMES: frozenset[str] = frozenset(
    {
        # Adobe Fonts (subscription)
        "adobe garamond",
        "adobe garamond pro",
        "adobe caslon",
        "adobe caslon pro",
        "myriad",
        "myriad pro",
        "minion",
        "minion pro",
        "trajan",
        "trajan pro",
        "adobe jenson",
        "kepler",
        "kepler std",
        "chaparral",
        "chaparral pro",
        "cronos",
        "cronos pro",
        "hypatia sans",
        "kozuka gothic",
        "kozuka mincho",
        # Monotype / Linotype
        "helvetica",
        "helvetica neue",
        "neue helvetica",
        "helvetica now",
        "frutiger",
        "frutiger next",
        "univers",
        "univers next",
        "avenir",
        "avenir next",
        "avenir lt std",
        "gill sans",
        "gill sans mt",
        "futura",
        "futura pt",
        "futura std",
        "rockwell",
        "century gothic",
        "century schoolbook",
        "optima",
        "palatino",
        "palatino linotype",
        "din",
        "din pro",
        "din next",
        "ff din",
        "trade gothic",
        "trade gothic next",
        "franklin gothic",
        "itc franklin gothic",
        "neue haas grotesk",
        "akzidenz grotesk",
        "akzidenz-grotesk",
        "bembo",
        "perpetua",
        "plantin",
        "clarendon",
        "linotype didot",
        # Hoefler & Co
        "gotham",
        "gotham narrow",
        "gotham rounded",
        "sentinel",
        "mercury",
        "chronicle",
        "chronicle display",
        "knockout",
        "archer",
        "tungsten",
        "ideal sans",
        "whitney",
        "hoefler text",
        # Other commercial families
        "proxima nova",
        "proxima nova soft",
        "brandon grotesque",
        "brandon text",
        "museo",
        "museo sans",
        "museo slab",
        "graphik",
        "circular",
        "circular std",
        "apercu",
        "gt walsheim",
        "gt america",
        "brown",
        "eurostile",
        "bank gothic",
        "itc avant garde gothic",
        "avant garde",
        "bodoni",
        "itc bodoni",
        "baskerville",
        "garamond",
        "itc garamond",
        "garamond premier pro",
        "sabon",
        "sabon next",
        "scala",
        "scala sans",
        "meta",
        "ff meta",
        "interstate",
        "founders grotesk",
        "lyon text",
        "publico",
        "tiempos",
        "tiempos text",
        "akkurat",
        "atlas grotesk",
        "neue haas unica",
        "neue montreal",
        "benton sans",
        "acumin",
        "acumin pro",
        "news gothic",
        "bell gothic",
        "copperplate gothic",
        "zapfino",
        "mrs eaves",
        "filosofia",
        "officina sans",
        # System fonts that may not be redistributed
        "san francisco",
        "sf pro",
        "sf pro display",
        "sf pro text",
        "sf mono",
        "new york",
        "segoe ui",
        "segoe",
        "segoe print",
        "calibri",
        "cambria",
        "candara",
        "constantia",
        "corbel",
        "consolas",
        "aptos",
        "lucida grande",
        "lucida sans",
        "lucida console",
        "tahoma",
        "verdana",
        "arial",
        "times new roman",
        "courier new",
        "georgia",
        "impact",
        "comic sans",
        "comic sans ms",
        "trebuchet",
        "trebuchet ms",
    }
)


def normalize_name(name: str | None) -> str:
    """Lowercase and trim a font name; ``None`` becomes an empty string."""
    return (name or "").strip().lower()


def matches_commercial_name(
    name: str | None, registry: Collection[str] = COMMERCIAL_FONT_NAMES
) -> bool:
    """
    Check one font name against the registry.

    A name matches when it equals an entry, or when it contains an entry (or is
    contained in one) and that entry is at least ``MIN_PARTIAL_MATCH_LENGTH``
    characters long. Empty names never match.
    """
    normalized = normalize_name(name)
    if not normalized:
        return False

    if normalized in registry:
        return True

    for commercial in registry:
        if len(commercial) < MIN_PARTIAL_MATCH_LENGTH:
            continue
        if commercial in normalized or normalized in commercial:
            logger.debug(f"Name {normalized!r} overlaps commercial family {commercial!r}")
            return True

    return False


def is_known_commercial_font(
    metadata: ExtractedMetadata, registry: Collection[str] = COMMERCIAL_FONT_NAMES
) -> bool:
    """Check the family, full and PostScript names; stops at the first hit."""
    return any(matches_commercial_name(name, registry) for name in metadata.identity_names)
