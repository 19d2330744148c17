"""
Pytest configuration and fixtures for font validation tests.

Test fonts are synthesized in memory with fontTools, so no font files are
checked into the repository.
"""

from io import BytesIO
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.misc.psCharStrings import T2CharString
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontgate.core.config import ValidatorConfig
from fontgate.fonts.fingerprint import SAMPLE_CHARACTERS
from fontgate.validator import FontValidator

OFL_LICENSE = "This Font Software is licensed under the SIL Open Font License, Version 1.1."


def _glyph_name(char: str) -> str:
    return f"uni{ord(char):04X}"


def _draw_sample_glyph(pen, char: str, shift: int = 0) -> None:
    """Draw a box with a curved right side; the width depends on the character."""
    x0 = 50 + shift
    x1 = x0 + (ord(char) % 7 + 3) * 50
    pen.moveTo((x0, 0))
    pen.lineTo((x1, 0))
    pen.qCurveTo((x1 + 100, 350), (x1, 700))
    pen.lineTo((x0, 700))
    pen.closePath()


def build_test_font(
    family: str | None = "My Indie Font",
    *,
    full_name: str | None = None,
    ps_name: str | None = None,
    license: str | None = None,
    license_url: str | None = None,
    copyright: str | None = None,
    fs_type: int = 0,
    include_os2: bool = True,
    characters: str = SAMPLE_CHARACTERS,
    glyph_shift: dict[str, int] | None = None,
    extra_names: dict | None = None,
) -> bytes:
    """
    Build a minimal TrueType font.

    ``full_name`` and ``ps_name`` default to values derived from ``family``;
    pass an empty string to leave them out. ``glyph_shift`` moves individual
    glyph outlines horizontally by the given number of font units.
    """
    glyph_shift = glyph_shift or {}
    glyph_order = [".notdef", "space"] + [_glyph_name(c) for c in characters]

    glyphs = {".notdef": TTGlyphPen(None).glyph(), "space": TTGlyphPen(None).glyph()}
    for char in characters:
        pen = TTGlyphPen(None)
        _draw_sample_glyph(pen, char, glyph_shift.get(char, 0))
        glyphs[_glyph_name(char)] = pen.glyph()

    cmap = {32: "space"}
    cmap.update({ord(c): _glyph_name(c) for c in characters})

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (600, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)

    names = {"styleName": "Regular"}
    if family is not None:
        names["familyName"] = family
        if full_name is None:
            full_name = f"{family} Regular"
        if ps_name is None:
            ps_name = family.replace(" ", "") + "-Regular"
    if full_name:
        names["fullName"] = full_name
    if ps_name:
        names["psName"] = ps_name
    if license is not None:
        names["licenseDescription"] = license
    if license_url is not None:
        names["licenseInfoURL"] = license_url
    if copyright is not None:
        names["copyright"] = copyright
    names.update(extra_names or {})
    fb.setupNameTable(names)

    if include_os2:
        fb.setupOS2(fsType=fs_type)
    fb.setupPost()

    buffer = BytesIO()
    fb.font.save(buffer)
    return buffer.getvalue()


def build_cff_font(
    family: str = "Broken Outline", *, characters: str = "AEM", broken: str = "A"
) -> bytes:
    """
    Build a minimal CFF font. Glyphs for ``broken`` call a local subroutine
    that does not exist, so they only fail once the outline is drawn.
    """
    glyph_order = [".notdef", "space"] + [_glyph_name(c) for c in characters]

    char_strings = {".notdef": T2CharStringPen(600, None).getCharString()}
    char_strings["space"] = T2CharStringPen(600, None).getCharString()
    for char in characters:
        if char in broken:
            char_strings[_glyph_name(char)] = T2CharString(program=[500, 5, "callsubr", "endchar"])
            continue
        pen = T2CharStringPen(600, None)
        _draw_sample_glyph(pen, char)
        char_strings[_glyph_name(char)] = pen.getCharString()

    cmap = {32: "space"}
    cmap.update({ord(c): _glyph_name(c) for c in characters})
    ps_name = family.replace(" ", "") + "-Regular"

    fb = FontBuilder(1000, isTTF=False)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupCFF(ps_name, {"FullName": family}, char_strings, {})
    fb.setupHorizontalMetrics({name: (600, 0) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family, "styleName": "Regular", "psName": ps_name})
    fb.setupOS2()
    fb.setupPost()
    # Bounding boxes would draw every glyph on save
    fb.font.recalcBBoxes = False

    buffer = BytesIO()
    fb.font.save(buffer)
    return buffer.getvalue()


@pytest.fixture(scope="session")
def font_factory():
    """Factory building synthetic font binaries."""
    return build_test_font


@pytest.fixture
def validator():
    """Validator with default configuration."""
    return FontValidator(ValidatorConfig(_env_file=None))


@pytest.fixture
def indie_font_bytes():
    """Unrestricted, non-commercial font with an OFL license."""
    return build_test_font("My Indie Font", license=OFL_LICENSE)


@pytest.fixture(scope="session")
def cff_font_factory():
    """Factory building CFF font binaries, by default with an undecodable "A"."""
    return build_cff_font


@pytest.fixture
def commercial_font_bytes():
    """Font named after a commercial family, without license metadata."""
    return build_test_font("Helvetica Neue")


@pytest.fixture
def fonts_dir(tmp_path) -> Path:
    """Directory holding a mix of clean, blocked and broken font files."""
    font_dir = tmp_path / "fonts"
    (font_dir / "nested").mkdir(parents=True)
    (font_dir / "indie.ttf").write_bytes(build_test_font("My Indie Font", license=OFL_LICENSE))
    (font_dir / "nested" / "helvetica.ttf").write_bytes(build_test_font("Helvetica Neue"))
    (font_dir / "broken.otf").write_bytes(b"definitely not a font")
    (font_dir / "readme.txt").write_text("not a font either")
    return font_dir
