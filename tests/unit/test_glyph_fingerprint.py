"""Tests for the glyph outline fingerprint."""

import pytest

from fontgate.fonts.fingerprint import (
    SAMPLE_CHARACTERS,
    OutlineCommandPen,
    generate_glyph_fingerprint,
    glyph_outline_commands,
    quantize,
    rolling_hash,
    serialize_command,
)
from fontgate.fonts.parser import load_font


class TestQuantize:
    """Test coordinate quantization."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, 0),
            (4, 0),
            (5, 1),
            (14, 1),
            (15, 2),
            (104, 10),
            (-4, 0),
            (-5, 0),
            (-15, -1),
            (-16, -2),
        ],
    )
    def test_rounds_half_up(self, value, expected):
        assert quantize(value) == expected

    def test_float_coordinates(self):
        """CFF outlines may carry fractional coordinates."""
        assert quantize(104.9) == 10
        assert quantize(105.0) == 11


class TestSerializeCommand:
    """Test command serialization."""

    def test_move_command(self):
        assert serialize_command({"type": "M", "x": 104, "y": -5}) == '{"type":"M","x":10,"y":0}'

    def test_curve_command_keeps_key_order(self):
        command = {"type": "C", "x1": 10, "y1": 20, "x2": 30, "y2": 40, "x": 50, "y": 60}

        assert serialize_command(command) == '{"type":"C","x1":1,"y1":2,"x2":3,"y2":4,"x":5,"y":6}'

    def test_close_command(self):
        assert serialize_command({"type": "Z"}) == '{"type":"Z"}'


class TestRollingHash:
    """Test the 32-bit rolling hash."""

    def test_empty_string(self):
        assert rolling_hash("") == 0

    def test_known_values(self):
        assert rolling_hash("a") == 97
        assert rolling_hash("ab") == 97 * 31 + 98

    def test_wraps_to_32_bits(self):
        value = rolling_hash("x" * 1000)

        assert 0 <= value < 2**32


class TestOutlineCommandPen:
    """Test outline recording."""

    def test_records_quadratic_outline(self, font_factory):
        """A TrueType glyph yields move, line, quadratic and close commands."""
        font = load_font(font_factory(characters="A"))

        commands = glyph_outline_commands(font, "A")

        types = [command["type"] for command in commands]
        assert types[0] == "M"
        assert types[-1] == "Z"
        assert types.count("Q") == 1
        assert set(types) == {"M", "L", "Q", "Z"}
        assert commands[0] == {"type": "M", "x": 50, "y": 0}

    def test_splits_implied_on_curve_points(self):
        """Consecutive off-curve points are split into single quadratic segments."""
        pen = OutlineCommandPen()
        pen.moveTo((0, 0))
        pen.qCurveTo((0, 100), (100, 100), (100, 0))
        pen.closePath()

        types = [command["type"] for command in pen.commands]
        assert types == ["M", "Q", "Q", "Z"]
        assert pen.commands[1]["x"] == 50
        assert pen.commands[1]["y"] == 100

    def test_open_contour_has_no_close(self):
        pen = OutlineCommandPen()
        pen.moveTo((0, 0))
        pen.lineTo((10, 10))
        pen.endPath()

        assert [command["type"] for command in pen.commands] == ["M", "L"]

    def test_unmapped_character(self, font_factory):
        font = load_font(font_factory(characters="A"))

        assert glyph_outline_commands(font, "Z") is None


class TestGenerateGlyphFingerprint:
    """Test fingerprint generation."""

    def test_format(self, font_factory):
        fingerprint = generate_glyph_fingerprint(load_font(font_factory()))

        assert len(fingerprint) == 8
        assert fingerprint == fingerprint.lower()
        int(fingerprint, 16)

    def test_sample_string(self):
        """Fifteen distinctive letters and figures are sampled."""
        assert SAMPLE_CHARACTERS == "AEMRSaegmrs0123"
        assert len(SAMPLE_CHARACTERS) == 15

    def test_deterministic(self, font_factory):
        data = font_factory()

        assert generate_glyph_fingerprint(load_font(data)) == generate_glyph_fingerprint(
            load_font(data)
        )

    def test_stable_under_renaming(self, font_factory):
        """Metadata changes do not affect the fingerprint."""
        original = font_factory("My Indie Font", license="SIL Open Font License")
        renamed = font_factory(
            "Totally Different",
            copyright="Copyright 2024 Someone Else. All rights reserved.",
            extra_names={"designer": "Someone Else", "manufacturer": "Other Foundry"},
        )

        assert generate_glyph_fingerprint(load_font(original)) == generate_glyph_fingerprint(
            load_font(renamed)
        )

    def test_sensitive_to_outline_change(self, font_factory):
        """Moving one sampled glyph by more than the quantization step changes the fingerprint."""
        original = font_factory()
        redrawn = font_factory(glyph_shift={"R": 40})

        assert generate_glyph_fingerprint(load_font(original)) != generate_glyph_fingerprint(
            load_font(redrawn)
        )

    def test_tolerates_small_precision_drift(self, font_factory):
        """A one-unit shift stays inside the same quantization bucket."""
        original = font_factory()
        drifted = font_factory(glyph_shift={char: 1 for char in SAMPLE_CHARACTERS})

        assert generate_glyph_fingerprint(load_font(original)) == generate_glyph_fingerprint(
            load_font(drifted)
        )

    def test_ignores_unsampled_glyphs(self, font_factory):
        """Glyphs outside the sample string do not contribute."""
        base = font_factory(characters=SAMPLE_CHARACTERS)
        extended = font_factory(characters=SAMPLE_CHARACTERS + "xyz")

        assert generate_glyph_fingerprint(load_font(base)) == generate_glyph_fingerprint(
            load_font(extended)
        )

    def test_missing_sample_glyphs_are_skipped(self, font_factory):
        """A font with only some sample characters still fingerprints."""
        partial = font_factory(characters="AE")
        full = font_factory()

        assert generate_glyph_fingerprint(load_font(partial)) != generate_glyph_fingerprint(
            load_font(full)
        )

    def test_no_sample_glyphs(self, font_factory):
        """No sampled glyphs hashes the empty string."""
        font = load_font(font_factory(characters="xyz"))

        assert generate_glyph_fingerprint(font) == "00000000"
