# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for color text parsing and format auto-detection."""

import pytest

from tincture.engine.parse import parse
from tincture.errors import ColorError, InvalidColorSyntax
from tincture.schema import Notation, Space


class TestHex:
    """Hex notation in all four lengths."""

    def test_six_digit(self):
        c = parse("#FF8000")
        assert c.space is Space.RGB
        assert c.channels == (255.0, 128.0, 0.0)
        assert c.alpha == 1.0
        assert c.notation is Notation.HEX

    def test_three_digit_expands(self):
        assert parse("#f80").channels == (255.0, 136.0, 0.0)

    def test_four_digit_alpha(self):
        c = parse("#f808")
        assert c.channels == (255.0, 136.0, 0.0)
        assert c.alpha == pytest.approx(0x88 / 255)

    def test_eight_digit_alpha(self):
        c = parse("#FF000080")
        assert c.alpha == pytest.approx(128 / 255)

    def test_case_insensitive(self):
        assert parse("#abcdef").channels == parse("#ABCDEF").channels

    @pytest.mark.parametrize("text", ["#12345", "#1234567", "#GGG", "#", "FF0000"])
    def test_malformed(self, text):
        with pytest.raises(InvalidColorSyntax):
            parse(text)


class TestRGB:
    """rgb() and rgba() in comma and space syntax."""

    @pytest.mark.parametrize("text", [
        "rgb(255, 0, 0)",
        "rgb(255,0,0)",
        "rgb(255 0 0)",
        "RGB( 255 , 0 , 0 )",
        "rgb(100%, 0%, 0%)",
    ])
    def test_opaque_forms(self, text):
        c = parse(text)
        assert c.space is Space.RGB
        assert c.channels == pytest.approx((255.0, 0.0, 0.0))
        assert c.alpha == 1.0
        assert c.notation is Notation.RGB

    @pytest.mark.parametrize("text", [
        "rgba(255, 0, 0, 0.5)",
        "rgba(255,0,0,50%)",
        "rgb(255 0 0 / 0.5)",
        "rgb(255 0 0/50%)",
    ])
    def test_alpha_forms(self, text):
        assert parse(text).alpha == pytest.approx(0.5)

    def test_channels_clamped(self):
        assert parse("rgb(300, -5, 10)").channels == (255.0, 0.0, 10.0)

    def test_alpha_clamped(self):
        assert parse("rgba(0, 0, 0, 2)").alpha == 1.0

    @pytest.mark.parametrize("text", ["rgb(1, 2)", "rgb(1 2 3 4)", "rgb(1, 2, 3", "rgb(a, b, c)"])
    def test_malformed(self, text):
        with pytest.raises(InvalidColorSyntax):
            parse(text)


class TestHSL:
    """hsl() and hsla() with hue units."""

    def test_comma_form(self):
        c = parse("hsl(120, 100%, 50%)")
        assert c.space is Space.HSL
        assert c.channels == (120.0, 100.0, 50.0)
        assert c.notation is Notation.HSL

    def test_space_form_with_deg_and_alpha(self):
        c = parse("hsl(120deg 100% 50% / 0.25)")
        assert c.channels == (120.0, 100.0, 50.0)
        assert c.alpha == 0.25

    def test_hsla_alpha(self):
        assert parse("hsla(0, 100%, 50%, .3)").alpha == pytest.approx(0.3)

    def test_turn_unit(self):
        assert parse("hsl(0.5turn, 100%, 50%)").channels[0] == pytest.approx(180.0)

    def test_hue_wraps(self):
        assert parse("hsl(-90, 50%, 50%)").channels[0] == pytest.approx(270.0)


class TestOK:
    """oklch() and oklab() notations."""

    def test_oklch_percent_lightness(self):
        c = parse("oklch(62.8% 0.2577 29.23)")
        assert c.space is Space.OKLCH
        assert c.channels == pytest.approx((0.628, 0.2577, 29.23))
        assert c.notation is Notation.OKLCH

    def test_oklch_unit_lightness_and_alpha(self):
        c = parse("oklch(0.5 0.1 200 / 50%)")
        assert c.channels == pytest.approx((0.5, 0.1, 200.0))
        assert c.alpha == pytest.approx(0.5)

    def test_oklch_chroma_not_clamped(self):
        assert parse("oklch(70% 0.5 150)").channels[1] == pytest.approx(0.5)

    def test_oklab(self):
        c = parse("oklab(0.5 0.1 -0.1)")
        assert c.space is Space.OKLAB
        assert c.channels == pytest.approx((0.5, 0.1, -0.1))
        assert c.notation is Notation.OKLAB

    def test_oklab_percentages(self):
        c = parse("oklab(50% 25% -25% / 0.8)")
        assert c.channels == pytest.approx((0.5, 0.1, -0.1))
        assert c.alpha == pytest.approx(0.8)

    def test_oklch_requires_slash_for_alpha(self):
        with pytest.raises(InvalidColorSyntax):
            parse("oklch(0.5 0.1 200 0.5)")


class TestNamed:
    """CSS keywords and transparent."""

    def test_lookup(self):
        c = parse("rebeccapurple")
        assert c.channels == (102.0, 51.0, 153.0)
        assert c.notation is Notation.HEX

    def test_case_and_whitespace_insensitive(self):
        assert parse("  Red ").channels == (255.0, 0.0, 0.0)

    def test_transparent(self):
        c = parse("transparent")
        assert c.alpha == 0.0

    @pytest.mark.parametrize("text", ["not-a-color", "", "   ", "reddish"])
    def test_unknown(self, text):
        with pytest.raises(InvalidColorSyntax):
            parse(text)


def test_non_string_rejected():
    with pytest.raises(InvalidColorSyntax):
        parse(None)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse("nope")
    assert issubclass(InvalidColorSyntax, ColorError)
