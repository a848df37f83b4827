# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (HSL ↔ sRGB ↔ Linear ↔ OKLab ↔ OKLCH)."""

import numpy as np
import pytest

from tincture.engine.colorspace import (
    srgb_to_linear,
    linear_to_srgb,
    linear_rgb_to_oklab,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    rgb_to_hsl,
    hsl_to_rgb,
    srgb_to_oklch,
    oklch_to_srgb,
    to_linear_rgb,
    convert,
    convert_like,
    delta_e_oklab,
)
from tincture.schema import ColorValue, Notation, Space


def _rgb(r, g, b, alpha=1.0):
    return ColorValue.of(Space.RGB, r, g, b, alpha=alpha)


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_roundtrip_black_and_white(self):
        srgb = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use linear segment."""
        val = 0.03
        linear = srgb_to_linear(np.array([val]))
        assert float(linear[0]) == pytest.approx(val / 12.92, abs=1e-10)

    def test_linear_segment_inverse(self):
        """Linear values below 0.0031308 encode with slope 12.92."""
        encoded = linear_to_srgb(np.array([0.002]))
        assert float(encoded[0]) == pytest.approx(0.002 * 12.92, abs=1e-12)

    def test_out_of_gamut_clipped(self):
        encoded = linear_to_srgb(np.array([-0.2, 0.5, 1.7]))
        assert encoded.min() >= 0.0
        assert encoded.max() <= 1.0

    def test_batch_roundtrip(self):
        srgb = np.random.default_rng(42).random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)


class TestOKLabRoundtrip:
    """Linear RGB ↔ OKLab conversions must roundtrip accurately."""

    def test_white_lightness_is_one(self):
        lab = linear_rgb_to_oklab(np.array([1.0, 1.0, 1.0]))
        assert lab[0] == pytest.approx(1.0, abs=1e-6)
        assert lab[1] == pytest.approx(0.0, abs=1e-6)
        assert lab[2] == pytest.approx(0.0, abs=1e-6)

    def test_black_lightness_is_zero(self):
        lab = linear_rgb_to_oklab(np.array([0.0, 0.0, 0.0]))
        assert lab[0] == pytest.approx(0.0, abs=1e-6)

    def test_batch_roundtrip(self):
        rgb = np.random.default_rng(42).random((50, 3))
        recovered = oklab_to_linear_rgb(linear_rgb_to_oklab(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-8)


class TestOKLCHRoundtrip:
    """OKLab ↔ OKLCH conversions must roundtrip accurately."""

    def test_roundtrip_chromatic(self):
        lab = np.array([0.7, 0.1, -0.05])
        recovered = oklch_to_oklab(oklab_to_oklch(lab))
        np.testing.assert_allclose(recovered, lab, atol=1e-10)

    def test_chroma_calculation(self):
        lch = oklab_to_oklch(np.array([0.5, 0.3, 0.4]))
        assert lch[1] == pytest.approx(0.5, abs=1e-10)

    def test_hue_range(self):
        """Hue must be in [0, 360)."""
        lch = oklab_to_oklch(np.array([0.5, 0.1, -1e-18]))
        assert 0.0 <= lch[2] < 360.0

    def test_achromatic_hue_zero(self):
        lch = oklab_to_oklch(np.array([0.5, 1e-9, -1e-9]))
        assert lch[2] == 0.0


class TestHSL:
    """sRGB ↔ HSL array conversions."""

    def test_primaries(self):
        srgb = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
        hsl = rgb_to_hsl(srgb)
        np.testing.assert_allclose(hsl[:, 0], [0.0, 120.0, 240.0], atol=1e-10)
        np.testing.assert_allclose(hsl[:, 1], [1.0, 1.0, 1.0], atol=1e-10)
        np.testing.assert_allclose(hsl[:, 2], [0.5, 0.5, 0.5], atol=1e-10)

    def test_gray_is_achromatic(self):
        hsl = rgb_to_hsl(np.array([0.5, 0.5, 0.5]))
        assert hsl[0] == 0.0
        assert hsl[1] == 0.0
        assert hsl[2] == pytest.approx(0.5)

    def test_hsl_to_rgb_green(self):
        rgb = hsl_to_rgb(np.array([120.0, 1.0, 0.25]))
        np.testing.assert_allclose(rgb, [0.0, 0.5, 0.0], atol=1e-12)

    def test_batch_roundtrip(self):
        srgb = np.random.default_rng(7).random((200, 3))
        recovered = hsl_to_rgb(rgb_to_hsl(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)


class TestFullChainRoundtrip:
    """sRGB → OKLCH → sRGB must roundtrip for in-gamut colors."""

    def test_red_reference_values(self):
        L, C, H = srgb_to_oklch(np.array([1.0, 0.0, 0.0]))
        assert L == pytest.approx(0.62796, abs=1e-4)
        assert C == pytest.approx(0.25768, abs=1e-4)
        assert H == pytest.approx(29.234, abs=1e-2)

    def test_roundtrip_primaries(self):
        srgb = np.eye(3)
        recovered = oklch_to_srgb(srgb_to_oklch(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-4)


class TestConvert:
    """ColorValue-level conversion through the pivot chain."""

    def test_same_space_is_identity(self):
        c = _rgb(10, 20, 30)
        assert convert(c, Space.RGB) is c

    def test_rgb_to_hsl(self):
        hsl = convert(_rgb(255, 0, 0), Space.HSL)
        assert hsl.channels == pytest.approx((0.0, 100.0, 50.0))

    def test_alpha_preserved(self):
        c = _rgb(12, 200, 99, alpha=0.3)
        for space in Space:
            assert convert(c, space).alpha == 0.3

    @pytest.mark.parametrize("space", [Space.HSL, Space.OKLAB, Space.OKLCH])
    def test_roundtrip_within_one_byte(self, space):
        rng = np.random.default_rng(3)
        for r, g, b in rng.integers(0, 256, size=(40, 3)):
            original = _rgb(r, g, b)
            back = convert(convert(original, space), Space.RGB)
            np.testing.assert_allclose(back.channels, original.channels, atol=1.0)

    def test_hsl_to_oklch_goes_through_rgb(self):
        direct = convert(ColorValue.of(Space.HSL, 0, 100, 50), Space.OKLCH)
        via_rgb = convert(_rgb(255, 0, 0), Space.OKLCH)
        np.testing.assert_allclose(direct.channels, via_rgb.channels, atol=1e-9)

    def test_oklab_oklch_direct_keeps_out_of_gamut(self):
        wide = ColorValue.of(Space.OKLCH, 0.7, 0.5, 150.0)
        lab = convert(wide, Space.OKLAB)
        back = convert(lab, Space.OKLCH)
        assert back.channels[1] == pytest.approx(0.5, abs=1e-12)
        assert back.channels[2] == pytest.approx(150.0, abs=1e-9)

    def test_out_of_gamut_clamps_into_rgb(self):
        rgb = convert(ColorValue.of(Space.OKLCH, 0.7, 0.5, 150.0), Space.RGB)
        assert all(0.0 <= v <= 255.0 for v in rgb.channels)

    def test_notation_kept_only_for_matching_space(self):
        c = ColorValue.of(Space.RGB, 1, 2, 3, notation=Notation.HEX)
        assert convert(c, Space.OKLCH).notation is None

    def test_convert_like_tags_template_notation(self):
        template = ColorValue.of(Space.OKLCH, 0.5, 0.1, 30.0, notation=Notation.OKLCH)
        out = convert_like(_rgb(0, 0, 255), template)
        assert out.space is Space.OKLCH
        assert out.notation is Notation.OKLCH

    def test_linear_rgb_of_white(self):
        np.testing.assert_allclose(to_linear_rgb(_rgb(255, 255, 255)), [1.0, 1.0, 1.0])


class TestDeltaE:
    """Perceptual color difference tests."""

    def test_identical_colors_zero(self):
        c = _rgb(51, 102, 204)
        assert delta_e_oklab(c, c) == pytest.approx(0.0, abs=1e-12)

    def test_black_white_large_distance(self):
        assert delta_e_oklab(_rgb(0, 0, 0), _rgb(255, 255, 255)) > 0.5

    def test_similar_colors_small_distance(self):
        assert delta_e_oklab(_rgb(100, 100, 100), _rgb(101, 100, 100)) < 0.02
