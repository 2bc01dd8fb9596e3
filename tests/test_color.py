import math

import numpy as np
import pytest

from double_slit.color import ColorTint, intensity_falloff, spectral_weights, wavelength_to_tint


@pytest.mark.parametrize("wavelength", [-5.0, 0.0, 250.0, 379.99, 780.01, 1000.0, math.nan, math.inf])
def test_outside_visible_band_is_black(wavelength):
    assert wavelength_to_tint(wavelength) == ColorTint(0, 0, 0)
    assert intensity_falloff(wavelength) == 0.0


def test_full_intensity_in_middle_of_spectrum():
    for wavelength in np.linspace(420.0, 700.999, 500):
        assert intensity_falloff(float(wavelength)) == 1.0


def test_falloff_ramps_at_edges():
    assert intensity_falloff(380.0) == pytest.approx(0.3)
    assert intensity_falloff(400.0) == pytest.approx(0.65)
    assert intensity_falloff(780.0) == pytest.approx(0.3)
    assert 0.3 < intensity_falloff(740.0) < 1.0


def test_channels_are_bytes():
    for wavelength in np.linspace(300.0, 800.0, 1001):
        tint = wavelength_to_tint(float(wavelength))
        for channel in tint:
            assert isinstance(channel, int)
            assert 0 <= channel <= 255


@pytest.mark.parametrize("wavelength, expected", [
    (440.0, (0, 0, 255)),      # blue
    (490.0, (0, 255, 255)),    # cyan
    (510.0, (0, 255, 0)),      # green
    (580.0, (255, 255, 0)),    # yellow
    (645.0, (255, 0, 0)),      # red
    (500.0, (0, 255, 128)),    # between cyan and green
])
def test_band_endpoints(wavelength, expected):
    assert tuple(wavelength_to_tint(wavelength)) == expected


def test_deep_red_edge_is_attenuated():
    tint = wavelength_to_tint(780.0)
    assert tint.g == 0 and tint.b == 0
    # ~30% of full red
    assert 76 <= tint.r <= 77


def test_violet_edge_mixes_red_and_blue():
    r, g, b = spectral_weights(380.0)
    assert (r, g, b) == (1.0, 0.0, 1.0)
    tint = wavelength_to_tint(380.0)
    assert tint.r == tint.b
    assert tint.g == 0
