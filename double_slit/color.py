"""
Wavelength -> display colour.

Piecewise-linear rainbow over the visible band (380-780 nm) with an
intensity falloff towards both ends. Everything outside the band is black.
"""
import math
from typing import NamedTuple


class ColorTint(NamedTuple):
    r: int
    g: int
    b: int


# (start_nm, end_nm, rgb at start, rgb at end); the last band includes 780 nm
_BANDS = (
    (380.0, 440.0, (1.0, 0.0, 1.0), (0.0, 0.0, 1.0)),  # violet -> blue
    (440.0, 490.0, (0.0, 0.0, 1.0), (0.0, 1.0, 1.0)),  # blue -> cyan
    (490.0, 510.0, (0.0, 1.0, 1.0), (0.0, 1.0, 0.0)),  # cyan -> green
    (510.0, 580.0, (0.0, 1.0, 0.0), (1.0, 1.0, 0.0)),  # green -> yellow
    (580.0, 645.0, (1.0, 1.0, 0.0), (1.0, 0.0, 0.0)),  # yellow -> red
    (645.0, 780.0, (1.0, 0.0, 0.0), (1.0, 0.0, 0.0)),  # red
)


def spectral_weights(wavelength_nm: float):
    """Normalised (r, g, b) weights in [0, 1], before the edge falloff."""
    for i, (lo, hi, start, end) in enumerate(_BANDS):
        last = i == len(_BANDS) - 1
        if lo <= wavelength_nm < hi or (last and wavelength_nm == hi):
            t = (wavelength_nm - lo) / (hi - lo)
            return tuple(a + (b - a) * t for a, b in zip(start, end))
    return 0.0, 0.0, 0.0


def intensity_falloff(wavelength_nm: float) -> float:
    """Brightness multiplier: dims the violet and deep-red ends of the spectrum."""
    if 380.0 <= wavelength_nm < 420.0:
        return 0.3 + 0.7 * (wavelength_nm - 380.0) / (420.0 - 380.0)
    if 420.0 <= wavelength_nm < 701.0:
        return 1.0
    if 701.0 <= wavelength_nm <= 780.0:
        return 0.3 + 0.7 * (780.0 - wavelength_nm) / (780.0 - 700.0)
    return 0.0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def wavelength_to_tint(wavelength_nm: float) -> ColorTint:
    """
    Map a wavelength (nm) to an 8-bit RGB tint.

    Depends on the wavelength only, so the renderer computes it once per frame.
    Non-finite input falls through every band and yields black.
    """
    weights = spectral_weights(wavelength_nm)
    factor = intensity_falloff(wavelength_nm)
    r, g, b = (min(255, max(0, _round_half_up(w * factor * 255))) for w in weights)
    return ColorTint(r, g, b)
