"""
Two-source coherent interference.

Exact path lengths from both slits are used (no small-angle approximation).
Working length unit is the millimetre.
"""
import math
from dataclasses import dataclass

import numpy as np

from double_slit.errors import InvalidParametersError

NM_TO_MM = 1e-6
CM_TO_MM = 10.0


@dataclass(frozen=True)
class OpticalParameters:
    """Physical set-up: wavelength (nm), slit separation (mm), slit-screen distance (cm)."""
    wavelength_nm: float
    separation_mm: float
    distance_cm: float

    @property
    def wavelength_mm(self) -> float:
        return self.wavelength_nm * NM_TO_MM

    @property
    def distance_mm(self) -> float:
        return self.distance_cm * CM_TO_MM

    def validate(self) -> "OpticalParameters":
        """Raise InvalidParametersError unless all three values are finite and positive."""
        for name in ("wavelength_nm", "separation_mm", "distance_cm"):
            value = getattr(self, name)
            if not (math.isfinite(value) and value > 0):
                raise InvalidParametersError(f"{name} must be a finite positive number, got {value!r}")
        return self


def field_intensity(x_mm, y_mm, params: OpticalParameters, radiometric_falloff: bool = False):
    """
    Normalised intensity in [0, 1] at screen point(s) (x, y), in mm.

    Sources sit at (-d/2, 0, 0) and (d/2, 0, 0); the screen is the plane z = L.
    I = 0.5 * (1 + cos(k * (r2 - r1))), so I = 1 wherever r1 == r2.

    Accepts scalars or broadcastable numpy arrays; returns the same shape.
    With radiometric_falloff the result is additionally scaled by
    min(1, 10000 / r1^2). It is off by default to keep the fringes legible.
    """
    x = np.asarray(x_mm, dtype=np.float64)
    y = np.asarray(y_mm, dtype=np.float64)

    L = params.distance_mm
    d_half = params.separation_mm / 2.0
    k = 2.0 * np.pi / params.wavelength_mm

    # squared terms shared by both paths
    rest = y * y + L * L
    r1 = np.sqrt((x + d_half) ** 2 + rest)
    r2 = np.sqrt((x - d_half) ** 2 + rest)

    intensity = 0.5 * (1.0 + np.cos(k * (r2 - r1)))
    if radiometric_falloff:
        intensity = intensity * np.minimum(1.0, 10000.0 / (r1 * r1))

    if intensity.ndim == 0:
        return float(intensity)
    return intensity


def fringe_spacing_mm(params: OpticalParameters) -> float:
    """Small-angle fringe period λL/d, in mm."""
    return params.wavelength_mm * params.distance_mm / params.separation_mm
