"""
Frame renderer: OpticalParameters + ViewportSize -> RGBA pixel buffer.

The screen always spans SCREEN_WIDTH_MM physically, whatever its pixel width,
so fringe spacing per mm stays the same when the viewport is resized.
"""
import logging
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np

from double_slit.color import wavelength_to_tint
from double_slit.config import SCREEN_WIDTH_MM
from double_slit.optics import OpticalParameters, field_intensity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewportSize:
    width_px: int
    height_px: int

    def __post_init__(self):
        if self.width_px < 0 or self.height_px < 0:
            raise ValueError(f"Viewport dimensions must be non-negative, got {self.width_px}x{self.height_px}")

    @property
    def is_empty(self) -> bool:
        return self.width_px == 0 or self.height_px == 0


def pixel_axes_mm(size: ViewportSize):
    """
    Physical coordinates (mm) of pixel columns and rows, origin at the viewport centre.
    Returns (x_mm, y_mm) with shapes (width,) and (height,).
    """
    mm_per_px = SCREEN_WIDTH_MM / size.width_px
    x_mm = (np.arange(size.width_px) - size.width_px / 2.0) * mm_per_px
    y_mm = (np.arange(size.height_px) - size.height_px / 2.0) * mm_per_px
    return x_mm, y_mm


def render_frame(
        params: OpticalParameters,
        size: ViewportSize,
        out: Optional[np.ndarray] = None,
        radiometric_falloff: bool = False
) -> np.ndarray:
    """
    Render the full interference pattern.

    Args:
        params: wavelength / separation / distance of the set-up.
        size: viewport in pixels.
        out: optional (height, width, 4) uint8 buffer to reuse. Any other
             shape or dtype is ignored and a new buffer is allocated.
        radiometric_falloff: enable the inverse-square hook (off by default).

    Returns:
        np.ndarray: row-major (height, width, 4) uint8 RGBA buffer, alpha 255,
        fully overwritten. A zero-area viewport yields an empty buffer.
    """
    shape = (size.height_px, size.width_px, 4)
    if out is None or out.shape != shape or out.dtype != np.uint8:
        out = np.empty(shape, dtype=np.uint8)
    if size.is_empty:
        return out

    t0 = time.perf_counter()
    tint = np.array(wavelength_to_tint(params.wavelength_nm), dtype=np.float64)

    x_mm, y_mm = pixel_axes_mm(size)
    # (height, width) grid via broadcasting: rows are y, columns are x
    intensity = field_intensity(x_mm[None, :], y_mm[:, None], params, radiometric_falloff)

    # byte conversion rounds to nearest like a clamped 8-bit canvas buffer
    out[..., :3] = np.rint(intensity[..., None] * tint).astype(np.uint8)
    out[..., 3] = 255

    elapsed_ms = (time.perf_counter() - t0) * 1e3
    logger.debug(
        f"Rendered {size.width_px}x{size.height_px} frame (λ={params.wavelength_nm:.1f} nm, "
        f"d={params.separation_mm:.3f} mm, L={params.distance_cm:.1f} cm) in {elapsed_ms:.1f} ms"
    )
    return out


def center_row_profile(params: OpticalParameters, width_px: int, radiometric_falloff: bool = False):
    """
    Intensity along the horizontal line through the screen centre (y = 0).
    Returns x (mm) and normalised intensity, one sample per pixel column.
    """
    x_mm, _ = pixel_axes_mm(ViewportSize(width_px, 1))
    return x_mm, field_intensity(x_mm, 0.0, params, radiometric_falloff)
