"""
Double-Slit Experiment: interference renderer and configuration store.
"""
from double_slit.color import ColorTint, intensity_falloff, wavelength_to_tint
from double_slit.optics import OpticalParameters, field_intensity, fringe_spacing_mm
from double_slit.render import SCREEN_WIDTH_MM, ViewportSize, center_row_profile, render_frame
from double_slit.controller import RenderController

__all__ = [
    "ColorTint",
    "intensity_falloff",
    "wavelength_to_tint",
    "OpticalParameters",
    "field_intensity",
    "fringe_spacing_mm",
    "SCREEN_WIDTH_MM",
    "ViewportSize",
    "center_row_profile",
    "render_frame",
    "RenderController",
]
