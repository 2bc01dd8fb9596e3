# app.py
"""
Double-Slit Experiment — Streamlit app
Two coherent point sources, exact path lengths, wavelength-tinted fringes.
Named set-ups can be saved, reloaded and deleted.
"""
import time

import matplotlib.pyplot as plt
import numpy as np
import streamlit as st

from double_slit import config
from double_slit.color import wavelength_to_tint
from double_slit.controller import RenderController
from double_slit.errors import ConfigurationError, ConfigurationValidationError
from double_slit.logging_config import setup_logging
from double_slit.optics import OpticalParameters, fringe_spacing_mm
from double_slit.render import ViewportSize, center_row_profile
from double_slit.storage import ConfigurationStore

# ---------------- Page config ----------------
st.set_page_config(page_title="Double-Slit Simulation", layout="wide")
st.title("Double-Slit Experiment — Interactive Simulation")
st.caption("Two coherent sources, exact path lengths, I ∝ cos²(δ/2)")


# ---------------- Shared resources ----------------
@st.cache_resource
def init_logging():
    return setup_logging(config.get_log_level(), config.get_log_file())


@st.cache_resource
def get_store(path: str) -> ConfigurationStore:
    return ConfigurationStore(path)


def new_display():
    """Controller plus the surface it commits finished frames to."""
    display = {}

    def surface(frame, params, size):
        display["frame"] = frame
        display["params"] = params
        display["size"] = size

    return RenderController(surface), display


init_logging()
store = get_store(config.get_database_path())

PARAM_DEFAULTS = {
    "wavelength_nm": config.DEFAULT_WAVELENGTH_NM,
    "separation_mm": config.DEFAULT_SEPARATION_MM,
    "distance_cm": config.DEFAULT_DISTANCE_CM,
}
for key, value in PARAM_DEFAULTS.items():
    st.session_state.setdefault(key, value)
if "controller" not in st.session_state:
    st.session_state.controller, st.session_state.display = new_display()


# ---------------- Callbacks (run before the next script pass) ----------------
def reset_parameters():
    for k, v in PARAM_DEFAULTS.items():
        st.session_state[k] = v


def load_configuration(config_id):
    try:
        saved = store.get(config_id)
    except ConfigurationError as e:
        # deleted through the API since the list was drawn
        st.session_state.flash = ("error", str(e))
        return
    loaded = saved.to_parameters()
    st.session_state.wavelength_nm = config.clamp_to_range(loaded.wavelength_nm, config.WAVELENGTH_RANGE_NM)
    st.session_state.separation_mm = config.clamp_to_range(loaded.separation_mm, config.SEPARATION_RANGE_MM)
    st.session_state.distance_cm = config.clamp_to_range(loaded.distance_cm, config.DISTANCE_RANGE_CM)
    st.session_state.flash = ("success", f"Loaded '{saved.name}'.")


def delete_configuration(config_id):
    try:
        store.delete(config_id)
        st.session_state.flash = ("success", "Configuration removed from your library.")
    except ConfigurationError as e:
        st.session_state.flash = ("error", str(e))


# ---------------- Sidebar / Controls ----------------
with st.sidebar:
    st.header("Parameters")
    wl_min, wl_max, wl_step = config.WAVELENGTH_RANGE_NM
    sep_min, sep_max, sep_step = config.SEPARATION_RANGE_MM
    dist_min, dist_max, dist_step = config.DISTANCE_RANGE_CM
    st.slider("Wavelength λ (nm)", wl_min, wl_max, step=wl_step, key="wavelength_nm",
              help="Distance between consecutive wave crests. Determines the colour of the light.")
    st.slider("Slit separation d (mm)", sep_min, sep_max, step=sep_step, key="separation_mm",
              help="Centre-to-centre distance between the two slits.")
    st.slider("Distance to screen L (cm)", dist_min, dist_max, step=dist_step, key="distance_cm",
              help="Normal distance from the slit plane to the observation screen.")
    st.button("Reset to defaults", on_click=reset_parameters)

    st.markdown("---")
    st.header("Screen")
    width_px = st.selectbox("Screen resolution (px, width)", config.VIEWPORT_WIDTHS_PX,
                            index=config.VIEWPORT_WIDTHS_PX.index(config.DEFAULT_VIEWPORT_WIDTH_PX))
    radiometric = st.checkbox("Inverse-square falloff", value=False,
                              help="Dim the pattern with 1/r². Off keeps the fringes legible.")
    intensity_scale = st.selectbox("Profile intensity scale", ["linear", "log"], index=0)

    st.markdown("---")
    st.header("Save configuration")
    with st.form("save_configuration", clear_on_submit=True):
        name = st.text_input("Experiment name", placeholder="e.g. Green laser, 1 m")
        submitted = st.form_submit_button("Save")
    if submitted:
        try:
            saved = store.create(
                name,
                st.session_state.wavelength_nm,
                st.session_state.separation_mm,
                st.session_state.distance_cm,
            )
            st.success(f"Saved '{saved.name}'.")
        except ConfigurationValidationError as e:
            st.error(e.message)

    st.header("Saved configurations")
    saved_configurations = store.list()
    if not saved_configurations:
        st.caption("No saved configurations found.")
    for saved in saved_configurations:
        col_info, col_load, col_del = st.columns([3, 1, 1])
        col_info.markdown(
            f"**{saved.name}**  \n`λ={saved.wavelength:g}nm d={saved.separation:g}mm L={saved.distance:g}cm`"
        )
        col_load.button("Load", key=f"load_{saved.id}", on_click=load_configuration, args=(saved.id,))
        col_del.button("Delete", key=f"delete_{saved.id}", on_click=delete_configuration, args=(saved.id,))

flash = st.session_state.pop("flash", None)
if flash is not None:
    kind, message = flash
    (st.success if kind == "success" else st.error)(message)

# ---------------- Derived params ----------------
params = OpticalParameters(
    wavelength_nm=float(st.session_state.wavelength_nm),
    separation_mm=float(st.session_state.separation_mm),
    distance_cm=float(st.session_state.distance_cm),
).validate()

# ---------------- Numerical safety caps ----------------
if width_px > config.MAX_VIEWPORT_WIDTH_PX:
    st.info(f"Screen resolution capped to {config.MAX_VIEWPORT_WIDTH_PX} px to avoid excessive compute.")
    width_px = config.MAX_VIEWPORT_WIDTH_PX
size = ViewportSize(int(width_px), int(width_px * config.SCREEN_ASPECT))

st.markdown(f"**Approx fringe spacing (λL/d):** `{fringe_spacing_mm(params):.3f} mm`")

# ---------------- Render 2D ----------------
controller = st.session_state.controller
display = st.session_state.display
t0 = time.time()
rendered = controller.update(params, size, radiometric_falloff=radiometric)
t1 = time.time()
if rendered:
    st.success(f"Frame rendered in {t1 - t0:.2f} s")

half_mm = config.SCREEN_WIDTH_MM / 2
st.image(display["frame"], caption=f"Screen: {-half_mm:.0f} mm … +{half_mm:.0f} mm "
                                   f"({size.width_px}×{size.height_px} px)")

# ---------------- Plot 1D ----------------
tint = wavelength_to_tint(params.wavelength_nm)
x_mm, intensity_1d = center_row_profile(params, size.width_px, radiometric_falloff=radiometric)
line_color = tuple(c / 255.0 for c in tint) if any(tint) else "k"

fig1, ax1 = plt.subplots(figsize=(9, 3.2))
if intensity_scale == "log":
    ax1.plot(x_mm, 10.0 * np.log10(intensity_1d + 1e-12), color=line_color)
    ax1.set_ylabel("Intensity (dB, normalized)")
else:
    ax1.plot(x_mm, intensity_1d, color=line_color)
    ax1.set_ylabel("Normalized intensity")
ax1.set_xlabel("Screen position x (mm)")
ax1.set_title("Interference pattern — centre row")
ax1.grid(True)
st.pyplot(fig1)
plt.close(fig1)

st.markdown(
    f"**Parameters:** wavelength = {params.wavelength_nm:.1f} nm | slit separation = {params.separation_mm:.3f} mm "
    f"| distance = {params.distance_cm:.1f} cm"
)

st.markdown("---")
st.markdown("### Simulation info")
st.write(
    "- Sources: 2 (coherent point sources at x = ±d/2).\n"
    "- Intensity I = ½(1 + cos δ) with δ = 2π(r₂ − r₁)/λ from exact distances.\n"
    f"- The screen always spans {config.SCREEN_WIDTH_MM:.0f} mm, so resizing keeps the fringe period per mm.\n"
    "- No 1/r² falloff unless enabled: the view favours fringe legibility over radiometric realism."
)
