import logging
import streamlit as st
from fovsim_data import (
    FORMATS, DEFAULT_FORMAT_ID, DEFAULT_LENS_CANDIDATES, DEFAULT_FOCAL_MM,
    MIN_FOCAL_MM, MAX_FOCAL_MM, DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT,
    get_format, format_help_text
)
from fovsim_calc import InvalidInput, simulate, viewport_bounds
from fovsim_plots import build_readout, overlay_message, plot_simulated_frame, plot_fov_wedges

logger = logging.getLogger(__name__)

# --- CONFIGURATION & CONSTANTS ---
st.set_page_config(page_title="FoV Simulator", layout="wide")

# --- STATE ---
if 'format_id' not in st.session_state: st.session_state.format_id = DEFAULT_FORMAT_ID
if 'focal' not in st.session_state: st.session_state.focal = DEFAULT_FOCAL_MM
if 'window_w' not in st.session_state: st.session_state.window_w = DEFAULT_WINDOW_WIDTH
if 'window_h' not in st.session_state: st.session_state.window_h = DEFAULT_WINDOW_HEIGHT

# --- UI SETUP ---
st.title("📷 FoV Simulator")

with st.sidebar.expander("❓ How to Use this Simulator"):
    st.markdown("""
    * **Sensor Format:** The camera whose field of view you want to reproduce.
    * **Focal Length:** The real focal length mounted on that camera.
    * **Base Lens:** *Auto* picks the widest phone lens that still needs no zoom-out.
      *Fixed* simulates from the lens you select.
    * **Display Size:** Window size used to fit the preview.

    The preview shows the base lens frame and the centered region left after digital zoom.
    Digital zoom can only magnify, so targets wider than the base lens are shown at the base lens FoV.
    """)

st.sidebar.header("Camera")
format_ids = [f.id for f in FORMATS]
st.sidebar.selectbox("Sensor Format", format_ids, format_func=lambda i: get_format(i).name,
                     help=format_help_text, key="format_id")
fmt = get_format(st.session_state.format_id)

st.sidebar.number_input("Focal Length (mm)", min_value=MIN_FOCAL_MM, max_value=MAX_FOCAL_MM,
                        step=1.0, key="focal")

st.sidebar.divider()
st.sidebar.header("Base Lens")
lens_mode = st.sidebar.radio("Mode", ["Auto", "Fixed"], horizontal=True,
                             help="Auto picks the best base lens from all candidates.")
selected_base = None
if lens_mode == "Fixed":
    selected_base = st.sidebar.selectbox("Base Lens (mm eq)", list(DEFAULT_LENS_CANDIDATES), index=1)

st.sidebar.divider()
st.sidebar.header("Display Size")
st.sidebar.number_input("Window Width (px)", min_value=1, step=10, key="window_w")
st.sidebar.number_input("Window Height (px)", min_value=1, step=10, key="window_h")

# --- CALCULATIONS ---
try:
    max_w, max_h = viewport_bounds(st.session_state.window_w, st.session_state.window_h)
    sim = simulate(fmt, st.session_state.focal, DEFAULT_LENS_CANDIDATES, max_w, max_h,
                   base_eq_mm=selected_base)
except InvalidInput as e:
    logger.warning("Rejected input: %s", e)
    st.error(f"❌ {e}")
    st.stop()

logger.debug("Recomputed %s @ %.1fmm: base=%smm zoom=%.3f too_wide=%s",
             fmt.id, st.session_state.focal, sim.zoom.base_eq_mm,
             sim.zoom.zoom_factor, sim.zoom.too_wide)

# --- RESULTS ---
msg = overlay_message(sim.zoom)
if sim.zoom.too_wide:
    st.warning(f"⚠️ {msg}")
else:
    st.success(msg)

c1, c2 = st.columns([0.6, 0.4])
with c1:
    st.pyplot(plot_simulated_frame(sim))
with c2:
    df = build_readout(fmt, st.session_state.focal, sim.optics)
    st.dataframe(df, width="stretch", hide_index=True)
    st.pyplot(plot_fov_wedges(sim.optics))
