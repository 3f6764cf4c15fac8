import matplotlib.pyplot as plt
import matplotlib.patches as patches
import pandas as pd
from fovsim_calc import to_degrees, visible_fraction

PLOT_DPI = 120


# --- TEXT READOUTS ---
def overlay_message(decision):
    base = f"{decision.base_eq_mm:g}"
    if decision.too_wide:
        return f"Target is wider than chosen lens ({base}mm eq). Showing widest possible."
    return f"Using ~{base}mm eq lens + {decision.zoom_factor:.2f}× digital zoom."


def build_readout(fmt, focal_length_mm, optics):
    rows = [
        ("Selected", fmt.name),
        ("Focal", f"{focal_length_mm:.1f} mm"),
        ("Crop factor", f"{optics.crop_factor:.3f}×"),
        ("35mm equivalent", f"{optics.eq35_mm:.1f} mm"),
        ("FoV Horizontal", f"{to_degrees(optics.fov_horizontal_rad):.1f}°"),
        ("FoV Vertical", f"{to_degrees(optics.fov_vertical_rad):.1f}°"),
        ("FoV Diagonal", f"{to_degrees(optics.fov_diagonal_rad):.1f}°"),
    ]
    return pd.DataFrame(rows, columns=["Metric", "Value"])


# --- PLOTTING FUNCTION (SIMULATED FRAME) ---
def plot_simulated_frame(sim):
    # Pixel sizes are rounded here, never in the calculation layer
    w_px = max(1, round(sim.viewport.width))
    h_px = max(1, round(sim.viewport.height))
    fig, ax = plt.subplots(figsize=(w_px / PLOT_DPI, h_px / PLOT_DPI), dpi=PLOT_DPI)

    frame = patches.Rectangle((0, 0), w_px, h_px, linewidth=2, edgecolor='black',
                              facecolor='#222222', alpha=0.9, label='Base Lens Frame')
    ax.add_patch(frame)

    frac = visible_fraction(sim.zoom)
    crop_w = w_px * frac
    crop_h = h_px * frac
    crop = patches.Rectangle(((w_px - crop_w) / 2, (h_px - crop_h) / 2), crop_w, crop_h,
                             linewidth=2, edgecolor='skyblue', facecolor='skyblue', alpha=0.25,
                             label='Simulated View')
    ax.add_patch(crop)

    x_limits = (0, w_px)
    y_limits = (0, h_px)
    if sim.zoom.too_wide:
        # What the target would need beyond the base lens frame
        scale = sim.zoom.base_eq_mm / sim.optics.eq35_mm
        want_w = w_px * scale
        want_h = h_px * scale
        want = patches.Rectangle(((w_px - want_w) / 2, (h_px - want_h) / 2), want_w, want_h,
                                 linewidth=1.5, edgecolor='red', linestyle='--', facecolor='none',
                                 label='Requested FoV')
        ax.add_patch(want)
        x_limits = ((w_px - want_w) / 2, (w_px + want_w) / 2)
        y_limits = ((h_px - want_h) / 2, (h_px + want_h) / 2)

    ax.text(w_px / 2, h_px * 0.06, overlay_message(sim.zoom), ha='center', va='bottom',
            color='white', fontsize=8, zorder=20)

    ax.set_xlim(x_limits)
    ax.set_ylim(y_limits)
    ax.set_aspect('equal', adjustable='box')
    ax.set_xticks([])
    ax.set_yticks([])
    ax.legend(loc='upper right', fontsize='small', framealpha=0.9)
    return fig


# --- PLOTTING FUNCTION (FOV WEDGES) ---
def plot_fov_wedges(optics, radius=1.0):
    fig, ax = plt.subplots(figsize=(5, 5), dpi=PLOT_DPI)

    wedges = [
        ("Diagonal", optics.fov_diagonal_rad, 'orange'),
        ("Horizontal", optics.fov_horizontal_rad, 'blue'),
        ("Vertical", optics.fov_vertical_rad, 'green'),
    ]
    for label, rad, color in wedges:
        half = to_degrees(rad) / 2
        ax.add_patch(patches.Wedge((0, 0), radius, -half, half, facecolor=color, edgecolor=color,
                                   alpha=0.2, label=f"{label} {to_degrees(rad):.1f}°"))

    ax.plot(0, 0, 'kx', markersize=10, markeredgewidth=2)
    ax.text(0, -0.05 * radius, "Lens", ha='center', va='top', fontsize=8)

    ax.set_title("Field of View")
    ax.set_xlim((-1.1 * radius, 1.1 * radius))
    ax.set_ylim((-1.1 * radius, 1.1 * radius))
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, linestyle=':', alpha=0.6)
    ax.legend(loc='lower left', fontsize='small', framealpha=0.9)
    return fig
