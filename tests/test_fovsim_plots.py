import matplotlib.pyplot as plt
import matplotlib.patches as patches
import pytest

from fovsim_calc import compute_optics, compute_zoom, simulate
from fovsim_data import DEFAULT_LENS_CANDIDATES, get_format
from fovsim_plots import build_readout, overlay_message, plot_fov_wedges, plot_simulated_frame


def test_overlay_message_for_zoom():
    assert overlay_message(compute_zoom(76.3, 26)) == "Using ~26mm eq lens + 2.93× digital zoom."


def test_overlay_message_when_too_wide():
    assert overlay_message(compute_zoom(20, 26)) == (
        "Target is wider than chosen lens (26mm eq). Showing widest possible."
    )


def test_build_readout_rows():
    fmt = get_format("apsc")
    df = build_readout(fmt, 50, compute_optics(fmt, 50))

    values = dict(zip(df["Metric"], df["Value"]))
    assert list(df.columns) == ["Metric", "Value"]
    assert values["Selected"] == fmt.name
    assert values["Focal"] == "50.0 mm"
    assert values["Crop factor"] == "1.526×"
    assert values["35mm equivalent"] == "76.3 mm"
    assert values["FoV Horizontal"] == "26.6°"


def test_plot_simulated_frame_sizes_figure_to_viewport():
    sim = simulate(get_format("ff"), 50, DEFAULT_LENS_CANDIDATES, 900, 600)
    fig = plot_simulated_frame(sim)
    try:
        w, h = fig.get_size_inches() * fig.dpi
        assert w == pytest.approx(900)
        assert h == pytest.approx(600)
        rects = [p for p in fig.axes[0].patches if isinstance(p, patches.Rectangle)]
        labels = [r.get_label() for r in rects]
        assert labels == ["Base Lens Frame", "Simulated View"]
        assert rects[1].get_width() == pytest.approx(900 * 26 / 50)
    finally:
        plt.close(fig)


def test_plot_simulated_frame_marks_requested_fov_when_too_wide():
    sim = simulate(get_format("ff"), 13, DEFAULT_LENS_CANDIDATES, 900, 600, base_eq_mm=26)
    fig = plot_simulated_frame(sim)
    try:
        labels = [p.get_label() for p in fig.axes[0].patches]
        assert "Requested FoV" in labels
        assert fig.axes[0].get_xlim() == pytest.approx((-450, 1350))
    finally:
        plt.close(fig)


def test_plot_fov_wedges_has_three_wedges():
    fig = plot_fov_wedges(compute_optics(get_format("mft"), 25))
    try:
        wedges = [p for p in fig.axes[0].patches if isinstance(p, patches.Wedge)]
        assert len(wedges) == 3
    finally:
        plt.close(fig)
