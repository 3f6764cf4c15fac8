import math
from dataclasses import dataclass
from typing import Iterable, Optional

from fovsim_data import (
    REFERENCE_DIAGONAL_MM, WINDOW_WIDTH_SCALE, WINDOW_HEIGHT_SCALE,
    MAX_VIEWPORT_WIDTH, MAX_VIEWPORT_HEIGHT, SensorFormat
)


class InvalidInput(ValueError):
    """Raised when an argument violates a precondition (non-positive length, empty lens set)."""


@dataclass(frozen=True)
class OpticsResult:
    crop_factor: float
    eq35_mm: float
    fov_horizontal_rad: float
    fov_vertical_rad: float
    fov_diagonal_rad: float
    aspect_ratio: float


@dataclass(frozen=True)
class ZoomDecision:
    base_eq_mm: float
    zoom_factor: float
    too_wide: bool


@dataclass(frozen=True)
class ViewportSize:
    width: float
    height: float


@dataclass(frozen=True)
class Simulation:
    optics: OpticsResult
    zoom: ZoomDecision
    viewport: ViewportSize


def _require_positive(name, value):
    # NaN and inf fail here too
    if not (isinstance(value, (int, float)) and math.isfinite(value) and value > 0):
        raise InvalidInput(f"{name} must be a positive finite number, got {value!r}")
    return float(value)


# --- CALCULATION LOGIC ---
def compute_optics(fmt: SensorFormat, focal_length_mm: float) -> OpticsResult:
    """Crop factor, 35mm-equivalent focal length and FoV angles (radians) of a format."""
    w = _require_positive("width_mm", fmt.width_mm)
    h = _require_positive("height_mm", fmt.height_mm)
    focal = _require_positive("focal_length_mm", focal_length_mm)

    diag = math.hypot(w, h)
    crop = REFERENCE_DIAGONAL_MM / diag
    eq35 = focal * crop

    fov_h = 2 * math.atan(w / (2 * focal))
    fov_v = 2 * math.atan(h / (2 * focal))
    fov_d = 2 * math.atan(diag / (2 * focal))

    return OpticsResult(
        crop_factor=crop, eq35_mm=eq35,
        fov_horizontal_rad=fov_h, fov_vertical_rad=fov_v, fov_diagonal_rad=fov_d,
        aspect_ratio=w / h
    )


def choose_best_base(target_eq35: float, candidates: Iterable[float]) -> float:
    """Picks the largest candidate <= target, or the smallest one if none qualifies.

    The fallback deliberately returns a lens wider than the target; the zoom
    step then reports it as too wide instead of failing.
    """
    target = _require_positive("target_eq35", target_eq35)
    ordered = sorted(_require_positive("candidate", c) for c in candidates)
    if not ordered:
        raise InvalidInput("candidates must not be empty")

    best = ordered[0]
    for c in ordered:
        if c <= target:
            best = c
    return best


def compute_zoom(target_eq35: float, base_eq35: float) -> ZoomDecision:
    target = _require_positive("target_eq35", target_eq35)
    base = _require_positive("base_eq35", base_eq35)
    # Zoom in only: scaling the feed cannot widen it past the base lens
    return ZoomDecision(
        base_eq_mm=base,
        zoom_factor=max(1.0, target / base),
        too_wide=target < base
    )


def fit_viewport(aspect_ratio: float, max_width: float, max_height: float) -> ViewportSize:
    """Largest rectangle of the given aspect that fits inside the bounds."""
    aspect = _require_positive("aspect_ratio", aspect_ratio)
    max_w = _require_positive("max_width", max_width)
    max_h = _require_positive("max_height", max_height)

    w = max_w
    h = w / aspect
    if h > max_h:
        h = max_h
        w = h * aspect
    return ViewportSize(width=w, height=h)


# --- BOUNDARY HELPERS ---
def to_degrees(rad):
    return rad * (180 / math.pi)


def viewport_bounds(window_width, window_height):
    w = _require_positive("window_width", window_width)
    h = _require_positive("window_height", window_height)
    return (min(w * WINDOW_WIDTH_SCALE, MAX_VIEWPORT_WIDTH),
            min(h * WINDOW_HEIGHT_SCALE, MAX_VIEWPORT_HEIGHT))


def visible_fraction(zoom: ZoomDecision) -> float:
    """Share of the base frame (per axis) left visible by a centered digital zoom."""
    return 1.0 / zoom.zoom_factor


def simulate(fmt: SensorFormat, focal_length_mm: float, candidates: Iterable[float],
             max_width: float, max_height: float,
             base_eq_mm: Optional[float] = None) -> Simulation:
    """Runs the full recompute pass for one set of inputs.

    With ``base_eq_mm`` set, that lens is used as-is instead of picking the
    best one from ``candidates``.
    """
    optics = compute_optics(fmt, focal_length_mm)
    if base_eq_mm is None:
        base = choose_best_base(optics.eq35_mm, candidates)
    else:
        base = base_eq_mm
    zoom = compute_zoom(optics.eq35_mm, base)
    viewport = fit_viewport(optics.aspect_ratio, max_width, max_height)
    return Simulation(optics=optics, zoom=zoom, viewport=viewport)
