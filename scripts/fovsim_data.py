import math
from dataclasses import dataclass

# --- CONFIGURATION & CONSTANTS ---
# Full-frame reference sensor (mm)
REFERENCE_WIDTH_MM = 36.0
REFERENCE_HEIGHT_MM = 24.0
REFERENCE_DIAGONAL_MM = math.hypot(REFERENCE_WIDTH_MM, REFERENCE_HEIGHT_MM)

# Phone camera base lenses (35mm equivalent, mm)
DEFAULT_LENS_CANDIDATES = (13.0, 26.0, 52.0, 77.0, 120.0)

DEFAULT_FOCAL_MM = 50.0
MIN_FOCAL_MM = 1.0
MAX_FOCAL_MM = 800.0

# Display region limits (px)
DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 800
WINDOW_WIDTH_SCALE = 0.92
WINDOW_HEIGHT_SCALE = 0.78
MAX_VIEWPORT_WIDTH = 900
MAX_VIEWPORT_HEIGHT = 600


@dataclass(frozen=True)
class SensorFormat:
    """A named sensor with its physical dimensions in millimeters."""
    id: str
    name: str
    width_mm: float
    height_mm: float


# --- SENSOR FORMAT CATALOG ---
FORMATS = (
    SensorFormat("ff", "Full Frame (36×24mm)", 36.0, 24.0),
    SensorFormat("apsc", "APS-C (1.5×, ~23.6×15.7mm)", 23.6, 15.7),
    SensorFormat("apscC", "APS-C Canon (1.6×, ~22.3×14.9mm)", 22.3, 14.9),
    SensorFormat("mft", "Micro Four Thirds (17.3×13.0mm)", 17.3, 13.0),
    SensorFormat("1in", "1-inch type (~13.2×8.8mm)", 13.2, 8.8),
)

FORMATS_BY_ID = {f.id: f for f in FORMATS}
DEFAULT_FORMAT_ID = FORMATS[0].id


def get_format(format_id):
    # Unknown ids fall back to the first catalog entry
    return FORMATS_BY_ID.get(format_id, FORMATS[0])


format_help_text = """
| Format | W x H (mm) | Diagonal (mm) | Crop |
| :--- | :---: | :---: | :---: |
"""
for f in FORMATS:
    diag = math.hypot(f.width_mm, f.height_mm)
    crop = REFERENCE_DIAGONAL_MM / diag
    format_help_text += f"| {f.name} | {f.width_mm}x{f.height_mm} | {diag:.2f} | {crop:.3f}× |\n"
