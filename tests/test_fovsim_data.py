import pytest

from fovsim_calc import compute_optics
from fovsim_data import (
    DEFAULT_LENS_CANDIDATES, FORMATS, REFERENCE_DIAGONAL_MM, format_help_text, get_format
)


def test_format_ids_are_unique():
    ids = [f.id for f in FORMATS]
    assert len(ids) == len(set(ids))


def test_formats_have_positive_dimensions():
    for f in FORMATS:
        assert f.width_mm > 0
        assert f.height_mm > 0


def test_get_format_by_id():
    fmt = get_format("mft")
    assert fmt.width_mm == 17.3
    assert fmt.height_mm == 13.0


def test_get_format_unknown_falls_back_to_first():
    assert get_format("nope") is FORMATS[0]


def test_formats_are_immutable():
    with pytest.raises(AttributeError):
        FORMATS[0].width_mm = 10.0


def test_reference_diagonal():
    assert REFERENCE_DIAGONAL_MM == pytest.approx(43.2666, abs=1e-4)


@pytest.mark.parametrize("format_id,crop", [
    ("ff", 1.0), ("apsc", 1.526), ("apscC", 1.615), ("mft", 2.0), ("1in", 2.727),
])
def test_catalog_crop_factors(format_id, crop):
    assert compute_optics(get_format(format_id), 50).crop_factor == pytest.approx(crop, abs=5e-3)


def test_default_candidates_are_distinct_and_sorted():
    assert list(DEFAULT_LENS_CANDIDATES) == sorted(set(DEFAULT_LENS_CANDIDATES))


def test_help_text_lists_every_format():
    for f in FORMATS:
        assert f.name in format_help_text
