import pytest

from neon_glide.render.surface import SurfaceSizer


def test_defaults_to_playfield_size():
    s = SurfaceSizer()
    assert s.scale() == (1.0, 1.0)
    assert s.offset() == (0.0, 0.0)


@pytest.mark.parametrize("size", [None, (0, 800), (450, 0), (-5, 10)])
def test_bad_measurement_keeps_last_size(size):
    s = SurfaceSizer()
    good = s.resize((720, 1280))
    assert s.measure(size) is None
    assert s.resize(size) is good
    assert s.scale() == (2.0, 2.0)


def test_tall_window_is_letterboxed():
    s = SurfaceSizer()
    m = s.resize((720, 2000))
    assert m.height == 1280.0
    assert m.top == 360.0
    assert s.scale() == (2.0, 2.0)
    assert s.offset() == (0.0, 360.0)


def test_short_window_squashes_vertically():
    s = SurfaceSizer()
    s.resize((720, 640))
    assert s.scale() == (2.0, 1.0)


def test_pixel_ratio_multiplies_scale():
    s = SurfaceSizer()
    m = s.resize((720, 1280), (1440, 2560))
    assert m.pixel_ratio == 2.0
    assert m.drawable_size == (1440, 2560)
    assert s.scale() == (4.0, 4.0)


def test_pointer_mapping_into_playfield():
    s = SurfaceSizer()
    s.resize((450, 800))
    assert s.to_playfield_x(0) == 0.0
    assert s.to_playfield_x(225) == 180.0
    assert s.to_playfield_x(450) == 360.0
