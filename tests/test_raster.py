"""Tests for the raster surface and image export."""

import numpy as np
import pytest
from PIL import Image

from diagen.core.color import Color
from diagen.core.geometry import Rect
from diagen.export import render_image, save_image
from diagen.layout import fill_color
from diagen.samples import SAMPLES
from diagen.surfaces import RasterSurface, Surface

WHITE = [255, 255, 255, 255]
RED = [255, 0, 0, 255]
BLUE = [0, 0, 255, 255]
MAGENTA = [255, 0, 255, 255]


def test_raster_surface_satisfies_protocol():
    assert isinstance(RasterSurface(2, 2), Surface)


def test_rectangle_uses_y_up_coordinates():
    surface = RasterSurface(4, 4, background=Color.WHITE)
    with fill_color(surface, Color.RED):
        surface.fill_rectangle(Rect.from_xywh(0, 0, 2, 2))
    pixels = surface.to_array()

    # Bottom-left quadrant is the last two rows of the image
    assert (pixels[2:, :2] == RED).all()
    assert (pixels[:2, :] == WHITE).all()
    assert (pixels[:, 2:] == WHITE).all()


def test_default_fill_is_black():
    surface = RasterSurface(2, 2)
    surface.fill_rectangle(surface.bounds)
    assert (surface.to_array() == [0, 0, 0, 255]).all()


def test_ellipse_covers_center_not_corners():
    surface = RasterSurface(10, 10, background=Color.WHITE)
    surface.fill_ellipse(surface.bounds)
    pixels = surface.to_array()
    assert list(pixels[5, 5]) == [0, 0, 0, 255]
    for row, col in [(0, 0), (0, 9), (9, 0), (9, 9)]:
        assert list(pixels[row, col]) == WHITE


def test_degenerate_shapes_draw_nothing():
    surface = RasterSurface(8, 8, background=Color.WHITE)
    surface.fill_ellipse(Rect.from_xywh(2, 2, 0, 4))
    surface.fill_rectangle(Rect.from_xywh(2, 2, 0, 0))
    surface.fill_rectangle(Rect.from_xywh(20, 20, 5, 5))
    assert (surface.to_array() == WHITE).all()


def test_clear_fill_leaves_canvas_unchanged():
    surface = RasterSurface(4, 4, background=Color.WHITE)
    with fill_color(surface, Color.CLEAR):
        surface.fill_rectangle(surface.bounds)
    assert (surface.to_array() == WHITE).all()


def test_translucent_fill_is_blended():
    surface = RasterSurface(1, 1, background=Color.WHITE)
    with fill_color(surface, Color(0, 0, 1, 0.5)):
        surface.fill_rectangle(surface.bounds)
    assert list(surface.to_array()[0, 0]) == [128, 128, 255, 255]


def test_invalid_canvas_size():
    with pytest.raises(ValueError):
        RasterSurface(0, 10)


def test_render_sample_diagram_2():
    image = render_image(SAMPLES["sample_diagram_2"](), 200, 200, background=Color.WHITE)
    assert image.size == (200, 200)
    assert image.mode == "RGBA"
    pixels = np.array(image)

    assert list(pixels[131, 150]) == RED
    assert list(pixels[131, 25]) == BLUE
    assert list(pixels[184, 100]) == MAGENTA
    assert list(pixels[10, 25]) == WHITE


@pytest.mark.parametrize("name", list(SAMPLES))
def test_samples_render_to_file(tmp_path, name):
    output_path = tmp_path / f"{name}.png"
    result = save_image(SAMPLES[name](), output_path, 120, 80, background=Color.WHITE)

    assert result == output_path
    assert output_path.stat().st_size > 0
    loaded = Image.open(output_path)
    assert loaded.size == (120, 80)
    # Something other than the background was drawn
    assert (np.array(loaded) != WHITE).any()
