"""Render diagrams to image files."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from .core.color import Color
from .core.diagram import Diagram
from .layout.renderer import draw
from .surfaces.raster import RasterSurface


def _rasterize(diagram: Diagram, width: int, height: int, background: Color) -> RasterSurface:
    surface = RasterSurface(width, height, background=background)
    draw(diagram, surface, surface.bounds)
    return surface


def render_image(
    diagram: Diagram,
    width: int,
    height: int,
    background: Color = Color.CLEAR,
) -> Image.Image:
    """Draw a diagram over a whole canvas and return the image.

    Args:
        diagram: Diagram to draw
        width: Image width in pixels
        height: Image height in pixels
        background: Canvas color behind the diagram

    Returns:
        PIL Image in RGBA mode
    """
    return _rasterize(diagram, width, height, background).to_image()


def save_image(
    diagram: Diagram,
    path: str | Path,
    width: int,
    height: int,
    background: Color = Color.CLEAR,
) -> Path:
    """Draw a diagram over a whole canvas and write it to ``path``."""
    return _rasterize(diagram, width, height, background).save(path)
