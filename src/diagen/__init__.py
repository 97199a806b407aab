"""Diagen - declarative diagram composition."""

from .core import (
    Color,
    Diagram,
    Point,
    Rect,
    Shape,
    Size,
    below,
    beside,
    circle,
    fit,
    rectangle,
    split_horizontal,
    split_vertical,
    square,
)
from .export import render_image, save_image
from .layout import DiagramLoader, draw, size
from .surfaces import RasterSurface, RecordingSurface, Surface

__all__ = [
    "Color",
    "Diagram",
    "DiagramLoader",
    "Point",
    "RasterSurface",
    "RecordingSurface",
    "Rect",
    "Shape",
    "Size",
    "Surface",
    "below",
    "beside",
    "circle",
    "draw",
    "fit",
    "rectangle",
    "render_image",
    "save_image",
    "size",
    "split_horizontal",
    "split_vertical",
    "square",
]
