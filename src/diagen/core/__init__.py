"""Core diagram model: geometry, colors and diagram trees."""

from .color import Color
from .diagram import (
    Alignment,
    Annotated,
    Attribute,
    Below,
    Beside,
    Diagram,
    FillColor,
    Primitive,
    Shape,
    below,
    beside,
    circle,
    hcat,
    rectangle,
    square,
    vcat,
)
from .geometry import ALIGN_CENTER, Point, Rect, Size, fit, split_horizontal, split_vertical

__all__ = [
    "ALIGN_CENTER",
    "Alignment",
    "Annotated",
    "Attribute",
    "Below",
    "Beside",
    "Color",
    "Diagram",
    "FillColor",
    "Point",
    "Primitive",
    "Rect",
    "Shape",
    "Size",
    "below",
    "beside",
    "circle",
    "fit",
    "hcat",
    "rectangle",
    "split_horizontal",
    "split_vertical",
    "square",
    "vcat",
]
