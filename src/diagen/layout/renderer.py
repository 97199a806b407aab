"""Recursive layout and rendering of diagram trees."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from ..core.color import Color
from ..core.diagram import Alignment, Annotated, Below, Beside, Diagram, FillColor, Primitive, Shape
from ..core.geometry import ALIGN_CENTER, Rect, fit, split_horizontal, split_vertical
from ..surfaces.base import Surface
from .size import size

logger = logging.getLogger(__name__)


@contextmanager
def fill_color(surface: Surface, color: Color) -> Iterator[Surface]:
    """Make ``color`` the surface's fill color for the duration of the block.

    The previous color is restored on exit, also when the block raises.
    """
    surface.push_fill_color(color)
    try:
        yield surface
    finally:
        surface.pop_fill_color()


def draw(diagram: Diagram, surface: Surface, bounds: Rect) -> None:
    """Draw ``diagram`` into ``bounds`` on ``surface``.

    Composite nodes split their bounds among their children in proportion to
    the children's virtual sizes. Leaves are scaled to fit their share while
    keeping their aspect ratio, centered. Left and top children are drawn
    before right and bottom ones.

    Args:
        diagram: The diagram tree to draw
        surface: Target surface
        bounds: Region of the surface to draw into (y-up)
    """
    match diagram:
        case Primitive(sz, shape):
            frame = fit(sz, ALIGN_CENTER, bounds)
            logger.debug("Drawing %s into %r", shape.value, frame)
            if shape is Shape.ELLIPSE:
                surface.fill_ellipse(frame)
            else:
                surface.fill_rectangle(frame)
        case Beside(left, right):
            left_bounds, right_bounds = split_horizontal(size(left), size(right), bounds)
            draw(left, surface, left_bounds)
            draw(right, surface, right_bounds)
        case Below(top, bottom):
            top_bounds, bottom_bounds = split_vertical(size(top), size(bottom), bounds)
            draw(top, surface, top_bounds)
            draw(bottom, surface, bottom_bounds)
        case Annotated(FillColor(color), child):
            with fill_color(surface, color):
                draw(child, surface, bounds)
        case Annotated(Alignment(anchor), child):
            draw(child, surface, fit(size(child), anchor, bounds))
        case _:
            raise TypeError(f"Not a diagram node: {diagram!r}")
