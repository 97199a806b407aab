"""Diagram trees: the node types and the combinators that build them.

A diagram is one of four immutable node kinds:

- ``Primitive``: a leaf shape with a virtual size
- ``Beside``: two diagrams placed side by side
- ``Below``: one diagram stacked on top of another
- ``Annotated``: a diagram wrapped with a fill color or alignment

Example:
    red_square = square(2).fill(Color.RED)
    green_circle = circle(0.5).fill("green")
    row = red_square | green_circle | red_square
    stacked = row.align_bottom() / rectangle(10, 0.2).align_top()
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Iterator, Union

from .color import Color
from .geometry import Point, Size


class Shape(Enum):
    """Shape drawn by a primitive into its fitted frame."""

    ELLIPSE = "ellipse"
    RECTANGLE = "rectangle"


@dataclass(frozen=True)
class FillColor:
    """Fill everything inside the annotated subtree with ``color``."""

    color: Color


@dataclass(frozen=True)
class Alignment:
    """Re-fit the annotated subtree inside its bounds at ``anchor``."""

    anchor: Point

    def __post_init__(self) -> None:
        for value in self.anchor.as_tuple():
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"Alignment anchor must lie in [0, 1]², got {self.anchor}")


Attribute = Union[FillColor, Alignment]


class Diagram:
    """Base class for diagram nodes, carrying the combinator methods."""

    __slots__ = ()

    def fill(self, color: Color | str | tuple[float, ...]) -> Annotated:
        """Wrap this diagram with a fill color (anything ``Color.parse`` accepts)."""
        return Annotated(FillColor(Color.parse(color)), self)

    def align(self, x: float, y: float) -> Annotated:
        """Wrap this diagram with an alignment anchor in [0, 1]²."""
        return Annotated(Alignment(Point(x, y)), self)

    def align_right(self) -> Annotated:
        return self.align(1.0, 0.5)

    def align_top(self) -> Annotated:
        return self.align(0.5, 1.0)

    def align_bottom(self) -> Annotated:
        return self.align(0.5, 0.0)

    def __or__(self, other: Diagram) -> Beside:
        return beside(self, other)

    def __truediv__(self, other: Diagram) -> Below:
        return below(self, other)


@dataclass(frozen=True)
class Primitive(Diagram):
    size: Size
    shape: Shape

    def __post_init__(self) -> None:
        for value in self.size.as_tuple():
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"Primitive size must be finite and >= 0, got {self.size}")


@dataclass(frozen=True)
class Beside(Diagram):
    left: Diagram
    right: Diagram


@dataclass(frozen=True)
class Below(Diagram):
    top: Diagram
    bottom: Diagram


@dataclass(frozen=True)
class Annotated(Diagram):
    attribute: Attribute
    child: Diagram


def square(side: float) -> Primitive:
    return Primitive(Size(side, side), Shape.RECTANGLE)


def circle(radius: float) -> Primitive:
    """A circle, whose virtual size is its bounding square."""
    return Primitive(Size(2 * radius, 2 * radius), Shape.ELLIPSE)


def rectangle(width: float, height: float) -> Primitive:
    return Primitive(Size(width, height), Shape.RECTANGLE)


def beside(left: Diagram, right: Diagram) -> Beside:
    return Beside(left, right)


def below(top: Diagram, bottom: Diagram) -> Below:
    return Below(top, bottom)


def hcat(*diagrams: Diagram) -> Diagram:
    """Place diagrams left to right, folding ``beside`` from the left."""
    if not diagrams:
        raise ValueError("hcat requires at least one diagram")
    return reduce(beside, diagrams)


def vcat(*diagrams: Diagram) -> Diagram:
    """Stack diagrams top to bottom, folding ``below`` from the left."""
    if not diagrams:
        raise ValueError("vcat requires at least one diagram")
    return reduce(below, diagrams)


def children(diagram: Diagram) -> tuple[Diagram, ...]:
    """Direct children in drawing order."""
    match diagram:
        case Primitive():
            return ()
        case Beside(left, right):
            return (left, right)
        case Below(top, bottom):
            return (top, bottom)
        case Annotated(_, child):
            return (child,)
    raise TypeError(f"Not a diagram node: {diagram!r}")


def iter_nodes(diagram: Diagram, depth: int = 0) -> Iterator[tuple[int, Diagram]]:
    """Iterate over a diagram and all descendants (depth-first).

    Yields:
        Tuples of (depth, node), parents before children
    """
    yield depth, diagram
    for child in children(diagram):
        yield from iter_nodes(child, depth + 1)


def node_count(diagram: Diagram) -> int:
    return sum(1 for _ in iter_nodes(diagram))


def describe(diagram: Diagram) -> str:
    """One-line label for a single node (children are not included)."""
    match diagram:
        case Primitive(size, shape):
            return f"{shape.value} {size.width:g}x{size.height:g}"
        case Beside():
            return "beside"
        case Below():
            return "below"
        case Annotated(FillColor(color), _):
            r, g, b, a = color.to_rgba8()
            return f"fill #{r:02x}{g:02x}{b:02x}{a:02x}"
        case Annotated(Alignment(anchor), _):
            return f"align ({anchor.x:g}, {anchor.y:g})"
    raise TypeError(f"Not a diagram node: {diagram!r}")
