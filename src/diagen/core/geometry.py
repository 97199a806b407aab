"""2D geometry value types and layout primitives.

Coordinates are y-up: (0, 0) is the bottom-left corner of a region and
anchors use the same convention (0 = origin edge, 1 = far edge).

Arithmetic is component-wise and never raises. Division by a zero component
produces IEEE infinities or NaNs, which is why the operations go through
numpy rather than plain float division.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

_BinaryOp = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _combine(a: tuple[float, float], b: tuple[float, float], op: _BinaryOp) -> tuple[float, float]:
    """Apply a numpy ufunc to two pairs with IEEE semantics."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        result = op(np.array(a, dtype=np.float64), np.array(b, dtype=np.float64))
    return float(result[0]), float(result[1])


@dataclass(frozen=True)
class Size:
    """A width/height pair."""

    width: float
    height: float

    def as_tuple(self) -> tuple[float, float]:
        return self.width, self.height

    def __add__(self, other: Size) -> Size:
        return Size(*_combine(self.as_tuple(), other.as_tuple(), np.add))

    def __sub__(self, other: Size) -> Size:
        return Size(*_combine(self.as_tuple(), other.as_tuple(), np.subtract))

    def __mul__(self, other: Size) -> Size:
        return Size(*_combine(self.as_tuple(), other.as_tuple(), np.multiply))

    def __rmul__(self, scalar: float) -> Size:
        """Scale both components: ``2.0 * size``."""
        return Size(*_combine((scalar, scalar), self.as_tuple(), np.multiply))

    def __truediv__(self, other: Size) -> Size:
        return Size(*_combine(self.as_tuple(), other.as_tuple(), np.divide))


@dataclass(frozen=True)
class Point:
    """A 2D point, also used for fractional anchors."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y

    def __add__(self, other: Point) -> Point:
        return Point(*_combine(self.as_tuple(), other.as_tuple(), np.add))

    def __sub__(self, other: Point) -> Point:
        return Point(*_combine(self.as_tuple(), other.as_tuple(), np.subtract))

    def __mul__(self, other: Point | Size) -> Point:
        """Multiply component-wise by another point or by a size.

        ``anchor * size`` scales the anchor fractions into an offset.
        """
        return Point(*_combine(self.as_tuple(), other.as_tuple(), np.multiply))

    def __truediv__(self, other: Point) -> Point:
        return Point(*_combine(self.as_tuple(), other.as_tuple(), np.divide))


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its lower-left origin and size."""

    origin: Point
    size: Size

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(Point(x, y), Size(width, height))

    @property
    def x(self) -> float:
        return self.origin.x

    @property
    def y(self) -> float:
        return self.origin.y

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def min_x(self) -> float:
        return self.origin.x

    @property
    def max_x(self) -> float:
        return self.origin.x + self.size.width

    @property
    def min_y(self) -> float:
        return self.origin.y

    @property
    def max_y(self) -> float:
        return self.origin.y + self.size.height

    @property
    def aspect_ratio(self) -> float:
        """Width over height; ``inf``/``nan`` for zero heights."""
        if self.height == 0:
            return math.inf if self.width > 0 else math.nan
        return self.width / self.height

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.x, self.y, self.width, self.height

    def contains(self, other: Rect, tolerance: float = 1e-9) -> bool:
        """Check whether ``other`` lies inside this rectangle."""
        return (
            other.min_x >= self.min_x - tolerance
            and other.min_y >= self.min_y - tolerance
            and other.max_x <= self.max_x + tolerance
            and other.max_y <= self.max_y + tolerance
        )

    def __repr__(self) -> str:
        return f"Rect(x={self.x:g}, y={self.y:g}, width={self.width:g}, height={self.height:g})"


ALIGN_CENTER = Point(0.5, 0.5)


def _fit_scale(size: Size, available: Size) -> float:
    """Largest uniform scale that keeps ``size`` within ``available``.

    Axes where ``size`` is zero do not constrain the scale. A size that is
    zero on both axes gets scale 0.
    """
    ratios = np.array((available / size).as_tuple(), dtype=np.float64)
    usable = np.array(size.as_tuple()) > 0
    candidates = ratios[usable & np.isfinite(ratios)]
    if candidates.size == 0:
        return 0.0
    return float(candidates.min())


def fit(size: Size, anchor: Point, bounds: Rect) -> Rect:
    """Compute the rectangle a diagram of virtual ``size`` occupies in ``bounds``.

    The result is the largest rectangle with the aspect ratio of ``size``
    that fits into ``bounds``, positioned per axis by ``anchor``: 0 puts it
    flush against the origin edge, 1 against the far edge, 0.5 centers it.

    Args:
        size: Virtual size of the diagram
        anchor: Fractional position within the leftover space
        bounds: Region to fit into

    Returns:
        The fitted rectangle
    """
    scale = _fit_scale(size, bounds.size)
    fitted_size = scale * size
    offset = anchor * (bounds.size - fitted_size)
    return Rect(bounds.origin + offset, fitted_size)


def _share(part: float, other: float) -> float:
    total = part + other
    if total == 0:
        return 0.5
    return part / total


def split_horizontal(left: Size, right: Size, bounds: Rect) -> tuple[Rect, Rect]:
    """Divide ``bounds`` into a left and right part, proportional to the widths.

    Both parts keep the full height of ``bounds``. If both widths are zero the
    bounds are split in half.

    Returns:
        Tuple of (left_bounds, right_bounds)
    """
    left_width = _share(left.width, right.width) * bounds.width
    right_width = bounds.width - left_width
    left_bounds = Rect(bounds.origin, Size(left_width, bounds.height))
    right_bounds = Rect.from_xywh(
        bounds.x + left_width, bounds.y, right_width, bounds.height
    )
    return left_bounds, right_bounds


def split_vertical(top: Size, bottom: Size, bounds: Rect) -> tuple[Rect, Rect]:
    """Divide ``bounds`` into a top and bottom part, proportional to the heights.

    Both parts keep the full width of ``bounds``. The bottom part starts at the
    origin of ``bounds`` and the top part sits above it. If both heights are
    zero the bounds are split in half.

    Returns:
        Tuple of (top_bounds, bottom_bounds)
    """
    top_height = _share(top.height, bottom.height) * bounds.height
    bottom_height = bounds.height - top_height
    bottom_bounds = Rect(bounds.origin, Size(bounds.width, bottom_height))
    top_bounds = Rect.from_xywh(
        bounds.x, bounds.y + bottom_height, bounds.width, top_height
    )
    return top_bounds, bottom_bounds
