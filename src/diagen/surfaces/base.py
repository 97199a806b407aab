"""Drawable surface protocol and shared fill-color state."""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from ..core.color import Color
from ..core.geometry import Rect


class SurfaceStateError(RuntimeError):
    """Raised when the fill-color stack of a surface is used unbalanced."""


@runtime_checkable
class Surface(Protocol):
    """Protocol for anything a diagram can be drawn into.

    Any class with these four methods satisfies this protocol. Rectangles are
    in y-up coordinates.
    """

    def fill_rectangle(self, rect: Rect) -> None:
        """Fill ``rect`` with the current fill color."""
        ...

    def fill_ellipse(self, rect: Rect) -> None:
        """Fill the ellipse inscribed in ``rect`` with the current fill color."""
        ...

    def push_fill_color(self, color: Color) -> None:
        """Save the current fill color and make ``color`` current."""
        ...

    def pop_fill_color(self) -> None:
        """Restore the fill color saved by the matching push."""
        ...


class FillColorStack(ABC):
    """Abstract base class for surfaces that keep a fill-color stack.

    Subclasses implement the two fill methods and read ``fill_color`` to know
    what to paint with.
    """

    def __init__(self, fill_color: Color = Color.BLACK) -> None:
        self._fill_color = fill_color
        self._saved: list[Color] = []

    @property
    def fill_color(self) -> Color:
        """The color shapes are currently filled with."""
        return self._fill_color

    @property
    def depth(self) -> int:
        """Number of pushes not yet matched by a pop."""
        return len(self._saved)

    def push_fill_color(self, color: Color) -> None:
        self._saved.append(self._fill_color)
        self._fill_color = color

    def pop_fill_color(self) -> None:
        if not self._saved:
            raise SurfaceStateError("pop_fill_color() called without a matching push")
        self._fill_color = self._saved.pop()

    @abstractmethod
    def fill_rectangle(self, rect: Rect) -> None:
        pass

    @abstractmethod
    def fill_ellipse(self, rect: Rect) -> None:
        pass
