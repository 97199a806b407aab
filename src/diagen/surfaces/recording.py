"""Surface that records draw calls instead of producing pixels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..core.color import Color
from ..core.geometry import Rect
from .base import FillColorStack

Operation = Literal["fill_rectangle", "fill_ellipse", "push_fill_color", "pop_fill_color"]


@dataclass(frozen=True)
class DrawCall:
    """A single recorded surface call.

    Attributes:
        operation: Name of the surface method that was called
        rect: Target rectangle for fill calls, None otherwise
        color: Fill color in effect after the call
    """

    operation: Operation
    rect: Rect | None
    color: Color


class RecordingSurface(FillColorStack):
    """Records every call made to it, in order.

    Useful for inspecting a layout without rasterizing it:

        surface = RecordingSurface()
        draw(diagram, surface, Rect.from_xywh(0, 0, 100, 100))
        for call in surface.shapes():
            print(call.operation, call.rect, call.color)
    """

    def __init__(self, fill_color: Color = Color.BLACK) -> None:
        super().__init__(fill_color)
        self.calls: list[DrawCall] = []

    def fill_rectangle(self, rect: Rect) -> None:
        self.calls.append(DrawCall("fill_rectangle", rect, self.fill_color))

    def fill_ellipse(self, rect: Rect) -> None:
        self.calls.append(DrawCall("fill_ellipse", rect, self.fill_color))

    def push_fill_color(self, color: Color) -> None:
        super().push_fill_color(color)
        self.calls.append(DrawCall("push_fill_color", None, self.fill_color))

    def pop_fill_color(self) -> None:
        super().pop_fill_color()
        self.calls.append(DrawCall("pop_fill_color", None, self.fill_color))

    def shapes(self) -> list[DrawCall]:
        """Only the fill calls, in drawing order."""
        return [c for c in self.calls if c.operation in ("fill_rectangle", "fill_ellipse")]

    def clear(self) -> None:
        self.calls.clear()
