"""Layout system: sizing, rendering and loading of diagram trees."""

from .loader import DiagramLoader, DiagramLoadError
from .renderer import draw, fill_color
from .size import size

__all__ = ["DiagramLoader", "DiagramLoadError", "draw", "fill_color", "size"]
