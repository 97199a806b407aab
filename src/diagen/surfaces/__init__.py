"""Drawable surfaces that diagrams render into."""

from .base import FillColorStack, Surface, SurfaceStateError
from .raster import RasterSurface
from .recording import DrawCall, RecordingSurface

__all__ = [
    "DrawCall",
    "FillColorStack",
    "RasterSurface",
    "RecordingSurface",
    "Surface",
    "SurfaceStateError",
]
