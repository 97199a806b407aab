"""Raster surface backed by a numpy RGBA canvas."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from ..core.color import Color
from ..core.geometry import Rect
from .base import FillColorStack

logger = logging.getLogger(__name__)


class RasterSurface(FillColorStack):
    """Rasterizes fill calls into an RGBA pixel canvas.

    Coordinates are y-up with (0, 0) at the bottom-left corner of the image;
    one unit is one pixel. A pixel is painted when its center lies inside
    the shape. Colors are composited source-over, so a fully transparent fill
    leaves the canvas unchanged.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Color = Color.CLEAR,
        fill_color: Color = Color.BLACK,
    ) -> None:
        """Create a canvas.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            background: Initial color of every pixel
            fill_color: Fill color before any push
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        super().__init__(fill_color)
        self.width = width
        self.height = height
        self._canvas = np.empty((height, width, 4), dtype=np.float64)
        self._canvas[:, :] = background.to_tuple()

        # Pixel centers in surface coordinates; row 0 is the top of the image
        self._xs = np.arange(width, dtype=np.float64) + 0.5
        self._ys = height - (np.arange(height, dtype=np.float64) + 0.5)

    @property
    def bounds(self) -> Rect:
        """The full canvas as a rectangle."""
        return Rect.from_xywh(0, 0, self.width, self.height)

    def _window(self, rect: Rect) -> tuple[slice, slice] | None:
        """Row and column slices of the pixels whose centers may lie in ``rect``."""
        cols = np.flatnonzero((self._xs >= rect.min_x) & (self._xs <= rect.max_x))
        rows = np.flatnonzero((self._ys >= rect.min_y) & (self._ys <= rect.max_y))
        if cols.size == 0 or rows.size == 0:
            return None
        return slice(rows[0], rows[-1] + 1), slice(cols[0], cols[-1] + 1)

    def _composite(self, rows: slice, cols: slice, mask: NDArray[np.bool_]) -> None:
        src = np.array(self.fill_color.to_tuple(), dtype=np.float64)
        src_alpha = src[3]
        if src_alpha == 0 or not mask.any():
            return
        region = self._canvas[rows, cols]
        dst = region[mask]
        dst_alpha = dst[:, 3] * (1.0 - src_alpha)
        out_alpha = src_alpha + dst_alpha
        out_rgb = (src[:3] * src_alpha + dst[:, :3] * dst_alpha[:, None]) / out_alpha[:, None]
        region[mask] = np.column_stack([out_rgb, out_alpha])

    def fill_rectangle(self, rect: Rect) -> None:
        window = self._window(rect)
        if window is None:
            return
        rows, cols = window
        xs = self._xs[cols]
        ys = self._ys[rows]
        in_x = (xs >= rect.min_x) & (xs < rect.max_x)
        in_y = (ys >= rect.min_y) & (ys < rect.max_y)
        self._composite(rows, cols, np.outer(in_y, in_x))

    def fill_ellipse(self, rect: Rect) -> None:
        if rect.width <= 0 or rect.height <= 0:
            return
        window = self._window(rect)
        if window is None:
            return
        rows, cols = window
        cx = rect.x + rect.width / 2
        cy = rect.y + rect.height / 2
        dx = (self._xs[cols] - cx) / (rect.width / 2)
        dy = (self._ys[rows] - cy) / (rect.height / 2)
        mask = dy[:, None] ** 2 + dx[None, :] ** 2 <= 1.0
        self._composite(rows, cols, mask)

    def to_array(self) -> NDArray[np.uint8]:
        """Get the canvas as an HxWx4 uint8 array (row 0 is the top)."""
        return np.round(np.clip(self._canvas, 0.0, 1.0) * 255).astype(np.uint8)

    def to_image(self) -> Image.Image:
        """Get the canvas as a PIL Image in RGBA mode."""
        return Image.fromarray(self.to_array())

    def save(self, path: str | Path) -> Path:
        """Write the canvas to an image file; the format follows the suffix."""
        path = Path(path)
        image = self.to_image()
        if path.suffix.lower() in (".jpg", ".jpeg"):
            image = image.convert("RGB")
        image.save(str(path))
        logger.info("Saved image as %s", path)
        return path
