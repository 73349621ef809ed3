"""Rasterizer for marker disks drawn over the Voronoi partition."""

import numpy as np

from ..data.canvas import Canvas
from ..data.markers import MarkerSet, Point
from ..utils.logger import get_logger
from .voronoi_generator import squared_distance

logger = get_logger()


class DiskRasterizer:
    """Class for painting filled disks onto a canvas."""

    def fill_circle(self, canvas: Canvas, center: Point, radius: int, color: int) -> int:
        """
        Paint every in-bounds pixel within ``radius`` of ``center``.

        Candidates come from the half-open square
        ``[cx - radius, cx + radius) x [cy - radius, cy + radius)``, so a
        radius of 0 paints nothing. Pixels outside the canvas are skipped.

        Args:
            canvas: Canvas to paint in place
            center: Disk center, may lie outside the canvas
            radius: Non-negative radius in pixels
            color: Packed ARGB color, overwrites existing pixels

        Returns:
            Number of pixels painted
        """
        if radius < 0:
            raise ValueError(f"radius must be non-negative, got {radius}")

        width, height = canvas.dimensions()
        x0 = max(center.x - radius, 0)
        x1 = min(center.x + radius, width)
        y0 = max(center.y - radius, 0)
        y1 = min(center.y + radius, height)
        if x0 >= x1 or y0 >= y1:
            return 0

        ys = np.arange(y0, y1, dtype=np.int64)[:, np.newaxis]
        xs = np.arange(x0, x1, dtype=np.int64)[np.newaxis, :]
        inside = squared_distance(xs, ys, center.x, center.y) <= radius * radius

        canvas.pixels[y0:y1, x0:x1][inside] = color
        return int(inside.sum())

    def fill_markers(
        self,
        canvas: Canvas,
        markers: MarkerSet,
        radius: int,
        color: int,
    ) -> None:
        """
        Overlay a disk on every marker, in index order.

        Must run after the Voronoi partition has been painted.
        """
        painted = 0
        for marker in markers:
            painted += self.fill_circle(canvas, marker, radius, color)

        logger.debug("Painted %d marker disks (radius %d), %d pixels",
                     len(markers), radius, painted)
