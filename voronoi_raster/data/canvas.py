"""Fixed-size pixel buffer of packed colors."""

from typing import Tuple
import numpy as np

COLOR_DTYPE = np.uint32


class Canvas:
    """
    Row-major grid of packed ARGB colors with the origin at the top-left.

    ``set`` and ``get`` do not clip: callers must pass coordinates inside
    ``[0, width) x [0, height)``. The precondition is only asserted, so it
    disappears under ``python -O``.
    """

    def __init__(self, width: int, height: int, fill: int = 0):
        """
        Initialize canvas.

        Args:
            width: Number of columns (must be positive)
            height: Number of rows (must be positive)
            fill: Initial color of every cell
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.pixels = np.full((height, width), fill, dtype=COLOR_DTYPE)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def dimensions(self) -> Tuple[int, int]:
        """Return (width, height)."""
        return self.width, self.height

    def fill(self, color: int) -> None:
        self.pixels.fill(color)

    def set(self, x: int, y: int, color: int) -> None:
        assert 0 <= x < self.width and 0 <= y < self.height, (x, y)
        self.pixels[y, x] = color

    def get(self, x: int, y: int) -> int:
        assert 0 <= x < self.width and 0 <= y < self.height, (x, y)
        return int(self.pixels[y, x])

    def copy(self) -> "Canvas":
        clone = Canvas.__new__(Canvas)
        clone.pixels = self.pixels.copy()
        return clone

    def __eq__(self, other) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return np.array_equal(self.pixels, other.pixels)

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"
