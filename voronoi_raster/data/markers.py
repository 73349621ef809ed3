"""Marker points and the random source that places them."""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional
import numpy as np

from ..utils.logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class Point:
    """Integer pixel coordinate, possibly outside the canvas."""

    x: int
    y: int


class MarkerSet:
    """Ordered, fixed-length sequence of markers. Index i maps to palette slot i mod P."""

    def __init__(self, points: Iterable[Point]):
        self._points: List[Point] = [
            p if isinstance(p, Point) else Point(int(p[0]), int(p[1])) for p in points
        ]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def as_array(self) -> np.ndarray:
        """Return markers as an (N, 2) int64 array of (x, y) rows."""
        if not self._points:
            return np.empty((0, 2), dtype=np.int64)
        return np.array([(p.x, p.y) for p in self._points], dtype=np.int64)

    def __repr__(self) -> str:
        return f"MarkerSet({self._points!r})"


def generate_random_markers(
    count: int,
    width: int,
    height: int,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> MarkerSet:
    """
    Place markers uniformly at random inside the canvas.

    Args:
        count: Number of markers (at least 1)
        width: Canvas width, x is drawn from [0, width)
        height: Canvas height, y is drawn from [0, height)
        rng: Generator to draw from; built from ``seed`` when omitted
        seed: Seed for a new generator (None for fresh entropy)

    Returns:
        MarkerSet with ``count`` points
    """
    if count < 1:
        raise ValueError(f"At least one marker is required, got {count}")
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")

    if rng is None:
        rng = np.random.default_rng(seed)

    xs = rng.integers(0, width, size=count)
    ys = rng.integers(0, height, size=count)
    logger.debug("Generated %d random markers on %dx%d canvas", count, width, height)
    return MarkerSet(Point(int(x), int(y)) for x, y in zip(xs, ys))
