"""Configuration loader for environment variables."""

import os
from pathlib import Path
from typing import Dict, Any, List, Optional, Sequence
from dotenv import load_dotenv

from ..data.color import (
    BACKGROUND_COLOR,
    DEFAULT_PALETTE,
    MARKER_COLOR,
    format_color,
    parse_color,
)


def _parse_palette(text: str) -> List[int]:
    return [parse_color(item) for item in text.split(",") if item.strip()]


class Config:
    """Configuration class to load and validate rendering parameters."""

    def __init__(
        self,
        env_path: Optional[str] = ".env",
        width: Optional[int] = None,
        height: Optional[int] = None,
        marker_count: Optional[int] = None,
        marker_radius: Optional[int] = None,
        palette: Optional[Sequence[int]] = None,
        background_color: Optional[int] = None,
        marker_color: Optional[int] = None,
        output_dir: Optional[str] = None,
        output_name: Optional[str] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize configuration from environment file and optional overrides.

        Arguments that are not None take precedence over environment variables,
        which take precedence over the built-in defaults.

        Args:
            env_path: Path to .env file (default: ".env", None to skip)
            width: Canvas width in pixels
            height: Canvas height in pixels
            marker_count: Number of random markers
            marker_radius: Radius of the disk drawn on each marker
            palette: Ordered list of packed ARGB colors for the Voronoi cells
            background_color: Color the canvas is filled with before rendering
            marker_color: Color of the marker disks
            output_dir: Directory where diagrams are written
            output_name: File name of the rendered diagram
            seed: Random seed for marker placement (None for fresh entropy)

        Raises:
            ValueError: If any value is missing its precondition
        """
        if env_path:
            load_dotenv(env_path)

        self.width = width if width is not None else self._env_int("VORONOI_WIDTH", 800)
        self.height = height if height is not None else self._env_int("VORONOI_HEIGHT", 600)
        self.marker_count = (
            marker_count if marker_count is not None else self._env_int("VORONOI_MARKERS", 20)
        )
        self.marker_radius = (
            marker_radius if marker_radius is not None
            else self._env_int("VORONOI_MARKER_RADIUS", 5)
        )

        if palette is not None:
            self.palette = list(palette)
        elif os.getenv("VORONOI_PALETTE"):
            self.palette = _parse_palette(os.getenv("VORONOI_PALETTE"))
        else:
            self.palette = list(DEFAULT_PALETTE)

        self.background_color = (
            background_color if background_color is not None
            else self._env_color("VORONOI_BACKGROUND", BACKGROUND_COLOR)
        )
        self.marker_color = (
            marker_color if marker_color is not None
            else self._env_color("VORONOI_MARKER_COLOR", MARKER_COLOR)
        )

        self._output_dir = output_dir
        self.output_name = output_name or os.getenv("VORONOI_OUTPUT", "diagram.ppm")

        if seed is None and os.getenv("VORONOI_SEED"):
            seed = self._env_int("VORONOI_SEED", 0)
        self.seed = seed

        self.validate()

    @staticmethod
    def _env_int(key: str, default: int) -> int:
        value = os.getenv(key)
        if value is None or value == "":
            return default
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer, got {value!r}") from exc

    @staticmethod
    def _env_color(key: str, default: int) -> int:
        value = os.getenv(key)
        if not value:
            return default
        return parse_color(value)

    def validate(self) -> None:
        """Fail fast on values that would produce a degenerate diagram."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.width}x{self.height}"
            )
        if self.marker_count < 1:
            raise ValueError(f"marker_count must be at least 1, got {self.marker_count}")
        if self.marker_radius < 0:
            raise ValueError(f"marker_radius must be non-negative, got {self.marker_radius}")
        if not self.palette:
            raise ValueError("palette must contain at least one color")
        for color in [*self.palette, self.background_color, self.marker_color]:
            if not 0 <= color <= 0xFFFFFFFF:
                raise ValueError(f"Color out of 32-bit range: {color:#x}")

    @property
    def output_dir(self) -> Path:
        """Get output directory path."""
        output = self._output_dir or os.getenv("OUTPUT_DIR", "./output")
        return Path(output)

    @property
    def output_path(self) -> Path:
        """Get the path of the rendered diagram."""
        return self.output_dir / self.output_name

    def indexed_output_path(self, index: int) -> Path:
        """Get the path of the index-th diagram when rendering a batch."""
        name = Path(self.output_name)
        return self.output_dir / f"{name.stem}_{index:03d}{name.suffix or '.ppm'}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "marker_count": self.marker_count,
            "marker_radius": self.marker_radius,
            "palette": [format_color(c) for c in self.palette],
            "background_color": format_color(self.background_color),
            "marker_color": format_color(self.marker_color),
            "output_path": str(self.output_path),
            "seed": self.seed,
        }
