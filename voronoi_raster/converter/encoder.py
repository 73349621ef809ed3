"""Encoder for writing canvases as binary PPM (P6) images."""

from pathlib import Path
from typing import Union
import numpy as np

from ..data.canvas import Canvas
from ..data.color import unpack_color
from ..utils.logger import get_logger

logger = get_logger()


class PPMWriteError(OSError):
    """Raised when a PPM file cannot be created, written or flushed."""

    def __init__(self, path: Union[str, Path], cause: OSError):
        super().__init__(f"unable to write PPM file {path}: {cause}")
        self.path = Path(path)
        self.cause = cause


class PPMEncoder:
    """Class for serializing a canvas to the binary PPM format."""

    MAGIC = "P6"
    MAX_VALUE = 255

    def header(self, canvas: Canvas) -> bytes:
        width, height = canvas.dimensions()
        return f"{self.MAGIC}\n{width} {height}\n{self.MAX_VALUE}\n".encode("ascii")

    def to_rgb(self, canvas: Canvas) -> np.ndarray:
        """
        Extract the RGB channels of every pixel.

        Returns:
            (height, width, 3) uint8 array, alpha dropped
        """
        _, red, green, blue = unpack_color(canvas.pixels)
        return np.stack([red, green, blue], axis=-1).astype(np.uint8)

    def encode(self, canvas: Canvas) -> bytes:
        """Encode canvas as header followed by row-major R, G, B bytes."""
        return self.header(canvas) + self.to_rgb(canvas).tobytes()

    def save(self, canvas: Canvas, output_path: Union[str, Path]) -> Path:
        """
        Save canvas as a PPM file, replacing any existing file.

        Args:
            canvas: Finished canvas
            output_path: Destination file

        Returns:
            The path written

        Raises:
            PPMWriteError: If the file cannot be created, written or flushed
        """
        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "wb") as f:
                f.write(self.header(canvas))
                f.write(self.to_rgb(canvas).tobytes())
                f.flush()
        except OSError as exc:
            raise PPMWriteError(output_path, exc) from exc

        width, height = canvas.dimensions()
        logger.info("Saved %dx%d diagram to %s", width, height, output_path)
        return output_path
