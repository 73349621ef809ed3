from pathlib import Path
from typing import Optional, Tuple
import numpy as np

from .converter import DiskRasterizer, PPMEncoder, VoronoiRasterizer
from .data import Canvas, MarkerSet, generate_random_markers
from .utils import get_logger

logger = get_logger()


def render_diagram(
    config,
    markers: Optional[MarkerSet] = None,
    rng: Optional[np.random.Generator] = None,
    show_progress: bool = False,
) -> Tuple[Canvas, MarkerSet]:
    """
    Render one Voronoi diagram into a fresh canvas.

    Stages run strictly in order: background fill, marker placement,
    Voronoi partition, marker disk overlay.

    Args:
        config: Config with canvas size, colors and marker parameters
        markers: Markers to use instead of random ones
        rng: Random generator for marker placement (built from config.seed if omitted)
        show_progress: Show a progress bar over canvas rows

    Returns:
        Tuple of (canvas, markers)
    """
    canvas = Canvas(config.width, config.height)
    canvas.fill(config.background_color)

    if markers is None:
        if rng is None:
            rng = np.random.default_rng(config.seed)
        markers = generate_random_markers(
            config.marker_count, config.width, config.height, rng=rng
        )
    logger.info("Rendering %dx%d diagram with %d markers",
                config.width, config.height, len(markers))

    voronoi = VoronoiRasterizer(config.palette, show_progress=show_progress)
    voronoi.render(canvas, markers)

    DiskRasterizer().fill_markers(
        canvas, markers, config.marker_radius, config.marker_color
    )
    return canvas, markers


def process_diagram(
    config,
    index: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    show_progress: bool = False,
) -> Path:
    """Render a diagram and write it to the configured output path."""
    canvas, _ = render_diagram(config, rng=rng, show_progress=show_progress)

    output_path = config.output_path if index is None else config.indexed_output_path(index)
    return PPMEncoder().save(canvas, output_path)
