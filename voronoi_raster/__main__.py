"""Main script for Voronoi diagram rendering."""

import sys
import argparse
import logging
import numpy as np
from tqdm import tqdm
from .data import parse_color
from .utils import Config, setup_logger
from .converter import PPMWriteError
from .processor import process_diagram


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="voronoi-raster",
        description="Voronoi Diagram Rendering Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
        Examples:
          # Render the default 800x600 diagram with 20 markers
          python -m voronoi_raster

          # Render 5 reproducible diagrams with 50 markers
          python -m voronoi_raster --markers 50 --seed 7 --count 5
        """
    )

    canvas_group = parser.add_argument_group('Canvas')
    canvas_group.add_argument("--width", type=int, help="Canvas width in pixels (default: 800)")
    canvas_group.add_argument("--height", type=int, help="Canvas height in pixels (default: 600)")
    canvas_group.add_argument(
        "--background",
        type=parse_color,
        help="Background color as 0xAARRGGBB or #RRGGBB"
    )

    marker_group = parser.add_argument_group('Markers')
    marker_group.add_argument("--markers", type=int, help="Number of markers (default: 20)")
    marker_group.add_argument("--radius", type=int, help="Marker disk radius (default: 5)")
    marker_group.add_argument(
        "--marker-color",
        type=parse_color,
        help="Marker disk color as 0xAARRGGBB or #RRGGBB"
    )
    marker_group.add_argument("--seed", type=int, help="Random seed for marker placement")

    output_group = parser.add_argument_group('Output')
    output_group.add_argument("--output-dir", type=str, help="Output directory (overrides OUTPUT_DIR in .env)")
    output_group.add_argument("--output", type=str, help="Output file name (default: diagram.ppm)")
    output_group.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of diagrams to render (default: 1)"
    )
    output_group.add_argument("--env-file", type=str, default=".env", help="Path to .env file")

    log_group = parser.add_argument_group('Logging')
    log_group.add_argument("--verbose", action="store_true", help="Enable debug logging")
    log_group.add_argument("--log-file", type=str, help="Also write the log to this file")
    log_group.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar over canvas rows"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main execution function."""
    args = parse_arguments(argv)

    try:
        config = Config(
            env_path=args.env_file,
            width=args.width,
            height=args.height,
            marker_count=args.markers,
            marker_radius=args.radius,
            background_color=args.background,
            marker_color=args.marker_color,
            output_dir=args.output_dir,
            output_name=args.output,
            seed=args.seed,
        )
        if args.count < 1:
            raise ValueError(f"--count must be at least 1, got {args.count}")
    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logger(level=level, log_file=args.log_file)
    logger.info("=" * 80)
    logger.info("Voronoi Diagram Rendering")
    logger.info("=" * 80)
    logger.debug("Configuration: %s", config.to_dict())

    rng = np.random.default_rng(config.seed)

    try:
        if args.count == 1:
            process_diagram(config, rng=rng, show_progress=args.progress)
        else:
            for index in tqdm(range(args.count), desc="Rendering diagrams"):
                process_diagram(config, index=index, rng=rng, show_progress=args.progress)
    except PPMWriteError as exc:
        logger.error("Could not write %s: %s", exc.path, exc.cause)
        sys.exit(1)


if __name__ == "__main__":
    main()
