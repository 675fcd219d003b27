"""Entry point for ``python -m marchsq``.

Loads the YAML config, builds a contour scene, runs the extraction, and
logs a summary.  Drawing is left to whatever consumes the scene.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import pathlib
from collections import Counter

from marchsq.grid.sample_grid import GridLayout
from marchsq.logging_config import setup_logging
from marchsq.scene.config import ContourConfig
from marchsq.scene.engine import ContourScene

logger = logging.getLogger("marchsq")

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, build the scene, report the contour."""
    parser = argparse.ArgumentParser(
        prog="marchsq",
        description="marchsq - binary marching squares over a sample lattice",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the config seed",
    )
    parser.add_argument(
        "--layout",
        choices=[layout.name.lower() for layout in GridLayout],
        default=None,
        help="Override the config grid layout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-sweep debug details",
    )
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = ContourConfig.from_yaml(args.config)
    if args.seed is not None:
        config = dataclasses.replace(config, seed=args.seed)
    if args.layout is not None:
        config = dataclasses.replace(config, layout=GridLayout.from_name(args.layout))

    scene = ContourScene(config=config)
    contours = scene.run()

    codes = Counter(contour.code for contour in contours)
    grid = scene.grid
    logger.info("Samples on: %d / %d", grid.count_on(), grid.width * grid.height)
    for code, count in sorted(codes.items()):
        logger.info("  case %2d: %d cells", code, count)


if __name__ == "__main__":
    main()
