"""ContourScene — builds a sample grid and contours it once.

The scene is the single owner of the grid.  Its output is plain data
(samples and per-cell segments) that any renderer or exporter can
consume without the scene knowing about it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from marchsq.contour.extractor import ContourExtractor
from marchsq.contour.geometry import CellContour, Segment
from marchsq.grid.sample_grid import SampleGrid
from marchsq.grid.sources import RandomStates, StateSource
from marchsq.scene.config import ContourConfig

logger = logging.getLogger(__name__)


@dataclass
class ContourScene:
    """One grid plus its extracted contour.

    Attributes:
        config: Loaded scene configuration.
        source: State source; defaults to ``RandomStates(config.seed)``.
        grid: The sample lattice.
        extractor: Extractor scaled by ``config.tile_size``.
        contours: Per-cell results in sweep order (empty until ``run``).
    """

    config: ContourConfig
    source: StateSource | None = None
    grid: SampleGrid = field(init=False)
    extractor: ContourExtractor = field(init=False)
    contours: list[CellContour] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        """Build the state source, grid, and extractor from config."""
        if self.source is None:
            self.source = RandomStates(seed=self.config.seed)
        self.extractor = ContourExtractor(tile_size=self.config.tile_size)
        self.grid = SampleGrid.build(
            self.config.grid_width,
            self.config.grid_height,
            self.source,
        )

    def run(self) -> list[CellContour]:
        """Contour the grid with the configured layout.

        Returns:
            The per-cell results, also stored on ``self.contours``.
        """
        self.contours = self.extractor.extract(self.grid, self.config.layout)
        logger.info(
            "Contoured %dx%d grid (%s layout): %d cells, %d segments",
            self.grid.width,
            self.grid.height,
            self.config.layout.name.lower(),
            len(self.contours),
            self.segment_count,
        )
        return self.contours

    def segments(self) -> Iterator[Segment]:
        """Yield every segment of the last run in sweep order."""
        for contour in self.contours:
            yield from contour.segments

    @property
    def segment_count(self) -> int:
        """Total number of segments from the last run."""
        return sum(len(contour.segments) for contour in self.contours)
