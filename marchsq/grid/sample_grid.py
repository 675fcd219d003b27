"""SampleGrid — the lattice of binary samples that contours are traced on.

The grid owns a ``width x height`` array of Samples indexed as
``samples[x][y]``.  It is built once from a state source and only read
afterwards: cells are derived on demand and handed straight to the
contour extractor.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from marchsq.errors import InvalidDimension, OutOfRange
from marchsq.grid.cell import Cell
from marchsq.grid.sample import Sample
from marchsq.grid.sources import RandomStates, StateSource

logger = logging.getLogger(__name__)


class GridLayout(Enum):
    """How cell neighbourhoods are taken from the lattice.

    The value is the stride between consecutive cell origins.
    """

    DENSE = 1
    TILED = 2

    @classmethod
    def from_name(cls, name: str) -> GridLayout:
        """Look up a layout by case-insensitive name.

        Raises:
            ValueError: If no layout has that name.
        """
        try:
            return cls[name.upper()]
        except KeyError:
            known = ", ".join(layout.name.lower() for layout in cls)
            msg = f"unknown grid layout {name!r} (expected one of: {known})"
            raise ValueError(msg) from None


@dataclass(frozen=True)
class SampleGrid:
    """A read-only 2D lattice of Samples.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        samples: Samples indexed as ``samples[x][y]``.
    """

    width: int
    height: int
    samples: tuple[tuple[Sample, ...], ...]

    @classmethod
    def build(
        cls,
        width: int,
        height: int,
        source: StateSource | None = None,
    ) -> SampleGrid:
        """Create a grid, asking ``source`` for the state of every point.

        Args:
            width: Number of columns (> 0).
            height: Number of rows (> 0).
            source: ``(x, y) -> bool`` state callable.  Defaults to
                unseeded ``RandomStates``.

        Raises:
            InvalidDimension: If width or height is not positive.
        """
        if width <= 0 or height <= 0:
            msg = f"grid dimensions must be positive, got {width}x{height}"
            raise InvalidDimension(msg)
        if source is None:
            source = RandomStates()

        samples = tuple(
            tuple(Sample(x=x, y=y, state=bool(source(x, y))) for y in range(height))
            for x in range(width)
        )
        grid = cls(width=width, height=height, samples=samples)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Built %dx%d sample grid (%d on)",
                width,
                height,
                grid.count_on(),
            )
        return grid

    def sample_at(self, x: int, y: int) -> Sample:
        """Return the sample at lattice coordinates ``(x, y)``.

        Raises:
            OutOfRange: If coordinates are out of bounds.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            msg = f"sample ({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise OutOfRange(msg)
        return self.samples[x][y]

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the 2x2 neighbourhood whose bottom-left corner is ``(x, y)``.

        Args:
            x: Column of the bottom-left sample (``0 <= x <= width-2``).
            y: Row of the bottom-left sample (``0 <= y <= height-2``).

        Raises:
            OutOfRange: If the neighbourhood would leave the grid.
        """
        if not (0 <= x < self.width - 1 and 0 <= y < self.height - 1):
            msg = f"cell ({x}, {y}) out of range for {self.width}x{self.height} grid"
            raise OutOfRange(msg)
        return Cell(
            bot_left=self.samples[x][y],
            bot_right=self.samples[x + 1][y],
            top_right=self.samples[x + 1][y + 1],
            top_left=self.samples[x][y + 1],
        )

    def cells(self, stride: int | GridLayout = 1) -> Iterator[Cell]:
        """Sweep cell neighbourhoods, ``x`` in the outer loop.

        A cell origin is visited when its stride-sized tile fits inside
        the grid, i.e. ``x + stride < width`` (same for ``y``).  Stride 1
        therefore yields every overlapping 2x2 neighbourhood once and
        stride 2 yields disjoint tiles at even origins.

        Args:
            stride: Spacing between cell origins, or a GridLayout.

        Raises:
            InvalidDimension: If the stride is below 1.
        """
        if isinstance(stride, GridLayout):
            stride = stride.value
        if stride < 1:
            msg = f"stride must be at least 1, got {stride}"
            raise InvalidDimension(msg)

        for x in range(0, self.width - stride, stride):
            for y in range(0, self.height - stride, stride):
                yield self.cell_at(x, y)

    def iter_samples(self) -> Iterator[Sample]:
        """Yield every sample, column by column."""
        for column in self.samples:
            yield from column

    def count_on(self) -> int:
        """Return how many samples are in the "on" state."""
        return sum(1 for sample in self.iter_samples() if sample.state)
