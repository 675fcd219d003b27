"""ContourExtractor — binary marching squares on a SampleGrid.

Each cell's four corner states are packed into a 4-bit configuration
code, which indexes a fixed case table of edge pairs.  Every edge pair
becomes one segment joining the midpoints of those two edges, scaled by
the tile size.  Midpoints are used unconditionally: the samples carry a
state, not a field value, so there is nothing to interpolate.

The saddle codes 5 and 10 (two diagonal corners "on") use a fixed
pairing instead of a field-average test:

- 5 joins left-top and bottom-right, cutting off the two "off" corners.
- 10 joins left-bottom and top-right, again cutting off the "off" corners.

Every other code shares its segments with its complement ``15 - code``.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass

from marchsq.contour.geometry import CellContour, Edge, Point, Segment
from marchsq.errors import InvalidConfiguration, InvalidDimension
from marchsq.grid.cell import Cell
from marchsq.grid.sample_grid import GridLayout, SampleGrid

logger = logging.getLogger(__name__)

EdgePair = tuple[Edge, Edge]

_NONE: tuple[EdgePair, ...] = ()
_LEFT_BOTTOM = ((Edge.LEFT, Edge.BOTTOM),)
_BOTTOM_RIGHT = ((Edge.BOTTOM, Edge.RIGHT),)
_LEFT_RIGHT = ((Edge.LEFT, Edge.RIGHT),)
_TOP_RIGHT = ((Edge.TOP, Edge.RIGHT),)
_BOTTOM_TOP = ((Edge.BOTTOM, Edge.TOP),)
_LEFT_TOP = ((Edge.LEFT, Edge.TOP),)

CASE_TABLE: dict[int, tuple[EdgePair, ...]] = {
    0: _NONE,
    1: _LEFT_BOTTOM,
    2: _BOTTOM_RIGHT,
    3: _LEFT_RIGHT,
    4: _TOP_RIGHT,
    5: _LEFT_TOP + _BOTTOM_RIGHT,
    6: _BOTTOM_TOP,
    7: _LEFT_TOP,
    8: _LEFT_TOP,
    9: _BOTTOM_TOP,
    10: _LEFT_BOTTOM + _TOP_RIGHT,
    11: _TOP_RIGHT,
    12: _LEFT_RIGHT,
    13: _BOTTOM_RIGHT,
    14: _LEFT_BOTTOM,
    15: _NONE,
}

SADDLE_CODES = frozenset({5, 10})


def config_code(cell: Cell) -> int:
    """Pack the corner states as ``tl<<3 | tr<<2 | br<<1 | bl``."""
    return (
        int(cell.top_left.state) << 3
        | int(cell.top_right.state) << 2
        | int(cell.bot_right.state) << 1
        | int(cell.bot_left.state)
    )


def edges_for(code: int) -> tuple[EdgePair, ...]:
    """Return the edge pairs the contour crosses for a configuration code.

    Raises:
        InvalidConfiguration: If ``code`` is not in ``[0, 15]``.
    """
    try:
        return CASE_TABLE[code]
    except KeyError:
        msg = f"{code} is not a valid marching-squares configuration"
        raise InvalidConfiguration(msg) from None


def edge_midpoint(cell: Cell, edge: Edge, tile_size: float) -> Point:
    """Midpoint of ``edge`` in world coordinates."""
    a_name, b_name = edge.value
    a = getattr(cell, a_name)
    b = getattr(cell, b_name)
    return Point(
        x=(a.x + b.x) * tile_size / 2.0,
        y=(a.y + b.y) * tile_size / 2.0,
    )


def segments_for(cell: Cell, tile_size: float) -> tuple[Segment, ...]:
    """Return the contour segments crossing ``cell``.

    Args:
        cell: The 2x2 neighbourhood to contour.
        tile_size: Scale from lattice units to world units.

    Returns:
        Zero, one, or two segments between edge midpoints.

    Raises:
        InvalidDimension: If ``tile_size`` is not positive.
    """
    if tile_size <= 0:
        msg = f"tile_size must be positive, got {tile_size}"
        raise InvalidDimension(msg)
    return tuple(
        Segment(
            start=edge_midpoint(cell, start, tile_size),
            end=edge_midpoint(cell, end, tile_size),
        )
        for start, end in edges_for(config_code(cell))
    )


@dataclass(frozen=True)
class ContourExtractor:
    """Sweeps a SampleGrid and collects segments per cell.

    Attributes:
        tile_size: World units per lattice step (> 0).
    """

    tile_size: float = 20.0

    def __post_init__(self) -> None:
        if self.tile_size <= 0:
            msg = f"tile_size must be positive, got {self.tile_size}"
            raise InvalidDimension(msg)

    def contour_cell(self, cell: Cell) -> CellContour:
        """Extract a single cell."""
        x, y = cell.origin
        return CellContour(
            x=x,
            y=y,
            code=config_code(cell),
            segments=segments_for(cell, self.tile_size),
        )

    def extract(
        self,
        grid: SampleGrid,
        stride: int | GridLayout = GridLayout.DENSE,
    ) -> list[CellContour]:
        """Contour every swept cell of ``grid`` in sweep order.

        Empty cells are included so each swept cell appears exactly once.

        Args:
            grid: The sample grid to contour.
            stride: Cell spacing or GridLayout passed to ``grid.cells``.
        """
        contours = [self.contour_cell(cell) for cell in grid.cells(stride)]
        if logger.isEnabledFor(logging.DEBUG):
            codes = Counter(c.code for c in contours)
            logger.debug(
                "Extracted %d segments from %d cells (codes: %s)",
                sum(len(c.segments) for c in contours),
                len(contours),
                dict(sorted(codes.items())),
            )
        return contours
