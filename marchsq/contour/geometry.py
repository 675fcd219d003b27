"""Geometry value types emitted by the contour extractor.

Everything here is plain, hashable data.  Consumers (renderers, tests,
exporters) receive these and never call back into the extractor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Edge(Enum):
    """A cell edge, named by the pair of corner attributes it joins."""

    BOTTOM = ("bot_left", "bot_right")
    RIGHT = ("bot_right", "top_right")
    TOP = ("top_left", "top_right")
    LEFT = ("bot_left", "top_left")


@dataclass(frozen=True)
class Point:
    """A 2D point in scaled (world) coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class Segment:
    """A straight contour piece between two edge midpoints."""

    start: Point
    end: Point

    def endpoints(self) -> frozenset[Point]:
        """Return the endpoints without regard to direction."""
        return frozenset((self.start, self.end))


@dataclass(frozen=True)
class CellContour:
    """Extraction result for one swept cell.

    Attributes:
        x: Column of the cell's bottom-left sample.
        y: Row of the cell's bottom-left sample.
        code: 4-bit configuration code of the cell.
        segments: Zero, one, or two segments crossing the cell.
    """

    x: int
    y: int
    code: int
    segments: tuple[Segment, ...]
