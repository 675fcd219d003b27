"""Sample — a single lattice point in the sample grid.

Samples are created once while the grid is built and never change
afterwards, so renderers can keep reading them for point markers.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Sample:
    """A lattice point tagged with a binary state.

    Attributes:
        x: Column position on the lattice.
        y: Row position on the lattice.
        state: True if the point is "on" (inside the contoured region).
    """

    x: int
    y: int
    state: bool = False
