"""Cell — the 2x2 sample neighbourhood that marching squares works on."""

from __future__ import annotations

from dataclasses import dataclass

from marchsq.grid.sample import Sample


@dataclass(frozen=True)
class Cell:
    """Four corner samples of one marching-squares unit.

    Corners sit at lattice positions ``(x, y)``, ``(x+1, y)``,
    ``(x+1, y+1)`` and ``(x, y+1)`` respectively.

    Attributes:
        bot_left: Sample at the cell origin.
        bot_right: Sample one column to the right.
        top_right: Sample diagonally opposite the origin.
        top_left: Sample one row up.
    """

    bot_left: Sample
    bot_right: Sample
    top_right: Sample
    top_left: Sample

    @property
    def origin(self) -> tuple[int, int]:
        """Lattice coordinates identifying this cell."""
        return (self.bot_left.x, self.bot_left.y)
