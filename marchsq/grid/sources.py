"""State sources — callables deciding each sample's on/off state.

A source is any ``(x, y) -> bool`` callable.  ``SampleGrid.build`` asks
it once per lattice point, so swapping sources is how callers plug in a
seeded random field, a thresholded scalar field, or a hand-written
pattern for tests.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from marchsq.errors import OutOfRange

if TYPE_CHECKING:
    from numpy.random import Generator
    from numpy.typing import ArrayLike

StateSource = Callable[[int, int], bool]


@dataclass
class RandomStates:
    """Uniform random states, independent per lattice point.

    Every column ``x`` owns a generator seeded by ``(seed, x)``; the
    point ``(x, y)`` takes the ``y``-th value of that column's stream
    and is "on" when the value rounds up to 1.  Draws are cached and
    extended in stream order, so the state is a pure function of
    coordinate and seed no matter which points are asked for first.

    Attributes:
        seed: Non-negative base seed.  ``None`` draws fresh entropy once,
            so a single source is still consistent with itself.

    Raises:
        ValueError: If ``seed`` is negative.
    """

    seed: int | None = None
    _entropy: int = field(init=False, repr=False)
    _columns: dict[int, tuple[Generator, list[float]]] = field(
        init=False,
        repr=False,
        compare=False,
        default_factory=dict,
    )

    def __post_init__(self) -> None:
        """Fix the base entropy for this source."""
        if self.seed is None:
            self._entropy = int(np.random.SeedSequence().entropy)
        elif self.seed < 0:
            msg = f"seed must be a non-negative integer, got {self.seed}"
            raise ValueError(msg)
        else:
            self._entropy = self.seed

    def __call__(self, x: int, y: int) -> bool:
        if x < 0 or y < 0:
            msg = f"random states are only defined for x, y >= 0, got ({x}, {y})"
            raise OutOfRange(msg)
        if x not in self._columns:
            self._columns[x] = (np.random.default_rng([self._entropy, x]), [])
        rng, values = self._columns[x]
        if y >= len(values):
            values.extend(rng.random(y + 1 - len(values)).tolist())
        # Round half up
        return values[y] >= 0.5


def threshold_field(values: ArrayLike, threshold: float = 0.5) -> StateSource:
    """Build a source from a scalar field indexed as ``values[x][y]``.

    A field larger than the grid is read as a window anchored at the
    origin; lookups outside the field raise ``OutOfRange``.

    Args:
        values: 2D array-like of field values.
        threshold: Points strictly above this value are "on".

    Returns:
        A state source reading the thresholded field.

    Raises:
        ValueError: If ``values`` is not two-dimensional.
    """
    grid = np.asarray(values, dtype=np.float64)
    if grid.ndim != 2:
        msg = f"field must be 2D (indexed [x][y]), got shape {grid.shape}"
        raise ValueError(msg)
    mask = grid > threshold
    columns, rows = mask.shape

    def source(x: int, y: int) -> bool:
        if not (0 <= x < columns and 0 <= y < rows):
            msg = f"sample ({x}, {y}) lies outside field of shape {mask.shape}"
            raise OutOfRange(msg)
        return bool(mask[x, y])

    return source
