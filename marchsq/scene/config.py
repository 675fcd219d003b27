"""Config — load contour scene parameters from YAML files.

Grid size, tile scale, layout, and seed live in YAML and are parsed
into a typed dataclass here, so runs can be reproduced from a file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from marchsq.grid.sample_grid import GridLayout


@dataclass
class ContourConfig:
    """Top-level contour scene configuration.

    Attributes:
        seed: Base seed for the random state source.  ``None`` draws
            fresh entropy on every run.
        grid_width: Number of lattice columns.
        grid_height: Number of lattice rows.
        tile_size: World units per lattice step.
        layout: Cell layout (dense overlapping cells or disjoint tiles).
    """

    seed: int | None = 42
    grid_width: int = 60
    grid_height: int = 40
    tile_size: float = 20.0
    layout: GridLayout = GridLayout.DENSE

    @classmethod
    def from_yaml(cls, path: str | Path) -> ContourConfig:
        """Load configuration from a YAML file.

        Missing keys fall back to the dataclass defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated ContourConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If ``layout`` names an unknown layout.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        layout = data.get("layout")
        return cls(
            seed=data.get("seed", cls.seed),
            grid_width=data.get("grid_width", cls.grid_width),
            grid_height=data.get("grid_height", cls.grid_height),
            tile_size=float(data.get("tile_size", cls.tile_size)),
            layout=GridLayout.from_name(layout) if layout else cls.layout,
        )
