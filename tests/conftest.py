"""Shared fixtures for the marchsq test suite."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import pytest

from marchsq.contour.extractor import ContourExtractor
from marchsq.grid.cell import Cell
from marchsq.grid.sample import Sample
from marchsq.grid.sources import RandomStates
from marchsq.scene.config import ContourConfig

TILE = 20.0


def cell_for_code(code: int, x: int = 0, y: int = 0) -> Cell:
    """Build a cell at ``(x, y)`` whose corner states encode ``code``."""
    return Cell(
        bot_left=Sample(x=x, y=y, state=bool(code & 1)),
        bot_right=Sample(x=x + 1, y=y, state=bool(code & 2)),
        top_right=Sample(x=x + 1, y=y + 1, state=bool(code & 4)),
        top_left=Sample(x=x, y=y + 1, state=bool(code & 8)),
    )


@pytest.fixture
def make_cell() -> Callable[..., Cell]:
    """Factory for unit cells with a chosen configuration code."""
    return cell_for_code


@pytest.fixture
def seeded_source() -> RandomStates:
    """A deterministic random state source for reproducible tests."""
    return RandomStates(seed=12345)


@pytest.fixture
def extractor() -> ContourExtractor:
    """Extractor with the default 20-unit tile."""
    return ContourExtractor(tile_size=TILE)


@pytest.fixture
def small_config() -> ContourConfig:
    """A small 8x6 scene config for fast tests."""
    return ContourConfig(seed=777, grid_width=8, grid_height=6, tile_size=TILE)


@pytest.fixture
def reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by ``setup_logging`` after the test."""
    yield
    logger = logging.getLogger("marchsq")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
