"""Tests for marchsq.scene - config loading and the contour scene."""

from pathlib import Path

import pytest

from marchsq.grid.sample_grid import GridLayout
from marchsq.scene.config import ContourConfig
from marchsq.scene.engine import ContourScene

DEFAULT_YAML = Path(__file__).resolve().parent.parent / "config" / "default.yaml"


class TestContourConfig:
    """Tests for YAML config loading."""

    def test_defaults(self) -> None:
        cfg = ContourConfig()
        assert cfg.seed == 42
        assert cfg.tile_size == 20.0
        assert cfg.layout is GridLayout.DENSE

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text(
            "seed: 99\ngrid_width: 16\ngrid_height: 12\ntile_size: 5\nlayout: tiled\n",
        )
        cfg = ContourConfig.from_yaml(yaml_file)
        assert cfg.seed == 99
        assert cfg.grid_width == 16
        assert cfg.grid_height == 12
        assert cfg.tile_size == 5.0
        assert cfg.layout is GridLayout.TILED

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert ContourConfig.from_yaml(yaml_file) == ContourConfig()

    def test_unknown_layout(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("layout: spiral\n")
        with pytest.raises(ValueError, match="spiral"):
            ContourConfig.from_yaml(yaml_file)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ContourConfig.from_yaml(tmp_path / "nope.yaml")

    def test_shipped_default_config(self) -> None:
        cfg = ContourConfig.from_yaml(DEFAULT_YAML)
        assert cfg.grid_width > 1
        assert cfg.grid_height > 1
        assert cfg.layout is GridLayout.DENSE


class TestContourScene:
    """Tests for building and contouring a scene."""

    def test_scene_builds_grid(self, small_config: ContourConfig) -> None:
        scene = ContourScene(config=small_config)
        assert scene.grid.width == 8
        assert scene.grid.height == 6
        assert scene.contours == []

    def test_dense_run_covers_all_cells(self, small_config: ContourConfig) -> None:
        scene = ContourScene(config=small_config)
        contours = scene.run()
        assert len(contours) == 7 * 5
        assert scene.contours is contours

    def test_tiled_run(self) -> None:
        cfg = ContourConfig(seed=1, grid_width=4, grid_height=4, layout=GridLayout.TILED)
        scene = ContourScene(config=cfg)
        assert len(scene.run()) == 1

    def test_segment_count_matches_segments(self, small_config: ContourConfig) -> None:
        scene = ContourScene(config=small_config)
        scene.run()
        assert scene.segment_count == len(list(scene.segments()))

    def test_custom_source(self, small_config: ContourConfig) -> None:
        scene = ContourScene(config=small_config, source=lambda x, y: x < 4)
        scene.run()
        # Vertical boundary: one bottom-top segment per cell row at x=3
        crossing = [c for c in scene.contours if c.segments]
        assert {c.x for c in crossing} == {3}
        assert all(c.code == 9 for c in crossing)
        assert scene.segment_count == 5

    def test_determinism(self, small_config: ContourConfig) -> None:
        """Same seed must produce identical samples and segments."""
        scene_a = ContourScene(config=small_config)
        scene_b = ContourScene(config=small_config)
        assert scene_a.grid.samples == scene_b.grid.samples
        assert scene_a.run() == scene_b.run()
