"""
Tests for editor configuration and its persistence.
"""

import json

import pytest

from spacecraft_builder.config import EditorConfig, load_config, save_config
from spacecraft_builder.model.data_model import OverlapPolicy


class TestDefaults:
    def test_defaults(self):
        config = EditorConfig()
        assert config.zoom == 0.15
        assert config.policy is OverlapPolicy.REPLACE
        assert config.grid_line_count == 10
        assert config.valid_color == "#222222"
        assert config.invalid_color == "#aa1111"
        assert config.ghost_alpha == 0.5
        assert config.rotate_key == "R"

    def test_zoom_clamped_into_bounds(self):
        assert EditorConfig(zoom=50.0).zoom == 1.0
        assert EditorConfig(zoom=0.001).zoom == 0.03

    @pytest.mark.parametrize("kwargs", [
        {'min_zoom': 0.0},
        {'min_zoom': 0.5, 'max_zoom': 0.1},
        {'zoom_step': 1.0},
        {'grid_line_count': -1},
        {'ghost_alpha': 1.5},
        {'overlap_policy': 'merge'},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            EditorConfig(**kwargs)


class TestPersistence:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "settings.json"
        save_config(EditorConfig(zoom=0.3, overlap_policy="stack"), path)
        loaded = load_config(path)
        assert loaded.zoom == 0.3
        assert loaded.policy is OverlapPolicy.STACK

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "absent.json") == EditorConfig()

    def test_malformed_file_gives_defaults(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_config(path) == EditorConfig()
        assert "Invalid settings file" in caplog.text

    def test_invalid_value_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({'zoom_step': 0.5}), encoding="utf-8")
        assert load_config(path) == EditorConfig()

    def test_unknown_keys_ignored(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({'zoom': 0.2, 'theme': 'neon'}), encoding="utf-8")
        assert load_config(path).zoom == 0.2
        assert "theme" in caplog.text
