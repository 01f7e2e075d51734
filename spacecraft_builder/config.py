"""
Editor configuration and its persistence layer.

Handles save/load of editor settings to ~/.config/spacecraft_builder/settings.json
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .model.data_model import OverlapPolicy

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "settings.json"


@dataclass
class EditorConfig:
    """Tunable editor settings. Colors are "#rrggbb" strings."""
    zoom: float = 0.15
    min_zoom: float = 0.03
    max_zoom: float = 1.0
    zoom_step: float = 1.15
    overlap_policy: str = OverlapPolicy.REPLACE.value

    # Reference grid, in device-independent units
    grid_line_count: int = 10
    grid_extent: float = 0.95
    grid_line_width: float = 0.003

    valid_color: str = "#222222"
    invalid_color: str = "#aa1111"
    grid_color: str = "#888888"
    ghost_alpha: float = 0.5

    rotate_key: str = "R"

    def __post_init__(self):
        if self.min_zoom <= 0 or self.max_zoom <= 0:
            raise ValueError("Zoom bounds must be positive")
        if self.min_zoom > self.max_zoom:
            raise ValueError(f"min_zoom ({self.min_zoom}) exceeds max_zoom ({self.max_zoom})")
        if self.zoom_step <= 1.0:
            raise ValueError("zoom_step must be greater than 1")
        if self.grid_line_count < 0:
            raise ValueError("grid_line_count cannot be negative")
        if not 0.0 <= self.ghost_alpha <= 1.0:
            raise ValueError("ghost_alpha must be within [0, 1]")
        # Raises ValueError for unknown policies
        OverlapPolicy(self.overlap_policy)
        self.zoom = self.clamp_zoom(self.zoom)

    @property
    def policy(self) -> OverlapPolicy:
        return OverlapPolicy(self.overlap_policy)

    def clamp_zoom(self, zoom: float) -> float:
        return min(max(zoom, self.min_zoom), self.max_zoom)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'EditorConfig':
        """Create from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(EditorConfig)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return EditorConfig(**{k: v for k, v in data.items() if k in known})


def get_config_dir() -> Path:
    """
    Get the directory for storing editor settings.

    Returns:
        Path to ~/.config/spacecraft_builder/
        Creates the directory if it doesn't exist.
    """
    config_dir = Path.home() / ".config" / "spacecraft_builder"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def load_config(file_path: Optional[Union[str, Path]] = None) -> EditorConfig:
    """
    Load editor settings.

    Args:
        file_path: Settings file (defaults to the user config directory)

    Returns:
        The loaded EditorConfig, or defaults if the file is missing or invalid
    """
    path = Path(file_path) if file_path else get_config_dir() / CONFIG_FILENAME
    if not path.exists():
        return EditorConfig()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")
        return EditorConfig.from_dict(data)
    except (json.JSONDecodeError, TypeError, ValueError) as e:
        logger.warning("Invalid settings file %s, using defaults: %s", path, e)
        return EditorConfig()


def save_config(config: EditorConfig, file_path: Optional[Union[str, Path]] = None) -> Path:
    """
    Save editor settings.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(file_path) if file_path else get_config_dir() / CONFIG_FILENAME
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2)
    return path
