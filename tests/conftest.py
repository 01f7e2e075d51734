"""
Shared test fixtures for Spacecraft Builder tests.

Provides structures, placeholders and editor sessions. Nothing here
touches Qt; the editor core is tested headless.
"""

import pytest

from spacecraft_builder.config import EditorConfig
from spacecraft_builder.editor.state import EditorSession
from spacecraft_builder.model.catalog import ComponentType
from spacecraft_builder.model.data_model import (
    CellCoord,
    ComponentPlaceholder,
    Orientation,
    SpacecraftStructure,
)


def placeholder(component_type: ComponentType, x: int, y: int,
                orientation: Orientation = Orientation.UP) -> ComponentPlaceholder:
    """Shorthand for building a placeholder at (x, y)."""
    return ComponentPlaceholder(component_type, CellCoord(x, y), orientation)


@pytest.fixture
def empty_structure() -> SpacecraftStructure:
    return SpacecraftStructure()


@pytest.fixture
def central_only() -> SpacecraftStructure:
    """A single Central at the origin."""
    return SpacecraftStructure([placeholder(ComponentType.CENTRAL, 0, 0)])


@pytest.fixture
def small_ship() -> SpacecraftStructure:
    """Central with a block on each side and a laser on top of the right block.

    Layout:
        (-1,0) SteelBlock  (0,0) Central  (1,0) SteelBlock  (2,0) LaserWeapon
    """
    return SpacecraftStructure([
        placeholder(ComponentType.CENTRAL, 0, 0),
        placeholder(ComponentType.STEEL_BLOCK, 1, 0),
        placeholder(ComponentType.STEEL_BLOCK, -1, 0),
        placeholder(ComponentType.LASER_WEAPON, 2, 0, Orientation.RIGHT),
    ], tags=["scout"])


@pytest.fixture
def config() -> EditorConfig:
    return EditorConfig()


@pytest.fixture
def stack_config() -> EditorConfig:
    return EditorConfig(overlap_policy="stack")


@pytest.fixture
def session(config) -> EditorSession:
    return EditorSession(config=config)


def cell_pointer(x: int, y: int, zoom: float = 0.15):
    """Pointer coordinates of a cell centre at the given zoom."""
    return (x * zoom, y * zoom)
