"""
Tests for frame composition: background, grid, draw order and ghost.
"""

import math

import numpy as np
import pytest

from spacecraft_builder.config import EditorConfig
from spacecraft_builder.editor.scene import (
    Color,
    DrawDepth,
    Drawable,
    GHOST_COLOR,
    GridLine,
    component_drawable,
    compose_frame,
    grid_lines,
)
from spacecraft_builder.editor.state import EditorState
from spacecraft_builder.model.catalog import ComponentType
from spacecraft_builder.model.data_model import CellCoord, Orientation, SpacecraftStructure

from conftest import cell_pointer, placeholder


class TestColor:
    def test_from_hex_string_and_int(self):
        assert Color.from_hex("#aa1111") == Color(0xaa, 0x11, 0x11)
        assert Color.from_hex(0x222222) == Color(0x22, 0x22, 0x22)

    def test_hex_and_alpha(self):
        color = Color.from_hex("#888888").with_alpha(0.5)
        assert color.a == 0.5
        assert color.hex() == "#888888"


class TestBackground:
    def test_valid_structure_background(self, central_only):
        frame = compose_frame(central_only, EditorState())
        assert frame.valid
        assert frame.background.hex() == "#222222"

    def test_invalid_structure_background(self, empty_structure):
        frame = compose_frame(empty_structure, EditorState())
        assert not frame.valid
        assert frame.background.hex() == "#aa1111"

    def test_background_follows_config(self, central_only):
        config = EditorConfig(valid_color="#001100")
        assert compose_frame(central_only, EditorState(), config).background.hex() == "#001100"


class TestGrid:
    def test_line_count(self, config):
        lines = grid_lines(0.15, config)
        assert len(lines) == 2 * config.grid_line_count
        assert all(isinstance(line, GridLine) for line in lines)

    def test_lines_sit_on_cell_borders(self, config):
        zoom = 0.15
        lines = grid_lines(zoom, config)
        vertical = lines[:config.grid_line_count]
        xs = [line.start[0] for line in vertical]
        assert xs[0] == pytest.approx(-4.5 * zoom)
        assert xs[-1] == pytest.approx(4.5 * zoom)
        # Borders are half a cell from a centre
        for x in xs:
            assert (x / zoom) % 1.0 == pytest.approx(0.5)

    def test_lines_span_extent(self, config):
        line = grid_lines(0.15, config)[0]
        assert line.start[1] == -config.grid_extent
        assert line.end[1] == config.grid_extent
        assert line.width == config.grid_line_width
        assert line.color.hex() == config.grid_color

    def test_spacing_scales_with_zoom(self, config):
        near = grid_lines(0.3, config)
        far = grid_lines(0.15, config)
        assert near[1].start[0] - near[0].start[0] == pytest.approx(0.3)
        assert far[1].start[0] - far[0].start[0] == pytest.approx(0.15)


class TestComponents:
    def test_layered_drawn_after_base(self):
        structure = SpacecraftStructure([
            placeholder(ComponentType.LASER_WEAPON, 1, 0),
            placeholder(ComponentType.CENTRAL, 0, 0),
            placeholder(ComponentType.RAPTOR_ENGINE, 0, -1),
            placeholder(ComponentType.STEEL_BLOCK, 1, 0),
        ])
        frame = compose_frame(structure, EditorState())
        types = [d.component_type for d in frame.components]
        assert types == [
            ComponentType.CENTRAL,
            ComponentType.STEEL_BLOCK,
            ComponentType.LASER_WEAPON,
            ComponentType.RAPTOR_ENGINE,
        ]
        depths = [d.depth for d in frame.components]
        assert depths == sorted(depths)

    def test_drawable_geometry(self):
        drawable = component_drawable(
            placeholder(ComponentType.RAPTOR_ENGINE, 2, 1, Orientation.RIGHT), 0.15)
        assert drawable.depth is DrawDepth.LAYERED
        assert drawable.center == pytest.approx((0.3, 0.15))
        assert drawable.rotation == pytest.approx(math.pi / 2)
        assert drawable.footprint == (1, 2)
        assert drawable.local_rect == (-0.5, -0.5, 1.0, 2.0)

    def test_corners_unrotated(self):
        drawable = Drawable(ComponentType.STEEL_BLOCK, CellCoord(0, 0), 0.0, (1, 1), 1.0,
                            DrawDepth.BASE)
        expected = np.array([[-0.5, -0.5], [0.5, -0.5], [0.5, 0.5], [-0.5, 0.5]])
        np.testing.assert_allclose(drawable.corners(), expected)

    def test_corners_rotate_about_anchor(self):
        drawable = Drawable(ComponentType.RAPTOR_ENGINE, CellCoord(1, 1), math.pi, (1, 2), 0.5,
                            DrawDepth.LAYERED)
        corners = drawable.corners()
        # Rotated half a turn the engine extends below its anchor cell
        assert corners[:, 1].min() == pytest.approx((1 - 1.5) * 0.5)
        assert corners[:, 1].max() == pytest.approx((1 + 0.5) * 0.5)


class TestGhost:
    def test_no_ghost_when_idle(self, central_only):
        assert compose_frame(central_only, EditorState()).ghost is None

    def test_ghost_follows_pointer(self, central_only, config):
        state = EditorState(selected_component_type=ComponentType.MISSILE_LAUNCHER,
                            pointer=cell_pointer(1, 0), orientation=Orientation.LEFT)
        frame = compose_frame(central_only, state, config)
        ghost = frame.ghost
        assert ghost.ghost
        assert ghost.position == CellCoord(1, 0)
        assert ghost.alpha == config.ghost_alpha
        assert ghost.rotation == pytest.approx(Orientation.LEFT.to_radians())
        assert ghost.fill_color(Color(200, 10, 10)) == GHOST_COLOR.with_alpha(config.ghost_alpha)
        # The pending placement does not affect validity
        assert frame.valid

    def test_draw_order(self, central_only):
        state = EditorState(selected_component_type=ComponentType.STEEL_BLOCK)
        frame = compose_frame(central_only, state)
        order = list(frame.draw_order())
        assert order[0] is frame.background
        assert order[-1] is frame.ghost
        assert len(order) == 1 + len(frame.grid_lines) + 1 + 1

    def test_ghost_alpha_applied_once(self, config):
        """The ghost fill carries exactly the configured alpha; placed components stay opaque."""
        pending = placeholder(ComponentType.STEEL_BLOCK, 0, 0)
        base = Color.from_hex("#8a9199")
        ghost = component_drawable(pending, 0.15, ghost_alpha=config.ghost_alpha)
        assert ghost.fill_color(base) == Color(255, 255, 255, config.ghost_alpha)
        placed = component_drawable(pending, 0.15)
        assert placed.fill_color(base) == base
