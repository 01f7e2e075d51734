"""
Tests for the editing state machine and EditorSession.
"""

import pytest

from spacecraft_builder.config import EditorConfig
from spacecraft_builder.editor.commands import PlaceComponentCommand, RemoveComponentCommand
from spacecraft_builder.editor.events import (
    ButtonInput,
    ClearSelection,
    InputPhase,
    PointerButton,
    PointerMoved,
    RotateInput,
    SelectComponent,
    ZoomInput,
)
from spacecraft_builder.editor.state import EditorMode, EditorSession, EditorState, transition
from spacecraft_builder.model.catalog import ComponentType, material_cost
from spacecraft_builder.model.data_model import CellCoord, Orientation, SpacecraftStructure

from conftest import cell_pointer

PRIMARY = ButtonInput(PointerButton.PRIMARY, InputPhase.PRESSED)
SECONDARY = ButtonInput(PointerButton.SECONDARY, InputPhase.PRESSED)


class TestTransition:
    """transition() is pure and returns edits as commands."""

    def test_initial_state_is_idle(self):
        state = EditorState()
        assert state.mode is EditorMode.IDLE
        assert state.orientation is Orientation.UP
        assert state.pending_placeholder() is None

    def test_select_enters_placing(self, empty_structure):
        result = transition(EditorState(), SelectComponent(ComponentType.CENTRAL), empty_structure)
        assert result.state.mode is EditorMode.PLACING
        assert result.command is None

    def test_select_replaces_selection(self, empty_structure):
        state = EditorState(selected_component_type=ComponentType.CENTRAL)
        result = transition(state, SelectComponent(ComponentType.RAPTOR_ENGINE), empty_structure)
        assert result.state.selected_component_type is ComponentType.RAPTOR_ENGINE

    def test_pointer_updates_cell(self, empty_structure):
        result = transition(EditorState(), PointerMoved(*cell_pointer(2, -1)), empty_structure)
        assert result.state.pointer_cell == CellCoord(2, -1)

    def test_primary_while_placing_returns_place_command(self, empty_structure):
        state = EditorState(selected_component_type=ComponentType.STEEL_BLOCK,
                            pointer=cell_pointer(1, 0), orientation=Orientation.DOWN)
        result = transition(state, PRIMARY, empty_structure)
        assert isinstance(result.command, PlaceComponentCommand)
        placed = result.command.placeholder
        assert placed.position == CellCoord(1, 0)
        assert placed.orientation is Orientation.DOWN
        # Still placing; structure untouched until the command runs
        assert result.state.is_placing
        assert len(empty_structure) == 0

    def test_primary_while_idle_does_nothing(self, central_only):
        result = transition(EditorState(), PRIMARY, central_only)
        assert result.command is None
        assert result.state == EditorState()

    def test_secondary_while_placing_cancels(self, central_only):
        state = EditorState(selected_component_type=ComponentType.STEEL_BLOCK)
        result = transition(state, SECONDARY, central_only)
        assert result.state.mode is EditorMode.IDLE
        # Cancelling never removes, even over an occupied cell
        assert result.command is None

    def test_secondary_while_idle_removes(self, central_only):
        result = transition(EditorState(), SECONDARY, central_only)
        assert isinstance(result.command, RemoveComponentCommand)
        assert result.command.position == CellCoord(0, 0)

    def test_secondary_on_empty_cell_is_noop(self, central_only):
        state = EditorState(pointer=cell_pointer(4, 4))
        result = transition(state, SECONDARY, central_only)
        assert result.command is None

    def test_released_phase_ignored(self, central_only):
        state = EditorState(selected_component_type=ComponentType.STEEL_BLOCK)
        for event in (ButtonInput(PointerButton.PRIMARY, InputPhase.RELEASED),
                      ButtonInput(PointerButton.SECONDARY, InputPhase.RELEASED),
                      RotateInput(InputPhase.RELEASED)):
            result = transition(state, event, central_only)
            assert result.state == state
            assert result.command is None

    def test_rotate_in_both_modes(self, empty_structure):
        idle = transition(EditorState(), RotateInput(), empty_structure).state
        assert idle.orientation is Orientation.RIGHT
        placing = EditorState(selected_component_type=ComponentType.LASER_WEAPON)
        assert transition(placing, RotateInput(), empty_structure).state.orientation is Orientation.RIGHT

    def test_four_rotations_cycle(self, empty_structure):
        state = EditorState()
        for _ in range(4):
            state = transition(state, RotateInput(), empty_structure).state
        assert state.orientation is Orientation.UP

    def test_clear_selection(self, empty_structure):
        state = EditorState(selected_component_type=ComponentType.CENTRAL)
        assert transition(state, ClearSelection(), empty_structure).state.mode is EditorMode.IDLE

    def test_zoom_is_clamped(self, empty_structure):
        config = EditorConfig()
        zoomed_in = transition(EditorState(), ZoomInput(100), empty_structure, config).state
        assert zoomed_in.zoom == config.max_zoom
        zoomed_out = transition(EditorState(), ZoomInput(-100), empty_structure, config).state
        assert zoomed_out.zoom == config.min_zoom

    def test_zoom_step(self, empty_structure):
        config = EditorConfig()
        state = transition(EditorState(), ZoomInput(1), empty_structure, config).state
        assert state.zoom == pytest.approx(0.15 * config.zoom_step)

    @pytest.mark.parametrize("steps", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_zoom_ignored(self, empty_structure, steps):
        state = EditorState(zoom=0.2, pointer=(0.45, 0.45))
        result = transition(state, ZoomInput(steps), empty_structure).state
        assert result.zoom == 0.2
        assert result.pointer_cell == CellCoord(2, 2)

    def test_huge_zoom_step_count_clamps(self, empty_structure):
        config = EditorConfig()
        state = transition(EditorState(), ZoomInput(1e6), empty_structure, config).state
        assert state.zoom == config.max_zoom

    def test_unknown_event_ignored(self, central_only):
        state = EditorState(selected_component_type=ComponentType.CENTRAL)
        result = transition(state, "jump", central_only)
        assert result.state == state
        assert result.command is None


class TestEditorSession:
    def test_example_scenario(self, session):
        """Place a Central, attach a block, then remove the block again."""
        session.select(ComponentType.CENTRAL)
        session.move_pointer(*cell_pointer(0, 0))
        assert session.press_primary()
        assert session.structure.valid()
        assert session.structure.materials() == material_cost(ComponentType.CENTRAL)
        before = session.snapshot()

        session.select(ComponentType.STEEL_BLOCK)
        session.move_pointer(*cell_pointer(1, 0))
        assert session.press_primary()
        assert session.structure.valid()
        assert session.structure.materials() == {'electronics': 15, 'steel': 30}

        session.press_secondary()  # cancel placement
        assert session.state.mode is EditorMode.IDLE
        assert len(session.structure) == 2

        assert session.press_secondary()  # remove the block
        assert session.structure == before
        assert session.structure.materials() == material_cost(ComponentType.CENTRAL)

    def test_placing_stays_in_placing(self, session):
        session.select(ComponentType.STEEL_BLOCK)
        for x in range(3):
            session.move_pointer(*cell_pointer(x, 0))
            session.press_primary()
        assert session.state.is_placing
        assert len(session.structure) == 3

    def test_rotation_applies_to_placement(self, session):
        session.select(ComponentType.RAPTOR_ENGINE)
        session.rotate()
        session.rotate()
        session.press_primary()
        assert session.structure.component_placeholders[0].orientation is Orientation.DOWN

    def test_replace_policy_by_default(self, session):
        session.select(ComponentType.CENTRAL)
        session.press_primary()
        session.select(ComponentType.STEEL_BLOCK)
        session.press_primary()
        assert [p.component_type for p in session.structure] == [ComponentType.STEEL_BLOCK]

    def test_stack_policy(self, stack_config):
        session = EditorSession(config=stack_config)
        session.select(ComponentType.CENTRAL)
        session.press_primary()
        session.press_primary()
        assert len(session.structure) == 2
        assert not session.structure.valid()

    def test_listeners_notified_on_change_only(self, session):
        calls = []
        session.add_listener(calls.append)
        session.move_pointer(0.5, 0.5)
        session.rotate()
        assert calls == []

        session.select(ComponentType.CENTRAL)
        session.press_primary()
        assert calls == [session]

        session.remove_listener(calls.append)
        session.press_primary()
        assert len(calls) == 1

    def test_remove_on_empty_cell_not_logged(self, session):
        assert not session.press_secondary()
        assert session.commands.count == 0

    def test_zoom_changes_pointer_cell(self, session):
        session.move_pointer(0.3, 0.0)
        assert session.state.pointer_cell == CellCoord(2, 0)
        session.zoom_by(10)
        assert session.state.pointer_cell.x < 2
        session.reset_zoom()
        assert session.state.zoom == session.config.zoom

    def test_nan_zoom_keeps_session_usable(self, session):
        session.move_pointer(0.3, 0.0)
        session.zoom_by(float("nan"))
        assert session.state.zoom == session.config.zoom
        assert session.state.pointer_cell == CellCoord(2, 0)

    def test_load_structure_clears_log(self, session, small_ship):
        calls = []
        session.add_listener(calls.append)
        session.select(ComponentType.CENTRAL)
        session.press_primary()
        session.load_structure(small_ship)
        assert session.structure is small_ship
        assert session.commands.count == 0
        assert len(calls) == 2

    def test_new_structure(self, session, small_ship):
        session.load_structure(small_ship)
        session.new_structure()
        assert session.structure == SpacecraftStructure()

    def test_snapshot_is_independent(self, session):
        session.select(ComponentType.CENTRAL)
        session.press_primary()
        snapshot = session.snapshot()
        session.press_secondary()
        session.press_secondary()
        assert len(snapshot) == 1
        assert len(session.structure) == 0

    def test_initial_zoom_from_config(self):
        session = EditorSession(config=EditorConfig(zoom=0.3))
        assert session.state.zoom == 0.3

    def test_structure_edited_notifies(self, session):
        calls = []
        session.add_listener(calls.append)
        session.structure.add_tag("frigate")
        session.structure_edited()
        assert calls == [session]
        assert session.commands.count == 0
