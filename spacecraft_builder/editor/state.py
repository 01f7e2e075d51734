"""
Editing state machine for the spacecraft builder.

The editor is either IDLE (nothing selected) or PLACING a catalog entry.
Orientation, pointer and zoom are tracked in both modes.

transition() is pure: given a state, an event and the current structure it
returns the next state plus an optional structure edit. EditorSession owns
the state and the structure and applies those edits.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..config import EditorConfig
from ..model.catalog import ComponentType
from ..model.data_model import CellCoord, ComponentPlaceholder, Orientation, SpacecraftStructure
from .commands import Command, CommandManager, PlaceComponentCommand, RemoveComponentCommand
from .events import (
    ButtonInput, ClearSelection, InputPhase, PointerButton, PointerMoved, RotateInput,
    SelectComponent, ZoomInput,
)
from .geometry import pointer_to_cell

logger = logging.getLogger(__name__)


class EditorMode(Enum):
    IDLE = "idle"
    PLACING = "placing"


@dataclass(frozen=True)
class EditorState:
    """Complete editing state apart from the structure itself."""
    selected_component_type: Optional[ComponentType] = None
    pointer: Tuple[float, float] = (0.0, 0.0)
    orientation: Orientation = Orientation.UP
    zoom: float = 0.15

    @property
    def mode(self) -> EditorMode:
        if self.selected_component_type is None:
            return EditorMode.IDLE
        return EditorMode.PLACING

    @property
    def is_placing(self) -> bool:
        return self.selected_component_type is not None

    @property
    def pointer_cell(self) -> CellCoord:
        """Cell under the pointer, derived from the latest pointer sample."""
        return pointer_to_cell(self.pointer, self.zoom)

    def pending_placeholder(self) -> Optional[ComponentPlaceholder]:
        """The placeholder a primary press would create, if placing."""
        if self.selected_component_type is None:
            return None
        return ComponentPlaceholder(
            component_type=self.selected_component_type,
            position=self.pointer_cell,
            orientation=self.orientation,
        )


@dataclass(frozen=True)
class Transition:
    state: EditorState
    command: Optional[Command] = None


def transition(state: EditorState, event: object, structure: SpacecraftStructure,
               config: Optional[EditorConfig] = None) -> Transition:
    """Compute the next state for one input event.

    Never mutates the structure; edits are returned as a Command.
    Unknown events leave the state unchanged.
    """
    config = config or EditorConfig()

    if isinstance(event, PointerMoved):
        return Transition(replace(state, pointer=(float(event.x), float(event.y))))

    if isinstance(event, SelectComponent):
        return Transition(replace(state, selected_component_type=event.component_type))

    if isinstance(event, ClearSelection):
        return Transition(replace(state, selected_component_type=None))

    if isinstance(event, RotateInput):
        if event.phase is not InputPhase.PRESSED:
            return Transition(state)
        return Transition(replace(state, orientation=state.orientation.next()))

    if isinstance(event, ZoomInput):
        if not math.isfinite(event.steps):
            return Transition(state)
        try:
            zoom = state.zoom * config.zoom_step ** event.steps
        except OverflowError:
            zoom = math.inf
        return Transition(replace(state, zoom=config.clamp_zoom(zoom)))

    if isinstance(event, ButtonInput):
        if event.phase is not InputPhase.PRESSED:
            return Transition(state)

        if event.button is PointerButton.PRIMARY:
            placeholder = state.pending_placeholder()
            if placeholder is None:
                return Transition(state)
            return Transition(state, PlaceComponentCommand(placeholder))

        if event.button is PointerButton.SECONDARY:
            if state.is_placing:
                return Transition(replace(state, selected_component_type=None))
            cell = state.pointer_cell
            if structure.placeholder_at(cell) is None:
                return Transition(state)
            return Transition(state, RemoveComponentCommand(cell))

    return Transition(state)


SessionListener = Callable[['EditorSession'], None]


class EditorSession:
    """
    One editing session: the state machine plus the structure it edits.

    Usage:
        session = EditorSession()
        session.select(ComponentType.CENTRAL)
        session.move_pointer(0.0, 0.0)
        session.press_primary()
        session.structure.valid()  # True
    """

    def __init__(self, structure: Optional[SpacecraftStructure] = None,
                 config: Optional[EditorConfig] = None):
        self.config = config or EditorConfig()
        self.structure = structure if structure is not None else SpacecraftStructure()
        self.state = EditorState(zoom=self.config.zoom)
        self.commands = CommandManager()
        self._listeners: List[SessionListener] = []

    # ---------------------------------------------------------------
    # Event handling
    # ---------------------------------------------------------------

    def handle(self, event: object) -> bool:
        """
        Process one input event.

        Returns:
            True if the structure changed.
        """
        result = transition(self.state, event, self.structure, self.config)
        self.state = result.state

        if result.command is None:
            return False
        if not self.commands.execute(result.command, self.structure, self.config.policy):
            return False

        self._notify()
        return True

    def select(self, component_type: ComponentType) -> bool:
        return self.handle(SelectComponent(component_type))

    def move_pointer(self, x: float, y: float) -> bool:
        return self.handle(PointerMoved(x, y))

    def clear_selection(self) -> bool:
        return self.handle(ClearSelection())

    def press_primary(self) -> bool:
        return self.handle(ButtonInput(PointerButton.PRIMARY, InputPhase.PRESSED))

    def press_secondary(self) -> bool:
        return self.handle(ButtonInput(PointerButton.SECONDARY, InputPhase.PRESSED))

    def rotate(self) -> bool:
        return self.handle(RotateInput(InputPhase.PRESSED))

    def zoom_by(self, steps: float) -> bool:
        return self.handle(ZoomInput(steps))

    def reset_zoom(self):
        self.state = replace(self.state, zoom=self.config.zoom)

    # ---------------------------------------------------------------
    # Structure management
    # ---------------------------------------------------------------

    def new_structure(self):
        """Start over with an empty structure."""
        self.load_structure(SpacecraftStructure())

    def load_structure(self, structure: SpacecraftStructure):
        """Replace the edited structure (e.g. after loading a snapshot)."""
        self.structure = structure
        self.commands.clear()
        logger.info("Editing structure with %d components", len(structure))
        self._notify()

    def snapshot(self) -> SpacecraftStructure:
        """Point-in-time copy safe to hand to other consumers."""
        return self.structure.copy()

    def structure_edited(self):
        """Signal an edit made directly on the structure (e.g. tags)."""
        self._notify()

    # ---------------------------------------------------------------
    # Listeners
    # ---------------------------------------------------------------

    def add_listener(self, callback: SessionListener):
        """Call callback(session) after every structure change."""
        self._listeners.append(callback)

    def remove_listener(self, callback: SessionListener):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)
