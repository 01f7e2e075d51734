"""
Input events consumed by the editing state machine.

Events are plain immutable values so transitions can be tested without a
real input device. Only the PRESSED phase of a button or key triggers an
action.
"""

from dataclasses import dataclass
from enum import Enum

from ..model.catalog import ComponentType


class InputPhase(Enum):
    PRESSED = "pressed"
    RELEASED = "released"


class PointerButton(Enum):
    PRIMARY = "primary"      # Left click: place
    SECONDARY = "secondary"  # Right click: cancel selection or remove


@dataclass(frozen=True)
class PointerMoved:
    """Pointer position in device-independent coordinates."""
    x: float
    y: float


@dataclass(frozen=True)
class ButtonInput:
    button: PointerButton
    phase: InputPhase = InputPhase.PRESSED


@dataclass(frozen=True)
class RotateInput:
    phase: InputPhase = InputPhase.PRESSED


@dataclass(frozen=True)
class SelectComponent:
    """A catalog entry was chosen for placement."""
    component_type: ComponentType


@dataclass(frozen=True)
class ZoomInput:
    """Zoom by zoom_step ** steps (negative steps zoom out)."""
    steps: float


@dataclass(frozen=True)
class ClearSelection:
    """The palette selection was cleared; return to idle."""
