"""
Interactive editing core: input events, state machine, commands and
frame composition. Headless - the Qt layer only feeds events in and draws
the frames out.
"""

from .events import (
    ButtonInput,
    ClearSelection,
    InputPhase,
    PointerButton,
    PointerMoved,
    RotateInput,
    SelectComponent,
    ZoomInput,
)
from .geometry import cell_to_pointer, pointer_to_cell, window_to_pointer
from .commands import (
    Command,
    CommandManager,
    PlaceComponentCommand,
    RemoveComponentCommand,
)
from .state import EditorMode, EditorSession, EditorState, Transition, transition
from .scene import Color, DrawDepth, Drawable, Frame, GridLine, compose_frame
from .export import ExportResult, copy_snapshot_to_clipboard

__all__ = [
    'ButtonInput',
    'ClearSelection',
    'InputPhase',
    'PointerButton',
    'PointerMoved',
    'RotateInput',
    'SelectComponent',
    'ZoomInput',
    'cell_to_pointer',
    'pointer_to_cell',
    'window_to_pointer',
    'Command',
    'CommandManager',
    'PlaceComponentCommand',
    'RemoveComponentCommand',
    'EditorMode',
    'EditorSession',
    'EditorState',
    'Transition',
    'transition',
    'Color',
    'DrawDepth',
    'Drawable',
    'Frame',
    'GridLine',
    'compose_frame',
    'ExportResult',
    'copy_snapshot_to_clipboard',
]
