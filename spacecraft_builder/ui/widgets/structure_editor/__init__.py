"""
Grid-based structure editor for spacecraft design.

Provides a canvas for placing components around a Central, with live
validation, material totals and JSON snapshot export.
"""

from .component_item import ComponentItem
from .grid_canvas import GridCanvas
from .materials_panel import MaterialsPanel
from .palette_widget import ComponentButton, PaletteWidget
from .structure_editor_widget import StructureEditorWidget
from .structure_panel import StructurePanel
from .validation_panel import ValidationPanel

__all__ = [
    'ComponentItem',
    'GridCanvas',
    'MaterialsPanel',
    'ComponentButton',
    'PaletteWidget',
    'StructureEditorWidget',
    'StructurePanel',
    'ValidationPanel',
]
