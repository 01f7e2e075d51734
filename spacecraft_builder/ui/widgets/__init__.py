"""
Spacecraft Builder - UI Widgets Module
"""

from .structure_editor import StructureEditorWidget

__all__ = [
    'StructureEditorWidget'
]
