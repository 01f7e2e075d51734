"""
Spacecraft layout model: component catalog, structure and validation.

Headless - nothing in this package depends on Qt.
"""

from .catalog import (
    ANCHOR_TYPE,
    CATEGORIES,
    COMPONENT_CATALOG,
    ComponentSpec,
    ComponentType,
    components_by_category,
    get_spec,
)
from .data_model import (
    CellCoord,
    ComponentPlaceholder,
    Orientation,
    OverlapPolicy,
    SnapshotError,
    SpacecraftStructure,
)
from .validation import (
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_structure,
)
from .snapshot_storage import (
    decode_snapshot,
    encode_snapshot,
    load_snapshot,
    save_snapshot,
)

__all__ = [
    'ANCHOR_TYPE',
    'CATEGORIES',
    'COMPONENT_CATALOG',
    'ComponentSpec',
    'ComponentType',
    'components_by_category',
    'get_spec',
    'CellCoord',
    'ComponentPlaceholder',
    'Orientation',
    'OverlapPolicy',
    'SnapshotError',
    'SpacecraftStructure',
    'ValidationIssue',
    'ValidationResult',
    'ValidationSeverity',
    'validate_structure',
    'decode_snapshot',
    'encode_snapshot',
    'load_snapshot',
    'save_snapshot',
]
