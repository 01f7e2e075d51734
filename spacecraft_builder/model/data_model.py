"""
Data model for the spacecraft structure editor.

Defines the core data structures for spacecraft layouts:
- Orientation: 4-way rotation (UP, RIGHT, DOWN, LEFT)
- CellCoord: Grid position (x, y integers)
- ComponentPlaceholder: One component instance at one cell with one orientation
- SpacecraftStructure: Ordered placements plus free-text tags

Rotation System:
- Orientation.next() advances clockwise and wraps LEFT -> UP
- Orientation.to_radians() maps UP=0, RIGHT=pi/2, DOWN=pi, LEFT=3pi/2

Occupancy:
- A placeholder occupies its anchor cell (position) only. Catalog footprints
  scale the drawing but do not take part in overlap or connectivity.
"""

from __future__ import annotations

import copy
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .catalog import ANCHOR_TYPE, ComponentType, material_cost, parse_component_type

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a structure snapshot cannot be decoded."""


class Orientation(Enum):
    """Discrete component rotation, in clockwise order."""
    UP = "Up"
    RIGHT = "Right"
    DOWN = "Down"
    LEFT = "Left"

    def next(self) -> 'Orientation':
        """Return the next orientation clockwise."""
        order = list(Orientation)
        return order[(order.index(self) + 1) % len(order)]

    def to_degrees(self) -> int:
        return list(Orientation).index(self) * 90

    def to_radians(self) -> float:
        return math.radians(self.to_degrees())

    @staticmethod
    def from_name(name: str) -> 'Orientation':
        """Parse a tag name ("Up", "Right", ...)."""
        try:
            return Orientation(name)
        except ValueError:
            known = ", ".join(o.value for o in Orientation)
            raise ValueError(f"Unknown orientation {name!r} (expected one of: {known})") from None


class OverlapPolicy(Enum):
    """What happens when a component is placed on an occupied cell."""
    REPLACE = "replace"  # New placement displaces every previous occupant
    STACK = "stack"      # New placement is appended after the old one


@dataclass(frozen=True)
class CellCoord:
    """Grid cell coordinate."""
    x: int
    y: int

    def __add__(self, other: 'CellCoord') -> 'CellCoord':
        return CellCoord(self.x + other.x, self.y + other.y)

    def neighbors(self) -> List['CellCoord']:
        """The four cardinally adjacent cells."""
        return [
            CellCoord(self.x, self.y + 1),
            CellCoord(self.x + 1, self.y),
            CellCoord(self.x, self.y - 1),
            CellCoord(self.x - 1, self.y),
        ]

    def manhattan(self, other: 'CellCoord') -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class ComponentPlaceholder:
    """A component instance placed on the grid."""
    component_type: ComponentType
    position: CellCoord
    orientation: Orientation = Orientation.UP

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'component_type': self.component_type.value,
            'position': [self.position.x, self.position.y],
            'orientation': self.orientation.value,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'ComponentPlaceholder':
        """Create from dictionary.

        Raises:
            SnapshotError: If a field is missing or malformed.
        """
        if not isinstance(data, dict):
            raise SnapshotError(f"Placement must be an object, got {type(data).__name__}")
        try:
            component_type = parse_component_type(data['component_type'])
            orientation = Orientation.from_name(data.get('orientation', Orientation.UP.value))
            position = data['position']
        except KeyError as e:
            raise SnapshotError(f"Placement missing field {e.args[0]!r}") from None
        except ValueError as e:
            raise SnapshotError(str(e)) from None

        if (not isinstance(position, (list, tuple)) or len(position) != 2
                or not all(isinstance(v, int) and not isinstance(v, bool) for v in position)):
            raise SnapshotError(f"Position must be two integers, got {position!r}")

        return ComponentPlaceholder(
            component_type=component_type,
            position=CellCoord(position[0], position[1]),
            orientation=orientation,
        )


@dataclass
class SpacecraftStructure:
    """Complete spacecraft layout: ordered placements plus free-text tags.

    Insertion order of component_placeholders is the placement order; it
    drives draw order and which duplicate a removal hits first.
    """
    component_placeholders: List[ComponentPlaceholder] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.component_placeholders)

    def __iter__(self) -> Iterator[ComponentPlaceholder]:
        return iter(self.component_placeholders)

    def is_empty(self) -> bool:
        """True when there is nothing to lose: no placements and no tags."""
        return not self.component_placeholders and not self.tags

    # ---------------------------------------------------------------
    # Placement
    # ---------------------------------------------------------------

    def place(self, placeholder: ComponentPlaceholder,
              policy: OverlapPolicy = OverlapPolicy.REPLACE) -> List[ComponentPlaceholder]:
        """Insert a placeholder at the end of the placement sequence.

        Returns:
            Placeholders displaced from the same cell (always empty for STACK).
        """
        displaced: List[ComponentPlaceholder] = []
        if policy is OverlapPolicy.REPLACE:
            displaced = [p for p in self.component_placeholders
                         if p.position == placeholder.position]
            if displaced:
                self.component_placeholders = [
                    p for p in self.component_placeholders
                    if p.position != placeholder.position
                ]

        self.component_placeholders.append(placeholder)
        logger.debug("Placed %s at %s facing %s (displaced %d)",
                     placeholder.component_type, placeholder.position,
                     placeholder.orientation.value, len(displaced))
        return displaced

    def remove_at(self, position: CellCoord) -> Optional[ComponentPlaceholder]:
        """Remove the first placeholder at the given cell, if any."""
        for index, placeholder in enumerate(self.component_placeholders):
            if placeholder.position == position:
                del self.component_placeholders[index]
                logger.debug("Removed %s at %s", placeholder.component_type, position)
                return placeholder
        return None

    def placeholder_at(self, position: CellCoord) -> Optional[ComponentPlaceholder]:
        """Get the last-inserted placeholder occupying a cell, if any."""
        for placeholder in reversed(self.component_placeholders):
            if placeholder.position == position:
                return placeholder
        return None

    def occupied_cells(self) -> Dict[CellCoord, ComponentPlaceholder]:
        """Map of occupied cells to their occupant (last inserted wins)."""
        return {p.position: p for p in self.component_placeholders}

    def central_placeholders(self) -> List[ComponentPlaceholder]:
        return [p for p in self.component_placeholders if p.component_type is ANCHOR_TYPE]

    def clear(self):
        """Remove all placeholders and tags."""
        self.component_placeholders.clear()
        self.tags.clear()

    # ---------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------

    def materials(self) -> Dict[str, int]:
        """Total material usage, keyed by material name (sorted)."""
        totals: Dict[str, int] = {}
        for placeholder in self.component_placeholders:
            for material, amount in material_cost(placeholder.component_type).items():
                totals[material] = totals.get(material, 0) + amount
        return dict(sorted(totals.items()))

    def valid(self) -> bool:
        """True iff there is exactly one Central and every cell is attached to it."""
        from .validation import validate_structure
        return validate_structure(self).is_valid

    # ---------------------------------------------------------------
    # Tags
    # ---------------------------------------------------------------

    def add_tag(self, text: str = "") -> int:
        """Append a tag. Returns its index."""
        self.tags.append(text)
        return len(self.tags) - 1

    def set_tag(self, index: int, text: str):
        self.tags[index] = text

    def remove_tag(self, index: int) -> str:
        return self.tags.pop(index)

    # ---------------------------------------------------------------
    # Snapshot
    # ---------------------------------------------------------------

    def copy(self) -> 'SpacecraftStructure':
        """Point-in-time copy, independent of further edits."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize structure to dictionary for JSON export."""
        return {
            'component_placeholders': [p.to_dict() for p in self.component_placeholders],
            'tags': list(self.tags),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'SpacecraftStructure':
        """Deserialize structure from dictionary.

        Raises:
            SnapshotError: If the data does not describe a structure.
        """
        if not isinstance(data, dict):
            raise SnapshotError(f"Snapshot must be an object, got {type(data).__name__}")

        placements = data.get('component_placeholders', [])
        tags = data.get('tags', [])
        if not isinstance(placements, list):
            raise SnapshotError("'component_placeholders' must be a list")
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise SnapshotError("'tags' must be a list of strings")

        return SpacecraftStructure(
            component_placeholders=[ComponentPlaceholder.from_dict(p) for p in placements],
            tags=list(tags),
        )
