"""
Component catalog - static metadata for every buildable component type.

Provides:
- ComponentType: closed enumeration of component tags
- ComponentSpec: footprint, layering flag, material cost and palette category
- COMPONENT_CATALOG: the balance table, one entry per ComponentType
- Lookup helpers used by geometry, rendering and material accounting

All tunable numbers live here so call sites never hard-code per-type values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple


class ComponentType(Enum):
    """Buildable component types. Values are the tag names used in snapshots."""
    STEEL_BLOCK = "SteelBlock"
    CENTRAL = "Central"
    LASER_WEAPON = "LaserWeapon"
    MISSILE_LAUNCHER = "MissileLauncher"
    RAPTOR_ENGINE = "RaptorEngine"

    def __str__(self) -> str:
        return self.value


# The structure's required anchor
ANCHOR_TYPE = ComponentType.CENTRAL

# Palette categories, in menu order
CATEGORY_BLOCKS = "Blocks"
CATEGORY_WEAPONS = "Weapons"
CATEGORY_ENGINES = "Engines"
CATEGORIES: Tuple[str, ...] = (CATEGORY_BLOCKS, CATEGORY_WEAPONS, CATEGORY_ENGINES)


@dataclass(frozen=True)
class ComponentSpec:
    """Catalog entry for one component type."""
    display_name: str
    category: str
    footprint: Tuple[int, int]                  # (width, height) in cells
    layered: bool = False                       # Sits on top of a base block
    material_cost: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        width, height = self.footprint
        if width <= 0 or height <= 0:
            raise ValueError(f"{self.display_name}: footprint must be positive, got {self.footprint}")
        for material, amount in self.material_cost.items():
            if amount < 0:
                raise ValueError(f"{self.display_name}: negative cost for {material}")


COMPONENT_CATALOG: Dict[ComponentType, ComponentSpec] = {
    # ==========================================================================
    # BLOCKS - structural cells, drawn at base depth
    # ==========================================================================
    ComponentType.STEEL_BLOCK: ComponentSpec(
        display_name="Steel Block",
        category=CATEGORY_BLOCKS,
        footprint=(1, 1),
        material_cost={'steel': 10},
    ),
    ComponentType.CENTRAL: ComponentSpec(
        display_name="Central",
        category=CATEGORY_BLOCKS,
        footprint=(1, 1),
        material_cost={'steel': 20, 'electronics': 15},
    ),
    # ==========================================================================
    # WEAPONS - mounted on top of blocks
    # ==========================================================================
    ComponentType.LASER_WEAPON: ComponentSpec(
        display_name="Laser Weapon",
        category=CATEGORY_WEAPONS,
        footprint=(1, 1),
        layered=True,
        material_cost={'steel': 5, 'electronics': 10, 'crystal': 5},
    ),
    ComponentType.MISSILE_LAUNCHER: ComponentSpec(
        display_name="Missile Launcher",
        category=CATEGORY_WEAPONS,
        footprint=(1, 1),
        layered=True,
        material_cost={'steel': 15, 'electronics': 5, 'explosives': 10},
    ),
    # ==========================================================================
    # ENGINES
    # ==========================================================================
    ComponentType.RAPTOR_ENGINE: ComponentSpec(
        display_name="Raptor Engine",
        category=CATEGORY_ENGINES,
        footprint=(1, 2),
        layered=True,
        material_cost={'steel': 25, 'electronics': 5, 'fuel': 20},
    ),
}

_missing = [t for t in ComponentType if t not in COMPONENT_CATALOG]
if _missing:
    raise RuntimeError(f"Catalog entries missing for: {', '.join(t.value for t in _missing)}")


def get_spec(component_type: ComponentType) -> ComponentSpec:
    """Get the catalog entry for a component type."""
    return COMPONENT_CATALOG[component_type]


def footprint(component_type: ComponentType) -> Tuple[int, int]:
    return COMPONENT_CATALOG[component_type].footprint


def is_layered(component_type: ComponentType) -> bool:
    return COMPONENT_CATALOG[component_type].layered


def material_cost(component_type: ComponentType) -> Dict[str, int]:
    """Material cost of one component. Returns a copy safe to mutate."""
    return dict(COMPONENT_CATALOG[component_type].material_cost)


def get_category(component_type: ComponentType) -> str:
    return COMPONENT_CATALOG[component_type].category


def components_by_category() -> Dict[str, List[ComponentType]]:
    """Group component types by palette category, in menu order."""
    grouped: Dict[str, List[ComponentType]] = {category: [] for category in CATEGORIES}
    for component_type, spec in COMPONENT_CATALOG.items():
        grouped.setdefault(spec.category, []).append(component_type)
    return grouped


def parse_component_type(name: str) -> ComponentType:
    """Look up a component type by its tag name (e.g. "SteelBlock").

    Raises:
        ValueError: If the name is not a known tag.
    """
    try:
        return ComponentType(name)
    except ValueError:
        known = ", ".join(t.value for t in ComponentType)
        raise ValueError(f"Unknown component type {name!r} (expected one of: {known})") from None
