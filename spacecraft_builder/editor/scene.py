"""
Frame composition for the structure view.

Derives everything a renderer needs for one frame from the structure and
the editor state alone:
- Background color encoding structure validity
- Reference grid lines at the current zoom
- One drawable per placeholder (base depth, then layered)
- Optional translucent ghost for the pending placement

Draw order, back to front: background, grid lines, base components,
layered components, ghost. All coordinates are device-independent
(pointer space, +y up).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np

from ..config import EditorConfig
from ..model.catalog import ComponentType, footprint, is_layered
from ..model.data_model import CellCoord, ComponentPlaceholder, SpacecraftStructure
from .state import EditorState


class DrawDepth(IntEnum):
    """Depth bands, back to front."""
    BACKGROUND = 0
    GRID = 1
    BASE = 2
    LAYERED = 3
    GHOST = 4


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: float = 1.0

    @staticmethod
    def from_hex(value: Union[str, int], alpha: float = 1.0) -> 'Color':
        """Parse "#rrggbb" or 0xrrggbb."""
        if isinstance(value, str):
            value = int(value.lstrip('#'), 16)
        return Color((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha)

    def with_alpha(self, alpha: float) -> 'Color':
        return Color(self.r, self.g, self.b, alpha)

    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


# Pending placement overlay
GHOST_COLOR = Color(255, 255, 255)


@dataclass(frozen=True)
class GridLine:
    start: Tuple[float, float]
    end: Tuple[float, float]
    width: float
    color: Color


@dataclass(frozen=True)
class Drawable:
    """One component visual: a footprint-sized rectangle rotated about its anchor cell."""
    component_type: ComponentType
    position: CellCoord
    rotation: float                 # Radians
    footprint: Tuple[int, int]
    zoom: float
    depth: DrawDepth
    alpha: float = 1.0

    @property
    def ghost(self) -> bool:
        return self.depth == DrawDepth.GHOST

    def fill_color(self, base: Color) -> Color:
        """Fill for this visual. The ghost is a white overlay carrying its own alpha."""
        if self.ghost:
            return GHOST_COLOR.with_alpha(self.alpha)
        return base.with_alpha(self.alpha)

    @property
    def center(self) -> Tuple[float, float]:
        """Anchor cell centre in device space."""
        return (self.position.x * self.zoom, self.position.y * self.zoom)

    @property
    def local_rect(self) -> Tuple[float, float, float, float]:
        """(x, y, width, height) in cell units relative to the anchor centre, before rotation."""
        width, height = self.footprint
        return (-0.5, -0.5, float(width), float(height))

    def corners(self) -> np.ndarray:
        """Device-space corners (4x2), counter-clockwise from the anchor corner."""
        x, y, w, h = self.local_rect
        local = np.array([[x, y], [x + w, y], [x + w, y + h], [x, y + h]])
        c, s = np.cos(self.rotation), np.sin(self.rotation)
        rotation = np.array([[c, -s], [s, c]])
        return (local @ rotation.T + np.array([self.position.x, self.position.y])) * self.zoom


@dataclass
class Frame:
    """Everything drawn for one frame."""
    background: Color
    valid: bool
    grid_lines: List[GridLine] = field(default_factory=list)
    components: List[Drawable] = field(default_factory=list)
    ghost: Optional[Drawable] = None

    def draw_order(self) -> Iterator[object]:
        """Yield primitives back to front."""
        yield self.background
        yield from self.grid_lines
        yield from self.components
        if self.ghost is not None:
            yield self.ghost


def component_drawable(placeholder: ComponentPlaceholder, zoom: float,
                       ghost_alpha: Optional[float] = None) -> Drawable:
    """Build the drawable for a placeholder (or a ghost when ghost_alpha is given)."""
    if ghost_alpha is not None:
        depth = DrawDepth.GHOST
    elif is_layered(placeholder.component_type):
        depth = DrawDepth.LAYERED
    else:
        depth = DrawDepth.BASE

    return Drawable(
        component_type=placeholder.component_type,
        position=placeholder.position,
        rotation=placeholder.orientation.to_radians(),
        footprint=footprint(placeholder.component_type),
        zoom=zoom,
        depth=depth,
        alpha=1.0 if ghost_alpha is None else ghost_alpha,
    )


def grid_lines(zoom: float, config: EditorConfig) -> List[GridLine]:
    """Evenly spaced vertical then horizontal lines on the cell borders around the origin."""
    color = Color.from_hex(config.grid_color)
    count = config.grid_line_count
    extent = config.grid_extent
    lines: List[GridLine] = []

    offsets = [(i - (count - 1) * 0.5) * zoom for i in range(count)]
    for x in offsets:
        lines.append(GridLine((x, -extent), (x, extent), config.grid_line_width, color))
    for y in offsets:
        lines.append(GridLine((-extent, y), (extent, y), config.grid_line_width, color))
    return lines


def compose_frame(structure: SpacecraftStructure, state: EditorState,
                  config: Optional[EditorConfig] = None) -> Frame:
    """Compose the frame for the current structure and editor state."""
    config = config or EditorConfig()
    valid = structure.valid()
    background = Color.from_hex(config.valid_color if valid else config.invalid_color)

    drawables = [component_drawable(p, state.zoom) for p in structure.component_placeholders]
    # Stable sort keeps insertion order within each depth band
    drawables.sort(key=lambda d: d.depth)

    ghost = None
    pending = state.pending_placeholder()
    if pending is not None:
        ghost = component_drawable(pending, state.zoom, ghost_alpha=config.ghost_alpha)

    return Frame(
        background=background,
        valid=valid,
        grid_lines=grid_lines(state.zoom, config),
        components=drawables,
        ghost=ghost,
    )
