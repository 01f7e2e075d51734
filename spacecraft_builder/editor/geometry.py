"""
Coordinate conversion between the pointer feed and the integer grid.

Pointer coordinates live in a device-independent space centred on the
viewport: [-1, 1] on both axes, +y up. A cell's centre sits at cell * zoom.
"""

from typing import Sequence, Tuple

import numpy as np

from ..model.data_model import CellCoord

_HALF_CELL = np.array([0.5, 0.5])


def pointer_to_cell(pointer: Sequence[float], zoom: float) -> CellCoord:
    """Map a pointer coordinate to the grid cell under it.

    cell = floor(pointer / zoom + (0.5, 0.5))
    """
    if zoom <= 0:
        raise ValueError(f"zoom must be positive, got {zoom}")
    cell = np.floor(np.asarray(pointer, dtype=np.float64) / zoom + _HALF_CELL)
    return CellCoord(int(cell[0]), int(cell[1]))


def cell_to_pointer(cell: CellCoord, zoom: float) -> Tuple[float, float]:
    """Pointer coordinate of a cell's centre."""
    center = np.array([cell.x, cell.y], dtype=np.float64) * zoom
    return (float(center[0]), float(center[1]))


def window_to_pointer(x: float, y: float, width: float, height: float) -> Tuple[float, float]:
    """Convert widget pixel coordinates (origin top-left, +y down) to pointer space."""
    if width <= 0 or height <= 0:
        return (0.0, 0.0)
    normalized = np.array([x / width, -y / height]) * 2.0 - np.array([1.0, -1.0])
    return (float(normalized[0]), float(normalized[1]))
