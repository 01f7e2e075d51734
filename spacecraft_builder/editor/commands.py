"""
Command pattern for structure edits.

Provides:
- Command ABC for all structure mutations
- CommandManager that executes commands and keeps the placement log
- Concrete commands: PlaceComponent, RemoveComponent

The placement log records executed edits in order. It carries no undo
state; history navigation is not part of the editor.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from ..model.data_model import (
    CellCoord, ComponentPlaceholder, OverlapPolicy, SpacecraftStructure,
)

logger = logging.getLogger(__name__)


class Command(ABC):
    """Abstract base class for structure edits."""

    @abstractmethod
    def execute(self, structure: SpacecraftStructure,
                policy: OverlapPolicy = OverlapPolicy.REPLACE) -> bool:
        """
        Execute the command.

        Returns:
            True if the structure changed, False otherwise.
        """
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of this command."""
        pass


@dataclass
class PlaceComponentCommand(Command):
    """Command to place a new component on the grid."""

    placeholder: ComponentPlaceholder

    # Set after execution
    _displaced: List[ComponentPlaceholder] = field(default_factory=list, repr=False)

    def execute(self, structure: SpacecraftStructure,
                policy: OverlapPolicy = OverlapPolicy.REPLACE) -> bool:
        self._displaced = structure.place(self.placeholder, policy)
        return True

    @property
    def description(self) -> str:
        p = self.placeholder
        text = f"Place {p.component_type} at {p.position} facing {p.orientation.value}"
        if self._displaced:
            replaced = ", ".join(str(d.component_type) for d in self._displaced)
            text += f" (replaced {replaced})"
        return text

    @property
    def displaced(self) -> List[ComponentPlaceholder]:
        """Placeholders removed from the target cell (available after execute)."""
        return list(self._displaced)


@dataclass
class RemoveComponentCommand(Command):
    """Command to remove the first component at a cell."""

    position: CellCoord

    # Set after execution
    _removed: Optional[ComponentPlaceholder] = field(default=None, repr=False)

    def execute(self, structure: SpacecraftStructure,
                policy: OverlapPolicy = OverlapPolicy.REPLACE) -> bool:
        self._removed = structure.remove_at(self.position)
        return self._removed is not None

    @property
    def description(self) -> str:
        if self._removed:
            return f"Remove {self._removed.component_type} at {self.position}"
        return f"Remove component at {self.position}"

    @property
    def removed(self) -> Optional[ComponentPlaceholder]:
        return self._removed


class CommandManager:
    """
    Executes commands and records the placement log.

    Usage:
        manager = CommandManager()
        manager.execute(PlaceComponentCommand(placeholder), structure)
        manager.history  # ["Place Central at (0, 0) facing Up"]
    """

    def __init__(self, max_log_depth: int = 500):
        self._log: List[Command] = []
        self._max_depth = max_log_depth

    def execute(self, command: Command, structure: SpacecraftStructure,
                policy: OverlapPolicy = OverlapPolicy.REPLACE) -> bool:
        """
        Execute a command and append it to the log.

        Returns:
            True if the command changed the structure.
        """
        if not command.execute(structure, policy):
            return False

        self._log.append(command)
        if len(self._log) > self._max_depth:
            self._log.pop(0)

        logger.info(command.description)
        return True

    @property
    def history(self) -> List[str]:
        """Descriptions of executed commands, oldest first."""
        return [c.description for c in self._log]

    @property
    def last_description(self) -> Optional[str]:
        if self._log:
            return self._log[-1].description
        return None

    def clear(self):
        """Clear the placement log."""
        self._log.clear()

    @property
    def count(self) -> int:
        return len(self._log)
