"""
Validation system for spacecraft structures.

Provides:
- Anchor check (exactly one Central component)
- Connectivity validation (BFS over cardinally adjacent occupied cells)
- Overlap detection for cells holding more than one placeholder

A structure is valid iff it has exactly one Central and every placeholder's
cell is reachable from the Central's cell. Empty structures are invalid.
"""

from __future__ import annotations

import logging
from collections import Counter, deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set

from .catalog import ANCHOR_TYPE
from .data_model import CellCoord, ComponentPlaceholder, SpacecraftStructure

logger = logging.getLogger(__name__)


class ValidationSeverity(Enum):
    """Severity level for validation issues."""
    ERROR = "error"


@dataclass
class ValidationIssue:
    """A single validation issue."""
    severity: ValidationSeverity
    message: str
    position: Optional[CellCoord] = None

    @property
    def is_error(self) -> bool:
        return self.severity == ValidationSeverity.ERROR


@dataclass
class ValidationResult:
    """Result of structure validation."""
    issues: List[ValidationIssue]
    central_count: int = 0
    connected_count: int = 0
    placeholder_count: int = 0
    disconnected_cells: List[CellCoord] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if structure passes validation (no errors)."""
        return not any(i.is_error for i in self.issues)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.is_error)


class StructureValidator:
    """Validator for spacecraft structures."""

    def validate(self, structure: SpacecraftStructure) -> ValidationResult:
        """Run all validation checks on the structure."""
        placeholders = structure.component_placeholders

        if not placeholders:
            return ValidationResult(
                issues=[ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    message="Structure is empty",
                )],
            )

        issues: List[ValidationIssue] = []
        centrals = [p for p in placeholders if p.component_type is ANCHOR_TYPE]
        issues.extend(self._check_anchor(centrals))
        issues.extend(self._check_overlaps(placeholders))

        connected_count = 0
        disconnected: List[CellCoord] = []
        if len(centrals) == 1:
            cells = structure.occupied_cells()
            visited = self.get_reachable_from(cells, centrals[0].position)
            connected_count = len(visited)
            disconnected = [cell for cell in cells if cell not in visited]
            for cell in disconnected:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    message=f"Disconnected: {cells[cell].component_type} at {cell}",
                    position=cell,
                ))

        result = ValidationResult(
            issues=issues,
            central_count=len(centrals),
            connected_count=connected_count,
            placeholder_count=len(placeholders),
            disconnected_cells=disconnected,
        )
        logger.debug("Validated %d placeholders: %d errors, %d connected",
                     result.placeholder_count, result.error_count, result.connected_count)
        return result

    def _check_anchor(self, centrals: List[ComponentPlaceholder]) -> List[ValidationIssue]:
        """Exactly one Central is required."""
        if not centrals:
            return [ValidationIssue(
                severity=ValidationSeverity.ERROR,
                message="No Central component",
            )]
        if len(centrals) > 1:
            return [
                ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    message=f"{len(centrals)} Central components (exactly one required)",
                    position=central.position,
                )
                for central in centrals[1:]
            ]
        return []

    def _check_overlaps(self, placeholders: List[ComponentPlaceholder]) -> List[ValidationIssue]:
        """Cells holding more than one placeholder can never all be counted as attached."""
        counts = Counter(p.position for p in placeholders)
        return [
            ValidationIssue(
                severity=ValidationSeverity.ERROR,
                message=f"Overlapping components at {cell}",
                position=cell,
            )
            for cell, count in counts.items() if count > 1
        ]

    def get_reachable_from(self, cells: Dict[CellCoord, ComponentPlaceholder],
                           start: CellCoord) -> Set[CellCoord]:
        """Get all occupied cells reachable from a start cell via cardinal adjacency."""
        if start not in cells:
            return set()

        visited: Set[CellCoord] = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbor in current.neighbors():
                if neighbor in cells and neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        return visited


# Singleton validator instance
_validator = StructureValidator()


def validate_structure(structure: SpacecraftStructure) -> ValidationResult:
    """Validate a spacecraft structure."""
    return _validator.validate(structure)
