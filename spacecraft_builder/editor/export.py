"""
Export of structure snapshots to the system clipboard.

The clipboard is an external collaborator: anything it raises is caught
here and reported as an unsuccessful ExportResult. The structure is only
read, never modified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..model.data_model import SpacecraftStructure
from ..model.snapshot_storage import encode_snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    success: bool
    message: str
    text: Optional[str] = None


def copy_snapshot_to_clipboard(structure: SpacecraftStructure, clipboard: Any) -> ExportResult:
    """
    Encode the structure and hand the text to a clipboard.

    Args:
        structure: Structure to export
        clipboard: Object with a setText(str) method (e.g. QClipboard), or None
                   when no clipboard is available

    Returns:
        ExportResult describing the outcome; never raises for clipboard failures
    """
    text = encode_snapshot(structure)

    if clipboard is None:
        logger.warning("Clipboard unavailable, snapshot not copied")
        return ExportResult(False, "Clipboard unavailable", text)

    try:
        clipboard.setText(text)
    except Exception as e:
        logger.warning(f"Clipboard export failed: {e}")
        return ExportResult(False, f"Copy failed: {e}", text)

    return ExportResult(True, f"Copied {len(structure)} components as JSON", text)
