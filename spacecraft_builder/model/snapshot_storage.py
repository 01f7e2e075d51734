"""
Snapshot persistence for spacecraft structures.

Encodes a structure as JSON text (the flat snapshot record) and saves/loads
it to files. Decoding failures raise SnapshotError; file system errors
propagate as OSError for the caller to report.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .data_model import SnapshotError, SpacecraftStructure

logger = logging.getLogger(__name__)

SNAPSHOT_SUFFIX = ".json"


def encode_snapshot(structure: SpacecraftStructure, indent: Optional[int] = None) -> str:
    """Encode a structure as JSON text."""
    return json.dumps(structure.to_dict(), indent=indent, ensure_ascii=False)


def decode_snapshot(text: str) -> SpacecraftStructure:
    """Decode JSON text produced by encode_snapshot.

    Raises:
        SnapshotError: If the text is not valid JSON or not a structure.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON: {e}") from e
    return SpacecraftStructure.from_dict(data)


def save_snapshot(structure: SpacecraftStructure, file_path: Union[str, Path]) -> Path:
    """
    Save a structure snapshot to a file.

    Args:
        structure: The structure to save
        file_path: Destination path

    Returns:
        Path to the saved file

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(file_path)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(encode_snapshot(structure, indent=2))
    logger.info("Saved %d components to %s", len(structure), path)
    return path


def load_snapshot(file_path: Union[str, Path]) -> SpacecraftStructure:
    """
    Load a structure snapshot from a file.

    Raises:
        OSError: If the file cannot be read
        SnapshotError: If the file content is not a structure snapshot
    """
    path = Path(file_path)
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    try:
        structure = decode_snapshot(text)
    except SnapshotError as e:
        logger.warning("Failed to load snapshot %s: %s", path, e)
        raise
    logger.info("Loaded %d components from %s", len(structure), path)
    return structure
