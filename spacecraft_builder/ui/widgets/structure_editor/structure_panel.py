"""
Structure data panel: free-form tags, a read-only JSON view of the current
snapshot and a button copying that JSON to the clipboard.
"""

import logging
from typing import Optional

from PyQt5.QtWidgets import (
    QApplication, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QListWidget,
    QListWidgetItem, QPushButton, QPlainTextEdit,
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from spacecraft_builder.editor.export import copy_snapshot_to_clipboard
from spacecraft_builder.model.data_model import SpacecraftStructure
from spacecraft_builder.model.snapshot_storage import encode_snapshot
from spacecraft_builder.ui import style_constants as sc

logger = logging.getLogger(__name__)


class StructurePanel(QWidget):
    """Tag editor plus JSON snapshot view."""

    tags_edited = pyqtSignal()
    status_message = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._structure: Optional[SpacecraftStructure] = None
        # Guards itemChanged while the list is rebuilt
        self._updating = False
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(sc.SPACING_SM)

        tags_label = QLabel("Tags")
        tags_label.setStyleSheet(sc.SECTION_LABEL_STYLE)
        layout.addWidget(tags_label)

        self._tags_list = QListWidget()
        self._tags_list.setMaximumHeight(120)
        self._tags_list.setToolTip("Double-click a tag to edit it")
        self._tags_list.itemChanged.connect(self._on_tag_changed)
        layout.addWidget(self._tags_list)

        tag_buttons = QHBoxLayout()
        add_btn = QPushButton("Add tag")
        add_btn.setStyleSheet(sc.BUTTON_STYLE)
        add_btn.clicked.connect(self.add_tag)
        tag_buttons.addWidget(add_btn)

        self._remove_btn = QPushButton("Remove tag")
        self._remove_btn.setStyleSheet(sc.BUTTON_STYLE)
        self._remove_btn.clicked.connect(self._on_remove_tag)
        tag_buttons.addWidget(self._remove_btn)
        layout.addLayout(tag_buttons)

        json_label = QLabel("JSON")
        json_label.setStyleSheet(sc.SECTION_LABEL_STYLE)
        layout.addWidget(json_label)

        self._json_view = QPlainTextEdit()
        self._json_view.setReadOnly(True)
        font = QFont("Monospace")
        font.setStyleHint(QFont.TypeWriter)
        self._json_view.setFont(font)
        self._json_view.setStyleSheet(
            f"background: {sc.BG_DARKEST}; color: {sc.TEXT_PRIMARY}; font-size: {sc.FONT_SIZE_XS};"
        )
        layout.addWidget(self._json_view, stretch=1)

        copy_btn = QPushButton("Copy JSON")
        copy_btn.setStyleSheet(f"""
            QPushButton {{
                background: {sc.PRIMARY_ACTION};
                color: white;
                border-radius: {sc.BORDER_RADIUS_MD};
                padding: 6px 12px;
                font-weight: bold;
            }}
            QPushButton:hover {{
                background: {sc.PRIMARY_ACTION_HOVER};
            }}
        """)
        copy_btn.clicked.connect(self.copy_json)
        layout.addWidget(copy_btn)

    def set_structure(self, structure: Optional[SpacecraftStructure]):
        self._structure = structure
        self.refresh()

    def refresh(self):
        """Rebuild the tag list and JSON view from the structure."""
        self._updating = True
        try:
            self._tags_list.clear()
            tags = self._structure.tags if self._structure is not None else []
            for tag in tags:
                item = QListWidgetItem(tag)
                item.setFlags(item.flags() | Qt.ItemIsEditable)
                self._tags_list.addItem(item)
        finally:
            self._updating = False

        self._remove_btn.setEnabled(self._structure is not None and bool(self._structure.tags))
        self._refresh_json()

    def _refresh_json(self):
        if self._structure is None:
            self._json_view.setPlainText("")
            return
        self._json_view.setPlainText(encode_snapshot(self._structure, indent=2))

    # ---------------------------------------------------------------
    # Tags
    # ---------------------------------------------------------------

    def add_tag(self):
        if self._structure is None:
            return
        index = self._structure.add_tag("")
        self.refresh()
        self.tags_edited.emit()

        item = self._tags_list.item(index)
        self._tags_list.setCurrentItem(item)
        self._tags_list.editItem(item)

    def _on_remove_tag(self):
        if self._structure is None:
            return
        row = self._tags_list.currentRow()
        if row < 0:
            row = len(self._structure.tags) - 1
        if row < 0:
            return
        removed = self._structure.remove_tag(row)
        logger.debug("Removed tag %r", removed)
        self.refresh()
        self.tags_edited.emit()

    def _on_tag_changed(self, item: QListWidgetItem):
        if self._updating or self._structure is None:
            return
        row = self._tags_list.row(item)
        if 0 <= row < len(self._structure.tags):
            self._structure.set_tag(row, item.text())
            self._refresh_json()
            self.tags_edited.emit()

    # ---------------------------------------------------------------
    # Export
    # ---------------------------------------------------------------

    def copy_json(self):
        """Copy the snapshot JSON to the system clipboard."""
        if self._structure is None:
            return
        result = copy_snapshot_to_clipboard(self._structure, QApplication.clipboard())
        self.status_message.emit(result.message)
