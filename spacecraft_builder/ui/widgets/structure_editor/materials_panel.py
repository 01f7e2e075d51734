"""
Material usage panel: total material cost of the structure, one row per
material, sorted by name.
"""

from typing import Dict, Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QTableWidget, QTableWidgetItem, QHeaderView
from PyQt5.QtCore import Qt

from spacecraft_builder.model.data_model import SpacecraftStructure
from spacecraft_builder.ui import style_constants as sc


class MaterialsPanel(QWidget):
    """Table of material totals for the edited structure."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._structure: Optional[SpacecraftStructure] = None
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(sc.SPACING_XS)

        self._table = QTableWidget(0, 2)
        self._table.setHorizontalHeaderLabels(["Material", "Amount"])
        self._table.verticalHeader().setVisible(False)
        self._table.horizontalHeader().setSectionResizeMode(0, QHeaderView.Stretch)
        self._table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeToContents)
        self._table.setEditTriggers(QTableWidget.NoEditTriggers)
        self._table.setSelectionMode(QTableWidget.NoSelection)
        self._table.setStyleSheet(f"""
            QTableWidget {{
                background: {sc.BG_DARKEST};
                color: {sc.TEXT_PRIMARY};
                border: 1px solid {sc.BG_LIGHTER};
                font-size: {sc.FONT_SIZE_SM};
            }}
        """)
        layout.addWidget(self._table)

        self._total_label = QLabel("")
        self._total_label.setStyleSheet(f"color: {sc.TEXT_TERTIARY}; font-size: {sc.FONT_SIZE_SM};")
        layout.addWidget(self._total_label)

    def set_structure(self, structure: Optional[SpacecraftStructure]):
        self._structure = structure
        self.refresh()

    def refresh(self):
        materials: Dict[str, int] = self._structure.materials() if self._structure else {}

        self._table.setRowCount(len(materials))
        for row, (material, amount) in enumerate(materials.items()):
            name_item = QTableWidgetItem(material)
            amount_item = QTableWidgetItem(str(amount))
            amount_item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self._table.setItem(row, 0, name_item)
            self._table.setItem(row, 1, amount_item)

        if materials:
            self._total_label.setText(f"Total: {sum(materials.values())} units")
        else:
            self._total_label.setText("No materials used")
