"""
Palette widget for selecting components to place in the structure editor.

Displays the catalog grouped by category (Blocks, Weapons, Engines) with
a color swatch, footprint and material cost for each entry.
"""

from typing import Dict, List, Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QPushButton, QScrollArea, QFrame,
    QToolButton, QGridLayout,
)
from PyQt5.QtCore import Qt, pyqtSignal, QSize
from PyQt5.QtGui import QIcon, QColor, QPainter, QPixmap

from spacecraft_builder.model.catalog import ComponentType, components_by_category, get_spec
from spacecraft_builder.ui import style_constants as sc


def _format_cost(cost: Dict[str, int]) -> str:
    return ", ".join(f"{amount} {material}" for material, amount in sorted(cost.items()))


class ComponentButton(QToolButton):
    """Button representing a placeable component type.

    Selection state is tracked manually so only one palette entry is
    highlighted at a time.
    """

    clicked_component = pyqtSignal(object)  # ComponentType

    def __init__(self, component_type: ComponentType, parent=None):
        super().__init__(parent)

        self._component_type = component_type
        self._spec = get_spec(component_type)
        self._is_selected = False

        self._setup_ui()

    def _setup_ui(self):
        """Configure button appearance."""
        self.setToolButtonStyle(Qt.ToolButtonTextUnderIcon)
        self.setText(self._spec.display_name)
        self.setIcon(self._create_icon())
        self.setIconSize(QSize(40, 40))
        self.setFixedSize(96, 80)

        width, height = self._spec.footprint
        layer = "mounted on blocks" if self._spec.layered else "base block"
        self.setToolTip(
            f"{self._spec.display_name}\n"
            f"Size: {width}x{height} cells, {layer}\n"
            f"Cost: {_format_cost(self._spec.material_cost)}"
        )

        self._update_style()
        self.clicked.connect(self._on_clicked)

    def _color(self) -> QColor:
        return QColor(sc.COMPONENT_COLORS.get(self._component_type, "#808080"))

    def _update_style(self):
        color = self._color()
        if self._is_selected:
            border = f"2px solid {color.name()}"
            background = color.darker(170).name()
        else:
            border = f"1px solid {sc.BG_LIGHTER}"
            background = sc.BG_DARK
        self.setStyleSheet(f"""
            QToolButton {{
                border: {border};
                border-radius: {sc.BORDER_RADIUS_MD};
                background: {background};
                color: {sc.TEXT_PRIMARY};
                font-size: {sc.FONT_SIZE_XS};
                padding: 4px;
            }}
            QToolButton:hover {{
                border-color: {color.name()};
            }}
        """)

    def _create_icon(self) -> QIcon:
        """Draw the footprint as colored cells."""
        size = 40
        pixmap = QPixmap(size, size)
        pixmap.fill(Qt.transparent)

        painter = QPainter(pixmap)
        painter.setRenderHint(QPainter.Antialiasing)

        width, height = self._spec.footprint
        cell_px = (size - 4) // max(width, height)
        offset_x = (size - width * cell_px) // 2
        offset_y = (size - height * cell_px) // 2

        color = self._color()
        painter.setPen(color.darker(160))
        painter.setBrush(color)
        for cx in range(width):
            for cy in range(height):
                # Row 0 is the anchor cell, drawn at the bottom
                top = offset_y + (height - 1 - cy) * cell_px
                painter.drawRect(offset_x + cx * cell_px, top, cell_px - 1, cell_px - 1)

        painter.end()
        return QIcon(pixmap)

    def _on_clicked(self):
        self.setChecked(True)
        self.clicked_component.emit(self._component_type)

    @property
    def component_type(self) -> ComponentType:
        return self._component_type

    def setChecked(self, checked: bool):
        if self._is_selected != checked:
            self._is_selected = checked
            self._update_style()

    def isChecked(self) -> bool:
        return self._is_selected


class PaletteWidget(QWidget):
    """Widget for selecting components to place."""

    component_selected = pyqtSignal(object)  # ComponentType
    selection_cleared = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)

        self._buttons: Dict[ComponentType, ComponentButton] = {}
        self._current_selection: Optional[ComponentType] = None

        self._setup_ui()

    def _setup_ui(self):
        """Build the UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(sc.SPACING_SM, sc.SPACING_SM, sc.SPACING_SM, sc.SPACING_SM)
        layout.setSpacing(sc.SPACING_SM)

        title = QLabel("Components")
        title.setStyleSheet(sc.SECTION_LABEL_STYLE)
        layout.addWidget(title)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        scroll.setFrameShape(QFrame.NoFrame)

        scroll_content = QWidget()
        scroll_layout = QVBoxLayout(scroll_content)
        scroll_layout.setContentsMargins(0, 0, 0, 0)
        scroll_layout.setSpacing(sc.SPACING_MD)

        for category, component_types in components_by_category().items():
            if component_types:
                self._add_category(scroll_layout, category, component_types)

        scroll_layout.addStretch()
        scroll.setWidget(scroll_content)
        layout.addWidget(scroll)

        clear_btn = QPushButton("Clear Selection")
        clear_btn.setStyleSheet(sc.BUTTON_STYLE)
        clear_btn.setToolTip("Deselect the current component (right-click on the grid)")
        clear_btn.clicked.connect(self._on_clear)
        layout.addWidget(clear_btn)

    def _add_category(self, parent_layout: QVBoxLayout, category: str,
                      component_types: List[ComponentType]):
        """Add a category header followed by its buttons."""
        header = QLabel(category)
        header.setStyleSheet(f"""
            font-weight: bold;
            font-size: {sc.FONT_SIZE_SM};
            color: {sc.TEXT_SECONDARY};
            padding: 4px 4px;
            border-bottom: 1px solid {sc.BORDER_MEDIUM};
        """)
        parent_layout.addWidget(header)

        grid_container = QWidget()
        grid = QGridLayout(grid_container)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setSpacing(sc.SPACING_XS)

        for index, component_type in enumerate(component_types):
            btn = ComponentButton(component_type)
            btn.clicked_component.connect(self._on_component_clicked)
            self._buttons[component_type] = btn
            grid.addWidget(btn, index // 2, index % 2)

        parent_layout.addWidget(grid_container)

    def _on_component_clicked(self, component_type: ComponentType):
        for btn_type, btn in self._buttons.items():
            if btn_type is not component_type:
                btn.setChecked(False)

        self._current_selection = component_type
        self.component_selected.emit(component_type)

    def _on_clear(self):
        self.set_selected(None)
        self.selection_cleared.emit()

    def get_selected(self) -> Optional[ComponentType]:
        """Get currently selected component type."""
        return self._current_selection

    def set_selected(self, component_type: Optional[ComponentType]):
        """Mirror the editor's selection without emitting signals."""
        self._current_selection = component_type
        for btn_type, btn in self._buttons.items():
            btn.setChecked(btn_type is component_type)
