"""
Validation panel widget for real-time structure feedback.

Shows whether the structure is valid (one Central, everything connected)
and lists each issue. Clicking an issue with a position emits its cell.
"""

from typing import Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QListWidget,
    QListWidgetItem, QFrame,
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QColor, QIcon, QPainter, QPixmap

from spacecraft_builder.model.data_model import SpacecraftStructure
from spacecraft_builder.model.validation import (
    ValidationResult, ValidationSeverity, validate_structure,
)
from spacecraft_builder.ui import style_constants as sc

_SEVERITY_COLORS = {
    ValidationSeverity.ERROR: sc.SEVERITY_ERROR,
}

_SEVERITY_PREFIXES = {
    ValidationSeverity.ERROR: "ERROR: ",
}


def _dot_icon(color: str) -> QIcon:
    """Create a round status icon."""
    size = 16
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setBrush(QColor(color))
    painter.setPen(Qt.NoPen)
    painter.drawEllipse(2, 2, size - 4, size - 4)
    painter.end()

    return QIcon(pixmap)


class ValidationPanel(QWidget):
    """Panel displaying structure validation results."""

    # Emitted with (x, y) when the user clicks an issue tied to a cell
    issue_clicked = pyqtSignal(int, int)

    def __init__(self, parent=None):
        super().__init__(parent)

        self._result: Optional[ValidationResult] = None
        self._structure: Optional[SpacecraftStructure] = None

        self._setup_ui()

    def _setup_ui(self):
        """Build the UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(sc.SPACING_SM)

        header = QFrame()
        header.setFrameShape(QFrame.StyledPanel)
        header.setStyleSheet(f"background: {sc.BG_DARK}; border-radius: {sc.BORDER_RADIUS_MD};")
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(8, 4, 8, 4)

        self._status_icon = QLabel()
        self._status_icon.setFixedSize(20, 20)
        header_layout.addWidget(self._status_icon)

        self._status_label = QLabel("No structure")
        self._status_label.setStyleSheet("font-weight: bold;")
        header_layout.addWidget(self._status_label)

        header_layout.addStretch()

        self._stats_label = QLabel("")
        self._stats_label.setStyleSheet(f"color: {sc.TEXT_TERTIARY}; font-size: {sc.FONT_SIZE_SM};")
        header_layout.addWidget(self._stats_label)

        layout.addWidget(header)

        self._issues_list = QListWidget()
        self._issues_list.setStyleSheet(f"""
            QListWidget {{
                background: {sc.BG_DARKEST};
                border: 1px solid {sc.BG_LIGHTER};
                border-radius: {sc.BORDER_RADIUS_MD};
                font-size: {sc.FONT_SIZE_SM};
            }}
            QListWidget::item {{
                padding: 6px 4px;
                color: {sc.TEXT_PRIMARY};
            }}
            QListWidget::item:hover {{
                background: {sc.BG_DARK};
            }}
        """)
        self._issues_list.itemClicked.connect(self._on_issue_clicked)
        layout.addWidget(self._issues_list)

    def set_structure(self, structure: Optional[SpacecraftStructure]):
        """Set the structure to validate."""
        self._structure = structure
        self.refresh()

    def refresh(self):
        """Re-run validation and update display."""
        self._issues_list.clear()

        if self._structure is None:
            self._result = None
            self._status_label.setText("No structure")
            self._status_icon.clear()
            self._stats_label.setText("")
            return

        self._result = validate_structure(self._structure)
        result = self._result

        if result.is_valid:
            text, color = "Valid", sc.SEVERITY_SUCCESS
        elif result.placeholder_count == 0:
            text, color = "Empty Structure", sc.TEXT_TERTIARY
        else:
            text, color = "Invalid", sc.SEVERITY_ERROR
        self._status_label.setText(text)
        self._status_label.setStyleSheet(f"font-weight: bold; color: {color};")
        self._status_icon.setPixmap(_dot_icon(color).pixmap(16, 16))

        self._stats_label.setText(
            f"{result.placeholder_count} components, {result.connected_count} connected"
        )

        # Text prefixes so severity does not rely on color alone
        for issue in result.issues:
            item = QListWidgetItem()
            color = _SEVERITY_COLORS[issue.severity]
            item.setIcon(_dot_icon(color))
            item.setForeground(QColor(color))
            item.setText(f"{_SEVERITY_PREFIXES[issue.severity]}{issue.message}")
            if issue.position is not None:
                item.setData(Qt.UserRole, issue.position.as_tuple())
            self._issues_list.addItem(item)

        if not result.issues:
            item = QListWidgetItem()
            item.setIcon(_dot_icon(sc.SEVERITY_SUCCESS))
            item.setText(f"OK: All {result.placeholder_count} components connected to the Central")
            item.setForeground(QColor(sc.SEVERITY_SUCCESS))
            self._issues_list.addItem(item)

    def _on_issue_clicked(self, item: QListWidgetItem):
        position = item.data(Qt.UserRole)
        if position:
            x, y = position
            self.issue_clicked.emit(int(x), int(y))

    @property
    def result(self) -> Optional[ValidationResult]:
        """Get the last validation result."""
        return self._result
