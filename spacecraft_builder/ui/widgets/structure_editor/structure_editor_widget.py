"""
Structure editor widget: palette, grid canvas and side panels around one
EditorSession.
"""

import logging
from pathlib import Path
from typing import Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSplitter, QFrame,
    QMessageBox, QFileDialog, QTabWidget,
)
from PyQt5.QtCore import Qt, pyqtSignal

from spacecraft_builder.config import EditorConfig
from spacecraft_builder.editor.state import EditorSession
from spacecraft_builder.model.catalog import ComponentType, get_spec
from spacecraft_builder.model.data_model import SnapshotError, SpacecraftStructure
from spacecraft_builder.model.snapshot_storage import SNAPSHOT_SUFFIX, load_snapshot, save_snapshot
from spacecraft_builder.ui import style_constants as sc
from .grid_canvas import GridCanvas
from .materials_panel import MaterialsPanel
from .palette_widget import PaletteWidget
from .structure_panel import StructurePanel
from .validation_panel import ValidationPanel

logger = logging.getLogger(__name__)

_FILE_FILTER = f"Structure Files (*{SNAPSHOT_SUFFIX});;All Files (*)"


class StructureEditorWidget(QWidget):
    """Complete spacecraft structure editor."""

    # Signals
    structure_changed = pyqtSignal()  # Emitted after any edit to the structure
    file_saved = pyqtSignal(str)      # Emitted with file path after save
    file_loaded = pyqtSignal(str)     # Emitted with file path after load

    def __init__(self, config: Optional[EditorConfig] = None, parent=None):
        super().__init__(parent)

        self._session = EditorSession(config=config)
        self._session.add_listener(self._on_session_changed)
        self._modified = False

        self._setup_ui()
        self._connect_signals()
        self._refresh_panels()

    def _setup_ui(self):
        """Build the UI."""
        main_layout = QHBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)

        self._splitter = QSplitter(Qt.Horizontal)
        self._splitter.setHandleWidth(6)
        self._splitter.setStyleSheet(f"""
            QSplitter::handle {{
                background: {sc.BG_LIGHTER};
            }}
        """)
        main_layout.addWidget(self._splitter)

        # Left: palette
        self._palette = PaletteWidget()
        self._palette.setMinimumWidth(200)
        self._splitter.addWidget(self._palette)

        # Center: mode banner, canvas and status line
        center_widget = QWidget()
        center_layout = QVBoxLayout(center_widget)
        center_layout.setContentsMargins(0, 0, 0, 0)
        center_layout.setSpacing(0)

        self._mode_banner = QLabel()
        self._mode_banner.setAlignment(Qt.AlignCenter)
        self._update_mode_banner(False, "")
        center_layout.addWidget(self._mode_banner)

        self._canvas = GridCanvas(self._session)
        center_layout.addWidget(self._canvas, stretch=1)

        status_bar = QFrame()
        status_bar.setFrameShape(QFrame.StyledPanel)
        status_bar.setStyleSheet(f"background: {sc.BG_DARK}; padding: 4px;")
        status_layout = QHBoxLayout(status_bar)
        status_layout.setContentsMargins(8, 2, 8, 2)

        self._status_label = QLabel("Ready")
        self._status_label.setStyleSheet(f"color: {sc.TEXT_SECONDARY}; font-size: {sc.FONT_SIZE_SM};")
        status_layout.addWidget(self._status_label)
        status_layout.addStretch()

        self._cell_label = QLabel("Cell: (0, 0)")
        self._cell_label.setStyleSheet(f"color: {sc.TEXT_TERTIARY}; font-size: {sc.FONT_SIZE_SM};")
        status_layout.addWidget(self._cell_label)

        center_layout.addWidget(status_bar)
        self._splitter.addWidget(center_widget)

        # Right: validation, material usage, structure data
        self._tabs = QTabWidget()
        self._tabs.setMinimumWidth(240)

        self._validation_panel = ValidationPanel()
        self._tabs.addTab(self._validation_panel, "Validation")

        self._materials_panel = MaterialsPanel()
        self._tabs.addTab(self._materials_panel, "Material usage")

        self._structure_panel = StructurePanel()
        self._tabs.addTab(self._structure_panel, "Structure data")

        self._splitter.addWidget(self._tabs)

        self._splitter.setSizes([240, 640, 300])
        self._splitter.setStretchFactor(0, 0)
        self._splitter.setStretchFactor(1, 1)
        self._splitter.setStretchFactor(2, 0)

    def _connect_signals(self):
        """Connect widget signals."""
        self._palette.component_selected.connect(self._on_palette_select)
        self._palette.selection_cleared.connect(self._on_palette_clear)

        self._canvas.cell_hovered.connect(self._on_cell_hover)
        self._canvas.status_message.connect(self._on_status_message)
        self._canvas.mode_changed.connect(self._on_canvas_mode_changed)

        self._validation_panel.issue_clicked.connect(self._on_issue_clicked)
        self._structure_panel.tags_edited.connect(self._on_tags_edited)
        self._structure_panel.status_message.connect(self._on_status_message)

    # ---------------------------------------------------------------
    # Signal handlers
    # ---------------------------------------------------------------

    def _on_palette_select(self, component_type: ComponentType):
        self._session.select(component_type)
        self._update_mode_banner(True, component_type.value)
        self._status_label.setText(f"Placing {get_spec(component_type).display_name}")
        self._canvas.refresh()
        self._canvas.setFocus()

    def _on_palette_clear(self):
        self._session.clear_selection()
        self._update_mode_banner(False, "")
        self._canvas.refresh()

    def _on_canvas_mode_changed(self, is_placing: bool, component_name: str):
        # Right-click cancel on the canvas must also clear the palette
        self._palette.set_selected(self._session.state.selected_component_type)
        self._update_mode_banner(is_placing, component_name)

    def _on_session_changed(self, session: EditorSession):
        self._modified = True
        self._refresh_panels()
        self.structure_changed.emit()

    def _on_tags_edited(self):
        # The structure panel already shows the new tags
        self._modified = True
        self.structure_changed.emit()

    def _on_issue_clicked(self, x: int, y: int):
        self._status_label.setText(f"Issue at ({x}, {y})")

    def _on_cell_hover(self, x: int, y: int):
        self._cell_label.setText(f"Cell: ({x}, {y})")

    def _on_status_message(self, message: str):
        self._status_label.setText(message)

    def _refresh_panels(self):
        structure = self._session.structure
        self._validation_panel.set_structure(structure)
        self._materials_panel.set_structure(structure)
        self._structure_panel.set_structure(structure)

    def _update_mode_banner(self, is_placing: bool, component_name: str):
        """Update the mode banner based on current editor mode."""
        rotate_key = self._session.config.rotate_key
        if is_placing:
            text = (f"  PLACEMENT MODE: {component_name}  |  "
                    f"{rotate_key} = Rotate  |  Click = Place  |  Right-click = Cancel")
            background = sc.PRIMARY_ACTION
        else:
            text = ("  IDLE  |  Right-click = Remove  |  "
                    "Choose a component from the palette to place")
            background = "#607D8B"
        self._mode_banner.setText(text)
        self._mode_banner.setStyleSheet(f"""
            QLabel {{
                background: {background};
                color: white;
                padding: 6px 8px;
                font-weight: bold;
                font-size: {sc.FONT_SIZE_SM};
            }}
        """)

    # ---------------------------------------------------------------
    # File operations
    # ---------------------------------------------------------------

    def _confirm_discard(self, title: str, question: str) -> bool:
        if not self._modified or self._session.structure.is_empty():
            return True
        reply = QMessageBox.question(
            self, title, question,
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No
        )
        return reply == QMessageBox.Yes

    def new_structure(self):
        """Start a new, empty structure."""
        if not self._confirm_discard("New Structure",
                                     "Clear current structure? Unsaved changes will be lost."):
            return
        self._session.new_structure()
        self._modified = False
        self._canvas.refresh()
        self._status_label.setText("New structure created")

    def save_structure(self):
        """Save the structure to a JSON file."""
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save Structure", f"structure{SNAPSHOT_SUFFIX}", _FILE_FILTER
        )
        if not file_path:
            return

        try:
            path = save_snapshot(self._session.structure, file_path)
        except OSError as e:
            logger.error("Save failed: %s", e)
            QMessageBox.critical(self, "Save Failed", str(e))
            return

        self._modified = False
        self._status_label.setText(f"Saved: {path.name}")
        self.file_saved.emit(str(path))

    def open_structure(self):
        """Load a structure from a JSON file chosen by the user."""
        if not self._confirm_discard("Open Structure",
                                     "Replace current structure? Unsaved changes will be lost."):
            return

        file_path, _ = QFileDialog.getOpenFileName(self, "Open Structure", "", _FILE_FILTER)
        if file_path:
            self.load_file(file_path)

    def load_file(self, file_path: str) -> bool:
        """Load a structure file without prompting. Returns True on success."""
        try:
            structure = load_snapshot(file_path)
        except (OSError, SnapshotError) as e:
            logger.error("Load failed for %s: %s", file_path, e)
            QMessageBox.critical(self, "Load Failed", str(e))
            return False

        self.set_structure(structure)
        self._modified = False
        self._status_label.setText(f"Loaded: {Path(file_path).name}")
        self.file_loaded.emit(str(file_path))
        return True

    # ---------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------

    @property
    def session(self) -> EditorSession:
        return self._session

    def get_structure(self) -> SpacecraftStructure:
        return self._session.structure

    def set_structure(self, structure: SpacecraftStructure):
        self._session.load_structure(structure)
        self._canvas.refresh()

    def copy_json(self):
        self._structure_panel.copy_json()

    def add_tag(self):
        self._tabs.setCurrentWidget(self._structure_panel)
        self._structure_panel.add_tag()

    def show_tab(self, name: str):
        for index in range(self._tabs.count()):
            if self._tabs.tabText(index) == name:
                self._tabs.setCurrentIndex(index)
                return

    def select_component(self, component_type: ComponentType):
        self._palette.set_selected(component_type)
        self._on_palette_select(component_type)

    def clear_selection(self):
        self._palette.set_selected(None)
        self._on_palette_clear()

    def rotate(self):
        self._session.rotate()
        self._canvas.refresh()
        self._status_label.setText(f"Orientation: {self._session.state.orientation.value}")

    def zoom_in(self):
        self._canvas.zoom_in()

    def zoom_out(self):
        self._canvas.zoom_out()

    def reset_view(self):
        self._canvas.reset_view()

    @property
    def is_modified(self) -> bool:
        return self._modified
