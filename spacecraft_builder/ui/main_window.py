"""
Main application window for the Spacecraft Builder.

Hosts the structure editor and exposes the component catalog, material
usage and structure data through the menu bar.
"""

import logging
from typing import List, Optional

from PyQt5.QtWidgets import QMainWindow, QMessageBox, QAction, QMenu
from PyQt5.QtCore import QSettings

from spacecraft_builder.config import EditorConfig
from spacecraft_builder.model.catalog import (
    CATEGORY_BLOCKS, CATEGORY_ENGINES, CATEGORY_WEAPONS, components_by_category, get_spec,
)
from spacecraft_builder.ui.widgets.structure_editor import StructureEditorWidget

logger = logging.getLogger(__name__)

# Component menus, in menu bar order
_COMPONENT_MENUS = (CATEGORY_WEAPONS, CATEGORY_ENGINES, CATEGORY_BLOCKS)


class MainWindow(QMainWindow):
    # Settings keys
    SETTINGS_ORG = "SpacecraftBuilder"
    SETTINGS_APP = "MainWindow"
    MAX_RECENT_FILES = 5

    def __init__(self, config: Optional[EditorConfig] = None):
        super().__init__()

        self._settings = QSettings(self.SETTINGS_ORG, self.SETTINGS_APP)
        self._recent_files: List[str] = []
        self._recent_files_menu: Optional[QMenu] = None
        self._load_settings()

        self.editor = StructureEditorWidget(config)
        self._setup_ui()
        self._setup_menu_bar()
        self._connect_signals()

        self._restore_geometry()

    # ---------------------------------------------------------------
    # UI setup
    # ---------------------------------------------------------------

    def _setup_ui(self):
        self.setWindowTitle("Spacecraft Builder")
        self.setMinimumSize(900, 600)
        self.resize(1280, 800)
        self.setCentralWidget(self.editor)
        self.statusBar().showMessage("Select a component to start building")

    def _setup_menu_bar(self):
        """Create the menu bar: File, component menus, panels, View, Help."""
        menu_bar = self.menuBar()

        # File menu
        file_menu = menu_bar.addMenu("&File")

        new_action = QAction("&New Structure", self)
        new_action.setShortcut("Ctrl+N")
        new_action.triggered.connect(self.editor.new_structure)
        file_menu.addAction(new_action)

        open_action = QAction("&Open Structure...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self.editor.open_structure)
        file_menu.addAction(open_action)

        save_action = QAction("&Save Structure...", self)
        save_action.setShortcut("Ctrl+S")
        save_action.triggered.connect(self.editor.save_structure)
        file_menu.addAction(save_action)

        file_menu.addSeparator()

        self._recent_files_menu = file_menu.addMenu("Recent Files")
        self._update_recent_files_menu()

        file_menu.addSeparator()

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        # Component menus: one action per catalog entry
        grouped = components_by_category()
        for category in _COMPONENT_MENUS:
            menu = menu_bar.addMenu(category)
            for component_type in grouped.get(category, []):
                spec = get_spec(component_type)
                action = QAction(spec.display_name, self)
                action.setToolTip(f"Place {spec.display_name}")
                action.triggered.connect(
                    lambda checked=False, t=component_type: self.editor.select_component(t)
                )
                menu.addAction(action)

        # Material usage
        materials_menu = menu_bar.addMenu("Material usage")
        show_materials = QAction("Show Material Usage", self)
        show_materials.triggered.connect(lambda: self.editor.show_tab("Material usage"))
        materials_menu.addAction(show_materials)

        # Structure data
        data_menu = menu_bar.addMenu("Structure data")

        show_data = QAction("Show Tags and JSON", self)
        show_data.triggered.connect(lambda: self.editor.show_tab("Structure data"))
        data_menu.addAction(show_data)

        add_tag_action = QAction("Add tag", self)
        add_tag_action.setShortcut("Ctrl+T")
        add_tag_action.triggered.connect(self.editor.add_tag)
        data_menu.addAction(add_tag_action)

        copy_action = QAction("Copy JSON", self)
        copy_action.setShortcut("Ctrl+Shift+C")
        copy_action.triggered.connect(self.editor.copy_json)
        data_menu.addAction(copy_action)

        # View menu
        view_menu = menu_bar.addMenu("&View")

        zoom_in_action = QAction("Zoom &In", self)
        zoom_in_action.setShortcut("Ctrl++")
        zoom_in_action.triggered.connect(self.editor.zoom_in)
        view_menu.addAction(zoom_in_action)

        zoom_out_action = QAction("Zoom &Out", self)
        zoom_out_action.setShortcut("Ctrl+-")
        zoom_out_action.triggered.connect(self.editor.zoom_out)
        view_menu.addAction(zoom_out_action)

        reset_view_action = QAction("&Reset View", self)
        reset_view_action.setShortcut("Ctrl+0")
        reset_view_action.triggered.connect(self.editor.reset_view)
        view_menu.addAction(reset_view_action)

        view_menu.addSeparator()

        clear_action = QAction("&Clear Selection", self)
        clear_action.setShortcut("Esc")
        clear_action.triggered.connect(self.editor.clear_selection)
        view_menu.addAction(clear_action)

        # Help menu
        help_menu = menu_bar.addMenu("&Help")
        help_action = QAction("&Controls...", self)
        help_action.setShortcut("F1")
        help_action.triggered.connect(self._show_help)
        help_menu.addAction(help_action)

    def _connect_signals(self):
        self.editor.file_saved.connect(self._on_file_operation)
        self.editor.file_loaded.connect(self._on_file_operation)
        self.editor.structure_changed.connect(self._on_structure_changed)

    # ---------------------------------------------------------------
    # Recent files
    # ---------------------------------------------------------------

    def _update_recent_files_menu(self):
        """Rebuild the Recent Files submenu."""
        if self._recent_files_menu is None:
            return
        self._recent_files_menu.clear()

        if not self._recent_files:
            empty = QAction("(No recent files)", self)
            empty.setEnabled(False)
            self._recent_files_menu.addAction(empty)
            return

        for file_path in self._recent_files:
            action = QAction(file_path, self)
            action.triggered.connect(lambda checked=False, p=file_path: self.editor.load_file(p))
            self._recent_files_menu.addAction(action)

        self._recent_files_menu.addSeparator()
        clear_action = QAction("Clear Recent Files", self)
        clear_action.triggered.connect(self._on_clear_recent_files)
        self._recent_files_menu.addAction(clear_action)

    def _on_clear_recent_files(self):
        self._recent_files = []
        self._update_recent_files_menu()

    def _add_recent_file(self, file_path: str):
        if file_path in self._recent_files:
            self._recent_files.remove(file_path)
        self._recent_files.insert(0, file_path)
        self._recent_files = self._recent_files[:self.MAX_RECENT_FILES]

    def _on_file_operation(self, file_path: str):
        self._add_recent_file(file_path)
        self._update_recent_files_menu()
        self.statusBar().showMessage(file_path, 5000)

    def _on_structure_changed(self):
        structure = self.editor.get_structure()
        state = "valid" if structure.valid() else "invalid"
        self.statusBar().showMessage(f"{len(structure)} components, {state}")

    # ---------------------------------------------------------------
    # Help
    # ---------------------------------------------------------------

    def _show_help(self):
        rotate_key = self.editor.session.config.rotate_key
        help_text = f"""
<h2>Spacecraft Builder</h2>

<h3>Controls</h3>
<table style="border-collapse: collapse;">
<tr><td><b>Left click</b></td><td>Place the selected component</td></tr>
<tr><td><b>Right click</b></td><td>Cancel placement, or remove the component under the cursor</td></tr>
<tr><td><b>{rotate_key}</b></td><td>Rotate the placement preview</td></tr>
<tr><td><b>Scroll</b></td><td>Zoom</td></tr>
<tr><td><b>Esc</b></td><td>Clear selection</td></tr>
</table>

<h3>Valid structures</h3>
<p>A structure needs exactly one Central, and every component must be
connected to it through edge-adjacent cells. The grid turns red while
the structure is invalid.</p>
"""
        QMessageBox.information(self, "Help", help_text)

    # ---------------------------------------------------------------
    # Settings persistence
    # ---------------------------------------------------------------

    def closeEvent(self, event):
        if self.editor.is_modified and not self.editor.get_structure().is_empty():
            reply = QMessageBox.question(
                self, "Unsaved Changes", "Quit without saving the structure?",
                QMessageBox.Yes | QMessageBox.No, QMessageBox.No,
            )
            if reply != QMessageBox.Yes:
                event.ignore()
                return

        self._save_settings()
        event.accept()

    def _load_settings(self):
        """Load application settings from QSettings."""
        recent = self._settings.value("recent_files", [])
        if isinstance(recent, list):
            self._recent_files = recent[:self.MAX_RECENT_FILES]
        elif isinstance(recent, str) and recent:
            self._recent_files = [recent]
        else:
            self._recent_files = []

    def _save_settings(self):
        """Save application settings to QSettings."""
        self._settings.setValue("window_geometry", self.saveGeometry())
        self._settings.setValue("window_state", self.saveState())
        self._settings.setValue("recent_files", self._recent_files)

    def _restore_geometry(self):
        geometry = self._settings.value("window_geometry")
        if geometry:
            self.restoreGeometry(geometry)

        state = self._settings.value("window_state")
        if state:
            self.restoreState(state)

    def load_file(self, file_path: str) -> bool:
        return self.editor.load_file(file_path)
