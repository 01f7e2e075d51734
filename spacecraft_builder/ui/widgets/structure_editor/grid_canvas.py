"""
QGraphicsView-based grid canvas for the structure editor.

Provides:
- Reference grid and validity-colored background
- Click-to-place components with ghost preview
- Right-click to cancel placement or remove the hovered component
- Rotation (R key) for the placement preview
- Wheel zoom

Scene coordinates equal the device-independent pointer space ([-1, 1] on
both axes, +y up). Input is forwarded to the EditorSession as events; the
canvas only draws the Frame composed from the session.
"""

import logging
from typing import List, Optional

from PyQt5.QtWidgets import QGraphicsView, QGraphicsScene
from PyQt5.QtCore import Qt, QRectF, QPointF, pyqtSignal
from PyQt5.QtGui import (
    QPainter, QPen, QColor, QBrush, QWheelEvent,
    QMouseEvent, QKeyEvent, QTransform, QKeySequence,
)

from spacecraft_builder.editor.events import (
    ButtonInput, InputPhase, PointerButton, PointerMoved, RotateInput, ZoomInput,
)
from spacecraft_builder.editor.geometry import window_to_pointer
from spacecraft_builder.editor.scene import Color, Frame, compose_frame
from spacecraft_builder.editor.state import EditorSession
from .component_item import ComponentItem

logger = logging.getLogger(__name__)

_MOUSE_BUTTONS = {
    Qt.LeftButton: PointerButton.PRIMARY,
    Qt.RightButton: PointerButton.SECONDARY,
}


def _qcolor(color: Color) -> QColor:
    return QColor(color.r, color.g, color.b, int(round(color.a * 255)))


class GridCanvas(QGraphicsView):
    """Grid canvas for placing spacecraft components."""

    # Signals
    cell_hovered = pyqtSignal(int, int)  # Emitted with cell coordinates on hover
    structure_edited = pyqtSignal()  # Emitted after an input changed the structure
    mode_changed = pyqtSignal(bool, str)  # (is_placing, component type name)
    status_message = pyqtSignal(str)  # Emitted with status messages for user feedback

    def __init__(self, session: EditorSession, parent=None):
        super().__init__(parent)

        self._session = session
        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        self._frame: Optional[Frame] = None
        self._items: List[ComponentItem] = []
        self._rotate_key = QKeySequence(session.config.rotate_key)[0]

        self._setup_view()
        self.refresh()

    def _setup_view(self):
        """Configure view settings."""
        self.setRenderHints(QPainter.Antialiasing)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setDragMode(QGraphicsView.NoDrag)
        self.setMouseTracking(True)
        # Keyboard focus for rotation (R key)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setContextMenuPolicy(Qt.NoContextMenu)

        self._scene.setSceneRect(-1, -1, 2, 2)

    # ---------------------------------------------------------------
    # Session
    # ---------------------------------------------------------------

    @property
    def session(self) -> EditorSession:
        return self._session

    def set_session(self, session: EditorSession):
        self._session = session
        self.refresh()

    # ---------------------------------------------------------------
    # Drawing
    # ---------------------------------------------------------------

    def refresh(self):
        """Recompose the frame and rebuild the component items."""
        session = self._session
        self._frame = compose_frame(session.structure, session.state, session.config)

        for item in self._items:
            self._scene.removeItem(item)
        self._items.clear()

        drawables = list(self._frame.components)
        if self._frame.ghost is not None:
            drawables.append(self._frame.ghost)
        for drawable in drawables:
            item = ComponentItem(drawable)
            self._scene.addItem(item)
            self._items.append(item)

        self.viewport().update()

    def _fit_view(self):
        """Map the [-1, 1] scene square onto the whole viewport, +y up."""
        width = max(self.viewport().width(), 1)
        height = max(self.viewport().height(), 1)
        transform = QTransform()
        transform.scale(width / 2.0, -height / 2.0)
        self.setTransform(transform)
        self.centerOn(0, 0)

    def drawBackground(self, painter: QPainter, rect: QRectF):
        """Draw the validity background and the reference grid."""
        if self._frame is None:
            super().drawBackground(painter, rect)
            return

        painter.fillRect(rect, QBrush(_qcolor(self._frame.background)))

        for line in self._frame.grid_lines:
            pen = QPen(_qcolor(line.color), 1)
            pen.setCosmetic(True)
            painter.setPen(pen)
            painter.drawLine(QPointF(*line.start), QPointF(*line.end))

    # ---------------------------------------------------------------
    # Input
    # ---------------------------------------------------------------

    def _dispatch(self, event) -> bool:
        """Forward an input event to the session and redraw."""
        was_placing = self._session.state.is_placing
        changed = self._session.handle(event)

        state = self._session.state
        if state.is_placing != was_placing:
            selected = state.selected_component_type
            self.mode_changed.emit(state.is_placing, selected.value if selected else "")

        if changed:
            self.status_message.emit(self._session.commands.last_description or "")
            self.structure_edited.emit()
        self.refresh()
        return changed

    def _pointer_event(self, event: QMouseEvent):
        pos = event.pos()
        x, y = window_to_pointer(pos.x(), pos.y(),
                                 self.viewport().width(), self.viewport().height())
        self._dispatch(PointerMoved(x, y))

    def mouseMoveEvent(self, event: QMouseEvent):
        """Handle mouse move."""
        self._pointer_event(event)
        cell = self._session.state.pointer_cell
        self.cell_hovered.emit(cell.x, cell.y)
        event.accept()

    def mousePressEvent(self, event: QMouseEvent):
        """Handle mouse press."""
        button = _MOUSE_BUTTONS.get(event.button())
        if button is None:
            super().mousePressEvent(event)
            return
        self._pointer_event(event)
        self._dispatch(ButtonInput(button, InputPhase.PRESSED))
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent):
        """Handle mouse release."""
        button = _MOUSE_BUTTONS.get(event.button())
        if button is None:
            super().mouseReleaseEvent(event)
            return
        self._dispatch(ButtonInput(button, InputPhase.RELEASED))
        event.accept()

    def keyPressEvent(self, event: QKeyEvent):
        """Handle keyboard input."""
        if event.key() == self._rotate_key and not event.isAutoRepeat():
            self._dispatch(RotateInput(InputPhase.PRESSED))
            self.status_message.emit(
                f"Orientation: {self._session.state.orientation.value}")
            event.accept()
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent):
        if event.key() == self._rotate_key and not event.isAutoRepeat():
            self._dispatch(RotateInput(InputPhase.RELEASED))
            event.accept()
            return
        super().keyReleaseEvent(event)

    def wheelEvent(self, event: QWheelEvent):
        """Handle zoom with scroll wheel."""
        delta = event.angleDelta().y()

        # Ignore tiny deltas (trackpad noise)
        if abs(delta) < 10:
            event.accept()
            return

        # Standard mouse wheel gives ~120 per notch
        self._dispatch(ZoomInput(delta / 120.0))
        event.accept()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._fit_view()

    def showEvent(self, event):
        super().showEvent(event)
        self._fit_view()

    # ---------------------------------------------------------------
    # View actions
    # ---------------------------------------------------------------

    def zoom_in(self):
        self._dispatch(ZoomInput(1))

    def zoom_out(self):
        self._dispatch(ZoomInput(-1))

    def reset_view(self):
        self._session.reset_zoom()
        self.refresh()
