"""
QGraphicsItem for placed components in the structure editor.

Renders a Drawable as a colored footprint rectangle with an orientation
marker. The same item draws the translucent ghost preview.
"""

import math

from PyQt5.QtWidgets import QGraphicsItem, QStyleOptionGraphicsItem, QWidget
from PyQt5.QtCore import Qt, QRectF, QPointF
from PyQt5.QtGui import QPainter, QColor, QPen, QBrush, QPolygonF

from spacecraft_builder.editor.scene import Color, Drawable
from spacecraft_builder.ui import style_constants as sc


def component_color(drawable: Drawable) -> QColor:
    """Fill color for a drawable, alpha included."""
    base = Color.from_hex(sc.COMPONENT_COLORS.get(drawable.component_type, "#808080"))
    fill = drawable.fill_color(base)
    color = QColor(fill.r, fill.g, fill.b)
    color.setAlphaF(fill.a)
    return color


class ComponentItem(QGraphicsItem):
    """Graphics item for one component (or the ghost preview).

    Item coordinates are cell units centred on the anchor cell; position,
    rotation and scale place it in device-independent scene space.
    """

    def __init__(self, drawable: Drawable):
        super().__init__()
        self._drawable = drawable

        self.setPos(*drawable.center)
        self.setRotation(math.degrees(drawable.rotation))
        self.setScale(drawable.zoom)
        self.setZValue(int(drawable.depth))

    @property
    def drawable(self) -> Drawable:
        return self._drawable

    def _rect(self) -> QRectF:
        return QRectF(*self._drawable.local_rect)

    def boundingRect(self) -> QRectF:
        margin = 0.05
        return self._rect().adjusted(-margin, -margin, margin, margin)

    def paint(self, painter: QPainter, option: QStyleOptionGraphicsItem,
              widget: QWidget = None):
        """Paint the component."""
        rect = self._rect()
        fill_color = component_color(self._drawable)

        if self._drawable.ghost:
            border_pen = QPen(fill_color, 1, Qt.DashLine)
        else:
            border_pen = QPen(fill_color.darker(160), 1)
        # Scene units are tiny; keep outlines one pixel wide at any zoom
        border_pen.setCosmetic(True)

        painter.setPen(border_pen)
        painter.setBrush(QBrush(fill_color))
        painter.drawRect(rect.adjusted(0.04, 0.04, -0.04, -0.04))

        # Orientation marker pointing along local +y
        marker = QPolygonF([
            QPointF(-0.2, -0.1),
            QPointF(0.2, -0.1),
            QPointF(0.0, 0.3),
        ])
        marker_pen = QPen(Qt.NoPen)
        painter.setPen(marker_pen)
        painter.setBrush(QBrush(QColor(0, 0, 0, 120)))
        painter.drawPolygon(marker)
