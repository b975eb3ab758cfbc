from PySide6.QtGui import QIcon, QPixmap, QPainter, QColor
from PySide6.QtCore import Qt, QPointF, QRectF

from color_logic import hsl_to_hex


def create_app_icon():
    """
    Generates the application icon: a small hue ring around a dark core.
    """
    size = 64
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setPen(Qt.NoPen)

    # 12 wedges, 30° each
    rect = QRectF(4, 4, 56, 56)
    for step in range(12):
        painter.setBrush(QColor(hsl_to_hex(step * 30, 100, 50)))
        painter.drawPie(rect, -step * 30 * 16, -30 * 16)

    painter.setBrush(QColor("#121212"))
    painter.drawEllipse(QPointF(32, 32), 16, 16)

    painter.setBrush(QColor("#ffffff"))
    painter.drawEllipse(QPointF(32, 32), 6, 6)

    painter.end()
    return QIcon(pixmap)


def create_gear_icon(teeth=8):
    size = 40
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setBrush(QColor("#e0e0e0"))
    painter.setPen(Qt.NoPen)

    center = QPointF(size / 2, size / 2)

    painter.save()
    painter.translate(center)
    for _ in range(teeth):
        painter.rotate(360 / teeth)
        painter.drawRect(QRectF(-3, -14, 6, 8))
    painter.restore()

    painter.drawEllipse(center, 11, 11)

    # Punch the axle hole through to transparent
    painter.setCompositionMode(QPainter.CompositionMode_Clear)
    painter.drawEllipse(center, 5, 5)

    painter.end()
    return QIcon(pixmap)
