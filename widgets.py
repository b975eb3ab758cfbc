from PySide6.QtWidgets import QWidget, QLabel, QFrame, QVBoxLayout, QAbstractButton, QApplication
from PySide6.QtCore import Qt, Signal, QPropertyAnimation, QEasingCurve, QTimer, QPointF, QRectF, Property
from PySide6.QtGui import QPainter, QColor, QPixmap

from color_logic import (hsl_to_hex, hsl_to_rgb, hue_to_point, relative_luminance,
                         rgb_to_hsl_string, rgb_to_rgb_string)

MARKER_INSET = 10
BASE_MARKER = ("#ffffff", 6)
PALETTE_MARKER = ("#000000", 4)

# Above this luminance black text reads better than white
DARK_TEXT_LUMINANCE = 0.179


def repolish(widget):
    widget.style().unpolish(widget)
    widget.style().polish(widget)


class ToggleSwitch(QAbstractButton):
    TRACK = QRectF(0, 0, 50, 26)
    KNOB = 20
    MARGIN = 3

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setCheckable(True)
        self.setFixedSize(self.TRACK.size().toSize())
        self.setCursor(Qt.PointingHandCursor)

        self._offset = float(self.MARGIN)
        self.slide = QPropertyAnimation(self, b"offset", self)
        self.slide.setDuration(200)
        self.slide.setEasingCurve(QEasingCurve.InOutQuad)
        self.toggled.connect(self._slide_knob)

    def _knob_end(self, checked):
        return self.TRACK.width() - self.KNOB - self.MARGIN if checked else self.MARGIN

    def _slide_knob(self, checked):
        self.slide.stop()
        self.slide.setEndValue(float(self._knob_end(checked)))
        self.slide.start()

    def _get_offset(self):
        return self._offset

    def _set_offset(self, value):
        self._offset = value
        self.update()

    offset = Property(float, _get_offset, _set_offset)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(Qt.NoPen)

        radius = self.TRACK.height() / 2
        painter.setBrush(QColor("#4CAF50" if self.isChecked() else "#333333"))
        painter.drawRoundedRect(self.TRACK, radius, radius)

        painter.setBrush(QColor("#ffffff"))
        painter.drawEllipse(QRectF(self._offset, self.MARGIN, self.KNOB, self.KNOB))


class CopyLabel(QLabel):
    """Color code label; a left click puts the code on the clipboard."""
    copied = Signal(str)

    def __init__(self, text, parent=None):
        super().__init__(text, parent)
        self.setObjectName("CodeLabel")
        self.setAlignment(Qt.AlignCenter)
        self.setCursor(Qt.PointingHandCursor)
        self.setProperty("flashing", False)

        self.unflash = QTimer(self)
        self.unflash.setSingleShot(True)
        self.unflash.timeout.connect(lambda: self._set_flashing(False))

    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            return super().mousePressEvent(event)
        QApplication.clipboard().setText(self.text())
        self._set_flashing(True)
        self.unflash.start(150)
        self.copied.emit(self.text())

    def _set_flashing(self, on):
        self.setProperty("flashing", on)
        repolish(self)


class SwatchCard(QFrame):
    """
    One palette entry: a colored card with its hex code and optional
    RGB / HSL codes. Clicking the card copies the hex code.
    """
    copied = Signal(str)

    def __init__(self, color, settings=None, parent=None):
        super().__init__(parent)
        settings = settings or {}
        self.color = color
        self.rgb = hsl_to_rgb(*color)
        self.color_hex = self.rgb.hex

        self.setObjectName("SwatchCard")
        self.setFixedSize(120, 140)
        self.setCursor(Qt.PointingHandCursor)
        self.setToolTip(f"Click to copy {self.color_hex}")

        text_color = "#000000" if relative_luminance(self.rgb) > DARK_TEXT_LUMINANCE else "#ffffff"
        self.default_style = (f"QFrame#SwatchCard {{ background-color: {self.color_hex}; }}"
                              f"QLabel {{ color: {text_color}; background: transparent; }}")
        self.flash_style = (f"QFrame#SwatchCard {{ background-color: {self.color_hex};"
                            f" border: 3px solid #ffffff; }}"
                            f"QLabel {{ color: {text_color}; background: transparent; }}")
        self.setStyleSheet(self.default_style)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 8)
        layout.setSpacing(2)
        layout.addStretch()

        self.hex_label = QLabel(self.color_hex)
        self.hex_label.setObjectName("HexLabel")
        self.hex_label.setAlignment(Qt.AlignCenter)
        # Let clicks on the hex code reach the card
        self.hex_label.setAttribute(Qt.WA_TransparentForMouseEvents, True)
        layout.addWidget(self.hex_label)

        self.code_labels = []
        if settings.get("show_rgb", True):
            self.code_labels.append(CopyLabel(rgb_to_rgb_string(self.rgb)))
        if settings.get("show_hsl", True):
            self.code_labels.append(CopyLabel(rgb_to_hsl_string(self.rgb)))
        for lbl in self.code_labels:
            lbl.copied.connect(self.copied)
            layout.addWidget(lbl)

        self.flash_timer = QTimer(self)
        self.flash_timer.timeout.connect(self.reset_style)
        self.flash_timer.setSingleShot(True)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            QApplication.clipboard().setText(self.color_hex)
            self.flash_effect()
            self.copied.emit(self.color_hex)

    def flash_effect(self):
        self.setStyleSheet(self.flash_style)
        self.flash_timer.start(100)

    def reset_style(self):
        self.setStyleSheet(self.default_style)


class ColorWheel(QWidget):
    """
    Hue wheel: one fully saturated sector per degree, a white marker for the
    base hue and black markers for the palette hues. Hue 0 points right and
    hues grow clockwise, matching angle_to_hue() in screen coordinates.
    """
    clicked = Signal(QPointF)

    def __init__(self, size=350, parent=None):
        super().__init__(parent)
        self.setFixedSize(size, size)
        self.setCursor(Qt.CrossCursor)
        self.base_hue = 0
        self.palette_hues = []
        self._wheel_pixmap = None

    @property
    def radius(self):
        return self.width() / 2

    @property
    def center(self):
        return self.width() / 2, self.height() / 2

    def set_hues(self, base_hue, palette_hues):
        self.base_hue = base_hue
        self.palette_hues = list(palette_hues)
        self.update()

    def render_wheel(self):
        pixmap = QPixmap(self.size())
        pixmap.fill(Qt.transparent)

        painter = QPainter(pixmap)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(Qt.NoPen)
        rect = QRectF(0, 0, self.width(), self.height())
        for angle in range(360):
            painter.setBrush(QColor(hsl_to_hex(angle, 100, 50)))
            # Qt angles run counter-clockwise in 1/16th degree; the sector covers [angle-1, angle]
            painter.drawPie(rect, -angle * 16, 16)
        painter.end()
        return pixmap

    def resizeEvent(self, event):
        self._wheel_pixmap = None
        super().resizeEvent(event)

    def paintEvent(self, event):
        if self._wheel_pixmap is None:
            self._wheel_pixmap = self.render_wheel()

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.drawPixmap(0, 0, self._wheel_pixmap)

        painter.setPen(Qt.NoPen)
        self.draw_marker(painter, self.base_hue, *BASE_MARKER)
        for hue in self.palette_hues:
            self.draw_marker(painter, hue, *PALETTE_MARKER)

    def draw_marker(self, painter, hue, color, size):
        x, y = hue_to_point(hue, *self.center, self.radius - MARKER_INSET)
        painter.setBrush(QColor(color))
        painter.drawEllipse(QPointF(x, y), size, size)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit(event.position())
