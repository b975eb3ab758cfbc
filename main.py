import sys
import os
import argparse
import logging
from PySide6.QtWidgets import (QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                               QPushButton, QLabel, QFrame, QGridLayout, QScrollArea, QDialog,
                               QComboBox, QGroupBox, QLineEdit, QColorDialog)
from PySide6.QtCore import Qt, QTimer, Signal, QPoint
from PySide6.QtGui import QColor, QIcon

from styles import STYLESHEET
from color_logic import HarmonyScheme, InvalidColorFormat, is_partial_hex, parse_hex
from app_state import PaletteState
from settings import SETTINGS_FILE, load_settings, save_settings
from icon_gen import create_app_icon, create_gear_icon
from widgets import ToggleSwitch, SwatchCard, ColorWheel, repolish

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#3a86ff"


def load_icon():
    base_path = getattr(sys, '_MEIPASS', os.path.dirname(os.path.abspath(__file__)))
    for name in ["icon.ico", "icon.png"]:
        path = os.path.join(base_path, name)
        if os.path.exists(path):
            return QIcon(path)
    return create_app_icon()


# --- UI Components ---

class SettingsDialog(QDialog):
    settings_changed = Signal(dict)

    def __init__(self, parent=None, current_settings=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.resize(300, 360)
        self.setWindowFlags(Qt.Popup | Qt.FramelessWindowHint)

        self.settings = dict(current_settings or {})

        layout = QVBoxLayout()
        layout.setSpacing(15)
        self.setLayout(layout)

        # 1. Default scheme
        scheme_group = QGroupBox("Default Scheme")
        scheme_layout = QVBoxLayout()
        self.scheme_combo = QComboBox()
        for scheme in HarmonyScheme:
            self.scheme_combo.addItem(scheme.label, scheme.value)
        idx = self.scheme_combo.findData(self.settings.get("default_scheme"))
        self.scheme_combo.setCurrentIndex(max(idx, 0))
        scheme_layout.addWidget(self.scheme_combo)
        scheme_group.setLayout(scheme_layout)
        layout.addWidget(scheme_group)

        # 2. Codes shown on swatch cards (hex is always shown)
        vis_group = QGroupBox("Card Color Codes")
        vis_layout = QGridLayout()
        self.vis_toggles = {}
        for i, sys_name in enumerate(["RGB", "HSL"]):
            tgl = ToggleSwitch()
            tgl.setChecked(self.settings.get(f"show_{sys_name.lower()}", True))
            self.vis_toggles[sys_name.lower()] = tgl
            vis_layout.addWidget(QLabel(sys_name), i, 0)
            vis_layout.addWidget(tgl, i, 1)
        vis_group.setLayout(vis_layout)
        layout.addWidget(vis_group)

        # 3. Window Options
        window_group = QGroupBox("Window Options")
        window_layout = QHBoxLayout()
        window_layout.addWidget(QLabel("Always on Top"))
        self.aot_toggle = ToggleSwitch()
        self.aot_toggle.setChecked(self.settings.get("always_on_top", False))
        window_layout.addWidget(self.aot_toggle)
        window_group.setLayout(window_layout)
        layout.addWidget(window_group)

        layout.addStretch()

    def collect_settings(self):
        new_settings = dict(self.settings)
        new_settings.update({
            "default_scheme": self.scheme_combo.currentData(),
            "always_on_top": self.aot_toggle.isChecked(),
            "show_rgb": self.vis_toggles["rgb"].isChecked(),
            "show_hsl": self.vis_toggles["hsl"].isChecked(),
        })
        return new_settings

    def closeEvent(self, event):
        self.settings_changed.emit(self.collect_settings())
        super().closeEvent(event)


class MainWindow(QMainWindow):
    def __init__(self, initial_color=None, initial_scheme=None, settings_path=SETTINGS_FILE):
        super().__init__()
        self.setWindowTitle("Null Palette")
        self.setWindowIcon(load_icon())

        self.settings_path = settings_path
        self.app_settings = load_settings(settings_path)

        self.state = PaletteState.create(initial_color or DEFAULT_COLOR,
                                         initial_scheme or self.app_settings["default_scheme"])

        self.setup_ui()
        self.render_state()
        self._apply_window_flags()

    def setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setSpacing(10)
        main_layout.setContentsMargins(10, 10, 10, 10)

        # Top Bar
        top_bar = QHBoxLayout()
        top_bar.setSpacing(10)

        self.settings_btn = QPushButton()
        self.settings_btn.setIcon(create_gear_icon())
        self.settings_btn.setObjectName("SettingsButton")
        self.settings_btn.setFixedSize(40, 40)
        self.settings_btn.setCursor(Qt.PointingHandCursor)
        self.settings_btn.clicked.connect(self.open_settings)
        top_bar.addWidget(self.settings_btn)

        self.hex_input = QLineEdit(self.state.base_hex)
        self.hex_input.setFixedWidth(110)
        self.hex_input.setPlaceholderText("#RRGGBB")
        # textEdited only fires for user edits, so programmatic setText never loops back
        self.hex_input.textEdited.connect(self.on_hex_edited)
        self.hex_input.editingFinished.connect(self.on_hex_finished)
        top_bar.addWidget(self.hex_input)

        self.pick_btn = QPushButton("Pick…")
        self.pick_btn.setObjectName("PickButton")
        self.pick_btn.setCursor(Qt.PointingHandCursor)
        self.pick_btn.clicked.connect(self.open_color_dialog)
        top_bar.addWidget(self.pick_btn)

        self.scheme_combo = QComboBox()
        for scheme in HarmonyScheme:
            self.scheme_combo.addItem(scheme.label, scheme.value)
        self.scheme_combo.setCurrentIndex(self.scheme_combo.findData(self.state.scheme.value))
        self.scheme_combo.currentIndexChanged.connect(self.on_scheme_changed)
        top_bar.addWidget(self.scheme_combo)

        top_bar.addStretch()

        self.selected_preview = QFrame()
        self.selected_preview.setObjectName("PreviewFrame")
        self.selected_preview.setFixedSize(50, 50)
        top_bar.addWidget(self.selected_preview)

        main_layout.addLayout(top_bar)

        self.status_label = QLabel("")
        self.status_label.setObjectName("StatusLabel")
        main_layout.addWidget(self.status_label)

        # Wheel
        self.wheel = ColorWheel(self.app_settings["wheel_size"])
        self.wheel.clicked.connect(self.on_wheel_clicked)
        main_layout.addWidget(self.wheel, 0, Qt.AlignHCenter)

        palette_label = QLabel("Palette")
        palette_label.setObjectName("SectionTitle")
        main_layout.addWidget(palette_label)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFixedHeight(170)
        content = QWidget()
        content.setObjectName("PaletteContainer")
        self.palette_layout = QHBoxLayout(content)
        self.palette_layout.setSpacing(10)
        self.palette_layout.setContentsMargins(10, 10, 10, 10)
        scroll.setWidget(content)
        main_layout.addWidget(scroll)

    # --- Input handlers ---

    def on_hex_edited(self, text):
        # Unfinished input (and #RGB) waits for more digits or editingFinished
        if is_partial_hex(text):
            self.clear_error()
            return
        self.apply_hex(text)

    def on_hex_finished(self):
        self.apply_hex(self.hex_input.text())

    def apply_hex(self, text):
        try:
            new_state = self.state.with_hex(text)
        except InvalidColorFormat as e:
            self.show_error(str(e))
            return
        if new_state != self.state:
            self.set_state(new_state)
        else:
            self.clear_error()

    def on_scheme_changed(self, index):
        self.set_state(self.state.with_scheme(self.scheme_combo.itemData(index)))

    def on_wheel_clicked(self, pos):
        new_state = self.state.with_wheel_click(pos.x(), pos.y(), *self.wheel.center, self.wheel.radius)
        if new_state is self.state:
            return
        self.set_state(new_state)
        self.hex_input.setText(new_state.base_hex)

    def open_color_dialog(self):
        color = QColorDialog.getColor(QColor(self.state.base_hex), self, "Base Color")
        if not color.isValid():
            return
        self.hex_input.setText(color.name())
        self.apply_hex(color.name())

    def on_copied(self, text):
        logger.info("Copied %s to clipboard", text)
        self.statusBar().showMessage(f"Copied {text}", 1500)

    # --- State / rendering ---

    def set_state(self, new_state):
        self.state = new_state
        self.clear_error()
        self.render_state()

    def show_error(self, message):
        logger.warning(message)
        self.status_label.setText(message)
        self._set_input_invalid(True)

    def clear_error(self):
        self.status_label.setText("")
        self._set_input_invalid(False)

    def _set_input_invalid(self, invalid):
        self.hex_input.setProperty("invalid", invalid)
        repolish(self.hex_input)

    def render_state(self):
        state = self.state
        self.selected_preview.setStyleSheet(f"background-color: {state.base_hex};")
        self.wheel.set_hues(state.base.h, [c.h for c in state.palette])
        self.update_palette_cards()

    def update_palette_cards(self):
        while self.palette_layout.count():
            child = self.palette_layout.takeAt(0)
            if child.widget(): child.widget().deleteLater()

        self.palette_layout.addStretch(1)
        for color in self.state.palette:
            card = SwatchCard(color, self.app_settings)
            card.copied.connect(self.on_copied)
            self.palette_layout.addWidget(card)
        self.palette_layout.addStretch(1)

    def palette_cards(self):
        cards = []
        for i in range(self.palette_layout.count()):
            widget = self.palette_layout.itemAt(i).widget()
            if isinstance(widget, SwatchCard):
                cards.append(widget)
        return cards

    # --- Settings ---

    def open_settings(self):
        dlg = SettingsDialog(self, self.app_settings)
        dlg.settings_changed.connect(self.apply_settings)
        btn_pos = self.settings_btn.mapToGlobal(QPoint(0, self.settings_btn.height()))
        dlg.move(btn_pos)
        dlg.exec()

    def apply_settings(self, settings):
        self.app_settings = settings
        save_settings(self.app_settings, self.settings_path)
        QTimer.singleShot(100, self._apply_settings_deferred)

    def _apply_settings_deferred(self):
        self._apply_window_flags()
        size = self.app_settings["wheel_size"]
        self.wheel.setFixedSize(size, size)
        self.render_state()

    def _apply_window_flags(self):
        current = self.windowFlags()
        if self.app_settings["always_on_top"]: new_flags = current | Qt.WindowStaysOnTopHint
        else: new_flags = current & ~Qt.WindowStaysOnTopHint

        if new_flags != current:
            self.setWindowFlags(new_flags)
            if self.isVisible():
                self.show()


# --- Entry point ---

def _hex_arg(value):
    try:
        return parse_hex(value).hex
    except InvalidColorFormat as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="null-palette",
                                     description="Generate color harmonies around a base color.")
    parser.add_argument("--color", type=_hex_arg, default=None,
                        help=f"base color as #RRGGBB (default: {DEFAULT_COLOR})")
    parser.add_argument("--scheme", choices=[s.value for s in HarmonyScheme], default=None,
                        help="harmony scheme (default: from settings)")
    parser.add_argument("--settings", default=SETTINGS_FILE,
                        help="path to the settings JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def setup_logging(verbose=False):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format="%(levelname)s: %(message)s")


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)

    os.environ["QT_AUTO_SCREEN_SCALE_FACTOR"] = "1"
    app = QApplication(sys.argv[:1])
    app.setStyleSheet(STYLESHEET)

    window = MainWindow(args.color, args.scheme, args.settings)
    window.show()
    logger.debug("Started with %s / %s", window.state.base_hex, window.state.scheme.value)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
