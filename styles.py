STYLESHEET = """
QMainWindow {
    background-color: #121212;
    color: #e0e0e0;
}

QWidget {
    font-family: 'Roboto', 'Inter', 'Segoe UI', monospace;
    font-size: 14px;
    color: #e0e0e0;
}

QLabel#SectionTitle {
    font-weight: bold;
    font-size: 15px;
    margin-top: 8px;
    margin-bottom: 4px;
    color: #ffffff;
}

/* Inline error under the hex field */
QLabel#StatusLabel {
    color: #F44336;
    font-size: 12px;
}

/* Buttons */
QPushButton {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 8px;
    padding: 6px 12px;
    font-weight: bold;
    color: #e0e0e0;
}
QPushButton:hover {
    background-color: #2c2c2c;
    border-color: #444444;
}
QPushButton:pressed {
    background-color: #383838;
}

QPushButton#PickButton {
    background-color: #ffffff;
    color: #000000;
    border-radius: 10px;
    padding: 8px 14px;
}
QPushButton#PickButton:hover {
    background-color: #dddddd;
}

QPushButton#SettingsButton {
    background-color: transparent;
    border: 1px solid #444444;
    border-radius: 8px;
}
QPushButton#SettingsButton:hover {
    background-color: #2c2c2c;
    border-color: #666666;
}

/* Hex input */
QLineEdit {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 6px;
    padding: 6px;
    font-family: monospace;
    font-size: 15px;
}
QLineEdit[invalid="true"] {
    border-color: #F44336;
}

/* Base color preview */
QFrame#PreviewFrame {
    border: 1px solid #333333;
    border-radius: 10px;
}

/* Palette cards */
QFrame#SwatchCard {
    border: 1px solid #333333;
    border-radius: 8px;
}

QLabel#HexLabel {
    font-family: monospace;
    font-size: 15px;
    font-weight: bold;
}

QLabel#CodeLabel {
    font-family: monospace;
    font-size: 11px;
}
QLabel#CodeLabel[flashing="true"] {
    text-decoration: underline;
}

QScrollArea {
    border: none;
    background-color: transparent;
}

QWidget#PaletteContainer {
    background-color: #121212;
}

/* Settings Dialog */
QDialog {
    background-color: #121212;
    color: #e0e0e0;
}
QGroupBox {
    border: 1px solid #333333;
    border-radius: 6px;
    margin-top: 8px;
    color: #e0e0e0;
}
QGroupBox::title {
    subcontrol-origin: margin;
    subcontrol-position: top left;
    padding: 0 5px;
    color: #aaaaaa;
}

/* ComboBox */
QComboBox {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 6px;
    padding: 5px;
    color: #e0e0e0;
    min-width: 8em;
}
QComboBox:hover {
    border-color: #555555;
}
QComboBox QAbstractItemView {
    background-color: #1e1e1e;
    color: #e0e0e0;
    selection-background-color: #333333;
    selection-color: #ffffff;
    border: 1px solid #333333;
    outline: none;
}

/* Scrollbar */
QScrollBar:horizontal {
    border: none;
    background: #121212;
    height: 10px;
}
QScrollBar::handle:horizontal {
    background: #333333;
    min-width: 20px;
    border-radius: 5px;
}
QScrollBar::handle:horizontal:hover {
    background: #555555;
}
QScrollBar::add-line:horizontal, QScrollBar::sub-line:horizontal {
    border: none;
    background: none;
}
"""
