"""
Theme definitions for the Exam Archive Browser.
"""


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#2563EB"
    PRIMARY_BLUE_HOVER = "#1D4ED8"
    PRIMARY_BLUE_PRESSED = "#1E40AF"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    HOVER = "#f0f0f0"
    DISABLED_BG = "#e0e0e0"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#6B7280"
    TEXT_DISABLED = "#757575"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders & Dividers
    BORDER = "#e0e0e0"
    BORDER_FOCUS = "#2563EB"

    # Status
    ERROR = "#DC2626"
    SUCCESS = "#059669"  # Mark scheme included

    # Selection
    SELECTION_BG = "#EFF6FF"
    SELECTION_TEXT = "#1f1f1f"


class Fonts:
    # Font Families
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"

    # Sizes
    H1 = "18pt"
    H2 = "15pt"
    BODY = "13pt"
    SMALL = "11pt"

    # Weights
    WEIGHT_MEDIUM = "500"
    WEIGHT_BOLD = "600"


class Styles:
    # Common QSS fragments

    BUTTON_PRIMARY = f"""
        QPushButton {{
            background-color: {Colors.PRIMARY_BLUE};
            color: {Colors.TEXT_ON_PRIMARY};
            border-radius: 6px;
            padding: 8px 16px;
            font-weight: {Fonts.WEIGHT_MEDIUM};
            border: none;
        }}
        QPushButton:hover {{
            background-color: {Colors.PRIMARY_BLUE_HOVER};
        }}
        QPushButton:pressed {{
            background-color: {Colors.PRIMARY_BLUE_PRESSED};
        }}
        QPushButton:disabled {{
            background-color: {Colors.DISABLED_BG};
            color: {Colors.TEXT_DISABLED};
        }}
    """

    BUTTON_SECONDARY = f"""
        QPushButton {{
            background-color: {Colors.SURFACE};
            color: {Colors.TEXT_PRIMARY};
            border: 1px solid {Colors.BORDER};
            border-radius: 6px;
            padding: 8px 16px;
            font-weight: {Fonts.WEIGHT_MEDIUM};
        }}
        QPushButton:hover {{
            background-color: {Colors.HOVER};
            border-color: {Colors.BORDER_FOCUS};
        }}
        QPushButton:pressed {{
            background-color: {Colors.BORDER};
        }}
    """

    BUTTON_LINK = f"""
        QPushButton {{
            background: transparent;
            border: none;
            color: {Colors.TEXT_SECONDARY};
            padding: 4px 6px;
        }}
        QPushButton:checked {{
            color: {Colors.PRIMARY_BLUE};
            font-weight: {Fonts.WEIGHT_BOLD};
        }}
        QPushButton:hover {{
            color: {Colors.PRIMARY_BLUE_HOVER};
        }}
    """

    INPUT_FIELD = f"""
        QLineEdit {{
            border: 1px solid {Colors.BORDER};
            border-radius: 6px;
            padding: 8px;
            background: {Colors.SURFACE};
            color: {Colors.TEXT_PRIMARY};
            selection-background-color: {Colors.SELECTION_BG};
            selection-color: {Colors.SELECTION_TEXT};
        }}
        QLineEdit:focus {{
            border: 1px solid {Colors.BORDER_FOCUS};
        }}
    """

    COMBOBOX = f"""
        QComboBox {{
            border: 1px solid {Colors.BORDER};
            border-radius: 6px;
            padding: 8px 12px;
            background: {Colors.SURFACE};
            color: {Colors.TEXT_PRIMARY};
            min-height: 20px;
        }}
        QComboBox:focus {{
            border: 1px solid {Colors.BORDER_FOCUS};
        }}
        QComboBox QAbstractItemView {{
            border: 1px solid {Colors.BORDER};
            selection-background-color: {Colors.SELECTION_BG};
            selection-color: {Colors.SELECTION_TEXT};
            outline: none;
            padding: 4px;
        }}
    """

    CARD = f"""
        QFrame#examCard {{
            background-color: {Colors.SURFACE};
            border: 1px solid {Colors.BORDER};
            border-radius: 16px;
        }}
        QFrame#examCard:hover {{
            border-color: {Colors.BORDER_FOCUS};
        }}
    """

    CARD_SUBJECT = f"color: {Colors.TEXT_SECONDARY}; font-size: {Fonts.SMALL}; letter-spacing: 1px;"
    CARD_TITLE = f"color: {Colors.TEXT_PRIMARY}; font-size: {Fonts.H2}; font-weight: {Fonts.WEIGHT_BOLD};"
    CARD_YEAR = f"color: {Colors.PRIMARY_BLUE}; font-weight: {Fonts.WEIGHT_BOLD};"

    BADGE_MARK_SCHEME = f"color: {Colors.SUCCESS};"
    BADGE_NO_MARK_SCHEME = f"color: {Colors.TEXT_SECONDARY};"

    MESSAGE_INFO = f"color: {Colors.TEXT_SECONDARY};"
    MESSAGE_ERROR = f"color: {Colors.ERROR};"


# Light palette applied to every widget
GLOBAL_STYLESHEET = f"""
    * {{
        font-family: {Fonts.UI_FONT};
        font-size: {Fonts.BODY};
        color: {Colors.TEXT_PRIMARY};
    }}

    QMainWindow, QWidget {{
        background-color: {Colors.BACKGROUND};
    }}

    QLabel {{
        background-color: transparent;
        color: {Colors.TEXT_PRIMARY};
    }}

    QStatusBar {{
        background-color: {Colors.SURFACE};
        color: {Colors.TEXT_SECONDARY};
    }}

    QScrollArea {{
        background: {Colors.BACKGROUND};
        border: none;
    }}
    QScrollArea > QWidget > QWidget {{
        background: {Colors.BACKGROUND};
    }}

    #mainHeader {{
        background-color: {Colors.SURFACE};
        border-bottom: 1px solid {Colors.BORDER};
    }}
    #mainTitle {{
        font-size: {Fonts.H1};
        font-weight: {Fonts.WEIGHT_BOLD};
    }}
"""


def apply_global_stylesheet(app) -> None:
    """
    Apply the shared stylesheet and default font to the QApplication.
    """
    from PySide6.QtGui import QFont

    # Default font for widgets without explicit styling
    font = QFont()
    font.setFamily(Fonts.UI_FONT.split(",")[0].strip(" '\""))
    font.setPointSize(int(Fonts.BODY.replace("pt", "")))
    app.setFont(font)

    app.setStyleSheet(GLOBAL_STYLESHEET)


def apply_shadow(widget, blur_radius=20, x_offset=2, y_offset=4, color=None):
    """Apply a soft shadow to a widget."""
    from PySide6.QtWidgets import QGraphicsDropShadowEffect
    from PySide6.QtGui import QColor

    if color is None:
        color = QColor(0, 0, 0, 45)

    shadow = QGraphicsDropShadowEffect(widget)
    shadow.setBlurRadius(blur_radius)
    shadow.setXOffset(x_offset)
    shadow.setYOffset(y_offset)
    shadow.setColor(color)
    widget.setGraphicsEffect(shadow)
