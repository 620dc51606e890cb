"""
LyricFinder - Centralized Theme Module

All color constants, status colors, button styles, and the global application
stylesheet live here.  Widgets import from this module instead of defining
their own local color constants.
"""


class Theme:
    """Application-wide color and style constants."""

    # --- Core palette ---
    BG = "#2b2b2b"
    PANEL = "#353535"
    TEXT = "#e0e0e0"
    ACCENT = "#E8A838"
    DARK_TEXT = "#1a1a1a"
    DIMMED = "#808080"
    ERROR = "#F44336"

    # --- Structural colors ---
    BORDER = "#555555"
    DISABLED_BG = "#3a3a3a"
    DISABLED_TEXT = "#666666"
    LYRICS_BG = "#000000"
    ERROR_BG = "#3b1f1f"

    # --- Lyrics fetch status colors ---
    FETCH_STATUS_COLORS = {
        "idle":    "#888888",
        "loading": "#FFC107",
        "ready":   "#4CAF50",
        "error":   "#F44336",
    }

    # -----------------------------------------------------------------
    # Reusable style fragments
    # -----------------------------------------------------------------

    @staticmethod
    def accent_button_style() -> str:
        """Gold accent button style (primary actions)."""
        return f"""
            QPushButton {{
                background-color: {Theme.ACCENT};
                color: {Theme.DARK_TEXT};
                border: none;
                border-radius: 4px;
                padding: 8px 20px;
                font-weight: bold;
                font-size: 13px;
            }}
            QPushButton:hover {{
                background-color: #F0B848;
            }}
            QPushButton:pressed {{
                background-color: #D09830;
            }}
            QPushButton:disabled {{
                background-color: {Theme.DISABLED_BG};
                color: {Theme.DISABLED_TEXT};
            }}
        """

    @staticmethod
    def badge_style(color: str) -> str:
        return (
            f"QLabel {{ background-color: {color}; color: white;"
            f" padding: 2px 10px; border-radius: 9px;"
            f" font-size: 11px; font-weight: bold; }}"
        )

    @staticmethod
    def lyrics_text_style() -> str:
        """Black card used for the lyrics body."""
        return f"""
            QTextEdit {{
                background-color: {Theme.LYRICS_BG};
                color: #ffffff;
                border: 1px solid #333333;
                border-radius: 12px;
                padding: 24px;
                font-family: 'Noto Sans SC', 'Microsoft YaHei', sans-serif;
                font-size: 16px;
            }}
        """

    @staticmethod
    def error_label_style() -> str:
        return f"""
            QLabel {{
                background-color: {Theme.ERROR_BG};
                color: {Theme.ERROR};
                border-radius: 8px;
                padding: 12px;
            }}
        """

    @staticmethod
    def global_stylesheet() -> str:
        """Return the full application stylesheet."""
        return f"""
QMainWindow {{
    background-color: {Theme.BG};
}}
QWidget {{
    background-color: {Theme.BG};
    color: {Theme.TEXT};
}}
QLabel {{
    color: {Theme.TEXT};
}}
QTextEdit, QLineEdit, QPlainTextEdit {{
    background-color: {Theme.PANEL};
    color: {Theme.TEXT};
    border: 1px solid {Theme.BORDER};
    border-radius: 4px;
    padding: 4px;
    selection-background-color: {Theme.ACCENT};
    selection-color: {Theme.DARK_TEXT};
}}
QTextEdit:focus, QLineEdit:focus {{
    border: 1px solid {Theme.ACCENT};
}}
QListView {{
    background-color: {Theme.PANEL};
    color: {Theme.TEXT};
    border: 1px solid {Theme.BORDER};
}}
QListView::item:selected {{
    background-color: {Theme.ACCENT};
    color: {Theme.DARK_TEXT};
}}
QStatusBar {{
    background-color: #1e1e1e;
    color: {Theme.DIMMED};
}}
"""
