class Theme:
    LIGHT = {
        "bg_primary": "#F3F4F6",      # Window background (light gray)
        "bg_secondary": "#FFFFFF",    # Cards (white)
        "bg_header": "qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 #141E30, stop:1 #243B55)",
        "text_primary": "#1F2937",
        "text_secondary": "#4B5563",
        "text_header": "#FFFFFF",
        "accent": "#3B82F6",
        "accent_hover": "#2563eb",
        "border": "#E5E7EB",
        "input_bg": "#FFFFFF",
        "card_border": "#E5E7EB",
        "letter_bg": "#FFFFFF",       # Always white, the export background
        "letter_text": "#111111",
    }


class ThemeManager:
    def __init__(self):
        self.colors = Theme.LIGHT

    def window_stylesheet(self):
        c = self.colors
        return f"""
            QMainWindow, QWidget#central {{ background: {c['bg_primary']}; }}
            QLabel#appHeader {{
                background: {c['bg_header']}; color: {c['text_header']};
                font-size: 18px; font-weight: bold; padding: 12px;
            }}
            QLabel#appFooter {{ color: {c['text_secondary']}; font-size: 11px; padding: 6px; }}
            QLabel#sectionTitle {{ color: {c['text_primary']}; font-size: 15px; font-weight: bold; }}
            QFrame#card {{
                background: {c['bg_secondary']}; border: 1px solid {c['card_border']};
                border-radius: 8px;
            }}
            QLineEdit, QComboBox {{
                background: {c['input_bg']}; border: 1px solid {c['border']};
                border-radius: 4px; padding: 6px; color: {c['text_primary']};
            }}
            QPushButton#primary {{
                background: {c['accent']}; color: white; border: none;
                border-radius: 4px; padding: 8px 16px; font-weight: bold;
            }}
            QPushButton#primary:hover {{ background: {c['accent_hover']}; }}
        """

    def letter_css(self):
        c = self.colors
        return f"""
            body {{ background: {c['letter_bg']}; color: {c['letter_text']};
                    font-family: 'Times New Roman', serif; font-size: 12pt; }}
            .letterHeader {{ text-align: right; margin-bottom: 18px; }}
            p {{ margin: 0 0 12px 0; line-height: 140%; }}
        """
