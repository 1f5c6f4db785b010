"""Letter preview panel."""
from PyQt6.QtWidgets import QFrame, QVBoxLayout, QLabel, QTextBrowser

from ..config import LETTER_WIDTH_PX


class LetterPreview(QTextBrowser):
    """Read-only view of the rendered letter. This is the exported region."""
    
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setOpenLinks(False)
        self.setMinimumWidth(LETTER_WIDTH_PX // 2)
        self.setStyleSheet("QTextBrowser { background: #ffffff; border: 1px solid #E5E7EB; }")
    
    def update_letter(self, html: str) -> None:
        # Keep the scroll position while typing
        bar = self.verticalScrollBar()
        pos = bar.value()
        self.setHtml(html)
        bar.setValue(pos)


class PreviewCard(QFrame):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("card")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        
        title = QLabel("Letter Preview")
        title.setObjectName("sectionTitle")
        layout.addWidget(title)
        
        self.preview = LetterPreview()
        layout.addWidget(self.preview, 1)
