"""Main application window for the PF Loan Application Generator."""
import sys
import os
from datetime import date

from PyQt6.QtWidgets import (QApplication, QMainWindow, QWidget, QVBoxLayout, QSplitter,
                             QLabel, QMessageBox, QFileDialog)
from PyQt6.QtCore import Qt

from .config import APP_TITLE, ORGANIZATION_NAME
from .data_structures import ApplicationDraft
from .exceptions import LetterAppError, RasterizationError
from .form_state import FormState
from .letter_renderer import LetterRenderer
from .qt_export import create_qt_exporter
from .result import Result, ErrorType
from .theme import ThemeManager
from .views.application_form import ApplicationForm
from .views.letter_preview import PreviewCard


class MainApp(QMainWindow):
    """Main application window: form on the left, live letter preview on the right."""
    
    def __init__(self):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(1200, 780)
        
        self.theme_manager = ThemeManager()
        self.state = FormState(on_changed=self.on_draft_changed)
        self.renderer = LetterRenderer(self.state.today_string, self.theme_manager)
        self.exporter = create_qt_exporter()
        self.preview = None
        
        downloads = os.path.join(os.path.expanduser("~"), "Downloads")
        self.last_export_folder = downloads if os.path.isdir(downloads) else os.path.expanduser("~")
        
        self.init_ui()
        self.setStyleSheet(self.theme_manager.window_stylesheet())
        self.refresh_preview()
    
    def init_ui(self):
        central = QWidget()
        central.setObjectName("central")
        self.setCentralWidget(central)
        
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        
        header = QLabel(APP_TITLE)
        header.setObjectName("appHeader")
        layout.addWidget(header)
        
        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.setContentsMargins(12, 12, 12, 12)
        
        self.form = ApplicationForm(self.state)
        self.form.download_requested.connect(self.download_pdf)
        splitter.addWidget(self.form)
        
        preview_card = PreviewCard()
        self.preview = preview_card.preview
        splitter.addWidget(preview_card)
        splitter.setStretchFactor(0, 2)
        splitter.setStretchFactor(1, 3)
        layout.addWidget(splitter, 1)
        
        footer = QLabel(f"© {date.today().year} {ORGANIZATION_NAME}")
        footer.setObjectName("appFooter")
        footer.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(footer)
    
    def on_draft_changed(self, draft: ApplicationDraft):
        if self.preview is not None:
            self.preview.update_letter(self.renderer.render_html(draft))
    
    def refresh_preview(self):
        self.on_draft_changed(self.state.draft)
    
    def export_letter(self, folder) -> Result:
        """Export the preview into folder.
        
        Returns:
            Result with the saved path, a skipped Result when the preview
            is not mounted, or a failed Result with the error message.
        """
        try:
            path = self.exporter.export(self.preview, self.state.get("employee_name"), folder)
        except RasterizationError as e:
            print(f"PDF export failed: {e}")
            return Result.fail(str(e), ErrorType.RASTER)
        except LetterAppError as e:
            print(f"PDF export failed: {e}")
            return Result.fail(str(e), ErrorType.EXPORT)
        except OSError as e:
            print(f"PDF export failed: {e}")
            return Result.fail(str(e), ErrorType.IO)
        return Result.ok(path)
    
    def download_pdf(self):
        folder = QFileDialog.getExistingDirectory(self, "Select Folder to Save Letter", self.last_export_folder)
        if not folder:
            return
        self.last_export_folder = folder
        
        result = self.export_letter(folder)
        if not result:
            QMessageBox.critical(self, "Export Failed", f"Could not create the PDF.\n\n{result.error}")
        elif not result.skipped:
            QMessageBox.information(self, "Saved", f"Letter saved to:\n{result.value}")


def main():
    """Entry point for the application."""
    app = QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    
    window = MainApp()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
