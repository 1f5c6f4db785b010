"""Qt backends for the pagination exporter.

QtRegionRasterizer paints the preview's text document into a QImage and
QtPdfDocument lays those images out on QPdfWriter pages.
"""
import math

from PyQt6.QtCore import QMarginsF, QRectF, QSizeF
from PyQt6.QtGui import QColor, QImage, QPageLayout, QPageSize, QPainter, QPdfWriter

from .config import APP_TITLE, LETTER_WIDTH_PX
from .data_structures import Bitmap, PagePlacement
from .exceptions import ExportError, RasterizationError
from .pagination import PageDocument, PaginationExporter, RegionRasterizer

# PDF device resolution
PDF_RESOLUTION_DPI = 300


class QtRegionRasterizer(RegionRasterizer):
    """Rasterizes any widget exposing document() (e.g. QTextBrowser)."""
    
    def __init__(self, text_width: int = LETTER_WIDTH_PX):
        self.text_width = text_width
    
    def render_region_to_image(self, region, scale: int, background: str) -> Bitmap:
        # Lay out a copy so the on-screen viewport width does not leak in
        doc = region.document().clone()
        doc.setTextWidth(self.text_width)
        size = doc.size()
        width = math.ceil(size.width() * scale)
        height = math.ceil(size.height() * scale)
        
        if width <= 0 or height <= 0:
            raise RasterizationError(width, height)
        
        image = QImage(width, height, QImage.Format.Format_ARGB32)
        if image.isNull():
            raise RasterizationError(width, height)
        image.fill(QColor(background))
        
        painter = QPainter(image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
            painter.scale(scale, scale)
            doc.drawContents(painter)
        finally:
            painter.end()
        
        return Bitmap(image=image, width=image.width(), height=image.height())


class QtPdfDocument(PageDocument):
    """PDF document in millimetre units backed by QPdfWriter."""
    
    def __init__(self, filepath: str, page_width_mm: float, page_height_mm: float):
        self.filepath = filepath
        self.writer = QPdfWriter(filepath)
        self.writer.setResolution(PDF_RESOLUTION_DPI)
        self.writer.setTitle(APP_TITLE)
        self.writer.setCreator(APP_TITLE)
        self.writer.setPageSize(QPageSize(QSizeF(page_width_mm, page_height_mm), QPageSize.Unit.Millimeter))
        self.writer.setPageMargins(QMarginsF(0, 0, 0, 0), QPageLayout.Unit.Millimeter)
        self._dots_per_mm = PDF_RESOLUTION_DPI / 25.4
        
        self.painter = QPainter()
        if not self.painter.begin(self.writer):
            raise ExportError("Could not open PDF for writing", filepath)
        self.painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
    
    def add_page(self) -> None:
        if not self.writer.newPage():
            raise ExportError("Could not add a page to the PDF", self.filepath)
    
    def draw_image(self, bitmap: Bitmap, placement: PagePlacement) -> None:
        k = self._dots_per_mm
        target = QRectF(0, placement.y_offset * k, placement.width * k, placement.height * k)
        self.painter.drawImage(target, bitmap.image)
    
    def save(self) -> None:
        if self.painter.isActive() and not self.painter.end():
            raise ExportError("Could not finish writing the PDF", self.filepath)


def create_qt_exporter(config=None):
    """Build a PaginationExporter wired to the Qt backends."""
    return PaginationExporter(QtRegionRasterizer(), QtPdfDocument, config)
