"""Paginated export of the letter preview.

The preview is rasterized once into a single tall bitmap. Each page of the
document is a window onto that bitmap: page N draws the whole image shifted
up by N page heights. There is no content-aware break avoidance, so a line
of text may be split across two pages.
"""
import os
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from .data_structures import Bitmap, ExportConfig, PagePlacement
from .exceptions import ExportError
from .formatters import export_filename

# Slack for float error when the image is an exact multiple of the page
PAGE_EPSILON = 1e-6


def plan_pages(image_width: float, image_height: float,
               page_width: float, page_height: float) -> List[PagePlacement]:
    """Compute where the bitmap is drawn on each page.
    
    The image is scaled to the full page width, keeping its aspect ratio.
    Page 0 draws it at offset 0; every further page draws it at the
    cumulative negative offset until the remaining height fits on one page.
    
    Args:
        image_width: Bitmap width in pixels.
        image_height: Bitmap height in pixels.
        page_width: Page width in document units.
        page_height: Page height in document units.
        
    Returns:
        One PagePlacement per page, in page order.
        
    Raises:
        ExportError: If the image or the page has no area.
    """
    if image_width <= 0 or image_height <= 0:
        raise ExportError(f"Cannot paginate an empty image ({image_width}x{image_height})")
    if page_width <= 0 or page_height <= 0:
        raise ExportError(f"Invalid page size ({page_width}x{page_height})")
    
    img_width = page_width
    img_height = image_height * img_width / image_width
    
    placements = [PagePlacement(page_index=0, y_offset=0.0, width=img_width, height=img_height)]
    height_left = img_height - page_height
    position = 0.0
    
    while height_left > PAGE_EPSILON:
        position -= page_height
        placements.append(PagePlacement(
            page_index=len(placements),
            y_offset=position,
            width=img_width,
            height=img_height
        ))
        height_left -= page_height
    
    return placements


class RegionRasterizer(ABC):
    """Renders a visual region into a Bitmap."""
    
    @abstractmethod
    def render_region_to_image(self, region, scale: int, background: str) -> Bitmap:
        pass


class PageDocument(ABC):
    """A multi-page document that starts with one blank page."""
    
    @abstractmethod
    def add_page(self) -> None:
        pass
    
    @abstractmethod
    def draw_image(self, bitmap: Bitmap, placement: PagePlacement) -> None:
        """Draw the bitmap on the current page at the given placement."""
        pass
    
    @abstractmethod
    def save(self) -> None:
        pass


# (path, page_width_mm, page_height_mm) -> PageDocument
DocumentFactory = Callable[[str, float, float], PageDocument]


class PaginationExporter:
    """Exports a rendered region as a paginated document.
    
    Failures of the rasterizer or the document are not caught here; they
    propagate to the caller.
    """
    
    def __init__(self, rasterizer: RegionRasterizer, document_factory: DocumentFactory,
                 config: ExportConfig = None):
        """Initialize PaginationExporter.
        
        Args:
            rasterizer: RegionRasterizer used to capture the region.
            document_factory: Callable creating a PageDocument for a path.
            config: Optional ExportConfig (scale, background, page size).
        """
        self.rasterizer = rasterizer
        self.document_factory = document_factory
        self.config = config or ExportConfig()
    
    def render_region_to_image(self, region) -> Bitmap:
        return self.rasterizer.render_region_to_image(
            region, self.config.scale, self.config.background
        )
    
    def paginate_image(self, bitmap: Bitmap, filepath: str) -> List[PagePlacement]:
        """Write the bitmap to a document at filepath, one band per page.
        
        Returns:
            The placements that were drawn.
        """
        placements = plan_pages(
            bitmap.width, bitmap.height,
            self.config.page_width_mm, self.config.page_height_mm
        )
        document = self.document_factory(
            filepath, self.config.page_width_mm, self.config.page_height_mm
        )
        for placement in placements:
            if placement.page_index > 0:
                document.add_page()
            document.draw_image(bitmap, placement)
        document.save()
        return placements
    
    def export(self, region, employee_name: str, folder: str) -> Optional[str]:
        """Export the region to folder as PF_Loan_Application_<name>.pdf.
        
        Args:
            region: The rendered letter region, or None if not mounted.
            employee_name: Name used to derive the filename.
            folder: Output folder path.
            
        Returns:
            Path of the saved file, or None when there is no region.
        """
        if region is None:
            return None
        
        bitmap = self.render_region_to_image(region)
        filepath = os.path.join(folder, export_filename(employee_name))
        self.paginate_image(bitmap, filepath)
        return filepath
