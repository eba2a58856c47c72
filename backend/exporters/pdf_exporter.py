"""
PDF timetable exporter

Embeds a raster capture of the rendered grid on a landscape A4 page.
"""
from io import BytesIO
from typing import Optional, Protocol

from PIL import Image
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from backend.exporters.grid_renderer import flatten_to_white
from backend.utils.logger import get_logger

logger = get_logger(__name__)

PDF_FILE_NAME = "class-timetable.pdf"
RASTER_SCALE = 2

PAGE_MARGIN_MM = 10
IMAGE_WIDTH_MM = 280


class Rasterizable(Protocol):
    """Anything that can draw itself to an image, e.g. TimetableGridRenderer"""

    def rasterize(self, scale: int = 2) -> Image.Image:
        ...


def image_dimensions_mm(pixel_width: int, pixel_height: int,
                        image_width_mm: float = IMAGE_WIDTH_MM) -> tuple:
    """
    Placed size of an image scaled to the page width

    Returns:
        (width_mm, height_mm) with the aspect ratio preserved
    """
    if pixel_width <= 0 or pixel_height <= 0:
        raise ValueError(f"Invalid image size {pixel_width}x{pixel_height}")
    return image_width_mm, pixel_height * image_width_mm / pixel_width


def page_size_for(image_height_mm: float) -> tuple:
    """
    Landscape A4, extended downwards when the image would not fit

    Returns:
        (width, height) in points
    """
    page_width, page_height = landscape(A4)
    needed = (image_height_mm + 2 * PAGE_MARGIN_MM) * mm
    return page_width, max(page_height, needed)


class TimetablePDFExporter:
    """Captures a rendered grid and writes it into a one-page PDF"""

    def __init__(self, grid: Optional[Rasterizable], scale: int = RASTER_SCALE):
        self.grid = grid
        self.scale = scale

    def capture(self) -> Image.Image:
        """
        Rasterize the grid with a white background

        Raises:
            ValueError: when there is no rendered grid to capture
        """
        if self.grid is None:
            raise ValueError("Timetable grid is not rendered")
        return flatten_to_white(self.grid.rasterize(scale=self.scale))

    def build_pdf(self, image: Image.Image) -> bytes:
        """
        Place an already captured image on the page

        Args:
            image: RGB capture of the grid

        Returns:
            PDF bytes
        """
        width_mm, height_mm = image_dimensions_mm(*image.size)
        page_width, page_height = page_size_for(height_mm)

        buffer = BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=(page_width, page_height))
        pdf.setTitle("Class Timetable")

        # reportlab measures y from the bottom edge
        x = PAGE_MARGIN_MM * mm
        y = page_height - (PAGE_MARGIN_MM + height_mm) * mm
        pdf.drawImage(ImageReader(image), x, y, width=width_mm * mm, height=height_mm * mm)

        pdf.showPage()
        pdf.save()

        logger.info("pdf_built", pixels=f"{image.size[0]}x{image.size[1]}",
                    page_height_mm=round(page_height / mm, 1))
        return buffer.getvalue()

    def to_bytes(self) -> bytes:
        return self.build_pdf(self.capture())

    def export(self, filename: str = PDF_FILE_NAME) -> str:
        """Save as a PDF file"""
        content = self.to_bytes()
        with open(filename, 'wb') as f:
            f.write(content)
        return filename
