"""
Raster rendering of the timetable grid (Pillow)

TimetableGridRenderer is what the PDF and PNG exports capture: it draws the
same day x slot table the page shows, on a transparent canvas.
"""
import os
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from backend.exporters.timetable_grid import build_cell_matrix, course_color, CORNER_LABEL
from backend.models import ScheduleEntry
from backend.utils.logger import get_logger

logger = get_logger(__name__)

# Unscaled layout, in pixels
MARGIN = 12
SHADOW = 8
BORDER = 4
PADDING = 16
DAY_COLUMN_WIDTH = 110
SLOT_COLUMN_WIDTH = 150
HEADER_HEIGHT = 36
ROW_HEIGHT = 84
CAPTION_HEIGHT = 32
CELL_INSET = 4

HEADER_FILL = '#F3F4F6'
GRID_LINE = '#D1D5DB'
TEXT_COLOR = '#111827'
MUTED_TEXT = '#6B7280'
CAPTION = "Your weekly class schedule"
EMPTY_MESSAGE = "No classes scheduled yet"

_FONT_CANDIDATES = {
    False: ["DejaVuSans.ttf", "Arial.ttf", "LiberationSans-Regular.ttf"],
    True: ["DejaVuSans-Bold.ttf", "Arial Bold.ttf", "LiberationSans-Bold.ttf"],
}


def load_font(size: int, bold: bool = False) -> ImageFont.ImageFont:
    """
    Load a TrueType font, trying common system fonts in turn

    Falls back to Pillow's bundled default font at the requested size.
    """
    for name in _FONT_CANDIDATES[bold]:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue

    font_dir = os.getenv('TIMETABLE_FONT_DIR')
    if font_dir:
        path = os.path.join(font_dir, _FONT_CANDIDATES[bold][0])
        if os.path.exists(path):
            return ImageFont.truetype(path, size)

    return ImageFont.load_default(size=size)


def flatten_to_white(image: Image.Image) -> Image.Image:
    """Resolve transparent regions to white and drop the alpha channel"""
    if image.mode in ('RGBA', 'LA') or (image.mode == 'P' and 'transparency' in image.info):
        rgba = image.convert('RGBA')
        background = Image.new('RGB', rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.split()[-1])
        return background
    return image.convert('RGB')


def fit_text(draw: ImageDraw.ImageDraw, text: str, font, max_width: float) -> str:
    """Trim text with an ellipsis so it fits on one line"""
    if draw.textlength(text, font=font) <= max_width:
        return text

    ellipsis = "..."
    while text and draw.textlength(text + ellipsis, font=font) > max_width:
        text = text[:-1]
    return text + ellipsis if text else ""


class TimetableGridRenderer:
    """Renders a snapshot of the timetable grid to an image"""

    def __init__(self, entries: Sequence[ScheduleEntry],
                 time_slots: Sequence[str],
                 days: Sequence[str]):
        self.entries = tuple(entries)
        self.time_slots = tuple(time_slots)
        self.days = tuple(days)

    @property
    def table_width(self) -> int:
        return DAY_COLUMN_WIDTH + SLOT_COLUMN_WIDTH * len(self.time_slots)

    @property
    def table_height(self) -> int:
        return HEADER_HEIGHT + ROW_HEIGHT * len(self.days)

    def size(self, scale: int = 1) -> tuple:
        """Canvas size in pixels at a given scale"""
        width = MARGIN * 2 + SHADOW + BORDER * 2 + PADDING * 2 + self.table_width
        height = (MARGIN * 2 + SHADOW + BORDER * 2 + PADDING * 2
                  + self.table_height + CAPTION_HEIGHT)
        if not self.entries:
            height += ROW_HEIGHT
        return width * scale, height * scale

    def rasterize(self, scale: int = 2) -> Image.Image:
        """
        Draw the grid

        Args:
            scale: oversampling factor

        Returns:
            RGBA image; everything outside the panel is transparent
        """
        if scale < 1:
            raise ValueError(f"scale must be >= 1, got {scale}")

        s = scale
        width, height = self.size(scale)
        image = Image.new('RGBA', (width, height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(image)

        regular = load_font(12 * s)
        bold = load_font(13 * s, bold=True)
        small = load_font(10 * s)

        # Panel with offset shadow
        panel_left, panel_top = MARGIN * s, MARGIN * s
        panel_right = width - (MARGIN + SHADOW) * s
        panel_bottom = height - (MARGIN + SHADOW) * s
        draw.rectangle([panel_left + SHADOW * s, panel_top + SHADOW * s,
                        panel_right + SHADOW * s, panel_bottom + SHADOW * s], fill='black')
        draw.rectangle([panel_left, panel_top, panel_right, panel_bottom],
                       fill='white', outline='black', width=BORDER * s)

        left = panel_left + (BORDER + PADDING) * s
        top = panel_top + (BORDER + PADDING) * s

        # Header row
        draw.rectangle([left, top, left + self.table_width * s, top + HEADER_HEIGHT * s],
                       fill=HEADER_FILL)
        draw.text((left + 8 * s, top + 10 * s), CORNER_LABEL, font=bold, fill=TEXT_COLOR)
        for i, slot in enumerate(self.time_slots):
            x = left + (DAY_COLUMN_WIDTH + SLOT_COLUMN_WIDTH * i) * s
            label_width = draw.textlength(slot, font=bold)
            draw.text((x + (SLOT_COLUMN_WIDTH * s - label_width) / 2, top + 10 * s),
                      slot, font=bold, fill=TEXT_COLOR)

        # Day rows
        matrix = build_cell_matrix(self.entries, self.time_slots, self.days)
        for r, (day, cells) in enumerate(zip(self.days, matrix)):
            y = top + (HEADER_HEIGHT + ROW_HEIGHT * r) * s
            draw.rectangle([left, y, left + DAY_COLUMN_WIDTH * s, y + ROW_HEIGHT * s],
                           fill=HEADER_FILL)
            draw.text((left + 8 * s, y + 10 * s), day, font=bold, fill=TEXT_COLOR)
            draw.line([left, y, left + self.table_width * s, y], fill=GRID_LINE, width=s)

            for c, entry in enumerate(cells):
                if entry is None:
                    continue
                x = left + (DAY_COLUMN_WIDTH + SLOT_COLUMN_WIDTH * c) * s
                self._draw_class_block(draw, entry, x, y, s, bold, regular, small)

        bottom = top + self.table_height * s
        draw.line([left, bottom, left + self.table_width * s, bottom], fill=GRID_LINE, width=s)

        if not self.entries:
            message_width = draw.textlength(EMPTY_MESSAGE, font=bold)
            draw.text((left + (self.table_width * s - message_width) / 2,
                       bottom + (ROW_HEIGHT * s) / 2 - 8 * s),
                      EMPTY_MESSAGE, font=bold, fill=MUTED_TEXT)
            bottom += ROW_HEIGHT * s

        caption_width = draw.textlength(CAPTION, font=small)
        draw.text((left + (self.table_width * s - caption_width) / 2, bottom + 10 * s),
                  CAPTION, font=small, fill=MUTED_TEXT)

        logger.debug("grid_rasterized", width=width, height=height, scale=scale,
                     entries=len(self.entries))
        return image

    def _draw_class_block(self, draw, entry, x, y, s, bold, regular, small):
        """One coloured block: code, title, location, lecturer"""
        fill, border = course_color(entry.course_code)
        inset = CELL_INSET * s
        draw.rounded_rectangle([x + inset, y + inset,
                                x + SLOT_COLUMN_WIDTH * s - inset, y + ROW_HEIGHT * s - inset],
                               radius=4 * s, fill=fill, outline=border, width=s)

        text_x = x + inset + 6 * s
        max_width = SLOT_COLUMN_WIDTH * s - 2 * inset - 12 * s
        lines = [
            (entry.course_code, bold, 0),
            (entry.course_title, regular, 18),
            (f"@ {entry.location}", small, 38),
            (f"Lecturer: {entry.lecturer}", small, 54),
        ]
        for text, font, offset in lines:
            draw.text((text_x, y + inset + (4 + offset) * s),
                      fit_text(draw, text, font, max_width), font=font, fill=TEXT_COLOR)
