"""
Grid renderer and PDF exporter tests
"""
import pytest
from PIL import Image
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import mm

from backend.exporters.grid_renderer import TimetableGridRenderer, flatten_to_white
from backend.exporters.pdf_exporter import (
    TimetablePDFExporter,
    image_dimensions_mm,
    page_size_for,
    IMAGE_WIDTH_MM
)


class FakeGrid:
    def __init__(self, size=(560, 200)):
        self.size = size
        self.scales = []

    def rasterize(self, scale=2):
        self.scales.append(scale)
        return Image.new('RGBA', self.size, (0, 0, 0, 0))


def test_image_scaled_to_page_width():
    assert image_dimensions_mm(560, 200) == (IMAGE_WIDTH_MM, 100)
    assert image_dimensions_mm(1400, 1400) == (280, 280)


def test_invalid_image_size():
    with pytest.raises(ValueError):
        image_dimensions_mm(0, 100)


def test_page_is_landscape_a4_when_image_fits():
    assert page_size_for(100) == landscape(A4)


def test_page_extends_for_tall_image():
    width, height = page_size_for(300)

    assert width == landscape(A4)[0]
    assert height == pytest.approx(320 * mm)


def test_flatten_to_white_resolves_transparency():
    image = Image.new('RGBA', (4, 4), (0, 0, 0, 0))
    image.putpixel((1, 1), (255, 0, 0, 255))

    flat = flatten_to_white(image)

    assert flat.mode == 'RGB'
    assert flat.getpixel((0, 0)) == (255, 255, 255)
    assert flat.getpixel((1, 1)) == (255, 0, 0)


def test_missing_grid_fails_fast():
    with pytest.raises(ValueError):
        TimetablePDFExporter(None).capture()


def test_pdf_built_from_capture_at_double_scale():
    grid = FakeGrid()

    content = TimetablePDFExporter(grid).to_bytes()

    assert content.startswith(b'%PDF')
    assert grid.scales == [2]


def test_pdf_export_writes_file(tmp_path):
    target = tmp_path / "class-timetable.pdf"

    TimetablePDFExporter(FakeGrid()).export(str(target))

    assert target.read_bytes().startswith(b'%PDF')


class TestGridRenderer:

    def test_rasterize_size_matches_scale(self, entries, time_slots, days):
        renderer = TimetableGridRenderer(entries, time_slots, days)

        image = renderer.rasterize(scale=2)

        assert image.mode == 'RGBA'
        assert image.size == renderer.size(2)
        assert renderer.size(2) == tuple(2 * v for v in renderer.size(1))

    def test_background_is_transparent(self, entries, time_slots, days):
        image = TimetableGridRenderer(entries, time_slots, days).rasterize(scale=1)

        assert image.getpixel((0, 0))[3] == 0

    def test_empty_timetable_is_taller(self, time_slots, days):
        empty = TimetableGridRenderer([], time_slots, days)
        filled = TimetableGridRenderer([object()], time_slots, days)

        assert empty.size(1)[1] > filled.size(1)[1]
        assert empty.rasterize(scale=1).size == empty.size(1)

    def test_invalid_scale(self, entries, time_slots, days):
        with pytest.raises(ValueError):
            TimetableGridRenderer(entries, time_slots, days).rasterize(scale=0)

    def test_renderer_snapshots_inputs(self, entries, time_slots, days):
        renderer = TimetableGridRenderer(entries, time_slots, days)
        size = renderer.size(1)

        days.append("Wednesday")
        time_slots.append("12:00 PM")

        assert renderer.size(1) == size
