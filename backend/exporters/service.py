"""
Timetable export service

Entry point for the UI: each export snapshots its inputs, reports progress
through the notifier and returns an ExportResult. Nothing raises past here.
"""
import asyncio
from io import BytesIO
from typing import Optional, Sequence

from backend.exporters.excel_exporter import TimetableExcelExporter, EXCEL_FILE_NAME
from backend.exporters.grid_renderer import flatten_to_white
from backend.exporters.pdf_exporter import TimetablePDFExporter, Rasterizable, PDF_FILE_NAME, RASTER_SCALE
from backend.exporters.timetable_grid import to_dataframe
from backend.models import ExportResult, ScheduleEntry
from backend.models.export_result import PDF_MIME, XLSX_MIME, CSV_MIME, PNG_MIME
from backend.utils.logger import get_logger
from backend.utils.notifications import Notifier, LoggingNotifier
from backend.utils.validation import find_slot_conflicts

logger = get_logger(__name__)

CSV_FILE_NAME = "class-timetable.csv"
PNG_FILE_NAME = "class-timetable.png"

MISSING_GRID_MESSAGE = "Timetable is not ready to export yet"


class TimetableExportService:
    """Runs exports and turns every failure into a failed ExportResult"""

    def __init__(self, notifier: Optional[Notifier] = None):
        self.notifier = notifier or LoggingNotifier()

    async def export_pdf(self, grid: Optional[Rasterizable]) -> ExportResult:
        """
        Capture the rendered grid into class-timetable.pdf

        Args:
            grid: the rendered timetable (None when nothing is on screen)

        Returns:
            ExportResult with the PDF bytes, or the error
        """
        if grid is None:
            self.notifier.error(MISSING_GRID_MESSAGE)
            return ExportResult.failed(PDF_FILE_NAME, PDF_MIME, MISSING_GRID_MESSAGE)

        self.notifier.info("Preparing your timetable download...")
        exporter = TimetablePDFExporter(grid)
        try:
            # Rasterizing is the slow part; keep the event loop free
            image = await asyncio.to_thread(exporter.capture)
            content = exporter.build_pdf(image)
        except Exception as e:
            logger.error("pdf_export_failed", error=str(e), exc_info=True)
            self.notifier.error("Failed to download timetable")
            return ExportResult.failed(PDF_FILE_NAME, PDF_MIME, str(e))

        self.notifier.success("Timetable downloaded successfully!")
        return ExportResult.ok(PDF_FILE_NAME, PDF_MIME, content)

    def export_excel(self, entries: Sequence[ScheduleEntry],
                     time_slots: Sequence[str],
                     days: Sequence[str]) -> ExportResult:
        """
        Build class-timetable.xlsx

        Returns:
            ExportResult with the workbook bytes, or the error
        """
        self.notifier.info("Preparing your Excel download...")
        try:
            exporter = TimetableExcelExporter(entries, time_slots, days)
            self._warn_conflicts(exporter.entries, exporter.time_slots)
            content = exporter.to_bytes()
        except Exception as e:
            logger.error("excel_export_failed", error=str(e), exc_info=True)
            self.notifier.error("Failed to download timetable as Excel")
            return ExportResult.failed(EXCEL_FILE_NAME, XLSX_MIME, str(e))

        self.notifier.success("Excel file downloaded successfully!")
        return ExportResult.ok(EXCEL_FILE_NAME, XLSX_MIME, content)

    def export_csv(self, entries: Sequence[ScheduleEntry],
                   time_slots: Sequence[str],
                   days: Sequence[str]) -> ExportResult:
        """
        Grid as CSV: a Day/Time column followed by one column per slot

        Same orientation as the Excel sheet (days down, slots across). The
        older timetable page wrote slots down and days across, as
        LLB28_Timetable.csv.
        """
        try:
            df = to_dataframe(tuple(entries), tuple(time_slots), tuple(days))
            content = df.to_csv().encode('utf-8')
        except Exception as e:
            logger.error("csv_export_failed", error=str(e), exc_info=True)
            self.notifier.error("Failed to download timetable as CSV")
            return ExportResult.failed(CSV_FILE_NAME, CSV_MIME, str(e))

        self.notifier.success("Timetable downloaded as CSV")
        return ExportResult.ok(CSV_FILE_NAME, CSV_MIME, content)

    async def export_png(self, grid: Optional[Rasterizable]) -> ExportResult:
        """Capture the rendered grid into class-timetable.png"""
        if grid is None:
            self.notifier.error(MISSING_GRID_MESSAGE)
            return ExportResult.failed(PNG_FILE_NAME, PNG_MIME, MISSING_GRID_MESSAGE)

        try:
            image = await asyncio.to_thread(grid.rasterize, RASTER_SCALE)
            buffer = BytesIO()
            flatten_to_white(image).save(buffer, format='PNG')
        except Exception as e:
            logger.error("png_export_failed", error=str(e), exc_info=True)
            self.notifier.error("Failed to download image")
            return ExportResult.failed(PNG_FILE_NAME, PNG_MIME, str(e))

        self.notifier.success("Timetable downloaded as image")
        return ExportResult.ok(PNG_FILE_NAME, PNG_MIME, buffer.getvalue())

    def _warn_conflicts(self, entries, time_slots):
        """Overlapping classes only show the first one in the grid"""
        for first, second, day in find_slot_conflicts(entries, time_slots):
            logger.warning("slot_conflict", day=day, shown=first.course_code,
                           hidden=second.course_code)
