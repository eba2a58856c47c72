from .timetable_grid import (
    build_timetable_rows,
    find_entry_for_slot,
    format_cell_text,
    to_dataframe,
    course_color
)
from .excel_exporter import TimetableExcelExporter
from .grid_renderer import TimetableGridRenderer, flatten_to_white
from .pdf_exporter import TimetablePDFExporter
from .service import TimetableExportService

__all__ = [
    'build_timetable_rows',
    'find_entry_for_slot',
    'format_cell_text',
    'to_dataframe',
    'course_color',
    'TimetableExcelExporter',
    'TimetableGridRenderer',
    'flatten_to_white',
    'TimetablePDFExporter',
    'TimetableExportService'
]
