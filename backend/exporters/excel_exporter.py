"""
Excel timetable exporter
"""
from io import BytesIO
from typing import Sequence

from openpyxl import Workbook
from openpyxl.styles import PatternFill, Font, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from backend.exporters.timetable_grid import build_timetable_rows, TIMETABLE_TITLE
from backend.models import ScheduleEntry

EXCEL_FILE_NAME = "class-timetable.xlsx"
SHEET_NAME = "Timetable"

DAY_COLUMN_WIDTH = 15
SLOT_COLUMN_WIDTH = 25

TITLE_ROW_HEIGHT = 28
SPACER_ROW_HEIGHT = 8
HEADER_ROW_HEIGHT = 22
DAY_ROW_HEIGHT = 60

# 1-based sheet rows of the fixed layout
TITLE_ROW = 1
SPACER_ROW = 2
HEADER_ROW = 3


class TimetableExcelExporter:
    """Writes the weekly timetable to a single styled sheet"""

    def __init__(self, entries: Sequence[ScheduleEntry],
                 time_slots: Sequence[str],
                 days: Sequence[str],
                 title: str = TIMETABLE_TITLE):
        # Snapshot the caller's lists; later edits must not leak into the file
        self.entries = tuple(entries)
        self.time_slots = tuple(time_slots)
        self.days = tuple(days)
        self.title = title

        self.styles = self._define_styles()

    def _define_styles(self):
        """Excel styles"""
        return {
            'title': {
                'font': Font(color='FFFFFF', size=16, bold=True),
                'alignment': Alignment(horizontal='center', vertical='center'),
                'fill': PatternFill(start_color='366092', end_color='366092', fill_type='solid')
            },
            'header': {
                'font': Font(size=12, bold=True, color='FFFFFF'),
                'alignment': Alignment(horizontal='center', vertical='center'),
                'fill': PatternFill(start_color='4472C4', end_color='4472C4', fill_type='solid')
            },
            'day_cell': {
                'font': Font(size=11, bold=True),
                'alignment': Alignment(horizontal='left', vertical='center'),
                'fill': PatternFill(start_color='F2F2F2', end_color='F2F2F2', fill_type='solid')
            },
            'class_cell': {
                'font': Font(size=10),
                'alignment': Alignment(horizontal='left', vertical='top', wrap_text=True)
            },
            'border': Border(
                left=Side(style='thin'),
                right=Side(style='thin'),
                top=Side(style='thin'),
                bottom=Side(style='thin')
            )
        }

    @property
    def column_count(self) -> int:
        return len(self.time_slots) + 1

    def rows(self):
        return build_timetable_rows(self.entries, self.time_slots, self.days, self.title)

    def build_workbook(self) -> Workbook:
        """
        Build the workbook in memory

        Returns:
            openpyxl Workbook with one sheet named "Timetable"
        """
        wb = Workbook()
        ws = wb.active
        ws.title = SHEET_NAME

        rows = self.rows()
        for r, row in enumerate(rows, 1):
            for c, value in enumerate(row, 1):
                ws.cell(row=r, column=c, value=value)

        last_column = get_column_letter(self.column_count)

        # Title
        ws.merge_cells(f'A{TITLE_ROW}:{last_column}{TITLE_ROW}')
        title_cell = ws.cell(row=TITLE_ROW, column=1)
        title_cell.font = self.styles['title']['font']
        title_cell.alignment = self.styles['title']['alignment']
        title_cell.fill = self.styles['title']['fill']

        # Header: Day/Time + one column per slot
        for c in range(1, self.column_count + 1):
            cell = ws.cell(row=HEADER_ROW, column=c)
            cell.font = self.styles['header']['font']
            cell.alignment = self.styles['header']['alignment']
            cell.fill = self.styles['header']['fill']
            cell.border = self.styles['border']

        # Day rows
        for r in range(HEADER_ROW + 1, len(rows) + 1):
            ws.row_dimensions[r].height = DAY_ROW_HEIGHT
            day_cell = ws.cell(row=r, column=1)
            day_cell.font = self.styles['day_cell']['font']
            day_cell.alignment = self.styles['day_cell']['alignment']
            day_cell.fill = self.styles['day_cell']['fill']
            day_cell.border = self.styles['border']

            for c in range(2, self.column_count + 1):
                cell = ws.cell(row=r, column=c)
                cell.font = self.styles['class_cell']['font']
                cell.alignment = self.styles['class_cell']['alignment']
                cell.border = self.styles['border']

        ws.row_dimensions[TITLE_ROW].height = TITLE_ROW_HEIGHT
        ws.row_dimensions[SPACER_ROW].height = SPACER_ROW_HEIGHT
        ws.row_dimensions[HEADER_ROW].height = HEADER_ROW_HEIGHT

        # Column widths
        ws.column_dimensions['A'].width = DAY_COLUMN_WIDTH
        for c in range(2, self.column_count + 1):
            ws.column_dimensions[get_column_letter(c)].width = SLOT_COLUMN_WIDTH

        return wb

    def to_bytes(self) -> bytes:
        """Serialized .xlsx content"""
        buffer = BytesIO()
        self.build_workbook().save(buffer)
        return buffer.getvalue()

    def export(self, filename: str = EXCEL_FILE_NAME) -> str:
        """Save as an Excel file"""
        self.build_workbook().save(filename)
        return filename
