"""
Typed result of a timetable export
"""
import os
from dataclasses import dataclass
from typing import Optional

PDF_MIME = "application/pdf"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MIME = "text/csv"
PNG_MIME = "image/png"


@dataclass(frozen=True)
class ExportResult:
    """Success carries the file bytes, failure carries the error message"""
    success: bool
    file_name: str
    mime_type: str
    content: Optional[bytes] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, file_name: str, mime_type: str, content: bytes) -> 'ExportResult':
        return cls(True, file_name, mime_type, content=content)

    @classmethod
    def failed(cls, file_name: str, mime_type: str, error: str) -> 'ExportResult':
        return cls(False, file_name, mime_type, error=error)

    @property
    def size(self) -> int:
        return len(self.content) if self.content else 0

    def save(self, directory: str) -> str:
        """
        Write the exported file to a directory

        Args:
            directory: target directory, created if missing

        Returns:
            path of the written file

        Raises:
            ValueError: when called on a failed export
        """
        if not self.success or self.content is None:
            raise ValueError(f"Cannot save failed export {self.file_name}: {self.error}")

        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, self.file_name)
        with open(path, 'wb') as f:
            f.write(self.content)
        return path
