"""
Supabase client module
Timetable table access and export publishing
"""
from datetime import datetime
from typing import List, Optional, Sequence

from supabase import create_client, Client

from backend.config import AppSettings, get_settings
from backend.models import ExportResult, ScheduleEntry
from backend.utils.logger import get_logger
from backend.utils.notifications import Notifier, LoggingNotifier

logger = get_logger(__name__)

SIGNED_URL_EXPIRY = 30 * 24 * 60 * 60  # 30 days


class SupabaseManager:
    """Supabase connection and storage"""

    def __init__(self, settings: Optional[AppSettings] = None,
                 notifier: Optional[Notifier] = None,
                 client: Optional[Client] = None):
        """Connect to Supabase, unless a client is given"""
        self.settings = settings or get_settings()
        self.notifier = notifier or LoggingNotifier()
        self.bucket_name = self.settings.supabase_bucket
        self.client: Optional[Client] = client

        if self.client is None:
            self._initialize_client()

    def _initialize_client(self) -> bool:
        """Create the Supabase client from settings"""
        if not self.settings.supabase_configured:
            logger.warning("supabase_not_configured")
            self.notifier.warning("Supabase is not configured; set SUPABASE_URL and SUPABASE_ANON_KEY in .env")
            return False

        try:
            self.client = create_client(self.settings.supabase_url, self.settings.supabase_anon_key)
            return True
        except Exception as e:
            logger.error("supabase_connect_failed", error=str(e))
            self.notifier.error(f"Supabase connection failed: {e}")
            return False

    @property
    def connected(self) -> bool:
        return self.client is not None

    def upload_file(self, file_path: str, file_data: bytes,
                    content_type: str = "application/pdf") -> Optional[str]:
        """
        Upload a file to Supabase Storage

        Args:
            file_path: storage path (e.g. "2025/03/class-timetable_20250301_101500.pdf")
            file_data: file content
            content_type: MIME type

        Returns:
            signed download URL or None
        """
        if not self.client:
            self.notifier.error("Supabase is not connected")
            return None

        try:
            bucket = self.client.storage.from_(self.bucket_name)
            bucket.upload(
                path=file_path,
                file=file_data,
                file_options={"content-type": content_type}
            )

            signed_response = bucket.create_signed_url(file_path, SIGNED_URL_EXPIRY)
            url = None
            if signed_response:
                url = signed_response.get('signedURL') or signed_response.get('signedUrl')

            if not url:
                logger.error("signed_url_missing", path=file_path)
                self.notifier.error("Could not create a download link")
                return None

            logger.info("file_uploaded", path=file_path, size=len(file_data))
            return url

        except Exception as e:
            logger.error("upload_failed", path=file_path, error=str(e))
            self.notifier.error(f"Upload failed: {e}")
            return None

    def upload_export(self, result: ExportResult) -> Optional[str]:
        """
        Publish an export under a dated, timestamped path

        Args:
            result: successful export

        Returns:
            signed download URL or None
        """
        if not result.success:
            self.notifier.error(f"Nothing to publish: {result.error}")
            return None

        now = datetime.now()
        stem, _, ext = result.file_name.rpartition('.')
        storage_path = f"{now:%Y/%m}/{stem}_{now:%Y%m%d_%H%M%S}.{ext}"
        return self.upload_file(storage_path, result.content, result.mime_type)

    def get_status(self) -> dict:
        """Connection status"""
        return {
            "connected": self.connected,
            "bucket": self.bucket_name,
            "url": self.settings.supabase_url or 'Not configured'
        }


class TimetableRepository:
    """CRUD on the timetable table; failures are reported, never raised"""

    def __init__(self, manager: SupabaseManager, notifier: Optional[Notifier] = None):
        self.manager = manager
        self.notifier = notifier or manager.notifier
        self.table_name = manager.settings.timetable_table

    def _table(self):
        if not self.manager.client:
            raise ConnectionError("Supabase is not connected")
        return self.manager.client.table(self.table_name)

    def list_entries(self) -> List[ScheduleEntry]:
        """
        All timetable rows

        Returns:
            entries in insertion order, [] on failure
        """
        try:
            response = self._table().select("*").order("id").execute()
        except Exception as e:
            logger.error("timetable_fetch_failed", error=str(e))
            self.notifier.error("Failed to load timetable")
            return []

        entries = []
        for row in response.data or []:
            entries.append(ScheduleEntry.from_dict(row))
        logger.debug("timetable_fetched", count=len(entries))
        return entries

    def add_entry(self, entry: ScheduleEntry) -> Optional[ScheduleEntry]:
        """
        Insert a class

        Returns:
            stored entry (with id) or None
        """
        try:
            response = self._table().insert([entry.to_record()]).execute()
        except Exception as e:
            logger.error("timetable_insert_failed", course=entry.course_code, error=str(e))
            self.notifier.error("Failed to add class")
            return None

        self.notifier.success("Class added to timetable")
        rows = response.data or []
        return ScheduleEntry.from_dict(rows[0]) if rows else entry

    def update_entry(self, entry_id: int, entry: ScheduleEntry) -> Optional[ScheduleEntry]:
        """
        Update a class by row id

        Returns:
            updated entry or None
        """
        try:
            response = self._table().update(entry.to_record()).eq("id", entry_id).execute()
        except Exception as e:
            logger.error("timetable_update_failed", id=entry_id, error=str(e))
            self.notifier.error("Failed to update timetable")
            return None

        self.notifier.success("Timetable updated")
        rows = response.data or []
        return ScheduleEntry.from_dict(rows[0]) if rows else entry

    def delete_entry(self, entry_id: int) -> bool:
        """Delete a class by row id"""
        try:
            self._table().delete().eq("id", entry_id).execute()
        except Exception as e:
            logger.error("timetable_delete_failed", id=entry_id, error=str(e))
            self.notifier.error("Failed to delete class")
            return False

        self.notifier.success("Class removed from timetable")
        return True

    def load_semester(self, courses: Sequence[ScheduleEntry], label: str = "semester") -> bool:
        """
        Replace a semester's courses

        Rows with the same course codes are deleted first, then each course
        is inserted on its own; the first failed insert stops the load.

        Args:
            courses: seed courses
            label: name used in notifications, e.g. "1st semester"

        Returns:
            whether every course was inserted
        """
        codes = [c.course_code for c in courses]
        try:
            self._table().delete().in_('course_code', codes).execute()

            self.notifier.info(f"Adding {label} courses...")
            for course in courses:
                self._table().insert([course.to_record()]).execute()
        except Exception as e:
            logger.error("semester_load_failed", label=label, error=str(e))
            self.notifier.error("Failed to add all courses")
            return False

        logger.info("semester_loaded", label=label, count=len(courses))
        self.notifier.success(f"{label} courses added successfully!")
        return True


_supabase_manager = None


def get_supabase_manager(notifier: Optional[Notifier] = None) -> SupabaseManager:
    """Get the SupabaseManager singleton"""
    global _supabase_manager
    if _supabase_manager is None:
        _supabase_manager = SupabaseManager(notifier=notifier)
    return _supabase_manager
