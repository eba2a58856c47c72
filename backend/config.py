"""
Application settings loaded from environment variables
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

# Load .env before anything reads the environment
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


@dataclass
class AppSettings:
    """Runtime settings for the timetable app"""
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_bucket: str = "timetable-exports"
    timetable_table: str = "timetable"
    admin_emails: List[str] = field(default_factory=list)

    # Pull-to-refresh (pixels)
    pull_threshold: float = 80
    pull_max: float = 120

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_env(cls) -> 'AppSettings':
        """
        Build settings from the current environment

        Returns:
            AppSettings instance
        """
        admins = os.getenv('ADMIN_EMAILS', '')
        return cls(
            supabase_url=os.getenv('SUPABASE_URL', ''),
            supabase_anon_key=os.getenv('SUPABASE_ANON_KEY', ''),
            supabase_bucket=os.getenv('SUPABASE_BUCKET', 'timetable-exports'),
            timetable_table=os.getenv('TIMETABLE_TABLE', 'timetable'),
            admin_emails=[e.strip().lower() for e in admins.split(',') if e.strip()],
            pull_threshold=_env_float('PULL_THRESHOLD', 80),
            pull_max=_env_float('PULL_MAX', 120),
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
            log_json=_env_bool('LOG_JSON', False),
        )

    @property
    def supabase_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)

    def is_admin(self, email: Optional[str]) -> bool:
        """Only configured admin accounts may edit the timetable"""
        if not email:
            return False
        return email.strip().lower() in self.admin_emails


_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get the settings singleton"""
    global _settings
    if _settings is None:
        _settings = AppSettings.from_env()
    return _settings
