"""
Settings tests
"""
import pytest

from backend.config import AppSettings


def test_defaults(monkeypatch):
    for name in ('SUPABASE_URL', 'SUPABASE_ANON_KEY', 'ADMIN_EMAILS',
                 'PULL_THRESHOLD', 'PULL_MAX', 'LOG_JSON'):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings.from_env()

    assert settings.pull_threshold == 80
    assert settings.pull_max == 120
    assert settings.supabase_configured is False
    assert settings.log_json is False


def test_from_env(monkeypatch):
    monkeypatch.setenv('SUPABASE_URL', 'https://example.supabase.co')
    monkeypatch.setenv('SUPABASE_ANON_KEY', 'anon')
    monkeypatch.setenv('ADMIN_EMAILS', 'Admin@Example.com, other@example.com')
    monkeypatch.setenv('PULL_THRESHOLD', '60')
    monkeypatch.setenv('LOG_JSON', 'true')

    settings = AppSettings.from_env()

    assert settings.supabase_configured is True
    assert settings.pull_threshold == 60
    assert settings.log_json is True
    assert settings.is_admin('admin@example.com')
    assert settings.is_admin(' OTHER@example.com ')
    assert not settings.is_admin('student@example.com')
    assert not settings.is_admin(None)


def test_invalid_number(monkeypatch):
    monkeypatch.setenv('PULL_MAX', 'lots')

    with pytest.raises(ValueError):
        AppSettings.from_env()
