"""
Tests for environment-driven settings.
"""
from send_reminder.core.config import Settings


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co/")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")

    settings = Settings(_env_file=None)

    assert settings.SUPABASE_URL == "https://abc.supabase.co"
    assert settings.SUPABASE_ANON_KEY == "anon"
    assert settings.is_configured


def test_no_defaults(monkeypatch):
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)

    settings = Settings(_env_file=None)

    assert settings.SUPABASE_URL is None
    assert settings.SUPABASE_ANON_KEY is None
    assert not settings.is_configured


def test_blank_values_count_as_missing(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "   ")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "")

    settings = Settings(_env_file=None)

    assert settings.SUPABASE_URL is None
    assert settings.SUPABASE_ANON_KEY is None
    assert not settings.is_configured


def test_one_missing_value_is_not_configured():
    settings = Settings(SUPABASE_URL="https://abc.supabase.co", SUPABASE_ANON_KEY=None, _env_file=None)

    assert not settings.is_configured
    assert settings.missing_config_message() == "Missing SUPABASE_URL or SUPABASE_ANON_KEY"


def test_env_names_are_case_sensitive(monkeypatch):
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.setenv("supabase_url", "https://lower.supabase.co")

    settings = Settings(_env_file=None)

    assert settings.SUPABASE_URL is None
