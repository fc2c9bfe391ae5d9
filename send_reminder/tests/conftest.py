import pytest

from send_reminder.core.config import Settings
from send_reminder.tests.helper import ANON_KEY, SUPABASE_URL, FakeSupabase


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def settings():
    return Settings(SUPABASE_URL=SUPABASE_URL, SUPABASE_ANON_KEY=ANON_KEY, _env_file=None)


@pytest.fixture
def unconfigured_settings():
    return Settings(SUPABASE_URL=None, SUPABASE_ANON_KEY=None, _env_file=None)
