"""Tests for path resolution and timezone helpers."""

from __future__ import annotations

import os
import time
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from soulswap.config import AgentSettings, PurgeSettings, SoulEvilSettings, SoulSwapSettings
from soulswap.core.clock import minutes_in_timezone, resolve_user_timezone
from soulswap.core.paths import resolve_user_path
from soulswap.core.soul_evil import decide_soul_evil


class TestResolveUserPath:
    def test_blank(self):
        assert resolve_user_path("   ") == ""

    def test_home_expansion(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert resolve_user_path("~/clawd") == str(tmp_path / "clawd")
        assert resolve_user_path("~") == str(tmp_path)

    def test_relative_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_user_path(" ws ") == os.path.join(os.getcwd(), "ws")

    def test_absolute_normalized(self, tmp_path):
        assert resolve_user_path(f"{tmp_path}/a/../b") == str(tmp_path / "b")


class TestTimezone:
    def test_valid_zone(self):
        assert resolve_user_timezone("Europe/Berlin") == ZoneInfo("Europe/Berlin")

    def test_whitespace_trimmed(self):
        assert resolve_user_timezone("  UTC ") == ZoneInfo("UTC")

    def test_invalid_zone_means_host_zone(self):
        assert resolve_user_timezone("Mars/Olympus_Mons") is None

    def test_none_means_host_zone(self):
        assert resolve_user_timezone(None) is None
        assert resolve_user_timezone("   ") is None


@pytest.fixture
def new_york_host():
    """Run with the host clock set to a zone that observes daylight saving."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset unavailable")
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "EST5EDT,M3.2.0,M11.1.0"
    time.tzset()
    yield
    if previous is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = previous
    time.tzset()


class TestHostZone:
    def test_host_zone_follows_daylight_saving(self, new_york_host):
        winter = datetime(2026, 1, 15, 17, 30, tzinfo=timezone.utc)  # 12:30 EST
        summer = datetime(2026, 7, 15, 16, 30, tzinfo=timezone.utc)  # 12:30 EDT
        assert minutes_in_timezone(winter, None) == 12 * 60 + 30
        assert minutes_in_timezone(summer, None) == 12 * 60 + 30

    def test_purge_window_without_user_timezone(self, new_york_host):
        config = SoulSwapSettings(
            agent=AgentSettings(soul_evil=SoulEvilSettings(purge=PurgeSettings(at="12:00", duration="1h")))
        )
        winter = datetime(2026, 1, 15, 17, 30, tzinfo=timezone.utc)
        summer = datetime(2026, 7, 15, 16, 30, tzinfo=timezone.utc)
        assert decide_soul_evil(config=config, now=winter).reason == "purge"
        assert decide_soul_evil(config=config, now=summer).reason == "purge"


class TestMinutesInTimezone:
    def test_utc(self):
        now = datetime(2026, 3, 1, 13, 45, tzinfo=timezone.utc)
        assert minutes_in_timezone(now, timezone.utc) == 13 * 60 + 45

    def test_offset_zone(self):
        now = datetime(2026, 3, 1, 23, 30, tzinfo=timezone.utc)
        assert minutes_in_timezone(now, timezone(timedelta(hours=2))) == 90

    def test_naive_is_utc(self):
        now = datetime(2026, 3, 1, 1, 0)
        assert minutes_in_timezone(now, ZoneInfo("Asia/Tokyo")) == 10 * 60

    def test_overflow_returns_none(self):
        now = datetime.max.replace(tzinfo=timezone.utc)
        assert minutes_in_timezone(now, timezone(timedelta(hours=5))) is None
