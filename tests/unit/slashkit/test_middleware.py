"""Tests for dispatch middleware."""

import logging

import pytest

from slashkit.core.event_system import COMMAND_COMPLETED, COMMAND_DENIED, DispatchRecord
from slashkit.middleware import AnalyticsMiddleware, LoggingMiddleware


def make_record(event_name, command_name="say", guild_id=None):
    return DispatchRecord(
        event_name=event_name, command_name=command_name, user_id=111, guild_id=guild_id
    )


class TestAnalyticsMiddleware:
    """Test AnalyticsMiddleware."""

    @pytest.mark.asyncio
    async def test_counts_outcomes_per_command(self):
        """Test that outcomes are counted per command."""
        analytics = AnalyticsMiddleware()

        await analytics(make_record(COMMAND_COMPLETED), "pre")
        await analytics(make_record(COMMAND_COMPLETED), "pre")
        await analytics(make_record(COMMAND_DENIED, "ban"), "pre")

        assert analytics.get_stats() == {
            "say": {COMMAND_COMPLETED: 2},
            "ban": {COMMAND_DENIED: 1},
        }

    @pytest.mark.asyncio
    async def test_post_phase_ignored(self):
        """Test that only the pre phase is counted."""
        analytics = AnalyticsMiddleware()

        await analytics(make_record(COMMAND_COMPLETED), "post")

        assert analytics.get_stats() == {}

    @pytest.mark.asyncio
    async def test_reset_stats(self):
        """Test resetting statistics."""
        analytics = AnalyticsMiddleware()
        await analytics(make_record(COMMAND_COMPLETED), "pre")

        analytics.reset_stats()

        assert analytics.get_stats() == {}


class TestLoggingMiddleware:
    """Test LoggingMiddleware."""

    @pytest.mark.asyncio
    async def test_logs_record(self, caplog):
        """Test that records are logged with their scope."""
        logging.disable(logging.NOTSET)
        middleware = LoggingMiddleware(level=logging.INFO)

        with caplog.at_level(logging.INFO, logger="slashkit.middleware.logging"):
            await middleware(make_record(COMMAND_COMPLETED, guild_id=42), "pre")
            await middleware(make_record(COMMAND_DENIED), "pre")
            await middleware(make_record(COMMAND_DENIED), "post")

        assert "command_completed: /say by 111 in guild 42" in caplog.text
        assert "command_denied: /say by 111 in direct message" in caplog.text
        assert len(caplog.records) == 2
