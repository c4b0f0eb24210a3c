"""Tests for the hikari transport."""

from unittest.mock import AsyncMock, MagicMock

import hikari
import pytest

from slashkit.core.transport import HikariTransport


@pytest.fixture
def mock_app():
    app = MagicMock()
    app.get_me = MagicMock(return_value=MagicMock(id=12345))
    app.rest.fetch_application = AsyncMock(return_value=MagicMock(id=hikari.Snowflake(999)))
    app.rest.create_slash_command = AsyncMock()
    return app


class TestHikariTransport:
    """Test HikariTransport."""

    def test_self_id(self, mock_app):
        """Test reading the bot's own identity."""
        assert HikariTransport(mock_app).self_id == 12345

    def test_self_id_before_start(self, mock_app):
        """Test that the identity is unknown before the bot has started."""
        mock_app.get_me.return_value = None

        assert HikariTransport(mock_app).self_id is None

    @pytest.mark.asyncio
    async def test_publish_global(self, mock_app, say_descriptor):
        """Test publishing a global command."""
        transport = HikariTransport(mock_app)

        await transport.publish(say_descriptor)

        mock_app.rest.create_slash_command.assert_awaited_once()
        call = mock_app.rest.create_slash_command.await_args
        assert call.args == (999, "say", "Make the bot say something")
        assert call.kwargs["guild"] is hikari.UNDEFINED
        assert call.kwargs["default_member_permissions"] is hikari.UNDEFINED
        assert [option.name for option in call.kwargs["options"]] == ["text", "embed"]

    @pytest.mark.asyncio
    async def test_publish_to_guild_with_permission(self, mock_app, ban_descriptor):
        """Test publishing a restricted command to a guild."""
        transport = HikariTransport(mock_app)

        await transport.publish_to_guild(ban_descriptor, 42)

        call = mock_app.rest.create_slash_command.await_args
        assert call.kwargs["guild"] == 42
        assert call.kwargs["default_member_permissions"] == hikari.Permissions.BAN_MEMBERS

    @pytest.mark.asyncio
    async def test_application_id_cached(self, mock_app, say_descriptor, ban_descriptor):
        """Test that the application is fetched once."""
        transport = HikariTransport(mock_app)

        await transport.publish(say_descriptor)
        await transport.publish(ban_descriptor)

        mock_app.rest.fetch_application.assert_awaited_once()
