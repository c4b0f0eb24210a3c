"""Tests for the hikari interaction context."""

from unittest.mock import AsyncMock, MagicMock

import hikari
import pytest

from slashkit.core.context import InteractionContext, InvocationContext


@pytest.fixture
def mock_interaction(mock_user, mock_member):
    interaction = MagicMock(spec=hikari.CommandInteraction)
    interaction.user = mock_user
    interaction.member = mock_member
    interaction.guild_id = hikari.Snowflake(123456789)
    interaction.channel_id = hikari.Snowflake(444444444)
    interaction.command_name = "say"
    text = MagicMock(value="hello")
    text.name = "text"
    interaction.options = [text]
    interaction.create_initial_response = AsyncMock()
    interaction.execute = AsyncMock()
    return interaction


class TestInteractionContext:
    """Test InteractionContext."""

    def test_context_properties(self, mock_interaction, mock_user, mock_member):
        """Test that the interaction is mirrored."""
        ctx = InteractionContext(mock_interaction)

        assert ctx.user is mock_user
        assert ctx.member is mock_member
        assert ctx.command_name == "say"
        assert ctx.guild_id == 123456789
        assert ctx.channel_id == 444444444
        assert ctx.permissions == mock_member.permissions
        assert isinstance(ctx, InvocationContext)

    def test_permissions_outside_guild(self, mock_interaction):
        """Test that direct messages carry no permission set."""
        mock_interaction.member = None
        mock_interaction.guild_id = None

        assert InteractionContext(mock_interaction).permissions is None

    def test_option(self, mock_interaction):
        """Test reading option values."""
        ctx = InteractionContext(mock_interaction)

        assert ctx.option("text") == "hello"
        assert ctx.option("embed", False) is False

    def test_option_without_options(self, mock_interaction):
        """Test reading options when none were sent."""
        mock_interaction.options = None

        assert InteractionContext(mock_interaction).option("text", "default") == "default"

    @pytest.mark.asyncio
    async def test_first_respond_is_initial_response(self, mock_interaction):
        """Test that the first reply creates the initial response."""
        ctx = InteractionContext(mock_interaction)

        await ctx.respond("hi")

        mock_interaction.create_initial_response.assert_awaited_once_with(
            hikari.ResponseType.MESSAGE_CREATE, "hi", flags=hikari.MessageFlag.NONE
        )
        mock_interaction.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_followup_respond(self, mock_interaction):
        """Test that later replies are sent as followups."""
        ctx = InteractionContext(mock_interaction)

        await ctx.respond("first")
        await ctx.respond("second", ephemeral=True)

        mock_interaction.execute.assert_awaited_once_with(
            "second", flags=hikari.MessageFlag.EPHEMERAL
        )

    @pytest.mark.asyncio
    async def test_respond_failure_sends_ephemeral_embed(self, mock_interaction):
        """Test that failure replies are ephemeral red embeds."""
        ctx = InteractionContext(mock_interaction)

        await ctx.respond_failure("nope")

        call = mock_interaction.create_initial_response.await_args
        assert call.kwargs["flags"] == hikari.MessageFlag.EPHEMERAL
        embed = call.kwargs["embed"]
        assert isinstance(embed, hikari.Embed)
        assert embed.description == "nope"
