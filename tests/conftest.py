"""Pytest configuration and shared fixtures."""

import logging
from unittest.mock import AsyncMock, MagicMock

import hikari
import pytest

from slashkit.commands import CommandDescriptor, CommandRegistry, ParameterSpec

# Disable logging during tests
logging.disable(logging.CRITICAL)

BOT_ID = 12345
GUILD_ID = 123456789
USER_ID = 111111111


@pytest.fixture(autouse=True)
def restore_logging():
    """Tests that assert on log records re-enable logging; switch it back off afterwards."""
    yield
    logging.disable(logging.CRITICAL)


@pytest.fixture
def mock_user():
    """Mock Discord user."""
    user = MagicMock(spec=hikari.User)
    user.id = USER_ID
    user.username = "testuser"
    user.is_bot = False
    return user


@pytest.fixture
def mock_member(mock_user):
    """Mock guild member holding only basic permissions."""
    member = MagicMock(spec=hikari.InteractionMember)
    member.id = mock_user.id
    member.user = mock_user
    member.permissions = hikari.Permissions.SEND_MESSAGES | hikari.Permissions.READ_MESSAGE_HISTORY
    return member


class FakeContext:
    """Invocation context with recorded replies."""

    def __init__(
        self,
        command_name: str,
        user,
        guild_id=None,
        member=None,
        permissions=None,
    ):
        self.command_name = command_name
        self.user = user
        self.guild_id = guild_id
        self.member = member
        self.permissions = permissions
        self.respond = AsyncMock()
        self.respond_failure = AsyncMock()


@pytest.fixture
def make_context(mock_user, mock_member):
    """Factory for invocation contexts. ``scoped`` puts the invocation in a guild."""

    def factory(
        command_name: str = "say",
        *,
        scoped: bool = False,
        member=...,
        permissions=...,
        user=None,
    ) -> FakeContext:
        if member is ...:
            member = mock_member if scoped else None
        if permissions is ...:
            permissions = member.permissions if member is not None else None
        return FakeContext(
            command_name,
            user or mock_user,
            guild_id=GUILD_ID if scoped else None,
            member=member,
            permissions=permissions,
        )

    return factory


@pytest.fixture
def say_descriptor():
    return CommandDescriptor(
        name="say",
        description="Make the bot say something",
        parameters=(
            ParameterSpec(hikari.OptionType.STRING, "text", "Text to say", required=True),
            ParameterSpec(hikari.OptionType.BOOLEAN, "embed", "Make it an embed?"),
        ),
        is_global=True,
    )


@pytest.fixture
def ban_descriptor():
    return CommandDescriptor(
        name="ban",
        description="Ban a member",
        permission=hikari.Permissions.BAN_MEMBERS,
    )


@pytest.fixture
def registry():
    return CommandRegistry()


@pytest.fixture
def mock_transport():
    """Mock transport recording publish calls."""
    transport = MagicMock()
    transport.self_id = BOT_ID
    transport.publish = AsyncMock()
    transport.publish_to_guild = AsyncMock()
    return transport
