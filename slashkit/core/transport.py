"""Publishing commands to Discord through hikari's REST client."""

import logging
from typing import Protocol

import hikari

from ..commands.descriptor import CommandDescriptor

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """What the uploader and dispatcher need from the connection to Discord."""

    @property
    def self_id(self) -> int | None: ...

    async def publish(self, descriptor: CommandDescriptor) -> None: ...

    async def publish_to_guild(self, descriptor: CommandDescriptor, guild_id: int) -> None: ...


class HikariTransport:
    def __init__(self, app: hikari.GatewayBot) -> None:
        self.app = app
        self._application: hikari.Snowflake | None = None

    @property
    def self_id(self) -> int | None:
        me = self.app.get_me()
        return me.id if me is not None else None

    async def application_id(self) -> hikari.Snowflake:
        if self._application is None:
            application = await self.app.rest.fetch_application()
            self._application = application.id
        return self._application

    async def publish(self, descriptor: CommandDescriptor) -> None:
        await self._create(descriptor, hikari.UNDEFINED)

    async def publish_to_guild(self, descriptor: CommandDescriptor, guild_id: int) -> None:
        await self._create(descriptor, hikari.Snowflake(guild_id))

    async def _create(
        self,
        descriptor: CommandDescriptor,
        guild: hikari.UndefinedOr[hikari.Snowflake],
    ) -> None:
        permissions = descriptor.permission if descriptor.is_restricted else hikari.UNDEFINED
        await self.app.rest.create_slash_command(
            await self.application_id(),
            descriptor.name,
            descriptor.description,
            guild=guild,
            options=descriptor.options(),
            default_member_permissions=permissions,
        )
        logger.debug(f"Upserted /{descriptor.name} (guild={guild})")
