"""Invocation contexts handed to the dispatcher and to command handlers."""

from typing import Any, Protocol, runtime_checkable

import hikari

from .utils import fail_embed


@runtime_checkable
class InvocationContext(Protocol):
    """What the dispatcher needs from a transport's invocation event."""

    @property
    def user(self) -> hikari.PartialUser: ...

    @property
    def command_name(self) -> str: ...

    @property
    def guild_id(self) -> hikari.Snowflake | None: ...

    @property
    def member(self) -> Any | None: ...

    @property
    def permissions(self) -> hikari.Permissions | None: ...

    async def respond(self, content: str | None = None, **kwargs: Any) -> None: ...

    async def respond_failure(self, message: str) -> None: ...


class InteractionContext:
    """Wraps a hikari command interaction."""

    def __init__(self, interaction: hikari.CommandInteraction) -> None:
        self.interaction = interaction
        self._responded = False

    @property
    def user(self) -> hikari.User:
        return self.interaction.user

    @property
    def command_name(self) -> str:
        return self.interaction.command_name

    @property
    def guild_id(self) -> hikari.Snowflake | None:
        return self.interaction.guild_id

    @property
    def channel_id(self) -> hikari.Snowflake:
        return self.interaction.channel_id

    @property
    def member(self) -> hikari.InteractionMember | None:
        return self.interaction.member

    @property
    def permissions(self) -> hikari.Permissions | None:
        member = self.interaction.member
        return member.permissions if member is not None else None

    def option(self, name: str, default: Any = None) -> Any:
        for option in self.interaction.options or ():
            if option.name == name:
                return option.value
        return default

    async def respond(
        self,
        content: str | None = None,
        *,
        embed: hikari.Embed | None = None,
        ephemeral: bool = False,
    ) -> None:
        flags = hikari.MessageFlag.EPHEMERAL if ephemeral else hikari.MessageFlag.NONE
        kwargs: dict[str, Any] = {"flags": flags}
        if embed is not None:
            kwargs["embed"] = embed

        if self._responded:
            await self.interaction.execute(content, **kwargs)
            return

        await self.interaction.create_initial_response(
            hikari.ResponseType.MESSAGE_CREATE, content, **kwargs
        )
        self._responded = True

    async def respond_failure(self, message: str) -> None:
        await self.respond(embed=fail_embed(message), ephemeral=True)
