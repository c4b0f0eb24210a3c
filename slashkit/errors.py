"""Exception types raised and reported by slashkit."""


class SlashkitError(Exception):
    """Base class for every slashkit error."""


class InvalidDescriptorError(SlashkitError, ValueError):
    """A command or parameter declaration is not valid."""


class UnknownCommandError(SlashkitError):
    """The transport delivered a command name the registry never saw."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No command registered under the name '{name}'")
        self.name = name


class MalformedContextError(SlashkitError):
    """A guild invocation arrived without a member attached."""

    def __init__(self, name: str, guild_id: object) -> None:
        super().__init__(
            f"Invocation of '{name}' in guild {guild_id} carries no member"
        )
        self.name = name
        self.guild_id = guild_id


class HandlerFailure(SlashkitError):
    """A command handler raised while being invoked."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Handler for command '{name}' raised")
        self.name = name
