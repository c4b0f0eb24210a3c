import logging

import hikari

from config.settings import settings

from ..commands.registry import CommandRegistry
from ..middleware import AnalyticsMiddleware, LoggingMiddleware
from .context import InteractionContext
from .dispatcher import CommandDispatcher, DispatchOutcome
from .event_system import EventSystem
from .transport import HikariTransport
from .uploader import publish_global, publish_to_guilds

logger = logging.getLogger(__name__)


class SlashBot:
    """Connects a hikari gateway bot to a command registry and dispatcher."""

    def __init__(self, registry: CommandRegistry | None = None, token: str | None = None) -> None:
        self.hikari_bot = hikari.GatewayBot(
            token=token or settings.discord_token, intents=hikari.Intents.GUILDS
        )
        self.registry = registry if registry is not None else CommandRegistry(settings.log_events)
        self.transport = HikariTransport(self.hikari_bot)

        self.analytics = AnalyticsMiddleware()
        self.event_system = EventSystem()
        self.event_system.add_middleware(LoggingMiddleware())
        self.event_system.add_middleware(self.analytics)

        self.dispatcher = CommandDispatcher(
            self.registry,
            None,
            log_events=settings.log_events,
            events=self.event_system,
            failure_message=settings.failure_message,
        )
        self._published_guilds: set[int] = set()

        self._setup_event_listeners()

    def load_command_packages(self, packages: list[str] | None = None) -> int:
        """Discover and register commands from the configured packages."""
        added = 0
        for package in packages if packages is not None else settings.command_packages:
            added += self.registry.discover(package)
        logger.info(f"Loaded {added} commands, {len(self.registry)} registered in total")
        return added

    def _setup_event_listeners(self) -> None:
        @self.hikari_bot.listen(hikari.StartedEvent)
        async def on_started(event: hikari.StartedEvent) -> None:
            await self.on_started()

        @self.hikari_bot.listen(hikari.InteractionCreateEvent)
        async def on_interaction(event: hikari.InteractionCreateEvent) -> None:
            await self.on_interaction(event.interaction)

        @self.hikari_bot.listen(hikari.GuildAvailableEvent)
        async def on_guild_available(event: hikari.GuildAvailableEvent) -> None:
            await self.on_guild_available(event.guild_id)

        @self.hikari_bot.listen(hikari.GuildJoinEvent)
        async def on_guild_join(event: hikari.GuildJoinEvent) -> None:
            await self.on_guild_available(event.guild_id)

    async def on_started(self) -> None:
        self.dispatcher.self_id = self.transport.self_id
        logger.info(f"Successfully connected to bot {self.hikari_bot.get_me()}")

        if settings.publish_global_on_start:
            await publish_global(self.registry, self.transport, log_events=settings.log_events)

        if settings.publish_guild_on_start and settings.guild_ids:
            await self.publish_guild_commands(settings.guild_ids)

    async def on_guild_available(self, guild_id: int) -> None:
        if not settings.publish_guild_on_start:
            return
        if settings.guild_ids and guild_id not in settings.guild_ids:
            return
        await self.publish_guild_commands([guild_id])

    async def publish_guild_commands(self, guild_ids: list[int]) -> int:
        """Publish guild-scoped commands to guilds that have not received them yet."""
        pending = [guild_id for guild_id in guild_ids if guild_id not in self._published_guilds]
        if not pending:
            return 0
        self._published_guilds.update(pending)
        return await publish_to_guilds(
            self.registry, self.transport, pending, log_events=settings.log_events
        )

    async def on_interaction(self, interaction: hikari.PartialInteraction) -> DispatchOutcome | None:
        if not isinstance(interaction, hikari.CommandInteraction):
            return None
        return await self.dispatcher.handle(InteractionContext(interaction))

    def run(self) -> None:
        self.hikari_bot.run()
