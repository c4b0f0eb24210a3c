from .bot import SlashBot
from .context import InteractionContext, InvocationContext
from .dispatcher import CommandDispatcher, DispatchOutcome
from .event_system import DispatchRecord, EventSystem
from .transport import HikariTransport, Transport
from .uploader import publish_global, publish_to_guilds

__all__ = [
    "CommandDispatcher",
    "DispatchOutcome",
    "DispatchRecord",
    "EventSystem",
    "HikariTransport",
    "InteractionContext",
    "InvocationContext",
    "SlashBot",
    "Transport",
    "publish_global",
    "publish_to_guilds",
]
