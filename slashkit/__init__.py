"""Declarative slash commands for hikari bots."""

from .commands import CommandDescriptor, CommandRegistry, ParameterSpec, auto_register, slash
from .core import CommandDispatcher, DispatchOutcome, SlashBot, publish_global
from .permissions import Authorization, Decision, authorize

__version__ = "1.0.0"

__all__ = [
    "Authorization",
    "CommandDescriptor",
    "CommandDispatcher",
    "CommandRegistry",
    "Decision",
    "DispatchOutcome",
    "ParameterSpec",
    "SlashBot",
    "auto_register",
    "authorize",
    "publish_global",
    "slash",
]
