"""Command registration system."""

import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .descriptor import CommandDescriptor, Handler
from .discovery import discover, iter_declarations

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegisteredCommand:
    descriptor: CommandDescriptor
    handler: Handler

    @property
    def name(self) -> str:
        return self.descriptor.name


class CommandRegistry:
    """
    Maps command names to their descriptor and handler.

    The first registration of a name wins; later registrations of the same
    name are ignored. Writes are serialised with a lock so concurrent startup
    registration keeps that guarantee. Registering after dispatch has started
    is unsupported.
    """

    def __init__(self, log_events: bool = False) -> None:
        self.log_events = log_events
        self._commands: dict[str, RegisteredCommand] = {}
        self._lock = threading.Lock()

    def register(self, descriptor: CommandDescriptor, handler: Handler) -> bool:
        """Register a command. Returns False when the name was already taken."""
        with self._lock:
            if descriptor.name in self._commands:
                logger.debug(f"Ignoring duplicate registration of /{descriptor.name}")
                return False
            self._commands[descriptor.name] = RegisteredCommand(descriptor, handler)

        if self.log_events:
            logger.info(
                f"Registered new command (/{descriptor.name}) from {_handler_origin(handler)}"
            )
        return True

    def register_source(self, *sources: Any) -> int:
        """Register every declaration found in the given sources."""
        added = 0
        for source in sources:
            for descriptor, handler in iter_declarations(source):
                if self.register(descriptor, handler):
                    added += 1
        return added

    def discover(self, package_name: str) -> int:
        """Register all ``@auto_register`` classes found below a package."""
        added = 0
        for descriptor, handler in discover(package_name):
            if self.register(descriptor, handler):
                added += 1
        if self.log_events:
            logger.info(f"Enabled automatic registering for package {package_name}")
        return added

    def resolve(self, name: str) -> RegisteredCommand | None:
        return self._commands.get(name)

    def all(self) -> list[CommandDescriptor]:
        return [command.descriptor for command in list(self._commands.values())]

    def global_descriptors(self) -> list[CommandDescriptor]:
        return [descriptor for descriptor in self.all() if descriptor.is_global]

    def names(self) -> list[str]:
        return list(self._commands)

    def clear(self) -> None:
        with self._lock:
            self._commands.clear()

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[RegisteredCommand]:
        return iter(list(self._commands.values()))


def _handler_origin(handler: Handler) -> str:
    owner = getattr(handler, "__self__", None)
    if owner is not None:
        return type(owner).__qualname__
    module = getattr(handler, "__module__", None)
    return module or repr(handler)
