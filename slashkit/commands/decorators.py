"""Decorators for declaring slash commands."""

from collections.abc import Iterable

import hikari

from .argument_types import ParameterSpec
from .descriptor import DEFAULT_PERMISSION_MESSAGE, CommandDescriptor


def slash(
    name: str,
    description: str = "",
    options: Iterable[ParameterSpec] | None = None,
    permission: hikari.Permissions = hikari.Permissions.NONE,
    permission_message: str = DEFAULT_PERMISSION_MESSAGE,
    global_command: bool = False,
):
    """
    Declare a function or method as the handler of a slash command.

    The descriptor is built immediately so invalid declarations fail at import
    time. It is stored on the function and picked up when the containing
    source is passed to ``CommandRegistry.register_source``.
    """
    descriptor = CommandDescriptor(
        name=name,
        description=description,
        parameters=tuple(options or ()),
        permission=permission,
        permission_message=permission_message,
        is_global=global_command,
    )

    def decorator(func):
        func._slash_command = descriptor
        return func

    return decorator


def auto_register(cls):
    """Mark a class so package discovery registers its commands."""
    cls._auto_register = True
    return cls
