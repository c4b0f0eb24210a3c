"""Authorization decision for command invocations."""

import enum
from dataclasses import dataclass
from typing import Any

import hikari

from ..commands.descriptor import PERMISSION_PLACEHOLDER, CommandDescriptor


class Decision(enum.Enum):
    ALLOWED = "allowed"
    DENIED = "denied"
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class Authorization:
    decision: Decision
    reason: str | None = None

    @property
    def allowed(self) -> bool:
        return self.decision is Decision.ALLOWED


ALLOWED = Authorization(Decision.ALLOWED)


def permission_display_name(permission: hikari.Permissions) -> str:
    """Return the canonical name of a permission, e.g. ``BAN_MEMBERS``."""
    names = [flag.name for flag in hikari.Permissions(permission).split() if flag.name]
    return ", ".join(names) if names else "NONE"


def format_denial(descriptor: CommandDescriptor) -> str:
    return descriptor.permission_message.replace(
        PERMISSION_PLACEHOLDER, f"`{permission_display_name(descriptor.permission)}`"
    )


def holds(held: hikari.Permissions | None, required: hikari.Permissions) -> bool:
    """Check a held permission set against a requirement. Administrators hold everything."""
    if required == hikari.Permissions.NONE:
        return True
    if held is None:
        return False
    if held & hikari.Permissions.ADMINISTRATOR:
        return True
    return (held & required) == required


def authorize(context: Any, descriptor: CommandDescriptor) -> Authorization:
    """
    Decide whether the invoking principal may run a command.

    Outcomes:
      - ALLOWED: the handler may run.
      - DENIED: the principal lacks the permission; ``reason`` is the user-facing message.
      - MALFORMED: a guild invocation without a member. This is an internal
        error, the reason is for logs only and must not be shown as a
        permission message.
    """
    scoped = context.guild_id is not None

    if not scoped and not descriptor.is_restricted:
        return ALLOWED

    if scoped and context.member is None:
        return Authorization(
            Decision.MALFORMED,
            f"Guild invocation of /{descriptor.name} in {context.guild_id} has no member",
        )

    if holds(context.permissions, descriptor.permission):
        return ALLOWED

    return Authorization(Decision.DENIED, format_denial(descriptor))
