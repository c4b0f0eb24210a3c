"""Bulk publication of registered commands."""

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from ..commands.descriptor import CommandDescriptor
from ..commands.registry import CommandRegistry
from .transport import Transport

logger = logging.getLogger(__name__)


async def publish_global(
    registry: CommandRegistry, transport: Transport, *, log_events: bool = False
) -> int:
    """Publish every global command. Returns how many were published."""
    if len(registry) == 0:
        logger.warning(
            "No commands are registered yet; register commands before publishing global commands."
        )
        return 0

    published = 0
    for descriptor in registry.global_descriptors():
        if await _publish_one(transport.publish, descriptor):
            published += 1

    if log_events:
        logger.info(f"{published} global commands upserted to Discord successfully.")
    return published


async def publish_to_guilds(
    registry: CommandRegistry,
    transport: Transport,
    guild_ids: Iterable[int],
    *,
    log_events: bool = False,
) -> int:
    """Publish every non-global command to each guild. Returns how many uploads succeeded."""
    if len(registry) == 0:
        logger.warning(
            "No commands are registered yet; register commands before publishing guild commands."
        )
        return 0

    descriptors = [descriptor for descriptor in registry.all() if not descriptor.is_global]
    published = 0
    for guild_id in guild_ids:
        for descriptor in descriptors:
            if await _publish_one(transport.publish_to_guild, descriptor, guild_id):
                published += 1

    if log_events:
        logger.info(f"{published} guild commands upserted to Discord successfully.")
    return published


async def _publish_one(
    publish: Callable[..., Awaitable[None]], descriptor: CommandDescriptor, *args: Any
) -> bool:
    try:
        await publish(descriptor, *args)
    except Exception as e:
        logger.error(f"Failed to publish /{descriptor.name}: {e}")
        return False
    return True
