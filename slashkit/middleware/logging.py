import logging

from ..core.event_system import DispatchRecord

logger = logging.getLogger(__name__)


class LoggingMiddleware:
    def __init__(self, level: int = logging.DEBUG) -> None:
        self.level = level

    async def __call__(self, record: DispatchRecord, phase: str) -> None:
        if phase != "pre":
            return

        where = f"guild {record.guild_id}" if record.guild_id is not None else "direct message"
        logger.log(
            self.level,
            f"{record.event_name}: /{record.command_name} by {record.user_id} in {where}",
        )
