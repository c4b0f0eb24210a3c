import logging
from collections import Counter

from ..core.event_system import DispatchRecord

logger = logging.getLogger(__name__)


class AnalyticsMiddleware:
    """Counts dispatch outcomes per command."""

    def __init__(self) -> None:
        self.event_counts: Counter[tuple[str, str]] = Counter()

    async def __call__(self, record: DispatchRecord, phase: str) -> None:
        if phase != "pre":
            return

        key = (record.command_name, record.event_name)
        self.event_counts[key] += 1
        logger.debug(
            f"Analytics: /{record.command_name} {record.event_name} (total: {self.event_counts[key]})"
        )

    def get_stats(self) -> dict[str, dict[str, int]]:
        stats: dict[str, dict[str, int]] = {}
        for (command_name, event_name), count in self.event_counts.items():
            stats.setdefault(command_name, {})[event_name] = count
        return stats

    def reset_stats(self) -> None:
        self.event_counts.clear()
