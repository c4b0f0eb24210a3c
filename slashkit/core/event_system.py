import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

COMMAND_COMPLETED = "command_completed"
COMMAND_DENIED = "command_denied"
COMMAND_FAILED = "command_failed"
COMMAND_UNKNOWN = "command_unknown"
COMMAND_MALFORMED = "command_malformed"


@dataclass(frozen=True, slots=True)
class DispatchRecord:
    event_name: str
    command_name: str
    user_id: int | None
    guild_id: int | None
    detail: str | None = None
    error: BaseException | None = None


class EventSystem:
    """Fans dispatch records out to listeners, wrapped by pre/post middleware."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable]] = {}
        self._middleware: list[Callable] = []

    def add_middleware(self, middleware: Callable) -> None:
        self._middleware.append(middleware)
        logger.debug(f"Added middleware: {_name_of(middleware)}")

    def remove_middleware(self, middleware: Callable) -> None:
        if middleware in self._middleware:
            self._middleware.remove(middleware)
            logger.debug(f"Removed middleware: {_name_of(middleware)}")

    def listen(self, event_name: str) -> Callable:
        def decorator(func: Callable) -> Callable:
            self.add_listener(event_name, func)
            return func

        return decorator

    def add_listener(self, event_name: str, callback: Callable) -> None:
        self._listeners.setdefault(event_name, []).append(callback)
        logger.debug(f"Added listener for {event_name}: {_name_of(callback)}")

    def remove_listener(self, event_name: str, callback: Callable) -> None:
        try:
            self._listeners.get(event_name, []).remove(callback)
            logger.debug(f"Removed listener for {event_name}: {_name_of(callback)}")
        except ValueError:
            logger.warning(f"Listener {_name_of(callback)} not found for {event_name}")

    def get_listeners(self, event_name: str) -> list[Callable]:
        return self._listeners.get(event_name, []).copy()

    async def emit(self, record: DispatchRecord) -> None:
        """Deliver a record. Errors raised by middleware or listeners are logged, never raised."""
        for middleware in self._middleware:
            try:
                if await _call_maybe_async(middleware, record, "pre") is False:
                    logger.debug(f"Event {record.event_name} stopped by middleware")
                    return
            except Exception as e:
                logger.error(f"Error in middleware {_name_of(middleware)}: {e}")

        listeners = self.get_listeners(record.event_name)
        if listeners:
            results = await asyncio.gather(
                *(_call_maybe_async(listener, record) for listener in listeners),
                return_exceptions=True,
            )
            for listener, result in zip(listeners, results):
                if isinstance(result, Exception):
                    logger.error(
                        f"Error in listener {_name_of(listener)} for {record.event_name}: {result}"
                    )

        for middleware in self._middleware:
            try:
                await _call_maybe_async(middleware, record, "post")
            except Exception as e:
                logger.error(f"Error in middleware {_name_of(middleware)} (post): {e}")


async def _call_maybe_async(func: Callable, *args: Any) -> Any:
    result = func(*args)
    if asyncio.iscoroutine(result):
        return await result
    return result


def _name_of(func: Callable) -> str:
    return getattr(func, "__name__", type(func).__name__)
