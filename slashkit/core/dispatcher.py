"""Routes command invocations to their registered handlers."""

import enum
import inspect
import logging
from typing import Any

from ..commands.registry import CommandRegistry
from ..errors import HandlerFailure, MalformedContextError, UnknownCommandError
from ..permissions import Decision, authorize
from .event_system import (
    COMMAND_COMPLETED,
    COMMAND_DENIED,
    COMMAND_FAILED,
    COMMAND_MALFORMED,
    COMMAND_UNKNOWN,
    DispatchRecord,
    EventSystem,
)

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Sorry, something went wrong..."


class DispatchOutcome(enum.Enum):
    IGNORED = "ignored"
    UNKNOWN_COMMAND = "unknown_command"
    MALFORMED_CONTEXT = "malformed_context"
    DENIED = "denied"
    COMPLETED = "completed"
    FAILED = "failed"


class CommandDispatcher:
    """
    Handles one invocation at a time, in a single pass:

    1. invocations by the bot itself are dropped
    2. the command is resolved by name
    3. guild invocations without a member are rejected as malformed
    4. the permission gate runs; a denial is replied to the user
    5. the handler is called, awaited when it returns a coroutine
    6. anything the handler raises is logged and replaced by a generic reply

    ``handle`` never raises, so one bad invocation cannot take down the
    listener serving the others.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        self_id: int | None,
        *,
        log_events: bool = False,
        events: EventSystem | None = None,
        failure_message: str = DEFAULT_FAILURE_MESSAGE,
    ) -> None:
        self.registry = registry
        self.self_id = self_id
        self.log_events = log_events
        self.events = events
        self.failure_message = failure_message

    async def handle(self, context: Any) -> DispatchOutcome:
        user = context.user
        if self.self_id is not None and user.id == self.self_id:
            return DispatchOutcome.IGNORED

        name = context.command_name
        command = self.registry.resolve(name)
        if command is None:
            error = UnknownCommandError(name)
            logger.error(f"Internal error: {error}", exc_info=error)
            await self._emit(COMMAND_UNKNOWN, context, detail=str(error), error=error)
            return DispatchOutcome.UNKNOWN_COMMAND

        authorization = authorize(context, command.descriptor)

        if authorization.decision is Decision.MALFORMED:
            error = MalformedContextError(name, context.guild_id)
            logger.error(f"Internal error: {error}", exc_info=error)
            await self._emit(COMMAND_MALFORMED, context, detail=authorization.reason, error=error)
            return DispatchOutcome.MALFORMED_CONTEXT

        if authorization.decision is Decision.DENIED:
            if self.log_events:
                logger.info(f"{_describe_user(user)} was denied /{name} in {context.guild_id}")
            try:
                await context.respond_failure(authorization.reason)
            except Exception:
                logger.exception(f"Failed to send permission denial for /{name}")
            await self._emit(COMMAND_DENIED, context, detail=authorization.reason)
            return DispatchOutcome.DENIED

        try:
            result = command.handler(context)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            failure = HandlerFailure(name)
            failure.__cause__ = e
            logger.exception(f"{failure}: {e!r}")
            try:
                await context.respond_failure(self.failure_message)
            except Exception:
                logger.exception(f"Failed to send failure reply for /{name}")
            await self._emit(COMMAND_FAILED, context, detail=repr(e), error=failure)
            return DispatchOutcome.FAILED

        if self.log_events:
            logger.info(f"{_describe_user(user)} executed command /{name} in {context.guild_id}")
        await self._emit(COMMAND_COMPLETED, context)
        return DispatchOutcome.COMPLETED

    async def _emit(
        self,
        event_name: str,
        context: Any,
        detail: str | None = None,
        error: BaseException | None = None,
    ) -> None:
        if self.events is None:
            return

        record = DispatchRecord(
            event_name=event_name,
            command_name=context.command_name,
            user_id=getattr(context.user, "id", None),
            guild_id=context.guild_id,
            detail=detail,
            error=error,
        )
        try:
            await self.events.emit(record)
        except Exception:
            logger.exception(f"Failed to emit {event_name} for /{context.command_name}")


def _describe_user(user: Any) -> str:
    username = getattr(user, "username", None)
    return f"{username} ({user.id})" if username else str(user.id)
