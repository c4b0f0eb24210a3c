from .commands import GeneralCommands
from .moderation import ModerationCommands

__all__ = ["GeneralCommands", "ModerationCommands"]
