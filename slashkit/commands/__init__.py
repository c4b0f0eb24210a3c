"""Command declaration and registration."""

from .argument_types import ParameterSpec
from .decorators import auto_register, slash
from .descriptor import DEFAULT_PERMISSION_MESSAGE, PERMISSION_PLACEHOLDER, CommandDescriptor
from .discovery import discover, iter_declarations
from .registry import CommandRegistry, RegisteredCommand

__all__ = [
    "CommandDescriptor",
    "CommandRegistry",
    "DEFAULT_PERMISSION_MESSAGE",
    "PERMISSION_PLACEHOLDER",
    "ParameterSpec",
    "RegisteredCommand",
    "auto_register",
    "discover",
    "iter_declarations",
    "slash",
]
