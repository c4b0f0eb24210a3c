"""Immutable description of a single slash command."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import hikari

from ..errors import InvalidDescriptorError
from .argument_types import ParameterSpec, validate_name

PERMISSION_PLACEHOLDER = "$PERMISSION$"
DEFAULT_PERMISSION_MESSAGE = (
    f"❌ You do not have the needed permissions to execute this command ({PERMISSION_PLACEHOLDER})."
)

Handler = Callable[[Any], Any]


@dataclass(frozen=True)
class CommandDescriptor:
    """
    Metadata for one command.

    ``permission`` defaults to ``hikari.Permissions.NONE`` which means anyone may
    run the command. ``permission_message`` is sent on denial after the
    ``$PERMISSION$`` placeholder has been replaced with the permission's name.
    """

    name: str
    description: str = ""
    parameters: tuple[ParameterSpec, ...] = field(default_factory=tuple)
    permission: hikari.Permissions = hikari.Permissions.NONE
    permission_message: str = DEFAULT_PERMISSION_MESSAGE
    is_global: bool = False

    def __post_init__(self):
        validate_name(self.name)

        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "permission", hikari.Permissions(self.permission))
        if not self.description.strip():
            object.__setattr__(self, "description", "No description")

        seen: set[str] = set()
        for parameter in self.parameters:
            if not isinstance(parameter, ParameterSpec):
                raise InvalidDescriptorError(
                    f"Command '{self.name}' parameters must be ParameterSpec instances"
                )
            if parameter.name in seen:
                raise InvalidDescriptorError(
                    f"Command '{self.name}' declares parameter '{parameter.name}' twice"
                )
            seen.add(parameter.name)

    @property
    def is_restricted(self) -> bool:
        return self.permission != hikari.Permissions.NONE

    def options(self) -> list[hikari.CommandOption]:
        return [parameter.to_option() for parameter in self.parameters]
