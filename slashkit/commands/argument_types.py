"""Command parameter definitions."""

import re
from dataclasses import dataclass

import hikari

from ..errors import InvalidDescriptorError

NAME_PATTERN = re.compile(r"[-_\w]{1,32}")

SUPPORTED_TYPES = frozenset(
    {
        hikari.OptionType.STRING,
        hikari.OptionType.INTEGER,
        hikari.OptionType.BOOLEAN,
        hikari.OptionType.USER,
        hikari.OptionType.CHANNEL,
        hikari.OptionType.ROLE,
        hikari.OptionType.MENTIONABLE,
        hikari.OptionType.FLOAT,
        hikari.OptionType.ATTACHMENT,
    }
)


def validate_name(name: str, kind: str = "command") -> str:
    """Check a slash command or option name against Discord's naming rules."""
    if not name:
        raise InvalidDescriptorError(f"A {kind} name must not be empty")
    if name != name.lower() or not NAME_PATTERN.fullmatch(name):
        raise InvalidDescriptorError(
            f"Invalid {kind} name '{name}': use 1-32 lowercase letters, digits, '-' or '_'"
        )
    return name


@dataclass(frozen=True)
class ParameterSpec:
    """Defines a parameter of a command using hikari option types."""

    type: hikari.OptionType
    name: str
    description: str = ""
    required: bool = False

    def __post_init__(self):
        validate_name(self.name, "parameter")
        if self.type not in SUPPORTED_TYPES:
            raise InvalidDescriptorError(
                f"Parameter '{self.name}' has unsupported option type {self.type!r}"
            )

    def to_option(self) -> hikari.CommandOption:
        """Build the hikari option sent to Discord when publishing."""
        return hikari.CommandOption(
            type=self.type,
            name=self.name,
            description=self.description or "No description",
            is_required=self.required,
        )
