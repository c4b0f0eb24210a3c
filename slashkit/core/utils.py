"""Utility functions for slashkit replies."""

import hikari

FAIL_COLOR = hikari.Color(0xED4245)


def fail_embed(message: str) -> hikari.Embed:
    """
    Build the embed used for denial and failure replies.

    Args:
        message: Text shown to the invoking user

    Returns:
        A red embed carrying the message as its description
    """
    return hikari.Embed(description=message, color=FAIL_COLOR)
