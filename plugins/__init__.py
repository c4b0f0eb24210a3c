"""Command classes shipped with the bot."""
