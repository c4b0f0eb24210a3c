import logging
import os
from pathlib import Path
from typing import List, Optional

import typer

from config.settings import settings
from slashkit.commands import CommandRegistry
from slashkit.core import SlashBot
from slashkit.permissions import permission_display_name

app = typer.Typer(
    name="slashkit",
    help="Declarative slash commands for hikari bots",
    add_completion=False,
)


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


@app.command()
def run(
    dev: bool = typer.Option(False, "--dev", help="Run in development mode"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Connect to Discord and serve the registered commands."""
    if dev:
        os.environ["ENVIRONMENT"] = "development"

    setup_logging(log_level or settings.log_level)

    if not settings.discord_token:
        typer.echo("❌ DISCORD_TOKEN is not set. Run `slashkit init` and fill in the .env file.")
        raise typer.Exit(code=1)

    bot = SlashBot()
    bot.load_command_packages()
    bot.run()


@app.command()
def commands(
    package: Optional[List[str]] = typer.Option(
        None, "--package", "-p", help="Package to scan (defaults to COMMAND_PACKAGES)"
    ),
) -> None:
    """List the commands discovered in the command packages."""
    registry = CommandRegistry()
    for name in package or settings.command_packages:
        registry.discover(name)

    if not len(registry):
        typer.echo("No commands found.")
        return

    typer.echo(f"📦 {len(registry)} commands:")
    for descriptor in registry.all():
        scope = "global" if descriptor.is_global else "guild"
        line = f"  /{descriptor.name} [{scope}] - {descriptor.description}"
        if descriptor.is_restricted:
            line += f" (requires {permission_display_name(descriptor.permission)})"
        typer.echo(line)
        for parameter in descriptor.parameters:
            required = "required" if parameter.required else "optional"
            typer.echo(f"      {parameter.name}: {parameter.type.name} ({required})")


@app.command()
def init(
    directory: Optional[str] = typer.Option(None, help="Directory to initialize")
) -> None:
    """Initialize a new bot project."""
    target_dir = Path(directory) if directory else Path.cwd()

    if not target_dir.exists():
        target_dir.mkdir(parents=True)

    (target_dir / "plugins").mkdir(exist_ok=True)

    env_file = target_dir / ".env"
    if not env_file.exists():
        env_content = """# Slash command bot configuration
DISCORD_TOKEN=your_discord_bot_token_here
ENVIRONMENT=development
LOG_LEVEL=INFO
LOG_EVENTS=true
COMMAND_PACKAGES=["plugins"]
GUILD_IDS=[]
"""
        env_file.write_text(env_content)

    typer.echo(f"✅ Bot project initialized in {target_dir}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
