from pydantic import Field
from pydantic_settings import BaseSettings


class BotSettings(BaseSettings):
    discord_token: str = Field(default="", description="Discord bot token")

    environment: str = Field(default="development", description="Environment")
    log_level: str = Field(default="INFO", description="Logging level")
    log_events: bool = Field(
        default=False, description="Log command registration, execution and denials"
    )

    # Command configuration
    command_packages: list[str] = Field(
        default=["plugins"],
        description="Packages scanned for @auto_register command classes",
    )
    publish_global_on_start: bool = Field(
        default=True, description="Upsert global commands to Discord once the bot has started"
    )
    publish_guild_on_start: bool = Field(
        default=True, description="Upsert guild commands to each guild as it becomes available"
    )
    guild_ids: list[int] = Field(
        default=[], description="Restrict guild command uploads to these guilds (empty means all)"
    )
    failure_message: str = Field(
        default="Sorry, something went wrong...",
        description="Reply sent when a command handler raises",
    )

    # Development settings
    debug: bool = Field(default=False, description="Enable debug mode")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = BotSettings()
