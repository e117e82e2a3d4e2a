from os import getcwd, environ
from typing import Literal
from dotenv import load_dotenv
from .models.base import BaseModel

load_dotenv(f"{getcwd()}/.env")


class Config(BaseModel):
    """Type definition for config values."""

    #############################
    # optional defaults for GuildEnv.from_config(), the role operations never read these
    DISCORD_TOKEN: str | None = None
    DISCORD_GUILD_ID: str | None = None
    #############################
    DISCORD_API_URL: str = "https://discord.com/api/v10"
    DISCORD_PROXY_URL: str = None
    REQUEST_TIMEOUT: float = 10
    #############################
    SENTRY_DSN: str = None
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    def model_post_init(self, __context):
        # easier to validate with python expressions instead of field validators

        # DISCORD_TOKEN without DISCORD_GUILD_ID is fine, GuildEnv.from_config() checks both when used
        if self.REQUEST_TIMEOUT <= 0:
            raise ValueError("REQUEST_TIMEOUT must be a positive number of seconds")

        self.DISCORD_API_URL = self.DISCORD_API_URL.rstrip("/")


CONFIG: Config = Config(
    **{field: value for field, value in environ.items() if field in Config.model_fields}
)
