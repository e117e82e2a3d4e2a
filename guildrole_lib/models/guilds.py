from typing import Self
from pydantic import Field
from .base import Snowflake, FrozenModel
from ..config import CONFIG


class GuildEnv(FrozenModel):
    """Credentials and target guild for a single role operation.

    Attributes:
        token (str): The bot token. Excluded from the repr.
        guild_id (str): ID of the guild the operation acts on.
    """

    token: str = Field(alias="DISCORD_TOKEN", repr=False)
    guild_id: Snowflake = Field(alias="DISCORD_GUILD_ID")

    @property
    def authorization(self) -> str:
        """Value of the Authorization header for bot requests."""

        return f"Bot {self.token}"

    @classmethod
    def from_config(cls) -> Self:
        """Build an environment from DISCORD_TOKEN and DISCORD_GUILD_ID in the config.

        Raises:
            ValueError: If either value is not configured.
        """

        if not CONFIG.DISCORD_TOKEN or not CONFIG.DISCORD_GUILD_ID:
            raise ValueError("DISCORD_TOKEN and DISCORD_GUILD_ID must be configured")

        return cls(token=CONFIG.DISCORD_TOKEN, guild_id=CONFIG.DISCORD_GUILD_ID)
