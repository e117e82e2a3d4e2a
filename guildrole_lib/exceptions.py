from .responses import ROLE_FETCH_FAILED


class GuildRoleException(Exception):
    """Base exception for guildrole_lib."""

    def __init__(self, message=None):
        super().__init__(message)
        self.message = message


class DiscordAPIError(GuildRoleException):
    """Raised when Discord returns something we cannot interpret."""


class DiscordDown(DiscordAPIError):
    """Raised when a request to Discord times out."""


class DiscordRequestFailed(DiscordAPIError):
    """Raised when a request to Discord never completes."""


class RoleFetchFailed(GuildRoleException):
    """Raised when the roles of a guild could not be fetched."""

    def __init__(self, message=ROLE_FETCH_FAILED):
        super().__init__(message)
