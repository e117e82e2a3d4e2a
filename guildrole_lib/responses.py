"""Messages and outcome models returned by the role operations."""

from pydantic import Field
from .models.base import FrozenModel
from .models.roles import RoleAssignmentRequest

__all__ = (
    "ROLE_ADDED",
    "ROLE_REMOVED",
    "ROLE_FETCH_FAILED",
    "ServiceError",
    "RoleAdded",
    "RoleRemoved",
    "INTERNAL_SERVER_ERROR",
)


ROLE_ADDED = "Role added successfully"
ROLE_REMOVED = "Role Removed successfully"
ROLE_FETCH_FAILED = "Oops! We are unable to fetch the roles"


class ServiceError(FrozenModel):
    """Standardized error outcome. Returned to the caller, never raised."""

    code: int
    message: str


class RoleAdded(FrozenModel):
    """Acknowledgment that a role was assigned to a member."""

    message: str = ROLE_ADDED


class RoleRemoved(FrozenModel):
    """Acknowledgment that a role was revoked, echoing who was affected."""

    message: str = ROLE_REMOVED
    user_affected: RoleAssignmentRequest = Field(alias="userAffected")


INTERNAL_SERVER_ERROR = ServiceError(
    code=500,
    message="The server encountered an unexpected error. Please contact an admin or try again later.",
)
