from typing import Any
from pydantic import ConfigDict, Field
from .base import Snowflake, BaseModel, FrozenModel


class RoleSummary(FrozenModel):
    """The id and name of a guild role. Every other field Discord sends is dropped."""

    id: Snowflake
    name: str


class RoleCreateRequest(BaseModel):
    """Caller-facing body for creating a role.

    Only ``roleName`` is required. Any other field (color, permissions, unicode_emoji...) is
    kept exactly as given, key included, and forwarded to Discord untouched. The role name
    itself always goes out as ``roleName`` and ``name``, also when it was passed as
    ``role_name``.
    """

    model_config = ConfigDict(extra="allow")

    role_name: str = Field(alias="roleName")

    def to_payload(self) -> dict[str, Any]:
        """Map this request to the JSON body Discord expects.

        Discord names the field ``name``, so it is filled from ``roleName``. All caller
        fields are copied over as well.
        """

        payload = self.model_dump(by_alias=True)
        payload["name"] = self.role_name

        return payload


class RoleAssignmentRequest(FrozenModel):
    """A member and the role to assign to, or revoke from, them."""

    model_config = ConfigDict(extra="forbid")

    user_id: Snowflake = Field(alias="userId")
    role_id: Snowflake = Field(alias="roleId")
