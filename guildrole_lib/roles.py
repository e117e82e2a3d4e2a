"""Guild role management against the Discord REST API.

Every operation sends exactly one request through an injectable transport (``fetch`` by
default) and never retries. Failures are reported in one of two ways:

* ``create_guild_role`` and ``remove_member_role`` return ``INTERNAL_SERVER_ERROR``.
* ``list_guild_roles`` and ``find_guild_role_by_name`` raise ``RoleFetchFailed``.
"""

import logging
from typing import Any, Mapping, Type
from pydantic import ValidationError

from .config import CONFIG
from .exceptions import DiscordAPIError, RoleFetchFailed
from .fetch import Transport, fetch
from .models.base import FrozenModel, BaseModel
from .models.guilds import GuildEnv
from .models.roles import RoleAssignmentRequest, RoleCreateRequest, RoleSummary
from .responses import INTERNAL_SERVER_ERROR, RoleAdded, RoleRemoved, ServiceError
from .utils import find, parse_into

__all__ = (
    "create_guild_role",
    "add_member_role",
    "remove_member_role",
    "list_guild_roles",
    "find_guild_role_by_name",
)


def _coerce[T: BaseModel | FrozenModel](value: T | Mapping[str, Any], model: Type[T]) -> T:
    if isinstance(value, model):
        return value

    return model.model_validate(value)


def _headers(env: GuildEnv) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": env.authorization,
    }


def _roles_url(env: GuildEnv) -> str:
    return f"{CONFIG.DISCORD_API_URL}/guilds/{env.guild_id}/roles"


def _member_role_url(env: GuildEnv, assignment: RoleAssignmentRequest) -> str:
    return f"{CONFIG.DISCORD_API_URL}/guilds/{env.guild_id}/members/{assignment.user_id}/roles/{assignment.role_id}"


async def create_guild_role(
    body: RoleCreateRequest | Mapping[str, Any],
    env: GuildEnv | Mapping[str, Any],
    *,
    transport: Transport = fetch,
) -> dict | ServiceError:
    """Create a role in the guild.

    Args:
        body (RoleCreateRequest | Mapping): ``roleName`` plus any other role fields.
        env (GuildEnv | Mapping): Token and guild to act on.
        transport (Transport, optional): Sends the request. Defaults to fetch.

    Returns:
        dict | ServiceError: The role exactly as Discord returned it, or INTERNAL_SERVER_ERROR
        if Discord did not answer with a success status or its body is not JSON.
    """

    request = _coerce(body, RoleCreateRequest)
    env = _coerce(env, GuildEnv)

    response = await transport(
        "POST",
        _roles_url(env),
        headers=_headers(env),
        body=request.to_payload(),
    )

    if not response.ok:
        logging.warning(f"Creating role {request.role_name!r} in guild {env.guild_id} failed with status {response.status}")
        return INTERNAL_SERVER_ERROR

    try:
        return response.json()
    except DiscordAPIError as exc:
        logging.warning(f"Role {request.role_name!r} created in guild {env.guild_id} but the response could not be parsed: {exc}")
        return INTERNAL_SERVER_ERROR


async def add_member_role(
    body: RoleAssignmentRequest | Mapping[str, Any],
    env: GuildEnv | Mapping[str, Any],
    *,
    transport: Transport = fetch,
) -> RoleAdded | None:
    """Assign a role to a member of the guild.

    The response body is never read. Errors raised by the transport are not caught.

    Returns:
        RoleAdded | None: The acknowledgment, or None if Discord did not answer with a success status.
    """

    assignment = _coerce(body, RoleAssignmentRequest)
    env = _coerce(env, GuildEnv)

    response = await transport(
        "PUT",
        _member_role_url(env, assignment),
        headers=_headers(env),
    )

    if response.ok:
        return RoleAdded()

    logging.warning(f"Adding role {assignment.role_id} to {assignment.user_id} in guild {env.guild_id} failed with status {response.status}")

    return None


async def remove_member_role(
    body: RoleAssignmentRequest | Mapping[str, Any],
    env: GuildEnv | Mapping[str, Any],
    *,
    transport: Transport = fetch,
) -> RoleRemoved | ServiceError:
    """Revoke a role from a member of the guild.

    Any failure, whether Discord refused or the request never completed, returns
    INTERNAL_SERVER_ERROR.

    Returns:
        RoleRemoved | ServiceError: The acknowledgment with the affected member and role.
    """

    assignment = _coerce(body, RoleAssignmentRequest)
    env = _coerce(env, GuildEnv)

    try:
        response = await transport(
            "DELETE",
            _member_role_url(env, assignment),
            headers=_headers(env),
        )
    except Exception as e:  # pylint: disable=broad-except
        logging.warning(f"Removing role {assignment.role_id} from {assignment.user_id} errored: {e!r}")
        return INTERNAL_SERVER_ERROR

    if not response.ok:
        logging.warning(f"Removing role {assignment.role_id} from {assignment.user_id} in guild {env.guild_id} failed with status {response.status}")
        return INTERNAL_SERVER_ERROR

    return RoleRemoved(user_affected=assignment)


async def list_guild_roles(
    env: GuildEnv | Mapping[str, Any],
    *,
    transport: Transport = fetch,
) -> list[RoleSummary]:
    """Fetch every role of the guild as id/name pairs, in the order Discord returns them.

    Args:
        env (GuildEnv | Mapping): Token and guild to act on.
        transport (Transport, optional): Sends the request. Defaults to fetch.

    Raises:
        RoleFetchFailed: Discord did not answer with a success status, the request
            never completed, or the body is not a list of roles.

    Returns:
        list[RoleSummary]: The roles of the guild.
    """

    env = _coerce(env, GuildEnv)

    try:
        response = await transport("GET", _roles_url(env), headers=_headers(env))
    except Exception as exc:  # pylint: disable=broad-except
        logging.warning(f"Fetching roles of guild {env.guild_id} errored: {exc!r}")
        raise RoleFetchFailed() from exc

    if not response.ok:
        logging.warning(f"Fetching roles of guild {env.guild_id} failed with status {response.status}")
        raise RoleFetchFailed()

    try:
        roles = response.json()

        if not isinstance(roles, list):
            raise DiscordAPIError(f"Expected a list of roles, got {type(roles).__name__}")

        return [parse_into(role, RoleSummary) for role in roles]

    except (DiscordAPIError, ValidationError, AttributeError, TypeError) as exc:
        logging.warning(f"Roles of guild {env.guild_id} could not be parsed: {exc}")
        raise RoleFetchFailed() from exc


async def find_guild_role_by_name(
    name: str,
    env: GuildEnv | Mapping[str, Any],
    *,
    transport: Transport = fetch,
) -> RoleSummary | None:
    """Find a role by its exact, case-sensitive name. The first match wins.

    Raises:
        RoleFetchFailed: Propagated from list_guild_roles.

    Returns:
        RoleSummary | None: The role, or None if no role has this name.
    """

    roles = await list_guild_roles(env, transport=transport)

    return find(lambda role: role.name == name, roles)
