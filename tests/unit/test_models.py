import pytest
from pydantic import ValidationError
from pytest_lazy_fixtures import lf
from guildrole_lib import CONFIG
from guildrole_lib.fetch import RESTResponse, StatusCodes
from guildrole_lib.exceptions import DiscordAPIError
from guildrole_lib.models.guilds import GuildEnv
from guildrole_lib.models.roles import RoleAssignmentRequest, RoleCreateRequest

# fixtures
from .fixtures.guilds import guild_env
from .fixtures.roles import dummy_create_body, dummy_add_role_body


class TestRoleCreateRequest:
    """Tests for mapping create bodies to the Discord wire shape."""

    def test_payload_keeps_every_field(self, dummy_create_body):
        payload = RoleCreateRequest(**dummy_create_body).to_payload()

        assert payload == {**dummy_create_body, "name": dummy_create_body["roleName"]}

    def test_role_name_wins_over_name(self):
        payload = RoleCreateRequest(roleName="Moderators", name="ignored").to_payload()

        assert payload["name"] == "Moderators"

    def test_unknown_fields_are_not_coerced(self):
        """Nested and odd values reach Discord exactly as given."""

        tags = {"bot_id": "1", "premium_subscriber": None}
        payload = RoleCreateRequest(roleName="Bots", tags=tags, position="3").to_payload()

        assert payload["tags"] == tags
        assert payload["position"] == "3"

    def test_snake_case_fields_keep_their_keys(self):
        """Only the role name is renamed, other snake_case keys go out as given."""

        payload = RoleCreateRequest(role_name="Emoji", unicode_emoji="\N{SPARKLES}").to_payload()

        assert payload == {"roleName": "Emoji", "unicode_emoji": "\N{SPARKLES}", "name": "Emoji"}

    def test_role_name_is_required(self):
        with pytest.raises(ValidationError):
            RoleCreateRequest(color=1)


class TestRoleAssignmentRequest:
    """Tests for member/role pairs."""

    @pytest.mark.parametrize("body", [
        lf("dummy_add_role_body"),
        {"user_id": "112233445566778899", "role_id": "1234567891"},
        {"userId": 112233445566778899, "roleId": 1234567891},
    ])
    def test_accepts_aliases_names_and_integers(self, body):
        assignment = RoleAssignmentRequest.model_validate(body)

        assert assignment.user_id == "112233445566778899"
        assert assignment.role_id == "1234567891"

    def test_rejects_other_fields(self, dummy_add_role_body):
        with pytest.raises(ValidationError):
            RoleAssignmentRequest(**dummy_add_role_body, reason="cleanup")


class TestGuildEnv:
    """Tests for the per-call environment."""

    def test_authorization(self, guild_env):
        assert guild_env.authorization == f"Bot {guild_env.token}"

    def test_is_frozen(self, guild_env):
        with pytest.raises(ValidationError):
            guild_env.guild_id = "1"

    def test_token_is_hidden_from_repr(self, guild_env):
        assert guild_env.token not in repr(guild_env)
        assert guild_env.guild_id in repr(guild_env)

    def test_from_config(self, monkeypatch):
        monkeypatch.setattr(CONFIG, "DISCORD_TOKEN", "config-token")
        monkeypatch.setattr(CONFIG, "DISCORD_GUILD_ID", "555")

        env = GuildEnv.from_config()

        assert env == GuildEnv(token="config-token", guild_id="555")

    def test_from_config_requires_both_values(self, monkeypatch):
        monkeypatch.setattr(CONFIG, "DISCORD_TOKEN", None)
        monkeypatch.setattr(CONFIG, "DISCORD_GUILD_ID", "555")

        with pytest.raises(ValueError):
            GuildEnv.from_config()


class TestRESTResponse:
    """Tests for settled transport responses."""

    @pytest.mark.parametrize("status,ok", [
        (StatusCodes.OK, True),
        (StatusCodes.CREATED, True),
        (StatusCodes.NO_CONTENT, True),
        (StatusCodes.NOT_FOUND, False),
        (StatusCodes.TOO_MANY_REQUESTS, False),
        (StatusCodes.INTERNAL_SERVER_ERROR, False),
    ])
    def test_ok(self, status, ok):
        assert RESTResponse(status=status).ok is ok

    def test_empty_body_parses_to_none(self):
        assert RESTResponse(status=204).json() is None

    def test_json(self):
        assert RESTResponse(status=200, content=b'[{"id": "1", "name": "a"}]').json() == [{"id": "1", "name": "a"}]

    def test_malformed_body_raises(self):
        with pytest.raises(DiscordAPIError):
            RESTResponse(status=502, content=b"<html>Bad Gateway</html>").json()
