import pytest
from guildrole_lib import CONFIG


@pytest.fixture
def discord_api() -> str:
    """Base URL every request is expected to target."""

    return CONFIG.DISCORD_API_URL
