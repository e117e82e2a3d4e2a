import asyncio
import logging
from enum import IntEnum
from typing import Any, Awaitable, Protocol
from requests.utils import requote_uri
import aiohttp
from pydantic_core import from_json, to_json
from guildrole_lib.models.base import BaseModel

from .exceptions import DiscordAPIError, DiscordDown, DiscordRequestFailed
from .config import CONFIG

__all__ = ("StatusCodes", "RESTResponse", "Transport", "fetch", "close_session")


session = None
session_loop = None


class StatusCodes(IntEnum):
    """Status codes for requests"""

    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504


class RESTResponse(BaseModel):
    """A settled response. The body is read before the connection is released."""

    status: int
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Parse the body as JSON. An empty body parses to None.

        Raises:
            DiscordAPIError: The body is not valid JSON.
        """

        if not self.content:
            return None

        try:
            return from_json(self.content)
        except ValueError as exc:
            raise DiscordAPIError(f"Discord returned a non-JSON body (status {self.status})") from exc


class Transport(Protocol):
    """Anything that can send a request and settle it into a RESTResponse."""

    def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: dict = None,
        body: dict = None,
    ) -> Awaitable[RESTResponse]: ...


def _bytes_to_str_wrapper(data: Any) -> str:
    return to_json(data).decode("utf-8")


async def fetch(
    method: str,
    url: str,
    *,
    headers: dict = None,
    body: dict = None,
    timeout: float = None,
) -> RESTResponse:
    """Send a REST request to Discord. This is the default transport of the role operations.

    Non-success statuses are not raised, callers decide what a failure means for them.

    Args:
        method (str): The HTTP request method to use for this query.
        url (str): The URL to send the request to.
        headers (dict, optional): Headers to use when sending the request. Defaults to None.
        body (dict, optional): JSON body of the request. Nothing is sent when None.
        timeout (float, optional): Seconds to wait for the request to settle. Defaults to REQUEST_TIMEOUT.

    Raises:
        DiscordDown: The request timed out.
        DiscordRequestFailed: The request could not be completed (DNS, connection reset...).

    Returns:
        RESTResponse: The status and body of the response.
    """
    global session, session_loop  # pylint: disable=global-statement

    headers = headers or {}
    timeout = timeout or CONFIG.REQUEST_TIMEOUT
    loop = asyncio.get_running_loop()

    # a session only works on the loop it was opened on, e.g. each asyncio.run() needs its own
    if not session or session.closed or session_loop is not loop:
        session = aiohttp.ClientSession(json_serialize=_bytes_to_str_wrapper)
        session_loop = loop

    url = requote_uri(url)

    logging.debug(f"{method} {url}")

    try:
        async with session.request(
            method,
            url,
            json=body,
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=timeout),
            proxy=CONFIG.DISCORD_PROXY_URL,
        ) as response:
            content = await response.read()

            if not response.ok:
                logging.debug(f"{url} failed with status {response.status} and body {content!r}")

            return RESTResponse(status=response.status, content=content)

    except asyncio.TimeoutError:
        logging.debug(f"URL {url} timed out")
        raise DiscordDown(f"Request to {url} timed out") from None

    except aiohttp.ClientError as exc:
        logging.debug(f"URL {url} could not be reached: {exc}")
        raise DiscordRequestFailed(f"Request to {url} failed: {exc}") from exc


async def close_session():
    """Close the shared HTTP session, if one was opened."""
    global session, session_loop  # pylint: disable=global-statement

    if session and not session.closed and session_loop is asyncio.get_running_loop():
        await session.close()

    session = None
    session_loop = None
