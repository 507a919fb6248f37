"""Asynchronous HTTP client shared by the translation engines.

``AsyncHttp`` wraps a single lazily-created aiohttp session. One instance is owned by each engine and
may serve any number of concurrent requests. Responses are decoded according to their Content-Type;
transport problems are reported as ``AsyncCommError`` / ``AsyncCommTimeoutError`` so callers never see
aiohttp exception types.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final, Literal, Self

import aiohttp
from aiohttp.client import ClientSession

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable, Mapping

    from aiohttp.client import ClientResponse


__all__: list[str] = [
    "AsyncCommError",
    "AsyncCommInvalidContentTypeError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTPMethod = Literal["GET", "POST"]

CONNECT_TIMEOUT: Final[float] = 3.0
DEFAULT_TIMEOUT: Final[float] = 10.0


def _decode_json(raw: bytes) -> Any:
    return json.loads(raw.decode("utf-8"))


class AsyncHttp:
    """Asynchronous HTTP client with pluggable Content-Type handlers.

    The session is created on first use, inside the running event loop, so an ``AsyncHttp`` can be
    constructed from synchronous code. Request headers and bodies are never logged because they may
    carry credentials.
    """

    def __init__(self, *, total_timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the client.

        Every provider answers with a JSON body, but several label it loosely, so JSON decoding is
        registered for the plain-text and HTML types as well.

        Args:
            total_timeout (float): Total timeout per request in seconds. 0 or less disables the timeout.
        """
        self.__session: ClientSession | None = None
        self.total_timeout: float = total_timeout
        self.content_handlers: dict[str, Callable[[bytes], Any]] = {}

        for content_type in ("application/json", "text/json", "text/plain", "text/html"):
            self.add_handler(content_type, _decode_json)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    @property
    def session(self) -> ClientSession:
        """Get the current session, creating a new one if none exists or the last one was closed."""
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession()
            logger.debug("%s session initialized", self.__class__.__name__)
        return self.__session

    @property
    def closed(self) -> bool:
        return self.__session is None or self.__session.closed

    async def close(self) -> None:
        """Close the aiohttp session if it is open."""
        if self.__session is not None and not self.__session.closed:
            await self.__session.close()
            logger.debug("%s session closed", self.__class__.__name__)
        self.__session = None

    async def get(
        self,
        *,
        url: str,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Perform a GET request with URL query parameters.

        Returns:
            Any: The decoded response body, or None for an empty body.
        """
        return await self._request("GET", url=url, params=params, headers=headers)

    async def post(
        self,
        *,
        url: str,
        data: Mapping[str, str] | None = None,
        json_body: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Perform a POST request.

        Args:
            url (str): Target URL.
            data (Mapping[str, str] | None): Form fields, sent URL-encoded.
            json_body (Any | None): Body sent as JSON. Mutually exclusive with ``data``.
            headers (Mapping[str, str] | None): Extra request headers.

        Returns:
            Any: The decoded response body, or None for an empty body.
        """
        if data is not None and json_body is not None:
            msg = "Specify either form data or a JSON body, not both"
            raise ValueError(msg)
        return await self._request("POST", url=url, data=data, json=json_body, headers=headers)

    async def decode_response(self, resp: ClientResponse) -> Any:
        """Decode a response body using the handler registered for its Content-Type.

        Raises:
            AsyncCommInvalidContentTypeError: If no handler is registered for the Content-Type,
                or the body does not decode.
        """
        content_type: str = resp.headers.get("Content-Type", "").split(";")[0].strip().lower()
        logger.debug("'Content-Type': '%s'", content_type)

        raw: bytes = await resp.read()
        if not raw:
            logger.debug("Received empty response")
            return None

        handler: Callable[[bytes], Any] | None = self.content_handlers.get(content_type)
        if handler is None:
            msg: str = f"Unknown Content-Type '{content_type}'"
            raise AsyncCommInvalidContentTypeError(msg)
        try:
            return handler(raw)
        except (UnicodeDecodeError, ValueError) as err:
            msg = f"Response body could not be decoded as '{content_type}'"
            raise AsyncCommInvalidContentTypeError(msg) from err

    def add_handler(self, content_type: str, handler: Callable[[bytes], Any]) -> None:
        """Register (or replace) the decoder for a Content-Type."""
        if self.content_handlers.get(content_type):
            logger.debug("Handler for content type '%s' already exists, replacing it", content_type)
        self.content_handlers[content_type] = handler

    def _build_timeout(self) -> aiohttp.ClientTimeout:
        if self.total_timeout <= 0:
            return aiohttp.ClientTimeout(total=None)
        if self.total_timeout < CONNECT_TIMEOUT:
            return aiohttp.ClientTimeout(total=self.total_timeout)
        return aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=self.total_timeout)

    async def _request(self, method: HTTPMethod, *, url: str, **kwargs: Any) -> Any:
        logger.debug("[%s] url=%s timeout=%s", method, url, self.total_timeout)
        kwargs = {key: value for key, value in kwargs.items() if value is not None}

        try:
            async with self.session.request(method=method, url=url, timeout=self._build_timeout(), **kwargs) as resp:
                resp.raise_for_status()
                return await self.decode_response(resp)

        except TimeoutError as err:
            msg = "Timeout due to a lack of response from the server."
            raise AsyncCommTimeoutError(msg) from err
        except ConnectionResetError as err:
            msg = "The connection to the server has been disconnected."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientResponseError as err:
            msg = "Error response from the server."
            raise AsyncCommError(msg, response=err) from err
        except aiohttp.ClientError as err:
            msg = "The server could not be reached."
            raise AsyncCommError(msg) from err


class AsyncCommError(Exception):
    """Base class for asynchronous communication errors.

    Attributes:
        msg (str): Description of the failure, including the HTTP status when there was one.
        status (int | None): HTTP status code of an error response, if the server answered.
    """

    def __init__(self, msg: str | BaseException, **kwargs: Any) -> None:
        self.msg: str = str(msg)
        self.status: int | None = None

        rsp: aiohttp.ClientResponseError | None = kwargs.pop("response", None)
        if isinstance(rsp, aiohttp.ClientResponseError):
            self.status = rsp.status
            self.msg = f"{self.msg}: status='{rsp.status}'"

        super().__init__(self.msg)


class AsyncCommTimeoutError(AsyncCommError):
    """A request did not complete within the configured timeout."""


class AsyncCommInvalidContentTypeError(AsyncCommError):
    """The response had an unregistered Content-Type or a body its handler could not decode."""
