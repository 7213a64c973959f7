# soundcloud_client/services/client.py
"""
Asynchronous client for the SoundCloud REST API.

:class:`SoundCloudClient` is the single place where the application's
``client_id`` gets attached to outbound requests. It exposes a raw
authenticated ``get()``, ``resolve()`` for permalinks, and the two binary
transfers ``download()`` / ``stream()``, which follow at most one redirect
before writing the body to a caller supplied sink.

Typed lookups go through the request builders returned by ``track()`` and
``tracks()``::

    async with SoundCloudClient(client_id) as client:
        tracks = await client.tracks().query("noisia").get()
        track = await client.track(262681089).get()
        with open("track.mp3", "wb") as fp:
            await client.download(track, fp)
"""

import asyncio
import inspect
import logging
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

import aiohttp
from aiohttp import ClientSession, ClientTimeout
from yarl import URL

from soundcloud_client.core.config import settings
from soundcloud_client.core.decoding import decode
from soundcloud_client.core.errors import (
    ApiError,
    HttpError,
    IoError,
    JsonError,
    ParseError,
    TrackNotDownloadable,
    TrackNotStreamable,
    UriError,
)
from soundcloud_client.models.track import Track
from soundcloud_client.models.user import User
from soundcloud_client.services.tracks import SingleTrackRequestBuilder, TrackRequestBuilder

log = logging.getLogger(__name__)

Params = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


async def _error_message(resp: aiohttp.ClientResponse) -> str:
    """Pulls ``errors[0].error_message`` out of an API error payload."""
    try:
        data = await resp.json(content_type=None)
        return data["errors"][0]["error_message"]
    except (ValueError, LookupError, TypeError):
        return f"HTTP {resp.status}"


class SoundCloudClient:
    """
    :param client_id: the registered application's client id, appended to
        every request.
    :param session: an existing ``aiohttp.ClientSession`` to share. It is
        never closed by the client; without one, the client opens its own.
    :param api_base: scheme and host of the API, ``https://api.soundcloud.com``
        unless configured otherwise.
    :raises ValueError: when no client id is given and none is configured.
        This is a setup mistake rather than a request failure, so it is not
        a :class:`SoundCloudError`.
    """

    def __init__(
            self,
            client_id: Optional[str] = None,
            *,
            session: Optional[ClientSession] = None,
            api_base: Optional[str] = None,
            timeout: Optional[float] = None,
            redirect_timeout: Optional[float] = None,
            chunk_size: Optional[int] = None,
    ) -> None:
        client_id = client_id or settings.client_id
        if not client_id:
            raise ValueError("a SoundCloud client_id is required")
        self._client_id = client_id

        self.api_base = (api_base or f"https://{settings.api_host}").rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout
        self.redirect_timeout = redirect_timeout if redirect_timeout is not None else settings.redirect_timeout
        self.chunk_size = chunk_size or settings.chunk_size

        self._session = session
        self._owns_session = session is None

        log.debug("Init with api_base=%s", self.api_base)

    @property
    def client_id(self) -> str:
        return self._client_id

    async def __aenter__(self) -> "SoundCloudClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _ensure_session(self) -> ClientSession:
        if self._owns_session and (self._session is None or self._session.closed):
            self._session = ClientSession(timeout=ClientTimeout(total=self.timeout))
        elif self._session.closed:
            raise HttpError("session is closed")
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    # ---------- URLs ----------

    def _api_url(self, path: str, params: Optional[Params] = None) -> URL:
        try:
            url = URL(f"{self.api_base}{path}")
        except ValueError as e:
            raise ParseError(str(e)) from e

        pairs = list(url.query.items())
        if params:
            items = params.items() if isinstance(params, Mapping) else params
            pairs.extend((str(k), str(v)) for k, v in items)
        pairs.append(("client_id", self._client_id))
        return url.with_query(pairs)

    def parse_url(self, value: Union[str, URL]) -> URL:
        """Parses *value* and returns it as a URL with ``client_id`` set."""
        try:
            url = value if isinstance(value, URL) else URL(value)
        except (TypeError, ValueError) as e:
            raise ParseError(str(e)) from e

        if not url.is_absolute() or url.scheme not in ("http", "https"):
            raise UriError(f"not an absolute http(s) URL: {value!s}")
        return url.update_query({"client_id": self._client_id})

    # ---------- raw requests ----------

    async def get(self, path: str, params: Optional[Params] = None) -> aiohttp.ClientResponse:
        """
        Sends an authenticated GET to ``<api_base><path>``. Redirects are not
        followed. The body is read before returning, so the response can be
        inspected after the connection went back to the pool.
        """
        url = self._api_url(path, params)
        session = await self._ensure_session()
        log.debug("GET %s", url.path)
        try:
            async with session.get(url, allow_redirects=False) as resp:
                await resp.read()
                return resp
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise HttpError(str(e) or e.__class__.__name__) from e

    async def get_json(self, path: str, params: Optional[Params] = None) -> Any:
        resp = await self.get(path, params)
        if resp.status >= 400:
            message = await _error_message(resp)
            log.warning("SoundCloud API %s on %s: %s", resp.status, path, message)
            raise ApiError(message)
        try:
            return await resp.json(content_type=None)
        except ValueError as e:
            raise JsonError(str(e)) from e

    async def resolve(self, url: str) -> URL:
        """Resolves a soundcloud.com permalink to its API resource URL."""
        resp = await self.get("/resolve", {"url": url})
        location = resp.headers.get("Location")
        if not location:
            raise ApiError("expected location header")
        try:
            return URL(location)
        except ValueError as e:
            raise ParseError(str(e)) from e

    # ---------- typed lookups ----------

    def track(self, track_id: int) -> SingleTrackRequestBuilder:
        return SingleTrackRequestBuilder(self, track_id)

    def tracks(self) -> TrackRequestBuilder:
        return TrackRequestBuilder(self)

    async def get_user(self, user_id: int) -> User:
        return decode(User, await self.get_json(f"/users/{user_id}"))

    # ---------- transfers ----------

    async def download(self, track: Track, sink) -> int:
        """Writes the track's original file to *sink*; returns the byte count."""
        if not track.can_download:
            raise TrackNotDownloadable()
        return await self._transfer(track.download_url, sink)

    async def stream(self, track: Track, sink) -> int:
        """Writes the track's stream to *sink*; returns the byte count."""
        if not track.can_stream:
            raise TrackNotStreamable()
        return await self._transfer(track.stream_url, sink)

    async def _open(self, session: ClientSession, url: URL) -> aiohttp.ClientResponse:
        # Bodies can take longer than any API call; bound idle time instead.
        timeout = ClientTimeout(total=None, sock_connect=self.timeout, sock_read=self.timeout)
        return await session.get(url, allow_redirects=False, timeout=timeout)

    async def _transfer(self, target: str, sink) -> int:
        url = self.parse_url(target)
        session = await self._ensure_session()
        try:
            async with await self._open(session, url) as resp:
                location = resp.headers.get("Location")
                if location is None:
                    return await self._drain(resp, sink)
                try:
                    hop = resp.url.join(URL(location))
                except ValueError as e:
                    raise ParseError(str(e)) from e

            # Follow the redirect just this once.
            log.debug("Following redirect to %s%s", hop.host or "", hop.path)
            hop_resp = await asyncio.wait_for(self._open(session, hop), self.redirect_timeout)
            async with hop_resp:
                return await self._drain(hop_resp, sink)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise HttpError(str(e) or e.__class__.__name__) from e

    async def _drain(self, resp: aiohttp.ClientResponse, sink) -> int:
        if resp.status >= 400:
            raise ApiError(await _error_message(resp))

        written = 0
        async for chunk in resp.content.iter_chunked(self.chunk_size):
            try:
                result = sink.write(chunk)
                if inspect.isawaitable(result):
                    await result
            except (OSError, ValueError) as e:
                raise IoError(str(e)) from e
            written += len(chunk)
        return written
