# soundcloud_client/services/tracks.py
"""
Request builders for the ``/tracks`` endpoints.

Builders do nothing on the network until ``get()`` is awaited. Every setter
returns a new builder, so two chains started from the same builder never
see each other's filters::

    base = client.tracks().genres(["drum & bass"])
    loud = base.bpm((170, 180))
    all_dnb = await base.get()      # bpm filter not applied here
"""

import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple, Union

from soundcloud_client.core.decoding import decode
from soundcloud_client.core.errors import InvalidFilter
from soundcloud_client.models.track import Track, TrackFilter
from soundcloud_client.models.user import Comment

if TYPE_CHECKING:
    from soundcloud_client.services.client import SoundCloudClient

log = logging.getLogger(__name__)

Words = Union[str, Iterable[str]]
Range = Tuple[int, int]


def _join_words(name: str, value: Words) -> str:
    if isinstance(value, str):
        words = [value]
    else:
        try:
            words = list(value)
        except TypeError:
            raise InvalidFilter(f"{name} must be a string or a list of strings") from None
    if not all(isinstance(w, str) for w in words):
        raise InvalidFilter(f"{name} must be a string or a list of strings")
    words = [w.strip() for w in words]
    if not words or not all(words):
        raise InvalidFilter(f"{name} must be one or more non-empty strings")
    return ",".join(words)


def _range_params(name: str, value: Range) -> Dict[str, str]:
    try:
        low, high = value
    except (TypeError, ValueError):
        raise InvalidFilter(f"{name} must be a (from, to) pair") from None
    if low is not None and high is not None and low > high:
        raise InvalidFilter(f"{name} range is inverted: {low} > {high}")

    params = {}
    for key, bound in (("from", low), ("to", high)):
        if bound is None:
            continue
        if isinstance(bound, bool) or not isinstance(bound, (int, float)) or bound < 0:
            raise InvalidFilter(f"{name}[{key}] must be a non-negative number")
        params[f"{name}[{key}]"] = str(bound)
    return params


class SingleTrackRequestBuilder:
    """Looks up one track by id."""

    def __init__(self, client: "SoundCloudClient", track_id: int):
        self._client = client
        self.track_id = track_id

    def __repr__(self) -> str:
        return f"SingleTrackRequestBuilder(id={self.track_id})"

    async def get(self) -> Track:
        data = await self._client.get_json(f"/tracks/{self.track_id}")
        return decode(Track, data)

    async def comments(self) -> List[Comment]:
        data = await self._client.get_json(f"/tracks/{self.track_id}/comments")
        if data is None:
            return []
        return decode(List[Comment], data)


class TrackRequestBuilder:
    """Searches tracks by any combination of filters."""

    def __init__(self, client: "SoundCloudClient", params: Optional[Dict[str, str]] = None):
        self._client = client
        self._params: Dict[str, str] = dict(params or {})

    def __repr__(self) -> str:
        return f"TrackRequestBuilder({self._params!r})"

    @property
    def params(self) -> Dict[str, str]:
        """The query parameters ``get()`` would send, without ``client_id``."""
        return dict(self._params)

    def _with(self, **params: str) -> "TrackRequestBuilder":
        merged = dict(self._params)
        merged.update(params)
        return TrackRequestBuilder(self._client, merged)

    # ---------- filters ----------

    def query(self, q: Optional[str]) -> "TrackRequestBuilder":
        """Free text search."""
        if q is None:
            return self
        if not isinstance(q, str) or not q.strip():
            raise InvalidFilter("query must be a non-empty string")
        return self._with(q=q)

    def tags(self, tags: Optional[Words]) -> "TrackRequestBuilder":
        if tags is None:
            return self
        return self._with(tags=_join_words("tags", tags))

    def filter(self, value: Optional[Union[TrackFilter, str]]) -> "TrackRequestBuilder":
        if value is None:
            return self
        try:
            value = TrackFilter(value)
        except ValueError:
            raise InvalidFilter(f"unknown sharing filter {value!r}") from None
        return self._with(filter=value.value)

    def license(self, license: Optional[str]) -> "TrackRequestBuilder":
        if license is None:
            return self
        if not isinstance(license, str) or not license.strip():
            raise InvalidFilter("license must be a non-empty string")
        return self._with(license=license)

    def ids(self, ids: Optional[Iterable[int]]) -> "TrackRequestBuilder":
        if ids is None:
            return self
        ids = list(ids)
        if not ids or any(isinstance(i, bool) or not isinstance(i, int) or i <= 0 for i in ids):
            raise InvalidFilter("ids must be one or more positive integers")
        return self._with(ids=",".join(str(i) for i in ids))

    def genres(self, genres: Optional[Words]) -> "TrackRequestBuilder":
        if genres is None:
            return self
        return self._with(genres=_join_words("genres", genres))

    def types(self, types: Optional[Words]) -> "TrackRequestBuilder":
        if types is None:
            return self
        return self._with(types=_join_words("types", types))

    def duration(self, value: Optional[Range]) -> "TrackRequestBuilder":
        """Duration range in milliseconds; either bound may be ``None``."""
        if value is None:
            return self
        return self._with(**_range_params("duration", value))

    def bpm(self, value: Optional[Range]) -> "TrackRequestBuilder":
        if value is None:
            return self
        return self._with(**_range_params("bpm", value))

    def created_at(self, value: Optional[Tuple[Optional[str], Optional[str]]]) -> "TrackRequestBuilder":
        """Creation date range, as ``yyyy-mm-dd hh:mm:ss`` strings."""
        if value is None:
            return self
        try:
            low, high = value
        except (TypeError, ValueError):
            raise InvalidFilter("created_at must be a (from, to) pair") from None

        params = {}
        for key, bound in (("from", low), ("to", high)):
            if bound is None:
                continue
            if not isinstance(bound, str) or not bound.strip():
                raise InvalidFilter(f"created_at[{key}] must be a non-empty string")
            params[f"created_at[{key}]"] = bound
        return self._with(**params)

    def id(self, track_id: int) -> SingleTrackRequestBuilder:
        return SingleTrackRequestBuilder(self._client, track_id)

    # ---------- terminal ----------

    async def get(self) -> List[Track]:
        """
        Runs the search. No matches come back as an empty list; transport,
        API and decoding failures are raised.
        """
        log.debug("Searching tracks with %s", self._params)
        data = await self._client.get_json("/tracks", self._params)
        if data is None:
            return []
        return decode(List[Track], data)
