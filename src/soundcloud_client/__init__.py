"""
SoundCloud API client.

Query SoundCloud for tracks, users and comments, and stream or download
track audio, over asyncio.
"""

from soundcloud_client.core.config import API_HOST
from soundcloud_client.core.errors import (
    ApiError,
    HttpError,
    InvalidFilter,
    IoError,
    JsonError,
    ParseError,
    SoundCloudError,
    TrackNotDownloadable,
    TrackNotStreamable,
    UriError,
)
from soundcloud_client.models.track import Track, TrackFilter
from soundcloud_client.models.user import App, Comment, User
from soundcloud_client.services.client import SoundCloudClient
from soundcloud_client.services.tracks import SingleTrackRequestBuilder, TrackRequestBuilder

__all__ = [
    "API_HOST",
    "ApiError",
    "App",
    "Comment",
    "HttpError",
    "InvalidFilter",
    "IoError",
    "JsonError",
    "ParseError",
    "SingleTrackRequestBuilder",
    "SoundCloudClient",
    "SoundCloudError",
    "Track",
    "TrackFilter",
    "TrackNotDownloadable",
    "TrackNotStreamable",
    "TrackRequestBuilder",
    "UriError",
    "User",
]
