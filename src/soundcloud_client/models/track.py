# soundcloud_client/models/track.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from soundcloud_client.models.user import App, User


class TrackFilter(str, Enum):
    """Sharing filter accepted by the track search endpoint."""
    ALL = "all"
    PUBLIC = "public"
    PRIVATE = "private"


class Track(BaseModel):
    id: int = Field(..., gt=0)
    title: str

    streamable: bool = False
    downloadable: bool = False
    stream_url: Optional[str] = None
    download_url: Optional[str] = None

    created_at: Optional[str] = None
    user_id: Optional[int] = None
    user: Optional[User] = None
    permalink: Optional[str] = None
    permalink_url: Optional[str] = None
    uri: Optional[str] = None
    sharing: Optional[str] = None
    embeddable_by: Optional[str] = None
    purchase_url: Optional[str] = None
    purchase_title: Optional[str] = None
    artwork_url: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = None          # ms
    genre: Optional[str] = None
    tag_list: Optional[str] = None
    label_id: Optional[int] = None
    label_name: Optional[str] = None
    release: Optional[str] = None
    release_day: Optional[int] = None
    release_month: Optional[int] = None
    release_year: Optional[int] = None
    state: Optional[str] = None
    license: Optional[str] = None
    track_type: Optional[str] = None
    waveform_url: Optional[str] = None
    video_url: Optional[str] = None
    bpm: Optional[float] = None
    commentable: Optional[bool] = None
    isrc: Optional[str] = None
    key_signature: Optional[str] = None
    comment_count: Optional[int] = None
    download_count: Optional[int] = None
    playback_count: Optional[int] = None
    favoritings_count: Optional[int] = None
    original_format: Optional[str] = None
    original_content_size: Optional[int] = None
    created_with: Optional[App] = None
    user_favorite: Optional[bool] = None

    @property
    def can_download(self) -> bool:
        return self.downloadable and self.download_url is not None

    @property
    def can_stream(self) -> bool:
        return self.streamable and self.stream_url is not None
