# soundcloud_client/models/user.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class App(BaseModel):
    """Registered client application."""
    id: int
    uri: str                        # API resource URL
    permalink_url: str              # URL to the SoundCloud.com page
    external_url: str               # URL to an external site
    creator: Optional[str] = None   # username of the app creator


class User(BaseModel):
    """Registered user.

    The profile fields are only returned depending on the user's privacy
    settings, so they stay ``None`` when the API leaves them out.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int
    permalink: str
    username: str
    uri: str
    permalink_url: str
    avatar_url: str

    country: Optional[str] = None
    full_name: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None
    discogs_name: Optional[str] = Field(None, alias="discogs-name")
    myspace_name: Optional[str] = Field(None, alias="myspace-name")
    website: Optional[str] = None
    website_title: Optional[str] = Field(None, alias="website-title")
    online: Optional[bool] = None
    track_count: Optional[int] = None
    playlist_count: Optional[int] = None
    followers_count: Optional[int] = None
    followings_count: Optional[int] = None
    public_favorites_count: Optional[int] = None


class Comment(BaseModel):
    """User comment on a track."""
    id: int
    uri: str
    created_at: str                 # kept as the unparsed API string
    body: str
    timestamp: Optional[int] = None  # offset into the track, in ms
    user_id: int
    user: User
    track_id: int
