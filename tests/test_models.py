from soundcloud_client.models.track import Track
from soundcloud_client.models.user import App, Comment, User
from conftest import track_payload, user_payload


def test_user_optional_profile_fields_stay_absent():
    user = User.model_validate(user_payload())
    assert user.username == "Johannes Wagener"
    assert user.country is None
    assert user.followers_count is None
    assert user.online is None


def test_user_hyphenated_wire_names():
    user = User.model_validate(user_payload(**{
        "discogs-name": "jw",
        "myspace-name": "jwms",
        "website-title": "Home",
        "followers_count": 12,
    }))
    assert user.discogs_name == "jw"
    assert user.myspace_name == "jwms"
    assert user.website_title == "Home"
    assert user.followers_count == 12


def test_comment_with_embedded_user():
    comment = Comment.model_validate({
        "id": 13685794,
        "uri": "https://api.soundcloud.com/comments/13685794",
        "created_at": "2011/04/06 15:38:23 +0000",
        "body": "great",
        "timestamp": 12000,
        "user_id": 3207,
        "user": user_payload(),
        "track_id": 13158665,
    })
    assert comment.created_at == "2011/04/06 15:38:23 +0000"
    assert comment.user.id == comment.user_id
    assert comment.timestamp == 12000


def test_app_creator_is_optional():
    app = App.model_validate({
        "id": 1,
        "uri": "https://api.soundcloud.com/apps/1",
        "permalink_url": "http://soundcloud.com/apps/a",
        "external_url": "http://example.com",
    })
    assert app.creator is None


def test_transfer_eligibility_needs_flag_and_url():
    assert not Track.model_validate(track_payload(downloadable=True)).can_download
    assert not Track.model_validate(track_payload(download_url="https://x/d")).can_download
    assert Track.model_validate(track_payload(downloadable=True, download_url="https://x/d")).can_download

    assert not Track.model_validate(track_payload(streamable=True)).can_stream
    assert Track.model_validate(track_payload(streamable=True, stream_url="https://x/s")).can_stream


def test_track_with_created_with_app():
    track = Track.model_validate(track_payload(created_with={
        "id": 124,
        "uri": "https://api.soundcloud.com/apps/124",
        "permalink_url": "http://soundcloud.com/apps/iphone",
        "external_url": "http://itunes.com/app/soundcloud",
        "creator": "SoundCloud",
    }))
    assert track.created_with.creator == "SoundCloud"
    assert track.user.permalink == "jwagener"
