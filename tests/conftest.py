import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from soundcloud_client.services.client import SoundCloudClient

CLIENT_ID = "test-client-id"


def user_payload(**overrides):
    data = {
        "id": 3207,
        "permalink": "jwagener",
        "username": "Johannes Wagener",
        "uri": "https://api.soundcloud.com/users/3207",
        "permalink_url": "http://soundcloud.com/jwagener",
        "avatar_url": "http://i1.sndcdn.com/avatars-000001552142-pbw8yd-large.jpg",
    }
    data.update(overrides)
    return data


def track_payload(**overrides):
    data = {
        "id": 13158665,
        "title": "Munchies",
        "created_at": "2011/04/06 15:37:43 +0000",
        "user_id": 3207,
        "user": user_payload(),
        "permalink": "munchies",
        "permalink_url": "http://soundcloud.com/user2835985/munchies",
        "uri": "https://api.soundcloud.com/tracks/13158665",
        "duration": 18109,
        "genre": "Electronic",
        "tag_list": "soundcloud:source=iphone-record",
        "streamable": False,
        "downloadable": False,
    }
    data.update(overrides)
    return data


def base_url(server: TestServer) -> str:
    return str(server.make_url("/")).rstrip("/")


@pytest_asyncio.fixture
async def serve():
    """Starts a local HTTP server for the given aiohttp route table."""
    servers = []

    async def _serve(routes):
        app = web.Application()
        app.add_routes(routes)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return server

    yield _serve

    for server in servers:
        await server.close()


@pytest_asyncio.fixture
async def make_client():
    """Builds clients pointed at a local server; closes them afterwards."""
    clients = []

    def _make(server, **kwargs):
        client = SoundCloudClient(CLIENT_ID, api_base=base_url(server), **kwargs)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.close()
