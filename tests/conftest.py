"""
Shared fixtures: settings, Pixabay hit factories, and a stub upstream.
"""

import pytest
import httpx

from pixabay_mcp.config import PixabaySettings, Settings
from pixabay_mcp.services.pixabay_client import PixabayClient


@pytest.fixture
def settings():
    return Settings(pixabay=PixabaySettings(PIXABAY_API_KEY="test-key"))


@pytest.fixture
def image_hit():
    """Factory for a valid raw image hit."""
    def make(hit_id=1, **overrides):
        hit = {
            "id": hit_id,
            "pageURL": f"https://pixabay.com/photos/sunset-{hit_id}/",
            "type": "photo",
            "tags": "sunset, sky, sea",
            "previewURL": f"https://cdn.pixabay.com/photo/{hit_id}_150.jpg",
            "webformatURL": f"https://pixabay.com/get/{hit_id}_640.jpg",
            "imageWidth": 4000,
            "imageHeight": 2667,
            "user": "Jane Doe",
            "user_id": 42,
            "userImageURL": "",
            "likes": 10,
            "downloads": 250,
        }
        hit.update(overrides)
        return hit
    return make


@pytest.fixture
def video_hit():
    """Factory for a valid raw video hit."""
    def make(hit_id=1, videos=None, **overrides):
        if videos is None:
            videos = {
                name: {
                    "url": f"https://cdn.pixabay.com/video/{hit_id}_{name}.mp4",
                    "width": width,
                    "height": height,
                    "size": 1000,
                    "thumbnail": f"https://cdn.pixabay.com/video/{hit_id}_{name}.jpg",
                }
                for name, width, height in (
                    ("large", 1920, 1080),
                    ("medium", 1280, 720),
                    ("small", 960, 540),
                    ("tiny", 640, 360),
                )
            }
        hit = {
            "id": hit_id,
            "pageURL": f"https://pixabay.com/videos/waves-{hit_id}/",
            "type": "film",
            "tags": "waves, ocean",
            "duration": 21,
            "videos": videos,
            "user": "Wave Maker",
            "user_id": 7,
            "likes": 3,
            "downloads": 90,
        }
        hit.update(overrides)
        return hit
    return make


class StubUpstream:
    """Records requests and answers them with a fixed response."""

    def __init__(self, status_code=200, json=None, text=None, headers=None):
        self.status_code = status_code
        self.json = json
        self.text = text
        self.headers = headers or {}
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(
                self.status_code, text=self.text, headers=self.headers
            )
        return httpx.Response(
            self.status_code, json=self.json, headers=self.headers
        )

    def client(self, settings) -> PixabayClient:
        return PixabayClient(settings, transport=httpx.MockTransport(self))


@pytest.fixture
def stub_upstream():
    return StubUpstream
