import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sketchfab_mcp.client import SketchfabClient
from sketchfab_mcp.config import SketchfabConfig


class FakeSketchfab:
    """
    In-memory stand-in for the Sketchfab API, served through httpx.MockTransport.

    Routes are keyed by URL path; every request is recorded for assertions.
    """

    def __init__(self):
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def json(self, path: str, payload: Any, status: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status, json=payload)

    def status(self, path: str, status: int) -> None:
        self.routes[path] = lambda request: httpx.Response(status, json={"detail": "error"})

    def content(self, path: str, data: bytes, status: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status, content=data)

    def fail(self, path: str, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self.routes[path] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(500, text=f"unexpected request {request.url}")
        return route(request)

    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client_factory(self) -> Callable[[SketchfabConfig], SketchfabClient]:
        transport = self.transport()
        return lambda config: SketchfabClient(config, transport=transport)


def make_model(
    uid: str = "abc123",
    name: str = "Test Model",
    downloadable: bool = True,
    **extra: Any,
) -> Dict[str, Any]:
    payload = {"uid": uid, "name": name, "isDownloadable": downloadable}
    payload.update(extra)
    return payload


def realistic_model(uid: str = "abc123", name: str = "Lamp", downloadable: bool = True) -> Dict[str, Any]:
    """Payload shaped like a real /v3/models/{uid} response."""
    return {
        "uid": uid,
        "name": name,
        "description": "A desk lamp",
        "uri": f"https://api.sketchfab.com/v3/models/{uid}",
        "viewerUrl": f"https://sketchfab.com/3d-models/{uid}",
        "embedUrl": f"https://sketchfab.com/models/{uid}/embed",
        "isDownloadable": downloadable,
        "isAgeRestricted": False,
        "publishedAt": "2023-05-01T12:00:00.123456",
        "createdAt": "2023-04-30T09:15:00.000000",
        "viewCount": 1520,
        "likeCount": 87,
        "commentCount": 3,
        "animationCount": 0,
        "downloadCount": 12,
        "faceCount": 24000,
        "vertexCount": 12500,
        "price": None,
        "license": {
            "uid": "322a749bcfa841b29dff1e8a1bb74b0b",
            "label": "CC Attribution",
            "slug": "by",
            "url": "http://creativecommons.org/licenses/by/4.0/",
            "requirements": "Author must be credited.",
        },
        "user": {
            "uid": "u1",
            "username": "lampmaker",
            "displayName": "Lamp Maker",
            "profileUrl": "https://sketchfab.com/lampmaker",
            "uri": "https://api.sketchfab.com/v3/users/u1",
            "avatar": {"images": [{"url": "https://media.example.com/avatar.jpg", "width": 32, "height": 32, "size": 900}]},
        },
        "thumbnails": {
            "images": [
                {"uid": "t1", "url": "https://media.example.com/thumb_1024.jpg", "width": 1024, "height": 576, "size": 58211},
                {"uid": "t2", "url": "https://media.example.com/thumb_256.jpg", "width": 256, "height": 144, "size": 8876},
            ]
        },
        "tags": [
            {"name": "lamp", "slug": "lamp", "uri": "https://api.sketchfab.com/v3/tags/lamp"},
            {"name": "pbr", "slug": "pbr", "uri": "https://api.sketchfab.com/v3/tags/pbr"},
        ],
        "categories": [
            {
                "uid": "c1",
                "name": "Furniture & Home",
                "slug": "furniture-home",
                "uri": "https://api.sketchfab.com/v3/categories/c1",
            }
        ],
        "archives": {"glb": {"size": 1048576, "faceCount": 24000}},
    }


def realistic_search_page(*models: Dict[str, Any]) -> Dict[str, Any]:
    """Payload shaped like a real /v3/search?type=models response."""
    return {
        "results": list(models),
        "next": "https://api.sketchfab.com/v3/search?cursor=24&type=models",
        "previous": None,
        "cursors": {"next": "24", "previous": None},
    }


def make_link(url: str = "https://media.example.com/archive.zip") -> Dict[str, Any]:
    return {"url": url, "expires": 300}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep real keys and .env files out of the tests."""
    for name in (
        "SKETCHFAB_API_KEY",
        "SKETCHFAB_API_BASE",
        "SKETCHFAB_REQUEST_TIMEOUT",
        "SKETCHFAB_DOWNLOAD_TIMEOUT",
        "SKETCHFAB_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config() -> SketchfabConfig:
    return SketchfabConfig(api_key="test-api-key-123456")


@pytest.fixture
def no_key_config() -> SketchfabConfig:
    return SketchfabConfig(api_key=None)


@pytest.fixture
def fake_api() -> FakeSketchfab:
    return FakeSketchfab()
