from __future__ import annotations

import httpx
import pytest

from adapters.cat_api import API_URL

API_HOST = httpx.URL(API_URL).host
IMAGE_URL = "https://img.example/cat.jpg"
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01" + b"\x00" * 32


def search_body(url: object = IMAGE_URL) -> bytes:
    return httpx.Response(200, json=[{"id": "abc", "url": url, "width": 10, "height": 10}]).content


class FakeCatServer:
    """Answers the search endpoint and the image host from canned replies.

    A reply is either an `httpx.Response` or an `httpx.TransportError`
    subclass, which is raised for the request.
    """

    def __init__(self, search=None, image=None) -> None:
        self.search = search if search is not None else httpx.Response(200, content=search_body())
        self.image = image if image is not None else httpx.Response(
            200, content=JPEG_BYTES, headers={"Content-Type": "image/jpeg"}
        )
        self.calls: list[httpx.URL] = []

    @property
    def search_calls(self) -> list[httpx.URL]:
        return [u for u in self.calls if u.host == API_HOST]

    @property
    def image_calls(self) -> list[httpx.URL]:
        return [u for u in self.calls if u.host != API_HOST]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request.url)
        reply = self.search if request.url.host == API_HOST else self.image
        if isinstance(reply, type) and issubclass(reply, httpx.TransportError):
            raise reply("simulated failure", request=request)
        return reply

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport())


@pytest.fixture
def make_server():
    return FakeCatServer
