import asyncio

import httpx
import pytest

from core.domain.errors import BadPayload, BadStatus, NetworkError
from core.domain.models import FetchFailure, ImageBytes
from core.interfaces.display import ImageSurface, StatusLabel
from core.services.cat_pipeline import CatPipeline
from core.services.controller import FetchController, status_text

from conftest import JPEG_BYTES


class RecordingImage:
    def __init__(self) -> None:
        self.shown: list[bytes] = []

    def show_image(self, data: bytes) -> None:
        self.shown.append(data)


class RecordingLabel:
    def __init__(self) -> None:
        self.texts: list[str] = []

    def set_text(self, text: str) -> None:
        self.texts.append(text)


def _run_cycle(client: httpx.AsyncClient):
    image, label = RecordingImage(), RecordingLabel()

    async def go():
        controller = FetchController(CatPipeline(client=client), image_surface=image, status_label=label)
        controller.start()
        outcome = await controller.wait()
        await controller.close()
        await client.aclose()
        return outcome

    return asyncio.run(go()), image, label


def test_success_shows_image_and_label(make_server):
    outcome, image, label = _run_cycle(make_server().client())

    assert isinstance(image, ImageSurface) and isinstance(label, StatusLabel)
    assert outcome == ImageBytes(JPEG_BYTES)
    assert image.shown == [JPEG_BYTES]
    assert label.texts == ["Success"]


@pytest.mark.parametrize(
    "kwargs, expected",
    [
        ({"search": httpx.Response(404)}, "Bad response"),
        ({"image": httpx.Response(500)}, "Bad response"),
        ({"search": httpx.Response(200, content=b"[]")}, "Bad response data"),
        ({"search": httpx.ConnectError}, "Network error"),
    ],
)
def test_failure_sets_category_label_only(make_server, kwargs, expected):
    outcome, image, label = _run_cycle(make_server(**kwargs).client())

    assert isinstance(outcome, FetchFailure)
    assert image.shown == []
    assert label.texts == [expected]


def test_status_text_hides_error_details():
    err = BadStatus(status_code=418, url="https://api.example/teapot")
    assert status_text(FetchFailure(err)) == "Bad response"
    assert status_text(FetchFailure(BadPayload("missing url"))) == "Bad response data"
    assert status_text(FetchFailure(NetworkError(OSError("reset")))) == "Network error"
    assert status_text(ImageBytes(b"")) == "Success"


def _hanging_client(started: asyncio.Event) -> httpx.AsyncClient:
    async def handler(request: httpx.Request) -> httpx.Response:
        started.set()
        await asyncio.Event().wait()
        return httpx.Response(200)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_cancel_aborts_in_flight_request():
    image, label = RecordingImage(), RecordingLabel()

    async def go():
        started = asyncio.Event()
        client = _hanging_client(started)
        controller = FetchController(CatPipeline(client=client), image_surface=image, status_label=label)
        task = controller.start()
        await started.wait()
        controller.cancel()
        outcome = await controller.wait()
        await client.aclose()
        return outcome, task

    outcome, task = asyncio.run(go())

    assert outcome is None
    assert task.cancelled()
    assert image.shown == [] and label.texts == []


def test_close_releases_subscription_and_drops_results():
    image, label = RecordingImage(), RecordingLabel()

    async def go():
        started = asyncio.Event()
        client = _hanging_client(started)
        controller = FetchController(CatPipeline(client=client), image_surface=image, status_label=label)
        controller.start()
        await started.wait()
        await controller.close()
        running = controller.running
        with pytest.raises(RuntimeError):
            controller.start()
        await client.aclose()
        return running

    assert asyncio.run(go()) is False
    assert image.shown == [] and label.texts == []


def test_only_one_fetch_at_a_time():
    async def go():
        started = asyncio.Event()
        client = _hanging_client(started)
        controller = FetchController(
            CatPipeline(client=client), image_surface=RecordingImage(), status_label=RecordingLabel()
        )
        controller.start()
        with pytest.raises(RuntimeError):
            controller.start()
        await controller.close()
        await client.aclose()

    asyncio.run(go())


def test_wait_without_start_returns_none():
    controller = FetchController(CatPipeline(), image_surface=RecordingImage(), status_label=RecordingLabel())
    assert asyncio.run(controller.wait()) is None
