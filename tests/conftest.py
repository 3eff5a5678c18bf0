"""Shared fixtures for the gitfit test suite."""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from gitfit_backend import Config, create_app
from gitfit_backend.services import EphemeralBlobStore


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def encode_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def solid_image() -> Image.Image:
    return Image.new("RGB", (640, 480), (200, 100, 50))


@pytest.fixture
def noise_image() -> Image.Image:
    rng = np.random.default_rng(1234)
    pixels = rng.integers(0, 256, size=(480, 640, 3), dtype=np.uint8)
    return Image.fromarray(pixels)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def blob_store(clock: FakeClock) -> EphemeralBlobStore:
    store = EphemeralBlobStore(clock=clock, autostart=False)
    yield store
    store.shutdown()


@pytest.fixture
def app(tmp_path, blob_store: EphemeralBlobStore):
    config = Config(static_dir=tmp_path / "dist")
    app = create_app(config, blob_store=blob_store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
