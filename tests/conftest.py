"""Shared fixtures: an HTTP client and in-memory test images."""

from __future__ import annotations

import io
from typing import Callable

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from core.config import get_settings
from main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _render(image_format: str, size: tuple[int, int], mode: str) -> bytes:
    width, height = size
    image = Image.new(mode, size)
    # Gradient so resampling and encoding have real work to do
    for x in range(0, width, max(1, width // 16)):
        for y in range(0, height, max(1, height // 16)):
            if mode == "P":
                image.putpixel((x, y), (x + y) % 256)
            elif mode == "L":
                image.putpixel((x, y), (x * 7 + y) % 256)
            else:
                color = ((x * 3) % 256, (y * 5) % 256, (x + y) % 256)
                if mode == "RGBA":
                    color = color + (200,)
                image.putpixel((x, y), color)

    buffer = io.BytesIO()
    image.save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    def factory(image_format: str = "PNG", size: tuple[int, int] = (1000, 500), mode: str = "RGB") -> bytes:
        return _render(image_format, size, mode)

    return factory
