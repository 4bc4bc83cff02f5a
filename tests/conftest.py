"""Shared fixtures for webify tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Tuple

import pytest
from PIL import Image

from webify_models.models import ImageAsset

PIL_FORMATS = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "png": "PNG",
    "gif": "GIF",
    "tga": "TGA",
    "tif": "TIFF",
    "tiff": "TIFF",
}


class RecordingProgress:
    """Progress sink that keeps every update for assertions."""

    def __init__(self) -> None:
        self.prefixes: List[str] = []
        self.messages: List[Tuple[str, str]] = []

    def set_prefix(self, prefix: str) -> None:
        self.prefixes.append(prefix)

    def set_message(self, message: str) -> None:
        prefix = self.prefixes[-1] if self.prefixes else ""
        self.messages.append((prefix, message))


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()


@pytest.fixture
def make_image() -> Callable[..., ImageAsset]:
    """Write a tiny image at ``path`` encoded to match its extension."""

    def _make(path: Path, mode: str = "RGB", color=(200, 40, 40)) -> ImageAsset:
        path.parent.mkdir(parents=True, exist_ok=True)
        extension = path.suffix[1:]
        Image.new(mode, (4, 4), color).save(path, format=PIL_FORMATS[extension.lower()])
        return ImageAsset(path=path, extension=extension)

    return _make
